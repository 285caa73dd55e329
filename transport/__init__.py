"""
Transport Module

HTTP exchange layer for the Vimeo REST API.

Public API:
    - TransportInterface: Abstract single-exchange transport
    - TransportResponse: Result of one exchange (errors as data)
    - TransportError: Failed exchange
    - HttpMethod: Supported methods
    - create_transport: Factory function

Usage:
    from transport import HttpMethod, create_transport

    transport = create_transport()
    response = transport.exchange("/me/videos/12345", HttpMethod.GET)
    if response.ok:
        print(response.body)
"""

from transport.constants import HttpMethod
from transport.factory import TransportFactory, create_transport
from transport.interfaces.transport_interface import (
    TransportError,
    TransportInterface,
    TransportResponse,
)

# Public API
__all__ = [
    "HttpMethod",
    "TransportError",
    "TransportFactory",
    "TransportInterface",
    "TransportResponse",
    "create_transport",
]
