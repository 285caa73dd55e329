"""
Interfaces Package

Abstract interfaces for transport implementations.
"""

from transport.interfaces.transport_interface import (
    TransportError,
    TransportInterface,
    TransportResponse,
)

__all__ = [
    "TransportInterface",
    "TransportResponse",
    "TransportError",
]
