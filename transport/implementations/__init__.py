"""
Implementations Package

Concrete transport implementations.
"""

from transport.implementations.mock_transport import MockTransport, RecordedRequest
from transport.implementations.requests_transport import RequestsTransport

__all__ = [
    "MockTransport",
    "RecordedRequest",
    "RequestsTransport",
]
