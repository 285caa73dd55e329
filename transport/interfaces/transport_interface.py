"""
Transport Interface

Abstract interface for a single HTTP exchange with the video platform.
High-level code (uploader, video controller) depends on this abstraction,
not on a concrete HTTP library.

The contract is "errors as data": an exchange never raises for remote
problems. Non-2xx responses still carry their headers and body so callers can
inspect server state on error responses.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping, Optional

from transport.constants import STATUS_NO_RESPONSE, HttpMethod


class TransportError(Exception):
    """
    A failed HTTP exchange.

    Examples:
    - Connection refused / DNS failure / timeout (status_code == 0)
    - Non-2xx response from the API
    - Upload session expired on the server side
    """

    def __init__(
        self,
        message: str,
        status_code: int = STATUS_NO_RESPONSE,
        method: Optional[str] = None,
        target: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.target = target


@dataclass
class TransportResponse:
    """
    Result of one HTTP exchange.

    Attributes:
        status_code: HTTP status, or 0 if no response was received
        headers: Case-insensitive response headers, None if no response
        body: Response body text ("" when empty)
        error: TransportError when the exchange was not a success
    """

    status_code: int = STATUS_NO_RESPONSE
    headers: Optional[Mapping[str, str]] = None
    body: str = ""
    error: Optional[TransportError] = None

    @property
    def ok(self) -> bool:
        """True for a 2xx response with no transport error"""
        return self.error is None and 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Get a response header (case-insensitive), or None"""
        if self.headers is None:
            return None
        return self.headers.get(name)


class TransportInterface(ABC):
    """
    Abstract base class for HTTP transports.

    Any transport implementation (requests, in-memory mock, etc.)
    must implement exchange().
    """

    @abstractmethod
    def exchange(
        self,
        target: str,
        method: HttpMethod = HttpMethod.GET,
        json_payload: Optional[Any] = None,
        raw_bytes: Optional[bytes] = None,
        extra_headers: Optional[MutableMapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Perform a single HTTP exchange.

        Args:
            target: Absolute URL, or a path relative to the API base URL
            method: HTTP method
            json_payload: Object serialized as the JSON body (or a JSON string)
            raw_bytes: Raw body, used when json_payload is None
            extra_headers: Headers overriding the transport defaults

        Returns:
            TransportResponse; never raises for network or HTTP failures

        Example:
            response = transport.exchange(
                "/me/videos",
                HttpMethod.POST,
                json_payload={"type": "streaming"},
            )
            if response.status_code != 201:
                errors.append(response.error)
        """

    @abstractmethod
    def is_authenticated(self) -> bool:
        """
        Check if the transport has a bearer token to attach.

        Returns:
            True if API requests will be authenticated
        """
