"""
Mock Transport Implementation

Scripted transport for testing without network access.
Records every request it sees so tests can verify exactly which requests
were made.
"""

import json
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, MutableMapping, Optional, Union

from requests.structures import CaseInsensitiveDict

from transport.constants import STATUS_NO_RESPONSE, HttpMethod
from transport.interfaces.transport_interface import (
    TransportError,
    TransportInterface,
    TransportResponse,
)


@dataclass
class RecordedRequest:
    """One request seen by MockTransport"""

    method: HttpMethod
    target: str
    json_payload: Optional[Any] = None
    raw_bytes: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


class MockTransport(TransportInterface):
    """
    Mock HTTP transport for testing.

    Responses are served in FIFO order from a script, or produced by a
    handler callable when one is given. Useful for:
    - Unit tests of the upload protocol
    - Development without an access token
    - CI/CD pipelines
    """

    def __init__(
        self,
        handler: Optional[Callable[[RecordedRequest], TransportResponse]] = None,
        authenticated: bool = True,
    ):
        """
        Initialize mock transport.

        Args:
            handler: Called for every request instead of the script (optional)
            authenticated: Value reported by is_authenticated()

        Example:
            transport = MockTransport()
            transport.add_response(201, body={"uri": "/users/1/tickets/abc", ...})
        """
        self.logger = logging.getLogger(__name__)
        self.handler = handler
        self.authenticated = authenticated

        self._responses: Deque[TransportResponse] = deque()

        # Track requests for testing
        self.request_log: List[RecordedRequest] = []

        self.logger.info("[MOCK] Transport initialized (simulation mode)")

    def add_response(
        self,
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        body: Union[str, Dict[str, Any], List[Any]] = "",
        error_message: Optional[str] = None,
    ) -> None:
        """
        Queue the next response.

        A status_code of 0 simulates a request that got no response at all
        (headers None). Non-2xx codes get a TransportError automatically.

        Args:
            status_code: HTTP status to return
            headers: Response headers
            body: Body text, or an object serialized to JSON
            error_message: Force an error on an otherwise successful response
        """
        self._responses.append(
            self.make_response(status_code, headers, body, error_message),
        )

    @staticmethod
    def make_response(
        status_code: int = 200,
        headers: Optional[Dict[str, str]] = None,
        body: Union[str, Dict[str, Any], List[Any]] = "",
        error_message: Optional[str] = None,
    ) -> TransportResponse:
        """Build a TransportResponse the way add_response() would"""
        if not isinstance(body, str):
            body = json.dumps(body)

        if status_code == STATUS_NO_RESPONSE:
            return TransportResponse(
                body=body,
                error=TransportError(error_message or "[MOCK] No response"),
            )

        response = TransportResponse(
            status_code=status_code,
            headers=CaseInsensitiveDict(headers or {}),
            body=body,
        )

        if error_message or not 200 <= status_code < 300:
            response.error = TransportError(
                error_message or f"[MOCK] HTTP {status_code}",
                status_code=status_code,
            )

        return response

    def exchange(
        self,
        target: str,
        method: HttpMethod = HttpMethod.GET,
        json_payload: Optional[Any] = None,
        raw_bytes: Optional[bytes] = None,
        extra_headers: Optional[MutableMapping[str, str]] = None,
    ) -> TransportResponse:
        """Record the request and return the scripted response"""
        request = RecordedRequest(
            method=method,
            target=target,
            json_payload=json_payload,
            raw_bytes=raw_bytes,
            headers=dict(extra_headers or {}),
        )
        self.request_log.append(request)
        self.logger.debug(f"[MOCK] {method.value} {target}")

        if self.handler is not None:
            return self.handler(request)

        if not self._responses:
            return TransportResponse(
                error=TransportError(
                    f"[MOCK] No scripted response for {method.value} {target}",
                    method=method.value,
                    target=target,
                ),
            )

        return self._responses.popleft()

    def is_authenticated(self) -> bool:
        return self.authenticated

    # =========================================================================
    # TESTING HELPER METHODS
    # =========================================================================

    @property
    def pending_responses(self) -> int:
        """Number of scripted responses not yet served"""
        return len(self._responses)

    def get_last_request(self) -> Optional[RecordedRequest]:
        """
        Get most recent request.

        Returns:
            Last request, or None
        """
        return self.request_log[-1] if self.request_log else None

    def get_requests(self, method: HttpMethod) -> List[RecordedRequest]:
        """Get all recorded requests made with the given method"""
        return [request for request in self.request_log if request.method == method]

    def clear_history(self) -> None:
        """Clear recorded requests and any remaining scripted responses"""
        self.request_log.clear()
        self._responses.clear()
        self.logger.debug("[MOCK] Transport history cleared")
