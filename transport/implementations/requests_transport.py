"""
Requests Transport Implementation

Concrete implementation of TransportInterface on top of requests.
Handles base URL resolution, default headers and bearer authentication.
"""

import json
import logging
from typing import Any, MutableMapping, Optional, Tuple

import requests
from requests.structures import CaseInsensitiveDict

from config.settings import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_TIMEOUT,
    VIMEO_API_ACCEPT,
    VIMEO_API_BASE_URL,
    VIMEO_USER_AGENT,
)
from transport.constants import (
    CONTENT_TYPE_JSON,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    HttpMethod,
)
from transport.interfaces.transport_interface import (
    TransportError,
    TransportInterface,
    TransportResponse,
)

# Longest slice of an error body copied into a TransportError message
ERROR_BODY_PREVIEW = 200


def _drop_none(payload: Any) -> Any:
    """Remove None values from (nested) dicts before serialization"""
    if isinstance(payload, dict):
        return {
            key: _drop_none(value)
            for key, value in payload.items()
            if value is not None
        }
    if isinstance(payload, list):
        return [_drop_none(item) for item in payload]
    return payload


class RequestsTransport(TransportInterface):
    """
    HTTP transport using a requests.Session.

    Features:
    - Relative targets resolved against the API base URL
    - Bearer token attached only for API-host targets (never to upload hosts)
    - Versioned Accept header and User-Agent on every request
    - Network failures and non-2xx responses returned as data
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = VIMEO_API_BASE_URL,
        timeout: Tuple[float, float] = (HTTP_CONNECT_TIMEOUT, HTTP_TIMEOUT),
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize requests transport.

        Args:
            access_token: Pre-obtained bearer token
            base_url: API base URL for relative targets
            timeout: (connect, read) timeout per request in seconds
            session: Session to use (default: a new requests.Session)

        Example:
            transport = RequestsTransport(access_token=os.environ["VIMEO_ACCESS_TOKEN"])
        """
        self.logger = logging.getLogger(__name__)

        self.access_token = access_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        self.logger.info(f"Requests Transport initialized ({self.base_url})")

    def resolve_target(self, target: str) -> str:
        """
        Turn a request target into an absolute URL.

        Args:
            target: Absolute URL or API path ("/me/videos")

        Returns:
            Absolute URL
        """
        if target.startswith("http://") or target.startswith("https://"):
            return target
        if not target.startswith("/"):
            target = "/" + target
        return self.base_url + target

    def _is_api_target(self, url: str) -> bool:
        return url == self.base_url or url.startswith(self.base_url + "/")

    def _build_headers(
        self,
        url: str,
        extra_headers: Optional[MutableMapping[str, str]],
    ) -> CaseInsensitiveDict:
        headers = CaseInsensitiveDict(
            {
                HEADER_ACCEPT: VIMEO_API_ACCEPT,
                HEADER_USER_AGENT: VIMEO_USER_AGENT,
            }
        )

        if self.access_token and self._is_api_target(url):
            headers[HEADER_AUTHORIZATION] = f"Bearer {self.access_token}"

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def exchange(
        self,
        target: str,
        method: HttpMethod = HttpMethod.GET,
        json_payload: Optional[Any] = None,
        raw_bytes: Optional[bytes] = None,
        extra_headers: Optional[MutableMapping[str, str]] = None,
    ) -> TransportResponse:
        """
        Perform one HTTP exchange with requests.

        JSON payloads take precedence over raw bytes. Requests without a body
        are sent with an explicit zero Content-Length. Redirects are not
        followed, so a 308 progress answer reaches the caller with its Range.
        """
        url = self.resolve_target(target)
        headers = self._build_headers(url, extra_headers)

        if json_payload is not None:
            if isinstance(json_payload, str):
                body = json_payload.encode("utf-8")
            else:
                body = json.dumps(_drop_none(json_payload)).encode("utf-8")
            headers[HEADER_CONTENT_TYPE] = CONTENT_TYPE_JSON
        elif raw_bytes is not None:
            body = raw_bytes
        else:
            body = b""

        self.logger.debug(f"{method.value} {url} ({len(body)} bytes)")

        try:
            response = self.session.request(
                method.value,
                url,
                data=body,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )

        except requests.RequestException as e:
            self.logger.warning(f"{method.value} {url} failed: {e}")
            return TransportResponse(
                error=TransportError(
                    f"{method.value} {url} failed: {e}",
                    method=method.value,
                    target=url,
                ),
            )

        result = TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            body=response.text or "",
        )

        if not 200 <= response.status_code < 300:
            preview = result.body[:ERROR_BODY_PREVIEW]
            result.error = TransportError(
                f"{method.value} {url} returned HTTP {response.status_code} "
                f"{response.reason}: {preview}",
                status_code=response.status_code,
                method=method.value,
                target=url,
            )
            self.logger.debug(f"HTTP {response.status_code} from {url}")

        return result

    def is_authenticated(self) -> bool:
        """True if a bearer token was supplied"""
        return bool(self.access_token)
