"""
Transport Constants

HTTP methods, header names and status codes used when talking to the API.
Timeouts and base URL live in config/settings.py.
"""

from enum import Enum

# =============================================================================
# HTTP METHODS
# =============================================================================


class HttpMethod(Enum):
    """HTTP methods the transport supports"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# HEADERS
# =============================================================================

HEADER_AUTHORIZATION = "Authorization"
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_RANGE = "Content-Range"
HEADER_RANGE = "Range"
HEADER_LOCATION = "Location"

CONTENT_TYPE_JSON = "application/json"

# =============================================================================
# STATUS CODES
# =============================================================================

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204

# Normal answer to an upload progress probe ("send the rest")
HTTP_RESUME_INCOMPLETE = 308

# Used on TransportResponse when no HTTP response was received at all
STATUS_NO_RESPONSE = 0
