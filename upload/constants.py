"""
Upload Constants

Endpoints, wire formats and status codes of the streaming upload protocol.
Tunable values (timeouts, retry policy) live in config/settings.py and can be
overridden through upload/config.py.
"""

from enum import Enum

from videos.constants import MY_VIDEOS_PATH

# =============================================================================
# ENDPOINTS
# =============================================================================

# POST here to open a streaming upload session (returns a ticket)
CREATE_SESSION_PATH = MY_VIDEOS_PATH
CREATE_SESSION_PAYLOAD = {"type": "streaming"}

# Authenticated user, used for connection test and quota
ME_PATH = "/me"

# =============================================================================
# WIRE FORMATS
# =============================================================================

# Chunk write: bytes {start}-{end}/{end}, end == total file length
CONTENT_RANGE_CHUNK = "bytes {start}-{end}/{end}"

# Progress probe: empty body, server answers with a Range header
CONTENT_RANGE_PROBE = "bytes */*"

# =============================================================================
# UPLOAD STATUS
# =============================================================================


class UploadStatus(Enum):
    """Upload operation status codes"""

    SUCCESS = "success"  # Video fetched, no errors recorded
    PARTIAL = "partial"  # Video fetched, tolerated errors recorded
    FAILED = "failed"  # Finalized but final metadata unavailable
    SESSION_FAILED = "session_failed"  # Create-session call rejected
    INVALID_TICKET = "invalid_ticket"  # Ticket undecodable or unusable
    PROGRESS_UNAVAILABLE = "progress_unavailable"  # Probe returned no headers
    STALLED = "stalled"  # Retry bound exhausted without progress
    TIMEOUT = "timeout"  # Overall upload deadline exceeded
    FINALIZE_FAILED = "finalize_failed"  # No Location after completion
    INVALID_FILE = "invalid_file"  # Local file unreadable


# =============================================================================
# PROGRESS DECISIONS
# =============================================================================


class ProgressDecision(Enum):
    """What the transfer loop does after interpreting a probe"""

    PROGRESS = "progress"  # Offset advanced, send the rest
    COMPLETE = "complete"  # Server holds the whole file
    NO_PROGRESS_RETRY = "no_progress_retry"  # Back off and re-send
    ABORT = "abort"  # Give up on this upload
