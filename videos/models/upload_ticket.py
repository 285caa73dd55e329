"""
Upload Ticket Model

Server-issued descriptor authorizing a single streaming upload attempt.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class UploadTicket:
    """
    Immutable upload session descriptor.

    Attributes:
        uri: Session resource ("/users/123/tickets/abc")
        ticket_id: Ticket identifier
        upload_link_secure: HTTPS endpoint the file bytes are PUT to
        complete_uri: Endpoint DELETEd to finalize the upload
        user: Opaque owner reference
    """

    uri: Optional[str] = None
    ticket_id: Optional[str] = None
    upload_link_secure: Optional[str] = None
    complete_uri: Optional[str] = None
    user: Any = None

    @property
    def is_usable(self) -> bool:
        """A ticket without transfer and completion endpoints cannot be used"""
        return bool(self.upload_link_secure) and bool(self.complete_uri)

    @classmethod
    def from_dict(cls, data: dict) -> "UploadTicket":
        return cls(
            uri=data.get("uri"),
            ticket_id=data.get("ticket_id"),
            upload_link_secure=data.get("upload_link_secure"),
            complete_uri=data.get("complete_uri"),
            user=data.get("user"),
        )
