"""
Page Models

One page of a paginated listing.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from videos.models.video import VideoMetadata


@dataclass
class Paging:
    """Links to neighbouring pages (None when there is no such page)"""

    next: Optional[str] = None
    previous: Optional[str] = None
    first: Optional[str] = None
    last: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Paging":
        return cls(
            next=data.get("next") or None,
            previous=data.get("previous") or None,
            first=data.get("first") or None,
            last=data.get("last") or None,
        )


@dataclass
class Page:
    """
    One page of /me/videos.

    Created per HTTP response and discarded once its items are folded into
    the caller's list.
    """

    total: int = 0
    page: int = 1
    per_page: int = 0
    paging: Paging = field(default_factory=Paging)
    data: List[VideoMetadata] = field(default_factory=list)

    @property
    def is_last(self) -> bool:
        """True when there is no next page"""
        return self.paging.next is None

    @classmethod
    def from_dict(cls, data: dict) -> "Page":
        paging = data.get("paging")
        return cls(
            total=int(data.get("total") or 0),
            page=int(data.get("page") or 1),
            per_page=int(data.get("per_page") or 0),
            paging=Paging.from_dict(paging) if isinstance(paging, dict) else Paging(),
            data=[VideoMetadata.from_dict(item) for item in data.get("data") or []],
        )
