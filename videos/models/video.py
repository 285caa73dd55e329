"""
Video Metadata Models

Data classes mirroring the video resource returned by the API.
Read-mostly: built from JSON, never sent back.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp ("2017-01-01T10:00:00+00:00")"""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass
class VideoPrivacy:
    """Privacy settings of a video"""

    view: Optional[str] = None
    embed: Optional[str] = None
    download: bool = False
    add: bool = False
    comments: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "VideoPrivacy":
        return cls(
            view=data.get("view"),
            embed=data.get("embed"),
            download=bool(data.get("download", False)),
            add=bool(data.get("add", False)),
            comments=data.get("comments"),
        )


@dataclass
class VideoEmbed:
    """
    Embed player settings.

    buttons/logos/title are kept as the raw nested objects; only the flags
    callers commonly read are lifted to attributes.
    """

    uri: Optional[str] = None
    html: Optional[str] = None
    color: Optional[str] = None
    playbar: bool = True
    volume: bool = True
    buttons: Dict[str, bool] = field(default_factory=dict)
    logos: Dict[str, Any] = field(default_factory=dict)
    title: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "VideoEmbed":
        return cls(
            uri=data.get("uri"),
            html=data.get("html"),
            color=data.get("color"),
            playbar=bool(data.get("playbar", True)),
            volume=bool(data.get("volume", True)),
            buttons=_as_dict(data.get("buttons")),
            logos=_as_dict(data.get("logos")),
            title=_as_dict(data.get("title")),
        )


@dataclass
class PictureSize:
    """One rendition of the video thumbnail"""

    width: int
    height: int
    link: Optional[str] = None
    link_with_play_button: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PictureSize":
        return cls(
            width=int(data.get("width") or 0),
            height=int(data.get("height") or 0),
            link=data.get("link"),
            link_with_play_button=data.get("link_with_play_button"),
        )


@dataclass
class VideoPictures:
    """Thumbnail set of a video"""

    uri: Optional[str] = None
    active: bool = False
    type: Optional[str] = None
    resource_key: Optional[str] = None
    sizes: List[PictureSize] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "VideoPictures":
        return cls(
            uri=data.get("uri"),
            active=bool(data.get("active", False)),
            type=data.get("type"),
            resource_key=data.get("resource_key"),
            sizes=[PictureSize.from_dict(size) for size in data.get("sizes") or []],
        )

    @property
    def largest(self) -> Optional[PictureSize]:
        """Largest thumbnail by width, or None"""
        if not self.sizes:
            return None
        return max(self.sizes, key=lambda size: size.width)


@dataclass
class VideoMetadata:
    """
    Represents a video resource on the platform.

    Only uri is required; everything else may be absent depending on the
    fields the API chose to return.
    """

    uri: str
    name: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    duration: int = 0  # seconds
    width: int = 0
    height: int = 0
    language: Optional[str] = None
    created_time: Optional[datetime] = None
    modified_time: Optional[datetime] = None
    release_time: Optional[datetime] = None
    content_rating: List[str] = field(default_factory=list)
    license: Optional[str] = None
    privacy: Optional[VideoPrivacy] = None
    embed: Optional[VideoEmbed] = None
    pictures: Optional[VideoPictures] = None
    tags: List[str] = field(default_factory=list)
    plays: int = 0
    status: Optional[str] = None  # e.g. "available", "transcoding"
    resource_key: Optional[str] = None
    user: Optional[Dict[str, Any]] = None

    @property
    def video_id(self) -> str:
        """Numeric id, the trailing segment of the uri ("/videos/12345")"""
        return self.uri.rstrip("/").rsplit("/", 1)[-1]

    @property
    def is_available(self) -> bool:
        """Check if transcoding finished and the video can be played"""
        return self.status == "available"

    @classmethod
    def from_dict(cls, data: dict) -> "VideoMetadata":
        """Create VideoMetadata from a decoded API object"""
        privacy = data.get("privacy")
        embed = data.get("embed")
        pictures = data.get("pictures")

        # Tags come back as objects ({"name": "...", "tag": "..."})
        tags = []
        for tag in data.get("tags") or []:
            if isinstance(tag, dict):
                tags.append(tag.get("name") or tag.get("tag") or "")
            else:
                tags.append(str(tag))

        return cls(
            uri=data["uri"],
            name=data.get("name"),
            description=data.get("description"),
            link=data.get("link"),
            duration=int(data.get("duration") or 0),
            width=int(data.get("width") or 0),
            height=int(data.get("height") or 0),
            language=data.get("language"),
            created_time=_parse_time(data.get("created_time")),
            modified_time=_parse_time(data.get("modified_time")),
            release_time=_parse_time(data.get("release_time")),
            content_rating=list(data.get("content_rating") or []),
            license=data.get("license"),
            privacy=VideoPrivacy.from_dict(privacy) if isinstance(privacy, dict) else None,
            embed=VideoEmbed.from_dict(embed) if isinstance(embed, dict) else None,
            pictures=(
                VideoPictures.from_dict(pictures) if isinstance(pictures, dict) else None
            ),
            tags=tags,
            plays=int(_as_dict(data.get("stats")).get("plays") or 0),
            status=data.get("status"),
            resource_key=data.get("resource_key"),
            user=data.get("user") if isinstance(data.get("user"), dict) else None,
        )

    def __repr__(self) -> str:
        """Human-readable representation"""
        return (
            f"VideoMetadata(uri='{self.uri}', "
            f"name={self.name!r}, "
            f"status={self.status})"
        )
