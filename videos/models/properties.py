"""
Video Properties Model

Settable video properties, sent as a PATCH body after upload.

Every field maps to a literal dotted wire key ("privacy.view",
"embed.buttons.like"). Unset (None) fields are omitted from the payload
rather than sent as nulls, so a PATCH only touches what the caller set.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Optional

from videos.constants import (
    EmbedTitleDisplay,
    MpaaRating,
    MpaaReason,
    PrivacyComments,
    PrivacyEmbed,
    PrivacyView,
    SpatialProjection,
    SpatialStereoFormat,
    TvRating,
    TvReason,
    VideoLicense,
)


def _key(wire_key: str) -> Any:
    """Optional field bound to a dotted wire key"""
    return field(default=None, metadata={"key": wire_key})


@dataclass
class VideoProperties:
    """
    Properties to set on a video.

    Usage:
        properties = VideoProperties(
            name="Session 2025-10-12",
            privacy_view=PrivacyView.UNLISTED,
            embed_buttons_like=False,
        )
        properties.to_payload()
        # {"name": "Session 2025-10-12", "embed.buttons.like": False,
        #  "privacy.view": "unlisted"}
    """

    content_rating: Optional[str] = _key("content_rating")
    description: Optional[str] = _key("description")

    embed_buttons_embed: Optional[bool] = _key("embed.buttons.embed")
    embed_buttons_fullscreen: Optional[bool] = _key("embed.buttons.fullscreen")
    embed_buttons_hd: Optional[bool] = _key("embed.buttons.hd")
    embed_buttons_like: Optional[bool] = _key("embed.buttons.like")
    embed_buttons_scaling: Optional[bool] = _key("embed.buttons.scaling")  # fullscreen only
    embed_buttons_share: Optional[bool] = _key("embed.buttons.share")
    embed_buttons_watchlater: Optional[bool] = _key("embed.buttons.watchlater")
    embed_color: Optional[str] = _key("embed.color")
    embed_logos_custom_active: Optional[bool] = _key("embed.logos.custom.active")
    embed_logos_custom_link: Optional[str] = _key("embed.logos.custom.link")
    embed_logos_custom_sticky: Optional[bool] = _key("embed.logos.custom.sticky")
    embed_logos_vimeo: Optional[bool] = _key("embed.logos.vimeo")
    embed_playbar: Optional[bool] = _key("embed.playbar")
    embed_title_name: Optional[EmbedTitleDisplay] = _key("embed.title.name")
    embed_title_owner: Optional[EmbedTitleDisplay] = _key("embed.title.owner")
    embed_title_portrait: Optional[EmbedTitleDisplay] = _key("embed.title.portrait")
    embed_volume: Optional[bool] = _key("embed.volume")

    external_links_imdb: Optional[str] = _key("external_links.imdb")
    external_links_rotten_tomatoes: Optional[str] = _key("external_links.rotten_tomatoes")

    license: Optional[VideoLicense] = _key("license")
    locale: Optional[str] = _key("locale")
    name: Optional[str] = _key("name")
    password: Optional[str] = _key("password")  # required with PrivacyView.PASSWORD

    privacy_add: Optional[bool] = _key("privacy.add")
    privacy_comments: Optional[PrivacyComments] = _key("privacy.comments")
    privacy_download: Optional[bool] = _key("privacy.download")
    privacy_embed: Optional[PrivacyEmbed] = _key("privacy.embed")
    privacy_view: Optional[PrivacyView] = _key("privacy.view")

    ratings_mpaa_rating: Optional[MpaaRating] = _key("ratings.mpaa.rating")
    ratings_mpaa_reason: Optional[MpaaReason] = _key("ratings.mpaa.reason")
    ratings_tv_rating: Optional[TvRating] = _key("ratings.tv.rating")
    ratings_tv_reason: Optional[TvReason] = _key("ratings.tv.reason")

    review_link: Optional[bool] = _key("review_link")

    spatial_director_timeline: Optional[str] = _key("spatial.director_timeline")
    spatial_field_of_view: Optional[str] = _key("spatial.field_of_view")  # 30-90
    spatial_projection: Optional[SpatialProjection] = _key("spatial.projection")
    spatial_stereo_format: Optional[SpatialStereoFormat] = _key("spatial.stereo_format")

    def to_payload(self) -> Dict[str, Any]:
        """
        Serialize the explicitly set fields.

        Returns:
            Dict keyed by dotted wire key, enum members replaced by their values
        """
        payload: Dict[str, Any] = {}

        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            payload[item.metadata["key"]] = value

        return payload

    @property
    def is_empty(self) -> bool:
        """True when no property is set"""
        return not self.to_payload()
