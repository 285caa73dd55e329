"""
Models Package

Data classes for tickets, video metadata, pages and settable properties.
"""

from videos.models.page import Page, Paging
from videos.models.properties import VideoProperties
from videos.models.upload_ticket import UploadTicket
from videos.models.video import (
    PictureSize,
    VideoEmbed,
    VideoMetadata,
    VideoPictures,
    VideoPrivacy,
)

__all__ = [
    "Page",
    "Paging",
    "PictureSize",
    "UploadTicket",
    "VideoEmbed",
    "VideoMetadata",
    "VideoPictures",
    "VideoPrivacy",
    "VideoProperties",
]
