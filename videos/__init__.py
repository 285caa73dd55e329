"""
Videos Module

Video metadata models, JSON mapping, and listing/fetch/patch operations.

Public API:
    - VideoController: List, fetch and update videos
    - VideoMetadata: Video resource
    - VideoProperties: Settable properties (dotted wire keys)
    - UploadTicket: Upload session descriptor
    - VideoMappingError: Undecodable response body

Usage:
    from videos import VideoController

    controller = VideoController()
    videos = controller.list_videos()
"""

from videos.controllers.video_controller import VideoController
from videos.mapper import VideoMappingError
from videos.models import Page, UploadTicket, VideoMetadata, VideoProperties

# Public API
__all__ = [
    "Page",
    "UploadTicket",
    "VideoController",
    "VideoMappingError",
    "VideoMetadata",
    "VideoProperties",
]
