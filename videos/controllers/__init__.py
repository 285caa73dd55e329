"""
Controllers Package

High-level video metadata coordinators.
"""

from videos.controllers.video_controller import VideoController

__all__ = [
    "VideoController",
]
