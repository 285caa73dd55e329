"""
Upload Module

Resumable streaming video upload to Vimeo.

Public API:
    - UploadController: High-level upload coordinator
    - VimeoUploader: Streaming upload protocol
    - UploadOutcome: Upload operation result (errors collected as data)
    - UploadStatus: Status codes
    - UploaderError: Local, unrecoverable upload error
    - create_uploader: Factory function

Usage:
    from upload import UploadController

    controller = UploadController()
    outcome = controller.upload_video(
        video_path="/path/to/video.mp4",
        name="Session 2025-10-12",
    )
"""

from upload.constants import UploadStatus
from upload.controllers.upload_controller import UploadController
from upload.factory import UploaderFactory, create_uploader
from upload.implementations.vimeo_uploader import VimeoUploader
from upload.interfaces.uploader_interface import UploaderError, UploadOutcome

# Public API
__all__ = [
    "UploadController",
    "UploadOutcome",
    "UploadStatus",
    "UploaderError",
    "UploaderFactory",
    "VimeoUploader",
    "create_uploader",
]
