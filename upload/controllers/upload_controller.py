"""
Upload Controller

High-level coordinator for video uploads.
Simplifies upload operations for scripts and services.

- Clean, simple API
- Handles uploader initialization and default properties
- Logs one line per finished upload
"""

import dataclasses
import logging
from typing import Any, Dict, Optional

from upload.factory import create_uploader
from upload.interfaces.uploader_interface import UploaderInterface, UploadOutcome
from videos.models.properties import VideoProperties


class UploadController:
    """
    High-level video upload controller.

    This class:
    - Provides simple upload API
    - Merges per-upload title/description into default properties
    - Handles uploader initialization
    - Provides connection testing

    Usage:
        controller = UploadController()

        outcome = controller.upload_video(
            video_path="/path/to/video.mp4",
            name="Session 2025-10-12",
        )

        if outcome.success:
            print(f"Uploaded: {outcome.video_id}")
    """

    def __init__(
        self,
        uploader: Optional[UploaderInterface] = None,
        default_properties: Optional[VideoProperties] = None,
    ):
        """
        Initialize upload controller.

        Args:
            uploader: UploaderInterface implementation, or None to auto-create
            default_properties: Properties applied to every upload (optional)

        Example:
            # Normal usage - auto-creates from .env
            controller = UploadController()

            # Custom uploader (testing)
            uploader = VimeoUploader(transport=MockTransport())
            controller = UploadController(uploader=uploader)
        """
        self.logger = logging.getLogger(__name__)

        self.uploader = uploader or create_uploader()
        self.default_properties = default_properties

        # Verify uploader is ready
        if not self.uploader.is_available():
            self.logger.warning(
                "Uploader initialized but not available. "
                "Check VIMEO_ACCESS_TOKEN.",
            )

        self.logger.info("Upload Controller initialized")

    def upload_video(
        self,
        video_path: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        properties: Optional[VideoProperties] = None,
    ) -> UploadOutcome:
        """
        Upload a video, applying default and per-upload properties.

        Precedence: name/description arguments, then properties, then
        default_properties.

        Args:
            video_path: Path to video file
            name: Video title (optional)
            description: Video description (optional)
            properties: Properties for this upload (optional)

        Returns:
            UploadOutcome

        Example:
            outcome = controller.upload_video(
                "/recordings/2025-10-12_18-30-45.mp4",
                name="Session 2025-10-12 18:30",
            )
            for error in outcome.errors:
                logger.warning(error)
        """
        merged = self._merge_properties(properties, name, description)

        self.logger.info(f"Uploading video: {video_path}")
        if merged is not None:
            self.logger.debug(f"Properties: {merged.to_payload()}")

        outcome = self.uploader.upload_file(video_path, merged)

        if outcome.success:
            self.logger.info(
                f"✅ Upload successful: {outcome.video_id} "
                f"({outcome.upload_duration:.1f}s, "
                f"{outcome.file_size / (1024 * 1024):.1f} MB)",
            )
        else:
            self.logger.error(
                f"❌ Upload failed: {outcome.error_message} "
                f"(status: {outcome.status.value})",
            )

        return outcome

    def _merge_properties(
        self,
        properties: Optional[VideoProperties],
        name: Optional[str],
        description: Optional[str],
    ) -> Optional[VideoProperties]:
        """
        Combine default, per-upload and name/description properties.

        Returns:
            Merged properties, or None when nothing is set
        """
        merged = VideoProperties()

        for layer in (self.default_properties, properties):
            if layer is None:
                continue
            changes = {
                item.name: getattr(layer, item.name)
                for item in dataclasses.fields(layer)
                if getattr(layer, item.name) is not None
            }
            merged = dataclasses.replace(merged, **changes)

        if name is not None:
            merged.name = name
        if description is not None:
            merged.description = description

        return None if merged.is_empty else merged

    def test_connection(self) -> bool:
        """
        Test connection to the Vimeo API.

        Returns:
            True if connection successful
        """
        self.logger.info("Testing Vimeo connection...")

        result = self.uploader.test_connection()

        if result:
            self.logger.info("✅ Connection test passed")
        else:
            self.logger.warning("❌ Connection test failed")

        return result

    def is_ready(self) -> bool:
        """
        Check if uploader is ready to upload.

        Returns:
            True if authenticated and ready
        """
        return self.uploader.is_available()

    def get_status(self) -> Dict[str, Any]:
        """
        Get current controller status.

        Returns:
            Dictionary with status information

        Example:
            status = controller.get_status()
            print(f"Ready: {status['ready']}")
        """
        return {
            "ready": self.is_ready(),
            "default_properties": (
                self.default_properties.to_payload()
                if self.default_properties
                else {}
            ),
            "uploader_type": type(self.uploader).__name__,
        }

    def set_default_properties(self, properties: Optional[VideoProperties]) -> None:
        """
        Change default properties for future uploads.

        Args:
            properties: New defaults, or None to clear
        """
        self.default_properties = properties
        self.logger.info(
            f"Default properties set to: "
            f"{properties.to_payload() if properties else {}}",
        )
