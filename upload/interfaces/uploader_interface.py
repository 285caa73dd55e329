"""
Uploader Interface

Abstract interface for video upload implementations.
Follows Dependency Inversion Principle - high-level code depends on this abstraction,
not on the concrete streaming upload protocol.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from upload.constants import UploadStatus
from videos.models.properties import VideoProperties
from videos.models.upload_ticket import UploadTicket
from videos.models.video import VideoMetadata


@dataclass
class UploadOutcome:
    """
    Aggregate result of an upload operation.

    Constructed empty when the upload starts, accumulated through every step,
    returned once at the end. Remote failures are collected in errors instead
    of being raised.

    Attributes:
        errors: Tolerated transport failures and the local error that aborted
            the upload, in the order they happened
        ticket: Upload ticket used (None if session creation failed)
        video: Final video metadata (present only if the sequence completed)
        video_id: Id of the created video (known after finalization)
        status: Upload status code
        file_size: Size of uploaded file in bytes
        upload_duration: Time taken to upload in seconds
    """

    errors: List[Exception] = field(default_factory=list)
    ticket: Optional[UploadTicket] = None
    video: Optional[VideoMetadata] = None
    video_id: Optional[str] = None
    status: UploadStatus = UploadStatus.FAILED
    file_size: int = 0
    upload_duration: float = 0.0

    @property
    def success(self) -> bool:
        """True if the whole sequence completed and the video was fetched"""
        return self.video is not None

    @property
    def error_message(self) -> Optional[str]:
        """Last recorded error as text, or None"""
        return str(self.errors[-1]) if self.errors else None


class UploaderInterface(ABC):
    """
    Abstract base class for video uploaders.

    Any uploader implementation must implement these methods.
    """

    @abstractmethod
    def upload_file(
        self,
        file_path: str,
        properties: Optional[VideoProperties] = None,
    ) -> UploadOutcome:
        """
        Upload a local video file.

        This is the main upload method. It should handle:
        - Session creation
        - Chunked transfer with server-verified progress
        - Finalization
        - Optional property patch and final metadata fetch

        Args:
            file_path: Path to video file to upload
            properties: Properties to set on the new video (optional)

        Returns:
            UploadOutcome with collected errors, ticket and video

        Raises:
            UploaderError: Only if the local file cannot be read

        Example:
            outcome = uploader.upload_file(
                "/path/to/video.mp4",
                VideoProperties(name="Session 2025-10-12"),
            )
        """

    @abstractmethod
    def get_upload_ticket(self) -> UploadTicket:
        """
        Open a streaming upload session without transferring anything.

        Returns:
            UploadTicket

        Raises:
            UploaderError: If the session cannot be created or decoded
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if uploader is ready to upload.

        Returns:
            True if the transport carries credentials
        """

    @abstractmethod
    def test_connection(self) -> bool:
        """
        Test connection to upload service.

        Verifies authentication and network connectivity without uploading.

        Returns:
            True if connection successful
        """

    @abstractmethod
    def get_upload_quota_remaining(self) -> Optional[int]:
        """
        Get remaining upload quota (if applicable).

        Returns:
            Free upload space in bytes, or None if unknown
        """


class UploaderError(Exception):
    """
    Exception raised for local, unrecoverable upload errors.

    Examples:
    - Video file unreadable
    - Ticket undecodable
    - Progress probe without headers
    - Missing Location after finalization
    """

    def __init__(self, message: str, status: UploadStatus = UploadStatus.FAILED):
        super().__init__(message)
        self.status = status
