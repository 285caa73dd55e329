"""
Video Controller

High-level coordinator for video metadata: paginated listing, single fetch
and property patch.

Unlike the upload path, these calls have no partial-failure tolerance:
transport and decode failures are raised to the caller.
"""

import logging
from typing import Iterator, List, Optional
from urllib.parse import urlencode

from config.settings import (
    VIDEO_LIST_DIRECTION,
    VIDEO_LIST_PAGE_SIZE,
    VIDEO_LIST_SORT,
)
from transport.constants import HttpMethod
from transport.factory import create_transport
from transport.interfaces.transport_interface import (
    TransportInterface,
    TransportResponse,
)
from videos.constants import MY_VIDEOS_PATH, VIDEOS_PATH
from videos.mapper import parse_page, parse_video
from videos.models.page import Page
from videos.models.properties import VideoProperties
from videos.models.video import VideoMetadata


class VideoController:
    """
    Video metadata controller.

    Usage:
        controller = VideoController()

        for video in controller.list_videos(query="session"):
            print(video.video_id, video.name)

        video = controller.get_video("123456789")
    """

    def __init__(self, transport: Optional[TransportInterface] = None):
        """
        Initialize video controller.

        Args:
            transport: TransportInterface implementation, or None to auto-create
        """
        self.logger = logging.getLogger(__name__)
        self.transport = transport or create_transport()

    @staticmethod
    def _listing_target(query: Optional[str] = None) -> str:
        params = [
            ("direction", VIDEO_LIST_DIRECTION),
            ("per_page", VIDEO_LIST_PAGE_SIZE),
            ("sort", VIDEO_LIST_SORT),
        ]
        if query is not None:
            params.append(("query", query))
        return f"{MY_VIDEOS_PATH}?{urlencode(params)}"

    @staticmethod
    def _raise_for_error(response: TransportResponse) -> None:
        if not response.ok:
            raise response.error or RuntimeError(
                f"Unexpected HTTP {response.status_code}",
            )

    def iter_pages(self, query: Optional[str] = None) -> Iterator[Page]:
        """
        Walk the listing page by page, following "next" links.

        Args:
            query: Filter string (optional)

        Yields:
            Page objects in server order

        Raises:
            TransportError: If a page request fails
            VideoMappingError: If a page body cannot be decoded
        """
        target: Optional[str] = self._listing_target(query)

        while target is not None:
            response = self.transport.exchange(target, HttpMethod.GET)
            self._raise_for_error(response)

            page = parse_page(response.body)
            self.logger.debug(
                f"Fetched page {page.page} ({len(page.data)} of {page.total} videos)",
            )

            yield page
            target = page.paging.next

    def list_videos(self, query: Optional[str] = None) -> List[VideoMetadata]:
        """
        Get metadata of all videos, newest first.

        No deduplication: if the collection changes between page fetches,
        items may be repeated or skipped.

        Args:
            query: Filter string (optional)

        Returns:
            All videos, in page order then within-page order

        Example:
            videos = controller.list_videos(query="boxing")
            print(f"{len(videos)} videos")
        """
        videos: List[VideoMetadata] = []

        for page in self.iter_pages(query):
            videos.extend(page.data)

        self.logger.info(f"Listed {len(videos)} videos")
        return videos

    def get_video(self, video_id: str) -> VideoMetadata:
        """
        Get metadata for a single video.

        Args:
            video_id: Numeric video id

        Returns:
            VideoMetadata

        Raises:
            TransportError: If the request fails
            VideoMappingError: If the body cannot be decoded
        """
        response = self.transport.exchange(
            f"{MY_VIDEOS_PATH}/{video_id}",
            HttpMethod.GET,
        )
        self._raise_for_error(response)
        return parse_video(response.body)

    def update_video(self, video_id: str, properties: VideoProperties) -> None:
        """
        Patch properties of an existing video.

        Args:
            video_id: Numeric video id
            properties: Fields to set (unset fields are left untouched)

        Raises:
            TransportError: If the request fails
        """
        payload = properties.to_payload()

        if not payload:
            self.logger.debug(f"No properties to update on video {video_id}")
            return

        response = self.transport.exchange(
            f"{VIDEOS_PATH}/{video_id}",
            HttpMethod.PATCH,
            json_payload=payload,
        )
        self._raise_for_error(response)

        self.logger.info(
            f"Updated video {video_id}: {', '.join(sorted(payload))}",
        )
