"""
Metadata Mapper

Converts API response bodies (JSON text) into model objects.
All decode and shape problems surface as VideoMappingError.
"""

import json
from typing import Callable, TypeVar

from videos.models.page import Page
from videos.models.upload_ticket import UploadTicket
from videos.models.video import VideoMetadata

T = TypeVar("T")


class VideoMappingError(ValueError):
    """
    Exception raised when a response body cannot be mapped to a model.

    Examples:
    - Body is not JSON (HTML error page, empty body)
    - JSON is not an object
    - Required field missing (video without "uri")
    """


def load_json_object(text: str) -> dict:
    """
    Decode a JSON object.

    Args:
        text: Response body

    Returns:
        Decoded dict

    Raises:
        VideoMappingError: If text is not a JSON object
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise VideoMappingError(f"Response is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise VideoMappingError(
            f"Expected a JSON object, got {type(data).__name__}",
        )

    return data


def _map(text: str, factory: Callable[[dict], T], what: str) -> T:
    data = load_json_object(text)
    try:
        return factory(data)
    except (KeyError, TypeError, ValueError) as e:
        raise VideoMappingError(f"Invalid {what} object: {e!r}") from e


def parse_ticket(text: str) -> UploadTicket:
    """Map a POST /me/videos body to an UploadTicket"""
    return _map(text, UploadTicket.from_dict, "upload ticket")


def parse_video(text: str) -> VideoMetadata:
    """Map a GET /me/videos/{id} body to VideoMetadata"""
    return _map(text, VideoMetadata.from_dict, "video")


def parse_page(text: str) -> Page:
    """Map a GET /me/videos listing body to a Page"""
    return _map(text, Page.from_dict, "page")

