#!/usr/bin/env python3
"""
Vimeo CLI - Upload and inspect videos

Usage:
    python scripts/vimeo_cli.py upload /path/to/video.mp4 --name "Session" --privacy unlisted
    python scripts/vimeo_cli.py list --query session
    python scripts/vimeo_cli.py get 123456789

Reads VIMEO_ACCESS_TOKEN from the environment / .env file.

Exit codes:
    0 - success
    1 - upload or request failed
    2 - upload finished with tolerated errors
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.settings import LOG_FORMAT, LOG_LEVEL
from transport import TransportError, create_transport
from upload import UploadController, UploaderError, UploadStatus, VimeoUploader
from videos import VideoController, VideoMappingError, VideoProperties
from videos.constants import PrivacyView

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vimeo upload client")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    upload = commands.add_parser("upload", help="Upload a local video file")
    upload.add_argument("path", type=Path, help="Video file to upload")
    upload.add_argument("--name", help="Video title")
    upload.add_argument("--description", help="Video description")
    upload.add_argument(
        "--privacy",
        choices=[view.value for view in PrivacyView],
        help="Who can view the video",
    )

    listing = commands.add_parser("list", help="List your videos, newest first")
    listing.add_argument("--query", help="Filter string")

    get = commands.add_parser("get", help="Show one video")
    get.add_argument("video_id", help="Numeric video id")

    return parser


def cmd_upload(args: argparse.Namespace) -> int:
    """Upload one file and print the outcome"""
    transport = create_transport()
    controller = UploadController(uploader=VimeoUploader(transport))

    properties = None
    if args.privacy:
        properties = VideoProperties(privacy_view=PrivacyView(args.privacy))

    try:
        outcome = controller.upload_video(
            str(args.path),
            name=args.name,
            description=args.description,
            properties=properties,
        )
    except UploaderError as e:
        logger.error(f"Cannot upload {args.path}: {e}")
        return 1

    for error in outcome.errors:
        print(f"  ! {error}")

    if not outcome.success:
        print(f"Upload failed ({outcome.status.value})")
        return 1

    print(f"Uploaded: {outcome.video.link or outcome.video.uri}")
    return 2 if outcome.status == UploadStatus.PARTIAL else 0


def cmd_list(args: argparse.Namespace) -> int:
    """Print one line per video"""
    controller = VideoController(create_transport())

    try:
        videos = controller.list_videos(query=args.query)
    except (TransportError, VideoMappingError) as e:
        logger.error(f"Listing failed: {e}")
        return 1

    for video in videos:
        created = video.created_time.strftime("%Y-%m-%d") if video.created_time else "-"
        print(f"{video.video_id:>12}  {created}  {video.status or '-':<12} {video.name}")

    print(f"\n{len(videos)} videos")
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Print metadata of one video"""
    controller = VideoController(create_transport())

    try:
        video = controller.get_video(args.video_id)
    except (TransportError, VideoMappingError) as e:
        logger.error(f"Fetch failed: {e}")
        return 1

    print(f"Name:     {video.name}")
    print(f"Link:     {video.link}")
    print(f"Status:   {video.status}")
    print(f"Duration: {video.duration}s ({video.width}x{video.height})")
    print(f"Privacy:  {video.privacy.view if video.privacy else '-'}")
    print(f"Plays:    {video.plays}")
    return 0


def main() -> int:
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format=LOG_FORMAT,
    )

    commands = {
        "upload": cmd_upload,
        "list": cmd_list,
        "get": cmd_get,
    }
    return commands[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
