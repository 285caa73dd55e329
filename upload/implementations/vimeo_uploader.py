"""
Vimeo Uploader Implementation

Concrete implementation of UploaderInterface for the Vimeo streaming upload
protocol:

1. POST /me/videos {"type": "streaming"} -> upload ticket
2. PUT the remaining bytes to upload_link_secure, then PUT an empty
   "bytes */*" probe and read back the Range the server actually holds
3. Repeat from the server-confirmed offset until the whole file is held
4. DELETE complete_uri -> Location of the new video
5. PATCH properties (optional), GET the final metadata

Remote failures along the way are collected on the UploadOutcome; only a
local, unrecoverable condition stops the sequence.
"""

import logging
import time
from typing import Callable, Optional

from transport.constants import (
    HEADER_CONTENT_RANGE,
    HEADER_LOCATION,
    HEADER_RANGE,
    HTTP_CREATED,
    HTTP_RESUME_INCOMPLETE,
    HttpMethod,
)
from transport.interfaces.transport_interface import (
    TransportError,
    TransportInterface,
    TransportResponse,
)
from upload.config import UploadConfig
from upload.constants import (
    CONTENT_RANGE_CHUNK,
    CONTENT_RANGE_PROBE,
    CREATE_SESSION_PATH,
    CREATE_SESSION_PAYLOAD,
    ME_PATH,
    ProgressDecision,
    UploadStatus,
)
from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadOutcome,
)
from upload.managers.progress_tracker import ProgressTracker
from videos.constants import MY_VIDEOS_PATH
from videos.mapper import (
    VideoMappingError,
    load_json_object,
    parse_ticket,
    parse_video,
)
from videos.models.properties import VideoProperties
from videos.models.upload_ticket import UploadTicket


class VimeoUploader(UploaderInterface):
    """
    Vimeo video uploader using the streaming upload protocol.

    Features:
    - Server-verified progress (resumes from the offset the server reports)
    - Tolerates failed chunk writes and probes
    - Bounded retries with capped exponential backoff
    - Overall upload deadline
    """

    def __init__(
        self,
        transport: TransportInterface,
        config: Optional[UploadConfig] = None,
        sleep_func: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize Vimeo uploader.

        Args:
            transport: Transport used for every exchange
            config: Retry/timeout configuration (None = load default)
            sleep_func: Called with the backoff delay between retries
            clock: Monotonic clock used for the upload deadline

        Example:
            transport = RequestsTransport(access_token=token)
            uploader = VimeoUploader(transport)
        """
        self.logger = logging.getLogger(__name__)

        self.transport = transport
        self.config = config or UploadConfig()
        self._sleep = sleep_func
        self._clock = clock

        self.logger.info("Vimeo Uploader initialized")

    # =========================================================================
    # UPLOAD
    # =========================================================================

    def upload_file(
        self,
        file_path: str,
        properties: Optional[VideoProperties] = None,
    ) -> UploadOutcome:
        """
        Upload a local video file.

        Args:
            file_path: Path to video file
            properties: Properties to PATCH onto the new video (optional)

        Returns:
            UploadOutcome with collected errors, ticket and final video

        Raises:
            UploaderError: If the file cannot be read (status INVALID_FILE)
        """
        start_time = self._clock()

        data = self._read_file(file_path)
        outcome = UploadOutcome(file_size=len(data))

        self.logger.info(f"Starting upload: {file_path} ({len(data)} bytes)")

        # Session creation is the one remote failure that stops everything
        response = self._request_session()

        if response.status_code != HTTP_CREATED:
            outcome.errors.append(self._session_error(response))
            outcome.status = UploadStatus.SESSION_FAILED
            return self._finish(outcome, start_time)

        try:
            ticket = self._decode_ticket(response)
            outcome.ticket = ticket

            self._transfer(outcome, ticket, data, start_time)

            location = self._finalize(outcome, ticket)
            outcome.video_id = location.rsplit("/", 1)[-1]

            self._patch_properties(outcome, location, properties)
            self._fetch_video(outcome, outcome.video_id)

        except UploaderError as e:
            self.logger.error(f"Upload aborted: {e}")
            outcome.errors.append(e)
            outcome.status = e.status
            return self._finish(outcome, start_time)

        if outcome.video is None:
            outcome.status = UploadStatus.FAILED
        elif outcome.errors:
            outcome.status = UploadStatus.PARTIAL
        else:
            outcome.status = UploadStatus.SUCCESS

        return self._finish(outcome, start_time)

    def _finish(self, outcome: UploadOutcome, start_time: float) -> UploadOutcome:
        outcome.upload_duration = self._clock() - start_time

        if outcome.success:
            self.logger.info(
                f"✅ Upload complete: {outcome.video_id} "
                f"({outcome.upload_duration:.1f}s, {outcome.file_size} bytes, "
                f"{len(outcome.errors)} tolerated errors)",
            )
        else:
            self.logger.error(
                f"❌ Upload failed: {outcome.error_message} "
                f"(status: {outcome.status.value})",
            )

        return outcome

    def _read_file(self, file_path: str) -> bytes:
        """
        Read the whole file into memory.

        Raises:
            UploaderError: If the file cannot be read
        """
        try:
            with open(file_path, "rb") as f:
                return f.read()
        except OSError as e:
            raise UploaderError(
                f"Cannot read video file {file_path}: {e}",
                status=UploadStatus.INVALID_FILE,
            ) from e

    def _record(
        self,
        outcome: UploadOutcome,
        response: TransportResponse,
        step: str,
    ) -> None:
        """Collect a tolerated transport failure"""
        if response.error is not None:
            self.logger.warning(f"{step} failed (continuing): {response.error}")
            outcome.errors.append(response.error)

    # =========================================================================
    # SESSION
    # =========================================================================

    def _request_session(self) -> TransportResponse:
        return self.transport.exchange(
            CREATE_SESSION_PATH,
            HttpMethod.POST,
            json_payload=CREATE_SESSION_PAYLOAD,
        )

    @staticmethod
    def _session_error(response: TransportResponse) -> TransportError:
        """Transport error of a rejected session, synthesized if none was reported"""
        return response.error or TransportError(
            f"Upload session not created (HTTP {response.status_code})",
            status_code=response.status_code,
            method=HttpMethod.POST.value,
            target=CREATE_SESSION_PATH,
        )

    def _decode_ticket(self, response: TransportResponse) -> UploadTicket:
        """
        Decode and check the ticket from a create-session response.

        Raises:
            UploaderError: If the ticket is undecodable or unusable
        """
        try:
            ticket = parse_ticket(response.body)
        except VideoMappingError as e:
            raise UploaderError(
                f"Unable to decode upload ticket: {e}",
                status=UploadStatus.INVALID_TICKET,
            ) from e

        if not ticket.is_usable:
            raise UploaderError(
                "Upload ticket is missing upload_link_secure or complete_uri",
                status=UploadStatus.INVALID_TICKET,
            )

        self.logger.debug(f"Upload ticket {ticket.ticket_id} ({ticket.uri})")
        return ticket

    def get_upload_ticket(self) -> UploadTicket:
        """
        Open a streaming upload session without transferring anything.

        Returns:
            UploadTicket

        Raises:
            UploaderError: If the session cannot be created or decoded
        """
        response = self._request_session()

        if response.status_code != HTTP_CREATED:
            error = self._session_error(response)
            raise UploaderError(
                f"Cannot open upload session: {error}",
                status=UploadStatus.SESSION_FAILED,
            ) from error

        return self._decode_ticket(response)

    # =========================================================================
    # TRANSFER
    # =========================================================================

    def _transfer(
        self,
        outcome: UploadOutcome,
        ticket: UploadTicket,
        data: bytes,
        start_time: float,
    ) -> int:
        """
        Send the file until the server confirms every byte.

        Returns:
            Confirmed offset (== len(data))

        Raises:
            UploaderError: On missing probe headers, stall or deadline
        """
        total_length = len(data)
        tracker = ProgressTracker(
            total_length,
            max_no_progress_retries=self.config.max_no_progress_retries,
            backoff_base_seconds=self.config.retry_backoff_base_seconds,
            backoff_max_seconds=self.config.retry_backoff_max_seconds,
        )

        while not tracker.is_complete:
            elapsed = self._clock() - start_time
            if elapsed > self.config.upload_timeout_seconds:
                raise UploaderError(
                    f"Upload timeout after {elapsed:.1f}s "
                    f"({tracker.offset} of {total_length} bytes confirmed)",
                    status=UploadStatus.TIMEOUT,
                )

            self._write_chunk(outcome, ticket, data, tracker.offset)
            probe = self._probe(outcome, ticket)

            decision = tracker.update(probe.header(HEADER_RANGE))

            if decision == ProgressDecision.ABORT:
                raise UploaderError(
                    f"No upload progress after {tracker.stalled_rounds} attempts "
                    f"({tracker.offset} of {total_length} bytes confirmed)",
                    status=UploadStatus.STALLED,
                )

            if decision == ProgressDecision.NO_PROGRESS_RETRY:
                delay = tracker.backoff_delay()
                self.logger.warning(
                    f"No progress at {tracker.offset} bytes, "
                    f"retrying in {delay:.1f}s "
                    f"({tracker.stalled_rounds}/{tracker.max_no_progress_retries})",
                )
                self._sleep(delay)
                continue

            self.logger.info(f"Upload progress: {tracker.percent:.0f}%")

        return tracker.offset

    def _write_chunk(
        self,
        outcome: UploadOutcome,
        ticket: UploadTicket,
        data: bytes,
        offset: int,
    ) -> None:
        total_length = len(data)
        content_range = CONTENT_RANGE_CHUNK.format(start=offset, end=total_length)

        self.logger.debug(f"PUT {content_range}")

        response = self.transport.exchange(
            ticket.upload_link_secure,
            HttpMethod.PUT,
            raw_bytes=data[offset:],
            extra_headers={HEADER_CONTENT_RANGE: content_range},
        )

        # A failed write is not fatal: the probe tells us what arrived
        self._record(outcome, response, "Chunk write")

    def _probe(self, outcome: UploadOutcome, ticket: UploadTicket) -> TransportResponse:
        """
        Ask the server how many bytes it holds.

        Raises:
            UploaderError: If the response carries no headers at all
        """
        response = self.transport.exchange(
            ticket.upload_link_secure,
            HttpMethod.PUT,
            extra_headers={HEADER_CONTENT_RANGE: CONTENT_RANGE_PROBE},
        )

        if response.headers is None:
            raise UploaderError(
                "API returned invalid response for progress check (no headers)",
                status=UploadStatus.PROGRESS_UNAVAILABLE,
            ) from response.error

        if response.status_code != HTTP_RESUME_INCOMPLETE:
            self._record(outcome, response, "Progress check")
        return response

    # =========================================================================
    # COMPLETION
    # =========================================================================

    def _finalize(self, outcome: UploadOutcome, ticket: UploadTicket) -> str:
        """
        Turn the upload session into a permanent video.

        Returns:
            Location of the new video ("/videos/12345")

        Raises:
            UploaderError: If the response has no Location header
        """
        response = self.transport.exchange(ticket.complete_uri, HttpMethod.DELETE)
        self._record(outcome, response, "Upload completion")

        location = response.header(HEADER_LOCATION)
        if not location:
            raise UploaderError(
                "Upload completion returned no Location header",
                status=UploadStatus.FINALIZE_FAILED,
            )

        self.logger.info(f"Upload finalized: {location}")
        return location

    def _patch_properties(
        self,
        outcome: UploadOutcome,
        location: str,
        properties: Optional[VideoProperties],
    ) -> None:
        if properties is None:
            return

        payload = properties.to_payload()
        if not payload:
            self.logger.debug("No properties set, skipping PATCH")
            return

        response = self.transport.exchange(
            location,
            HttpMethod.PATCH,
            json_payload=payload,
        )
        self._record(outcome, response, "Property update")

    def _fetch_video(self, outcome: UploadOutcome, video_id: str) -> None:
        response = self.transport.exchange(
            f"{MY_VIDEOS_PATH}/{video_id}",
            HttpMethod.GET,
        )

        if not response.ok:
            self._record(outcome, response, "Video fetch")
            return

        try:
            outcome.video = parse_video(response.body)
        except VideoMappingError as e:
            self.logger.warning(f"Video fetch returned unreadable metadata: {e}")
            outcome.errors.append(e)

    # =========================================================================
    # STATUS
    # =========================================================================

    def is_available(self) -> bool:
        """
        Check if uploader is ready.

        Returns:
            True if the transport carries credentials
        """
        return self.transport.is_authenticated()

    def test_connection(self) -> bool:
        """
        Test connection to the API.

        Makes a simple API call (GET /me) to verify connectivity and auth.

        Returns:
            True if connection successful
        """
        response = self.transport.exchange(ME_PATH, HttpMethod.GET)

        if response.ok:
            self.logger.info("✅ Vimeo API connection test successful")
            return True

        self.logger.error(f"❌ Vimeo API connection test failed: {response.error}")
        return False

    def get_upload_quota_remaining(self) -> Optional[int]:
        """
        Get remaining upload space.

        Returns:
            Free upload space in bytes (upload_quota.space.free on /me),
            or None if unavailable
        """
        response = self.transport.exchange(ME_PATH, HttpMethod.GET)

        if not response.ok:
            self.logger.warning(f"Could not read upload quota: {response.error}")
            return None

        try:
            user = load_json_object(response.body)
        except VideoMappingError as e:
            self.logger.warning(f"Could not read upload quota: {e}")
            return None

        space = (user.get("upload_quota") or {}).get("space") or {}
        free = space.get("free")

        return int(free) if isinstance(free, (int, float)) else None
