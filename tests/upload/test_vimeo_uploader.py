"""
Vimeo Uploader Tests

Tests cover:
1. Full upload sequence against an in-memory server
2. Resume from the server-confirmed offset
3. Tolerated remote failures (collected, not raised)
4. Local aborts (ticket, probe, stall, deadline, finalization)
5. Ticket, connection and quota helpers
"""

import itertools

import pytest

from tests.upload.conftest import (
    COMPLETE_URI,
    FILE_SIZE,
    UPLOAD_LINK,
    VIDEO_ID,
    FakeVimeoServer,
    make_ticket_body,
)
from tests.conftest import make_video_body
from transport.constants import HttpMethod
from transport.implementations.mock_transport import MockTransport
from transport.interfaces.transport_interface import TransportError
from upload.constants import UploadStatus
from upload.interfaces.uploader_interface import UploaderError
from videos.constants import PrivacyView
from videos.mapper import VideoMappingError
from videos.models.properties import VideoProperties


def script_happy_path(transport):
    """Queue ticket, one full write, full probe, finalize, fetch"""
    transport.add_response(201, body=make_ticket_body())
    transport.add_response(200)
    transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
    transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
    transport.add_response(200, body=make_video_body(VIDEO_ID))


# =============================================================================
# SUCCESSFUL UPLOADS
# =============================================================================


class TestUploadSuccess:
    """Test complete upload sequences"""

    def test_upload_without_properties(
        self, make_uploader, server_transport, fake_server, video_file, file_data,
    ):
        """File arrives intact and final metadata is returned"""
        uploader = make_uploader(server_transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.success is True
        assert outcome.status == UploadStatus.SUCCESS
        assert outcome.errors == []
        assert outcome.video_id == VIDEO_ID
        assert outcome.video.uri == f"/videos/{VIDEO_ID}"
        assert outcome.ticket.upload_link_secure == UPLOAD_LINK
        assert outcome.file_size == FILE_SIZE
        assert bytes(fake_server.received) == file_data

        # No PATCH without properties
        assert server_transport.get_requests(HttpMethod.PATCH) == []

    def test_upload_with_properties(
        self, make_uploader, server_transport, fake_server, video_file,
    ):
        """Properties are PATCHed to the Location and show up in the fetch"""
        uploader = make_uploader(server_transport)
        properties = VideoProperties(
            name="Session 2025-10-12",
            privacy_view=PrivacyView.UNLISTED,
        )

        outcome = uploader.upload_file(video_file, properties)

        assert outcome.status == UploadStatus.SUCCESS
        assert fake_server.patches == [
            {"name": "Session 2025-10-12", "privacy.view": "unlisted"},
        ]
        assert outcome.video.name == "Session 2025-10-12"

        patch = server_transport.get_requests(HttpMethod.PATCH)[0]
        assert patch.target == f"/videos/{VIDEO_ID}"

    def test_empty_properties_skip_patch(
        self, make_uploader, server_transport, video_file,
    ):
        """Properties with nothing set send no PATCH"""
        uploader = make_uploader(server_transport)

        outcome = uploader.upload_file(video_file, VideoProperties())

        assert outcome.status == UploadStatus.SUCCESS
        assert server_transport.get_requests(HttpMethod.PATCH) == []

    def test_request_sequence(self, make_uploader, server_transport, video_file):
        """POST, PUT chunk, PUT probe, DELETE, GET, in that order"""
        uploader = make_uploader(server_transport)

        uploader.upload_file(video_file)

        log = server_transport.request_log
        assert [(r.method, r.target) for r in log] == [
            (HttpMethod.POST, "/me/videos"),
            (HttpMethod.PUT, UPLOAD_LINK),
            (HttpMethod.PUT, UPLOAD_LINK),
            (HttpMethod.DELETE, COMPLETE_URI),
            (HttpMethod.GET, f"/me/videos/{VIDEO_ID}"),
        ]
        assert log[0].json_payload == {"type": "streaming"}
        assert log[1].headers["Content-Range"] == f"bytes 0-{FILE_SIZE}/{FILE_SIZE}"
        assert log[2].headers["Content-Range"] == "bytes */*"
        assert log[2].raw_bytes is None


# =============================================================================
# RESUME
# =============================================================================


class TestResume:
    """Test resumption from the server-confirmed offset"""

    def test_multi_round_upload(self, make_uploader, video_file, file_data, sleeps):
        """Each round sends the remainder from the confirmed offset"""
        server = FakeVimeoServer(accept_per_write=400)
        transport = MockTransport(handler=server)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.SUCCESS
        assert bytes(server.received) == file_data
        assert sleeps == []

        writes = [
            r for r in transport.get_requests(HttpMethod.PUT)
            if r.headers["Content-Range"] != "bytes */*"
        ]
        assert [w.headers["Content-Range"] for w in writes] == [
            "bytes 0-1000/1000",
            "bytes 400-1000/1000",
            "bytes 800-1000/1000",
        ]
        assert writes[1].raw_bytes == file_data[400:]
        assert writes[2].raw_bytes == file_data[800:]

    def test_failed_chunk_write_is_tolerated(self, make_uploader, video_file):
        """A failed write is collected and the probe decides"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(500, error_message="Internal error")
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
        transport.add_response(200, body=make_video_body(VIDEO_ID))
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.success is True
        assert outcome.status == UploadStatus.PARTIAL
        assert len(outcome.errors) == 1
        assert isinstance(outcome.errors[0], TransportError)
        assert outcome.errors[0].status_code == 500

    def test_probe_308_is_not_an_error(self, make_uploader, video_file):
        """The usual 308 probe answer is not collected"""
        transport = MockTransport()
        script_happy_path(transport)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.errors == []
        assert transport.pending_responses == 0


# =============================================================================
# SESSION FAILURES
# =============================================================================


class TestSessionFailure:
    """Test upload session creation failures"""

    @pytest.mark.parametrize("status_code", [500, 401, 0])
    def test_session_error_stops_upload(self, make_uploader, video_file, status_code):
        """Non-201 gives exactly one error and no further requests"""
        transport = MockTransport()
        transport.add_response(status_code)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.success is False
        assert outcome.status == UploadStatus.SESSION_FAILED
        assert len(outcome.errors) == 1
        assert outcome.ticket is None
        assert outcome.video is None
        assert len(transport.request_log) == 1

    def test_session_200_is_not_created(self, make_uploader, video_file):
        """Only 201 counts, even when the body looks like a ticket"""
        transport = MockTransport()
        transport.add_response(200, body=make_ticket_body())
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.SESSION_FAILED
        assert len(outcome.errors) == 1
        assert outcome.errors[0].status_code == 200
        assert len(transport.request_log) == 1

    @pytest.mark.parametrize("body", ["<html>oops</html>", "{}", "[]"])
    def test_invalid_ticket(self, make_uploader, video_file, body):
        """Undecodable or incomplete ticket aborts before any transfer"""
        transport = MockTransport()
        transport.add_response(201, body=body)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.INVALID_TICKET
        assert len(outcome.errors) == 1
        assert isinstance(outcome.errors[0], UploaderError)
        assert len(transport.request_log) == 1


# =============================================================================
# TRANSFER ABORTS
# =============================================================================


class TestTransferAbort:
    """Test conditions that stop the transfer loop"""

    def test_probe_without_headers(self, make_uploader, video_file):
        """A probe that got no response aborts the upload"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(0, error_message="Connection reset")
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.PROGRESS_UNAVAILABLE
        assert outcome.video is None
        assert len(outcome.errors) == 1
        assert len(transport.request_log) == 3

    def test_stalled_upload(self, make_uploader, video_file, sleeps):
        """Server holding nothing exhausts retries with capped backoff"""
        server = FakeVimeoServer(accept_per_write=0)
        transport = MockTransport(handler=server)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.STALLED
        assert sleeps == [0.5, 1.0]
        assert outcome.video is None
        assert transport.get_requests(HttpMethod.DELETE) == []

    def test_unparseable_range_retries(self, make_uploader, video_file, sleeps):
        """Garbage Range is retried, then the upload completes"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(308, headers={"Range": "bytes-garbage"})
        transport.add_response(200)
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
        transport.add_response(200, body=make_video_body(VIDEO_ID))
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.SUCCESS
        assert sleeps == [0.5]

    def test_upload_deadline(self, make_uploader, server_transport, video_file):
        """Exceeding the configured timeout aborts with TIMEOUT"""
        clock = itertools.count(0, 61).__next__
        uploader = make_uploader(server_transport, clock=clock)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.TIMEOUT
        assert server_transport.get_requests(HttpMethod.PUT) == []
        assert "timeout" in outcome.error_message.lower()


# =============================================================================
# COMPLETION
# =============================================================================


class TestCompletion:
    """Test finalization, patch and fetch"""

    def test_missing_location(self, make_uploader, video_file):
        """Finalization without Location stops before PATCH and GET"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201)
        transport.add_response(200, body=make_video_body(VIDEO_ID))
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file, VideoProperties(name="x"))

        assert outcome.status == UploadStatus.FINALIZE_FAILED
        assert outcome.video_id is None
        assert len(transport.request_log) == 4
        assert transport.pending_responses == 1

    def test_failed_patch_is_tolerated(self, make_uploader, video_file):
        """A failed PATCH is collected and the video is still fetched"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
        transport.add_response(400, body='{"error": "bad privacy"}')
        transport.add_response(200, body=make_video_body(VIDEO_ID))
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file, VideoProperties(name="x"))

        assert outcome.status == UploadStatus.PARTIAL
        assert outcome.video is not None
        assert outcome.errors[0].status_code == 400

    def test_fetch_failure(self, make_uploader, video_file):
        """Failed final GET leaves no video"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
        transport.add_response(404)
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.FAILED
        assert outcome.success is False
        assert outcome.video_id == VIDEO_ID
        assert len(outcome.errors) == 1

    def test_unreadable_fetch_body(self, make_uploader, video_file):
        """Undecodable final metadata is collected as an error"""
        transport = MockTransport()
        transport.add_response(201, body=make_ticket_body())
        transport.add_response(200)
        transport.add_response(308, headers={"Range": f"bytes 0-{FILE_SIZE}"})
        transport.add_response(201, headers={"Location": f"/videos/{VIDEO_ID}"})
        transport.add_response(200, body="not json")
        uploader = make_uploader(transport)

        outcome = uploader.upload_file(video_file)

        assert outcome.status == UploadStatus.FAILED
        assert isinstance(outcome.errors[0], VideoMappingError)


# =============================================================================
# LOCAL FILE
# =============================================================================


class TestLocalFile:
    """Test local file handling"""

    def test_missing_file_raises(self, make_uploader, server_transport, tmp_path):
        """Unreadable file raises before any request"""
        uploader = make_uploader(server_transport)

        with pytest.raises(UploaderError) as excinfo:
            uploader.upload_file(str(tmp_path / "missing.mp4"))

        assert excinfo.value.status == UploadStatus.INVALID_FILE
        assert server_transport.request_log == []


# =============================================================================
# HELPERS
# =============================================================================


class TestUploaderHelpers:
    """Test ticket, connection and quota helpers"""

    def test_get_upload_ticket(self, make_uploader, server_transport):
        """A ticket is returned without transferring anything"""
        uploader = make_uploader(server_transport)

        ticket = uploader.get_upload_ticket()

        assert ticket.ticket_id == "abc"
        assert ticket.complete_uri == COMPLETE_URI
        assert len(server_transport.request_log) == 1

    def test_get_upload_ticket_failure(self, make_uploader):
        """Session errors raise SESSION_FAILED"""
        transport = MockTransport()
        transport.add_response(503)
        uploader = make_uploader(transport)

        with pytest.raises(UploaderError) as excinfo:
            uploader.get_upload_ticket()

        assert excinfo.value.status == UploadStatus.SESSION_FAILED

    def test_get_upload_ticket_200_names_status(self, make_uploader):
        """A 200 without transport error still explains the rejection"""
        transport = MockTransport()
        transport.add_response(200, body=make_ticket_body())
        uploader = make_uploader(transport)

        with pytest.raises(UploaderError) as excinfo:
            uploader.get_upload_ticket()

        assert "None" not in str(excinfo.value)
        assert "HTTP 200" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, TransportError)
        assert excinfo.value.__cause__.status_code == 200

    def test_quota(self, make_uploader, server_transport):
        """Free space is read from /me"""
        uploader = make_uploader(server_transport)

        assert uploader.get_upload_quota_remaining() == 5000

    def test_quota_unavailable(self, make_uploader):
        """Failed /me gives None"""
        transport = MockTransport()
        transport.add_response(401)
        uploader = make_uploader(transport)

        assert uploader.get_upload_quota_remaining() is None

    def test_connection(self, make_uploader, server_transport):
        """GET /me succeeding means connected"""
        uploader = make_uploader(server_transport)

        assert uploader.test_connection() is True

    def test_connection_failure(self, make_uploader):
        """Failed GET /me means not connected"""
        transport = MockTransport()
        transport.add_response(0)
        uploader = make_uploader(transport)

        assert uploader.test_connection() is False

    def test_is_available_follows_transport(self, make_uploader):
        """Availability mirrors transport authentication"""
        assert make_uploader(MockTransport()).is_available() is True
        assert make_uploader(MockTransport(authenticated=False)).is_available() is False
