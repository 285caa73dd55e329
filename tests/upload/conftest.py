"""
Upload Test Configuration and Fixtures

Provides an in-memory Vimeo server driven through MockTransport, a small
video file, and a fast retry configuration.
"""

from typing import List, Optional

import pytest

from transport.constants import HttpMethod
from transport.implementations.mock_transport import MockTransport, RecordedRequest
from transport.interfaces.transport_interface import TransportResponse
from upload.config import UploadConfig
from upload.implementations.vimeo_uploader import VimeoUploader
from tests.conftest import make_video_body

UPLOAD_LINK = "https://1234.cloud.vimeo.com/upload?ticket_id=abc&signature=xyz"
COMPLETE_URI = "/users/1/uploads/abc?video_file_id=99&signature=xyz"
VIDEO_ID = "12345"
FILE_SIZE = 1000


def make_ticket_body() -> dict:
    return {
        "uri": "/users/1/tickets/abc",
        "ticket_id": "abc",
        "user": {"uri": "/users/1"},
        "upload_link": UPLOAD_LINK.replace("https", "http"),
        "upload_link_secure": UPLOAD_LINK,
        "complete_uri": COMPLETE_URI,
    }


class FakeVimeoServer:
    """
    In-memory stand-in for the upload endpoints.

    Each chunk write stores at most accept_per_write bytes (None = all), so
    tests can force multi-round uploads. Probes answer 308 with the range
    actually held.
    """

    def __init__(self, accept_per_write: Optional[int] = None):
        self.accept_per_write = accept_per_write
        self.received = bytearray()
        self.patches: List[dict] = []
        self.name = "Untitled"

    def __call__(self, request: RecordedRequest) -> TransportResponse:
        method, target = request.method, request.target

        if method == HttpMethod.POST and target == "/me/videos":
            return MockTransport.make_response(201, body=make_ticket_body())

        if method == HttpMethod.PUT and target == UPLOAD_LINK:
            content_range = request.headers["Content-Range"]

            if content_range == "bytes */*":
                return MockTransport.make_response(
                    308, headers={"Range": f"bytes 0-{len(self.received)}"},
                )

            start = int(content_range.split()[1].split("-")[0])
            chunk = request.raw_bytes or b""
            if self.accept_per_write is not None:
                chunk = chunk[:self.accept_per_write]
            del self.received[start:]
            self.received.extend(chunk)
            return MockTransport.make_response(200)

        if method == HttpMethod.DELETE and target == COMPLETE_URI:
            return MockTransport.make_response(
                201, headers={"Location": f"/videos/{VIDEO_ID}"},
            )

        if method == HttpMethod.PATCH and target == f"/videos/{VIDEO_ID}":
            self.patches.append(request.json_payload)
            self.name = request.json_payload.get("name", self.name)
            return MockTransport.make_response(200)

        if method == HttpMethod.GET and target == f"/me/videos/{VIDEO_ID}":
            return MockTransport.make_response(
                200, body=make_video_body(VIDEO_ID, self.name),
            )

        if method == HttpMethod.GET and target == "/me":
            return MockTransport.make_response(
                200, body={"upload_quota": {"space": {"free": 5000, "max": 10000}}},
            )

        return MockTransport.make_response(404)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def file_data():
    """Deterministic, non-repeating-looking file content"""
    return bytes(i % 251 for i in range(FILE_SIZE))


@pytest.fixture
def video_file(tmp_path, file_data):
    """Write file_data to a temporary .mp4"""
    path = tmp_path / "session.mp4"
    path.write_bytes(file_data)
    return str(path)


@pytest.fixture
def upload_config(tmp_path):
    """Fast retry policy: 2 retries, 0.5s base, 4s cap"""
    return UploadConfig(
        config_path=tmp_path / "upload.yaml",
        overrides={
            "upload_timeout_seconds": 60,
            "max_no_progress_retries": 2,
            "retry_backoff_base_seconds": 0.5,
            "retry_backoff_max_seconds": 4.0,
        },
    )


@pytest.fixture
def sleeps():
    """Records backoff delays instead of sleeping"""
    return []


@pytest.fixture
def make_uploader(upload_config, sleeps):
    """Build a VimeoUploader over the given transport"""

    def _make(transport, clock=None):
        kwargs = {"clock": clock} if clock is not None else {}
        return VimeoUploader(
            transport,
            config=upload_config,
            sleep_func=sleeps.append,
            **kwargs,
        )

    return _make


@pytest.fixture
def fake_server():
    return FakeVimeoServer()


@pytest.fixture
def server_transport(fake_server):
    """MockTransport answering from fake_server"""
    return MockTransport(handler=fake_server)
