"""Tests for the HTTP helper."""

import json
import urllib.error
import urllib.request

import pytest

from core.http_client import HTTPClientError, HTTPStatusError, fetch_json


class FakeResponse:
    def __init__(self, body: bytes):
        self.body = body

    def read(self) -> bytes:
        return self.body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def urlopen(monkeypatch):
    """Replace urllib.request.urlopen; records requests, returns a set body."""

    class Recorder:
        body = b"{}"
        error: Exception | None = None
        requests: list = []
        timeouts: list = []

        def __call__(self, req, timeout=None):
            self.requests.append(req)
            self.timeouts.append(timeout)
            if self.error is not None:
                raise self.error
            return FakeResponse(self.body)

    recorder = Recorder()
    recorder.requests = []
    recorder.timeouts = []
    monkeypatch.setattr(urllib.request, "urlopen", recorder)
    return recorder


class TestFetchJson:
    def test_decodes_json(self, urlopen):
        urlopen.body = json.dumps({"name": "pikachu"}).encode()
        assert fetch_json("https://example.test/x") == {"name": "pikachu"}

    def test_get_sends_default_headers(self, urlopen):
        fetch_json("https://example.test/x")
        req = urlopen.requests[0]
        assert req.get_method() == "GET"
        assert req.get_header("Accept") == "application/json"
        assert req.get_header("User-agent") == "authless-tool-server/1.0.0"
        assert req.data is None

    def test_post_with_payload_and_headers(self, urlopen):
        fetch_json(
            "https://example.test/hook",
            method="POST",
            payload={"brand": "Acme"},
            headers={"Authorization": "Bearer t0k"},
        )
        req = urlopen.requests[0]
        assert req.get_method() == "POST"
        assert json.loads(req.data) == {"brand": "Acme"}
        assert req.get_header("Content-type") == "application/json"
        assert req.get_header("Authorization") == "Bearer t0k"

    def test_timeout_from_config(self, urlopen, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "2.5")
        fetch_json("https://example.test/x")
        assert urlopen.timeouts == [2.5]

    def test_non_json_body_returned_as_text(self, urlopen):
        urlopen.body = b"ok, received"
        assert fetch_json("https://example.test/x") == "ok, received"

    def test_empty_body(self, urlopen):
        urlopen.body = b"  "
        assert fetch_json("https://example.test/x") is None

    def test_http_error_status(self, urlopen):
        urlopen.error = urllib.error.HTTPError(
            "https://example.test/x", 404, "Not Found", hdrs=None, fp=None
        )
        with pytest.raises(HTTPStatusError) as exc_info:
            fetch_json("https://example.test/x")
        assert exc_info.value.status == 404
        assert "HTTP 404 Not Found" in str(exc_info.value)

    def test_network_error(self, urlopen):
        urlopen.error = urllib.error.URLError("Name or service not known")
        with pytest.raises(HTTPClientError) as exc_info:
            fetch_json("https://example.test/x")
        assert not isinstance(exc_info.value, HTTPStatusError)
        assert "Name or service not known" in str(exc_info.value)

    def test_timeout(self, urlopen):
        urlopen.error = TimeoutError("timed out")
        with pytest.raises(HTTPClientError):
            fetch_json("https://example.test/x")

    def test_url_without_scheme(self, urlopen):
        """urllib's URL validation surfaces as HTTPClientError."""
        with pytest.raises(HTTPClientError) as exc_info:
            fetch_json("hooks.example.test/brand")
        assert "Invalid URL" in str(exc_info.value)
        assert urlopen.requests == []

    def test_body_not_utf8(self, urlopen):
        urlopen.body = b"Caf\xe9"
        with pytest.raises(HTTPClientError) as exc_info:
            fetch_json("https://example.test/x")
        assert "not valid UTF-8" in str(exc_info.value)
