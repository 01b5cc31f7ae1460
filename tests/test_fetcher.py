"""Static page fetching over HTTP."""

from __future__ import annotations

import sys

import pytest
import requests

from qa_scanner.errors import DocumentUnavailableError
from qa_scanner.fetcher import PageFetcher
from qa_scanner.render import render_document


class _FakeResponse:
    def __init__(self, url: str, content: bytes, status_code: int = 200) -> None:
        self.url = url
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")


def test_fetch_builds_static_document_from_final_url(monkeypatch: pytest.MonkeyPatch) -> None:
    fetcher = PageFetcher()
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return _FakeResponse("https://example.com/landing", b"<html><body><p>hi</p></body></html>")

    monkeypatch.setattr(fetcher.session, "get", fake_get)
    doc = fetcher.fetch("http://example.com/")
    assert calls == [("http://example.com/", 10)]
    assert doc.url == "https://example.com/landing"
    assert doc.metrics is None
    assert doc.soup.find("p").get_text() == "hi"
    assert fetcher.session.headers["User-Agent"].startswith("Mozilla/5.0")


@pytest.mark.parametrize(
    "failure",
    [requests.exceptions.ConnectionError("refused"), requests.exceptions.Timeout("slow")],
)
def test_fetch_errors_become_document_unavailable(monkeypatch: pytest.MonkeyPatch, failure: Exception) -> None:
    fetcher = PageFetcher()

    def fake_get(url, timeout):
        raise failure

    monkeypatch.setattr(fetcher.session, "get", fake_get)
    with pytest.raises(DocumentUnavailableError):
        fetcher.fetch("https://example.com/")


def test_http_error_status_is_document_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    fetcher = PageFetcher()
    monkeypatch.setattr(fetcher.session, "get", lambda url, timeout: _FakeResponse(url, b"", status_code=503))
    with pytest.raises(DocumentUnavailableError):
        fetcher.fetch("https://example.com/")


def test_render_without_playwright_is_document_unavailable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "playwright", None)
    monkeypatch.setitem(sys.modules, "playwright.sync_api", None)
    with pytest.raises(DocumentUnavailableError):
        render_document("https://example.com/")
