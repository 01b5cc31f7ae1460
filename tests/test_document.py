"""Document snapshot, attribute presence and render metrics parsing."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from qa_scanner.document import (
    PageDocument,
    Presence,
    RenderMetrics,
    attr_state,
    element_text,
    visible_text,
)
from qa_scanner.errors import DocumentUnavailableError


def _tag(markup: str):
    return BeautifulSoup(markup, "html.parser").find(True)


@pytest.mark.parametrize(
    "markup, expected",
    [
        ('<img src="a.png">', Presence.ABSENT),
        ('<img src="a.png" alt="">', Presence.EMPTY),
        ('<img src="a.png" alt="   ">', Presence.EMPTY),
        ('<img src="a.png" alt="Logo">', Presence.VALUE),
    ],
)
def test_attr_state_is_tri_state(markup: str, expected: Presence) -> None:
    assert attr_state(_tag(markup), "alt") is expected


def test_attr_state_of_missing_tag_is_absent() -> None:
    assert attr_state(None, "content") is Presence.ABSENT


def test_from_html_rejects_missing_content() -> None:
    with pytest.raises(DocumentUnavailableError):
        PageDocument.from_html("https://example.com/", "")
    with pytest.raises(DocumentUnavailableError):
        PageDocument.from_html("https://example.com/", None)


def test_from_html_rejects_invalid_url() -> None:
    with pytest.raises(DocumentUnavailableError):
        PageDocument.from_html("not a url", "<html></html>")
    with pytest.raises(DocumentUnavailableError):
        PageDocument.from_html("ftp://example.com/file", "<html></html>")


def test_document_location_properties(page) -> None:
    doc = page(url="https://Example.com:8443/path?q=1")
    assert doc.scheme == "https"
    assert doc.hostname == "example.com"
    assert doc.is_secure
    assert doc.has_doctype
    assert doc.resolve("/img.png") == "https://Example.com:8443/img.png"
    assert not page(doctype=False).has_doctype


def test_visible_text_skips_scripts_and_handles_missing_body(page) -> None:
    doc = page(body="<p>Hello <b>world</b></p><script>var x = 1;</script><!-- note -->")
    assert visible_text(doc) == "Hello world"

    no_body = PageDocument.from_html("https://example.com/", "<html><head><title>t</title></head></html>")
    assert no_body.body is None
    assert visible_text(no_body) is None


def test_visible_text_prefers_rendered_text(page) -> None:
    doc = page(body="<p>markup text</p>", metrics=RenderMetrics(body_text="rendered text"))
    assert visible_text(doc) == "rendered text"


def test_element_text_ignores_style_bodies() -> None:
    button = _tag("<button><style>.x{}</style>  Go </button>")
    assert element_text(button) == "Go"


def test_render_metrics_from_camel_case_payload() -> None:
    metrics = RenderMetrics.from_dict(
        {
            "viewportWidth": 390,
            "bodyScrollWidth": 420.5,
            "bodyText": "hi",
            "images": [{"naturalWidth": 2400, "complete": True}, {"naturalWidth": 0, "complete": False}],
            "touchTargets": [{"width": 20, "height": 20}],
            "textStyles": [{"fontSize": 10, "hasText": True}],
        }
    )
    assert metrics.viewport_width == 390
    assert metrics.body_scroll_width == 420
    assert metrics.images[0].natural_width == 2400
    assert metrics.images[1].complete is False
    assert metrics.touch_targets[0].width == 20
    assert metrics.text_styles[0].font_size == 10
    assert metrics.body_text == "hi"


def test_render_metrics_empty_and_malformed_payloads() -> None:
    assert RenderMetrics.from_dict(None) is None
    assert RenderMetrics.from_dict({}) is None
    with pytest.raises(ValueError):
        RenderMetrics.from_dict(["not", "a", "dict"])
    with pytest.raises(ValueError):
        RenderMetrics.from_dict({"images": ["bad"]})


def test_content_root_without_body_tag() -> None:
    doc = PageDocument.from_html("https://example.com/", "<!DOCTYPE html><title>Title text</title><h1>404</h1><p>Gone</p>")
    assert doc.body is None
    assert doc.content_root is doc.soup
    assert visible_text(doc) == "404 Gone"

    wrapped = PageDocument.from_html("https://example.com/", "<html><head><title>t</title></head><p>Hi</p></html>")
    assert wrapped.content_root is wrapped.html_tag
    assert visible_text(wrapped) == "Hi"

    head_only = PageDocument.from_html("https://example.com/", "<html><head><title>t</title></head></html>")
    assert head_only.content_root is None


def test_non_finite_metrics_are_rejected() -> None:
    with pytest.raises(ValueError):
        RenderMetrics.from_dict({"viewportWidth": float("inf")})
    with pytest.raises(ValueError):
        RenderMetrics.from_dict({"touchTargets": [{"width": float("nan"), "height": 10}]})
