"""Content quality checks."""

from __future__ import annotations

from qa_scanner.content import ContentAnalyzer
from qa_scanner.document import ImageState, PageDocument, RenderMetrics


def _analyze(doc):
    return ContentAnalyzer().analyze(doc)


def _words(n: int) -> str:
    return "<p>" + " ".join(["word"] * n) + "</p>"


def test_word_count_thresholds(page, issue_messages) -> None:
    assert "Very little text content (99 words)" in issue_messages(_analyze(page(body=_words(99))))
    assert "Thin content (100 words — consider 300+ for SEO)" in issue_messages(_analyze(page(body=_words(100))))
    assert "Thin content (299 words — consider 300+ for SEO)" in issue_messages(_analyze(page(body=_words(299))))
    assert "Good content length (300 words)" in _analyze(page(body=_words(300))).passes


def test_word_count_skipped_without_body(issue_messages) -> None:
    doc = PageDocument.from_html("https://example.com/", "<html><head><title>t</title></head></html>")
    result = _analyze(doc)
    assert not any("words" in m for m in issue_messages(result))
    assert not any("words" in p for p in result.passes)


def test_broken_images_need_render_metrics(page, issue_messages) -> None:
    body = '<img src="a.png" alt=""><img src="b.png" alt=""><img alt="no src">'
    assert not any("broken" in m for m in issue_messages(_analyze(page(body=body))))

    metrics = RenderMetrics(
        images=(ImageState(natural_width=0, complete=True), ImageState(natural_width=640), ImageState(natural_width=0))
    )
    assert "1 broken/failed image(s) detected" in issue_messages(_analyze(page(body=body, metrics=metrics)))

    healthy = RenderMetrics(images=(ImageState(natural_width=10), ImageState(natural_width=10), ImageState(natural_width=10)))
    assert "All 3 images loaded successfully" in _analyze(page(body=body, metrics=healthy)).passes


def test_empty_links(page, issue_messages) -> None:
    body = '<a href="">a</a><a href="#">b</a><a>c</a><a href="#top">d</a><a href="/x">e</a>'
    assert "3 empty or hash-only link(s)" in issue_messages(_analyze(page(body=body)))


def test_duplicate_ids(page, issue_messages) -> None:
    body = '<div id="a"></div><div id="a"></div><span id="a"></span><p id="b"></p>'
    assert "2 duplicate ID(s) found in DOM" in issue_messages(_analyze(page(body=body)))
    assert "No duplicate IDs" in _analyze(page(body='<div id="a"></div><div id="b"></div>')).passes


def test_iframes(page, issue_messages) -> None:
    body = '<iframe src="/a" title="Map"></iframe><iframe src="/b"></iframe>'
    result = _analyze(page(body=body))
    assert "1 iframe(s) missing title attribute" in issue_messages(result)
    assert "2 iframe(s) found" in result.passes
    assert not any("iframe" in p for p in _analyze(page()).passes)


def test_favicon(page, issue_messages) -> None:
    assert "No favicon found" in issue_messages(_analyze(page()))
    assert "Favicon present" in _analyze(page(head='<link rel="icon" href="/favicon.png">')).passes
    assert "Favicon present" in _analyze(page(head='<link rel="shortcut icon" href="/favicon.ico">')).passes


def test_word_count_without_body_tag(issue_messages) -> None:
    doc = PageDocument.from_html("https://example.com/", "<!DOCTYPE html><title>Short page</title><p>Just a few words</p>")
    assert "Very little text content (4 words)" in issue_messages(_analyze(doc))
