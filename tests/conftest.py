from __future__ import annotations

from typing import Callable, Optional

import pytest

from qa_scanner.document import PageDocument, RenderMetrics


def build_html(body: str = "", head: str = "", lang: Optional[str] = "en", doctype: bool = True) -> str:
    lang_attr = f' lang="{lang}"' if lang is not None else ""
    prefix = "<!DOCTYPE html>" if doctype else ""
    return f"{prefix}<html{lang_attr}><head>{head}</head><body>{body}</body></html>"


@pytest.fixture
def page() -> Callable[..., PageDocument]:
    """Factory for a PageDocument built from body/head fragments."""

    def _make(
        body: str = "",
        head: str = "",
        url: str = "https://example.com/page",
        lang: Optional[str] = "en",
        doctype: bool = True,
        metrics: Optional[RenderMetrics] = None,
    ) -> PageDocument:
        return PageDocument.from_html(url, build_html(body, head, lang, doctype), metrics)

    return _make


def messages(result) -> list[str]:
    return [issue.message for issue in result.issues]


def severities(result) -> list[str]:
    return [issue.severity.value for issue in result.issues]


@pytest.fixture
def issue_messages() -> Callable:
    return messages


@pytest.fixture
def issue_severities() -> Callable:
    return severities
