from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag

from .errors import DocumentUnavailableError

# Element groups whose render data is collected in document order
TOUCH_TARGET_SELECTOR = "a, button, input, select, textarea"
TEXT_STYLE_SELECTOR = "p, li, span, a, td, th"

_NON_TEXT_TAGS = ["script", "style", "noscript", "template"]
# Metadata html.parser leaves beside the content when <head> and <body> are implied
_METADATA_TAGS = ["head", "title", "meta", "link", "base"]


class Presence(Enum):
    ABSENT = "absent"
    EMPTY = "empty"
    VALUE = "value"


def attr_state(tag: Tag, name: str) -> Presence:
    """Classify an attribute as absent, present but blank, or present with a value."""
    if tag is None or not tag.has_attr(name):
        return Presence.ABSENT
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None or not str(value).strip():
        return Presence.EMPTY
    return Presence.VALUE


def attr_text(tag: Tag, name: str) -> str:
    """Attribute as a single stripped string ("" when absent). Multi-valued attrs are joined."""
    value = tag.get(name) if tag is not None else None
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value).strip()
    return str(value).strip()


@dataclass(frozen=True)
class ImageState:
    natural_width: int = 0
    complete: bool = True


@dataclass(frozen=True)
class BoxSize:
    width: float
    height: float


@dataclass(frozen=True)
class TextStyle:
    font_size: float
    has_text: bool


def _number(value, default=0):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        raise ValueError(f"Non-finite metric value: {value}")
    return number


@dataclass(frozen=True)
class RenderMetrics:
    """Facts only a live browser can report.

    Sequences are index-aligned with the matching elements in document order:
    `images` with every <img>, `touch_targets` with TOUCH_TARGET_SELECTOR and
    `text_styles` with TEXT_STYLE_SELECTOR.
    """

    viewport_width: Optional[int] = None
    body_scroll_width: Optional[int] = None
    images: Tuple[ImageState, ...] = ()
    touch_targets: Tuple[BoxSize, ...] = ()
    text_styles: Tuple[TextStyle, ...] = ()
    body_text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["RenderMetrics"]:
        """Build metrics from the camelCase payload produced by the render script."""
        if not data:
            return None
        if not isinstance(data, dict):
            raise ValueError("Render metrics must be a JSON object")
        try:
            return cls._from_payload(data)
        except (AttributeError, TypeError) as e:
            raise ValueError(f"Malformed render metrics: {e}") from e

    @classmethod
    def _from_payload(cls, data: Dict[str, Any]) -> "RenderMetrics":
        images = tuple(
            ImageState(natural_width=int(_number(i.get("naturalWidth"))), complete=bool(i.get("complete", True)))
            for i in data.get("images") or []
        )
        targets = tuple(
            BoxSize(width=_number(t.get("width")), height=_number(t.get("height")))
            for t in data.get("touchTargets") or []
        )
        styles = tuple(
            TextStyle(font_size=_number(s.get("fontSize"), default=16.0), has_text=bool(s.get("hasText")))
            for s in data.get("textStyles") or []
        )
        viewport = data.get("viewportWidth")
        scroll = data.get("bodyScrollWidth")
        return cls(
            viewport_width=int(_number(viewport)) if viewport is not None else None,
            body_scroll_width=int(_number(scroll)) if scroll is not None else None,
            images=images,
            touch_targets=targets,
            text_styles=styles,
            body_text=data.get("bodyText"),
        )


@dataclass(frozen=True)
class PageDocument:
    """Read-only snapshot of one page: its location, parsed tree and optional render metrics."""

    url: str
    soup: BeautifulSoup
    metrics: Optional[RenderMetrics] = None

    @classmethod
    def from_html(cls, url: str, html, metrics: Optional[RenderMetrics] = None) -> "PageDocument":
        if not url or not isinstance(url, str):
            raise DocumentUnavailableError("A page URL is required")
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https", "file") or (parsed.scheme != "file" and not parsed.netloc):
            raise DocumentUnavailableError(f"Invalid page URL: {url}")
        if html is None or (isinstance(html, (str, bytes)) and not html.strip()):
            raise DocumentUnavailableError(f"No HTML content available for {url}")
        try:
            soup = BeautifulSoup(html, "html.parser")
        except Exception as e:
            raise DocumentUnavailableError(f"Could not parse HTML from {url}: {e}") from e
        return cls(url=url, soup=soup, metrics=metrics)

    @property
    def scheme(self) -> str:
        return urlparse(self.url).scheme.lower()

    @property
    def hostname(self) -> str:
        return (urlparse(self.url).hostname or "").lower()

    @property
    def is_secure(self) -> bool:
        return self.scheme == "https"

    @property
    def html_tag(self) -> Optional[Tag]:
        return self.soup.find("html")

    @property
    def body(self) -> Optional[Tag]:
        return self.soup.body

    @property
    def content_root(self) -> Optional[Tag]:
        """
        Element holding the page content: <body>, or the document root when the
        optional body tag is left out. None when nothing sits outside <head>.
        """
        if self.soup.body is not None:
            return self.soup.body
        root = self.html_tag or self.soup
        for child in root.children:
            if isinstance(child, Tag) and child.name not in _METADATA_TAGS:
                return root
            if type(child) is NavigableString and child.strip():
                return root
        return None

    @property
    def has_doctype(self) -> bool:
        return any(isinstance(item, Doctype) for item in self.soup.contents)

    def resolve(self, href: str) -> str:
        return urljoin(self.url, href.strip())

    def select(self, selector: str) -> list:
        return self.soup.select(selector)

    def select_one(self, selector: str) -> Optional[Tag]:
        return self.soup.select_one(selector)


def visible_text(document: PageDocument) -> Optional[str]:
    """Body text as a reader sees it, or None when the page has no content root."""
    if document.metrics is not None and document.metrics.body_text is not None:
        return document.metrics.body_text
    root = document.content_root
    if root is None:
        return None
    # Work on a copy so the shared snapshot stays untouched
    text_soup = BeautifulSoup(str(root), "html.parser")
    strip_tags = _NON_TEXT_TAGS if root is document.body else _NON_TEXT_TAGS + _METADATA_TAGS
    for element in text_soup(strip_tags):
        element.decompose()
    for comment in text_soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()
    return text_soup.get_text(separator=" ", strip=True)


def element_text(tag: Tag) -> str:
    """Stripped text content of an element, ignoring script/style bodies."""
    parts = []
    for string in tag.find_all(string=True):
        if isinstance(string, Comment):
            continue
        if string.parent is not None and string.parent.name in _NON_TEXT_TAGS:
            continue
        parts.append(string)
    return "".join(parts).strip()
