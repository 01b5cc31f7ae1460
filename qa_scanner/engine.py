from datetime import datetime, timezone
from typing import Optional

from bs4 import BeautifulSoup

from .accessibility import AccessibilityAnalyzer
from .best_practices import BestPracticesAnalyzer
from .config import DEFAULT_CONFIG
from .content import ContentAnalyzer
from .document import PageDocument, RenderMetrics
from .errors import DocumentUnavailableError
from .fetcher import PageFetcher
from .findings import CATEGORY_KEYS, Report
from .mobile import MobileAnalyzer
from .on_page import OnPageAnalyzer
from .performance import PerformanceAnalyzer
from .platform import detect_platform
from .render import render_document
from .security import SecurityAnalyzer

ANALYZER_CLASSES = (
    OnPageAnalyzer,
    AccessibilityAnalyzer,
    PerformanceAnalyzer,
    SecurityAnalyzer,
    ContentAnalyzer,
    MobileAnalyzer,
    BestPracticesAnalyzer,
)


class QAScanner:
    """
    Runs every category analyzer against one document snapshot.

    The scanner holds configuration only; each call builds a fresh Report and
    nothing is kept between calls, so one instance can be handed to any number
    of callers and invoked repeatedly.
    """

    def __init__(self, config=None):
        self.config = config if config else DEFAULT_CONFIG
        self.global_config = self.config.get("Global", {})
        self.analyzers = tuple(cls(config=self.config) for cls in ANALYZER_CLASSES)
        keys = tuple(analyzer.category_key for analyzer in self.analyzers)
        if keys != CATEGORY_KEYS:
            raise ValueError(f"Analyzer categories {keys} do not match report keys {CATEGORY_KEYS}")

    def run_scan(self, document: PageDocument) -> Report:
        if document is None or not isinstance(getattr(document, "soup", None), BeautifulSoup):
            raise DocumentUnavailableError("Document cannot be inspected")
        hints = detect_platform(document)
        if self.global_config.get("debug") and hints.detected:
            print(f"Platform detected for {document.url}: {hints.label}")
        categories = {analyzer.category_key: analyzer.analyze(document, hints) for analyzer in self.analyzers}
        return Report(
            url=document.url,
            timestamp=datetime.now(timezone.utc).isoformat(),
            categories=categories,
        )

    __call__ = run_scan

    def scan_html(self, url: str, html, metrics: Optional[RenderMetrics] = None) -> Report:
        return self.run_scan(PageDocument.from_html(url, html, metrics))

    def scan_url(self, url: str, render: bool = False) -> Report:
        if render:
            return self.run_scan(render_document(url, self.config))
        with PageFetcher(self.config) as fetcher:
            return self.run_scan(fetcher.fetch(url))
