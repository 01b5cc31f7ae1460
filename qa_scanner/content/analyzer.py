from functools import partial

from ..base_module import QAModule
from ..findings import Finding
from ..platform import PlatformHints
from .text_media import check_content_length, check_broken_images
from .structure import (
    check_empty_links,
    check_duplicate_ids,
    check_iframe_titles,
    check_iframe_inventory,
    check_favicon,
)

# URL fragments some site builders add for tracking/unpublished pages
UNFRIENDLY_URL_MARKERS = ("/~", "?__rc=")


def _platform_url_structure(document, hints: PlatformHints):
    if any(marker in document.url for marker in UNFRIENDLY_URL_MARKERS):
        return Finding.info(f"{hints.label} URL may not be SEO-friendly (contains tracking params)")
    return f"{hints.label} SEO-friendly URL structure"


class ContentAnalyzer(QAModule):
    """Analyzes the page's text volume, media and link hygiene."""

    category_key = "content"

    def sub_checks(self):
        return [
            check_content_length,
            check_broken_images,
            check_empty_links,
            check_duplicate_ids,
            check_iframe_titles,
            check_iframe_inventory,
            check_favicon,
        ]

    def platform_checks(self, hints: PlatformHints):
        if not hints.detected:
            return []
        return [partial(_platform_url_structure, hints=hints)]
