from functools import partial

from ..base_module import QAModule
from ..platform import PlatformHints
from .html_core import (
    check_doctype,
    check_charset,
    check_deprecated_elements,
    check_empty_elements,
    check_error_page,
)
from .installability import check_print_stylesheet, check_manifest, check_touch_icon


def _platform_managed(document, hints: PlatformHints):
    return f"{hints.label} site - managed platform"


def _platform_custom_domain(document, hints: PlatformHints):
    if not hints.on_vendor_domain:
        return "Custom domain detected (good for SEO)"
    return None


class BestPracticesAnalyzer(QAModule):
    """Checks general document hygiene: doctype, charset, deprecated markup, installability."""

    category_key = "bestPractices"

    def sub_checks(self):
        return [
            check_doctype,
            check_charset,
            check_deprecated_elements,
            check_empty_elements,
            check_print_stylesheet,
            check_error_page,
            check_manifest,
            check_touch_icon,
        ]

    def platform_checks(self, hints: PlatformHints):
        if not hints.detected:
            return []
        return [partial(_platform_managed, hints=hints), partial(_platform_custom_domain, hints=hints)]
