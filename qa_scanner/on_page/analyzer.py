from functools import partial

from ..base_module import QAModule
from ..platform import PlatformHints
from .title_meta import check_title, check_meta_description
from .headings_images import check_h1_count, check_heading_hierarchy, check_image_alt_text
from .social_meta import (
    check_canonical,
    check_og_title,
    check_og_description,
    check_og_image,
    check_twitter_card,
    check_link_inventory,
    check_structured_data,
    check_lang_attribute,
    check_meta_robots,
)


def _platform_detected(document, hints: PlatformHints):
    return f"{hints.label} site detected"


def _platform_seo_panel(document, hints: PlatformHints):
    if hints.has("seo_panel"):
        return f"{hints.label} SEO panel detected"
    return None


class OnPageAnalyzer(QAModule):
    """Checks page metadata: title, description, headings, alt text and social/structured tags."""

    category_key = "seo"

    def sub_checks(self):
        return [
            check_title,
            check_meta_description,
            check_h1_count,
            check_heading_hierarchy,
            check_canonical,
            check_og_title,
            check_og_description,
            check_og_image,
            check_twitter_card,
            check_image_alt_text,
            check_link_inventory,
            check_structured_data,
            check_lang_attribute,
            check_meta_robots,
        ]

    def platform_checks(self, hints: PlatformHints):
        if not hints.detected:
            return []
        return [partial(_platform_detected, hints=hints), partial(_platform_seo_panel, hints=hints)]
