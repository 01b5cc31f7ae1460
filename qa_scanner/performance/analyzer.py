from functools import partial

from ..base_module import QAModule
from ..platform import PlatformHints
from .images import check_image_dimensions, check_lazy_loading, check_oversized_images
from .resources import (
    check_render_blocking_scripts,
    check_script_inventory,
    check_stylesheet_inventory,
    check_stylesheet_count,
    check_inline_styles,
    check_resource_hints,
    check_third_party_volume,
    check_third_party_inventory,
)
from .dom import check_dom_size, check_dom_depth


def _platform_managed(document, hints: PlatformHints):
    return f"{hints.label} site - performance optimizations handled by {hints.label}"


def _platform_static_cdn(document, hints: PlatformHints):
    if hints.has("static_cdn"):
        return f"{hints.label} static CDN detected"
    return None


class PerformanceAnalyzer(QAModule):
    """Flags markup patterns that slow down loading and rendering."""

    category_key = "performance"

    def sub_checks(self):
        return [
            check_image_dimensions,
            check_lazy_loading,
            check_oversized_images,
            check_render_blocking_scripts,
            check_script_inventory,
            check_stylesheet_inventory,
            check_stylesheet_count,
            check_inline_styles,
            check_dom_size,
            check_dom_depth,
            check_resource_hints,
            check_third_party_volume,
            check_third_party_inventory,
        ]

    def platform_checks(self, hints: PlatformHints):
        if not hints.detected:
            return []
        return [partial(_platform_managed, hints=hints), partial(_platform_static_cdn, hints=hints)]
