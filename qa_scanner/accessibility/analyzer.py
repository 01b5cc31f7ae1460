from functools import partial

from ..base_module import QAModule
from ..platform import PlatformHints
from .images_forms import check_missing_alt_attribute, check_empty_alt_volume, check_form_labels
from .names_landmarks import (
    check_button_names,
    check_link_names,
    check_landmarks,
    check_skip_link,
    check_positive_tabindex,
)


def _platform_a11y(document, hints: PlatformHints):
    if hints.has("a11y"):
        return f"{hints.label} accessibility features detected"
    return None


class AccessibilityAnalyzer(QAModule):
    """Checks that content is perceivable and operable with assistive technology."""

    category_key = "accessibility"

    def sub_checks(self):
        return [
            check_missing_alt_attribute,
            check_empty_alt_volume,
            check_form_labels,
            check_button_names,
            check_link_names,
            check_landmarks,
            check_skip_link,
            check_positive_tabindex,
        ]

    def platform_checks(self, hints: PlatformHints):
        if not hints.detected:
            return []
        return [partial(_platform_a11y, hints=hints)]
