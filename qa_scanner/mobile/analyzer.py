from ..base_module import QAModule
from .viewport import check_viewport, check_zoom_disabled
from .layout import check_touch_targets, check_horizontal_overflow, check_font_sizes


class MobileAnalyzer(QAModule):
    """Checks how the page behaves on small touch screens."""

    category_key = "mobile"

    def sub_checks(self):
        return [
            check_viewport,
            check_zoom_disabled,
            check_touch_targets,
            check_horizontal_overflow,
            check_font_sizes,
        ]
