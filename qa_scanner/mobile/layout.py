from ..document import PageDocument
from ..findings import Finding

MIN_TOUCH_TARGET = 44
SMALL_TARGET_WARNING = 10
OVERFLOW_TOLERANCE = 10
MIN_FONT_SIZE = 12
SMALL_TEXT_WARNING = 5


def is_undersized(box) -> bool:
    # Hidden elements report a zero box and are not touch targets
    if box.width <= 0 or box.height <= 0:
        return False
    return box.width < MIN_TOUCH_TARGET or box.height < MIN_TOUCH_TARGET


def check_touch_targets(document: PageDocument):
    if document.metrics is None:
        return None
    too_small = sum(1 for box in document.metrics.touch_targets if is_undersized(box))
    if too_small > SMALL_TARGET_WARNING:
        return Finding.warning(
            f"{too_small} interactive elements smaller than {MIN_TOUCH_TARGET}x{MIN_TOUCH_TARGET}px (touch target size)"
        )
    if too_small:
        return Finding.info(f"{too_small} small touch targets detected")
    return "Touch targets are adequately sized"


def check_horizontal_overflow(document: PageDocument):
    metrics = document.metrics
    if metrics is None or metrics.viewport_width is None or metrics.body_scroll_width is None:
        return None
    body_width = metrics.body_scroll_width
    if body_width > metrics.viewport_width + OVERFLOW_TOLERANCE:
        return Finding.warning(
            f"Page has horizontal overflow ({body_width}px body vs {metrics.viewport_width}px viewport)"
        )
    return "No horizontal overflow"


def check_font_sizes(document: PageDocument):
    if document.metrics is None:
        return None
    small = sum(1 for style in document.metrics.text_styles if style.has_text and style.font_size < MIN_FONT_SIZE)
    if small > SMALL_TEXT_WARNING:
        return Finding.warning(f"{small} text elements with font-size < {MIN_FONT_SIZE}px")
    return "Text sizes are mobile-friendly"
