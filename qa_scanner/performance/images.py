import re

from ..document import PageDocument, Presence, attr_state, attr_text
from ..findings import Finding

EAGER_IMAGE_ALLOWANCE = 3
OVERSIZED_IMAGE_WIDTH = 2000

_STYLE_SIZE_RE = re.compile(r"(?:^|;)\s*(?:width|height)\s*:", re.I)


def has_explicit_size(img) -> bool:
    if attr_state(img, "width") is Presence.VALUE or attr_state(img, "height") is Presence.VALUE:
        return True
    return bool(_STYLE_SIZE_RE.search(attr_text(img, "style")))


def check_image_dimensions(document: PageDocument):
    unsized = [img for img in document.soup.find_all("img") if not has_explicit_size(img)]
    if unsized:
        return Finding.warning(f"{len(unsized)} image(s) missing explicit width/height (causes layout shift)")
    return None


def check_lazy_loading(document: PageDocument):
    # The first few images are likely above the fold and should load eagerly
    images = document.soup.find_all("img")[EAGER_IMAGE_ALLOWANCE:]
    eager = [img for img in images if attr_text(img, "loading").lower() != "lazy"]
    if eager:
        return Finding.warning(f"{len(eager)} below-fold image(s) not using lazy loading")
    return None


def check_oversized_images(document: PageDocument):
    if document.metrics is None:
        return None
    oversized = [state for state in document.metrics.images if state.natural_width > OVERSIZED_IMAGE_WIDTH]
    if oversized:
        return Finding.warning(f"{len(oversized)} image(s) over {OVERSIZED_IMAGE_WIDTH}px wide (consider resizing)")
    return None
