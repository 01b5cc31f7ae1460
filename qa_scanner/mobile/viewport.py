import re

from ..document import PageDocument, attr_text
from ..findings import Finding

_ZOOM_LOCK_RE = re.compile(r"user-scalable\s*=\s*no|maximum-scale\s*=\s*1(?:\.0*)?(?![\d.])", re.I)


def viewport_content(document: PageDocument):
    """Viewport meta content, or None when the page declares no viewport."""
    tag = document.soup.find("meta", attrs={"name": lambda v: v is not None and v.lower() == "viewport"})
    if tag is None:
        return None
    return attr_text(tag, "content")


def check_viewport(document: PageDocument):
    content = viewport_content(document)
    if content is None:
        return Finding.critical("Missing viewport meta tag")
    if not re.search(r"width\s*=\s*device-width", content, re.I):
        return Finding.warning("Viewport missing width=device-width")
    return "Viewport correctly configured"


def check_zoom_disabled(document: PageDocument):
    content = viewport_content(document)
    if content is not None and _ZOOM_LOCK_RE.search(content):
        return Finding.warning("Viewport disables user zoom (accessibility concern)")
    return None
