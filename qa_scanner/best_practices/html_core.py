import re

from bs4 import Comment, NavigableString

from ..document import PageDocument, attr_text, visible_text
from ..findings import Finding

DEPRECATED_TAGS = ["font", "center", "marquee", "blink", "big", "strike", "tt", "frame", "frameset", "applet"]
EMPTY_CHECK_TAGS = ["p", "div", "span", "h1", "h2", "h3"]
EMPTY_ELEMENT_LIMIT = 10


def check_doctype(document: PageDocument):
    if not document.has_doctype:
        return Finding.warning("Missing DOCTYPE declaration")
    return "DOCTYPE present"


def check_charset(document: PageDocument):
    meta_charset = document.soup.find("meta", attrs={"charset": True})
    if meta_charset is None:
        return Finding.warning("Missing charset declaration")
    return f"Charset: {attr_text(meta_charset, 'charset')}"


def check_deprecated_elements(document: PageDocument):
    found = document.soup.find_all(DEPRECATED_TAGS)
    if found:
        return Finding.warning(f"{len(found)} deprecated HTML element(s) found")
    return None


def is_empty_element(tag) -> bool:
    """True when the element has no child elements and no text, comments aside (CSS :empty)."""
    for child in tag.children:
        if isinstance(child, Comment):
            continue
        if isinstance(child, NavigableString) and not str(child):
            continue
        return False
    return True


def check_empty_elements(document: PageDocument):
    empty = [tag for tag in document.soup.find_all(EMPTY_CHECK_TAGS) if is_empty_element(tag)]
    if len(empty) > EMPTY_ELEMENT_LIMIT:
        return Finding.info(f"{len(empty)} empty HTML elements (cleanup recommended)")
    return None


def check_error_page(document: PageDocument):
    text = visible_text(document)
    if text is None:
        return None
    lowered = text.lower()
    if "404" in lowered and re.search(r"not\s+found", lowered):
        return Finding.critical("Page appears to be a 404 error page")
    return None
