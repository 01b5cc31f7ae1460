import re

from ..document import PageDocument, Presence, attr_state, attr_text, element_text
from ..findings import Finding

LANDMARK_SELECTOR = (
    "main, nav, header, footer, aside, [role='main'], [role='navigation'], "
    "[role='banner'], [role='contentinfo']"
)
SKIP_LINK_SELECTOR = 'a[href="#main"], a[href="#content"], a[href="#main-content"], .skip-link, .skip-nav'
_TABINDEX_RE = re.compile(r"\s*([+-]?\d+)")


def _has_value(tag, *names) -> bool:
    return any(attr_state(tag, name) is Presence.VALUE for name in names)


def button_has_name(button) -> bool:
    if element_text(button):
        return True
    if _has_value(button, "aria-label", "aria-labelledby", "title"):
        return True
    return button.find(["svg", "img"]) is not None


def link_has_name(link) -> bool:
    if element_text(link):
        return True
    if _has_value(link, "aria-label"):
        return True
    return link.find("img", alt=True) is not None or link.find("svg") is not None


def check_button_names(document: PageDocument):
    buttons = document.select("button, [role='button']")
    unnamed = sum(1 for button in buttons if not button_has_name(button))
    if unnamed:
        return Finding.warning(f"{unnamed} button(s) without accessible text")
    if buttons:
        return f"All {len(buttons)} buttons have accessible text"
    return None


def check_link_names(document: PageDocument):
    links = document.soup.find_all("a", href=True)
    unnamed = sum(1 for link in links if not link_has_name(link))
    if unnamed:
        return Finding.warning(f"{unnamed} link(s) without accessible text")
    return None


def check_landmarks(document: PageDocument):
    landmarks = document.select(LANDMARK_SELECTOR)
    if not landmarks:
        return Finding.warning("No ARIA landmarks found (main, nav, header, footer)")
    return f"{len(landmarks)} ARIA landmarks found"


def check_skip_link(document: PageDocument):
    if document.select_one(SKIP_LINK_SELECTOR) is None:
        return Finding.info("No skip navigation link found")
    return "Skip navigation link present"


def _tabindex(tag):
    # Leading integer, trailing junk ignored ("2abc" is 2)
    match = _TABINDEX_RE.match(attr_text(tag, "tabindex"))
    return int(match.group(1)) if match else None


def check_positive_tabindex(document: PageDocument):
    positive = [tag for tag in document.soup.find_all(attrs={"tabindex": True}) if (_tabindex(tag) or 0) > 0]
    if positive:
        return Finding.warning(f"{len(positive)} element(s) with positive tabindex (disrupts natural tab order)")
    return None
