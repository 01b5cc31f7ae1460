import re

from ..document import PageDocument, Presence, attr_state, attr_text
from ..findings import Finding

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
DESC_MIN_LENGTH = 120
DESC_MAX_LENGTH = 160


def check_title(document: PageDocument):
    title_tag = document.soup.find("title")
    title_text = title_tag.get_text().strip() if title_tag else ""
    if not title_text:
        return Finding.critical("Missing page title")
    length = len(title_text)
    if length < TITLE_MIN_LENGTH:
        return Finding.warning(f"Title too short ({length} chars, recommend {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH})")
    if length > TITLE_MAX_LENGTH:
        return Finding.warning(f"Title too long ({length} chars, recommend {TITLE_MIN_LENGTH}-{TITLE_MAX_LENGTH})")
    return f"Title length is good ({length} chars)"


def check_meta_description(document: PageDocument):
    meta_desc_tag = document.soup.find("meta", attrs={"name": re.compile(r"^description$", re.I)})
    if attr_state(meta_desc_tag, "content") is not Presence.VALUE:
        return Finding.critical("Missing meta description")
    length = len(attr_text(meta_desc_tag, "content"))
    if length < DESC_MIN_LENGTH:
        return Finding.warning(f"Meta description too short ({length} chars, recommend {DESC_MIN_LENGTH}-{DESC_MAX_LENGTH})")
    if length > DESC_MAX_LENGTH:
        return Finding.warning(f"Meta description too long ({length} chars, recommend {DESC_MIN_LENGTH}-{DESC_MAX_LENGTH})")
    return f"Meta description length is good ({length} chars)"
