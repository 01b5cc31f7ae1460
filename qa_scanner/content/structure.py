from collections import Counter

from ..base_module import find_favicon
from ..document import PageDocument, Presence, attr_state, attr_text
from ..findings import Finding


def empty_links(document: PageDocument) -> list:
    return [a for a in document.soup.find_all("a") if not a.has_attr("href") or attr_text(a, "href") in ("", "#")]


def check_empty_links(document: PageDocument):
    links = empty_links(document)
    if links:
        return Finding.warning(f"{len(links)} empty or hash-only link(s)")
    return None


def check_duplicate_ids(document: PageDocument):
    ids = Counter(tag["id"] for tag in document.soup.find_all(id=True))
    dupes = sum(count - 1 for count in ids.values() if count > 1)
    if dupes:
        return Finding.warning(f"{dupes} duplicate ID(s) found in DOM")
    return "No duplicate IDs"


def check_iframe_titles(document: PageDocument):
    untitled = [f for f in document.soup.find_all("iframe") if attr_state(f, "title") is not Presence.VALUE]
    if untitled:
        return Finding.warning(f"{len(untitled)} iframe(s) missing title attribute")
    return None


def check_iframe_inventory(document: PageDocument):
    iframes = document.soup.find_all("iframe")
    if iframes:
        return f"{len(iframes)} iframe(s) found"
    return None


def check_favicon(document: PageDocument):
    if find_favicon(document) is None:
        return Finding.warning("No favicon found")
    return "Favicon present"
