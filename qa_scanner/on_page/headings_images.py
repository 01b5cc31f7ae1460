from ..document import PageDocument, Presence, attr_state
from ..findings import Finding

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def heading_levels(document: PageDocument) -> list[int]:
    """Heading levels in document order."""
    return [int(tag.name[1]) for tag in document.soup.find_all(HEADING_TAGS)]


def check_h1_count(document: PageDocument):
    h1_count = len(document.soup.find_all("h1"))
    if h1_count == 0:
        return Finding.critical("No H1 tag found")
    if h1_count > 1:
        return Finding.warning(f"Multiple H1 tags found ({h1_count})")
    return "Single H1 tag present"


def has_hierarchy_gap(levels: list[int]) -> bool:
    # Going deeper may only step one level at a time; going back up is free
    previous = 0
    for level in levels:
        if previous > 0 and level > previous + 1:
            return True
        previous = level
    return False


def check_heading_hierarchy(document: PageDocument):
    levels = heading_levels(document)
    if has_hierarchy_gap(levels):
        return Finding.warning("Heading hierarchy has gaps (e.g., H1 → H3 skipping H2)")
    if levels:
        return "Heading hierarchy is correct"
    return None


def check_image_alt_text(document: PageDocument):
    images = document.soup.find_all("img")
    missing = [img for img in images if attr_state(img, "alt") is not Presence.VALUE]
    if missing:
        return Finding.warning(f"{len(missing)} image(s) missing alt text (SEO + accessibility)")
    if images:
        return f"All {len(images)} images have alt text"
    return None
