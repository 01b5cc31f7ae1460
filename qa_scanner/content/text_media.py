from ..document import PageDocument, Presence, attr_state, visible_text
from ..findings import Finding

MIN_WORDS_WARNING = 100
MIN_WORDS_ADVISORY = 300


def word_count(text: str) -> int:
    return len(text.split())


def check_content_length(document: PageDocument):
    text = visible_text(document)
    if text is None:
        return None
    count = word_count(text)
    if count < MIN_WORDS_WARNING:
        return Finding.warning(f"Very little text content ({count} words)")
    if count < MIN_WORDS_ADVISORY:
        return Finding.info(f"Thin content ({count} words — consider {MIN_WORDS_ADVISORY}+ for SEO)")
    return f"Good content length ({count} words)"


def check_broken_images(document: PageDocument):
    if document.metrics is None:
        return None
    images = document.soup.find_all("img")
    broken = 0
    for img, state in zip(images, document.metrics.images):
        if state.complete and state.natural_width == 0 and attr_state(img, "src") is Presence.VALUE:
            broken += 1
    if broken:
        return Finding.critical(f"{broken} broken/failed image(s) detected")
    if images:
        return f"All {len(images)} images loaded successfully"
    return None
