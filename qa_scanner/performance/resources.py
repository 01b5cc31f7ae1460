from urllib.parse import urlparse

from ..document import PageDocument, attr_text
from ..findings import Finding

STYLESHEET_LIMIT = 10
INLINE_STYLE_LIMIT = 50
THIRD_PARTY_SCRIPT_LIMIT = 10
RESOURCE_HINT_SELECTOR = 'link[rel="preload"], link[rel="prefetch"], link[rel="preconnect"]'


def external_scripts(document: PageDocument) -> list:
    return document.soup.find_all("script", src=True)


def is_render_blocking(script) -> bool:
    if script.has_attr("async") or script.has_attr("defer"):
        return False
    return "module" not in attr_text(script, "type").lower()


def check_render_blocking_scripts(document: PageDocument):
    blocking = [s for s in external_scripts(document) if is_render_blocking(s)]
    if blocking:
        return Finding.warning(f"{len(blocking)} render-blocking script(s) (missing async/defer)")
    return "All external scripts use async/defer or modules"


def check_script_inventory(document: PageDocument):
    return f"{len(external_scripts(document))} total external scripts"


def stylesheets(document: PageDocument) -> list:
    return document.select('link[rel="stylesheet"]')


def check_stylesheet_inventory(document: PageDocument):
    return f"{len(stylesheets(document))} external stylesheets"


def check_stylesheet_count(document: PageDocument):
    count = len(stylesheets(document))
    if count > STYLESHEET_LIMIT:
        return Finding.info(f"{count} stylesheets loaded — consider consolidating")
    return None


def check_inline_styles(document: PageDocument):
    count = len(document.soup.find_all(style=True))
    if count > INLINE_STYLE_LIMIT:
        return Finding.info(f"{count} elements with inline styles (consider CSS classes)")
    return None


def check_resource_hints(document: PageDocument):
    hints = document.select(RESOURCE_HINT_SELECTOR)
    if hints:
        return f"{len(hints)} resource hints (preload/prefetch/preconnect)"
    return Finding.info("No resource hints found (preload/prefetch/preconnect)")


def third_party_scripts(document: PageDocument) -> list:
    page_host = document.hostname
    found = []
    for script in external_scripts(document):
        src = attr_text(script, "src")
        if not src:
            continue
        try:
            host = (urlparse(document.resolve(src)).hostname or "").lower()
        except ValueError:
            continue
        if host and host != page_host:
            found.append(script)
    return found


def check_third_party_volume(document: PageDocument):
    count = len(third_party_scripts(document))
    if count > THIRD_PARTY_SCRIPT_LIMIT:
        return Finding.warning(f"{count} third-party scripts loaded")
    return None


def check_third_party_inventory(document: PageDocument):
    return f"{len(third_party_scripts(document))} third-party scripts"
