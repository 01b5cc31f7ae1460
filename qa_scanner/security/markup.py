from ..document import PageDocument, Presence, attr_state
from ..findings import Finding

INLINE_HANDLER_ATTRS = ["onclick", "onload", "onerror", "onmouseover", "onfocus", "onblur"]


def _rel_values(tag) -> set:
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return {value.lower() for value in rel}


def check_new_window_links(document: PageDocument):
    new_window = document.select('a[target="_blank"]')
    # noreferrer implies noopener
    unsafe = [a for a in new_window if not ({"noopener", "noreferrer"} & _rel_values(a))]
    if unsafe:
        return Finding.warning(f'{len(unsafe)} external link(s) with target="_blank" missing rel="noopener"')
    if new_window:
        return 'All target="_blank" links have rel="noopener"'
    return None


def check_content_security_policy(document: PageDocument):
    csp = document.soup.find(
        "meta", attrs={"http-equiv": lambda v: v is not None and v.lower() == "content-security-policy"}
    )
    if csp is None:
        return Finding.info("No Content Security Policy meta tag (may be set via header)")
    return "Content Security Policy meta tag found"


def check_inline_event_handlers(document: PageDocument):
    handlers = document.soup.find_all(lambda t: any(t.has_attr(a) for a in INLINE_HANDLER_ATTRS))
    if handlers:
        return Finding.info(f"{len(handlers)} inline event handler(s) found (prefer addEventListener)")
    return None


def check_password_autocomplete(document: PageDocument):
    fields = document.soup.find_all("input", attrs={"type": lambda v: v is not None and v.lower() == "password"})
    missing = [f for f in fields if attr_state(f, "autocomplete") is not Presence.VALUE]
    if missing:
        return Finding.info(f"{len(missing)} password input(s) missing autocomplete attribute")
    return None
