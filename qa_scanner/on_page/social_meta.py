from ..document import PageDocument, Presence, attr_state, attr_text
from ..findings import Finding


def check_canonical(document: PageDocument):
    if document.select_one('link[rel="canonical"]') is None:
        return Finding.warning("Missing canonical URL")
    return "Canonical URL present"


def _has_og(document: PageDocument, prop: str) -> bool:
    return document.select_one(f'meta[property="og:{prop}"]') is not None


def check_og_title(document: PageDocument):
    if not _has_og(document, "title"):
        return Finding.info("Missing og:title")
    return "og:title present"


def check_og_description(document: PageDocument):
    if not _has_og(document, "description"):
        return Finding.info("Missing og:description")
    return None


def check_og_image(document: PageDocument):
    if not _has_og(document, "image"):
        return Finding.info("Missing og:image")
    return None


def check_twitter_card(document: PageDocument):
    if document.select_one('meta[name="twitter:card"]') is None:
        return Finding.info("Missing Twitter Card meta tags")
    return None


def check_link_inventory(document: PageDocument):
    links = document.soup.find_all("a", href=True)
    nofollow = [a for a in links if "nofollow" in (a.get("rel") or [])]
    return f"{len(links)} links found, {len(nofollow)} nofollow"


def check_structured_data(document: PageDocument):
    json_ld = document.soup.find_all("script", type="application/ld+json")
    if not json_ld:
        return Finding.info("No structured data (JSON-LD) found")
    return f"{len(json_ld)} structured data block(s) found"


def check_lang_attribute(document: PageDocument):
    html_tag = document.html_tag
    if attr_state(html_tag, "lang") is not Presence.VALUE:
        return Finding.warning("Missing lang attribute on <html>")
    return f"Language set: {attr_text(html_tag, 'lang')}"


def check_meta_robots(document: PageDocument):
    robots_tag = document.select_one('meta[name="robots"]')
    if robots_tag is not None and "noindex" in attr_text(robots_tag, "content").lower():
        return Finding.warning("Page is set to noindex")
    return None
