from ..document import PageDocument, attr_text
from ..findings import Finding

# Hyperlinks navigate rather than fetch, so they never count as mixed content
NAVIGATION_TAGS = {"a", "area"}


def check_https(document: PageDocument):
    if not document.is_secure:
        return Finding.critical("Page not served over HTTPS")
    return "Page served over HTTPS"


def _is_insecure_resource(url: str) -> bool:
    return url.lower().startswith("http://") and "localhost" not in url.lower()


def mixed_content_resources(document: PageDocument) -> list:
    resources = []
    for tag in document.soup.find_all(lambda t: t.has_attr("src") or t.has_attr("href")):
        attr = "src" if tag.has_attr("src") else "href"
        if attr == "href" and tag.name in NAVIGATION_TAGS:
            continue
        value = attr_text(tag, attr)
        if value and _is_insecure_resource(document.resolve(value)):
            resources.append(tag)
    return resources


def check_mixed_content(document: PageDocument):
    if not document.is_secure:
        return None
    resources = mixed_content_resources(document)
    if resources:
        return Finding.critical(f"{len(resources)} mixed content resource(s) loaded over HTTP")
    return "No mixed content detected"


def check_insecure_forms(document: PageDocument):
    insecure = [f for f in document.soup.find_all("form") if attr_text(f, "action").lower().startswith("http://")]
    if insecure:
        return Finding.critical(f"{len(insecure)} form(s) submit to HTTP (insecure)")
    return None
