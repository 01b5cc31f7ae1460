from ..document import PageDocument
from ..findings import Finding

DOM_SIZE_WARNING = 3000
DOM_SIZE_ADVISORY = 1500
DOM_DEPTH_LIMIT = 15
DOM_DEPTH_SCAN_CAP = 32


def check_dom_size(document: PageDocument):
    size = len(document.soup.find_all(True))
    if size > DOM_SIZE_WARNING:
        return Finding.warning(f"Large DOM: {size} elements (recommend < {DOM_SIZE_ADVISORY})")
    if size > DOM_SIZE_ADVISORY:
        return Finding.info(f"DOM has {size} elements (acceptable but watch growth)")
    return f"DOM size is good ({size} elements)"


def max_depth(root, cap: int = DOM_DEPTH_SCAN_CAP) -> int:
    """Deepest element level below root (root is level 0), not descending past cap."""
    deepest = 0
    stack = [(root, 0)]
    while stack:
        element, depth = stack.pop()
        deepest = max(deepest, depth)
        if depth < cap:
            stack.extend((child, depth + 1) for child in element.find_all(True, recursive=False))
    return deepest


def check_dom_depth(document: PageDocument):
    root = document.content_root
    if root is None:
        return None
    depth = max_depth(root)
    if depth > DOM_DEPTH_LIMIT:
        return Finding.info(f"Deep DOM nesting ({depth} levels deep)")
    return f"DOM depth is fine ({depth} levels)"
