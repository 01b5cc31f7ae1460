from ..document import PageDocument
from ..findings import Finding


def check_print_stylesheet(document: PageDocument):
    if document.select_one('link[media="print"]') is None:
        return Finding.info("No print stylesheet")
    return "Print stylesheet present"


def check_manifest(document: PageDocument):
    if document.select_one('link[rel="manifest"]') is None:
        return Finding.info("No web app manifest")
    return "Web app manifest present"


def check_touch_icon(document: PageDocument):
    if document.select_one('link[rel="apple-touch-icon"]') is None:
        return Finding.info("No Apple touch icon")
    return "Apple touch icon present"
