from ..document import PageDocument, Presence, attr_state, attr_text
from ..findings import Finding

EMPTY_ALT_NOTICE_THRESHOLD = 5

# Inputs that carry their own label (buttons) or are never shown
UNLABELED_INPUT_TYPES_EXEMPT = {"hidden", "submit", "button", "checkbox", "radio"}


def check_missing_alt_attribute(document: PageDocument):
    images = document.soup.find_all("img")
    no_alt = [img for img in images if attr_state(img, "alt") is Presence.ABSENT]
    if no_alt:
        return Finding.critical(f"{len(no_alt)} image(s) missing alt attribute entirely")
    return None


def check_empty_alt_volume(document: PageDocument):
    images = document.soup.find_all("img")
    empty_alt = [
        img for img in images
        if attr_state(img, "alt") is Presence.EMPTY and attr_state(img, "role") is not Presence.VALUE
    ]
    if len(empty_alt) > EMPTY_ALT_NOTICE_THRESHOLD:
        return Finding.info(f"{len(empty_alt)} images with empty alt (ok if decorative)")
    return None


def labelable_inputs(document: PageDocument) -> list:
    fields = []
    for tag in document.soup.find_all(["input", "textarea", "select"]):
        if tag.name == "input" and attr_text(tag, "type").lower() in UNLABELED_INPUT_TYPES_EXEMPT:
            continue
        fields.append(tag)
    return fields


def has_label(field, label_targets: set) -> bool:
    field_id = attr_text(field, "id")
    if field_id and field_id in label_targets:
        return True
    if attr_state(field, "aria-label") is Presence.VALUE or attr_state(field, "aria-labelledby") is Presence.VALUE:
        return True
    return field.find_parent("label") is not None


def check_form_labels(document: PageDocument):
    fields = labelable_inputs(document)
    label_targets = {attr_text(label, "for") for label in document.soup.find_all("label", attrs={"for": True})}
    unlabeled = sum(1 for field in fields if not has_label(field, label_targets))
    if unlabeled:
        return Finding.critical(f"{unlabeled} form input(s) without associated labels")
    if fields:
        return f"All {len(fields)} form inputs have labels"
    return None
