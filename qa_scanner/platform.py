from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from .document import PageDocument

# Managed site-builder signatures. A page matches when any marker selector is
# present or its URL contains one of the vendor domains; feature selectors are
# only evaluated for the matching platform.
PLATFORM_SIGNATURES = {
    "wix": {
        "label": "Wix",
        "markers": ["[data-wix-id]"],
        "domains": [".wixsite.com", ".wix.com"],
        "features": {
            "seo_panel": "[data-wix-seo]",
            "a11y": "[data-wix-a11y]",
            "static_cdn": 'script[src*="static.wixstatic.com"]',
        },
    },
}


@dataclass(frozen=True)
class PlatformHints:
    platform: Optional[str] = None
    label: Optional[str] = None
    on_vendor_domain: bool = False
    features: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def detected(self) -> bool:
        return self.platform is not None

    def is_platform(self, name: str) -> bool:
        return self.platform == name

    def has(self, feature: str) -> bool:
        return feature in self.features


NO_PLATFORM = PlatformHints()


def detect_platform(document: PageDocument) -> PlatformHints:
    url = document.url
    for name, signature in PLATFORM_SIGNATURES.items():
        on_domain = any(domain in url for domain in signature["domains"])
        has_marker = any(document.select_one(selector) is not None for selector in signature["markers"])
        if not (on_domain or has_marker):
            continue
        features = frozenset(
            feature for feature, selector in signature["features"].items()
            if document.select_one(selector) is not None
        )
        return PlatformHints(platform=name, label=signature["label"], on_vendor_domain=on_domain, features=features)
    return NO_PLATFORM
