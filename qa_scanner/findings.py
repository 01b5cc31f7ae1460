from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .scoring.scorer import score_issues

# Report keys, in the order categories are evaluated and serialized.
CATEGORY_KEYS = ("seo", "accessibility", "performance", "security", "content", "mobile", "bestPractices")


class Severity(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Impact ordering: critical outranks warning outranks info."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.CRITICAL: 3, Severity.WARNING: 2, Severity.INFO: 1}


@dataclass(frozen=True)
class Finding:
    severity: Severity
    message: str

    def __post_init__(self):
        # Accept plain strings ("warning") from JSON payloads and callers
        object.__setattr__(self, "severity", Severity(self.severity))

    @classmethod
    def critical(cls, message: str) -> "Finding":
        return cls(Severity.CRITICAL, message)

    @classmethod
    def warning(cls, message: str) -> "Finding":
        return cls(Severity.WARNING, message)

    @classmethod
    def info(cls, message: str) -> "Finding":
        return cls(Severity.INFO, message)

    def to_dict(self) -> Dict[str, str]:
        return {"severity": self.severity.value, "message": self.message}


@dataclass(frozen=True)
class CategoryResult:
    """Issues and passes produced by one analyzer. The score is derived from issues only."""

    issues: Tuple[Finding, ...] = ()
    passes: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "issues", tuple(self.issues))
        object.__setattr__(self, "passes", tuple(self.passes))

    @property
    def score(self) -> int:
        return score_issues(self.issues)

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity == severity)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "issues": [issue.to_dict() for issue in self.issues],
            "passes": list(self.passes),
            "score": self.score,
        }


@dataclass(frozen=True)
class Report:
    url: str
    timestamp: str
    categories: Mapping[str, CategoryResult] = field(default_factory=dict)

    def __post_init__(self):
        unknown = set(self.categories) - set(CATEGORY_KEYS)
        if unknown:
            raise ValueError(f"Unknown report categories: {', '.join(sorted(unknown))}")
        # Freeze into key order so serialization is stable
        ordered = {key: self.categories[key] for key in CATEGORY_KEYS if key in self.categories}
        object.__setattr__(self, "categories", MappingProxyType(ordered))

    def get(self, key: str) -> Optional[CategoryResult]:
        """Category result, or None when the report carries no data for it."""
        return self.categories.get(key)

    def __getitem__(self, key: str) -> CategoryResult:
        return self.categories[key]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"url": self.url, "timestamp": self.timestamp}
        for key, result in self.categories.items():
            data[key] = result.to_dict()
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

