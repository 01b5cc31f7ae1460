import math
from typing import Any, Dict, Optional

SEVERITY_LEVELS = ("critical", "warning", "info")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def overall_score(report) -> Optional[int]:
    """Unweighted mean of the category scores present in the report.

    Absent categories mean "no data" and are left out of the mean rather than
    counted as zero. Returns None when the report has no categories at all.
    """
    scores = [result.score for result in report.categories.values()]
    if not scores:
        return None
    return _round_half_up(sum(scores) / len(scores))


def issue_counts(report) -> Dict[str, int]:
    counts = {level: sum(result.count(level) for result in report.categories.values()) for level in SEVERITY_LEVELS}
    return {"total": sum(counts.values()), **counts}


def summarize_report(report) -> Dict[str, Any]:
    return {
        "url": report.url,
        "timestamp": report.timestamp,
        "overall_score": overall_score(report),
        "issue_counts": issue_counts(report),
        "category_scores": {key: result.score for key, result in report.categories.items()},
        "passes": sum(len(result.passes) for result in report.categories.values()),
    }
