# Points deducted from 100 for each finding, by severity value
SEVERITY_PENALTIES = {"critical": 15, "warning": 7, "info": 2}


def _severity_value(severity) -> str:
    return getattr(severity, "value", severity)


def score_issues(issues) -> int:
    """Linear, order-independent penalty score clamped to [0, 100]."""
    score = 100
    for issue in issues:
        score -= SEVERITY_PENALTIES.get(_severity_value(issue.severity), 0)
    return max(0, min(100, score))
