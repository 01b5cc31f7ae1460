"""Scoring package.

`score_issues` turns one category's findings into a 0-100 score; the
report-level helpers derive the overall score and issue counts.
"""

from .scorer import SEVERITY_PENALTIES, score_issues
from .summary import issue_counts, overall_score, summarize_report
