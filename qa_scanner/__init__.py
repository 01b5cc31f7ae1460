"""Single-page quality scanner.

`QAScanner` runs the seven category analyzers against one `PageDocument`
snapshot and returns an immutable `Report`.
"""

from .document import PageDocument, RenderMetrics
from .engine import QAScanner
from .errors import DocumentUnavailableError, QAScannerError
from .findings import CATEGORY_KEYS, CategoryResult, Finding, Report, Severity

__version__ = "1.0.0"
