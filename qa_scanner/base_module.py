# qa_scanner/base_module.py
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Optional, Union

from bs4 import Tag

from .document import PageDocument
from .findings import CategoryResult, Finding
from .platform import NO_PLATFORM, PlatformHints

# A sub-check returns one Finding, one pass message, or nothing
CheckOutcome = Optional[Union[Finding, str]]
SubCheck = Callable[[PageDocument], CheckOutcome]


class QAModule(ABC):
    """
    Abstract base class for all category analyzers.
    Each analyzer declares its battery of sub-checks and the report key it fills.
    """

    category_key: str = ""

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}
        self.global_config = self.config.get("Global", {})

    @abstractmethod
    def sub_checks(self) -> Iterable[SubCheck]:
        """
        Returns the standard sub-checks for this category, in evaluation order.

        Every sub-check is a callable taking the PageDocument and returning a
        Finding, a pass message, or None when its precondition does not apply.
        """

    def platform_checks(self, hints: PlatformHints) -> Iterable[SubCheck]:
        """Supplementary checks for a detected site-builder platform. Additive only."""
        return ()

    def analyze(self, document: PageDocument, hints: PlatformHints = NO_PLATFORM) -> CategoryResult:
        issues = []
        passes = []
        for check in list(self.sub_checks()) + list(self.platform_checks(hints)):
            outcome = self._run_check(check, document)
            if isinstance(outcome, Finding):
                issues.append(outcome)
            elif isinstance(outcome, str):
                passes.append(outcome)
        return CategoryResult(issues=issues, passes=passes)

    def _run_check(self, check: SubCheck, document: PageDocument) -> CheckOutcome:
        # A malformed fragment only costs its own sub-check
        try:
            return check(document)
        except Exception as e:
            if self.global_config.get("debug"):
                name = getattr(check, "__name__", repr(check))
                print(f"Sub-check {name} failed in {self.module_name} for {document.url}: {e}")
            return None

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name


def find_favicon(document: PageDocument) -> Optional[Tag]:
    """
    Returns the declared favicon link, if any.
    Only explicit icon declarations count; a bare /favicon.ico on the server is not requested.
    """
    return document.select_one('link[rel="icon"], link[rel="shortcut icon"]')
