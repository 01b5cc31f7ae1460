from ..base_module import QAModule
from .transport import check_https, check_mixed_content, check_insecure_forms
from .markup import (
    check_new_window_links,
    check_content_security_policy,
    check_inline_event_handlers,
    check_password_autocomplete,
)


class SecurityAnalyzer(QAModule):
    """Checks transport security and risky markup patterns."""

    category_key = "security"

    def sub_checks(self):
        return [
            check_https,
            check_mixed_content,
            check_new_window_links,
            check_content_security_policy,
            check_inline_event_handlers,
            check_insecure_forms,
            check_password_autocomplete,
        ]
