"""Security posture package.

Provides `SecurityAnalyzer`: transport security, mixed content, unsafe
new-window links, CSP, inline handlers and insecure forms.
"""

from .analyzer import SecurityAnalyzer
