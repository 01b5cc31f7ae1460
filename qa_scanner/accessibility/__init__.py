"""Accessibility analysis package.

Provides `AccessibilityAnalyzer`: alt text, form labels, accessible names,
landmarks and keyboard order.
"""

from .analyzer import AccessibilityAnalyzer
