"""Mobile-friendliness package.

Provides `MobileAnalyzer`: viewport configuration, touch target sizing,
horizontal overflow and legible text sizes.
"""

from .analyzer import MobileAnalyzer
