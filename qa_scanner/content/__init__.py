"""Content quality package.

Provides `ContentAnalyzer` orchestrating text volume, broken media,
link hygiene and document identity checks.
"""

from .analyzer import ContentAnalyzer
