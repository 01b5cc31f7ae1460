"""Metadata / SEO analysis package.

Provides `OnPageAnalyzer` which orchestrates the title, description,
heading, image and social-meta checks implemented in sibling modules.
"""

from .analyzer import OnPageAnalyzer
