"""Performance hints package.

Provides `PerformanceAnalyzer`: image loading, render-blocking resources,
DOM size/depth and third-party script volume.
"""

from .analyzer import PerformanceAnalyzer
