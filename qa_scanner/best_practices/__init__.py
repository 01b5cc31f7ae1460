"""Best-practices package.

Provides `BestPracticesAnalyzer` orchestrating document hygiene and
installability checks.
"""

from .analyzer import BestPracticesAnalyzer
