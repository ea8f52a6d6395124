"""Video Review Analyzer: turns vision annotations or AI critiques into a review quality report."""

__version__ = "0.1.0"
