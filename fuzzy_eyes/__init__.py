"""FuzzyEyes: a 20-20-20 break reminder."""

__version__ = "1.0.0"
