"""Small programming drills: number checks, conversions, patterns, searching and sorting."""

__version__ = "0.1.0"

__all__ = ["basics", "conversions", "mathfuncs", "patterns", "searching", "sorting"]