"""Competitive-programming algorithms and solved contest and olympiad problems."""

__version__ = "0.1.0"

__all__ = [
    "segment_trees",
    "text",
    "graphs",
    "dynamic",
    "search",
    "codeforces",
    "szkopul_other",
    "oi_early",
    "oi_middle",
    "oi_late",
]