"""Classic algorithms and data structures: sorting, string search, bracket
checking, graphs, disjoint sets and B-trees, with a small command line."""

__version__ = "0.1.0"

__all__ = [
    "brackets",
    "btree",
    "cli",
    "disjoint_set",
    "graphs",
    "kmp",
    "sorting",
]