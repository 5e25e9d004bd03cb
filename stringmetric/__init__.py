"""
Weighted edit distances between two symbol sequences.

    from stringmetric import levenshtein, damerau_levenshtein

    levenshtein.distance("hello", "hlelo")          → 2.0
    damerau_levenshtein.distance("hello", "hlelo")  → 1.0
    levenshtein.similarity("book", "back")          → 0.5

Every operation takes optional cost tables; a missing table or key costs 1.0.
"""

from stringmetric import damerau_levenshtein, levenshtein
from stringmetric.costs import DEFAULT_COST, NegativeCostError

__version__ = "0.1.0"
__all__ = [
    "levenshtein",
    "damerau_levenshtein",
    "DEFAULT_COST",
    "NegativeCostError",
]
