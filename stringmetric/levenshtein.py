"""
Weighted Levenshtein distance (deletion, insertion, substitution).

    distance("kitten", "sitting")                          -> 3.0
    distance("a", "ab", insertion_costs={'b': 2.0})        -> 2.0
    similarity("book", "back")                             -> 0.5

Symbols are whatever indexing the input yields: code points for ``str``,
integers for ``bytes``.
"""

import logging

import numpy as np

from stringmetric.costs import (
    normalized_similarity,
    pair_costs,
    reversed_pairs,
    symbol_costs,
    to_symbols,
)

logger = logging.getLogger(__name__)


def _distance(s1, s2, delete, insert, substitute):
    """
    Rolling-row DP over the (len1 + 1) x (len2 + 1) grid.
    Only two rows of the shorter input's length are kept alive.
    """
    if len(s2) > len(s1):
        # Same grid read column-wise: s2 -> s1 turns insertions into deletions
        s1, s2 = s2, s1
        delete, insert = insert, delete
        substitute = reversed_pairs(substitute)

    len1 = len(s1)
    len2 = len(s2)

    # Row 0 and column 0 count edits against the empty prefix at default cost
    previous = np.arange(len2 + 1, dtype=float)
    current = np.empty(len2 + 1, dtype=float)

    for i in range(1, len1 + 1):
        char_i = s1[i - 1]
        delete_cost = delete(char_i)
        current[0] = i

        for j in range(1, len2 + 1):
            char_j = s2[j - 1]

            if char_i == char_j:
                current[j] = previous[j - 1]
            else:
                current[j] = min(
                    previous[j] + delete_cost,
                    current[j - 1] + insert(char_j),
                    previous[j - 1] + substitute(char_i, char_j)
                )

        previous, current = current, previous

    return float(previous[len2])


def distance(
    str1,
    str2,
    deletion_costs=None,
    insertion_costs=None,
    substitution_costs=None
):
    """
    Calculates the weighted Levenshtein distance from ``str1`` to ``str2``.

    :param str1: source sequence, None is treated as empty
    :param str2: target sequence, None is treated as empty
    :param deletion_costs: dict {symbol: cost, ...} or None (default 1.0)
    :param insertion_costs: dict {symbol: cost, ...} or None (default 1.0)
    :param substitution_costs: dict {(from_symbol, to_symbol): cost, ...} or None (default 1.0)
    :raises NegativeCostError: if any table holds a negative cost
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    result = _distance(
        s1,
        s2,
        symbol_costs(deletion_costs),
        symbol_costs(insertion_costs),
        pair_costs(substitution_costs)
    )
    logger.debug("levenshtein distance len1=%d len2=%d -> %s", len(s1), len(s2), result)
    return result

lev = distance


def similarity(
    str1,
    str2,
    deletion_costs=None,
    insertion_costs=None,
    substitution_costs=None
):
    """
    Normalized Levenshtein similarity in [0, 1].

    The tables may be asymmetric, so the distance is taken in both
    directions and the cheaper one is divided by the longer length.
    Two empty (or None) inputs give 1.0.
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0

    delete = symbol_costs(deletion_costs)
    insert = symbol_costs(insertion_costs)
    substitute = pair_costs(substitution_costs)

    best = min(
        _distance(s1, s2, delete, insert, substitute),
        _distance(s2, s1, delete, insert, substitute)
    )
    return normalized_similarity(best, max_length)


def symmetric_distance(
    str1,
    str2,
    deletion_and_insertion_costs=None,
    substitution_costs=None
):
    """
    Levenshtein distance with symmetric cost tables.

    :param deletion_and_insertion_costs: dict {symbol: cost, ...}, used for both
        deleting and inserting a symbol
    :param substitution_costs: dict {(symbol_a, symbol_b): cost, ...}, looked up
        in both orders before defaulting to 1.0
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    indel = symbol_costs(deletion_and_insertion_costs)
    result = _distance(s1, s2, indel, indel, pair_costs(substitution_costs, symmetric=True))
    logger.debug("symmetric levenshtein distance len1=%d len2=%d -> %s", len(s1), len(s2), result)
    return result


def symmetric_similarity(
    str1,
    str2,
    deletion_and_insertion_costs=None,
    substitution_costs=None
):
    """Like ``similarity`` but for symmetric tables, so one direction suffices."""
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0
    return normalized_similarity(
        symmetric_distance(s1, s2, deletion_and_insertion_costs, substitution_costs),
        max_length
    )
