"""
Weighted Damerau-Levenshtein distance, restricted ("optimal string
alignment") form: deletion, insertion, substitution and the swap of two
adjacent symbols. A swapped pair is never edited again afterwards.

    distance("hello", "hlelo")                                   -> 1.0
    distance("hello", "hlelo", transposition_costs={('e', 'l'): 0.5}) -> 0.5
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


def _distance(s1, s2, delete, insert, substitute, transpose):
    """
    DP over three rolling rows: current, previous and two rows back.
    Transposition lookups use the ordered pair (earlier, later) of ``s1``.
    """
    if len(s2) > len(s1):
        s1, s2 = s2, s1
        delete, insert = insert, delete
        substitute = reversed_pairs(substitute)
        # adjacent pairs of the new s1 are the reverse of the old ones
        transpose = reversed_pairs(transpose)

    len1 = len(s1)
    len2 = len(s2)

    two_back = np.empty(len2 + 1, dtype=float)
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
                continue

            # 1. Delete, 2. Insert, 3. Substitute
            cost = min(
                previous[j] + delete_cost,
                current[j - 1] + insert(char_j),
                previous[j - 1] + substitute(char_i, char_j)
            )

            # 4. Transpose
            if i > 1 and j > 1:
                prev_char_i = s1[i - 2]
                if char_i == s2[j - 2] and prev_char_i == char_j:
                    cost = min(cost, two_back[j - 2] + transpose(prev_char_i, char_i))

            current[j] = cost

        two_back, previous, current = previous, current, two_back

    return float(previous[len2])


def distance(
    str1,
    str2,
    deletion_costs=None,
    insertion_costs=None,
    substitution_costs=None,
    transposition_costs=None
):
    """
    Calculates the weighted Damerau-Levenshtein distance from ``str1`` to ``str2``.

    :param deletion_costs: dict {symbol: cost, ...} or None (default 1.0)
    :param insertion_costs: dict {symbol: cost, ...} or None (default 1.0)
    :param substitution_costs: dict {(from_symbol, to_symbol): cost, ...} or None (default 1.0)
    :param transposition_costs: dict {(earlier, later): cost, ...} or None (default 1.0),
        keyed by the adjacent pair as it appears in ``str1``
    :raises NegativeCostError: if any table holds a negative cost
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    result = _distance(
        s1,
        s2,
        symbol_costs(deletion_costs),
        symbol_costs(insertion_costs),
        pair_costs(substitution_costs),
        pair_costs(transposition_costs)
    )
    logger.debug("damerau-levenshtein distance len1=%d len2=%d -> %s", len(s1), len(s2), result)
    return result

dam_lev = distance
osa = distance


def similarity(
    str1,
    str2,
    deletion_costs=None,
    insertion_costs=None,
    substitution_costs=None,
    transposition_costs=None
):
    """
    Normalized Damerau-Levenshtein similarity in [0, 1], computed from the
    cheaper of both directions. Two empty (or None) inputs give 1.0.
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0

    tables = (
        symbol_costs(deletion_costs),
        symbol_costs(insertion_costs),
        pair_costs(substitution_costs),
        pair_costs(transposition_costs),
    )
    best = min(_distance(s1, s2, *tables), _distance(s2, s1, *tables))
    return normalized_similarity(best, max_length)


def symmetric_distance(
    str1,
    str2,
    deletion_and_insertion_costs=None,
    substitution_costs=None,
    transposition_costs=None
):
    """
    Damerau-Levenshtein distance with symmetric cost tables: one table for
    deletion and insertion, pair tables looked up in both orders.
    """
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    indel = symbol_costs(deletion_and_insertion_costs)
    result = _distance(
        s1,
        s2,
        indel,
        indel,
        pair_costs(substitution_costs, symmetric=True),
        pair_costs(transposition_costs, symmetric=True)
    )
    logger.debug(
        "symmetric damerau-levenshtein distance len1=%d len2=%d -> %s", len(s1), len(s2), result
    )
    return result


def symmetric_similarity(
    str1,
    str2,
    deletion_and_insertion_costs=None,
    substitution_costs=None,
    transposition_costs=None
):
    s1 = to_symbols(str1)
    s2 = to_symbols(str2)
    max_length = max(len(s1), len(s2))
    if max_length == 0:
        return 1.0
    return normalized_similarity(
        symmetric_distance(s1, s2, deletion_and_insertion_costs, substitution_costs, transposition_costs),
        max_length
    )
