"""
Cost-table handling shared by the edit-distance engines.

Cost tables are plain mappings:

    single symbol  {'a': 0.5, ...}          deletion / insertion
    symbol pair    {('a', 'b'): 0.25, ...}  substitution / transposition

A missing key, an empty mapping and ``None`` all fall back to ``DEFAULT_COST``.
Tables are checked and turned into lookup callables once per public call,
so the DP loops only ever see ``lookup(symbol)`` / ``lookup(a, b)``.
"""

import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_COST = 1.0


class NegativeCostError(ValueError):
    """Raised when a cost table holds a negative (or NaN) cost."""

    def __init__(self, key, cost):
        self.key = key
        self.cost = cost
        super().__init__(f"cost for {key!r} must be a non-negative number, got {cost!r}")


def to_symbols(value):
    """
    Coerces an input sequence for the DP loops.
    ``None`` -> empty tuple; ``str`` yields code points, ``bytes`` yields ints.
    """
    if value is None:
        return ()
    if isinstance(value, (str, bytes, bytearray, tuple, list)):
        return value
    return tuple(value)


def _default_symbol_cost(symbol):
    return DEFAULT_COST


def _default_pair_cost(first, second):
    return DEFAULT_COST


def _validated(table, kind):
    """Copies ``table`` into a dict of floats, rejecting negative costs."""
    if table is None:
        return {}
    if not isinstance(table, Mapping):
        raise TypeError(f"{kind} cost table must be a mapping, got {type(table).__name__}")

    costs = {}
    for key, cost in table.items():
        cost = float(cost)
        # NaN fails this comparison as well
        if not cost >= 0.0:
            raise NegativeCostError(key, cost)
        costs[key] = cost

    if costs:
        logger.debug("normalized %s cost table with %d override(s)", kind, len(costs))
    return costs


def symbol_costs(table):
    """
    Normalizes an optional single-symbol table into ``lookup(symbol) -> cost``.

    :param table: mapping {symbol: cost, ...} or None
    """
    costs = _validated(table, "symbol")
    if not costs:
        return _default_symbol_cost

    def lookup(symbol):
        return costs.get(symbol, DEFAULT_COST)

    return lookup


def pair_costs(table, symmetric=False):
    """
    Normalizes an optional symbol-pair table into ``lookup(a, b) -> cost``.

    :param table: mapping {(symbol_a, symbol_b): cost, ...} or None
    :param symmetric: also try ``(b, a)`` before falling back to the default
    """
    costs = _validated(table, "pair")
    if not costs:
        return _default_pair_cost

    if symmetric:
        def lookup(first, second):
            cost = costs.get((first, second))
            if cost is None:
                cost = costs.get((second, first), DEFAULT_COST)
            return cost
    else:
        def lookup(first, second):
            return costs.get((first, second), DEFAULT_COST)

    return lookup


def reversed_pairs(lookup):
    """Wraps a pair lookup so that ``(a, b)`` is answered with the cost of ``(b, a)``."""
    if lookup is _default_pair_cost:
        return lookup

    def swapped(first, second):
        return lookup(second, first)

    return swapped


def normalized_similarity(distance, max_length):
    """
    Turns a distance into a similarity in [0, 1].
    Two empty inputs are identical, hence 1.0.
    """
    if max_length == 0:
        return 1.0
    similarity = 1.0 - distance / max_length
    # overrides above DEFAULT_COST can exceed max_length
    return min(1.0, max(0.0, similarity))
