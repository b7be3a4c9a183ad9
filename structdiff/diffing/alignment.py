# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import operator

from ..log import CostModelError, debug
from .config import DiffConfig

__all__ = ["CostModel", "Alignment", "UNMATCHED", "align", "unit_cost_model"]


# Sentinel position for an element without a partner
UNMATCHED = -1


CostModel = namedtuple("CostModel", ("substitution", "insertion", "deletion"))
CostModel.__doc__ = """Pairwise costs of an alignment.

substitution(i, j) is the cost of pairing expected[i] with actual[j],
insertion(j) the cost of leaving actual[j] unmatched and deletion(i)
the cost of leaving expected[i] unmatched.
"""


class Alignment(namedtuple("Alignment", ("cost", "expected_matches", "actual_matches"))):
    """Non-crossing partial matching of two sequences.

    expected_matches[i] is the position in actual paired with expected[i],
    or UNMATCHED, and symmetrically for actual_matches.
    """

    __slots__ = ()

    def pairs(self):
        "Yield the matched (i, j) pairs in increasing order."
        for i, j in enumerate(self.expected_matches):
            if j != UNMATCHED:
                yield i, j


def unit_cost_model(expected, actual, compare=operator.__eq__, config=None):
    """The cost model for diffing sequences of comparable elements.

    Pairing equal elements is free, pairing unequal ones costs
    config.substitution_cost and leaving an element out costs
    config.indel_cost.
    """
    if config is None:
        config = DiffConfig(compare=compare)
    sub = config.substitution_cost
    indel = config.indel_cost

    def substitution(i, j):
        return 0 if compare(expected[i], actual[j]) else sub

    def indel_cost(k):
        return indel

    return CostModel(substitution, indel_cost, indel_cost)


def _checked(cost, what, *args):
    if cost < 0:
        raise CostModelError("Negative %s cost %r at %r" % (what, cost, args))
    return cost


def alignment_cost_grid(N, M, cost_model):
    "Compute grid D[x][y] == minimal cost of aligning expected[:x] with actual[:y]."
    sub, ins, dele = cost_model

    D = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        D[x][0] = D[x-1][0] + _checked(dele(x-1), "deletion", x-1)
    for y in range(1, M+1):
        D[0][y] = D[0][y-1] + _checked(ins(y-1), "insertion", y-1)
    for x in range(1, N+1):
        for y in range(1, M+1):
            D[x][y] = min(
                D[x-1][y-1] + _checked(sub(x-1, y-1), "substitution", x-1, y-1),
                D[x-1][y] + dele(x-1),
                D[x][y-1] + ins(y-1),
            )
    return D


def alignment_backtrace(N, M, cost_model, D):
    """Recover the matching from a cost grid.

    Returns two lists (expected_matches, actual_matches). When several moves
    reach the minimum, a diagonal move is preferred over a deletion, and a
    deletion over an insertion.
    """
    sub, ins, dele = cost_model
    expected_matches = [UNMATCHED]*N
    actual_matches = [UNMATCHED]*M
    x = N
    y = M
    while x > 0 or y > 0:
        if x > 0 and y > 0 and D[x][y] == D[x-1][y-1] + sub(x-1, y-1):
            x -= 1
            y -= 1
            expected_matches[x] = y
            actual_matches[y] = x
        elif x > 0 and D[x][y] == D[x-1][y] + dele(x-1):
            x -= 1
        else:
            assert y > 0 and D[x][y] == D[x][y-1] + ins(y-1)
            y -= 1
    return expected_matches, actual_matches


def align(N, M, cost_model):
    """Compute a minimum cost alignment of two sequences of lengths N and M.

    Uses the O(NM) global alignment algorithm, so unequal elements can be
    paired by substitution and not only skipped around exact matches.
    """
    if N < 0 or M < 0:
        raise ValueError("Sequence lengths must be non-negative, got %r and %r" % (N, M))
    D = alignment_cost_grid(N, M, cost_model)
    expected_matches, actual_matches = alignment_backtrace(N, M, cost_model, D)
    debug("Aligned %d x %d elements with cost %d", N, M, D[N][M])
    return Alignment(D[N][M], expected_matches, actual_matches)
