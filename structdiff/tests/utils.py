# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from structdiff.diffing.alignment import UNMATCHED


def bruteforce_llcs(A, B):
    "Brute force compute the length of the longest common subsequence of A and B."
    N, M = len(A), len(B)
    R = [[0]*(M+1) for i in range(N+1)]
    for x in range(1, N+1):
        for y in range(1, M+1):
            if A[x-1] == B[y-1]:
                R[x][y] = R[x-1][y-1] + 1
            else:
                R[x][y] = max(R[x-1][y], R[x][y-1])
    return R[N][M]


def random_sequence(rng, max_length, alphabet="abcd"):
    return [rng.choice(alphabet) for _ in range(rng.randint(0, max_length))]


def check_alignment_consistent(alignment, N, M):
    "Check that an alignment is a non-crossing partial matching of N and M elements."
    exp_matches, act_matches = alignment.expected_matches, alignment.actual_matches
    assert len(exp_matches) == N
    assert len(act_matches) == M
    for i, j in enumerate(exp_matches):
        if j != UNMATCHED:
            assert 0 <= j < M
            assert act_matches[j] == i
    for j, i in enumerate(act_matches):
        if i != UNMATCHED:
            assert exp_matches[i] == j
    pairs = list(alignment.pairs())
    for (i1, j1), (i2, j2) in zip(pairs, pairs[1:]):
        assert i1 < i2
        assert j1 < j2


def alignment_cost(alignment, cost_model):
    "Recompute the total cost of an alignment from its matching."
    sub, ins, dele = cost_model
    cost = 0
    for i, j in enumerate(alignment.expected_matches):
        cost += dele(i) if j == UNMATCHED else sub(i, j)
    for j, i in enumerate(alignment.actual_matches):
        if i == UNMATCHED:
            cost += ins(j)
    return cost


def logged_lines(out):
    return out.getvalue().splitlines()
