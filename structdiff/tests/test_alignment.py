# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import random

import pytest

from structdiff.diffing.alignment import (
    CostModel, UNMATCHED, align, alignment_cost_grid, unit_cost_model)
from structdiff.diffing.config import DiffConfig
from structdiff.log import CostModelError

from .utils import (
    alignment_cost, bruteforce_llcs, check_alignment_consistent, random_sequence)


def unit_align(a, b, config=None):
    return align(len(a), len(b), unit_cost_model(a, b, config=config))


def test_align_empty():
    al = unit_align([], [])
    assert al.cost == 0
    assert al.expected_matches == []
    assert al.actual_matches == []

    al = unit_align([], ["x", "y", "z"])
    assert al.cost == 3
    assert al.expected_matches == []
    assert al.actual_matches == [UNMATCHED]*3

    al = unit_align(["x", "y"], [])
    assert al.cost == 2
    assert al.expected_matches == [UNMATCHED]*2
    assert al.actual_matches == []


def test_align_changed_element_is_paired():
    al = unit_align(["1", "2"], ["3", "2"])
    assert al.cost == 2
    assert al.expected_matches == [0, 1]
    assert al.actual_matches == [0, 1]
    assert list(al.pairs()) == [(0, 0), (1, 1)]


def test_align_prefers_substitution_on_ties():
    # Pairing costs 2, the same as deleting and inserting
    al = unit_align(["a"], ["b"])
    assert al.cost == 2
    assert al.expected_matches == [0]
    assert al.actual_matches == [0]

    al = unit_align(["a", "b", "c"], ["x", "y", "z"])
    assert al.cost == 6
    assert al.expected_matches == [0, 1, 2]


def test_align_prefers_deletion_over_insertion():
    al = unit_align(["a", "b"], ["b", "a"])
    assert al.cost == 2
    assert al.expected_matches == [1, UNMATCHED]
    assert al.actual_matches == [UNMATCHED, 0]


def test_align_insertions_and_deletions():
    al = unit_align(["a", "b"], ["b"])
    assert al.cost == 1
    assert al.expected_matches == [UNMATCHED, 0]

    al = unit_align(["a"], ["a", "b"])
    assert al.cost == 1
    assert al.actual_matches == [0, UNMATCHED]

    al = unit_align(list("abcab"), list("ayb"))
    assert al.cost == 4
    check_alignment_consistent(al, 5, 3)


def test_align_with_custom_cost_model():
    # Free substitutions pair everything up, diagonal moves are taken from the end
    model = CostModel(lambda i, j: 0, lambda j: 1, lambda i: 1)
    al = align(3, 5, model)
    assert al.cost == 2
    assert al.expected_matches == [2, 3, 4]
    assert al.actual_matches == [UNMATCHED, UNMATCHED, 0, 1, 2]


def test_align_with_configured_costs():
    config = DiffConfig(substitution_cost=1, indel_cost=1)
    al = unit_align(["a", "b"], ["x", "b"], config=config)
    assert al.cost == 1
    assert al.expected_matches == [0, 1]


def test_cost_grid_borders():
    model = CostModel(lambda i, j: 2, lambda j: 1, lambda i: 3)
    D = alignment_cost_grid(2, 3, model)
    assert [row[0] for row in D] == [0, 3, 6]
    assert D[0] == [0, 1, 2, 3]


def test_align_rejects_negative_costs():
    with pytest.raises(CostModelError):
        align(2, 2, CostModel(lambda i, j: -1, lambda j: 1, lambda i: 1))
    with pytest.raises(CostModelError):
        align(2, 0, CostModel(lambda i, j: 0, lambda j: 1, lambda i: -1))
    with pytest.raises(CostModelError):
        align(0, 2, CostModel(lambda i, j: 0, lambda j: -1, lambda i: 1))


def test_align_rejects_negative_lengths():
    with pytest.raises(ValueError):
        align(-1, 0, CostModel(lambda i, j: 0, lambda j: 1, lambda i: 1))


@pytest.mark.parametrize('seed', range(20))
def test_align_random_sequences(seed):
    rng = random.Random(seed)
    for _ in range(10):
        a = random_sequence(rng, 12)
        if rng.random() < 0.3:
            b = [rng.choice("abcd") for _ in a]
        else:
            b = random_sequence(rng, 12)
        model = unit_cost_model(a, b)
        al = align(len(a), len(b), model)

        check_alignment_consistent(al, len(a), len(b))
        assert al.cost == alignment_cost(al, model)
        # With substitution at twice the indel cost, only equal pairs save anything
        assert al.cost == len(a) + len(b) - 2*bruteforce_llcs(a, b)

        # Swapping sides gives the same total cost
        swapped = align(len(b), len(a), unit_cost_model(b, a))
        assert swapped.cost == al.cost
