# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import operator

from ..diff_format import DiffReportBuilder, DiffUnit
from ..formatting import to_display
from .alignment import UNMATCHED, align, unit_cost_model
from .config import DiffConfig

__all__ = ["diff_lines", "diff_sequence_lines", "sequence_to_strings", "split_lines"]


def sequence_to_strings(seq):
    "Render each element of a sequence to its display string."
    return [to_display(x) for x in seq]


def split_lines(text):
    "Split text on newlines, without keeping the line ends."
    return text.split("\n")


def diff_sequence_lines(expected, actual, alignment, builder, compare=operator.__eq__):
    """Emit the diff lines for two aligned sequences into builder.

    Unmatched elements of expected are removed, unmatched elements of actual
    are added, and paired elements that do not compare equal are shown as a
    removed line followed by an added line. Equal pairs are skipped.
    """
    N, M = len(expected), len(actual)
    exp_matches, act_matches = alignment.expected_matches, alignment.actual_matches
    # i,j = how many elements we have consumed from expected and actual
    i = 0
    j = 0
    while i < N or j < M:
        if j >= M or (i < N and exp_matches[i] == UNMATCHED):
            builder.remove(i + 1, to_display(expected[i]))
            i += 1
        elif i >= N or act_matches[j] == UNMATCHED:
            builder.add(j + 1, to_display(actual[j]))
            j += 1
        else:
            assert exp_matches[i] == j, "Sanity check failed: crossing alignment"
            if not compare(expected[i], actual[j]):
                builder.replace(i + 1, to_display(expected[i]), to_display(actual[j]),
                                actual_key=j + 1)
            i += 1
            j += 1
    return builder


def diff_lines(expected, actual, name="", config=None):
    """Diff two sequences element by element.

    Returns a DiffReport counting lines, without diff lines if all elements
    compare equal.
    """
    if config is None:
        config = DiffConfig()
    compare = config.compare

    alignment = align(len(expected), len(actual),
                      unit_cost_model(expected, actual, compare, config))

    di = DiffReportBuilder(name, DiffUnit.LINES, len(expected), len(actual))
    diff_sequence_lines(expected, actual, alignment, di, compare)
    return di.validated()
