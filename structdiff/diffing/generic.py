# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections.abc import Mapping

from .config import DiffConfig
from .mappings import diff_mappings
from .sequences import diff_lines

__all__ = ["diff", "value_kind", "ValueKind"]


class ValueKind:
    "The closed set of shapes a compared value can take."
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def value_kind(value):
    """Classify a value once, at the comparison boundary.

    Strings and bytes are scalars, not sequences of characters.
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def diff(expected, actual, name="", config=None):
    """Compare two values and describe how they differ.

    Returns a tuple (equal, report). The report is None when the values are
    equal, and also when they differ but have no structural diff, i.e. they
    are scalars or of different types. Sequences and mappings of the same
    type get a DiffReport.
    """
    if config is None:
        config = DiffConfig()

    # Cheap deep equality first
    if expected == actual:
        return True, None

    if type(expected) is not type(actual):
        return False, None

    kind = value_kind(expected)
    if kind == ValueKind.SEQUENCE:
        report = diff_lines(expected, actual, name=name, config=config)
    elif kind == ValueKind.MAPPING:
        report = diff_mappings(expected, actual, name=name, config=config)
    else:
        report = None
    return False, report
