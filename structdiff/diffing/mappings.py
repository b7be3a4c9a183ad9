# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from ..diff_format import DiffReportBuilder, DiffUnit
from ..formatting import to_display
from ..log import debug

__all__ = ["MappingKeyDiff", "collect_sorted_keys", "classify_mapping_keys",
           "diff_mapping_lines", "diff_mappings"]


MappingKeyDiff = namedtuple("MappingKeyDiff", ("extra", "changed", "missing"))


def collect_sorted_keys(mapping):
    """Collect the keys of a mapping sorted by their string rendering.

    Keys with identical renderings keep the iteration order of the mapping.
    Returns two lists (keys, key_strs).
    """
    pairs = sorted(((to_display(k), k) for k in mapping),
                   key=lambda pair: pair[0])
    keys = [k for _, k in pairs]
    key_strs = [s for s, _ in pairs]
    return keys, key_strs


def classify_mapping_keys(expected, actual):
    """Classify the keys of two mappings as extra, changed or missing.

    Keys are merge-joined on their string renderings. Distinct keys may
    render identically and equal keys may render differently (1 and 1.0),
    so every key is looked up in the other mapping by true equality, and
    only equal keys are ever paired. A key shared by both mappings is
    classified once, from the expected side.
    Items not mentioned are keys in both mappings with equal values.
    """
    exp_keys, exp_key_strs = collect_sorted_keys(expected)
    act_keys, act_key_strs = collect_sorted_keys(actual)

    extra = []
    changed = []
    missing = []

    def expected_key(key):
        if key not in actual:
            missing.append(key)
        elif expected[key] != actual[key]:
            changed.append(key)

    def actual_key(key):
        if key not in expected:
            extra.append(key)

    N, M = len(exp_keys), len(act_keys)
    i, j = 0, 0
    while i < N and j < M:
        if exp_key_strs[i] < act_key_strs[j]:
            expected_key(exp_keys[i])
            i += 1
        elif exp_key_strs[i] > act_key_strs[j]:
            actual_key(act_keys[j])
            j += 1
        else:
            key_str = exp_key_strs[i]
            # Keys with equal renderings, not necessarily equal keys
            while i < N and exp_key_strs[i] == key_str:
                expected_key(exp_keys[i])
                i += 1
            while j < M and act_key_strs[j] == key_str:
                actual_key(act_keys[j])
                j += 1
    for key in exp_keys[i:]:
        expected_key(key)
    for key in act_keys[j:]:
        actual_key(key)

    debug("Classified mapping keys: %d missing, %d changed, %d extra",
          len(missing), len(changed), len(extra))
    return MappingKeyDiff(extra, changed, missing)


def is_set_marker(value):
    "Values that only mark membership, i.e. the mapping is used as a set."
    return value is None or (isinstance(value, tuple) and not value)


def value_display(value):
    if is_set_marker(value):
        return None
    return to_display(value)


def diff_mapping_lines(classified, expected, actual, builder):
    """Emit the diff lines for classified keys into builder.

    Missing keys come first, then changed keys as removed/added pairs,
    then extra keys.
    """
    for key in classified.missing:
        builder.remove(to_display(key), value_display(expected[key]))
    for key in classified.changed:
        builder.replace(to_display(key),
                        value_display(expected[key]),
                        value_display(actual[key]))
    for key in classified.extra:
        builder.add(to_display(key), value_display(actual[key]))
    return builder


def diff_mappings(expected, actual, name="", config=None):
    """Diff two mappings key by key.

    Returns a DiffReport counting entries, without diff lines if the
    mappings have equal keys with equal values.
    """
    classified = classify_mapping_keys(expected, actual)
    di = DiffReportBuilder(name, DiffUnit.ENTRIES, len(expected), len(actual))
    diff_mapping_lines(classified, expected, actual, di)
    return di.validated()
