# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json


# One-line messages at least this long are wrapped over four lines
MAXWIDTH = 80


def to_display(value):
    "Canonical string rendering of a value, used for display and key ordering."
    return str(value)


def quote(text):
    "Double quote and escape text, keeping printable non-ASCII characters."
    return json.dumps(text, ensure_ascii=False)


def type_name(value):
    return type(value).__name__


def quoted_display(value, with_type=False):
    s = quote(to_display(value))
    if with_type:
        s = "%s(type %s)" % (s, type_name(value))
    return s


def format_mismatch(prefix, name, expected, actual, with_types=False, wrap_width=MAXWIDTH):
    """Describe a mismatch of two values that cannot be diffed structurally.

    The message reads `<name> is expected to be "X", but got "Y"`, and is
    split over several lines when it would be `wrap_width` wide or wider.
    """
    exp_msg = quoted_display(expected, with_types)
    act_msg = quoted_display(actual, with_types)
    msg = "%s%s is expected to be %s, but got %s" % (prefix, name, exp_msg, act_msg)
    if len(msg) >= wrap_width:
        msg = "%s%s is expected to be\n  %s\nbut got\n  %s" % (prefix, name, exp_msg, act_msg)
    return msg
