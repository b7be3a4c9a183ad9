# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Assertions reporting structural differences to a test sink.

A sink is any object with `error(msg)`, `log(msg)` and `fatal(msg)`
methods, e.g. structdiff.testing.WriterTB. Failed checks are reported
to the sink and return False; only `should_or_die` aborts, through the
sink's `fatal`.
"""

import inspect
import os
import sys

from .diffing import diff, diff_lines, DiffConfig
from .diffing.sequences import sequence_to_strings, split_lines
from .diffing.generic import value_kind, ValueKind
from .formatting import MAXWIDTH, format_mismatch, quote, to_display, type_name


def is_test_func_name(name):
    return name.startswith("test")


def call_position(skip=0, depth=5):
    """Describe where an assertion was called from.

    Returns a prefix like "test_foo.py:12: " for the caller of the
    function calling call_position, `skip` frames further up. Helper
    frames between the assertion and the test function are included,
    outermost first, up to `depth` frames.
    """
    try:
        frame = sys._getframe(skip + 2)
    except ValueError:
        return ""
    res = ""
    for _ in range(depth):
        if frame is None:
            break
        code = frame.f_code
        res = "%s:%d: " % (os.path.basename(code.co_filename), frame.f_lineno) + res
        if is_test_func_name(code.co_name):
            break
        frame = frame.f_back
    return res


class AssertConfig:
    """Settings for the assertion layer, passed explicitly to a Checker."""

    def __init__(self, *, include_file_position=True, position_depth=5,
                 wrap_width=MAXWIDTH, diff_config=None):
        self.include_file_position = include_file_position
        self.position_depth = position_depth
        self.wrap_width = wrap_width
        self.diff_config = diff_config if diff_config is not None else DiffConfig()

    @classmethod
    def from_config(cls, config, **kwargs):
        "Create from the flat dict returned by structdiff.config.build_config."
        for key in ("include_file_position", "position_depth", "wrap_width"):
            if key in config and key not in kwargs:
                kwargs[key] = config[key]
        if "diff_config" not in kwargs:
            kwargs["diff_config"] = DiffConfig.from_config(config)
        return cls(**kwargs)


class Checker(object):
    """Assertions bound to a test sink and a configuration.

    Every check returns True if it holds and False otherwise.
    """

    def __init__(self, tb, config=None):
        self.tb = tb
        self.config = config if config is not None else AssertConfig()

    def _pos(self, skip=0):
        # Frames: _pos, the public check, then its caller
        if not self.config.include_file_position:
            return ""
        return call_position(skip + 1, self.config.position_depth)

    def _mismatch(self, pos, name, exp, act, with_types=False):
        return format_mismatch(pos, name, exp, act, with_types=with_types,
                               wrap_width=self.config.wrap_width)

    def _report(self, pos, report):
        lines = report.render()
        self.tb.error(pos + lines[0])
        for line in lines[1:]:
            self.tb.log(line)

    def equal(self, name, act, exp):
        pos = self._pos()
        equal, report = diff(exp, act, name=name, config=self.config.diff_config)
        if equal:
            return True
        if report is not None:
            self._report(pos, report)
        else:
            with_types = type(exp) is not type(act)
            self.tb.error(self._mismatch(pos, name, exp, act, with_types))
        return False

    def not_equal(self, name, act, exp):
        if act == exp:
            self.tb.error("%s%s is not expected to be %s" % (
                self._pos(), name, quote(to_display(exp))))
            return False
        return True

    def is_true(self, name, act):
        if not act:
            self.tb.error("%s%s unexpectedly got false" % (self._pos(), name))
        return bool(act)

    def is_false(self, name, act):
        if act:
            self.tb.error("%s%s unexpectedly got true" % (self._pos(), name))
        return not act

    def should(self, vl, show_if_failed):
        if not vl:
            self.tb.error("%s%s" % (self._pos(), show_if_failed))
        return bool(vl)

    def should_or_die(self, vl, show_if_failed):
        if not vl:
            self.tb.fatal("%s%s" % (self._pos(), show_if_failed))

    def value_should(self, name, act, exp_to_func, desc_if_failed):
        """Check act against a predicate.

        exp_to_func is either a bool, taken as the result, or a callable
        taking act as its single argument and returning a bool.
        """
        pos = self._pos()
        if isinstance(exp_to_func, bool):
            succ = exp_to_func
        elif callable(exp_to_func):
            try:
                params = inspect.signature(exp_to_func).parameters
            except (TypeError, ValueError):
                params = None
            if params is not None and len(params) != 1:
                self.tb.error("%sassert: exp_to_func must have one parameter" % pos)
                return False
            succ = exp_to_func(act)
            if not isinstance(succ, bool):
                self.tb.error("%sassert: exp_to_func must return a bool" % pos)
                return False
        else:
            self.tb.error("%sassert: exp_to_func must be a func or a bool" % pos)
            return False

        if not succ:
            self.tb.error("%s%s %s: %s(type %s)" % (
                pos, name, desc_if_failed, quote(to_display(act)), type_name(act)))
        return succ

    def _lines_equal(self, pos, name, act_lines, exp_lines):
        if act_lines == exp_lines:
            return True
        report = diff_lines(exp_lines, act_lines, name=name,
                            config=self.config.diff_config)
        self._report(pos, report)
        return False

    def string_equal(self, name, act, exp):
        """Compare the string renderings of act and exp.

        If act and exp are both sequences, their elements are matched and
        any difference is presented line by line. So are renderings that
        span several lines.
        """
        pos = self._pos()
        if (value_kind(act) == ValueKind.SEQUENCE and
                value_kind(exp) == ValueKind.SEQUENCE):
            return self._lines_equal(pos, name,
                                     sequence_to_strings(act),
                                     sequence_to_strings(exp))

        act_s, exp_s = to_display(act), to_display(exp)
        if act_s == exp_s:
            return True

        if "\n" in act_s or "\n" in exp_s:
            return self._lines_equal(pos, name, split_lines(act_s), split_lines(exp_s))

        self.tb.error(self._mismatch(pos, name, exp_s, act_s))
        return False

    def no_error(self, err):
        if err is not None:
            self.tb.error("%s%s" % (self._pos(), err))
            return False
        return True

    def no_error_or_die(self, err):
        if err is not None:
            self.tb.fatal("%s%s" % (self._pos(), err))

    def error(self, err):
        if err is None:
            self.tb.error("%sExpecting error but nil got!" % self._pos())
            return False
        return True

    def panics(self, name, f):
        """Check that calling f raises an exception.

        The exception is swallowed; KeyboardInterrupt and SystemExit are not
        caught.
        """
        try:
            f()
        except Exception:
            return True
        self.tb.error("%s%s does not panic as expected." % (self._pos(), name))
        return False
