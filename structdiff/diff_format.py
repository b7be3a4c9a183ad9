# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple

from .formatting import quote
from .log import StructDiffFormatError


# Fixed second line of every report
HEADER = "  Difference(expected ---  actual +++)"

# Indentation of the individual difference lines
IND = "    "


class DiffLine(dict):
    """For internal usage in structdiff library.

    Minimal class providing attribute access to diff line keys.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        return self[name]

    def __setattr__(self, name, value):
        self[name] = value


class DiffOp:
    "Collection of valid values for the op field in diff lines."
    REMOVE = "remove"
    ADD = "add"


class DiffUnit:
    "What a report counts in its summary line."
    LINES = "lines"
    ENTRIES = "entries"


MARKERS = {
    DiffOp.REMOVE: "---",
    DiffOp.ADD: "+++",
}


def op_remove(key, value):
    "Create a diff line for a value only (or differently) present in expected."
    return DiffLine(op=DiffOp.REMOVE, key=key, value=value)

def op_add(key, value):
    "Create a diff line for a value only (or differently) present in actual."
    return DiffLine(op=DiffOp.ADD, key=key, value=value)


class DiffReport(namedtuple('DiffReport', (
        'name', 'unit', 'expected_count', 'actual_count', 'lines'))):
    """Immutable result of a structural diff, ready for display.

    `lines` is a tuple of DiffLine in emission order. For sequence
    reports the keys are 1-based positions and the values the element
    renderings; for mapping reports the keys are key renderings and the
    values are value renderings, or None when the value is not shown.
    """

    __slots__ = ()

    def __bool__(self):
        return bool(self.lines)

    def summary(self):
        title = "Unexpected %s: " % (self.name,)
        if self.expected_count == self.actual_count:
            return "%sboth %d %s" % (title, self.expected_count, self.unit)
        return "%sexp %d, act %d %s" % (
            title, self.expected_count, self.actual_count, self.unit)

    def format_line(self, line):
        marker = MARKERS[line.op]
        if self.unit == DiffUnit.LINES:
            return "%s%s %3d: %s" % (IND, marker, line.key, quote(line.value))
        if line.value is None:
            return "%s%s %s" % (IND, marker, quote(line.key))
        return "%s%s %s: %s" % (IND, marker, quote(line.key), quote(line.value))

    def render(self):
        "Return the report as a list of text lines."
        output = [self.summary(), HEADER]
        output.extend(self.format_line(line) for line in self.lines)
        return output

    def removed(self):
        return [line for line in self.lines if line.op == DiffOp.REMOVE]

    def added(self):
        return [line for line in self.lines if line.op == DiffOp.ADD]


class DiffReportBuilder(object):

    # Valid values for the op field in diff lines
    OPS = (
        DiffOp.REMOVE,
        DiffOp.ADD,
        )

    def __init__(self, name, unit, expected_count, actual_count):
        self.name = name
        self.unit = unit
        self.expected_count = expected_count
        self.actual_count = actual_count
        self._lines = []

    def validated(self):
        report = DiffReport(
            self.name, self.unit,
            self.expected_count, self.actual_count,
            tuple(self._lines))
        validate_report(report)
        return report

    def append(self, line):
        # Typechecking (just for internal consistency checking)
        assert isinstance(line, DiffLine)
        assert line.op in DiffReportBuilder.OPS
        self._lines.append(line)

    def remove(self, key, value):
        self.append(op_remove(key, value))

    def add(self, key, value):
        self.append(op_add(key, value))

    def replace(self, key, expected_value, actual_value, actual_key=None):
        """A changed pair is always shown as the removed line, then the added line.

        Sequence pairs are numbered by position on each side, so the added
        line takes actual_key when one is given.
        """
        self.remove(key, expected_value)
        self.add(key if actual_key is None else actual_key, actual_value)


def is_valid_report(report):
    """Checks wheter a report is well formed.

    Returns a boolean indicating the well-formedness of the report.
    """
    try:
        validate_report(report)
    except StructDiffFormatError:
        return False
    return True


def validate_report(report):
    """Check wheter a report is well formed.

    Raises a StructDiffFormatError if not well formed.
    """
    if not isinstance(report, DiffReport):
        raise StructDiffFormatError("Report must be a DiffReport.")
    if report.unit not in (DiffUnit.LINES, DiffUnit.ENTRIES):
        raise StructDiffFormatError("Unknown report unit '{}'.".format(report.unit))
    if not isinstance(report.lines, tuple):
        raise StructDiffFormatError("Report lines must be a tuple.")
    for line in report.lines:
        validate_line(line, report.unit)


def validate_line(line, unit):
    """Check that line is a well formed diff line for a report of the given unit.

    Raises a StructDiffFormatError if not well formed.
    """
    if not isinstance(line, DiffLine):
        raise StructDiffFormatError("Diff line '{}' is not a diff type.".format(line))
    if line.get("op") not in DiffReportBuilder.OPS:
        raise StructDiffFormatError("Unknown diff op '{}'.".format(line.get("op")))

    key = line.key
    if unit == DiffUnit.LINES:
        # bool is an int, but never a position
        if not isinstance(key, int) or isinstance(key, bool) or key < 1:
            raise StructDiffFormatError(
                "Sequence diff lines need a 1-based int position, not '{}'.".format(key))
        if not isinstance(line.value, str):
            raise StructDiffFormatError(
                "Sequence diff lines need a rendered value, not '{}'.".format(line.value))
    else:
        if not isinstance(key, str):
            msg = "Invalid mapping diff key '{}' of type '{}'. Expecting a rendered str."
            raise StructDiffFormatError(msg.format(key, type(key)))
        if line.value is not None and not isinstance(line.value, str):
            raise StructDiffFormatError(
                "Mapping diff lines need a rendered value or None, not '{}'.".format(line.value))
