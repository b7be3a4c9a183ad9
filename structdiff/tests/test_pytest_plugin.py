# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import pytest

from structdiff.assertions import Checker
from structdiff.pytest_plugin import finalize_checker
from structdiff.testing import WriterTB


def test_checker_fixture_passing_checks(checker):
    assert isinstance(checker, Checker)
    assert checker.equal("rows", ["a", "b"], ["a", "b"])
    assert checker.equal("config", {"a": 1}, {"a": 1})


def test_finalize_checker_passes_without_failures():
    out = io.StringIO()
    tb = WriterTB(out)
    Checker(tb).equal("v", 1, 1)
    finalize_checker(tb, out)


def test_finalize_checker_fails_with_report():
    out = io.StringIO()
    tb = WriterTB(out)
    Checker(tb).equal("m", {"a": 1}, {"a": 2})
    with pytest.raises(pytest.fail.Exception) as excinfo:
        finalize_checker(tb, out)
    assert "Unexpected m: both 1 entries" in str(excinfo.value)
    assert '    +++ "a": "1"' in str(excinfo.value)


def test_checker_fixture_fails_test_at_teardown(pytester):
    pytester.makepyfile("""
        def test_collects_all_failures(checker):
            checker.equal("m", {"a": 1}, {"a": 2})
            checker.is_true("flag", False)
            reached = True
            assert reached

        def test_all_good(checker):
            checker.equal("v", 1, 1)
    """)
    result = pytester.runpytest_subprocess()
    # The body runs to the end, the collected reports fail the teardown
    result.assert_outcomes(passed=2, errors=1)
    result.stdout.fnmatch_lines([
        "*Unexpected m: both 1 entries*",
        '*+++ "a": "1"*',
        "*flag unexpectedly got false*",
    ])
