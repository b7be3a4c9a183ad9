# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""pytest integration.

Installed as a pytest plugin through the `pytest11` entry point.
The `checker` fixture collects failed checks without stopping the test,
and fails the test with the collected reports once it is done.
"""

import io

import pytest

from .assertions import AssertConfig, Checker
from .config import build_config
from .testing import WriterTB


def finalize_checker(tb, out):
    "Fail the running test with the captured output if any check failed."
    if tb.failed:
        pytest.fail(out.getvalue(), pytrace=False)


@pytest.fixture(scope='session')
def structdiff_config():
    return AssertConfig.from_config(build_config('pytest'))


@pytest.fixture
def checker(structdiff_config):
    out = io.StringIO()
    tb = WriterTB(out)
    yield Checker(tb, structdiff_config)
    finalize_checker(tb, out)
