# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import structdiff
from structdiff._version import version_info


def test_version():
    assert structdiff.__version__ == "%d.%d.%d" % version_info[:3]


def test_public_api():
    for name in structdiff.__all__:
        assert hasattr(structdiff, name)
