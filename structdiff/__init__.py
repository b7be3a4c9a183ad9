# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .assertions import Checker, AssertConfig
from .diff_format import DiffReport
from .diffing import diff, diff_lines, diff_mappings, align, classify_mapping_keys
from .testing import WriterTB


__all__ = [
    "__version__",
    "diff", "diff_lines", "diff_mappings",
    "align", "classify_mapping_keys",
    "DiffReport",
    "Checker", "AssertConfig",
    "WriterTB",
    ]
