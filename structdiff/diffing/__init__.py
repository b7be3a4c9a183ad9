# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .alignment import align, CostModel, Alignment, UNMATCHED
from .config import DiffConfig
from .generic import diff
from .mappings import classify_mapping_keys, diff_mappings
from .sequences import diff_lines

__all__ = [
    "diff", "diff_lines", "diff_mappings",
    "align", "classify_mapping_keys",
    "CostModel", "Alignment", "UNMATCHED", "DiffConfig",
    ]
