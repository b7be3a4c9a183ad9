#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

STRUCTDIFF_PATH = HERE / "structdiff"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(STRUCTDIFF_PATH / '_version.py')

with open(HERE / 'README.md') as f:
    LONG_DESCRIPTION = f.read()


if __name__ == '__main__':
    setup(
      name="structdiff",
      version=VERSION,
      description="Structural expected-vs-actual diffs for sequences and mappings",
      long_description=LONG_DESCRIPTION,
      long_description_content_type="text/markdown",
      license="BSD",
      python_requires=">=3.8",
      packages=find_packages(include=["structdiff", "structdiff.*"]),
      package_data={"structdiff.tests": ["files/*"]},
      install_requires=[
          "colorama",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "structdiff = structdiff.diffapp:main",
          ],
          "pytest11": [
              "structdiff = structdiff.pytest_plugin",
          ],
      },
      )
