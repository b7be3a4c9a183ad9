# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import os
import shutil

from pytest import fixture, skip

from structdiff.assertions import AssertConfig, Checker
from structdiff.testing import WriterTB


pjoin = os.path.join


def testspath():
    return os.path.abspath(os.path.dirname(__file__))


@fixture
def slow(request):
    if request.config.getoption('--quick', default=False):
        skip('skipping slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(testspath(), "files")


@fixture
def tempfiles(tmpdir, filespath):
    """Fixture for copying test files into a temporary directory"""
    dest = tmpdir.join('testfiles')
    shutil.copytree(filespath, str(dest))
    return str(dest)


@fixture
def isolated_cwd(tmpdir, monkeypatch):
    """Run in an empty directory, so no structdiff_config.json is picked up"""
    monkeypatch.chdir(str(tmpdir))
    monkeypatch.setenv('HOME', str(tmpdir))
    return str(tmpdir)


@fixture
def out():
    return io.StringIO()


@fixture
def tb(out):
    return WriterTB(out)


@fixture
def check(tb):
    """Checker without file positions, whose output is easy to compare"""
    return Checker(tb, AssertConfig(include_file_position=False))
