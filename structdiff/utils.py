# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

import colorama


def read_json(f):
    """Read and return a json value from filename

    Alternatively a file-like object can be passed.
    """
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            return json.load(fo)
    return json.load(f)


def read_lines(f):
    """Read and return the lines of a text file, without line ends

    Alternatively a file-like object can be passed.
    """
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()
    return text.splitlines()


def _setup_std_stream_encoding():
    """Make stdout/err escape unencodable characters

    Report lines quote arbitrary values, which may not fit the terminal
    encoding.
    """
    if os.getenv('PYTHONIOENCODING'):
        return
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is None or stream is not getattr(sys, '__%s__' % name):
            # not the process stream
            continue
        if getattr(stream, 'errors', 'strict') in ('strict', 'surrogateescape'):
            stream.reconfigure(errors='backslashreplace')


def setup_std_streams():
    """Setup sys.stdout/err for printing reports

    Colorama is initialized on Windows after the streams are set up.
    """
    _setup_std_stream_encoding()
    if sys.platform.startswith('win'):
        colorama.init()
