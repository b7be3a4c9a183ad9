# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import sys

import colorama

from .diff_format import DiffOp


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        REMOVE = colorama.Fore.RED,
        ADD    = colorama.Fore.GREEN,
        INFO   = colorama.Fore.BLUE + colorama.Style.BRIGHT,
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        REMOVE = '',
        ADD    = '',
        INFO   = '',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            ):
        self.out = out
        self.use_color = use_color

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET

DefaultConfig = PrettyPrintConfig()


def pretty_print_report(report, config=DefaultConfig, prefix=""):
    """Write a DiffReport to config.out, one line per write.

    Removed lines are colored red and added lines green when colors are on.
    """
    rendered = report.render()
    config.out.write("%s%s%s%s\n" % (config.INFO, prefix, rendered[0], config.RESET))
    config.out.write("%s\n" % rendered[1])
    for line, text in zip(report.lines, rendered[2:]):
        color = config.REMOVE if line.op == DiffOp.REMOVE else config.ADD
        config.out.write("%s%s%s\n" % (color, text, config.RESET))


def pretty_print_message(message, config=DefaultConfig):
    "Write a plain mismatch message, e.g. for two differing scalars."
    for line in message.split("\n"):
        config.out.write("%s%s%s\n" % (config.INFO, line, config.RESET))


def pretty_print_dict(d, exclude_keys=(), prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(set(d) - set(exclude_keys)):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_dict(v, (), prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))
