# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_structdiff_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_structdiff_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_structdiff_log_level(level, True)


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: config,
            },
            config=PrettyPrintConfig(out=sys.stderr, use_color=False)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all structdiff commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_diff_args(parser):
    """Adds a set of arguments for commands that perform diffs.
    """
    costs = parser.add_argument_group(
        title='costs',
        description='Set the costs used when aligning sequences.')
    costs.add_argument(
        '--substitution-cost',
        type=int, default=2,
        help="cost of pairing two unequal elements.")
    costs.add_argument(
        '--indel-cost',
        type=int, default=1,
        help="cost of leaving an element unmatched.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    color = parser.add_mutually_exclusive_group()
    color.add_argument(
        '--color',
        dest='use_color',
        action="store_true",
        default=True,
        help=("use ANSI color code escapes for text output")
    )
    color.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )


def diff_config_from_args(arguments):
    from .diffing.config import DiffConfig
    return DiffConfig.from_config(vars(arguments))
