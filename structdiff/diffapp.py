# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_prettyprint_args, ConfigBackedParser,
    prettyprint_config_from_args, diff_config_from_args,
    )
from .diffing import diff
from .formatting import format_mismatch
from .log import CostModelError, info
from .prettyprint import pretty_print_report, pretty_print_message
from .utils import read_json, read_lines, setup_std_streams


_description = "Compute the structural difference between two JSON documents."


def main_diff(args):
    """Main handler of diff CLI"""
    expected, actual = args.expected, args.actual
    for fn in (expected, actual):
        if not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 2

    reader = read_lines if args.lines else read_json
    try:
        exp = reader(expected)
        act = reader(actual)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        print("Could not read input: {}".format(e))
        return 2
    info("Loaded %s and %s", expected, actual)

    try:
        diff_config = diff_config_from_args(args)
    except CostModelError as e:
        print("Invalid costs: {}".format(e))
        return 2

    name = args.name or os.path.basename(actual)
    equal, report = diff(exp, act, name=name, config=diff_config)
    if equal:
        info("No differences found")
        return 0

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")
    config = prettyprint_config_from_args(args, out=Printer())
    if report is not None:
        pretty_print_report(report, config)
    else:
        with_types = type(exp) is not type(act)
        pretty_print_message(format_mismatch("", name, exp, act, with_types), config)
    return 1


def _build_arg_parser(prog='structdiff'):
    """Creates an argument parser for the structdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "expected", help="the file with the expected content.",
    )
    parser.add_argument(
        "actual", help="the file with the actual content.",
    )
    parser.add_argument(
        '--name',
        default=None,
        help="name of the compared value in the report. "
             "Defaults to the basename of the actual file.")
    parser.add_argument(
        '--lines',
        action='store_true', default=False,
        help="compare the files as text, line by line, instead of as JSON.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
