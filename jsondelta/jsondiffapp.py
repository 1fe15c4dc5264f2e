# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os
import sys

from .args import (
    add_generic_args, add_diff_args, add_filename_args, add_prettyprint_args,
    ConfigBackedParser, diff_config_from_args, prettyprint_config_from_args,
    )
from .diffing import diff
from .log import info, debug
from .prettyprint import pretty_print_json_patch
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = "Compute the json patch transforming one json document into another."


def main_diff(args):
    """Diff the two json files named in args.

    Returns the exit status. The patch goes to the --out file as json,
    or pretty-printed to stdout.
    """
    before, after = args.before, args.after

    # The null file stands for an empty document, any other must exist
    for fn in (before, after):
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            print("Missing file {}".format(fn))
            return 1

    debug("Reading %s and %s", before, after)
    a = read_json(before)
    b = read_json(after)

    p = diff(a, b, diff_config_from_args(args))
    info("Computed patch with %d operation(s)", len(p))

    output = getattr(args, "out", None)
    if output:
        with io.open(output, "w", encoding="utf-8") as pf:
            json.dump(p, pf, indent=2, separators=(",", ": "))
    else:
        # Looked up now rather than at import, so redirection is honoured
        pp_config = prettyprint_config_from_args(args, out=sys.stdout)
        pretty_print_json_patch(before, after, p, pp_config)

    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the jsondiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog or 'jsondiff',
        )
    add_generic_args(parser)
    add_diff_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["before", "after"])

    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the patch is written to this file as json. "
             "Otherwise it is printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser().parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
