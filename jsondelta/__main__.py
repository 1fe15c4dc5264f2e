# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from ._version import __version__

COMMANDS = ["diff"]
HELP_MESSAGE_VERBOSE = ("Usage: jsondelta [OPTIONS]\n\n"
                       "OPTIONS: -h, --version, --config, COMMANDS{%s}\n\n"
                       "Examples: jsondelta --version\n"
                       "          jsondelta diff -h\n"
                       "          jsondelta diff --hash-key id before.json after.json\n" %
                       ", ".join(COMMANDS))


def main_dispatch(args=None):
    "Run a jsondelta subcommand, e.g. `jsondelta diff a.json b.json`."
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("Option missing.\n\n%s" % HELP_MESSAGE_VERBOSE)

    cmd, args = args[0], args[1:]
    if cmd == '--version':
        sys.exit(__version__)
    if cmd in ('-h', '--help'):
        sys.exit(HELP_MESSAGE_VERBOSE)
    if cmd == '--config':
        # Same listing as `jsondelta diff --config`
        cmd, args = 'diff', ['--config']
    if cmd not in COMMANDS:
        sys.exit("Unrecognized command '%s'\n\n%s." % (cmd, HELP_MESSAGE_VERBOSE))

    from .jsondiffapp import main
    return main(args)


if __name__ == "__main__":
    # This is triggered by "python -m jsondelta <args>"
    sys.exit(main_dispatch())
