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
from .diffing.config import (
    DiffConfig, object_hash_from_keys, property_filter_excluding,
)
from .log import init_logging, set_jsondelta_log_level


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from the jsondelta config.

    The config is looked up by the first word of the program name, so
    parsers of unconfigured programs keep their own defaults.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(" ")[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    "Applies the log level as soon as it is parsed."

    def __init__(self, option_strings, dest, default=None, **kwargs):
        # Only the default applies when the option is absent
        level = getattr(logging, default or "INFO")
        init_logging(level=level)
        set_jsondelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_jsondelta_log_level(getattr(logging, values), True)


class ConfigHelpAction(argparse.Action):
    "Prints the effective config of the program to stderr, then exits."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_config, PrettyPrintConfig

        name = entrypoint_configurables[parser.prog].__name__
        pretty_print_config(
            name,
            build_config(parser.prog, True),
            config=PrettyPrintConfig(out=sys.stderr, use_color=False),
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all jsondelta commands.
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
    """Adds a set of arguments for commands that compute patches.
    """
    arrays = parser.add_argument_group(
        title='arrays',
        description='Set how arrays are compared.')
    arrays.add_argument(
        '-k', '--hash-key',
        dest='hash_keys',
        action='append',
        default=[],
        metavar='KEY',
        help="object key identifying array elements, may be repeated. "
             "When given, arrays are compared by element identity "
             "instead of by index.")
    arrays.add_argument(
        '--ignore-move',
        dest='ignore_array_move',
        action='store_true',
        default=False,
        help="do not emit move operations for reordered array elements.")
    parser.add_argument(
        '-x', '--exclude',
        dest='exclude_keys',
        action='append',
        default=[],
        metavar='KEY',
        help="object key to leave out of the comparison, may be repeated.")


filename_help = {
    "before": "The base json filename.",
    "after":  "The modified json filename.",
    }


def add_filename_args(parser, names):
    """Add the before and after positional arguments.

    Helps getting consistent doc strings.
    """
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def diff_config_from_args(arguments):
    "Translate parsed arguments into a DiffConfig."
    hash_keys = getattr(arguments, 'hash_keys', None)
    exclude_keys = getattr(arguments, 'exclude_keys', None)
    return DiffConfig(
        object_hash=object_hash_from_keys(hash_keys) if hash_keys else None,
        property_filter=property_filter_excluding(exclude_keys) if exclude_keys else None,
        ignore_array_move=getattr(arguments, 'ignore_array_move', False),
    )


def prettyprint_config_from_args(arguments, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(arguments, 'use_color', True),
        **kwargs
    )
