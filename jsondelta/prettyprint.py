# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import json
import os
import sys

import colorama

from .log import PatchFormatError
from .patch_format import PatchOp


# Indentation offset in pretty-print
IND = "  "

PATCH_ENTRY_END = '\n'

ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '   ',
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

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


def file_timestamp(filename):
    "Return modification time for filename as a string."
    if not os.path.exists(filename):
        return "(no timestamp)"
    mtime = datetime.datetime.fromtimestamp(os.path.getmtime(filename))
    return mtime.isoformat(" ")


def format_value(value):
    """Format an operation value for printing.

    Strings are shown as is, everything else as indented json text
    in its own key order. Values json can't encode fall back to repr.
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=len(IND), ensure_ascii=False, default=repr)


def pretty_print_value(value, prefix="", config=DefaultConfig):
    "Print the formatted value with every line prefixed."
    text = format_value(value)
    for line in text.splitlines() or [""]:
        config.out.write("%s%s\n" % (prefix, line))


def pretty_print_patch_action(msg, path, config):
    config.out.write("%s%s %s:%s\n" % (config.INFO, msg, path or "/", config.RESET))


def pretty_print_operation(e, config=DefaultConfig):
    "Pretty-print a single patch operation."
    op = e.op
    path = e.path

    if op == PatchOp.ADD:
        pretty_print_patch_action("added", path, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.REMOVE:
        pretty_print_patch_action("removed", path, config)

    elif op == PatchOp.REPLACE:
        pretty_print_patch_action("replaced", path, config)
        pretty_print_value(e.value, config.ADD, config)

    elif op == PatchOp.MOVE:
        pretty_print_patch_action("moved %s to" % (e.from_ or "/"), path, config)

    elif op == PatchOp.COPY:
        pretty_print_patch_action("copied %s to" % (e.from_ or "/"), path, config)

    elif op == PatchOp.TEST:
        pretty_print_patch_action("test", path, config)
        pretty_print_value(e.value, config.KEEP, config)

    else:
        raise PatchFormatError("Unknown patch op {}".format(op))

    config.out.write(PATCH_ENTRY_END + config.RESET)


def pretty_print_patch(p, config=DefaultConfig):
    "Pretty-print a jsondelta patch."
    for e in p:
        pretty_print_operation(e, config)


patch_header = """\
jsondiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_json_patch(afn, bfn, p, config=DefaultConfig):
    """Pretty-print the patch between two json files

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the updated document
    p: patch
        The list of operations describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining how and where things get printed
    """
    if p:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(patch_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_patch(p, config)


def _pretty_print_settings(settings, prefix, config):
    for key in sorted(settings):
        value = settings[key]
        if isinstance(value, dict) and value:
            config.out.write("%s%s:\n" % (prefix, key))
            _pretty_print_settings(value, prefix + IND, config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, key, json.dumps(value)))


def pretty_print_config(name, settings, config=DefaultConfig):
    """Print the effective config of an entry point.

    Each setting goes on its own line as json, so that it can be
    copied into a jsondelta_config.json file.
    """
    config.out.write("%s:\n" % name)
    _pretty_print_settings(settings, IND, config)
