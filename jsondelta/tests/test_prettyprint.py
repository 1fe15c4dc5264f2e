# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from io import StringIO

import colorama
import pytest

from jsondelta import PatchFormatError
from jsondelta.patch_format import (
    PatchOperation, op_add, op_remove, op_replace, op_move, op_copy, op_test,
)
import jsondelta.prettyprint as pp


def _config(use_color=False):
    return pp.PrettyPrintConfig(out=StringIO(), use_color=use_color)


def test_pretty_print_operations():
    config = _config()
    pp.pretty_print_patch([
        op_add("/a", 1),
        op_remove("/b"),
        op_replace("", "text"),
        op_move("/c/0", "/c/2"),
        op_copy("/d", "/e"),
        op_test("/f", None),
    ], config)
    text = config.out.getvalue()
    assert text == (
        "## added /a:\n+  1\n\n"
        "## removed /b:\n\n"
        "## replaced /:\n+  text\n\n"
        "## moved /c/0 to /c/2:\n\n"
        "## copied /d to /e:\n\n"
        "## test /f:\n   null\n\n"
    )


def test_pretty_print_unknown_op():
    with pytest.raises(PatchFormatError):
        pp.pretty_print_operation(PatchOperation(op="frobnicate", path="/a"), _config())


def test_pretty_print_colors():
    config = _config(use_color=True)
    pp.pretty_print_operation(op_add("/a", 1), config)
    text = config.out.getvalue()
    assert colorama.Fore.GREEN in text
    assert text.endswith(colorama.Style.RESET_ALL)


def test_pretty_print_nested_values():
    config = _config()
    pp.pretty_print_value({"b": [1, 2], "a": {"x": "multi\nline"}}, "+  ", config)
    assert config.out.getvalue() == (
        '+  {\n'
        '+    "b": [\n'
        '+      1,\n'
        '+      2\n'
        '+    ],\n'
        '+    "a": {\n'
        '+      "x": "multi\\nline"\n'
        '+    }\n'
        '+  }\n'
    )


def test_pretty_print_multiline_string():
    config = _config()
    pp.pretty_print_value("multi\nline", "+  ", config)
    pp.pretty_print_value("", "+  ", config)
    assert config.out.getvalue() == "+  multi\n+  line\n+  \n"


def test_pretty_print_empty_values():
    config = _config()
    pp.pretty_print_value({}, "+  ", config)
    pp.pretty_print_value([], "+  ", config)
    assert config.out.getvalue() == "+  {}\n+  []\n"


def test_pretty_print_json_patch_header(tmpdir):
    config = _config()
    with tmpdir.as_cwd():
        pp.pretty_print_json_patch("a.json", "b.json", [op_remove("/x")], config)
    lines = config.out.getvalue().splitlines()
    assert lines[0] == "jsondiff a.json b.json"
    assert lines[1] == "--- a.json  (no timestamp)"
    assert lines[2] == "+++ b.json  (no timestamp)"
    assert lines[3] == "## removed /x:"


def test_pretty_print_json_patch_empty():
    config = _config()
    pp.pretty_print_json_patch("a.json", "b.json", [], config)
    assert config.out.getvalue() == ""


def test_pretty_print_config():
    config = _config()
    pp.pretty_print_config("JsonDiff", {
        "log_level": "INFO",
        "hash_keys": ["id"],
        "ignore_array_move": False,
        "nested": {"a": None},
        "empty": {},
    }, config)
    assert config.out.getvalue() == (
        'JsonDiff:\n'
        '  empty: {}\n'
        '  hash_keys: ["id"]\n'
        '  ignore_array_move: false\n'
        '  log_level: "INFO"\n'
        '  nested:\n'
        '    a: null\n'
    )
