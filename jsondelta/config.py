# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits, List
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_FILENAME = "jsondelta_config.json"


class JSONDeltaConfigurable(HasTraits):
    """Base of the classes declaring configurable defaults.

    Each subclass owns a section of the config file, named after the
    class. An entry point sees the sections of its whole class hierarchy.
    """


def trait_values(cls):
    "Default values of the config traits declared by cls itself."
    instance = cls()
    return {name: getattr(instance, name)
            for name in cls.class_own_traits(config=True)}


def recursive_update(target, new, include_none):
    """Merge dict new into target, descending into nested dicts.

    Unless include_none is set, None values drop their key and nested
    dicts that end up empty are pruned.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def config_search_path():
    "Directories searched for jsondelta_config.json, highest priority first."
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    return path


def load_disk_config(include_none=False):
    """Merge the config files found on the search path.

    Files in directories earlier on the path take precedence.
    """
    merged = {}
    for directory in reversed(config_search_path()):
        loader = JSONFileConfigLoader(CONFIG_FILENAME, path=directory)
        try:
            recursive_update(merged, loader.load_config(), include_none)
        except ConfigFileNotFound:
            continue
    return merged


def build_config(entrypoint, include_none=False):
    """Collect the effective config of an entry point.

    Trait defaults of each configurable class in the entry point's
    hierarchy are overlaid by that class's section of the config files,
    most generic class first.
    """
    if entrypoint not in entrypoint_configurables:
        raise ValueError("No config defined for entry point %r, expected one of %r" % (
            entrypoint, sorted(entrypoint_configurables)))

    disk_config = load_disk_config(include_none)
    config = {}
    for cls in reversed(entrypoint_configurables[entrypoint].mro()):
        if not issubclass(cls, JSONDeltaConfigurable):
            continue
        recursive_update(config, trait_values(cls), include_none)
        recursive_update(config, disk_config.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JSONDeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Show(JSONDeltaConfigurable):

    use_color = Bool(
        True,
        help="use ANSI color code escapes for text output.",
    ).tag(config=True)


class _Diffing(Global):

    ignore_array_move = Bool(
        False,
        help="do not emit move operations for arrays compared by hash.",
    ).tag(config=True)

    hash_keys = List(
        Unicode(),
        default_value=[],
        help="object keys identifying array elements. When set, arrays "
             "are compared by hash of these keys instead of by index.",
    ).tag(config=True)

    exclude_keys = List(
        Unicode(),
        default_value=[],
        help="object keys to leave out of the comparison.",
    ).tag(config=True)


class Diff(_Diffing, Show):
    pass


class JsonDiff(Diff):
    pass


entrypoint_configurables = {
    'jsondiff': JsonDiff,
}
