
import argparse
import json
import logging

import pytest

from traitlets import Enum

import jsondelta
from jsondelta.args import (
    ConfigBackedParser, LogLevelAction, add_diff_args, diff_config_from_args,
)
from jsondelta.config import (
    entrypoint_configurables, build_config, Global, _Diffing,
)


class FixtureConfig(Global):
    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'WARN',
    ).tag(config=True)

@pytest.fixture
def entrypoint_config():
    entrypoint_configurables['test-prog'] = FixtureConfig
    yield
    del entrypoint_configurables['test-prog']

class DiffingConfig1(_Diffing):
    pass

class DiffingConfig2(DiffingConfig1):
    pass

@pytest.fixture
def entrypoint_diff_config():
    entrypoint_configurables['test-prog'] = DiffingConfig2
    yield
    del entrypoint_configurables['test-prog']


def test_config_parser(entrypoint_config, reset_log_level):
    parser = ConfigBackedParser('test-prog')
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="Set the log level by name.",
        action=LogLevelAction,
    )

    # Check that log level default is taken from FixtureConfig
    arguments = parser.parse_args([])
    assert arguments.log_level == 'WARN'

    arguments = parser.parse_args(['--log-level', 'ERROR'])
    assert arguments.log_level == 'ERROR'
    assert jsondelta.log.logger.level == logging.ERROR


def test_config_parser_unknown_entrypoint():
    parser = ConfigBackedParser('not-configured')
    add_diff_args(parser)
    arguments = parser.parse_args(['-k', 'id'])
    assert arguments.hash_keys == ['id']


def test_diff_config_from_disk(entrypoint_diff_config, tmpdir):
    tmpdir.join('jsondelta_config.json').write_text(
        json.dumps({
            'DiffingConfig1': {
                'hash_keys': ['id'],
                'ignore_array_move': True,
            },
            'DiffingConfig2': {
                'exclude_keys': ['timestamp'],
            },
        }),
        encoding='utf-8'
    )
    with tmpdir.as_cwd():
        config = build_config('test-prog')
        parser = ConfigBackedParser('test-prog')
        add_diff_args(parser)
        arguments = parser.parse_args([])

    assert config['hash_keys'] == ['id']
    assert config['ignore_array_move'] is True
    assert config['exclude_keys'] == ['timestamp']
    assert arguments.hash_keys == ['id']
    assert arguments.exclude_keys == ['timestamp']
    assert arguments.ignore_array_move is True


def test_build_config_unknown_entrypoint():
    with pytest.raises(ValueError):
        build_config('not-configured')


def test_diff_config_from_args():
    parser = argparse.ArgumentParser()
    add_diff_args(parser)

    config = diff_config_from_args(parser.parse_args([]))
    assert config.object_hash is None
    assert config.property_filter is None
    assert config.ignore_array_move is False

    config = diff_config_from_args(
        parser.parse_args(['-k', 'id', '--exclude', 'ts', '--ignore-move']))
    assert config.compare_arrays_by_hash
    assert config.ignore_array_move is True
    assert not config.include_key('ts', 'left', '')
    assert config.include_key('id', 'right', '/a')
