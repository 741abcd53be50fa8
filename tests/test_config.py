from pathlib import Path
from unittest.mock import patch

import pytest
from idkeys.config import KeygenConfig


def test_config_defaults_if_no_file(tmp_path):
    """Should return defaults when no idkeys.yml present."""
    with patch('idkeys.config.Path.home', return_value=tmp_path):
        config = KeygenConfig.load(tmp_path)

    assert config.algorithm == 'rsa'
    assert config.bits == 4096
    assert config.output_dir == Path('.')
    assert config.strict is True
    assert config.log_file == tmp_path / '.idkeys' / 'idkeys.log'


def test_config_loads_fields(tmp_path):
    (tmp_path / 'idkeys.yml').write_text(
        'bits: 3072\noutput_dir: keys\nstrict: false\nlog_file: /tmp/idkeys-test.log\n'
    )
    config = KeygenConfig.load(tmp_path)

    assert config.bits == 3072
    assert config.output_dir == Path('keys')
    assert config.strict is False
    assert config.log_file == Path('/tmp/idkeys-test.log')


def test_config_empty_file(tmp_path):
    (tmp_path / 'idkeys.yml').write_text('')
    config = KeygenConfig.load(tmp_path)
    assert config.bits == 4096


def test_config_rejects_unknown_fields(tmp_path):
    """Should raise ValueError for unrecognised fields."""
    (tmp_path / 'idkeys.yml').write_text('passphrase: hunter2\n')
    with pytest.raises(ValueError, match='Unknown'):
        KeygenConfig.load(tmp_path)


def test_config_rejects_bad_bits(tmp_path):
    (tmp_path / 'idkeys.yml').write_text('bits: lots\n')
    with pytest.raises(ValueError, match='bits'):
        KeygenConfig.load(tmp_path)


def test_config_from_explicit_file(tmp_path):
    config_file = tmp_path / 'custom.yml'
    config_file.write_text('algorithm: rsa\nbits: 2048\n')
    assert KeygenConfig.from_file(config_file).bits == 2048


def test_config_rejects_non_bool_strict(tmp_path):
    """A quoted "false" must not silently enable strict mode."""
    (tmp_path / 'idkeys.yml').write_text('strict: "false"\n')
    with pytest.raises(ValueError, match='strict'):
        KeygenConfig.load(tmp_path)
