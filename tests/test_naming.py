import pytest
from idkeys.errors import InputError
from idkeys.naming import build_stem, build_stems, parse_stem, validate_identifier

USER = 'alice@example.com'
SYSTEM = 'demo.example.com'
ZID = '8af247255f409533f43c14cae2c07b97'


def test_build_stem_known_example():
    """Should join identifiers, key class and id_rsa with '='"""
    assert build_stem(USER, SYSTEM, ZID, 'passphrase') == (
        'alice@example.com=demo.example.com=8af247255f409533f43c14cae2c07b97=passphrase=id_rsa'
    )
    assert build_stem(USER, SYSTEM, ZID, 'automation') == (
        'alice@example.com=demo.example.com=8af247255f409533f43c14cae2c07b97=automation=id_rsa'
    )


def test_build_stems_share_prefix_and_differ():
    passphrase_stem, automation_stem = build_stems(USER, SYSTEM, ZID)
    prefix = f'{USER}={SYSTEM}={ZID}='

    assert passphrase_stem != automation_stem
    assert passphrase_stem.startswith(prefix)
    assert automation_stem.startswith(prefix)


def test_build_stem_rejects_unknown_key_class():
    with pytest.raises(ValueError, match='Unknown key class'):
        build_stem(USER, SYSTEM, ZID, 'backup')


def test_parse_stem_reverses_build_stem():
    fields = parse_stem(build_stem(USER, SYSTEM, ZID, 'automation'))
    assert fields.user == USER
    assert fields.system == SYSTEM
    assert fields.unique == ZID
    assert fields.key_class == 'automation'


def test_parse_stem_accepts_public_key_path():
    """Should strip leading directories and the .pub suffix"""
    name = f'/home/alice/.ssh/{USER}={SYSTEM}={ZID}=passphrase=id_rsa.pub'
    assert parse_stem(name).key_class == 'passphrase'


def test_parse_stem_rejects_extra_separator():
    """An identifier containing '=' makes the name ambiguous"""
    stem = build_stem('a=b', SYSTEM, ZID, 'passphrase')
    with pytest.raises(ValueError, match='5'):
        parse_stem(stem)


def test_parse_stem_rejects_other_files():
    with pytest.raises(ValueError):
        parse_stem('id_rsa')
    with pytest.raises(ValueError, match='suffix'):
        parse_stem(f'{USER}={SYSTEM}={ZID}=passphrase=id_ed25519')


def test_validate_identifier():
    assert validate_identifier('User', USER) == USER

    with pytest.raises(InputError, match="'='"):
        validate_identifier('User', 'a=b')


def test_validate_identifier_accepts_empty():
    """Empty fields still split into five parts, so they are allowed"""
    assert validate_identifier('System', '') == ''
