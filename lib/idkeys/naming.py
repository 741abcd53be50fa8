"""Key file naming convention.

A naming stem joins the three identifiers and a key class with ``=``::

    alice@example.com=demo.example.com=8af247255f409533f43c14cae2c07b97=passphrase=id_rsa

The private key is written to the stem itself and the public key to
``<stem>.pub``.
"""

from pathlib import Path
from typing import NamedTuple, Tuple

from idkeys.errors import InputError

SEPARATOR = '='
KEY_SUFFIX = 'id_rsa'
PASSPHRASE = 'passphrase'
AUTOMATION = 'automation'
KEY_CLASSES = (PASSPHRASE, AUTOMATION)


class StemFields(NamedTuple):
    user: str
    system: str
    unique: str
    key_class: str


def build_stem(user: str, system: str, unique: str, key_class: str) -> str:
    """Build the file name stem for one key pair.

    Args:
        user: User identifier, such as an email address
        system: System identifier, such as a host name
        unique: Unique identifier, such as a ZID
        key_class: 'passphrase' or 'automation'

    Returns:
        '{user}={system}={unique}={key_class}=id_rsa'
    """
    if key_class not in KEY_CLASSES:
        raise ValueError(f"Unknown key class: {key_class}")
    return SEPARATOR.join([user, system, unique, key_class, KEY_SUFFIX])


def build_stems(user: str, system: str, unique: str) -> Tuple[str, str]:
    """Return (passphrase_stem, automation_stem)."""
    return (
        build_stem(user, system, unique, PASSPHRASE),
        build_stem(user, system, unique, AUTOMATION),
    )


def parse_stem(name: str) -> StemFields:
    """Split a key file name back into its identifiers and key class.

    Accepts a bare stem, a path, or a public key name ending in '.pub'.
    """
    stem = Path(name).name
    if stem.endswith('.pub'):
        stem = stem[:-len('.pub')]

    parts = stem.split(SEPARATOR)
    if len(parts) != 5:
        raise ValueError(f"Expected 5 '{SEPARATOR}'-separated fields in {stem!r}, got {len(parts)}")
    user, system, unique, key_class, suffix = parts
    if suffix != KEY_SUFFIX:
        raise ValueError(f"Not a key file name (missing {KEY_SUFFIX} suffix): {stem!r}")
    if key_class not in KEY_CLASSES:
        raise ValueError(f"Unknown key class: {key_class}")
    return StemFields(user, system, unique, key_class)


def validate_identifier(name: str, value: str) -> str:
    """Reject identifiers that would make a stem ambiguous.

    Returns the value unchanged so it can be used inline.
    """
    if SEPARATOR in value:
        raise InputError(f"{name} identifier must not contain '{SEPARATOR}': {value!r}")
    return value
