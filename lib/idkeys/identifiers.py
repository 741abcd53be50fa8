"""Resolve the user, system and unique identifiers for a run."""

import secrets
import subprocess
from typing import Callable, Iterator, Optional, Sequence, Tuple

import click

from idkeys.errors import MissingToolError

DEFAULT_USER = 'example@example.com'
ZID_BYTES = 16

USER_PROMPT = 'User identifier, such as an email addresss?'
SYSTEM_PROMPT = 'System identifier, such as a host name?'
UNIQUE_PROMPT = 'Unique identifier, such as a ZID?'

Reader = Callable[[str], str]


def read_line(prompt: str) -> str:
    """Show prompt on the terminal and read one line from stdin."""
    click.echo(prompt, nl=False)
    return click.get_text_stream('stdin').readline()


def default_hostname() -> str:
    """Return the local host name as reported by the hostname command."""
    try:
        result = subprocess.run(
            ['hostname'],
            capture_output=True,
            text=True,
            check=True
        )
    except FileNotFoundError as e:
        raise MissingToolError("hostname command not found") from e
    except subprocess.CalledProcessError as e:
        raise MissingToolError(f"hostname failed: {e.stderr.strip()}") from e
    return result.stdout.strip()


def default_random_bytes() -> bytes:
    """Return 16 cryptographically random bytes."""
    return secrets.token_bytes(ZID_BYTES)


def generate_zid(random_provider: Callable[[], bytes] = default_random_bytes) -> str:
    """Render random bytes as a lowercase hex ZID (32 chars for 16 bytes)."""
    return random_provider().hex()


def _ask(label: str, default: str, reader: Reader) -> str:
    line = reader(f"{label}\nDefault: {default}\n")
    # Only the line terminator is stripped; other whitespace is kept verbatim
    if line.endswith('\n'):
        line = line[:-1]
        if line.endswith('\r'):
            line = line[:-1]
    return line or default


def resolve(
    args: Sequence[str] = (),
    interactive_reader: Reader = read_line,
    hostname_provider: Callable[[], str] = default_hostname,
    random_provider: Callable[[], bytes] = default_random_bytes,
) -> Tuple[str, str, str]:
    """Resolve (user, system, unique) identifiers.

    Positional arguments are consumed left to right. Each identifier without
    an argument is prompted for, and an empty answer selects the default.
    Defaults are only computed when a prompt is shown, so the hostname and
    random providers are not called for identifiers given as arguments.

    Args:
        args: Up to three identifier values, user first
        interactive_reader: Called with the prompt text, returns one line
        hostname_provider: Returns the local host name
        random_provider: Returns 16 random bytes

    Returns:
        Tuple of (user_identifier, system_identifier, unique_identifier)
    """
    if len(args) > 3:
        raise ValueError(f"Expected at most 3 identifiers, got {len(args)}")
    remaining: Iterator[str] = iter(args)

    def next_arg() -> Optional[str]:
        return next(remaining, None)

    user = next_arg()
    if user is None:
        user = _ask(USER_PROMPT, DEFAULT_USER, interactive_reader)

    system = next_arg()
    if system is None:
        system = _ask(SYSTEM_PROMPT, hostname_provider(), interactive_reader)

    unique = next_arg()
    if unique is None:
        unique = _ask(UNIQUE_PROMPT, generate_zid(random_provider), interactive_reader)

    return user, system, unique
