#!/usr/bin/env python3
"""idkeys CLI - Generate passphrase and automation SSH key pairs with identifier-based names."""

import sys
from pathlib import Path
from typing import Optional

import click

from idkeys.config import KeygenConfig
from idkeys.errors import InputError, KeyGenerationError, MissingToolError
from idkeys.events import EventLog
from idkeys.identifiers import default_hostname, default_random_bytes, read_line, resolve
from idkeys.naming import build_stems, validate_identifier
from idkeys.ssh_keys import KeyGenerator


def _load_config(config_path: Optional[str]) -> KeygenConfig:
    try:
        if config_path:
            return KeygenConfig.from_file(Path(config_path))
        return KeygenConfig.load(Path.cwd())
    except (ValueError, OSError) as e:
        click.secho(f"❌ Invalid configuration: {e}", fg='red', err=True)
        sys.exit(2)


class KeygenCommand(click.Command):
    """Command that keeps everything after a literal '--' for ssh-keygen."""

    def parse_args(self, ctx, args):
        if '--' in args:
            split = args.index('--')
            ctx.meta['idkeys.passthrough'] = tuple(args[split + 1:])
            args = args[:split]
        return super().parse_args(ctx, args)


@click.command(cls=KeygenCommand, context_settings={'ignore_unknown_options': True})
@click.version_option(package_name='idkeys')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='Path to idkeys.yml (default: ./idkeys.yml if present)')
@click.option('--output-dir', type=click.Path(file_okay=False),
              help='Directory to write key files to')
@click.option('--algorithm', help='Key type passed to ssh-keygen -t (default: rsa)')
@click.option('--bits', type=click.IntRange(min=1), help='Key size passed to ssh-keygen -b (default: 4096)')
@click.option('--strict/--no-strict', default=None,
              help="Reject identifiers containing '=' (default: on)")
@click.argument('args', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def main(ctx, config_path, output_dir, algorithm, bits, strict, args):
    """Generate a passphrase key pair and an automation key pair.

    ARGS are up to three identifiers (user, system, unique), prompted for
    when missing. Anything after '--', or after the third identifier, is
    passed through to ssh-keygen.
    """
    config = _load_config(config_path)
    if output_dir is not None:
        config.output_dir = Path(output_dir)
    if algorithm is not None:
        config.algorithm = algorithm
    if bits is not None:
        config.bits = bits
    if strict is not None:
        config.strict = strict

    events = EventLog(config.log_file)
    identifiers = args[:3]
    extra_args = args[3:] + ctx.meta.get('idkeys.passthrough', ())
    generator = KeyGenerator(algorithm=config.algorithm, bits=config.bits)

    try:
        generator.ensure_available()
        user, system, unique = resolve(
            identifiers,
            interactive_reader=read_line,
            hostname_provider=default_hostname,
            random_provider=default_random_bytes,
        )
    except MissingToolError as e:
        events.log_event(str(e), level='ERROR')
        click.secho(f"❌ {e}", fg='red', err=True)
        sys.exit(1)

    if config.strict:
        try:
            for name, value in (('User', user), ('System', system), ('Unique', unique)):
                validate_identifier(name, value)
        except InputError as e:
            events.log_event(str(e), level='ERROR')
            raise click.UsageError(str(e))

    passphrase_stem, automation_stem = build_stems(user, system, unique)
    events.log_event(f'Generating key pairs for {user}={system}={unique}')
    config.output_dir.mkdir(parents=True, exist_ok=True)

    # passphrase=None leaves the passphrase prompt to ssh-keygen
    steps = ((passphrase_stem, None), (automation_stem, ''))
    for stem, passphrase in steps:
        try:
            private_key, public_key = generator.generate_keypair(
                comment=stem,
                output_path=config.output_dir / stem,
                passphrase=passphrase,
                extra_args=extra_args,
            )
        except MissingToolError as e:
            events.log_event(str(e), level='ERROR')
            click.secho(f"❌ {e}", fg='red', err=True)
            sys.exit(1)
        except KeyGenerationError as e:
            events.log_event(f'Key generation failed for {stem}: {e}', level='ERROR')
            click.secho(f"❌ Key generation failed for {stem}: {e}", fg='red', err=True)
            sys.exit(e.returncode or 1)

        events.log_event(f'Key pair created: {private_key}')
        click.echo(str(private_key))
        click.echo(str(public_key))


if __name__ == '__main__':
    main()
