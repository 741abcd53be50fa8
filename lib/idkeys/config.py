"""Parse idkeys.yml configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CONFIG_NAME = 'idkeys.yml'
KNOWN_FIELDS = {'algorithm', 'bits', 'output_dir', 'strict', 'log_file'}


def default_log_file() -> Path:
    return Path.home() / '.idkeys' / 'idkeys.log'


@dataclass
class KeygenConfig:
    """Settings for key generation, from idkeys.yml."""
    algorithm: str = 'rsa'
    bits: int = 4096
    output_dir: Path = field(default_factory=Path)
    strict: bool = True
    log_file: Optional[Path] = None

    def __post_init__(self):
        if self.log_file is None:
            self.log_file = default_log_file()

    @classmethod
    def load(cls, directory: Path) -> 'KeygenConfig':
        """Load idkeys.yml from directory. Returns defaults if not present."""
        config_file = directory / CONFIG_NAME
        if not config_file.exists():
            return cls()
        return cls.from_file(config_file)

    @classmethod
    def from_file(cls, config_file: Path) -> 'KeygenConfig':
        with open(config_file, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"{config_file} must contain a mapping")

        unknown = set(data.keys()) - KNOWN_FIELDS
        if unknown:
            raise ValueError(f"Unknown {CONFIG_NAME} field(s): {', '.join(sorted(unknown))}")

        bits = data.get('bits', 4096)
        if not isinstance(bits, int) or isinstance(bits, bool) or bits <= 0:
            raise ValueError(f"bits must be a positive integer, got {bits!r}")

        strict = data.get('strict', True)
        if not isinstance(strict, bool):
            raise ValueError(f"strict must be true or false, got {strict!r}")

        log_file = data.get('log_file')
        return cls(
            algorithm=str(data.get('algorithm', 'rsa')),
            bits=bits,
            output_dir=Path(data.get('output_dir') or '.').expanduser(),
            strict=strict,
            log_file=Path(log_file).expanduser() if log_file else None,
        )
