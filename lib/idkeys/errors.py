"""Exceptions raised by idkeys."""

from typing import Sequence


class IdkeysError(Exception):
    """Base class for idkeys errors."""


class InputError(IdkeysError, ValueError):
    """An identifier cannot be used in a key file name."""


class MissingToolError(IdkeysError, EnvironmentError):
    """A required external command is not available."""


class KeyGenerationError(IdkeysError):
    """The key generation tool exited with a non-zero status."""

    def __init__(self, argv: Sequence[str], returncode: int):
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"{self.argv[0]} exited with status {returncode}")
