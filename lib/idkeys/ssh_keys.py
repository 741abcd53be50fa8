"""SSH key pair generation through ssh-keygen."""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from idkeys.errors import KeyGenerationError, MissingToolError


class KeyGenerator:
    """Generates key pairs by running ssh-keygen."""

    def __init__(self, algorithm: str = 'rsa', bits: int = 4096, command: str = 'ssh-keygen'):
        self.algorithm = algorithm
        self.bits = bits
        self.command = command

    def ensure_available(self) -> None:
        """Raise MissingToolError if the key generation command is not on PATH."""
        if not shutil.which(self.command):
            raise MissingToolError(f"{self.command} not found on system.")

    def build_command(self, comment: str, output_path: Path,
                      passphrase: Optional[str] = None,
                      extra_args: Sequence[str] = ()) -> List[str]:
        cmd = [
            self.command,
            '-t', self.algorithm,
            '-b', str(self.bits),
            '-C', comment,
            '-f', str(output_path),
        ]
        # Without -N ssh-keygen asks for the passphrase itself
        if passphrase is not None:
            cmd += ['-N', passphrase]
        cmd += list(extra_args)
        return cmd

    def generate_keypair(self, comment: str, output_path: Path,
                         passphrase: Optional[str] = None,
                         extra_args: Sequence[str] = ()) -> Tuple[Path, Path]:
        """Generate a key pair.

        Output is not captured: ssh-keygen talks to the terminal directly,
        including its passphrase prompt and any error messages.

        Args:
            comment: Key comment
            output_path: Private key path (public key gets .pub suffix)
            passphrase: Passphrase, or None to let ssh-keygen prompt for one
            extra_args: Passed through to ssh-keygen verbatim

        Returns:
            Tuple of (private_key_path, public_key_path)
        """
        output_path = Path(output_path)
        cmd = self.build_command(comment, output_path, passphrase, extra_args)
        try:
            subprocess.run(cmd, check=True)
        except FileNotFoundError as e:
            raise MissingToolError(f"{self.command} not found on system.") from e
        except subprocess.CalledProcessError as e:
            raise KeyGenerationError(cmd, e.returncode) from e

        return output_path, Path(f"{output_path}.pub")
