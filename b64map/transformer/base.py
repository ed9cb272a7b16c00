import contextlib
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence

from b64map.transformer.exceptions import ProcessSpawnError
from b64map.transformer.models import ProcessResult


class BaseProcessRunner(ABC):
    """Contract for all subprocess I/O strategies."""

    @abstractmethod
    def run(self, command: Sequence[str], document: bytes) -> ProcessResult:
        """Run a fresh instance of ``command`` with ``document`` as its input.

        Args:
            command: Program followed by its arguments.
            document: Raw bytes fed to the program's standard input.

        Returns:
            ProcessResult with the full stdout, the full stderr and the exit
            status. A non-zero status is returned, not raised.

        Raises:
            ProcessSpawnError: if the program cannot be started.
            ProcessInputError: if the document cannot be delivered.
            ProcessOutputError: if stdout or stderr cannot be read.
        """

    def _spawn(self, command: Sequence[str]) -> subprocess.Popen[bytes]:
        try:
            return subprocess.Popen(
                list(command),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            raise ProcessSpawnError(f"error starting command {command[0]!r}: {exc}") from exc

    def _cleanup(self, proc: subprocess.Popen[bytes]) -> None:
        """Release every pipe and make sure the process is reaped."""
        for pipe in (proc.stdin, proc.stdout, proc.stderr):
            if pipe is not None and not pipe.closed:
                # The failure that got us here has already been raised.
                with contextlib.suppress(OSError):
                    pipe.close()
        if proc.poll() is None:
            proc.kill()
            proc.wait()
