from collections.abc import Sequence
from typing import BinaryIO

from b64map.codec.base import BaseLineCodec
from b64map.config.settings import Settings
from b64map.logging.logger import Log
from b64map.transformer.base import BaseProcessRunner
from b64map.transformer.exceptions import OutputWriteError, ProcessExitError, TransformError


class Transformer:
    """Runs the external program on one document and emits its encoded result.

    The same program and arguments are used for every document, but each call
    starts a new process. Nothing from one call is visible to the next.
    """

    def __init__(
        self,
        command: Sequence[str],
        runner: BaseProcessRunner,
        codec: BaseLineCodec,
        destination: BinaryIO,
        diagnostics: BinaryIO,
        settings: Settings,
    ) -> None:
        if not command:
            raise ValueError("command must name the program to run")
        self._command = tuple(command)
        self._runner = runner
        self._codec = codec
        self._destination = destination
        self._diagnostics = diagnostics
        self._terminator = settings.line_terminator

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    def transform(self, document: bytes) -> None:
        """Transform one document and write exactly one encoded line.

        Raises:
            TransformError: if the program cannot be driven to a successful
                exit or the result cannot be written. Nothing is written to the
                destination in that case.
        """
        try:
            result = self._runner.run(self._command, document)
            self._pass_through_diagnostics(result.stderr)
            self._check_exit(result.returncode)
            self._emit(result.stdout)
        except TransformError as exc:
            Log.error(f"{type(exc).__name__}: {exc}")
            raise
        Log.debug(f"transformed {len(document)} bytes into {len(result.stdout)} bytes")

    def _pass_through_diagnostics(self, stderr: bytes) -> None:
        if not stderr:
            return
        try:
            self._diagnostics.write(stderr)
            self._diagnostics.flush()
        except OSError as exc:
            Log.warning(f"error writing standard error: {exc}")

    def _check_exit(self, returncode: int) -> None:
        if returncode == 0:
            return
        if returncode < 0:
            message = f"command {self._command[0]!r} was killed by signal {-returncode}"
        else:
            message = f"command {self._command[0]!r} exited with status {returncode}"
        raise ProcessExitError(message, returncode)

    def _emit(self, output: bytes) -> None:
        line = self._codec.encode(output) + self._terminator
        try:
            self._destination.write(line)
            self._destination.flush()
        except OSError as exc:
            raise OutputWriteError(f"error writing encoded line: {exc}") from exc
