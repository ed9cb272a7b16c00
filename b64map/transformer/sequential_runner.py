from collections.abc import Sequence
from typing import IO

from b64map.logging.logger import Log
from b64map.transformer.base import BaseProcessRunner
from b64map.transformer.exceptions import ProcessInputError, ProcessOutputError
from b64map.transformer.models import ProcessResult


class SequentialProcessRunner(BaseProcessRunner):
    """Write all input, close it, drain stdout then stderr, then wait for exit.

    Meant for filters that consume all of their input before producing any
    output. A program that fills its stdout pipe before it has read all of its
    input blocks here forever; ConcurrentProcessRunner handles those.
    """

    def run(self, command: Sequence[str], document: bytes) -> ProcessResult:
        proc = self._spawn(command)
        try:
            self._feed(proc.stdin, document)
            stdout = self._drain(proc.stdout, "output")
            stderr = self._drain(proc.stderr, "standard error")
            returncode = proc.wait()
        finally:
            self._cleanup(proc)
        return ProcessResult(stdout=stdout, stderr=stderr, returncode=returncode)

    def _feed(self, stdin: IO[bytes] | None, document: bytes) -> None:
        if stdin is None:
            raise ProcessInputError("command has no input pipe")
        try:
            written = stdin.write(document)
        except OSError as exc:
            raise ProcessInputError(f"error writing to command: {exc}") from exc
        if written != len(document):
            Log.warning(
                "did not write the expected number of bytes to command "
                f"{written} != {len(document)}"
            )
        try:
            stdin.close()
        except OSError as exc:
            raise ProcessInputError(f"error closing command input: {exc}") from exc

    def _drain(self, pipe: IO[bytes] | None, name: str) -> bytes:
        if pipe is None:
            raise ProcessOutputError(f"command has no {name} pipe")
        try:
            return pipe.read()
        except OSError as exc:
            raise ProcessOutputError(f"error reading {name} from command: {exc}") from exc
