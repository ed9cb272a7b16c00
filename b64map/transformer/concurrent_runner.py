from collections.abc import Sequence

from b64map.transformer.base import BaseProcessRunner
from b64map.transformer.exceptions import ProcessOutputError
from b64map.transformer.models import ProcessResult


class ConcurrentProcessRunner(BaseProcessRunner):
    """Feed input while draining stdout and stderr at the same time.

    Uses ``Popen.communicate``, so a program that interleaves reading and
    writing cannot deadlock on a full pipe buffer. A program that exits
    without reading all of its input is not an input error here; its exit
    status decides the outcome.
    """

    def run(self, command: Sequence[str], document: bytes) -> ProcessResult:
        proc = self._spawn(command)
        try:
            try:
                stdout, stderr = proc.communicate(input=document)
            except OSError as exc:
                raise ProcessOutputError(f"error communicating with command: {exc}") from exc
        finally:
            self._cleanup(proc)
        return ProcessResult(stdout=stdout, stderr=stderr, returncode=proc.returncode)
