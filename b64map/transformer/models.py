from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessResult:
    """Everything captured from one run of the external program."""

    stdout: bytes
    stderr: bytes
    returncode: int
