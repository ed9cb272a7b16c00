class TransformError(Exception):
    """Base exception for all per-document transformation failures."""


class ProcessSpawnError(TransformError):
    """Raised when the external program cannot be started."""


class ProcessInputError(TransformError):
    """Raised when the document cannot be written to the program, or its input cannot be closed."""


class ProcessOutputError(TransformError):
    """Raised when the program's output or error stream cannot be read to completion."""


class ProcessExitError(TransformError):
    """Raised when the program exits with a non-zero status or is killed by a signal."""

    def __init__(self, message: str, returncode: int) -> None:
        super().__init__(message)
        self.returncode = returncode


class OutputWriteError(TransformError):
    """Raised when the encoded result cannot be written to the destination."""
