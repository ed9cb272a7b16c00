class FramerError(Exception):
    """Base exception for input framing errors. Always fatal to the run."""


class DocumentDecodeError(FramerError):
    """Raised when an input line is not valid in the fixed text encoding."""

    def __init__(self, line_number: int, message: str) -> None:
        super().__init__(f"error decoding line {line_number}: {message}")
        self.line_number = line_number


class StreamReadError(FramerError):
    """Raised when the input stream cannot be read."""
