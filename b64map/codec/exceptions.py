class CodecError(Exception):
    """Raised when a line cannot be decoded with the fixed text encoding."""
