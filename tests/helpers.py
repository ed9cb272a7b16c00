import base64


def encode_lines(*documents: bytes, terminator: bytes = b"\n") -> bytes:
    """Join documents as base64 lines, each followed by ``terminator``."""
    return b"".join(base64.b64encode(doc) + terminator for doc in documents)


def decode_lines(output: bytes) -> list[bytes]:
    """Split emitted output into lines and decode each one."""
    assert output == b"" or output.endswith(b"\n")
    return [base64.b64decode(line, validate=True) for line in output.splitlines()]
