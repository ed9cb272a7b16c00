"""Line framing and decoding of the input stream.

Input is read in chunks and split on ``\\n``; a ``\\r`` right before the
terminator is dropped as well, so CRLF input frames the same as LF input.
Lines are reassembled across chunk boundaries before they are decoded, and
only one decoded document is produced per request from the consumer.
"""

from collections.abc import Iterator
from typing import BinaryIO

from b64map.codec.base import BaseLineCodec
from b64map.codec.exceptions import CodecError
from b64map.config.settings import Settings
from b64map.framer.exceptions import DocumentDecodeError, StreamReadError
from b64map.logging.logger import Log


class DocumentReader:
    """Turns a binary stream into a lazy sequence of decoded documents."""

    def __init__(self, codec: BaseLineCodec, settings: Settings) -> None:
        self._codec = codec
        self._chunk_size = settings.read_chunk_size

    def read_documents(self, stream: BinaryIO) -> Iterator[bytes]:
        """Yield one decoded document per input line.

        The iterator is single-pass: it consumes ``stream`` as it goes and
        never reads ahead more than one chunk.

        Raises:
            DocumentDecodeError: on the first line that fails to decode.
            StreamReadError: if reading from ``stream`` fails.
        """
        read = getattr(stream, "read1", stream.read)
        pending = bytearray()
        line_number = 0

        while True:
            try:
                chunk = read(self._chunk_size)
            except OSError as exc:
                raise StreamReadError(f"error reading line {line_number + 1}: {exc}") from exc
            if not chunk:
                break
            pending += chunk

            # Bytes before the new chunk were already searched for a terminator.
            start = 0
            end = pending.find(b"\n", len(pending) - len(chunk))
            while end != -1:
                line_number += 1
                yield self._decode(pending[start:end], line_number)
                start = end + 1
                end = pending.find(b"\n", start)
            del pending[:start]

        # A final line without a terminator is still a document.
        if pending:
            line_number += 1
            yield self._decode(pending, line_number)

        Log.debug(f"read_documents: finished after {line_number} lines (EOF)")

    def _decode(self, line: bytearray, line_number: int) -> bytes:
        if line.endswith(b"\r"):
            line = line[:-1]
        try:
            return self._codec.decode(bytes(line))
        except CodecError as exc:
            raise DocumentDecodeError(line_number, str(exc)) from exc
