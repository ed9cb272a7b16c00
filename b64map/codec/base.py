from abc import ABC, abstractmethod


class BaseLineCodec(ABC):
    """Contract for the binary-to-text encoding used on every input and output line."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """Encode raw document bytes as one line of text, without a terminator."""

    @abstractmethod
    def decode(self, line: bytes) -> bytes:
        """Decode one line of text (terminator already stripped) to raw bytes.

        Raises:
            CodecError: if the line is not valid in this encoding.
        """
