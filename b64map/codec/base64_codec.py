import base64
import binascii

from b64map.codec.base import BaseLineCodec
from b64map.codec.exceptions import CodecError


class Base64LineCodec(BaseLineCodec):
    """Standard padded base64 (RFC 4648 alphabet) with strict validation."""

    def encode(self, data: bytes) -> bytes:
        return base64.b64encode(data)

    def decode(self, line: bytes) -> bytes:
        try:
            return base64.b64decode(line, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CodecError(f"illegal base64 data: {exc}") from exc
