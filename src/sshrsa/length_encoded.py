"""Reader and writer for the SSH length-encoded field primitive.

Every field is a 4-byte big-endian unsigned length followed by exactly that many bytes, with no padding or terminator.

Typical usage example:

    writer = LengthEncodedWriter()
    writer.write_length_encoded(b"ssh-rsa")
    reader = LengthEncodedReader(writer.take())
    assert reader.read_length_encoded() == b"ssh-rsa"
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import io
import struct

from sshrsa.errors import InvalidLength

_LENGTH = struct.Struct(">I")


class LengthEncodedReader:
    """Consumes sequential length-encoded fields from an in-memory buffer."""

    def __init__(self, data: bytes) -> None:
        self._cursor = io.BytesIO(data)
        self._size = len(data)

    def _read_exact(self, count: int) -> bytes:
        chunk = self._cursor.read(count)
        if len(chunk) != count:
            raise InvalidLength()
        return chunk

    def read_length_encoded(self) -> bytes:
        """Reads the next field.

        Returns:
            The field's payload, without its length prefix.

        Raises:
            InvalidLength: If the prefix or the payload runs past the end of the buffer.
        """
        (length,) = _LENGTH.unpack(self._read_exact(_LENGTH.size))
        return self._read_exact(length)

    def remaining(self) -> int:
        """Number of bytes not yet consumed."""
        return self._size - self._cursor.tell()


class LengthEncodedWriter:
    """Accumulates length-encoded fields into a byte buffer."""

    def __init__(self) -> None:
        self._cursor = io.BytesIO()

    def write_length_encoded(self, buf: bytes) -> None:
        """Appends `buf` prefixed by its length.

        Args:
            buf: The payload. Must be shorter than 2**32 bytes.
        """
        self._cursor.write(_LENGTH.pack(len(buf)))
        self._cursor.write(buf)

    def take(self) -> bytes:
        return self._cursor.getvalue()
