"""Little-endian reader for engine-serialized binary payloads.

Strings use the engine's FString convention: a signed 32-bit prefix giving the
number of UTF-16 code units (including the trailing NUL, when present),
followed by that many 16-bit units. A zero prefix marks an absent string.
"""

import struct

from serverquery.wire.exceptions import InvalidLengthError, TruncatedInputError

_INT32 = struct.Struct("<i")
_INT64 = struct.Struct("<q")
_UINT8 = struct.Struct("<B")

UTF16_UNIT_SIZE = 2
FSTRING_PREFIX_SIZE = _INT32.size
# Upper bound on a plausible string; larger prefixes are treated as corrupt.
MAX_FSTRING_UNITS = 0x10000


class BinaryReader:
    """Sequential reader over an immutable byte buffer.

    Every read checks the remaining length first, so short input raises
    TruncatedInputError instead of reading past the end. String prefixes that
    are negative or above MAX_FSTRING_UNITS raise InvalidLengthError.
    """

    def __init__(self, data: bytes, offset: int = 0) -> None:
        if offset < 0 or offset > len(data):
            msg = f"offset must be 0-{len(data)}, got {offset}"
            raise ValueError(msg)
        self._data = bytes(data)
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _take(self, size: int, field: str) -> bytes:
        if size > self.remaining:
            msg = f"{field} needs {size} bytes, {self.remaining} remaining"
            raise TruncatedInputError(msg, offset=self._offset)
        start = self._offset
        self._offset += size
        return self._data[start : self._offset]

    def read_int32(self, field: str = "int32") -> int:
        (value,) = _INT32.unpack(self._take(_INT32.size, field))
        return value

    def read_int64(self, field: str = "int64") -> int:
        (value,) = _INT64.unpack(self._take(_INT64.size, field))
        return value

    def read_uint8(self, field: str = "uint8") -> int:
        (value,) = _UINT8.unpack(self._take(_UINT8.size, field))
        return value

    def read_bool32(self, field: str = "bool32") -> bool:
        """Read a 32-bit integer where any nonzero value means True."""
        return self.read_int32(field) != 0

    def read_fstring(self, field: str = "string") -> str | None:
        """Read a length-prefixed UTF-16 string.

        Returns None for the zero-length sentinel. A trailing NUL unit is
        stripped from the decoded text.
        """
        prefix_offset = self._offset
        length = self.read_int32(f"{field} length")
        if length == 0:
            return None
        if length < 0:
            msg = f"{field} has negative length prefix {length}"
            raise InvalidLengthError(msg, offset=prefix_offset)
        if length > MAX_FSTRING_UNITS:
            msg = f"{field} declares {length} code units, limit is {MAX_FSTRING_UNITS}"
            raise InvalidLengthError(msg, offset=prefix_offset)
        raw = self._take(length * UTF16_UNIT_SIZE, field)
        try:
            text = raw.decode("utf-16-le")
        except UnicodeDecodeError as exc:
            msg = f"{field} is not valid UTF-16: {exc}"
            raise InvalidLengthError(msg, offset=prefix_offset) from exc
        return text.removesuffix("\x00")
