"""Little-endian writer mirroring BinaryReader.

Used to build prospect payloads in the exact field order servers publish them.
"""

import struct

_INT32 = struct.Struct("<i")
_INT64 = struct.Struct("<q")
_UINT8 = struct.Struct("<B")


class BinaryWriter:
    def __init__(self) -> None:
        self._buffer = bytearray()

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def write_int32(self, value: int) -> None:
        self._buffer += _INT32.pack(value)

    def write_int64(self, value: int) -> None:
        self._buffer += _INT64.pack(value)

    def write_uint8(self, value: int) -> None:
        self._buffer += _UINT8.pack(value)

    def write_bool32(self, value: bool) -> None:  # noqa: FBT001
        self.write_int32(1 if value else 0)

    def write_fstring(self, value: str | None) -> None:
        """Write a NUL-terminated UTF-16 string, or the zero sentinel for None."""
        if value is None:
            self.write_int32(0)
            return
        encoded = (value + "\x00").encode("utf-16-le")
        self.write_int32(len(encoded) // 2)
        self._buffer += encoded
