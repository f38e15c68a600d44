"""Errors raised while decoding engine-serialized binary payloads."""


class WireDecodeError(Exception):
    """Base error for malformed binary payloads.

    Carries the byte offset at which decoding failed.
    """

    def __init__(self, message: str, offset: int = 0) -> None:
        super().__init__(message)
        self.offset = offset


class TruncatedInputError(WireDecodeError):
    """Raised when fewer bytes remain than a field requires."""


class InvalidLengthError(WireDecodeError):
    """Raised when a length or count prefix is negative or implausibly large."""


class InvalidBase64Error(WireDecodeError):
    """Raised when a base64 text value cannot be decoded to bytes."""
