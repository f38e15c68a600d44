"""Enumerations stored as single bytes in serialized prospect records.

Values outside the known range are kept as raw integers by ``coerce_enum``
because newer servers may add members.
"""

from enum import IntEnum


class ProspectState(IntEnum):
    UNCLAIMED = 0
    CLAIMED = 1
    ACTIVE = 2
    ENDED = 3


class MissionDifficulty(IntEnum):
    NONE = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXTREME = 4


class ProspectLocation(IntEnum):
    """General location of an associated character."""

    UNKNOWN = 0
    HAB = 1
    PROSPECT_CONIFER = 2
    PROSPECT_ARCTIC = 3
    PROSPECT_CAVE = 4
    PROSPECT_DESERT = 5


def coerce_enum[E: IntEnum](enum_cls: type[E], raw: int) -> E | int:
    """Return the enum member for ``raw``, or ``raw`` itself when unknown."""
    try:
        return enum_cls(raw)
    except ValueError:
        return raw
