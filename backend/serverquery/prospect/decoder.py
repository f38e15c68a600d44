"""
Decoder for the binary prospect record embedded in server rules.

The record has no self-description: fields are read in a fixed order, all
integers little-endian, strings as FStrings (see serverquery.wire.reader).

Record layout
-------------
    FString  prospect_id
    FString  claimed_account_id
    int32    claimed_account_character
    FString  prospect_dt_key
    FString  faction_mission_dt_key
    FString  lobby_name
    int64    expire_time
    uint8    prospect_state
    int32    cost
    int32    reward
    uint8    difficulty
    int32    insurance (bool)
    int32    no_respawns (bool)
    int32    elapsed_time
    int32    member count, followed by that many members

Member layout
-------------
    FString  account_name
    FString  character_name
    FString  user_id
    int32    chr_slot
    int32    experience
    uint8    location
    int32    settled (bool)
    int32    is_currently_playing (bool)

Decoding is all-or-nothing: any error raises before a record is built.
"""

import base64
import binascii

from serverquery.prospect.models import AssociatedMember, ProspectInfo
from serverquery.wire.enums import MissionDifficulty, ProspectLocation, ProspectState, coerce_enum
from serverquery.wire.exceptions import InvalidBase64Error, InvalidLengthError, TruncatedInputError
from serverquery.wire.reader import FSTRING_PREFIX_SIZE, BinaryReader

# Smallest encodings, with every string absent.
RECORD_MIN_SIZE = 5 * FSTRING_PREFIX_SIZE + 4 + 8 + 1 + 4 + 4 + 1 + 4 + 4 + 4 + 4  # 58
MEMBER_MIN_SIZE = 3 * FSTRING_PREFIX_SIZE + 4 + 4 + 1 + 4 + 4  # 29


def read_associated_member(reader: BinaryReader) -> AssociatedMember:
    return AssociatedMember(
        account_name=reader.read_fstring("account_name"),
        character_name=reader.read_fstring("character_name"),
        user_id=reader.read_fstring("user_id"),
        chr_slot=reader.read_int32("chr_slot"),
        experience=reader.read_int32("experience"),
        location=coerce_enum(ProspectLocation, reader.read_uint8("location")),
        settled=reader.read_bool32("settled"),
        is_currently_playing=reader.read_bool32("is_currently_playing"),
    )


def _read_member_count(reader: BinaryReader) -> int:
    """Read the member count and check the remaining bytes can hold that many members."""
    count_offset = reader.offset
    count = reader.read_int32("member count")
    if count < 0:
        msg = f"member count must be >= 0, got {count}"
        raise InvalidLengthError(msg, offset=count_offset)
    required = count * MEMBER_MIN_SIZE
    if required > reader.remaining:
        msg = f"{count} members need at least {required} bytes, {reader.remaining} remaining"
        raise TruncatedInputError(msg, offset=count_offset)
    return count


def read_prospect_info(reader: BinaryReader) -> ProspectInfo:
    """Read one prospect record at the reader's current offset."""
    # Field reads are sequenced explicitly; keyword arguments would hide the order.
    prospect_id = reader.read_fstring("prospect_id")
    claimed_account_id = reader.read_fstring("claimed_account_id")
    claimed_account_character = reader.read_int32("claimed_account_character")
    prospect_dt_key = reader.read_fstring("prospect_dt_key")
    faction_mission_dt_key = reader.read_fstring("faction_mission_dt_key")
    lobby_name = reader.read_fstring("lobby_name")
    expire_time = reader.read_int64("expire_time")
    prospect_state = coerce_enum(ProspectState, reader.read_uint8("prospect_state"))
    cost = reader.read_int32("cost")
    reward = reader.read_int32("reward")
    difficulty = coerce_enum(MissionDifficulty, reader.read_uint8("difficulty"))
    insurance = reader.read_bool32("insurance")
    no_respawns = reader.read_bool32("no_respawns")
    elapsed_time = reader.read_int32("elapsed_time")

    count = _read_member_count(reader)
    members = tuple(read_associated_member(reader) for _ in range(count))

    return ProspectInfo(
        prospect_id=prospect_id,
        claimed_account_id=claimed_account_id,
        claimed_account_character=claimed_account_character,
        prospect_dt_key=prospect_dt_key,
        faction_mission_dt_key=faction_mission_dt_key,
        lobby_name=lobby_name,
        expire_time=expire_time,
        prospect_state=prospect_state,
        cost=cost,
        reward=reward,
        difficulty=difficulty,
        insurance=insurance,
        no_respawns=no_respawns,
        elapsed_time=elapsed_time,
        associated_members=members,
    )


def decode_prospect_info(data: bytes, offset: int = 0) -> tuple[ProspectInfo, int]:
    """Decode a prospect record starting at ``offset``.

    Returns (record, next_offset). Bytes after the record are left unread.
    """
    reader = BinaryReader(data, offset)
    info = read_prospect_info(reader)
    return info, reader.offset


def decode_base64_payload(text: str) -> bytes:
    """Decode a base64 rule value, rejecting characters outside the alphabet."""
    try:
        return base64.b64decode(text.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidBase64Error(f"invalid base64 payload: {exc}") from exc


def decode_prospect_info_base64(text: str) -> ProspectInfo:
    """Decode the base64 text published under the prospect rule key."""
    info, _ = decode_prospect_info(decode_base64_payload(text))
    return info
