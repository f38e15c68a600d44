"""Encoder producing the binary prospect record layout read by prospect.decoder."""

import base64

from serverquery.prospect.models import AssociatedMember, ProspectInfo
from serverquery.wire.writer import BinaryWriter


def write_associated_member(writer: BinaryWriter, member: AssociatedMember) -> None:
    writer.write_fstring(member.account_name)
    writer.write_fstring(member.character_name)
    writer.write_fstring(member.user_id)
    writer.write_int32(member.chr_slot)
    writer.write_int32(member.experience)
    writer.write_uint8(int(member.location))
    writer.write_bool32(member.settled)
    writer.write_bool32(member.is_currently_playing)


def encode_prospect_info(info: ProspectInfo) -> bytes:
    writer = BinaryWriter()
    writer.write_fstring(info.prospect_id)
    writer.write_fstring(info.claimed_account_id)
    writer.write_int32(info.claimed_account_character)
    writer.write_fstring(info.prospect_dt_key)
    writer.write_fstring(info.faction_mission_dt_key)
    writer.write_fstring(info.lobby_name)
    writer.write_int64(info.expire_time)
    writer.write_uint8(int(info.prospect_state))
    writer.write_int32(info.cost)
    writer.write_int32(info.reward)
    writer.write_uint8(int(info.difficulty))
    writer.write_bool32(info.insurance)
    writer.write_bool32(info.no_respawns)
    writer.write_int32(info.elapsed_time)
    writer.write_int32(len(info.associated_members))
    for member in info.associated_members:
        write_associated_member(writer, member)
    return writer.getvalue()


def encode_prospect_info_base64(info: ProspectInfo) -> str:
    """Encode a record the way servers publish it under the prospect rule key."""
    return base64.b64encode(encode_prospect_info(info)).decode("ascii")
