"""Builders for prospect records with sensible defaults for testing."""

from serverquery.prospect.models import AssociatedMember, ProspectInfo
from serverquery.wire.enums import MissionDifficulty, ProspectLocation, ProspectState


def create_member(
    name: str | None = "Player",
    *,
    user_id: str | None = "76561198000000000",
    chr_slot: int = 0,
    experience: int = 1000,
    location: ProspectLocation | int = ProspectLocation.PROSPECT_CONIFER,
    is_currently_playing: bool = True,
) -> AssociatedMember:
    return AssociatedMember(
        account_name=name,
        character_name=name,
        user_id=user_id,
        chr_slot=chr_slot,
        experience=experience,
        location=location,
        settled=False,
        is_currently_playing=is_currently_playing,
    )


def create_prospect(
    *,
    prospect_id: str | None = "MySave",
    claimed_account_id: str | None = None,
    claimed_account_character: int = 0,
    prospect_dt_key: str | None = "Tier1_Forest_Recon_0",
    faction_mission_dt_key: str | None = None,
    lobby_name: str | None = None,
    prospect_state: ProspectState | int = ProspectState.ACTIVE,
    difficulty: MissionDifficulty | int = MissionDifficulty.MEDIUM,
    no_respawns: bool = False,
    elapsed_time: int = 3600,
    members: tuple[AssociatedMember, ...] = (),
) -> ProspectInfo:
    return ProspectInfo(
        prospect_id=prospect_id,
        claimed_account_id=claimed_account_id,
        claimed_account_character=claimed_account_character,
        prospect_dt_key=prospect_dt_key,
        faction_mission_dt_key=faction_mission_dt_key,
        lobby_name=lobby_name,
        expire_time=0,
        prospect_state=prospect_state,
        cost=0,
        reward=0,
        difficulty=difficulty,
        insurance=False,
        no_respawns=no_respawns,
        elapsed_time=elapsed_time,
        associated_members=members,
    )
