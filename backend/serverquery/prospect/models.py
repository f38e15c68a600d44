"""
Decoded prospect records published by Icarus dedicated servers.

Enumerated fields hold the enum member when the byte is known and the raw
integer otherwise, so records from newer servers still decode.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from serverquery.wire.enums import MissionDifficulty, ProspectLocation, ProspectState

# Mission key used by outposts, which are listed as missions without an objective.
OUTPOST_MISSION_KEY = "None"


class ProspectKind(StrEnum):
    LOBBY = "lobby"
    OUTPOST = "outpost"
    MISSION = "mission"
    OPEN_WORLD = "open_world"


class AssociatedMember(BaseModel):
    """A character that joined the prospect and has not left by dropship."""

    model_config = ConfigDict(frozen=True)

    account_name: str | None
    # Always equal to account_name for server queries.
    character_name: str | None
    user_id: str | None
    chr_slot: int
    experience: int
    location: ProspectLocation | int
    # Always False for server queries.
    settled: bool
    is_currently_playing: bool


class ProspectInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    prospect_id: str | None
    # Empty for server hosted prospects.
    claimed_account_id: str | None
    claimed_account_character: int
    prospect_dt_key: str | None
    # Empty for open worlds.
    faction_mission_dt_key: str | None
    # Only set while the server sits in the pre-game lobby.
    lobby_name: str | None
    # Legacy, never set by current servers.
    expire_time: int
    prospect_state: ProspectState | int
    cost: int
    reward: int
    difficulty: MissionDifficulty | int
    # Legacy, always False.
    insurance: bool
    no_respawns: bool
    elapsed_time: int
    associated_members: tuple[AssociatedMember, ...] = ()

    @property
    def kind(self) -> ProspectKind:
        if self.lobby_name is not None:
            return ProspectKind.LOBBY
        if self.faction_mission_dt_key is None:
            return ProspectKind.OPEN_WORLD
        if self.faction_mission_dt_key == OUTPOST_MISSION_KEY:
            return ProspectKind.OUTPOST
        return ProspectKind.MISSION

    @property
    def is_hardcore(self) -> bool:
        return self.no_respawns
