"""Human-readable status report for a query cycle.

An incomplete report renders as an empty string; the failures have already
been logged by the aggregator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from serverquery.prospect.models import ProspectKind
from serverquery.wire.enums import MissionDifficulty

if TYPE_CHECKING:
    from datetime import timedelta

    from serverquery.prospect.models import ProspectInfo
    from serverquery.query.types import QueryReport, ServerSnapshot

_SECONDS_PER_HOUR = 3600
_SECONDS_PER_MINUTE = 60

_DIFFICULTY_LABELS = {
    MissionDifficulty.NONE: "None",
    MissionDifficulty.EASY: "Easy",
    MissionDifficulty.MEDIUM: "Medium",
    MissionDifficulty.HARD: "Hard",
    MissionDifficulty.EXTREME: "Extreme",
}


def format_ping(ping_ms: float) -> str:
    """Format with one or two decimals, e.g. 12.0, 12.5, 12.34."""
    text = f"{ping_ms:.2f}"
    if text.endswith("0"):
        text = text[:-1]
    return text


def format_duration(duration: timedelta) -> str:
    """Format as hh:mm:ss, wrapping at one day."""
    total = int(duration.total_seconds()) % (24 * _SECONDS_PER_HOUR)
    hours, rest = divmod(total, _SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, _SECONDS_PER_MINUTE)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_difficulty(difficulty: MissionDifficulty | int) -> str:
    if isinstance(difficulty, MissionDifficulty):
        return _DIFFICULTY_LABELS[difficulty]
    return str(difficulty)


def _prospect_lines(prospect: ProspectInfo) -> list[str]:
    kind = prospect.kind
    if kind == ProspectKind.LOBBY:
        return ["Status: Lobby"]

    if kind == ProspectKind.OUTPOST:
        status = "Outpost"
    elif kind == ProspectKind.MISSION:
        status = f"Mission - {prospect.faction_mission_dt_key}"
    else:
        status = "Open World"

    lines = [
        f"Status: {status}",
        f"Prospect: {prospect.prospect_dt_key or ''}",
        f"Save: {prospect.prospect_id or ''}",
        f"Difficulty: {format_difficulty(prospect.difficulty)}",
        f"Hard Core: {'Yes' if prospect.is_hardcore else 'No'}",
        "",
        f"Associated Characters: {len(prospect.associated_members)}",
    ]
    lines.extend(f"  {member.character_name or ''}" for member in prospect.associated_members)
    return lines


def format_snapshot(snapshot: ServerSnapshot) -> str:
    lines = [
        f"Server: {snapshot.server_name}",
        f"Ping: {format_ping(snapshot.ping_ms)}ms",
        f"Version: {snapshot.game_version or ''}",
        f"QueryPort: {snapshot.endpoint.port}",
        f"Port: {snapshot.game_port}",
    ]
    if snapshot.prospect is not None:
        lines.extend(_prospect_lines(snapshot.prospect))
    lines.append("")
    lines.append(f"Online Players: {snapshot.player_count}/{snapshot.max_players}")
    lines.extend(f"  {player.name} - {format_duration(player.duration)}" for player in snapshot.players)
    return "\n".join(lines) + "\n"


def format_report(report: QueryReport) -> str:
    if not report.is_complete or report.snapshot is None:
        return ""
    return format_snapshot(report.snapshot)
