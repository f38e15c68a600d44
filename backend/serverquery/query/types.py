"""Types exchanged between the transport, the classifier and the aggregator."""

from datetime import timedelta
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from serverquery.prospect.models import ProspectInfo

DEFAULT_QUERY_PORT = 27015
_MAX_PORT = 65535


class ExchangeKind(StrEnum):
    INFO = "info"
    RULES = "rules"
    PLAYERS = "players"


class QueryResult(StrEnum):
    """How a single exchange ended, as reported by the transport."""

    RESPONSE_RECEIVED = "response_received"
    QUERY_TIMED_OUT = "query_timed_out"
    UNKNOWN_RESPONSE_RECEIVED = "unknown_response_received"


class QueryStatus(StrEnum):
    COMPLETE = "complete"
    INCOMPLETE = "incomplete"


class Endpoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    host: str = Field(min_length=1)
    port: int = Field(default=DEFAULT_QUERY_PORT, ge=1, le=_MAX_PORT)

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


def parse_endpoint(value: str) -> Endpoint:
    """Parse ``host`` or ``host:port`` into an Endpoint.

    Bracketed IPv6 literals (``[::1]:27015``) are accepted.
    Raises ValueError for empty hosts and non-numeric or out-of-range ports.
    """
    text = value.strip()
    if text.startswith("["):
        host, sep, rest = text[1:].partition("]")
        if not sep:
            msg = f"Unterminated IPv6 address: {value!r}"
            raise ValueError(msg)
        if rest and not rest.startswith(":"):
            msg = f"Unexpected text after IPv6 address: {value!r}"
            raise ValueError(msg)
        if rest == ":":
            msg = f"Missing port after colon in endpoint: {value!r}"
            raise ValueError(msg)
        port_text = rest.removeprefix(":")
    elif text.count(":") == 1:
        host, _, port_text = text.partition(":")
        if not port_text:
            msg = f"Missing port after colon in endpoint: {value!r}"
            raise ValueError(msg)
    else:
        host, port_text = text, ""

    if not host:
        msg = f"Missing host in endpoint: {value!r}"
        raise ValueError(msg)
    if not port_text:
        return Endpoint(host=host)
    if not port_text.isdigit():
        msg = f"Invalid port in endpoint: {value!r}"
        raise ValueError(msg)
    port = int(port_text)
    if not 1 <= port <= _MAX_PORT:
        msg = f"Port must be 1-{_MAX_PORT}, got {port}"
        raise ValueError(msg)
    return Endpoint(host=host, port=port)


class ServerInfoData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    game_port: int
    player_count: int
    max_players: int


class ServerRulesData(BaseModel):
    model_config = ConfigDict(frozen=True)

    rules: dict[str, str]


class ServerPlayerData(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    score: int = 0
    duration: timedelta = timedelta(0)


class ServerPlayersData(BaseModel):
    model_config = ConfigDict(frozen=True)

    players: tuple[ServerPlayerData, ...] = ()

    @property
    def active_players(self) -> tuple[ServerPlayerData, ...]:
        """Players that finished connecting; slots still joining have no name."""
        return tuple(p for p in self.players if p.name)


class TransportResponse[T](BaseModel):
    """Raw outcome of one exchange as delivered by a transport."""

    model_config = ConfigDict(frozen=True)

    result: QueryResult
    data: T | None = None
    ping_ms: float = 0.0


class Succeeded[T](BaseModel):
    model_config = ConfigDict(frozen=True)

    payload: T
    ping_ms: float


class TimedOut(BaseModel):
    model_config = ConfigDict(frozen=True)


class Unrecognized(BaseModel):
    model_config = ConfigDict(frozen=True)


type ExchangeOutcome[T] = Succeeded[T] | TimedOut | Unrecognized


class ConnectedPlayer(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    duration: timedelta


class ServerSnapshot(BaseModel):
    """Merged view of one query cycle."""

    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint
    server_name: str
    game_port: int
    player_count: int
    max_players: int
    ping_ms: float
    game_version: str | None = None
    prospect: ProspectInfo | None = None
    # Set when the prospect rule was present but could not be decoded.
    prospect_error: str | None = None
    players: tuple[ConnectedPlayer, ...] = ()


class ExchangeFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    exchange: ExchangeKind
    result: QueryResult


class QueryReport(BaseModel):
    """Result of a query cycle.

    ``snapshot`` is only set when every exchange succeeded; otherwise
    ``failures`` lists the exchanges that did not.
    """

    model_config = ConfigDict(frozen=True)

    endpoint: Endpoint
    status: QueryStatus
    snapshot: ServerSnapshot | None = None
    failures: tuple[ExchangeFailure, ...] = ()

    @property
    def is_complete(self) -> bool:
        return self.status == QueryStatus.COMPLETE
