"""QueryTransport backed by the python-a2s Steam server query client.

Timeouts and socket errors conclude the exchange as timed out; replies the
client cannot parse, or whose fields fail validation, conclude it as
unrecognized.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import TYPE_CHECKING

import a2s
import structlog
from pydantic import ValidationError

from serverquery.query.types import (
    QueryResult,
    ServerInfoData,
    ServerPlayerData,
    ServerPlayersData,
    ServerRulesData,
    TransportResponse,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from serverquery.query.types import Endpoint

logger = structlog.get_logger()

_MS_PER_SECOND = 1000.0


class A2STransport:
    def __init__(self, timeout: float = 3.0, encoding: str = "utf-8") -> None:
        self._timeout = timeout
        self._encoding = encoding

    async def _exchange[R, T](
        self,
        endpoint: Endpoint,
        request: Callable[..., Awaitable[R]],
        convert: Callable[[R], T],
    ) -> TransportResponse[T]:
        address = (endpoint.host, endpoint.port)
        start = time.perf_counter()
        try:
            reply = await request(address, timeout=self._timeout, encoding=self._encoding)
        except a2s.BrokenMessageError as exc:
            logger.debug("malformed query reply", endpoint=str(endpoint), error=str(exc))
            return TransportResponse(result=QueryResult.UNKNOWN_RESPONSE_RECEIVED)
        except OSError as exc:
            # TimeoutError is an OSError; unreachable hosts never reply either.
            logger.debug("no query reply", endpoint=str(endpoint), error=str(exc))
            return TransportResponse(result=QueryResult.QUERY_TIMED_OUT)
        ping_ms = (time.perf_counter() - start) * _MS_PER_SECOND
        try:
            data = convert(reply)
        except ValidationError as exc:
            logger.debug("query reply failed validation", endpoint=str(endpoint), error=str(exc))
            return TransportResponse(result=QueryResult.UNKNOWN_RESPONSE_RECEIVED)
        return TransportResponse(result=QueryResult.RESPONSE_RECEIVED, data=data, ping_ms=ping_ms)

    async def query_info(self, endpoint: Endpoint) -> TransportResponse[ServerInfoData]:
        return await self._exchange(endpoint, a2s.ainfo, _convert_info)

    async def query_rules(self, endpoint: Endpoint) -> TransportResponse[ServerRulesData]:
        return await self._exchange(endpoint, a2s.arules, _convert_rules)

    async def query_players(self, endpoint: Endpoint) -> TransportResponse[ServerPlayersData]:
        return await self._exchange(endpoint, a2s.aplayers, _convert_players)


def _convert_info(info: a2s.SourceInfo) -> ServerInfoData:
    return ServerInfoData(
        name=info.server_name,
        game_port=info.port or 0,
        player_count=info.player_count,
        max_players=info.max_players,
    )


def _convert_rules(rules: dict[str, str]) -> ServerRulesData:
    return ServerRulesData(rules={str(k): str(v) for k, v in rules.items()})


def _convert_players(players: list[a2s.Player]) -> ServerPlayersData:
    return ServerPlayersData(
        players=tuple(
            ServerPlayerData(name=p.name, score=p.score, duration=timedelta(seconds=p.duration)) for p in players
        ),
    )
