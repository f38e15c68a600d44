"""
Concurrent server query: three exchanges joined into one snapshot.

Info, rules and players are independent queries against the same endpoint.
They are started together and joined with asyncio.gather; the merge runs only
after all three have concluded, so completion order never affects the result.
A failed exchange makes the whole cycle incomplete (no partial snapshot).
The prospect record is decoded from the rules; a bad payload is logged and
only leaves the prospect out of the snapshot.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from serverquery.prospect.decoder import decode_prospect_info_base64
from serverquery.query.classifier import classify_response, failure_result
from serverquery.query.settings import QuerySettings
from serverquery.query.types import (
    ConnectedPlayer,
    ExchangeFailure,
    ExchangeKind,
    QueryReport,
    QueryResult,
    QueryStatus,
    ServerSnapshot,
    Succeeded,
)
from serverquery.wire.exceptions import WireDecodeError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from serverquery.prospect.models import ProspectInfo
    from serverquery.query.transport import QueryTransport
    from serverquery.query.types import (
        Endpoint,
        ExchangeOutcome,
        ServerInfoData,
        ServerPlayersData,
        ServerRulesData,
    )

logger = structlog.get_logger()

_FAILURE_MESSAGES = {
    QueryResult.QUERY_TIMED_OUT: "query timed out",
    QueryResult.UNKNOWN_RESPONSE_RECEIVED: "query returned an unrecognized response",
}


def parse_game_version(value: str) -> str:
    """Strip the build suffix from a ``<version>-<build>`` string.

    A string without a hyphen, or starting with one, is returned unchanged.
    """
    index = value.find("-")
    return value[:index] if index > 0 else value


def decode_prospect(rules: Mapping[str, str], key: str) -> tuple[ProspectInfo | None, str | None]:
    """Decode the prospect record published under ``key``.

    Returns (record, error). Both are None when the key is absent; a decode
    failure yields (None, message) and is logged.
    """
    payload = rules.get(key)
    if payload is None:
        return None, None
    try:
        return decode_prospect_info_base64(payload), None
    except WireDecodeError as exc:
        logger.warning(
            "unable to parse prospect info",
            error=str(exc),
            error_type=type(exc).__name__,
            offset=exc.offset,
        )
        return None, str(exc)


class QueryAggregator:
    """Queries one server and merges the three exchanges into a QueryReport."""

    def __init__(self, transport: QueryTransport, settings: QuerySettings | None = None) -> None:
        self._transport = transport
        self._settings = settings or QuerySettings()

    async def query(self, endpoint: Endpoint) -> QueryReport:
        structlog.contextvars.bind_contextvars(endpoint=str(endpoint))
        try:
            info, rules, players = await self._run_exchanges(endpoint)
            return self._build_report(endpoint, info, rules, players)
        finally:
            structlog.contextvars.unbind_contextvars("endpoint")

    async def _run_exchanges(
        self,
        endpoint: Endpoint,
    ) -> tuple[
        ExchangeOutcome[ServerInfoData],
        ExchangeOutcome[ServerRulesData],
        ExchangeOutcome[ServerPlayersData],
    ]:
        # return_exceptions keeps gather waiting for every exchange even if one raises.
        responses = await asyncio.gather(
            self._transport.query_info(endpoint),
            self._transport.query_rules(endpoint),
            self._transport.query_players(endpoint),
            return_exceptions=True,
        )
        for response in responses:
            if isinstance(response, BaseException):
                raise response
        info_response, rules_response, players_response = responses
        return (
            classify_response(info_response),
            classify_response(rules_response),
            classify_response(players_response),
        )

    def _build_report(
        self,
        endpoint: Endpoint,
        info: ExchangeOutcome[ServerInfoData],
        rules: ExchangeOutcome[ServerRulesData],
        players: ExchangeOutcome[ServerPlayersData],
    ) -> QueryReport:
        failures: list[ExchangeFailure] = []
        for kind, outcome in ((ExchangeKind.INFO, info), (ExchangeKind.RULES, rules), (ExchangeKind.PLAYERS, players)):
            result = failure_result(outcome)
            if result is not None:
                logger.warning(_FAILURE_MESSAGES[result], exchange=kind)
                failures.append(ExchangeFailure(exchange=kind, result=result))

        match info, rules, players:
            case Succeeded(), Succeeded(payload=rules_data), Succeeded(payload=players_data):
                snapshot = self._merge(endpoint, info, rules_data, players_data)
                return QueryReport(endpoint=endpoint, status=QueryStatus.COMPLETE, snapshot=snapshot)
            case _:
                return QueryReport(endpoint=endpoint, status=QueryStatus.INCOMPLETE, failures=tuple(failures))

    def _merge(
        self,
        endpoint: Endpoint,
        info: Succeeded[ServerInfoData],
        rules: ServerRulesData,
        players: ServerPlayersData,
    ) -> ServerSnapshot:
        version = rules.rules.get(self._settings.version_rule_key)
        prospect, prospect_error = decode_prospect(rules.rules, self._settings.prospect_rule_key)

        return ServerSnapshot(
            endpoint=endpoint,
            server_name=info.payload.name,
            game_port=info.payload.game_port,
            player_count=info.payload.player_count,
            max_players=info.payload.max_players,
            ping_ms=info.ping_ms,
            game_version=parse_game_version(version) if version is not None else None,
            prospect=prospect,
            prospect_error=prospect_error,
            players=tuple(ConnectedPlayer(name=p.name, duration=p.duration) for p in players.active_players),
        )


async def query_server(
    endpoint: Endpoint,
    transport: QueryTransport,
    settings: QuerySettings | None = None,
) -> QueryReport:
    """Run one query cycle against ``endpoint``."""
    return await QueryAggregator(transport, settings).query(endpoint)
