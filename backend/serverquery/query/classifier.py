"""Map raw transport responses to exchange outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from serverquery.query.types import QueryResult, Succeeded, TimedOut, Unrecognized

if TYPE_CHECKING:
    from serverquery.query.types import ExchangeOutcome, TransportResponse


def classify_response[T](response: TransportResponse[T]) -> ExchangeOutcome[T]:
    """Classify one exchange.

    A received response without data is treated as unrecognized, since the
    transport could not turn it into a payload.
    """
    match response.result:
        case QueryResult.RESPONSE_RECEIVED if response.data is not None:
            return Succeeded(payload=response.data, ping_ms=response.ping_ms)
        case QueryResult.QUERY_TIMED_OUT:
            return TimedOut()
        case _:
            return Unrecognized()


def failure_result(outcome: ExchangeOutcome[object]) -> QueryResult | None:
    """Return the transport result a failed outcome stands for, or None on success."""
    if isinstance(outcome, TimedOut):
        return QueryResult.QUERY_TIMED_OUT
    if isinstance(outcome, Unrecognized):
        return QueryResult.UNKNOWN_RESPONSE_RECEIVED
    return None
