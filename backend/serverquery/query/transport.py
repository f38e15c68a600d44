"""Transport collaborator contract for the three server query exchanges."""

from typing import Protocol

from serverquery.query.types import (
    Endpoint,
    ServerInfoData,
    ServerPlayersData,
    ServerRulesData,
    TransportResponse,
)


class QueryTransport(Protocol):
    """Sends one query to a server and reports how it ended.

    Implementations own deadlines and retries. Each call must conclude with a
    TransportResponse rather than raising for timeouts or malformed replies.
    """

    async def query_info(self, endpoint: Endpoint) -> TransportResponse[ServerInfoData]: ...

    async def query_rules(self, endpoint: Endpoint) -> TransportResponse[ServerRulesData]: ...

    async def query_players(self, endpoint: Endpoint) -> TransportResponse[ServerPlayersData]: ...
