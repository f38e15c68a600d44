from serverquery.query.classifier import classify_response, failure_result
from serverquery.query.types import (
    QueryResult,
    ServerRulesData,
    Succeeded,
    TimedOut,
    TransportResponse,
    Unrecognized,
)

_RULES = ServerRulesData(rules={"G_s": "2.1.0-abc"})


class TestClassifyResponse:
    def test_received_response_is_success_with_ping(self):
        outcome = classify_response(
            TransportResponse(result=QueryResult.RESPONSE_RECEIVED, data=_RULES, ping_ms=31.5),
        )
        assert isinstance(outcome, Succeeded)
        assert outcome.payload == _RULES
        assert outcome.ping_ms == 31.5

    def test_timeout(self):
        outcome = classify_response(TransportResponse(result=QueryResult.QUERY_TIMED_OUT, ping_ms=3000.0))
        assert isinstance(outcome, TimedOut)

    def test_unknown_response(self):
        outcome = classify_response(TransportResponse(result=QueryResult.UNKNOWN_RESPONSE_RECEIVED))
        assert isinstance(outcome, Unrecognized)

    def test_received_without_data_is_unrecognized(self):
        outcome = classify_response(TransportResponse(result=QueryResult.RESPONSE_RECEIVED))
        assert isinstance(outcome, Unrecognized)


class TestFailureResult:
    def test_success_has_no_failure(self):
        assert failure_result(Succeeded(payload=_RULES, ping_ms=1.0)) is None

    def test_timeout_maps_back(self):
        assert failure_result(TimedOut()) == QueryResult.QUERY_TIMED_OUT

    def test_unrecognized_maps_back(self):
        assert failure_result(Unrecognized()) == QueryResult.UNKNOWN_RESPONSE_RECEIVED
