"""Root conftest: test environment, structlog routed to caplog, isolated query settings."""

import os
from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from shared.logging import build_processors

load_dotenv(Path(__file__).resolve().parent.parent / ".env.tests")

structlog.configure(
    processors=build_processors(),
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)

QUERY_ENV_PREFIX = "ICARUS_QUERY_"


@pytest.fixture(autouse=True)
def _isolate_query_env(monkeypatch):
    """Drop ICARUS_QUERY_* variables from the host so QuerySettings sees its defaults."""
    for name in list(os.environ):
        if name.startswith(QUERY_ENV_PREFIX):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def _clear_log_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
