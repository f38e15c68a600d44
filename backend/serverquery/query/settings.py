"""Query configuration via environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings


class QuerySettings(BaseSettings):
    model_config = {"env_prefix": "ICARUS_QUERY_"}

    # Per-exchange deadline handed to the transport.
    timeout: float = Field(default=3.0, gt=0)
    version_rule_key: str = Field(default="G_s", min_length=1)
    prospect_rule_key: str = Field(default="ProspectInfo_s", min_length=1)
    encoding: str = Field(default="utf-8", min_length=1)
    log_dir: str | None = None
