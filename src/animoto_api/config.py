"""Client configuration and logging setup."""

import json
import logging
import os
import pathlib

import pydantic
import structlog

from .client import DEFAULT_HOST, ApiClient
from .http.transport import DEFAULT_TIMEOUT
from .metrics import RequestMetrics

CONFIG_ENV_VAR = "ANIMOTO_API_CONFIG_PATH"
DEFAULT_CONFIG_PATH = "animoto_api_client.json"
logger = structlog.get_logger(__name__)


class ClientConfig(pydantic.BaseModel):
    """Configuration for the Animoto API client."""

    key: str = pydantic.Field(description="Animoto API key", min_length=1)
    secret: str = pydantic.Field(description="Animoto API secret", min_length=1)
    host: str = pydantic.Field(DEFAULT_HOST, description="Animoto API base URL")
    timeout: float = pydantic.Field(
        DEFAULT_TIMEOUT,
        description="Request timeout in seconds",
        gt=0,
    )
    log_level: str = pydantic.Field("INFO", description="Logging level")


def configure_logging(log_level_name: str) -> None:
    """Configure structlog for logfmt output."""
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.EventRenamer("msg"),
            structlog.processors.format_exc_info,
            structlog.processors.LogfmtRenderer(
                key_order=("timestamp", "level", "msg"),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def load_config(config_path: str) -> ClientConfig:
    """Load configuration from JSON file."""
    path = pathlib.Path(config_path)
    if not path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with path.open("r") as f:
        data = json.load(f)

    return ClientConfig(**data)


def create_client(
    config_path: str | None = None,
    metrics: RequestMetrics | None = None,
) -> ApiClient:
    """Create an API client using a config path or environment default."""
    resolved_path = config_path or os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH)
    config = load_config(resolved_path)
    configure_logging(config.log_level)
    logger.info("Created API client", host=config.host, config_path=resolved_path)
    return ApiClient.from_config(config, metrics=metrics)
