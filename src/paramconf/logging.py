import logging
from typing import Any

import structlog


def configure_logging(level: int | str = logging.INFO, *, json_output: bool = True) -> None:
    """Configure structlog/standard logging bridge.

    JSON lines for deployed processes; ``json_output=False`` renders for a
    terminal instead.
    """

    renderer: Any = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s")
    # botocore logs request payloads at DEBUG
    logging.getLogger("botocore").setLevel(logging.WARNING)


def bind_context(**kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Bind contextual fields, e.g. the environment, for downstream logs."""
    return structlog.get_logger().bind(**kwargs)


def sanitize_parameter_name(name: str, sensitive: bool = True) -> str:
    """Redact the leaf of a sensitive parameter path for logging."""
    if not sensitive:
        return name
    if not name or len(name) <= 3:
        return "***"
    if "/" in name.strip("/"):
        prefix = name.rsplit("/", 1)[0]
        return f"{prefix}/***"
    return f"{name[:2]}***"
