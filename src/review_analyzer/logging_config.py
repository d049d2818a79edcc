"""Structured logging configuration using structlog.

JSON lines in production, colored console output in development.

Users paste their Hugging Face token into the page, so every event passes
through `redact_tokens` before rendering: token-like values ("hf_...",
"Bearer ...") and known secret keys never reach the log output. Review
bodies are logged by length only, never verbatim.
"""

import logging
import re
import sys
from typing import Any

import structlog
from structlog.types import EventDict, WrappedLogger


APP_NAME = "review-analyzer"

SECRET_KEYS = frozenset({"api_token", "token", "authorization", "hf_api_token"})
TOKEN_RE = re.compile(r"\b(?:hf_[A-Za-z0-9]{6,}|Bearer\s+\S+)")
REDACTED = "[REDACTED]"


def add_app_context(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Tag every event with the service name."""
    event_dict["app"] = APP_NAME
    return event_dict


def _redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return TOKEN_RE.sub(REDACTED, value)
    if isinstance(value, dict):
        return {
            k: REDACTED if str(k).lower() in SECRET_KEYS and v else _redact_value(v)
            for k, v in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact_value(v) for v in value)
    return value


def redact_tokens(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask API tokens in keys and string values (nested dicts included)."""
    for key, value in list(event_dict.items()):
        if key.lower() in SECRET_KEYS and value:
            event_dict[key] = REDACTED
        else:
            event_dict[key] = _redact_value(value)
    return event_dict


def configure_logging(log_level: str = "INFO", environment: str = "development") -> None:
    """Configure structlog and route stdlib logging through it.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        environment: "production" selects the JSON renderer
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    is_production = environment.lower() == "production"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        redact_tokens,
    ]
    if is_production:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared_processors)
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # httpx logs full request URLs at INFO; model ids are logged by the client instead
    for noisy in ("httpx", "httpcore", "asyncio", "uvicorn.access"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=log_level,
        environment=environment,
        renderer="json" if is_production else "console",
    )
