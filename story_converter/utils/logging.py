# story_converter/utils/logging.py
import logging
import sys
from typing import TextIO

import orjson
import structlog

from story_converter.data.settings import settings

LIBRARY_LOGGER = "story_converter"


def _orjson_dumps(obj, default=None, **kwargs) -> str:
    return orjson.dumps(obj, default=default).decode()


def setup_logger(
    level: int | None = None,
    stream: TextIO | None = None,
    json_logs: bool | None = None,
) -> structlog.typing.FilteringBoundLogger:
    """
    Route the converter's structlog events (and Pillow's stdlib logging)
    through a single handler.

    Only the `story_converter` and `PIL` loggers are touched, so an
    embedding application keeps control of the root logger. The library
    never calls this itself.

    Args:
        level: Level for the converter's logger. Defaults to `settings.logging_level`.
        stream: Where records are written. Defaults to stderr.
        json_logs: Force JSON (True) or console (False) rendering. By default
            JSON is used unless `stream` is a TTY.

    Returns:
        The converter's bound logger.
    """
    stream = stream if stream is not None else sys.stderr
    if json_logs is None:
        json_logs = not stream.isatty()

    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        # Console rendering prints tracebacks itself
        shared_processors.append(structlog.processors.dict_tracebacks)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer(serializer=_orjson_dumps)
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processor=renderer,
    )
    handler = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    library_logger.handlers.clear()
    library_logger.addHandler(handler)
    library_logger.setLevel(level if level is not None else settings.logging_level)
    library_logger.propagate = False

    # Pillow is chatty at debug level (plugin loading, chunk parsing)
    pil_logger = logging.getLogger("PIL")
    pil_logger.handlers.clear()
    pil_logger.addHandler(handler)
    pil_logger.setLevel(logging.WARNING)
    pil_logger.propagate = False

    log: structlog.typing.FilteringBoundLogger = structlog.get_logger(LIBRARY_LOGGER)
    return log
