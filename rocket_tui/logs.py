"""structlog configuration for rocket-tui.

Two output modes:
- Human (default): console renderer
- JSON: structured JSON lines

The TUI owns the terminal, so the entry point sends logs to a file.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog


def configure_logging(
    *,
    level: str = "WARNING",
    log_json: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        level: Level name for the rocket_tui loggers.
        log_json: Use JSON renderer instead of console renderer.
        log_file: Write to this file instead of stderr.
    """
    shared_processors: List[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        colors = log_file is None and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler: logging.Handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("rocket_tui").setLevel(level.upper())
