"""structlog configuration for kbdlayout.

Two output modes:
- Human (default): colored console output to stderr
- JSON (--log-json): Structured JSON lines to stderr

``--quiet`` raises the kbdlayout logger to ERROR so the terse
``OK: <op>`` result line is not interleaved with library log records.
Result warnings are printed by the command layer, not through logging.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        quiet: Only ERROR+ from kbdlayout loggers. Ignored when *verbose*.
        log_json: Use JSON renderer instead of console renderer.
    """
    if verbose:
        kbd_level = logging.DEBUG
    elif quiet:
        kbd_level = logging.ERROR
    else:
        kbd_level = logging.WARNING

    shared_processors: list[structlog.types.Processor] = [
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
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

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

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("kbdlayout").setLevel(kbd_level)
