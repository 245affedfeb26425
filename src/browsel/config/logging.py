"""structlog setup for browsel.

Everything goes to stderr so stdout stays clean for command output (and
for ``--json`` consumers). Human mode uses structlog's console renderer;
``--log-json`` switches to one JSON object per line.

Modules obtain loggers through :func:`get_logger`, which returns a
structlog logger bound to the stdlib hierarchy under ``browsel``.
"""

from __future__ import annotations

import logging
import sys

import structlog

ROOT_LOGGER = "browsel"


def _shared_processors() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Args:
        verbose: ``browsel.*`` loggers emit DEBUG. Otherwise WARNING and up.
        log_json: Render JSON lines instead of console text.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(ROOT_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    # SQLAlchemy's engine logger is chatty at INFO when echo is toggled.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger for module *name* (pass ``__name__``)."""
    return structlog.stdlib.get_logger(name)
