"""Route stdlib and structlog records through one stderr handler.

Modules log with ``logging.getLogger(__name__)``; telemetry uses
``structlog.get_logger``. Both end up in the same
:class:`structlog.stdlib.ProcessorFormatter`, rendered either for a
terminal or as JSON lines (``--log-json``).
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "finset"


def _pre_chain() -> list[Processor]:
    """Processors applied to every record before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set levels.

    The root logger stays at WARNING so third-party chatter is hidden;
    the ``finset`` logger drops to DEBUG under ``--verbose``. Calling this
    again replaces the previous handler.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
