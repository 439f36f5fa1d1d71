"""Rendering for the ``shapeguard`` logger tree.

Only ``shapeguard.*`` records are routed here. The root logger, and any
handlers an embedding application installed, are left untouched. The
schema engine itself never logs; the records come from the service layer
(``shapeguard.services.laws``), which passes its structured fields via
``extra={...}``. structlog's ``ProcessorFormatter`` turns those stdlib
records into console text or JSON lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

PACKAGE_LOGGER = "shapeguard"
HANDLER_NAME = "shapeguard-structlog"


def _pre_chain() -> list[structlog.types.Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a structlog-formatted handler to the ``shapeguard`` logger.

    Calling again replaces the previously installed handler.

    Args:
        verbose: Emit DEBUG records (per-law timings). Otherwise WARNING+.
        log_json: One JSON object per line; tracebacks under ``exception``.
        stream: Destination, ``sys.stderr`` at call time by default.

    Returns:
        The installed handler.
    """
    target = stream if stream is not None else sys.stderr

    if log_json:
        tail: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        tail = [structlog.dev.ConsoleRenderer(colors=target.isatty())]

    handler = logging.StreamHandler(target)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *tail],
        )
    )

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in pkg_logger.handlers if h.get_name() == HANDLER_NAME]:
        pkg_logger.removeHandler(existing)
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg_logger.propagate = False
    return handler
