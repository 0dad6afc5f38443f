"""Log routing for structmodel.

Library modules log through stdlib ``logging.getLogger(__name__)``. This
module gives the ``structmodel`` logger its own stderr handler whose
formatter is a structlog ``ProcessorFormatter``:
- Human (default): console renderer, colored on a terminal
- JSON (--log-json): one JSON object per record

Only the package logger is touched. The root logger and third-party
loggers keep whatever the host application configured.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "structmodel"

# Records from the package's stdlib loggers only need these fields.
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


class _PackageHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Marker type so repeated configuration replaces only our handler."""


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``structmodel.*`` records to stderr.

    Args:
        verbose: Emit DEBUG records (file resolution, round-trip steps).
            When False, only warnings and errors such as failed writes and
            rule violations.
        log_json: Use the JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = _PackageHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in package_logger.handlers if isinstance(h, _PackageHandler)]:
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
