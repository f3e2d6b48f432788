from __future__ import annotations

import logging

_PACKAGE_LOGGER = "monkeysearch"
_CONSOLE_HANDLER = "monkeysearch-console"


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if handler.get_name() == _CONSOLE_HANDLER:
            return handler
    return None


def configure_monkeysearch_logging(*, level: int = logging.INFO) -> logging.Logger:
    """
    Send monkeysearch records to the console as bare messages.

    Notes:
        - Opt-in; library modules only create loggers.
        - The first call attaches a ``%(message)s`` stream handler, unless the host
          already configured logging (root handlers or its own handlers on
          ``monkeysearch``), in which case nothing is touched.
        - Later calls only change the level of the handler attached here.
    """
    pkg_logger = logging.getLogger(_PACKAGE_LOGGER)
    handler = _console_handler(pkg_logger)
    if handler is None:
        if logging.getLogger().handlers or pkg_logger.handlers:
            return pkg_logger
        handler = logging.StreamHandler()
        handler.set_name(_CONSOLE_HANDLER)
        handler.setFormatter(logging.Formatter("%(message)s"))
        pkg_logger.addHandler(handler)
        pkg_logger.propagate = False
    handler.setLevel(level)
    pkg_logger.setLevel(level)
    return pkg_logger


__all__ = ["configure_monkeysearch_logging"]
