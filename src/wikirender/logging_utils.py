"""Logging setup for the wikirender command line.

Rendering never writes diagnostics into the rendered markup. Warnings such as
a node kind without a rendering rule, an unknown node type in lenient mode or
an ignored config key are logged, and the command line routes them to stderr
(and optionally a log file) through :func:`configure_logging`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(log_level: int | str) -> int:
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.WARNING


def _make_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(PLAIN_FORMAT)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Route wikirender diagnostics to stderr and, optionally, a file.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name such as ``"WARNING"``. Unknown names
        fall back to ``WARNING``.
    log_file : str, optional
        File that receives the same records, opened in append mode. If it
        cannot be opened a warning is logged and only stderr is used.
    trace_mode : bool, default False
        Prefix records with a timestamp, level and logger name.

    Returns
    -------
    logging.Logger
        The root logger.

    """
    level = _resolve_level(log_level)
    formatter = _make_formatter(trace_mode)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: Optional[OSError] = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning("Could not open log file %s: %s", log_file, file_error)
    elif log_file:
        root_logger.debug("Logging to file: %s", log_file)
    return root_logger
