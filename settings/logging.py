"""Logging configuration.

Every record carries a ``code`` extra: ``-`` for ordinary messages, the
diagnostic code for lines emitted by ``log_diagnostics``. The run file
can be plain text or one JSON object per line (``ACCOUNTABILITY_LOG_JSON=1``)
for loading diagnostics back into a table.
"""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_JSON, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <cyan>{extra[code]}</cyan> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[code]} | {name}:{line} | {message}"


def setup_logging(
    level: str = LOG_LEVEL,
    to_file: bool = True,
    log_dir: Path | None = None,
    json_file: bool = LOG_JSON,
):
    """Console sink plus an optional per-day run file."""
    logger.remove()
    logger.configure(extra={"code": "-"})

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        directory = log_dir or LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        suffix = "jsonl" if json_file else "log"
        logger.add(
            directory / f"accountability_{{time:YYYY-MM-DD}}.{suffix}",
            format=FILE_FORMAT,
            serialize=json_file,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
        )
        logger.info("Logging to {} ({})", directory, suffix)

    return logger


def log_diagnostics(diagnostics) -> None:
    """Emit each run diagnostic at its own severity (INFO / WARNING / ERROR)."""
    for d in diagnostics:
        suffix = f" [{d.entity}]" if d.entity else ""
        logger.bind(code=str(d.code)).log(str(d.severity), "{}: {}{}", d.code, d.message, suffix)
