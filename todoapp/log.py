"""
Todo App: Logging Setup
=======================

What:  Parses the log filter string and configures stdlib logging from it.
Why:   One environment variable controls the verbosity of the service and of
       its tracing middleware independently (e.g. silence access logs while
       debugging the guards).
When:  `setup_logging()` runs once in the application lifespan, before the
       first request is served.

Filter syntax:
    Comma-separated directives. A bare level applies to the root logger, a
    `name=LEVEL` pair applies to that named logger:

        LOG_FILTER="WARNING,todoapp=DEBUG,todoapp.access=INFO"

    Level names are case-insensitive. Empty directives are skipped.
"""

import logging
import sys
from typing import Dict

ROOT_LOGGER = ""

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def parse_log_filter(text: str) -> Dict[str, int]:
    """
    Turn a filter string into a mapping of logger name → numeric level.

    The root logger is keyed by the empty string. Later directives for the
    same logger win.

    Raises:
        ValueError: On an unknown level name or an empty logger name.
    """
    levels: Dict[str, int] = {}
    for directive in text.split(","):
        directive = directive.strip()
        if not directive:
            continue

        if "=" in directive:
            name, _, level_name = directive.partition("=")
            name = name.strip()
            if not name:
                raise ValueError(f"Missing logger name in directive '{directive}'")
        else:
            name, level_name = ROOT_LOGGER, directive

        level_name = level_name.strip().upper()
        if level_name not in VALID_LEVELS:
            raise ValueError(
                f"Invalid level '{level_name}' in directive '{directive}'. "
                f"Must be one of: {sorted(VALID_LEVELS)}"
            )
        levels[name] = getattr(logging, level_name)
    return levels


def setup_logging(log_filter: str) -> None:
    """
    Configure logging for the whole process.

    The root logger gets a stdout handler at INFO unless the filter says
    otherwise; named loggers from the filter get their own level and keep
    propagating to the root handler.
    """
    levels = parse_log_filter(log_filter)

    logging.basicConfig(
        level=levels.pop(ROOT_LOGGER, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that repeat what the tracing middleware already says
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
