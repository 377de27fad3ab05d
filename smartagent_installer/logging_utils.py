from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_LOG_PATH = str(Path.home() / ".openclaw" / "logs" / "smartagent-install.log")

CONSOLE_PREFIX = "[smartagent]"


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
) -> str:
    """Configure logging.

    The file log keeps full detail (timestamps, logger names, DEBUG command
    output); the console shows short prefixed lines for the person running
    the installer.

    Notes:
    - If the requested log directory is not writable we fall back to a log
      file in the current working directory.
    - Safe to call more than once; only the first call installs handlers.

    Returns the actual file path being used.
    """

    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG)

    if getattr(logger, "_smartagent_configured", False):
        return getattr(logger, "_smartagent_log_path", log_path)

    chosen_path = log_path
    handlers: list[logging.Handler] = []

    file_fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    file_handler: Optional[logging.Handler] = None
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        chosen_path = log_path
    except OSError:
        fallback = str(Path.cwd() / "smartagent-install.log")
        file_handler = logging.FileHandler(fallback)
        chosen_path = fallback
    file_handler.setFormatter(file_fmt)
    file_handler.setLevel(logging.DEBUG)
    handlers.append(file_handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(fmt=f"{CONSOLE_PREFIX} %(message)s"))
        console.setLevel(level)
        handlers.append(console)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_smartagent_configured", True)
    setattr(logger, "_smartagent_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
