"""
Session logging for PRISM commands.

Each scripts/manage_themes.py run writes one <context>.log file under its own
session directory (PRISM_LOGS_PATH/themes_<timestamp>/) and echoes INFO and
above to the terminal. The theming and rendering contexts wrap setup_logger()
in their own logger.py modules to add a [theme] or [render] prefix.
"""

import os
import sys
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from prism import __version__

load_dotenv()

CONSOLE_LOG_LEVEL = os.getenv("PRISM_CONSOLE_LOG_LEVEL", "INFO")
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"

# Validation warnings and failed contrast checks stand out in the terminal
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[Dict[str, str]] = None,
    level_colors: Optional[Dict[str, str]] = None,
) -> Path:
    """
    Route loguru output for one command to a session log file and the console.

    Replaces any sinks configured by an earlier call, so a command logs to a
    single session file.

    Args:
        context_name: "theme" or "render"; names the log file
        log_dir: Session directory, created if missing
        extra_provenance: Extra header lines such as {"Phase": "create"}
        level_colors: Console color overrides per level

    Returns:
        Path to <log_dir>/<context_name>.log
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    colors = {**LEVEL_COLORS, **(level_colors or {})}
    for level_name, color in colors.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=CONSOLE_LOG_LEVEL, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[Dict[str, str]] = None) -> None:
    """Write the session header: command line, working directory, versions and extra context."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]}")
    logger.info(f"PRISM: {__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
