"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from prism.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, output_dir: Path = None) -> Path:
    """
    Setup logger for rendering context.

    Configures loguru with provenance tracking and rendering-specific context.

    Args:
        log_dir: Directory for this rendering session
        output_dir: Directory theme files are written to, recorded in provenance

    Returns:
        Path to log file

    Example:
        from prism.contexts.rendering.logger import setup_rendering_logger, _log_info

        log_file = setup_rendering_logger(log_dir)
        _log_info("Rendering preview...")
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Output directory": str(output_dir)} if output_dir else None,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_theme_saved(theme_id: str, json_path: Path, css_path: Path) -> None:
    """Log the files written for a saved theme."""
    _log_success(f"Saved theme '{theme_id}'")
    _log_debug(f"  JSON: {json_path}")
    _log_debug(f"  CSS: {css_path}")


def log_document_rendered(theme_id: str, mode: str, html: str) -> None:
    """Log a rendered themed document with its size."""
    _log_info(f"Rendered {mode} document with theme '{theme_id}' ({len(html)} chars)")
