"""
Theming context logger.

Provides logging interface for theming context with automatic [theme] prefix.
All theming modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from prism.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[theme]"


def setup_theming_logger(log_dir: Path, phase: str = "create") -> Path:
    """
    Setup logger for theming context.

    Configures loguru with provenance tracking and theming-specific context.

    Args:
        log_dir: Directory for this theming session
        phase: Phase name for provenance ("create", "validate", "preview")

    Returns:
        Path to log file

    Example:
        from prism.contexts.theming.logger import setup_theming_logger, _log_info

        log_file = setup_theming_logger(log_dir, phase="create")
        _log_info("Generating color schemes...")
    """
    return _setup_logger(
        context_name="theme",
        log_dir=log_dir,
        extra_provenance={"Phase": phase},
    )


# Wrapper functions with automatic [theme] prefix


def _log_info(message: str) -> None:
    """Log info message with [theme] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [theme] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [theme] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [theme] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [theme] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level theming-specific logging helpers


def log_theme_created(theme, source: str) -> None:
    """
    Log creation of a theme.

    Args:
        theme: ResumeTheme that was built
        source: Construction path ("template", "custom", "brand")
    """
    _log_success(f"Created theme '{theme.id}' ({theme.name}) from {source}")
    _log_debug(
        f"  fonts: heading={theme.fonts.heading.family}, body={theme.fonts.body.family}, "
        f"code={theme.fonts.code.family}"
    )
    _log_debug(f"  light primary={theme.colors.light.primary}, dark primary={theme.colors.dark.primary}")


def log_validation_result(theme_id: str, validation) -> None:
    """
    Log theme validation outcome with every error and warning.

    Args:
        theme_id: Theme identifier
        validation: ThemeValidation from validate_theme()
    """
    if validation.is_valid:
        _log_success(f"{theme_id}: validation passed ({len(validation.warnings)} warnings)")
    else:
        _log_error(f"{theme_id}: validation failed ({len(validation.errors)} errors)")

    for error in validation.errors:
        _log_error(f"  Error: {error}")
    for warning in validation.warnings:
        _log_warning(f"  Warning: {warning}")
    for suggestion in validation.suggestions:
        _log_debug(f"  Suggestion: {suggestion}")
