"""
Theme file persistence.

A saved theme is a pair of files named after the theme id:
- <theme-id>.json: ResumeTheme.to_dict() with 2-space indentation
- <theme-id>.css: light :root variables followed by a [data-theme="dark"] block
"""

import json
from pathlib import Path
from typing import Tuple, Union

from prism.contexts.rendering.css_generator import generate_css, generate_dark_block
from prism.contexts.rendering.logger import _log_debug, log_theme_saved
from prism.contexts.theming.exceptions import InvalidThemeStructureError
from prism.contexts.theming.theme_data_structures import ResumeTheme


def generate_theme_stylesheet(theme: ResumeTheme) -> str:
    """Combined light and dark stylesheet written next to a saved theme."""
    return (
        "/* Light Mode */\n"
        f"{generate_css(theme, 'light')}\n"
        "/* Dark Mode */\n"
        f"{generate_dark_block(theme)}"
    )


def save_theme(theme: ResumeTheme, output_dir: Union[str, Path]) -> Tuple[Path, Path]:
    """
    Write <id>.json and <id>.css for a theme, creating output_dir if needed.

    Returns:
        Tuple of (json_path, css_path)
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / f"{theme.id}.json"
    css_path = output_dir / f"{theme.id}.css"

    json_path.write_text(json.dumps(theme.to_dict(), indent=2) + "\n", encoding="utf-8")
    css_path.write_text(generate_theme_stylesheet(theme), encoding="utf-8")

    log_theme_saved(theme.id, json_path, css_path)
    return json_path, css_path


def load_theme(path: Union[str, Path]) -> ResumeTheme:
    """
    Load a theme from a saved JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidThemeStructureError: If the file is not valid theme JSON
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidThemeStructureError(f"Theme file {path} is not valid JSON: {e}") from e

    theme = ResumeTheme.from_dict(data)
    _log_debug(f"Loaded theme '{theme.id}' from {path}")
    return theme
