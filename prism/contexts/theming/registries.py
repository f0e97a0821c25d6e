"""
Theming Registries

Registry for loading and caching the predefined theme templates.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

from prism.contexts.theming.exceptions import InvalidThemeStructureError, TemplateNotFoundError
from prism.contexts.theming.logger import _log_debug
from prism.contexts.theming.theme_data_structures import ResumeTheme

load_dotenv()
THEMES_PATH = Path(os.getenv("PRISM_THEMES_PATH", Path(__file__).parent / "themes"))


class ThemeRegistry:
    """
    Registry for the predefined theme templates.

    Templates are stored as prism/contexts/theming/themes/{theme_id}.yaml in the
    same camelCase shape as a saved theme JSON, plus an optional integer `order`
    key controlling listing order. Files are read once on first access; the
    registry is never written afterwards.
    """

    def __init__(self, themes_path: Path = None):
        """
        Initialize the theme registry.

        Args:
            themes_path: Directory holding the theme YAML files. Defaults to
                         PRISM_THEMES_PATH from environment
        """
        if themes_path is None:
            themes_path = THEMES_PATH

        self.themes_path = Path(themes_path)
        self._cache: Optional[Dict[str, Dict[str, Any]]] = None

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if self._cache is not None:
            return self._cache

        if not self.themes_path.is_dir():
            raise FileNotFoundError(f"Theme directory not found at {self.themes_path}")

        loaded = []
        for config_path in sorted(self.themes_path.glob("*.yaml")):
            config = OmegaConf.load(config_path)
            config_dict = OmegaConf.to_container(config, resolve=True)
            if not isinstance(config_dict, dict) or "id" not in config_dict:
                raise InvalidThemeStructureError(f"Theme file {config_path} has no 'id'")

            order = config_dict.pop("order", len(loaded) + 1000)
            # Parse eagerly so a broken file fails at load, not at first use
            ResumeTheme.from_dict(config_dict)
            loaded.append((order, config_dict["id"], config_dict))

        self._cache = {theme_id: data for _, theme_id, data in sorted(loaded, key=lambda t: (t[0], t[1]))}
        _log_debug(f"Loaded {len(self._cache)} theme templates from {self.themes_path}")
        return self._cache

    def ids(self) -> List[str]:
        """Template ids in listing order."""
        return list(self._load())

    def has_theme(self, theme_id: str) -> bool:
        return theme_id in self._load()

    def get_theme(self, theme_id: str) -> ResumeTheme:
        """
        Get a template as a freshly built ResumeTheme.

        Args:
            theme_id: Template id (e.g., 'modern-professional')

        Returns:
            New ResumeTheme built from the cached template data

        Raises:
            TemplateNotFoundError: If no template has this id
        """
        themes = self._load()
        if theme_id not in themes:
            raise TemplateNotFoundError(theme_id, available=themes.keys())
        return ResumeTheme.from_dict(themes[theme_id])

    def get_all_themes(self) -> List[ResumeTheme]:
        """All templates, in listing order."""
        return [ResumeTheme.from_dict(data) for data in self._load().values()]

    def get_theme_path(self, theme_id: str) -> Path:
        """Path to a template's YAML file."""
        return self.themes_path / f"{theme_id}.yaml"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache = None

    def is_cached(self) -> bool:
        """Check if the templates have been loaded."""
        return self._cache is not None
