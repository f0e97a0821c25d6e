"""
Rendering Registries

Registry for loading and caching the Jinja2 templates of the HTML/CSS output.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
DOCUMENT_TEMPLATES_PATH = Path(
    os.getenv("PRISM_DOCUMENT_TEMPLATES_PATH", Path(__file__).parent / "templates")
)


class DocumentTemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for document output.

    Templates are stored in prism/contexts/rendering/templates/{name}.jinja
    (e.g., document.html.jinja) and use the default Jinja2 delimiters.
    """

    def __init__(self, templates_path: Path = None):
        """
        Initialize the template registry.

        Args:
            templates_path: Directory holding the templates. Defaults to
                            PRISM_DOCUMENT_TEMPLATES_PATH from environment
        """
        if templates_path is None:
            templates_path = DOCUMENT_TEMPLATES_PATH

        self.templates_path = Path(templates_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def get_template(self, name: str) -> Template:
        """
        Get a template by name, loading and caching it if necessary.

        Args:
            name: Template name without the .jinja suffix (e.g., 'document.html')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        if name in self._cache:
            return self._cache[name]

        template_file = f"{name}.jinja"

        try:
            template = self.env.get_template(template_file)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Document template '{name}' not found at {self.templates_path / template_file}"
            ) from e

        self._cache[name] = template
        return template

    def get_template_path(self, name: str) -> Path:
        """Path to a template file."""
        return self.templates_path / f"{name}.jinja"

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, name: str) -> bool:
        """
        Check if a template is in the cache.

        Args:
            name: Template name

        Returns:
            True if cached, False otherwise
        """
        return name in self._cache


_default_registry: DocumentTemplateRegistry = None


def get_document_registry() -> DocumentTemplateRegistry:
    """Shared registry for the packaged templates, created on first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = DocumentTemplateRegistry()
    return _default_registry
