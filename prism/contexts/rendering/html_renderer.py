"""
Themed HTML document rendering.

Wraps a resume HTML fragment in a complete document: light custom properties
on :root, dark overrides under [data-theme="dark"], base resume styles, the
Google Fonts link and a small light/dark toggle script.
"""

from prism.contexts.rendering.css_generator import generate_css, generate_dark_block, generate_font_imports
from prism.contexts.rendering.logger import log_document_rendered
from prism.contexts.rendering.registries import DocumentTemplateRegistry, get_document_registry
from prism.contexts.theming.theme_data_structures import MODES, ResumeTheme

DOCUMENT_TEMPLATE = "document.html"


def render_document(
    content: str,
    theme: ResumeTheme,
    mode: str = "light",
    extra_css: str = "",
    registry: DocumentTemplateRegistry = None,
) -> str:
    """
    Render a themed HTML document around a resume fragment.

    Args:
        content: Resume HTML fragment, inserted unescaped into .resume-container
        theme: Theme providing colors, fonts and layout
        mode: Initial data-theme value ("light" or "dark")
        extra_css: Additional CSS placed after the theme variables (e.g. logo rules)
        registry: Template registry (defaults to the packaged templates)

    Returns:
        Complete HTML document

    Raises:
        ValueError: If mode is not "light" or "dark"
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode '{mode}'. Expected one of {list(MODES)}")

    registry = registry or get_document_registry()
    template = registry.get_template(DOCUMENT_TEMPLATE)

    html = template.render(
        mode=mode,
        title=theme.name,
        font_link=generate_font_imports(theme.fonts),
        light_css=generate_css(theme, "light"),
        dark_css=generate_dark_block(theme),
        extra_css=extra_css,
        max_width=theme.layout.max_width,
        section_spacing=theme.layout.section_spacing,
        content=content,
    )
    log_document_rendered(theme.id, mode, html)
    return html
