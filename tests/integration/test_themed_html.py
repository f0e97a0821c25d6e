"""
Integration tests for themed HTML output.

Tests the full path from theme construction to a rendered HTML document.
"""

from dataclasses import replace

import pytest

from prism.contexts.rendering.html_renderer import render_document
from prism.contexts.theming.brand_kit import generate_logo_css
from prism.contexts.theming.theme_data_structures import BrandLogo, ColorSchemeRequest
from prism.contexts.theming.theme_engine import (
    apply_theme_to_html,
    create_custom_theme,
    create_from_template,
    validate_theme,
)

FRAGMENT = '<div class="header"><h1>Jane Doe</h1></div>'


@pytest.mark.integration
def test_apply_theme_to_html():
    """Test that a fragment is wrapped in a complete themed document."""
    theme = create_from_template("modern-professional")
    html = apply_theme_to_html(FRAGMENT, theme)

    assert html.startswith("<!DOCTYPE html>")
    assert '<html data-theme="light">' in html
    assert "<title>Resume - Modern Professional</title>" in html
    assert "https://fonts.googleapis.com/css2?family=Inter" in html
    assert "/* Light theme (default) */" in html
    assert '[data-theme="dark"] {' in html
    assert FRAGMENT in html
    assert "max-width: 8.5in" in html
    assert html.index("resume-container") < html.index(FRAGMENT)


@pytest.mark.integration
def test_dark_initial_mode():
    """Test that the document starts in the requested mode."""
    html = apply_theme_to_html(FRAGMENT, create_from_template("matrix-hacker"), "dark")
    assert '<html data-theme="dark">' in html


@pytest.mark.integration
def test_invalid_mode():
    """Test that only light and dark are accepted as initial modes."""
    with pytest.raises(ValueError):
        apply_theme_to_html(FRAGMENT, create_from_template("matrix-hacker"), "auto")


@pytest.mark.integration
def test_theme_name_is_escaped():
    """Test that the theme name cannot inject markup into the title."""
    theme = replace(create_from_template("minimalist-zen"), name="<b>Zen</b>")
    html = apply_theme_to_html(FRAGMENT, theme)

    assert "<title>Resume - &lt;b&gt;Zen&lt;/b&gt;</title>" in html


@pytest.mark.integration
def test_extra_css_is_included():
    """Test that logo rules are placed in the document styles."""
    logo_css = generate_logo_css(BrandLogo(url="https://example.com/logo.png", position="center"))
    html = render_document(FRAGMENT, create_from_template("classic-executive"), extra_css=logo_css)

    assert ".resume-logo {" in html


@pytest.mark.integration
def test_custom_theme_end_to_end():
    """Test request -> custom theme -> validation -> HTML."""
    theme = create_custom_theme(ColorSchemeRequest("finance", "classic"), "Consultant Pro")

    assert validate_theme(theme).is_valid

    html = apply_theme_to_html(FRAGMENT, theme)
    assert f"--color-primary: {theme.colors.light.primary};" in html
    assert f"--color-primary: {theme.colors.dark.primary};" in html
    assert "family=Merriweather" in html
