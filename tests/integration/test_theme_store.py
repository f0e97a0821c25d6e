"""
Integration tests for saving and loading theme files.

Tests the <theme-id>.json / <theme-id>.css pair written for a theme.
"""

import json

import pytest

from prism.contexts.rendering.theme_store import generate_theme_stylesheet, load_theme, save_theme
from prism.contexts.theming.exceptions import InvalidThemeStructureError
from prism.contexts.theming.theme_data_structures import BrandColors, BrandKit, ColorSchemeRequest
from prism.contexts.theming.theme_engine import (
    create_custom_theme,
    create_from_brand_kit,
    create_from_template,
    generate_css,
    validate_theme,
)


@pytest.mark.integration
def test_save_writes_json_and_css(tmp_path):
    """Test that both files are written under the theme id."""
    theme = create_from_template("classic-executive")
    json_path, css_path = save_theme(theme, tmp_path / "themes")

    assert json_path == tmp_path / "themes" / "classic-executive.json"
    assert css_path == tmp_path / "themes" / "classic-executive.css"

    data = json.loads(json_path.read_text())
    assert data["id"] == "classic-executive"
    assert "borderRadius" in data
    assert "lineHeight" in data["fonts"]["body"]
    assert json_path.read_text().startswith('{\n  "id"')


@pytest.mark.integration
def test_saved_css_has_both_modes(tmp_path):
    """Test that the stylesheet holds light variables and the dark block."""
    theme = create_from_template("modern-professional")
    _, css_path = save_theme(theme, tmp_path)
    css = css_path.read_text()

    assert css.startswith("/* Light Mode */\n:root {")
    assert "/* Dark Mode */" in css
    assert '[data-theme="dark"] {' in css
    assert "--color-primary: #3b82f6;" in css
    assert "--color-primary: #60a5fa;" in css
    assert css == generate_theme_stylesheet(theme)


@pytest.mark.integration
@pytest.mark.parametrize(
    "build",
    [
        lambda: create_from_template("retro-synthwave"),
        lambda: create_custom_theme(ColorSchemeRequest("healthcare", "modern")),
        lambda: create_from_brand_kit(BrandKit(colors=BrandColors(primary="#00704a"))),
    ],
    ids=["template", "custom", "brand"],
)
def test_load_restores_saved_theme(tmp_path, build):
    """Test that a saved theme loads back equal."""
    theme = build()
    json_path, _ = save_theme(theme, tmp_path)

    assert load_theme(json_path) == theme


@pytest.mark.integration
def test_load_rejects_invalid_json(tmp_path):
    """Test that unparseable files raise InvalidThemeStructureError."""
    path = tmp_path / "broken.json"
    path.write_text("{not json")

    with pytest.raises(InvalidThemeStructureError):
        load_theme(path)


@pytest.mark.integration
def test_load_rejects_incomplete_theme(tmp_path):
    """Test that missing sections raise InvalidThemeStructureError."""
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"id": "partial", "name": "Partial"}))

    with pytest.raises(InvalidThemeStructureError, match="colors"):
        load_theme(path)


@pytest.mark.integration
def test_load_missing_file(tmp_path):
    """Test FileNotFoundError for a nonexistent file."""
    with pytest.raises(FileNotFoundError):
        load_theme(tmp_path / "missing.json")


@pytest.mark.integration
def test_load_expands_shorthand_colors(tmp_path):
    """Test that #RGB and uppercase colors load as lowercase #rrggbb."""
    data = create_from_template("modern-professional").to_dict()
    data["colors"]["light"]["primary"] = "#ABC"
    data["colors"]["light"]["text"]["primary"] = "#000"
    path = tmp_path / "shorthand.json"
    path.write_text(json.dumps(data))

    theme = load_theme(path)
    light = theme.colors.light

    assert light.primary == "#aabbcc"
    assert light.text.primary == "#000000"
    assert validate_theme(theme).is_valid

    css = generate_css(theme)
    assert "--color-primary: #aabbcc;" in css
    assert "--color-text-primary: #000000;" in css

    json_path, _ = save_theme(theme, tmp_path / "resaved")
    assert json.loads(json_path.read_text())["colors"]["light"]["primary"] == "#aabbcc"


@pytest.mark.integration
@pytest.mark.parametrize("color", ["blue", "#12345", "", 255])
def test_load_rejects_malformed_color(tmp_path, color):
    """Test that a non-hex palette color raises InvalidThemeStructureError naming the field."""
    data = create_from_template("modern-professional").to_dict()
    data["colors"]["dark"]["accent"] = color
    path = tmp_path / "bad-color.json"
    path.write_text(json.dumps(data))

    with pytest.raises(InvalidThemeStructureError, match="palette.accent"):
        load_theme(path)
