"""Unit tests for light/dark mode resolution and palette conversion."""

from datetime import datetime, time

import pytest

from prism.contexts.rendering.theme_mode import (
    SYSTEM_COLOR_SCHEME_ENV,
    ThemeModeManager,
    convert_to_dark_mode,
    convert_to_light_mode,
    darken_color,
    generate_mode_css,
    inject_theme_css,
    is_valid_mode,
    lighten_color,
    mode_for_time,
    resolve_mode,
)
from prism.contexts.theming.theme_data_structures import AutoSwitchTime, ThemeMode
from prism.contexts.theming.theme_engine import get_theme_by_id


@pytest.fixture
def theme():
    return get_theme_by_id("modern-professional")


@pytest.mark.unit
class TestThemeModeManager:
    def test_auto_follows_system_preference(self):
        assert ThemeModeManager(system_preference="dark").effective_mode == "dark"
        assert ThemeModeManager(system_preference="light").effective_mode == "light"

    def test_auto_defaults_to_light(self, monkeypatch):
        monkeypatch.delenv(SYSTEM_COLOR_SCHEME_ENV, raising=False)
        assert ThemeModeManager().effective_mode == "light"

    def test_environment_signal(self, monkeypatch):
        monkeypatch.setenv(SYSTEM_COLOR_SCHEME_ENV, "Dark")
        assert ThemeModeManager().is_dark_mode()

    def test_unrecognized_signal_is_ignored(self):
        manager = ThemeModeManager(system_preference="sepia")
        assert manager.system_preference is None
        assert manager.effective_mode == "light"

    def test_explicit_mode_wins(self):
        manager = ThemeModeManager("light", system_preference="dark")
        assert manager.is_light_mode()
        assert not manager.is_dark_mode()

    def test_toggle(self):
        manager = ThemeModeManager(system_preference="light")

        assert manager.toggle() == "dark"
        assert manager.mode == "dark"
        assert manager.toggle() == "light"

    def test_invalid_mode(self):
        with pytest.raises(ValueError):
            ThemeModeManager("sepia")

        manager = ThemeModeManager("light")
        with pytest.raises(ValueError):
            manager.set_mode("sepia")
        assert manager.mode == "light"

    def test_managers_are_independent(self):
        first = ThemeModeManager("light")
        second = ThemeModeManager("light")
        first.toggle()
        assert second.mode == "light"


@pytest.mark.unit
class TestScheduledSwitching:
    @pytest.mark.parametrize(
        "now,expected",
        [
            (time(5, 59), "dark"),
            (time(6, 0), "light"),
            (time(12, 0), "light"),
            (time(17, 59), "light"),
            (time(18, 0), "dark"),
            (time(23, 59), "dark"),
        ],
    )
    def test_default_schedule(self, now, expected):
        assert mode_for_time(now) == expected

    def test_custom_schedule_with_datetime(self):
        now = datetime(2024, 1, 1, 19, 30)
        assert mode_for_time(now, light_start="07:30", dark_start="20:00") == "light"
        assert mode_for_time(now, light_start="07:30", dark_start="19:30") == "dark"

    @pytest.mark.parametrize("clock", ["25:00", "12:60", "noon", "6"])
    def test_invalid_switch_time(self, clock):
        with pytest.raises(ValueError):
            mode_for_time(time(12, 0), light_start=clock)


@pytest.mark.unit
class TestResolveMode:
    def test_explicit(self):
        assert resolve_mode("dark") == "dark"
        assert resolve_mode(ThemeMode("light")) == "light"

    def test_auto_with_schedule(self):
        mode = ThemeMode("auto", AutoSwitchTime())
        assert resolve_mode(mode, now=time(22, 0)) == "dark"
        assert resolve_mode(mode, now=time(9, 0)) == "light"

    def test_auto_with_system_preference(self):
        assert resolve_mode("auto", system_preference="dark") == "dark"

    def test_invalid(self):
        assert not is_valid_mode("sepia")
        with pytest.raises(ValueError):
            resolve_mode("sepia")


@pytest.mark.unit
class TestPaletteConversion:
    def test_channel_helpers(self):
        assert darken_color("#ff8040") == "#cc6633"
        assert lighten_color("#ff8040") == "#ff994c"

    def test_convert_to_dark_mode(self, theme):
        light = theme.colors.light
        dark = convert_to_dark_mode(light)

        assert dark.primary == darken_color(light.primary)
        assert dark.secondary == darken_color(light.secondary)
        assert dark.accent == light.accent
        assert dark.background == "#0f0f0f"
        assert dark.text.primary == "#ffffff"
        assert dark.success == "#4ade80"

    def test_convert_to_light_mode(self, theme):
        dark = theme.colors.dark
        light = convert_to_light_mode(dark)

        assert light.primary == lighten_color(dark.primary)
        assert light.accent == dark.accent
        assert light.background == "#ffffff"
        assert light.text.primary == "#1a1a1a"
        assert light.success == "#16a34a"


@pytest.mark.unit
class TestModeCss:
    def test_generate_mode_css(self, theme):
        css = generate_mode_css(theme.colors.dark, theme.fonts, "dark")

        assert "--color-primary: #60a5fa;" in css
        assert "--font-heading: 'Inter', sans-serif;" in css
        assert "color-scheme: dark;" in css
        assert ".btn-primary {" in css

    def test_inject_before_head_close(self, theme):
        html = "<html><head><title>CV</title></head><body></body></html>"
        result = inject_theme_css(html, theme, "dark")

        assert result.count('<style id="theme-styles">') == 1
        assert result.index('<style id="theme-styles">') < result.index("</head>")
        assert "--color-primary: #60a5fa;" in result

    def test_inject_without_head(self, theme):
        result = inject_theme_css("<div>CV</div>", theme, "light")

        assert result.startswith('<style id="theme-styles">')
        assert result.endswith("<div>CV</div>")
        assert "--color-primary: #3b82f6;" in result

    def test_inject_auto_uses_schedule(self, theme):
        mode = ThemeMode("auto", AutoSwitchTime())
        result = inject_theme_css("<div></div>", theme, mode, now=time(20, 0))
        assert "color-scheme: dark;" in result
