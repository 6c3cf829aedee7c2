"""
Tests for display settings.
"""

import pytest

from display import DisplayConfig


class TestDisplayConfig:
    def test_default_theme_exists(self):
        assert DisplayConfig.DEFAULT_THEME in DisplayConfig.THEMES

    def test_themes_share_keys(self):
        keys = {frozenset(palette) for palette in DisplayConfig.THEMES.values()}
        assert len(keys) == 1

    def test_every_theme_has_toggle_label(self):
        assert set(DisplayConfig.THEME_TOGGLE_LABELS) == set(DisplayConfig.THEMES)

    def test_toggle_cycles(self):
        assert DisplayConfig.next_theme("light") == "dark"
        assert DisplayConfig.next_theme("dark") == "light"

    def test_get_theme(self):
        assert DisplayConfig.get_theme("light")["primary"] == "#1976d2"

    def test_unknown_theme(self):
        with pytest.raises(KeyError):
            DisplayConfig.get_theme("neon")
