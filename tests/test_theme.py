# rgbsync - Unit tests for theme color extraction
"""
Tests for rgbsync.theme.

Tests cover:
- Theme directory resolution order
- Accent extraction fallback order
- Active theme detection
"""

from __future__ import annotations

import pytest

from rgbsync.errors import ColorExtractionFailed, ThemeNotFound
from rgbsync.theme import ThemeExtractor


@pytest.fixture
def home(tmp_path):
    return tmp_path


@pytest.fixture
def custom_root(home):
    return home / ".config" / "omarchy" / "themes"


@pytest.fixture
def default_root(home):
    return home / ".local" / "share" / "omarchy" / "themes"


@pytest.fixture
def extractor(home):
    return ThemeExtractor(
        ("~/.config/omarchy/themes", "~/.local/share/omarchy/themes"), home=str(home)
    )


def make_theme(root, name, **files):
    path = root / name
    path.mkdir(parents=True)
    for filename, text in files.items():
        (path / filename.replace("_", ".", 1)).write_text(text)
    return path


# ─────────────────────────────────────────────────────────────────────────────
# Directory resolution
# ─────────────────────────────────────────────────────────────────────────────


class TestFindTheme:
    def test_custom_shadows_default(self, extractor, custom_root, default_root):
        make_theme(default_root, "nord")
        custom = make_theme(custom_root, "nord")

        assert extractor.find_theme_path("nord") == str(custom)

    def test_default(self, extractor, default_root):
        path = make_theme(default_root, "nord")
        assert extractor.find_theme_path("nord") == str(path)

    @pytest.mark.parametrize("name", ["missing", "", "..", "../etc"])
    def test_not_found(self, extractor, default_root, name):
        default_root.mkdir(parents=True)
        with pytest.raises(ThemeNotFound):
            extractor.find_theme_path(name)

    def test_expands_home(self, extractor, home):
        assert extractor.theme_dirs[0] == str(home / ".config" / "omarchy" / "themes")


# ─────────────────────────────────────────────────────────────────────────────
# Accent extraction
# ─────────────────────────────────────────────────────────────────────────────


class TestExtractColor:
    def test_palette_only(self, extractor, default_root):
        path = make_theme(default_root, "t", colors_toml='background = "#000000"\naccent = "#1a2b3c"\n')
        assert extractor.extract_color(str(path)) == "1a2b3c"

    def test_hyprland_first(self, extractor, default_root):
        path = make_theme(
            default_root,
            "t",
            hyprland_conf="general {\n  col.active_border = rgb(8A9A5B)\n}\n",
            waybar_css="@define-color accent #ffffff;\n",
        )
        assert extractor.extract_color(str(path)) == "8a9a5b"

    def test_rgba_drops_alpha(self, extractor, default_root):
        path = make_theme(default_root, "t", hyprland_conf="border = rgba(33ccffee) rgba(00ff99ee)\n")
        assert extractor.extract_color(str(path)) == "33ccff"

    def test_hyprland_without_color_falls_back(self, extractor, default_root):
        path = make_theme(
            default_root,
            "t",
            hyprland_conf="general {\n  gaps_in = 5\n}\n",
            waybar_css="window { color: #000000; }\n@define-color foreground #C0FFEE;\n",
        )
        assert extractor.extract_color(str(path)) == "c0ffee"

    @pytest.mark.parametrize(
        "line,expected",
        [
            ("  --accent: #abcdef;", "abcdef"),
            ("  --primary: #123456;", "123456"),
        ],
    )
    def test_waybar_declarations(self, extractor, default_root, line, expected):
        path = make_theme(default_root, "t", waybar_css=f":root {{\n{line}\n}}\n")
        assert extractor.extract_color(str(path)) == expected

    def test_palette_key_must_start_line(self, extractor, default_root):
        path = make_theme(
            default_root, "t", colors_toml='secondary_accent = "#ffffff"\naccent = "#00aa00"\n'
        )
        assert extractor.extract_color(str(path)) == "00aa00"

    def test_nothing_found(self, extractor, default_root):
        path = make_theme(default_root, "t", waybar_css="* { color: red; }\n")
        with pytest.raises(ColorExtractionFailed):
            extractor.extract_color(str(path))

    def test_get_accent(self, extractor, custom_root):
        path = make_theme(custom_root, "hackerman", colors_toml='accent = "#00FF41"\n')
        theme = extractor.get_accent("hackerman")

        assert theme.name == "hackerman"
        assert theme.path == str(path)
        assert theme.accent == "00ff41"


# ─────────────────────────────────────────────────────────────────────────────
# Active theme
# ─────────────────────────────────────────────────────────────────────────────


class TestCurrentTheme:
    def _marker(self, home, text):
        marker = home / ".config" / "omarchy" / "current_theme"
        marker.parent.mkdir(parents=True, exist_ok=True)
        marker.write_text(text)

    def _hyprland(self, home, text):
        conf = home / ".config" / "hypr" / "hyprland.conf"
        conf.parent.mkdir(parents=True, exist_ok=True)
        conf.write_text(text)

    def test_marker_file(self, extractor, home):
        self._marker(home, "tokyo-night\n")
        self._hyprland(home, "source = ~/.config/omarchy/themes/nord/hyprland.conf\n")
        assert extractor.current_theme() == "tokyo-night"

    def test_hyprland_source(self, extractor, home):
        self._hyprland(
            home,
            "# themes/commented/ is not a source line\n"
            "source = ~/.config/hypr/monitors.conf\n"
            "source = ~/.local/share/omarchy/themes/catppuccin/hyprland.conf\n"
            "source = ~/.local/share/omarchy/themes/nord/hyprland.conf\n",
        )
        assert extractor.current_theme() == "catppuccin"

    def test_empty_marker_falls_back(self, extractor, home):
        self._marker(home, "  \n")
        self._hyprland(home, "source = ~/themes/gruvbox/hyprland.conf\n")
        assert extractor.current_theme() == "gruvbox"

    def test_not_detected(self, extractor):
        with pytest.raises(ThemeNotFound):
            extractor.current_theme()
