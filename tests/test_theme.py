"""
Tests for theme generation
"""
from sitegen_api.styling.theme import (
    adjust_color,
    generate_complete_theme,
    generate_contrast_helper_css,
    generate_css_variables,
    generate_theme_colors,
)


class TestAdjustColor:

    def test_darken(self):
        assert adjust_color("#4F46E5", -10) == "#473fce"

    def test_lighten_clamps(self):
        assert adjust_color("#4F46E5", 40) == "#6f62ff"
        assert adjust_color("#FFFFFF", 40) == "#ffffff"

    def test_black_stays_black(self):
        assert adjust_color("#000000", 50) == "#000000"

    def test_halves_round_up(self):
        """5 * 10% = 0.5 rounds up, -0.5 rounds toward zero"""
        assert adjust_color("#050505", 10) == "#060606"
        assert adjust_color("#050505", -10) == "#050505"


class TestThemeColors:

    def test_default_palette(self):
        theme = generate_theme_colors()
        assert theme.primary == "#4F46E5"
        assert theme.background_alt == "#F5F7FA"

    def test_modern_dark_keeps_dark_surface(self):
        assert generate_theme_colors("modern", "dark").background_alt == "#1F2937"

    def test_style_overrides(self):
        minimalist = generate_theme_colors("minimalist", "vibrant")
        assert minimalist.primary == "#6366F1"
        assert minimalist.background_alt == "#FAFAFA"
        assert generate_theme_colors("bold", "dark").background == "#09090B"
        assert generate_theme_colors("playful", "pastel").background == "#FDFCF7"

    def test_unknown_scheme_uses_vibrant(self):
        assert generate_theme_colors("elegant", "neon").primary == generate_theme_colors("elegant", "custom").primary

    def test_custom_is_vibrant(self):
        assert generate_theme_colors("modern", "custom") == generate_theme_colors("modern", "vibrant")


class TestThemeCss:

    def test_css_variables(self):
        css = generate_css_variables(generate_theme_colors())
        assert ":root {" in css
        assert "--color-primary: #4F46E5;" in css
        assert "--color-primary-hover: #473fce;" in css
        assert "--color-primary-light: #6f62ff;" in css
        assert "--radius-full: 9999px;" in css

    def test_complete_theme(self):
        css = generate_complete_theme("bold", "dark")
        assert "--color-background: #09090B;" in css
        assert "max-width: 1200px;" in css
        assert "padding: 4rem 0;" in css

    def test_complete_theme_includes_contrast_helpers(self):
        css = generate_complete_theme()
        assert css.endswith(generate_contrast_helper_css())
        assert ".bg-overlay-dark::before" in css

    def test_contrast_helpers(self):
        css = generate_contrast_helper_css()
        assert ".text-dark { color: #212529 !important; }" in css
        assert "rgba(0, 0, 0, 0.5)" in css
        assert "rgba(255, 255, 255, 0.7)" in css
