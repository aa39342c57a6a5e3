"""
Theme generation - colour palettes per scheme, style overrides and the CSS
(custom properties, utility classes, base styles) injected into generated pages.
"""

import math
from typing import Dict
from pydantic import BaseModel


class ThemeColors(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    background_alt: str
    text: str
    text_secondary: str
    border: str
    success: str
    warning: str
    error: str
    info: str


# ============================================================================
# PALETTES
# ============================================================================

_VIBRANT = {
    "primary": "#4F46E5",
    "secondary": "#7C3AED",
    "accent": "#EC4899",
    "background": "#FFFFFF",
    "background_alt": "#F9FAFB",
    "text": "#111827",
    "text_secondary": "#6B7280",
    "border": "#E5E7EB",
    "success": "#10B981",
    "warning": "#F59E0B",
    "error": "#EF4444",
    "info": "#3B82F6",
}

BASE_PALETTES: Dict[str, Dict[str, str]] = {
    "vibrant": _VIBRANT,
    "monochrome": {
        "primary": "#2D3748",
        "secondary": "#4A5568",
        "accent": "#718096",
        "background": "#FFFFFF",
        "background_alt": "#F7FAFC",
        "text": "#1A202C",
        "text_secondary": "#718096",
        "border": "#E2E8F0",
        "success": "#38A169",
        "warning": "#D69E2E",
        "error": "#E53E3E",
        "info": "#3182CE",
    },
    "pastel": {
        "primary": "#8B5CF6",
        "secondary": "#EC4899",
        "accent": "#06B6D4",
        "background": "#FFFAF0",
        "background_alt": "#FFF5EB",
        "text": "#4B5563",
        "text_secondary": "#9CA3AF",
        "border": "#FDE68A",
        "success": "#34D399",
        "warning": "#FBBF24",
        "error": "#F87171",
        "info": "#60A5FA",
    },
    "dark": {
        "primary": "#8B5CF6",
        "secondary": "#EC4899",
        "accent": "#10B981",
        "background": "#111827",
        "background_alt": "#1F2937",
        "text": "#F9FAFB",
        "text_secondary": "#D1D5DB",
        "border": "#374151",
        "success": "#10B981",
        "warning": "#F59E0B",
        "error": "#EF4444",
        "info": "#3B82F6",
    },
    "custom": _VIBRANT,
}


def _brand(primary: str, secondary: str, accent: str) -> Dict[str, str]:
    return {"primary": primary, "secondary": secondary, "accent": accent}


# Style overrides keyed by scheme; missing schemes keep the base palette.
def _style_overrides(style: str, scheme: str) -> Dict[str, str]:
    overrides: Dict[str, str] = {}

    if style == "modern":
        if scheme != "dark":
            overrides["background_alt"] = "#F5F7FA"

    elif style == "minimalist":
        if scheme == "vibrant":
            overrides.update(_brand("#6366F1", "#8B5CF6", "#F472B6"))
        if scheme != "dark":
            overrides.update(background="#FFFFFF", background_alt="#FAFAFA")

    elif style == "bold":
        if scheme == "vibrant":
            overrides.update(_brand("#4338CA", "#6D28D9", "#DB2777"))
        elif scheme == "dark":
            overrides.update(_brand("#6D28D9", "#DB2777", "#059669"))
            overrides.update(background="#09090B", background_alt="#18181B")

    elif style == "elegant":
        if scheme == "vibrant":
            overrides.update(_brand("#5B21B6", "#9D174D", "#0E7490"))
        elif scheme == "monochrome":
            overrides.update(_brand("#1E293B", "#334155", "#475569"))
        elif scheme == "pastel":
            overrides.update(_brand("#7C3AED", "#EC4899", "#0EA5E9"))
            overrides["background"] = "#FFF8F0"

    elif style == "playful":
        if scheme == "vibrant":
            overrides.update(_brand("#6366F1", "#EC4899", "#F59E0B"))
        elif scheme == "pastel":
            overrides.update(_brand("#8B5CF6", "#F472B6", "#FBBF24"))
            overrides["background"] = "#FDFCF7"
        elif scheme == "dark":
            overrides.update(_brand("#8B5CF6", "#EC4899", "#FBBF24"))

    return overrides


def generate_theme_colors(style: str = "modern", scheme: str = "vibrant") -> ThemeColors:
    """Base palette for the colour scheme with the style's overrides applied"""
    palette = dict(BASE_PALETTES.get(scheme, _VIBRANT))
    palette.update(_style_overrides(style, scheme))
    return ThemeColors(**palette)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def adjust_color(color: str, percent: float) -> str:
    """
    Lighten (positive percent) or darken (negative percent) a #rrggbb colour.

    Each channel moves by round(channel * percent / 100) and is clamped to 0-255.
    """
    value = color.lstrip("#")
    channels = [int(value[i:i + 2], 16) for i in (0, 2, 4)]
    adjusted = [
        max(0, min(255, c + _round_half_up(c * percent / 100)))
        for c in channels
    ]
    return "#" + "".join(f"{c:02x}" for c in adjusted)


# ============================================================================
# CSS GENERATION
# ============================================================================

def generate_css_variables(theme: ThemeColors) -> str:
    return f"""
:root {{
  /* Brand colors */
  --color-primary: {theme.primary};
  --color-primary-hover: {adjust_color(theme.primary, -10)};
  --color-primary-light: {adjust_color(theme.primary, 40)};
  --color-secondary: {theme.secondary};
  --color-secondary-hover: {adjust_color(theme.secondary, -10)};
  --color-secondary-light: {adjust_color(theme.secondary, 40)};
  --color-accent: {theme.accent};
  --color-accent-hover: {adjust_color(theme.accent, -10)};
  --color-accent-light: {adjust_color(theme.accent, 40)};

  /* Surfaces and text */
  --color-background: {theme.background};
  --color-background-alt: {theme.background_alt};
  --color-text: {theme.text};
  --color-text-secondary: {theme.text_secondary};
  --color-border: {theme.border};
  --color-border-hover: {adjust_color(theme.border, -10)};

  /* Status */
  --color-success: {theme.success};
  --color-warning: {theme.warning};
  --color-error: {theme.error};
  --color-info: {theme.info};

  /* Shadows */
  --shadow-sm: 0 1px 2px 0 rgba(0, 0, 0, 0.05);
  --shadow-md: 0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06);
  --shadow-lg: 0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05);
  --shadow-xl: 0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04);

  /* Radii */
  --radius-sm: 0.125rem;
  --radius-md: 0.375rem;
  --radius-lg: 0.5rem;
  --radius-xl: 1rem;
  --radius-full: 9999px;
}}
"""


def generate_theme_classes() -> str:
    return """
.bg-primary { background-color: var(--color-primary); }
.bg-secondary { background-color: var(--color-secondary); }
.bg-accent { background-color: var(--color-accent); }
.bg-background { background-color: var(--color-background); }
.bg-background-alt { background-color: var(--color-background-alt); }

.text-primary { color: var(--color-primary); }
.text-secondary { color: var(--color-secondary); }
.text-accent { color: var(--color-accent); }
.text-default { color: var(--color-text); }
.text-muted { color: var(--color-text-secondary); }

.btn-primary {
  background-color: var(--color-primary);
  color: white;
  padding: 0.75rem 1.5rem;
  border: none;
  border-radius: var(--radius-md);
  font-weight: 600;
  cursor: pointer;
  transition: all 0.2s ease;
}

.btn-primary:hover {
  background-color: var(--color-primary-hover);
  transform: translateY(-1px);
  box-shadow: var(--shadow-md);
}

.btn-secondary {
  background-color: var(--color-secondary);
  color: white;
  padding: 0.75rem 1.5rem;
  border: none;
  border-radius: var(--radius-md);
  font-weight: 600;
  cursor: pointer;
  transition: all 0.2s ease;
}

.btn-secondary:hover {
  background-color: var(--color-secondary-hover);
  transform: translateY(-1px);
  box-shadow: var(--shadow-md);
}

.btn-outline {
  background-color: transparent;
  color: var(--color-primary);
  padding: 0.75rem 1.5rem;
  border: 2px solid var(--color-primary);
  border-radius: var(--radius-md);
  font-weight: 600;
  cursor: pointer;
  transition: all 0.2s ease;
}

.btn-outline:hover {
  background-color: var(--color-primary);
  color: white;
}

.card {
  background-color: var(--color-background);
  border: 1px solid var(--color-border);
  border-radius: var(--radius-lg);
  padding: 1.5rem;
  box-shadow: var(--shadow-sm);
  transition: all 0.3s ease;
}

.card:hover {
  border-color: var(--color-border-hover);
  box-shadow: var(--shadow-lg);
  transform: translateY(-2px);
}

.gradient-primary {
  background: linear-gradient(135deg, var(--color-primary) 0%, var(--color-secondary) 100%);
}

.gradient-text {
  background: linear-gradient(135deg, var(--color-primary) 0%, var(--color-accent) 100%);
  -webkit-background-clip: text;
  -webkit-text-fill-color: transparent;
  background-clip: text;
}
"""


BASE_STYLES = """
* {
  box-sizing: border-box;
}

body {
  margin: 0;
  font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
  background-color: var(--color-background);
  color: var(--color-text);
  line-height: 1.6;
}

h1, h2, h3, h4, h5, h6 {
  color: var(--color-text);
  line-height: 1.2;
  margin-top: 0;
}

a {
  color: var(--color-primary);
  text-decoration: none;
  transition: color 0.2s ease;
}

a:hover {
  color: var(--color-primary-hover);
}

.container {
  max-width: 1200px;
  margin: 0 auto;
  padding: 0 1.5rem;
}

section {
  padding: 4rem 0;
}

header {
  background-color: var(--color-background);
  border-bottom: 1px solid var(--color-border);
}

footer {
  background-color: var(--color-background-alt);
  color: var(--color-text-secondary);
  padding: 3rem 0;
}
"""


def generate_complete_theme(style: str = "modern", scheme: str = "vibrant") -> str:
    """Variables, utility classes, base element styles and contrast helpers for a style/scheme pair"""
    theme = generate_theme_colors(style, scheme)
    return generate_css_variables(theme) + generate_theme_classes() + BASE_STYLES + generate_contrast_helper_css()


def generate_contrast_helper_css() -> str:
    """Helper classes that keep text readable over images and coloured backgrounds"""
    return """
/* Text colour helpers */
.text-dark { color: #212529 !important; }
.text-light { color: #f8f9fa !important; }

/* Overlays for background images */
.bg-overlay-dark,
.bg-overlay-light {
  position: relative;
}

.bg-overlay-dark::before,
.bg-overlay-light::before {
  content: "";
  position: absolute;
  inset: 0;
  z-index: 0;
}

.bg-overlay-dark::before { background-color: rgba(0, 0, 0, 0.5); }
.bg-overlay-light::before { background-color: rgba(255, 255, 255, 0.7); }

.bg-overlay-dark > *,
.bg-overlay-light > * {
  position: relative;
  z-index: 1;
}

/* Gradient overlays */
.bg-gradient-dark { background-image: linear-gradient(rgba(0, 0, 0, 0.7), rgba(0, 0, 0, 0.3)); }
.bg-gradient-light { background-image: linear-gradient(rgba(255, 255, 255, 0.9), rgba(255, 255, 255, 0.6)); }

/* Text shadows */
.text-shadow-dark { text-shadow: 0 2px 4px rgba(0, 0, 0, 0.5); }
.text-shadow-light { text-shadow: 0 2px 4px rgba(255, 255, 255, 0.5); }

/* Text boxes */
.text-box-dark {
  background-color: rgba(0, 0, 0, 0.7);
  color: #f8f9fa;
  padding: 1rem;
  border-radius: 0.5rem;
}

.text-box-light {
  background-color: rgba(255, 255, 255, 0.85);
  color: #212529;
  padding: 1rem;
  border-radius: 0.5rem;
}
"""
