"""
Heuristic validation of generated websites.

Every check here is a substring or regex test on the raw document. They are
quick signals for the generation loop, not a conformance checker.
"""

import re
import logging
from typing import List, Optional
from sitegen_api.enhancer.code_requirements import (
    CSS_MIN_LINES,
    HTML_MIN_LINES,
    JS_MIN_LINES,
    TOTAL_MIN_LINES,
)
from sitegen_api.models.schemas import CompletenessReport, HeroValidation, ValidationReport

logger = logging.getLogger(__name__)

_DOCTYPE = re.compile(r"<!DOCTYPE html", re.IGNORECASE)
_HEAD_OPEN = re.compile(r"<head(\s[^>]*)?>", re.IGNORECASE)
_BODY_OPEN = re.compile(r"<body(\s[^>]*)?>", re.IGNORECASE)
_HTML_OPEN = re.compile(r"<html", re.IGNORECASE)
_HTML_CLOSE = re.compile(r"</html\s*>", re.IGNORECASE)
_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)
_BODY_CLOSE = re.compile(r"</body\s*>", re.IGNORECASE)
_CSS_SOURCE = re.compile(r"<style|stylesheet", re.IGNORECASE)

# Only attributes inside a tag; "img.onload = ..." in a script is fine
_INLINE_HANDLER = re.compile(
    r"<[^>]*\s(on(?:click|load|submit|change|focus|blur|mouseover|mouseout|keydown|keyup))\s*=",
    re.IGNORECASE,
)
_EVAL_PATTERNS = [
    (re.compile(r"\beval\s*\("), "eval()"),
    (re.compile(r"\bnew\s+Function\s*\("), "new Function()"),
    (re.compile(r"setTimeout\s*\(\s*[\"']"), "setTimeout(string)"),
    (re.compile(r"setInterval\s*\(\s*[\"']"), "setInterval(string)"),
]

SEMANTIC_ELEMENTS = ["<header", "<nav", "<main", "<section", "<footer"]


# ============================================================================
# STRUCTURE AND QUALITY REPORT
# ============================================================================

def _security_warnings(code: str) -> List[str]:
    warnings = []

    handlers = _INLINE_HANDLER.findall(code)
    if handlers:
        kinds = sorted({h.lower() for h in handlers})[:3]
        warnings.append(
            f"Inline event handlers detected: {', '.join(f'{k}=' for k in kinds)}. "
            f"Use addEventListener in a <script> block instead"
        )

    for pattern, name in _EVAL_PATTERNS:
        if pattern.search(code):
            warnings.append(f"{name} detected in JavaScript")
            break

    return warnings


def validate_generated_code(code: str) -> ValidationReport:
    """Score a generated document out of 100 and list structural errors and warnings"""
    errors: List[str] = []
    warnings: List[str] = []
    score = 100

    if not _DOCTYPE.search(code):
        errors.append("Missing DOCTYPE declaration")
        score -= 10

    if not _HTML_OPEN.search(code) or not _HTML_CLOSE.search(code):
        errors.append("Missing HTML tags")
        score -= 10

    if not _HEAD_OPEN.search(code) or not _HEAD_CLOSE.search(code):
        errors.append("Missing HEAD section")
        score -= 10

    if not _BODY_OPEN.search(code) or not _BODY_CLOSE.search(code):
        errors.append("Missing BODY section")
        score -= 10

    if "viewport" not in code:
        warnings.append("Missing viewport meta tag")
        score -= 5

    if "description" not in code:
        warnings.append("Missing description meta tag")
        score -= 5

    missing_semantic = [el for el in SEMANTIC_ELEMENTS if el not in code]
    if missing_semantic:
        warnings.append(f"Missing semantic elements: {', '.join(missing_semantic)}")
        score -= len(missing_semantic) * 2

    if "alt=" not in code:
        warnings.append("Images missing alt attributes")
        score -= 5

    if "@media" not in code:
        warnings.append("No media queries found - may not be responsive")
        score -= 10

    if "<script" not in code:
        warnings.append("No JavaScript found - limited interactivity")
        score -= 5

    if not _CSS_SOURCE.search(code):
        errors.append("No CSS found")
        score -= 20

    warnings.extend(_security_warnings(code))

    if 'loading="lazy"' in code:
        score += 5

    if "grid" in code or "flex" in code:
        score += 5

    score = max(0, min(100, score))
    logger.debug(f"[VALIDATE] score={score} | errors={len(errors)} | warnings={len(warnings)}")

    return ValidationReport(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        score=score,
    )


# ============================================================================
# COMPLETENESS
# ============================================================================

def enforce_minimum_code_size(code: str) -> bool:
    return len(code.split("\n")) >= TOTAL_MIN_LINES


def analyze_code_completeness(code: str) -> CompletenessReport:
    """Count html/css/js lines and list required features that are absent"""
    lines = code.split("\n")
    html_lines = css_lines = js_lines = 0
    in_style = in_script = False

    for line in lines:
        if "<style" in line:
            in_style = True
        if "</style>" in line:
            in_style = False
        if "<script" in line:
            in_script = True
        if "</script>" in line:
            in_script = False

        if in_style:
            css_lines += 1
        elif in_script:
            js_lines += 1
        else:
            html_lines += 1

    missing = []

    # HTML
    if "<nav" not in code and "<header" not in code:
        missing.append("Navigation menu")
    if "<form" not in code:
        missing.append("Contact form")
    if "<footer" not in code:
        missing.append("Footer section")
    if "aria-" not in code:
        missing.append("ARIA attributes for accessibility")

    # CSS
    if "@media" not in code:
        missing.append("Responsive design media queries")
    if ":hover" not in code or ":focus" not in code:
        missing.append("Interactive states (hover, focus)")
    if "animation" not in code and "transition" not in code:
        missing.append("Animations or transitions")
    if "grid" not in code and "flex" not in code:
        missing.append("Modern layout techniques (Grid or Flexbox)")

    # JavaScript
    if "addEventListener" not in code:
        missing.append("Event listeners")
    if "function" not in code:
        missing.append("JavaScript functions")
    if "querySelector" not in code and "getElementById" not in code:
        missing.append("DOM manipulation")
    if "try" not in code and "catch" not in code:
        missing.append("Error handling")
    if "localStorage" not in code and "sessionStorage" not in code:
        missing.append("Client-side storage")

    total_lines = len(lines)
    is_complete = (
        total_lines >= TOTAL_MIN_LINES
        and not missing
        and html_lines >= HTML_MIN_LINES
        and css_lines >= CSS_MIN_LINES
        and js_lines >= JS_MIN_LINES
    )

    return CompletenessReport(
        total_lines=total_lines,
        html_lines=html_lines,
        css_lines=css_lines,
        js_lines=js_lines,
        is_complete=is_complete,
        missing_features=missing,
    )


# ============================================================================
# HERO SECTION
# ============================================================================

LIGHT_BACKGROUND_MARKERS = [
    "background-color: #fff",
    "background-color: white",
    "background-color: #f",
    "background: #fff",
    "background: white",
    "background: #f",
    "background-color: rgb(255",
    "background: rgb(255",
]
WHITE_TEXT_MARKERS = [
    "color: #fff",
    "color: white",
    "color: rgb(255, 255, 255)",
    "color: rgba(255, 255, 255",
]
DARK_TEXT_MARKERS = ["color: #000", "color: black", "color: rgb(0", "color: rgba(0"]
DARK_OVERLAY_MARKERS = ["background-color: rgba(0, 0, 0, 0.5", "background-color: #333"]

_CTA_PATTERN = re.compile(r'<button|<a [^>]*class="[^"]*btn|<a [^>]*class="[^"]*button')

_HERO_PATTERNS = [
    re.compile(
        rf'<(?:div|section|header)[^>]*{attr}="[^"]*{name}[^"]*"[^>]*>([\s\S]*?)</(?:div|section|header)>',
        re.IGNORECASE,
    )
    for attr in ("class", "id")
    for name in ("hero", "banner", "jumbotron")
]
_FIRST_BLOCK = re.compile(r"<(?:div|section)[^>]*>([\s\S]*?)</(?:div|section)>", re.IGNORECASE)
_HEADER_END = re.compile(r"</header>", re.IGNORECASE)


def _contains_any(code: str, markers: List[str]) -> bool:
    return any(marker in code for marker in markers)


def check_text_contrast(code: str) -> List[str]:
    """Light-on-light and missing-dark-text heuristics"""
    issues = []
    light_background = _contains_any(code, LIGHT_BACKGROUND_MARKERS)

    if light_background and _contains_any(code, WHITE_TEXT_MARKERS):
        issues.append("Hero section has light text on a light background, causing poor contrast")

    if (
        light_background
        and not _contains_any(code, DARK_TEXT_MARKERS)
        and not _contains_any(code, DARK_OVERLAY_MARKERS)
    ):
        issues.append("Hero section lacks dark text or overlay on light background")

    return issues


def extract_hero_section(code: str) -> Optional[str]:
    """Inner content of the hero block, or of the first block after </header>"""
    for pattern in _HERO_PATTERNS:
        match = pattern.search(code)
        if match and match.group(1):
            return match.group(1)

    header_end = _HEADER_END.search(code)
    if header_end:
        match = _FIRST_BLOCK.search(code, header_end.end())
        if match and match.group(1):
            return match.group(1)

    return None


def validate_hero_section(code: str) -> HeroValidation:
    issues: List[str] = []

    if "hero" not in code and "banner" not in code and "jumbotron" not in code:
        return HeroValidation(is_valid=False, issues=["No hero section detected"])

    has_background = "background-image" in code or "background:" in code or "background-color" in code
    has_imagery = "<img" in code or "background-image" in code

    if not has_background:
        issues.append("Hero section lacks background styling")
    if not has_imagery:
        issues.append("Hero section lacks images or visual elements")

    if "<h1" not in code and "<h2" not in code:
        issues.append("Hero section lacks a main headline")
    if "<p" not in code and "<h3" not in code and "<h4" not in code:
        issues.append("Hero section lacks a descriptive subheading")
    if len(_CTA_PATTERN.findall(code)) < 2:
        issues.append("Hero section should have at least 2 call-to-action buttons")

    interactive = [
        "animation" in code or "transition" in code or "keyframes" in code,
        ":hover" in code,
        "carousel" in code or "slider" in code or "swiper" in code,
    ]
    if sum(interactive) < 2:
        issues.append("Hero section lacks sufficient interactive elements (need at least 2)")

    issues.extend(check_text_contrast(code))

    hero_content = extract_hero_section(code)
    if hero_content and len(hero_content.strip()) < 200:
        issues.append("Hero section appears to have minimal content or empty space")

    return HeroValidation(is_valid=not issues, issues=issues)
