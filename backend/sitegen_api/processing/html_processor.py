"""
Post-processing of LLM output into a complete, themed HTML document and its
HTML / CSS / JavaScript parts.
"""

import re
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple
from sitegen_api.models.schemas import GeneratedFile
from sitegen_api.styling.theme import generate_complete_theme

logger = logging.getLogger(__name__)

_FENCE_START = re.compile(r"^\s*```[a-zA-Z0-9_-]*[ \t]*\n?")
_FENCE_END = re.compile(r"\n?```\s*$")
_DOCTYPE_DOCUMENT = re.compile(r"<!DOCTYPE html>[\s\S]*</html>", re.IGNORECASE)
_HTML_DOCUMENT = re.compile(r"<html[\s\S]*</html>", re.IGNORECASE)
_STYLE_BLOCK = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
_STYLE_OPEN = re.compile(r"<style[^>]*>", re.IGNORECASE)
_HEAD_CLOSE = re.compile(r"</head\s*>", re.IGNORECASE)
_SCRIPT_BLOCK = re.compile(r"<script([^>]*)>([\s\S]*?)</script>", re.IGNORECASE)
_BODY_CONTENT = re.compile(r"<body[^>]*>([\s\S]*?)</body>", re.IGNORECASE)

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Generated Website</title>
    <style>
{css}
    </style>
</head>
<body>
{body}
</body>
</html>
"""


@dataclass
class ProcessedCode:
    html: str
    css: str
    javascript: str
    full_code: str


def strip_markdown_fences(text: str) -> str:
    """Remove a leading ```lang fence and a trailing ``` fence"""
    if not text:
        return ""
    stripped = _FENCE_START.sub("", text, count=1)
    stripped = _FENCE_END.sub("", stripped, count=1)
    return stripped


def extract_html_document(text: str) -> Optional[str]:
    """First complete document in the text, preferring one with a DOCTYPE"""
    match = _DOCTYPE_DOCUMENT.search(text) or _HTML_DOCUMENT.search(text)
    return match.group(0) if match else None


def wrap_in_document(fragment: str, style: str = "modern", scheme: str = "vibrant") -> str:
    return DOCUMENT_TEMPLATE.format(css=generate_complete_theme(style, scheme), body=fragment)


def inject_theme_css(document: str, style: str = "modern", scheme: str = "vibrant") -> str:
    """Prepend the theme to the first <style> block, or add one before </head>"""
    theme_css = generate_complete_theme(style, scheme)

    style_open = _STYLE_OPEN.search(document)
    if style_open:
        end = style_open.end()
        return f"{document[:end]}\n{theme_css}\n{document[end:]}"

    if _HEAD_CLOSE.search(document):
        return _HEAD_CLOSE.sub(lambda m: f"<style>\n{theme_css}\n</style>\n{m.group(0)}", document, count=1)

    return document


def extract_css(html: str) -> Tuple[str, str]:
    """Return (html without <style> blocks, concatenated css)"""
    css = "".join(match.group(1) + "\n" for match in _STYLE_BLOCK.finditer(html))
    return _STYLE_BLOCK.sub("", html), css


def extract_javascript(html: str) -> Tuple[str, str]:
    """Return (html without inline scripts, concatenated js); src= scripts stay"""
    parts: List[str] = []

    def _take_inline(match: re.Match) -> str:
        if "src=" in match.group(0):
            return match.group(0)
        parts.append(match.group(2) + "\n")
        return ""

    remaining = _SCRIPT_BLOCK.sub(_take_inline, html)
    return remaining, "".join(parts)


def extract_body(html: str) -> str:
    match = _BODY_CONTENT.search(html)
    return match.group(1) if match else html


def split_generated_code(document: str) -> ProcessedCode:
    """Split a complete document into body html, css and javascript for display"""
    without_css, css = extract_css(document)
    without_js, javascript = extract_javascript(without_css)
    # Remaining src= scripts are not part of the display html either
    clean_html = _SCRIPT_BLOCK.sub("", without_js)
    return ProcessedCode(
        html=extract_body(clean_html).strip(),
        css=css.strip(),
        javascript=javascript.strip(),
        full_code=document,
    )


def parse_generated_files(code: str) -> List[GeneratedFile]:
    """index.html with the full code, plus styles.css and script.js when non-empty"""
    files = [GeneratedFile(name="index.html", content=code)]
    _, css = extract_css(code)
    _, javascript = extract_javascript(code)

    if css.strip():
        files.append(GeneratedFile(name="styles.css", content=css.strip()))
    if javascript.strip():
        files.append(GeneratedFile(name="script.js", content=javascript.strip()))
    return files


def combine_html_css_js(html: str, css: str, javascript: str,
                        style: str = "modern", scheme: str = "vibrant") -> str:
    """Assemble a themed document from separate body html, css and js"""
    combined_css = f"{generate_complete_theme(style, scheme)}\n{css}"
    body = f"{html}\n<script>\n{javascript}\n</script>"
    return DOCUMENT_TEMPLATE.format(css=combined_css, body=body)


def process_generated_html(html: str, style: str = "modern", scheme: str = "vibrant") -> ProcessedCode:
    """Pull css and inline js out of html and rebuild it as a themed document"""
    without_css, extracted_css = extract_css(html)
    clean_html, javascript = extract_javascript(without_css)
    combined_css = f"{generate_complete_theme(style, scheme)}\n{extracted_css}"

    full_html = DOCUMENT_TEMPLATE.format(css=combined_css, body=clean_html)
    full_code = full_html.replace("</body>", f"<script>{javascript}</script></body>", 1)

    return ProcessedCode(
        html=clean_html,
        css=combined_css,
        javascript=javascript,
        full_code=full_code,
    )


def normalize_llm_output(text: str, style: str = "modern", scheme: str = "vibrant") -> str:
    """Turn raw model output into a complete themed HTML document"""
    cleaned = strip_markdown_fences(text or "")
    document = extract_html_document(cleaned)

    if document is None:
        logger.info(f"[PROCESS] No complete document in output ({len(cleaned)} chars), wrapping fragment")
        return wrap_in_document(cleaned, style, scheme)

    return inject_theme_css(document, style, scheme)
