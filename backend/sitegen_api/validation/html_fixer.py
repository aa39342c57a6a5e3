"""
HTML Fixer - repairs the document skeleton of generated code
"""
from dataclasses import dataclass, field
from typing import List, Optional
from bs4 import BeautifulSoup, Doctype
import re
import logging

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Generated Website"
CHARSET_META = '<meta charset="UTF-8">'
VIEWPORT_META = '<meta name="viewport" content="width=device-width, initial-scale=1.0">'

_DOCTYPE_DECL = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_HTML_OPEN = re.compile(r"<html\b[^>]*>", re.IGNORECASE)
_HEAD_OPEN = re.compile(r"<head\b[^>]*>", re.IGNORECASE)
_HTML_CLOSE = re.compile(r"</html\s*>", re.IGNORECASE)


@dataclass
class FixResult:
    fixed_code: str
    fixes_applied: List[str] = field(default_factory=list)


class HTMLFixer:
    """
    Adds whatever parts of the HTML5 skeleton a generated document lacks.

    The soup is only used to look elements up; edits are spliced into the
    original text so the generated markup is otherwise left untouched.
    """

    def __init__(self, html: str):
        self.html = html or ""
        self.soup = BeautifulSoup(self.html, 'html.parser')
        self.fixes_applied: List[str] = []

    def fix(self) -> FixResult:
        for step in (
            self._fix_missing_doctype,
            self._fix_missing_html,
            self._fix_missing_head,
            self._fix_missing_body,
            self._fix_missing_charset,
            self._fix_missing_viewport,
            self._fix_missing_title,
        ):
            step()

        if self.fixes_applied:
            logger.info(f"[FIXER] Applied {len(self.fixes_applied)} fixes: {', '.join(self.fixes_applied)}")

        return FixResult(fixed_code=self.html, fixes_applied=self.fixes_applied)

    def _update(self, html: str, fix_name: str):
        self.html = html
        self.soup = BeautifulSoup(html, 'html.parser')
        self.fixes_applied.append(fix_name)

    def _has_closing(self, tag: str) -> bool:
        return re.search(rf"</{tag}\s*>", self.html, re.IGNORECASE) is not None

    # Position right after an opening tag, or None when the tag is absent
    def _after_open_tag(self, pattern: re.Pattern) -> Optional[int]:
        match = pattern.search(self.html)
        return match.end() if match else None

    def _insert_in_head(self, snippet: str, fix_name: str):
        index = self._after_open_tag(_HEAD_OPEN)
        if index is None:
            return
        self._update(f"{self.html[:index]}\n  {snippet}{self.html[index:]}", fix_name)

    def _fix_missing_doctype(self):
        if any(isinstance(item, Doctype) for item in self.soup.contents):
            return
        if _DOCTYPE_DECL.search(self.html):
            return
        self._update("<!DOCTYPE html>\n" + self.html, "Added DOCTYPE declaration")

    def _fix_missing_html(self):
        has_open = self.soup.find('html') is not None
        has_close = self._has_closing('html')
        if has_open and has_close:
            return

        html = self.html
        if not has_open:
            doctype = _DOCTYPE_DECL.search(html)
            index = doctype.end() if doctype else 0
            html = f'{html[:index]}\n<html lang="en">\n{html[index:]}'
        if not has_close:
            html += "\n</html>"
        self._update(html, "Added html element")

    def _fix_missing_head(self):
        if self.soup.find('head') is not None or self._has_closing('head'):
            return
        index = self._after_open_tag(_HTML_OPEN)
        if index is None:
            return
        head = (
            f"\n<head>\n  {CHARSET_META}\n  {VIEWPORT_META}\n"
            f"  <title>{DEFAULT_TITLE}</title>\n</head>"
        )
        self._update(self.html[:index] + head + self.html[index:], "Added head section")

    def _fix_missing_body(self):
        has_open = self.soup.find('body') is not None
        has_close = self._has_closing('body')
        if has_open and has_close:
            return

        html = self.html
        if not has_open:
            head_end = re.search(r"</head\s*>", html, re.IGNORECASE)
            if head_end:
                index = head_end.end()
            else:
                html_open = _HTML_OPEN.search(html)
                if not html_open:
                    return
                index = html_open.end()
            html = f"{html[:index]}\n<body>\n{html[index:]}"

        if not has_close:
            # Close the body inside the last </html>, never after it
            closings = list(_HTML_CLOSE.finditer(html))
            if closings:
                index = closings[-1].start()
                html = f"{html[:index]}\n</body>\n{html[index:]}"
            else:
                html += "\n</body>"

        self._update(html, "Added body section")

    def _fix_missing_charset(self):
        if self.soup.find('meta', charset=True) is not None:
            return
        self._insert_in_head(CHARSET_META, "Added meta charset")

    def _fix_missing_viewport(self):
        if self.soup.find('meta', attrs={'name': 'viewport'}) is not None:
            return
        self._insert_in_head(VIEWPORT_META, "Added viewport meta tag")

    def _fix_missing_title(self):
        if self.soup.find('title') is not None:
            return
        self._insert_in_head(f"<title>{DEFAULT_TITLE}</title>", "Added title")


def fix_common_html_issues(code: str) -> FixResult:
    """
    Repair the HTML5 skeleton of a generated document.

    Running the fixer on its own output changes nothing.
    """
    return HTMLFixer(code).fix()
