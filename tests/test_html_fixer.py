"""
Tests for the HTML skeleton fixer
"""
from sitegen_api.validation.code_validator import validate_generated_code
from sitegen_api.validation.html_fixer import fix_common_html_issues

STRUCTURE_ERRORS = {
    "Missing DOCTYPE declaration",
    "Missing HTML tags",
    "Missing HEAD section",
    "Missing BODY section",
}


class TestHTMLFixer:

    def test_fragment_gets_full_skeleton(self):
        result = fix_common_html_issues("<h1>Hello</h1>")
        assert result.fixes_applied == [
            "Added DOCTYPE declaration",
            "Added html element",
            "Added head section",
            "Added body section",
        ]
        assert result.fixed_code.startswith("<!DOCTYPE html>")
        assert '<meta charset="UTF-8">' in result.fixed_code
        assert "<title>Generated Website</title>" in result.fixed_code
        assert "<h1>Hello</h1>" in result.fixed_code

    def test_fixed_fragment_passes_structure_checks(self):
        result = fix_common_html_issues("<h1>Hello</h1>")
        errors = set(validate_generated_code(result.fixed_code).errors)
        assert not errors & STRUCTURE_ERRORS

    def test_idempotent(self):
        """Running the fixer on its own output changes nothing"""
        first = fix_common_html_issues("<p>Some content</p>")
        second = fix_common_html_issues(first.fixed_code)
        assert second.fixes_applied == []
        assert second.fixed_code == first.fixed_code

    def test_complete_document_untouched(self, complete_site):
        result = fix_common_html_issues(complete_site)
        assert result.fixes_applied == []
        assert result.fixed_code == complete_site

    def test_missing_head_metadata(self):
        code = '<!DOCTYPE html><html><head><meta charset="UTF-8"></head><body></body></html>'
        result = fix_common_html_issues(code)
        assert result.fixes_applied == ["Added viewport meta tag", "Added title"]
        assert 'name="viewport"' in result.fixed_code
        assert "<title>Generated Website</title>" in result.fixed_code

    def test_header_is_not_head(self):
        """A <header> element does not count as the document head"""
        code = "<!DOCTYPE html><html><body><header>Top</header></body></html>"
        result = fix_common_html_issues(code)
        assert "Added head section" in result.fixes_applied
        assert "<head>" in result.fixed_code

    def test_body_closed_before_html(self):
        code = "<!DOCTYPE html><html><head><title>x</title></head><p>Hi</p></html>"
        result = fix_common_html_issues(code)
        assert "Added body section" in result.fixes_applied
        fixed = result.fixed_code
        assert fixed.index("</head>") < fixed.index("<body>") < fixed.index("<p>Hi</p>")
        assert fixed.index("</body>") < fixed.index("</html>")

    def test_lowercase_doctype_kept(self):
        code = "<!doctype html><html><head><title>x</title></head><body></body></html>"
        result = fix_common_html_issues(code)
        assert "Added DOCTYPE declaration" not in result.fixes_applied

    def test_empty_input(self):
        result = fix_common_html_issues("")
        assert result.fixed_code.startswith("<!DOCTYPE html>")
        assert "<body>" in result.fixed_code

    def test_uppercase_document_passes_structure_checks(self):
        """Tag case does not matter to either the fixer or the validator"""
        code = "<HTML><HEAD><TITLE>x</TITLE></HEAD><BODY><p>hi</p></BODY></HTML>"
        result = fix_common_html_issues(code)
        assert "Added html element" not in result.fixes_applied
        assert "Added head section" not in result.fixes_applied
        assert "Added body section" not in result.fixes_applied
        errors = set(validate_generated_code(result.fixed_code).errors)
        assert not errors & STRUCTURE_ERRORS
