"""
Tests for LLM output post-processing
"""
from sitegen_api.processing.html_processor import (
    combine_html_css_js,
    extract_body,
    extract_css,
    extract_html_document,
    extract_javascript,
    inject_theme_css,
    normalize_llm_output,
    parse_generated_files,
    process_generated_html,
    split_generated_code,
    strip_markdown_fences,
)

DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
<style>
.hero { color: #111; }
</style>
<script src="https://cdn.example.com/lib.js"></script>
</head>
<body>
<h1>Bakery</h1>
<script>
console.log('ready');
</script>
</body>
</html>"""


class TestNormalizeOutput:

    def test_strip_fences(self):
        assert strip_markdown_fences("```html\n<p>x</p>\n```") == "<p>x</p>"
        assert strip_markdown_fences("<p>x</p>") == "<p>x</p>"
        assert strip_markdown_fences("") == ""

    def test_extract_document_from_chatter(self):
        text = "Here you go:\n<!DOCTYPE html><html><body>x</body></html>\nEnjoy!"
        assert extract_html_document(text) == "<!DOCTYPE html><html><body>x</body></html>"

    def test_extract_document_without_doctype(self):
        assert extract_html_document("Sure <html><body>x</body></html>") == "<html><body>x</body></html>"

    def test_extract_document_missing(self):
        assert extract_html_document("<p>x</p>") is None

    def test_fragment_is_wrapped(self):
        document = normalize_llm_output("```html\n<p>Hello</p>\n```")
        assert document.startswith("<!DOCTYPE html>")
        assert "<title>Generated Website</title>" in document
        assert "--color-primary: #4F46E5;" in document
        assert "<body>\n<p>Hello</p>\n</body>" in document

    def test_document_gets_theme(self):
        document = normalize_llm_output("```html\n" + DOCUMENT + "\n```", "bold", "dark")
        assert document.startswith("<!DOCTYPE html>")
        assert "--color-background: #09090B;" in document
        assert document.index("--color-primary") < document.index(".hero { color: #111; }")

    def test_empty_output(self):
        assert normalize_llm_output("").startswith("<!DOCTYPE html>")


class TestInjectThemeCss:

    def test_style_with_attributes(self):
        document = '<html><head><style media="screen">body{}</style></head></html>'
        injected = inject_theme_css(document)
        assert injected.startswith('<html><head><style media="screen">\n')
        assert injected.index(":root") < injected.index("body{}")

    def test_no_style_block(self):
        injected = inject_theme_css("<html><head></head><body></body></html>")
        assert "<style>\n" in injected
        assert injected.index(":root") < injected.index("</head>")

    def test_no_head(self):
        assert inject_theme_css("<html><body></body></html>") == "<html><body></body></html>"

    def test_uppercase_head_close(self):
        injected = inject_theme_css("<HTML><HEAD><TITLE>x</TITLE></HEAD><BODY>hi</BODY></HTML>")
        assert "<style>\n" in injected
        assert injected.index(":root") < injected.index("</HEAD>")
        assert injected.endswith("</HEAD><BODY>hi</BODY></HTML>")

    def test_uppercase_document_is_themed(self):
        document = normalize_llm_output("<!DOCTYPE html><HTML><HEAD><TITLE>x</TITLE></HEAD><BODY>hi</BODY></HTML>")
        assert "<style>" in document
        assert "--color-primary: #4F46E5;" in document


class TestSplitCode:

    def test_extract_css(self):
        html, css = extract_css("<style>a{}</style><p>x</p><style>b{}</style>")
        assert html == "<p>x</p>"
        assert css == "a{}\nb{}\n"

    def test_extract_javascript_keeps_src_scripts(self):
        html, js = extract_javascript('<script src="a.js"></script><script>run();</script>')
        assert html == '<script src="a.js"></script>'
        assert js == "run();\n"

    def test_extract_body(self):
        assert extract_body("<body class='x'><p>y</p></body>") == "<p>y</p>"
        assert extract_body("<p>y</p>") == "<p>y</p>"

    def test_split(self):
        parts = split_generated_code(DOCUMENT)
        assert parts.html == "<h1>Bakery</h1>"
        assert parts.css == ".hero { color: #111; }"
        assert parts.javascript == "console.log('ready');"
        assert parts.full_code == DOCUMENT

    def test_parse_generated_files(self):
        files = parse_generated_files(DOCUMENT)
        assert [f.name for f in files] == ["index.html", "styles.css", "script.js"]
        assert files[0].content == DOCUMENT
        assert files[1].content == ".hero { color: #111; }"

    def test_parse_generated_files_html_only(self):
        files = parse_generated_files("<html><body>x</body></html>")
        assert [f.name for f in files] == ["index.html"]


class TestCombine:

    def test_combine(self):
        document = combine_html_css_js("<h1>Hi</h1>", ".a{}", "go();")
        assert document.startswith("<!DOCTYPE html>")
        assert ".a{}" in document
        assert "<h1>Hi</h1>\n<script>\ngo();\n</script>" in document

    def test_process_generated_html(self):
        processed = process_generated_html("<style>.a{}</style><h1>Hi</h1><script>go();</script>")
        assert processed.html == "<h1>Hi</h1>"
        assert processed.javascript == "go();\n"
        assert processed.css.rstrip().endswith(".a{}")
        assert "<script>go();\n</script></body>" in processed.full_code
