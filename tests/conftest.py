"""Shared fixtures: generated documents that pass or fail the heuristic checks"""
import pytest

HERO = """<section class="hero" id="home">
<h1>Fresh bread baked every morning</h1>
<p>Our neighbourhood bakery has been serving sourdough, pastries and celebration cakes for over twenty years, using organic flour and local butter.</p>
<img src="hero.jpg" alt="Loaves of sourdough bread" loading="lazy">
<button class="btn">Order now</button>
<button class="btn btn-outline">See the menu</button>
</section>"""


def build_site(css_lines: int = 520, js_lines: int = 520, html_lines: int = 320) -> str:
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        '<meta name="description" content="Neighbourhood bakery">',
        "<title>Bakery</title>",
        "<style>",
        ":root { --brand: #1e293b; }",
        ".hero { background-image: url(hero.jpg); transition: transform 0.3s; }",
        ".btn:hover { transform: translateY(-2px); }",
        ".btn:focus { outline: 2px solid #1e293b; }",
        ".grid { display: grid; }",
        "@media (max-width: 768px) { .grid { display: block; } }",
    ]
    lines += [f".c{i} {{ margin: {i}px; }}" for i in range(css_lines)]
    lines += [
        "</style>",
        "</head>",
        "<body>",
        "<header>",
        '<nav aria-label="Main">',
        '<a href="#home">Home</a>',
        "</nav>",
        "</header>",
        "<main>",
    ]
    lines += HERO.split("\n")
    lines += [
        '<section id="contact">',
        "<form>",
        '<input type="email" name="email">',
        "</form>",
        "</section>",
    ]
    lines += [f"<p>Paragraph {i}</p>" for i in range(html_lines)]
    lines += [
        "</main>",
        "<footer>Bakery</footer>",
        "<script>",
        "function init() {",
        "  try {",
        "    const saved = localStorage.getItem('cart');",
        "    document.querySelector('.btn').addEventListener('click', () => console.log(saved));",
        "  } catch (e) {",
        "    console.error(e);",
        "  }",
        "}",
    ]
    lines += [f"const v{i} = {i};" for i in range(js_lines)]
    lines += ["init();", "</script>", "</body>", "</html>"]
    return "\n".join(lines)


@pytest.fixture
def complete_site() -> str:
    """A document that passes completeness, hero and structure checks"""
    return build_site()


@pytest.fixture
def short_site() -> str:
    """Structurally valid with a good hero, but far below the size minimums"""
    return build_site(css_lines=10, js_lines=10, html_lines=10)
