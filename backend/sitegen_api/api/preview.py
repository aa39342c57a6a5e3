"""Preview endpoints"""

from fastapi import APIRouter, Response
from sitegen_api.models.schemas import FixCodeRequest
from sitegen_api.validation.html_fixer import fix_common_html_issues

router = APIRouter()

CSS_TEST_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>CSS Test</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            display: flex;
            align-items: center;
            justify-content: center;
            color: #333;
        }

        .container {
            background: white;
            padding: 2rem;
            border-radius: 1rem;
            box-shadow: 0 20px 40px rgba(0, 0, 0, 0.1);
            max-width: 600px;
            width: 90%;
        }

        h1 {
            color: #667eea;
            margin-bottom: 1rem;
            font-size: 2rem;
        }

        p {
            color: #666;
            line-height: 1.6;
            margin-bottom: 1.5rem;
        }

        .button {
            background: #667eea;
            color: white;
            padding: 0.75rem 1.5rem;
            border: none;
            border-radius: 0.5rem;
            font-size: 1rem;
            cursor: pointer;
            transition: all 0.3s ease;
        }

        .button:hover {
            background: #5a67d8;
            transform: translateY(-2px);
            box-shadow: 0 10px 20px rgba(102, 126, 234, 0.3);
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>CSS is Working!</h1>
        <p>This is a test page to verify that CSS is being properly applied. If you can see styled text with a gradient background and a white container with shadow, then CSS is working correctly.</p>
        <button class="button" id="test-button">Test Button</button>
    </div>
    <script>
        document.getElementById('test-button').addEventListener('click', function () {
            alert('CSS and JavaScript are both working!');
        });
    </script>
</body>
</html>
"""


@router.post("/preview")
async def preview(request: FixCodeRequest) -> Response:
    """Render generated code as a standalone page after skeleton repair"""
    result = fix_common_html_issues(request.code)
    return Response(
        content=result.fixed_code,
        media_type="text/html",
        headers={
            "Cache-Control": "no-store",
            "X-Content-Type-Options": "nosniff",
        },
    )


@router.get("/test-css")
async def test_css() -> dict:
    """Known-good styled page for checking that previews render CSS"""
    html = fix_common_html_issues(CSS_TEST_PAGE).fixed_code
    return {"success": True, "html": html, "fullCode": html}
