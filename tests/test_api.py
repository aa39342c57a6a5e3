"""
API tests using FastAPI's TestClient

Provider-backed services are replaced on the route modules, so nothing here
talks to Anthropic, OpenAI or Vercel.
"""
from unittest.mock import AsyncMock, Mock
import pytest
from fastapi.testclient import TestClient
from sitegen_api.core.config import settings
from sitegen_api.main import app
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import (
    CodeValidationResult,
    DeployResponse,
    GenerateWebsiteMetadata,
    GenerateWebsiteResponse,
    ValidationReport,
)


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(settings, "api_key", "")
    return TestClient(app)


@pytest.fixture
def generator(monkeypatch):
    mock = Mock()
    mock.generate_website = AsyncMock()
    mock.stream_code = AsyncMock()
    mock.generate_with_template = AsyncMock()
    mock.update_website = AsyncMock()
    monkeypatch.setattr("sitegen_api.api.generate.website_generator", mock)
    monkeypatch.setattr("sitegen_api.api.update.website_generator", mock)
    return mock


class TestHealth:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


class TestEnhanceEndpoint:

    def test_enhance(self, client):
        response = client.post("/api/enhance-prompt", json={"prompt": "Restaurant website with online booking"})
        assert response.status_code == 200
        data = response.json()
        assert data["originalPrompt"] == "Restaurant website with online booking"
        assert data["templateId"] == "restaurant-website"
        assert "## Website Type: Restaurant Website" in data["enhancedPrompt"]

    def test_generic_enhancement_has_null_template(self, client):
        data = client.post("/api/enhance-prompt", json={"prompt": "A page about my cat"}).json()
        assert data["templateId"] is None

    def test_explicit_template(self, client):
        data = client.post(
            "/api/enhance-prompt", json={"prompt": "Something", "templateId": "saas-landing"}
        ).json()
        assert data["templateId"] == "saas-landing"

    @pytest.mark.parametrize("body", [{}, {"prompt": ""}, {"prompt": "   "}])
    def test_prompt_required(self, client, body):
        response = client.post("/api/enhance-prompt", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Prompt is required"
        assert response.json()["code"] == "INVALID_REQUEST"


class TestTemplateEndpoints:

    def test_list(self, client):
        data = client.get("/api/templates").json()
        assert len(data) == 5
        assert "codePatterns" in data[0]

    def test_filter_by_category(self, client):
        data = client.get("/api/templates", params={"category": "portfolio"}).json()
        assert [t["id"] for t in data] == ["modern-portfolio"]

    def test_search(self, client):
        data = client.get("/api/templates", params={"q": "restaurant"}).json()
        assert "restaurant-website" in [t["id"] for t in data]

    def test_categories(self, client):
        assert client.get("/api/templates/categories").json() == [
            "portfolio", "landing", "ecommerce", "hospitality", "business",
        ]

    def test_read(self, client):
        assert client.get("/api/templates/saas-landing").json()["name"] == "SaaS Landing Page"

    def test_not_found(self, client):
        response = client.get("/api/templates/nope")
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"


class TestGenerateEndpoints:

    def test_generate_website(self, client, generator):
        generator.generate_website.return_value = GenerateWebsiteResponse(
            html="<h1>Hi</h1>",
            css="h1{}",
            javascript="",
            full_code="<!DOCTYPE html><html></html>",
            validation=ValidationReport(is_valid=True, score=90),
            metadata=GenerateWebsiteMetadata(style="modern", color_scheme="vibrant", score=90),
        )

        response = client.post("/api/generate-website", json={"prompt": "A bakery", "colorScheme": "pastel"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["fullCode"] == "<!DOCTYPE html><html></html>"
        assert data["validation"]["isValid"] is True
        assert data["metadata"]["colorScheme"] == "vibrant"
        request = generator.generate_website.call_args.args[0]
        assert request.color_scheme == "pastel"
        assert request.style == "modern"

    def test_generate_website_null_style_uses_default(self, client, generator):
        generator.generate_website.side_effect = ApplicationError(
            code=ErrorCode.GENERATION_FAILED, message="Failed to generate website"
        )
        response = client.post("/api/generate-website", json={"prompt": "A bakery", "style": None})

        assert generator.generate_website.call_args.args[0].style == "modern"
        assert response.status_code == 500
        assert response.json()["error"] == "Failed to generate website"

    def test_generate_website_invalid_style(self, client, generator):
        response = client.post("/api/generate-website", json={"prompt": "A bakery", "style": "gothic"})
        assert response.status_code == 422

    def test_generate_website_prompt_required(self, client, generator):
        response = client.post("/api/generate-website", json={"prompt": " "})
        assert response.status_code == 400
        generator.generate_website.assert_not_awaited()

    def test_generate_code_streams(self, client, generator):
        async def chunks():
            yield b"event: message_start\ndata: {}\n\n"
            yield b"event: message_stop\ndata: {}\n\n"

        upstream = Mock()
        upstream.aiter_raw = chunks
        upstream.aclose = AsyncMock()
        generator.stream_code.return_value = upstream

        response = client.post("/api/generate-code", json={"enhancedPrompt": "A bakery"})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.headers["cache-control"] == "no-cache"
        assert response.headers["x-accel-buffering"] == "no"
        assert response.content == b"event: message_start\ndata: {}\n\nevent: message_stop\ndata: {}\n\n"
        upstream.aclose.assert_awaited_once()

    def test_generate_code_error_is_json(self, client, generator):
        generator.stream_code.side_effect = ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message="Error generating code with Claude: Claude API request failed: bad",
        )
        response = client.post("/api/generate-code", json={"enhancedPrompt": "A bakery"})

        assert response.status_code == 500
        assert response.json()["error"].startswith("Error generating code with Claude")

    def test_generate_code_prompt_required(self, client, generator):
        response = client.post("/api/generate-code", json={"template": "default"})
        assert response.status_code == 400
        assert response.json()["error"] == "Enhanced prompt is required"
        generator.stream_code.assert_not_awaited()

    def test_claude_code_generator(self, client, generator):
        generator.generate_with_template.return_value = {"id": "msg_1", "content": []}
        response = client.post("/api/claude-code-generator", json={"prompt": "Portfolio", "templateId": "modern-portfolio"})

        assert response.status_code == 200
        assert response.json()["id"] == "msg_1"
        generator.generate_with_template.assert_awaited_once_with("Portfolio", "modern-portfolio")

    def test_claude_code_generator_status_passthrough(self, client, generator):
        generator.generate_with_template.side_effect = ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message="Claude API request failed: rate limited",
            status_code=429,
        )
        response = client.post("/api/claude-code-generator", json={"prompt": "Portfolio"})
        assert response.status_code == 429

    def test_claude_code_generator_prompt_required(self, client, generator):
        assert client.post("/api/claude-code-generator", json={}).status_code == 400


class TestApiKey:

    def test_missing_key(self, client, generator, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        response = client.post("/api/generate-website", json={"prompt": "A bakery"})
        assert response.status_code == 403

    def test_invalid_key(self, client, generator, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        response = client.post(
            "/api/deploy-to-vercel",
            json={"files": [{"name": "index.html", "content": ""}], "projectName": "site"},
            headers={"X-API-Key": "wrong"},
        )
        assert response.status_code == 403

    def test_valid_key(self, client, generator, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        generator.update_website.return_value = {"choices": []}
        response = client.post(
            "/api/update-website",
            json={"generatedCode": "<html></html>", "realTimePrompt": "Add a footer"},
            headers={"X-API-Key": "secret"},
        )
        assert response.status_code == 200

    def test_public_routes_need_no_key(self, client, monkeypatch):
        monkeypatch.setattr(settings, "api_key", "secret")
        assert client.post("/api/enhance-prompt", json={"prompt": "A shop"}).status_code == 200


class TestUpdateEndpoint:

    def test_update(self, client, generator):
        generator.update_website.return_value = {"choices": [{"message": {"content": "<html>new</html>"}}]}
        response = client.post(
            "/api/update-website",
            json={"generatedCode": "<html>old</html>", "realTimePrompt": "Make it blue"},
        )
        assert response.status_code == 200
        assert response.json()["choices"][0]["message"]["content"] == "<html>new</html>"
        generator.update_website.assert_awaited_once_with("<html>old</html>", "Make it blue")

    def test_missing_fields(self, client, generator):
        assert client.post("/api/update-website", json={"generatedCode": "<html></html>"}).status_code == 422


class TestValidationEndpoints:

    def test_validate_without_llm(self, client):
        response = client.post("/api/validate-code", json={"code": "<div>Hi</div>", "useLlm": False})
        assert response.status_code == 200
        data = response.json()
        assert data["report"]["isValid"] is False
        assert "Missing DOCTYPE declaration" in data["report"]["errors"]
        assert data["completeness"]["isComplete"] is False
        assert data["hero"]["issues"] == ["No hero section detected"]
        assert data["pipeline"] is None

    def test_validate_with_pipeline(self, client, monkeypatch):
        validator = Mock()
        validator.validate_code = AsyncMock(return_value=CodeValidationResult(
            is_valid=False, errors=["x"], validation_history=["completeness: failed"],
        ))
        monkeypatch.setattr("sitegen_api.api.validate.code_validator", validator)

        data = client.post("/api/validate-code", json={"code": "<div>Hi</div>", "fileName": "page.html"}).json()

        assert data["pipeline"]["validationHistory"] == ["completeness: failed"]
        validator.validate_code.assert_awaited_once_with("<div>Hi</div>", "page.html")

    def test_fix_code(self, client):
        response = client.post("/api/fix-code", json={"code": "<style>p{}</style><p>Hi</p>"})
        assert response.status_code == 200
        data = response.json()
        assert data["fixedCode"].startswith("<!DOCTYPE html>")
        assert "Added DOCTYPE declaration" in data["fixesApplied"]
        assert [f["name"] for f in data["files"]] == ["index.html", "styles.css"]


class TestPreviewEndpoints:

    def test_preview(self, client):
        response = client.post("/api/preview", json={"code": "<h1>Hello</h1>"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.headers["cache-control"] == "no-store"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.text.startswith("<!DOCTYPE html>")
        assert "<h1>Hello</h1>" in response.text

    def test_css_test_page(self, client):
        data = client.get("/api/test-css").json()
        assert data["success"] is True
        assert data["html"] == data["fullCode"]
        assert "CSS is Working!" in data["html"]
        assert "onclick" not in data["html"]


class TestDeployEndpoint:

    def test_deploy(self, client, monkeypatch):
        vercel = Mock()
        vercel.deploy = AsyncMock(return_value=DeployResponse(
            deployment_url="https://site.vercel.app", deployment_id="dpl_1",
        ))
        monkeypatch.setattr("sitegen_api.api.deploy.vercel_client", vercel)

        response = client.post(
            "/api/deploy-to-vercel",
            json={"files": [{"name": "index.html", "content": "<html></html>"}], "projectName": "My Site"},
        )

        assert response.status_code == 200
        assert response.json() == {"deploymentUrl": "https://site.vercel.app", "deploymentId": "dpl_1"}
        files, project_name = vercel.deploy.call_args.args
        assert project_name == "My Site"
        assert files[0].name == "index.html"

    @pytest.mark.parametrize("body", [
        {"files": [], "projectName": "site"},
        {"files": [{"name": "index.html", "content": ""}], "projectName": "   "},
        {"files": [{"name": "index.html", "content": ""}]},
    ])
    def test_invalid_request(self, client, body):
        assert client.post("/api/deploy-to-vercel", json=body).status_code == 422

    def test_no_html_file(self, client, monkeypatch):
        monkeypatch.setattr(settings, "vercel_token", "token")
        response = client.post(
            "/api/deploy-to-vercel",
            json={"files": [{"name": "styles.css", "content": "p{}"}], "projectName": "site"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "NO_HTML_FILE"
