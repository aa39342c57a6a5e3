"""
Tests for Vercel deployment

Uses httpx.MockTransport so no request leaves the process.
"""
import base64
import json
import httpx
import pytest
from sitegen_api.core.config import settings
from sitegen_api.deploy.vercel_client import (
    VercelClient,
    deployment_url,
    prepare_deployment_files,
    slugify_project_name,
)
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import GeneratedFile

FILES = [
    GeneratedFile(name="assets/script.js", content="run();"),
    GeneratedFile(name="index.html", content="<html></html>"),
    GeneratedFile(name="css/styles.css", content="body{}"),
]


def _decode(entry):
    return base64.b64decode(entry["data"]).decode("utf-8")


@pytest.fixture
def vercel_token(monkeypatch):
    monkeypatch.setattr(settings, "vercel_token", "test-token")


class TestPrepareDeploymentFiles:

    def test_order_and_names(self):
        """index.html first, then css, then js, then vercel.json"""
        entries = prepare_deployment_files(FILES)
        assert [e["file"] for e in entries] == ["index.html", "styles.css", "script.js", "vercel.json"]
        assert all(e["encoding"] == "base64" for e in entries)
        assert _decode(entries[0]) == "<html></html>"

    def test_vercel_config(self):
        config = json.loads(_decode(prepare_deployment_files(FILES)[-1]))
        assert config == {"buildCommand": "", "outputDirectory": ".", "framework": None}

    def test_nested_index_html(self):
        entries = prepare_deployment_files([GeneratedFile(name="site/index.html", content="<p>x</p>")])
        assert entries[0]["file"] == "index.html"

    def test_no_html_file(self):
        with pytest.raises(ApplicationError) as exc_info:
            prepare_deployment_files([GeneratedFile(name="styles.css", content="")])
        assert exc_info.value.code == ErrorCode.NO_HTML_FILE
        assert exc_info.value.http_status == 400
        assert exc_info.value.message == "No HTML file found in the generated code"


class TestHelpers:

    def test_slugify(self):
        assert slugify_project_name("My  Cool Site") == "my-cool-site"

    def test_deployment_url(self):
        assert deployment_url({"url": "site-abc.vercel.app"}) == "https://site-abc.vercel.app"
        assert deployment_url({"alias": ["site.vercel.app"]}) == "https://site.vercel.app"
        assert deployment_url({"name": "site"}) == "https://site.vercel.app"
        assert deployment_url({"url": "https://x.dev"}) == "https://x.dev"


class TestVercelClient:

    @pytest.mark.asyncio
    async def test_missing_token(self, monkeypatch):
        monkeypatch.setattr(settings, "vercel_token", "")
        with pytest.raises(ApplicationError) as exc_info:
            await VercelClient().deploy(FILES, "site")
        assert exc_info.value.code == ErrorCode.CONFIGURATION_ERROR
        assert exc_info.value.message == "VERCEL_TOKEN is not configured"

    @pytest.mark.asyncio
    async def test_deploy(self, vercel_token):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"id": "dpl_1", "url": "my-site-abc.vercel.app"})

        result = await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "My Site")

        assert result.deployment_url == "https://my-site-abc.vercel.app"
        assert result.deployment_id == "dpl_1"
        assert len(seen) == 1
        assert seen[0].url.path == "/v13/deployments"
        assert seen[0].headers["Authorization"] == "Bearer test-token"
        body = json.loads(seen[0].content)
        assert body["name"] == "my-site"
        assert body["target"] == "production"
        assert body["projectSettings"]["outputDirectory"] == "."

    @pytest.mark.asyncio
    async def test_creates_project_and_retries(self, vercel_token):
        """A missing project is created, then the deployment is retried once"""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if request.url.path == "/v9/projects":
                assert json.loads(request.content) == {"name": "my-site"}
                return httpx.Response(200, json={"id": "prj_1"})
            if len(calls) == 1:
                return httpx.Response(404, json={"error": {"code": "not_found"}})
            return httpx.Response(200, json={"id": "dpl_2", "alias": ["my-site.vercel.app"]})

        result = await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "My Site")

        assert calls == ["/v13/deployments", "/v9/projects", "/v13/deployments"]
        assert result.deployment_url == "https://my-site.vercel.app"

    @pytest.mark.asyncio
    async def test_not_found_code_in_body(self, vercel_token):
        """A non-404 status whose body says not_found also triggers project creation"""
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request.url.path)
            if len(calls) == 1:
                return httpx.Response(400, text='{"error":{"code":"not_found"}}')
            return httpx.Response(200, json={"id": "x", "name": "my-site"})

        result = await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "my-site")
        assert calls[1] == "/v9/projects"
        assert result.deployment_url == "https://my-site.vercel.app"

    @pytest.mark.asyncio
    async def test_deploy_error(self, vercel_token):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(403, text="forbidden")

        with pytest.raises(ApplicationError) as exc_info:
            await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "site")
        assert exc_info.value.code == ErrorCode.DEPLOYMENT_FAILED
        assert exc_info.value.message == "Failed to deploy: forbidden"

    @pytest.mark.asyncio
    async def test_project_creation_error(self, vercel_token):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v9/projects":
                return httpx.Response(409, text="conflict")
            return httpx.Response(404, text="missing")

        with pytest.raises(ApplicationError) as exc_info:
            await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "site")
        assert exc_info.value.message == "Failed to create Vercel project: conflict"

    @pytest.mark.asyncio
    async def test_retry_error(self, vercel_token):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/v9/projects":
                return httpx.Response(200, json={})
            return httpx.Response(404, text="still missing")

        with pytest.raises(ApplicationError) as exc_info:
            await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "site")
        assert exc_info.value.message == "Failed to deploy after creating project: still missing"

    @pytest.mark.asyncio
    async def test_network_error(self, vercel_token):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApplicationError) as exc_info:
            await VercelClient(transport=httpx.MockTransport(handler)).deploy(FILES, "site")
        assert exc_info.value.code == ErrorCode.DEPLOYMENT_FAILED
        assert exc_info.value.retryable is True
