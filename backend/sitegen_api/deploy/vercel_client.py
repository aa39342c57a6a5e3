"""Client for deploying generated static sites to Vercel"""
import base64
import json
import logging
import re
from typing import Any, Dict, List, Optional
import httpx
from sitegen_api.core.config import settings
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import DeployResponse, GeneratedFile

logger = logging.getLogger(__name__)

STATIC_VERCEL_CONFIG = {
    "buildCommand": "",
    "outputDirectory": ".",
    "framework": None,
}


def _encode(content: str) -> str:
    return base64.b64encode(content.encode("utf-8")).decode("ascii")


def _deployment_file(name: str, content: str) -> Dict[str, str]:
    return {"file": name, "data": _encode(content), "encoding": "base64"}


def _basename(name: str) -> str:
    return name.rsplit("/", 1)[-1]


def slugify_project_name(name: str) -> str:
    return re.sub(r"\s+", "-", name.lower())


def prepare_deployment_files(files: List[GeneratedFile]) -> List[Dict[str, str]]:
    """
    Build the Vercel file list for a static site.

    index.html comes first, then every .css and .js file flattened to its
    basename, then a vercel.json that disables the build step.

    Raises:
        ApplicationError: NO_HTML_FILE when no index.html is present
    """
    html_file = next(
        (f for f in files if f.name == "index.html" or f.name.endswith("index.html")),
        None,
    )
    if html_file is None:
        raise ApplicationError(
            code=ErrorCode.NO_HTML_FILE,
            message="No HTML file found in the generated code",
        )

    deployment_files = [_deployment_file("index.html", html_file.content)]

    for extension in (".css", ".js"):
        for f in files:
            if f.name.endswith(extension):
                deployment_files.append(_deployment_file(_basename(f.name), f.content))

    deployment_files.append(
        _deployment_file("vercel.json", json.dumps(STATIC_VERCEL_CONFIG, indent=2))
    )
    return deployment_files


def deployment_url(data: Dict[str, Any]) -> str:
    """Public URL from a deployment payload: url, then first alias, then <name>.vercel.app"""
    aliases = data.get("alias") or []
    url = data.get("url") or (aliases[0] if aliases else None) or f"https://{data.get('name')}.vercel.app"
    return url if url.startswith("http") else f"https://{url}"


class VercelClient:
    """Deploys through the Vercel REST API (deployments v13, projects v9)"""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = settings.request_timeout
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {settings.vercel_token}",
            "Content-Type": "application/json",
        }

    async def deploy(self, files: List[GeneratedFile], project_name: str) -> DeployResponse:
        """
        Deploy files as a production static site.

        When the project does not exist yet, it is created and the deployment
        retried once.

        Raises:
            ApplicationError: CONFIGURATION_ERROR, NO_HTML_FILE or DEPLOYMENT_FAILED
        """
        if not settings.vercel_token:
            raise ApplicationError(
                code=ErrorCode.CONFIGURATION_ERROR,
                message="VERCEL_TOKEN is not configured",
                hint="Set VERCEL_TOKEN in the .env file",
            )

        slug = slugify_project_name(project_name)
        payload = {
            "name": slug,
            "files": prepare_deployment_files(files),
            "target": "production",
            "projectSettings": {
                "framework": None,
                "buildCommand": "",
                "outputDirectory": ".",
            },
        }
        logger.info(
            f"[VERCEL] Creating deployment | name={slug} | files={len(payload['files'])} | target=production"
        )

        async with httpx.AsyncClient(
            base_url=settings.vercel_api_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post("/v13/deployments", json=payload, headers=self._headers())
                logger.info(f"[VERCEL] Deploy response status={response.status_code}")

                if response.is_success:
                    return self._to_response(response.json())

                if response.status_code != 404 and "not_found" not in response.text:
                    logger.error(f"[VERCEL] Deploy failed: {response.text[:500]}")
                    raise ApplicationError(
                        code=ErrorCode.DEPLOYMENT_FAILED,
                        message=f"Failed to deploy: {response.text}",
                    )

                logger.info(f"[VERCEL] Project not found, creating project {slug}")
                created = await client.post("/v9/projects", json={"name": slug}, headers=self._headers())
                if not created.is_success:
                    logger.error(f"[VERCEL] Project creation failed: {created.text[:500]}")
                    raise ApplicationError(
                        code=ErrorCode.DEPLOYMENT_FAILED,
                        message=f"Failed to create Vercel project: {created.text}",
                    )

                retry = await client.post("/v13/deployments", json=payload, headers=self._headers())
                if not retry.is_success:
                    logger.error(f"[VERCEL] Deploy after project creation failed: {retry.text[:500]}")
                    raise ApplicationError(
                        code=ErrorCode.DEPLOYMENT_FAILED,
                        message=f"Failed to deploy after creating project: {retry.text}",
                    )
                return self._to_response(retry.json())

            except httpx.RequestError as e:
                logger.error(f"[VERCEL] Request error: {e}")
                raise ApplicationError(
                    code=ErrorCode.DEPLOYMENT_FAILED,
                    message=f"Failed to deploy to Vercel: {str(e)}",
                    retryable=True,
                )

    @staticmethod
    def _to_response(data: Dict[str, Any]) -> DeployResponse:
        url = deployment_url(data)
        logger.info(f"[VERCEL] Deployed | url={url} | id={data.get('id')}")
        return DeployResponse(deployment_url=url, deployment_id=data.get("id"))


# Global client instance
vercel_client = VercelClient()
