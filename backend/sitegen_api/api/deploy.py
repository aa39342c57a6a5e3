"""POST /api/deploy-to-vercel endpoint"""

import logging
from fastapi import APIRouter, Depends
from sitegen_api.core.auth import verify_api_key
from sitegen_api.deploy.vercel_client import vercel_client
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import DeployRequest, DeployResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/deploy-to-vercel", response_model=DeployResponse, dependencies=[Depends(verify_api_key)])
async def deploy_to_vercel(request: DeployRequest) -> DeployResponse:
    """Deploy generated files as a static production site"""
    try:
        return await vercel_client.deploy(request.files, request.project_name)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("[VERCEL] Unexpected error")
        raise ApplicationError(
            code=ErrorCode.DEPLOYMENT_FAILED,
            message="Failed to deploy to Vercel",
            details=str(e),
        )
