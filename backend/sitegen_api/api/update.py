"""POST /api/update-website endpoint"""

import logging
from fastapi import APIRouter, Depends
from sitegen_api.core.auth import verify_api_key
from sitegen_api.generator.code_generator import website_generator
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import UpdateWebsiteRequest

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/update-website", dependencies=[Depends(verify_api_key)])
async def update_website(request: UpdateWebsiteRequest) -> dict:
    """Apply a natural-language edit to existing code; returns the raw completion JSON"""
    try:
        return await website_generator.update_website(request.generated_code, request.real_time_prompt)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("[UPDATE] Unexpected error")
        raise ApplicationError(
            code=ErrorCode.UPDATE_FAILED,
            message="Failed to update website",
            details=str(e),
        )
