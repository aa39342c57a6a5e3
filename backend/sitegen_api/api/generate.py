"""Website generation endpoints"""

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from starlette.background import BackgroundTask
from sitegen_api.core.auth import verify_api_key
from sitegen_api.generator.code_generator import website_generator
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import (
    ClaudeCodeRequest,
    GenerateCodeRequest,
    GenerateWebsiteRequest,
    GenerateWebsiteResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(verify_api_key)])


@router.post("/generate-website", response_model=GenerateWebsiteResponse)
async def generate_website(request: GenerateWebsiteRequest) -> GenerateWebsiteResponse:
    """
    Generate a complete themed website in one call.

    Returns the document plus its html/css/javascript parts and a heuristic
    validation report.
    """
    if not request.prompt or not request.prompt.strip():
        raise ApplicationError(code=ErrorCode.INVALID_REQUEST, message="Prompt is required")

    try:
        return await website_generator.generate_website(request)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("[GENERATE] Unexpected error")
        raise ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message="Failed to generate website",
            details=str(e),
        )


@router.post("/generate-code")
async def generate_code(request: GenerateCodeRequest) -> StreamingResponse:
    """
    Stream code generation as Server-Sent Events.

    The provider's SSE bytes are relayed unchanged. Provider errors are
    reported as JSON before the stream starts.
    """
    if not request.enhanced_prompt or not request.enhanced_prompt.strip():
        raise ApplicationError(code=ErrorCode.INVALID_REQUEST, message="Enhanced prompt is required")

    try:
        upstream = await website_generator.stream_code(request)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("[STREAM] Failed to open stream")
        raise ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message=f"Error generating code with Claude: {str(e)}",
        )

    return StreamingResponse(
        upstream.aiter_raw(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
        background=BackgroundTask(upstream.aclose),
    )


@router.post("/claude-code-generator")
async def claude_code_generator(request: ClaudeCodeRequest) -> dict:
    """Template-enhanced single Claude call; returns the provider message as-is"""
    if not request.prompt or not request.prompt.strip():
        raise ApplicationError(code=ErrorCode.INVALID_REQUEST, message="Prompt is required")

    try:
        return await website_generator.generate_with_template(request.prompt, request.template_id)
    except ApplicationError:
        raise
    except Exception as e:
        logger.exception("[STUDIO] Unexpected error")
        raise ApplicationError(code=ErrorCode.GENERATION_FAILED, message=str(e) or "An unknown error occurred")
