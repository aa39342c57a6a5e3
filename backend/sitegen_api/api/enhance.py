"""POST /api/enhance-prompt endpoint"""

import logging
from fastapi import APIRouter
from sitegen_api.enhancer.prompt_enhancer import enhance_prompt
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import EnhancePromptRequest, EnhancePromptResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/enhance-prompt", response_model=EnhancePromptResponse)
async def enhance(request: EnhancePromptRequest) -> EnhancePromptResponse:
    """
    Expand a free-form request into structured generation instructions.

    The template is taken from templateId when given, otherwise it is picked
    from keywords in the prompt. templateId in the response is null when the
    generic enhancement was used.
    """
    if not request.prompt or not request.prompt.strip():
        raise ApplicationError(code=ErrorCode.INVALID_REQUEST, message="Prompt is required")

    try:
        enhanced, applied_template = enhance_prompt(request.prompt, request.template_id)
    except Exception as e:
        logger.exception("[ENHANCE] Enhancement failed")
        raise ApplicationError(
            code=ErrorCode.GENERATION_FAILED,
            message="Failed to enhance prompt",
            details=str(e),
        )

    return EnhancePromptResponse(
        original_prompt=request.prompt,
        enhanced_prompt=enhanced,
        template_id=applied_template,
    )
