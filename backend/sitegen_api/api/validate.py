"""Validation and repair endpoints"""

import logging
from fastapi import APIRouter
from sitegen_api.generator.code_generator import code_validator
from sitegen_api.models.schemas import (
    FixCodeRequest,
    FixCodeResponse,
    ValidateCodeRequest,
    ValidateCodeResponse,
)
from sitegen_api.processing.html_processor import parse_generated_files
from sitegen_api.validation.code_validator import (
    analyze_code_completeness,
    validate_generated_code,
    validate_hero_section,
)
from sitegen_api.validation.html_fixer import fix_common_html_issues

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/validate-code", response_model=ValidateCodeResponse)
async def validate_code(request: ValidateCodeRequest) -> ValidateCodeResponse:
    """
    Run every validator over a document.

    The pipeline result (completeness, hero, then LLM review) is only included
    when useLlm is true; the LLM step itself is skipped without an OpenAI key.
    """
    pipeline = None
    if request.use_llm:
        pipeline = await code_validator.validate_code(request.code, request.file_name)

    return ValidateCodeResponse(
        report=validate_generated_code(request.code),
        completeness=analyze_code_completeness(request.code),
        hero=validate_hero_section(request.code),
        pipeline=pipeline,
    )


@router.post("/fix-code", response_model=FixCodeResponse)
async def fix_code(request: FixCodeRequest) -> FixCodeResponse:
    """Repair the document skeleton and split it into deployable files"""
    result = fix_common_html_issues(request.code)
    return FixCodeResponse(
        fixed_code=result.fixed_code,
        fixes_applied=result.fixes_applied,
        files=parse_generated_files(result.fixed_code),
    )
