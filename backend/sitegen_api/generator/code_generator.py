"""
Website generation orchestration.

WebsiteGenerator ties prompt enhancement, the LLM clients, post-processing
and validation together for each generation route. CodeValidator runs the
completeness -> hero -> LLM validation pipeline.
"""

import json
import logging
import time
from typing import Optional
import httpx
from pydantic import ValidationError
from sitegen_api.core.config import settings
from sitegen_api.enhancer.prompt_enhancer import enhance_prompt_with_template
from sitegen_api.enhancer.ultra_prompt import EnhancedPromptConfig, generate_enhanced_prompt
from sitegen_api.generator.prompts import (
    COMPLETENESS_FIX_INSTRUCTIONS,
    HERO_FIX_TEMPLATE,
    STREAM_SYSTEM_PROMPT,
    STUDIO_SYSTEM_PROMPT,
    UPDATE_SYSTEM_PROMPT,
    UPDATE_USER_TEMPLATE,
    VALIDATOR_SYSTEM_PROMPT,
    VALIDATOR_USER_TEMPLATE,
    build_css_instructions,
    build_fix_prompt,
    build_generation_prompt,
)
from sitegen_api.llm.anthropic_client import AnthropicClient, anthropic_client, message_text
from sitegen_api.llm.openai_client import OpenAIClient, openai_client
from sitegen_api.models.errors import ApplicationError, ErrorCode
from sitegen_api.models.schemas import (
    CodeValidationResult,
    GenerateCodeRequest,
    GenerateWebsiteMetadata,
    GenerateWebsiteRequest,
    GenerateWebsiteResponse,
)
from sitegen_api.processing.html_processor import normalize_llm_output, split_generated_code
from sitegen_api.validation.code_validator import (
    analyze_code_completeness,
    validate_generated_code,
    validate_hero_section,
)

logger = logging.getLogger(__name__)


class CodeValidator:
    """Completeness, hero and LLM checks for a generated file, in that order"""

    def __init__(self, openai: Optional[OpenAIClient] = None):
        self.openai = openai or openai_client

    async def validate_code(self, code: str, file_name: str = "index.html") -> CodeValidationResult:
        history = []

        analysis = analyze_code_completeness(code)
        if not analysis.is_complete:
            logger.info(
                f"[VALIDATOR] {file_name} incomplete: {analysis.total_lines} lines, "
                f"{len(analysis.missing_features)} missing features"
            )
            return CodeValidationResult(
                is_valid=False,
                errors=[
                    f"Code is incomplete. Total lines: {analysis.total_lines} (minimum 1300 required)",
                    f"HTML: {analysis.html_lines}/300, CSS: {analysis.css_lines}/500, JS: {analysis.js_lines}/500",
                    *[f"Missing feature: {feature}" for feature in analysis.missing_features],
                ],
                fix_instructions=COMPLETENESS_FIX_INSTRUCTIONS,
                validation_history=["completeness: failed"],
            )
        history.append("completeness: passed")

        hero = validate_hero_section(code)
        if not hero.is_valid:
            logger.info(f"[VALIDATOR] {file_name} hero check failed: {hero.issues}")
            return CodeValidationResult(
                is_valid=False,
                errors=["Hero section does not meet requirements", *hero.issues],
                fix_instructions=HERO_FIX_TEMPLATE.format(issues=", ".join(hero.issues)),
                validation_history=history + ["hero: failed"],
            )
        history.append("hero: passed")

        if not self.openai.is_configured:
            logger.warning("[VALIDATOR] OPENAI_API_KEY is not configured, skipping LLM validation")
            return CodeValidationResult(is_valid=True, validation_history=history + ["llm: skipped"])

        try:
            reply = await self.openai.chat_json(
                VALIDATOR_SYSTEM_PROMPT,
                VALIDATOR_USER_TEMPLATE.format(file_name=file_name, code=code),
                model=settings.openai_validation_model,
                temperature=0.1,
                max_tokens=settings.openai_validation_max_tokens,
            )
            result = CodeValidationResult.model_validate(reply)
        except (json.JSONDecodeError, ValidationError, TypeError) as e:
            # Unparseable verdicts must not block generation
            logger.warning(f"[VALIDATOR] Failed to parse validation result: {e}")
            return CodeValidationResult(
                is_valid=True,
                errors=["Failed to parse validation result, proceeding with generation"],
                validation_history=history + ["llm: unparseable"],
            )
        except ApplicationError as e:
            logger.warning(f"[VALIDATOR] Validation service error: {e.message}")
            return CodeValidationResult(
                is_valid=True,
                errors=["Validation service unavailable, proceeding with generation"],
                validation_history=history + ["llm: unavailable"],
            )

        result.validation_history = history + [f"llm: {'passed' if result.is_valid else 'failed'}"]
        logger.info(f"[VALIDATOR] {file_name} LLM verdict: valid={result.is_valid}, errors={len(result.errors)}")
        return result


class WebsiteGenerator:
    """Runs each generation flow against the configured LLM clients"""

    def __init__(self, anthropic: Optional[AnthropicClient] = None, openai: Optional[OpenAIClient] = None):
        self.anthropic = anthropic or anthropic_client
        self.openai = openai or openai_client

    async def generate_website(self, request: GenerateWebsiteRequest) -> GenerateWebsiteResponse:
        """
        Style-driven, non-streaming generation.

        Flow: enhanced prompt -> Claude -> normalize -> split -> heuristic validation
        """
        config = EnhancedPromptConfig(
            base_prompt=request.prompt,
            template=request.template,
            features=request.features,
            style=request.style,
            color_scheme=request.color_scheme,
            animations=request.animations is not False,
            accessibility=request.accessibility is not False,
            performance=request.performance is not False,
            seo=request.seo is not False,
            responsive=True,
            interactivity=request.interactivity,
        )
        full_prompt = (
            generate_enhanced_prompt(config)
            + "\n\n"
            + build_css_instructions(config.style, config.color_scheme)
        )

        start = time.time()
        logger.info(f"[GENERATE] Starting | style={config.style} | scheme={config.color_scheme}")

        try:
            message = await self.anthropic.create_message(
                full_prompt,
                model=settings.anthropic_model,
                max_tokens=settings.anthropic_max_tokens,
                temperature=settings.anthropic_temperature,
            )
        except ApplicationError as e:
            raise ApplicationError(
                code=ErrorCode.GENERATION_FAILED,
                message="Failed to generate website",
                details=e.details or e.message,
                retryable=e.retryable,
            )

        document = normalize_llm_output(message_text(message), config.style, config.color_scheme)
        parts = split_generated_code(document)
        report = validate_generated_code(document)

        logger.info(
            f"[GENERATE] Done in {time.time() - start:.1f}s | {len(document)} chars | "
            f"score={report.score} | valid={report.is_valid}"
        )

        return GenerateWebsiteResponse(
            success=True,
            html=parts.html,
            css=parts.css,
            javascript=parts.javascript,
            full_code=parts.full_code,
            validation=report,
            metadata=GenerateWebsiteMetadata(
                style=config.style,
                color_scheme=config.color_scheme,
                features=config.features,
                score=report.score,
            ),
        )

    async def stream_code(self, request: GenerateCodeRequest) -> httpx.Response:
        """Open the provider stream; the caller relays its raw bytes and closes it"""
        prompt = build_fix_prompt(
            build_generation_prompt(request.enhanced_prompt or ""),
            request.previous_code,
            request.fix_instructions,
        )
        logger.info(
            f"[STREAM] template={request.template} | fix_pass={bool(request.previous_code and request.fix_instructions)}"
        )
        return await self.anthropic.open_stream(
            prompt,
            model=settings.anthropic_stream_model,
            max_tokens=settings.anthropic_stream_max_tokens,
            system=STREAM_SYSTEM_PROMPT,
        )

    async def generate_with_template(self, prompt: str, template_id: Optional[str] = None) -> dict:
        """Template-enhanced single call; returns the provider's message JSON"""
        enhanced = enhance_prompt_with_template(prompt, template_id)
        message = await self.anthropic.create_message(
            enhanced,
            model=settings.anthropic_studio_model,
            max_tokens=settings.anthropic_studio_max_tokens,
            system=STUDIO_SYSTEM_PROMPT,
        )
        return message.model_dump(mode="json")

    async def update_website(self, generated_code: str, real_time_prompt: str) -> dict:
        """Edit pass over existing code; returns the provider's completion JSON"""
        logger.info(f"[UPDATE] {len(generated_code)} chars | request={real_time_prompt[:80]!r}")
        try:
            completion = await self.openai.chat(
                UPDATE_SYSTEM_PROMPT,
                UPDATE_USER_TEMPLATE.format(
                    generated_code=generated_code,
                    real_time_prompt=real_time_prompt,
                ),
                model=settings.openai_update_model,
                temperature=0.7,
                max_tokens=settings.openai_update_max_tokens,
            )
        except ApplicationError as e:
            raise ApplicationError(
                code=ErrorCode.UPDATE_FAILED,
                message="Failed to update website",
                details=e.message,
                retryable=e.retryable,
            )
        return completion.model_dump(mode="json")


# Global instances
code_validator = CodeValidator()
website_generator = WebsiteGenerator()
