"""API request/response schemas"""

from typing import Optional, List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


DesignStyle = Literal["modern", "minimalist", "bold", "elegant", "playful"]
ColorScheme = Literal["vibrant", "monochrome", "pastel", "dark", "custom"]
Interactivity = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    """Accepts snake_case or camelCase input, serializes camelCase for the front end"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Prompt enhancement
# ============================================================================

class EnhancePromptRequest(CamelModel):
    """POST /api/enhance-prompt request"""
    prompt: Optional[str] = None
    template_id: Optional[str] = None


class EnhancePromptResponse(CamelModel):
    """POST /api/enhance-prompt response"""
    original_prompt: str
    enhanced_prompt: str
    template_id: Optional[str] = None


# ============================================================================
# Generation
# ============================================================================

class GenerateWebsiteRequest(CamelModel):
    """POST /api/generate-website request"""
    prompt: Optional[str] = None
    template: Optional[str] = None
    features: Optional[List[str]] = None
    style: DesignStyle = "modern"
    color_scheme: ColorScheme = "vibrant"
    # null means "not provided"; only an explicit false disables a block
    animations: Optional[bool] = True
    accessibility: Optional[bool] = True
    performance: Optional[bool] = True
    seo: Optional[bool] = True
    interactivity: Interactivity = "high"

    @field_validator("style", "color_scheme", "interactivity", mode="before")
    @classmethod
    def default_when_empty(cls, v, info):
        """Treat null or empty values as "not provided" so the defaults apply"""
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v


class ValidationReport(CamelModel):
    """Heuristic validation result with a 0-100 quality score"""
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    score: int = 100


class GenerateWebsiteMetadata(CamelModel):
    style: str
    color_scheme: str
    features: Optional[List[str]] = None
    score: int = 0


class GenerateWebsiteResponse(CamelModel):
    """POST /api/generate-website response"""
    success: bool = True
    html: str
    css: str
    javascript: str
    full_code: str
    validation: ValidationReport
    metadata: GenerateWebsiteMetadata


class GenerateCodeRequest(CamelModel):
    """POST /api/generate-code request (streamed)"""
    enhanced_prompt: Optional[str] = None
    template: str = "default"
    previous_code: Optional[str] = None
    fix_instructions: Optional[str] = None


class ClaudeCodeRequest(CamelModel):
    """POST /api/claude-code-generator request"""
    prompt: Optional[str] = None
    template_id: Optional[str] = None


class UpdateWebsiteRequest(CamelModel):
    """POST /api/update-website request"""
    generated_code: str = Field(..., min_length=1)
    real_time_prompt: str = Field(..., min_length=1)


# ============================================================================
# Validation and repair
# ============================================================================

class CompletenessReport(CamelModel):
    """Line counts per language region plus feature gaps"""
    total_lines: int
    html_lines: int
    css_lines: int
    js_lines: int
    is_complete: bool
    missing_features: List[str] = Field(default_factory=list)


class HeroValidation(CamelModel):
    is_valid: bool
    issues: List[str] = Field(default_factory=list)


class CodeValidationResult(CamelModel):
    """Outcome of the completeness, hero and LLM validation pipeline"""
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
    fix_instructions: Optional[str] = None
    suggestions: List[str] = Field(default_factory=list)
    validation_history: List[str] = Field(default_factory=list)


class ValidateCodeRequest(CamelModel):
    """POST /api/validate-code request"""
    code: str = Field(..., min_length=1)
    file_name: str = "index.html"
    use_llm: bool = True


class ValidateCodeResponse(CamelModel):
    report: ValidationReport
    completeness: CompletenessReport
    hero: HeroValidation
    pipeline: Optional[CodeValidationResult] = None


class GeneratedFile(CamelModel):
    name: str = Field(..., min_length=1)
    content: str


class FixCodeRequest(CamelModel):
    """POST /api/fix-code and POST /api/preview request"""
    code: str


class FixCodeResponse(CamelModel):
    fixed_code: str
    fixes_applied: List[str] = Field(default_factory=list)
    files: List[GeneratedFile] = Field(default_factory=list)


# ============================================================================
# Deployment
# ============================================================================

class DeployRequest(CamelModel):
    """POST /api/deploy-to-vercel request"""
    files: List[GeneratedFile] = Field(..., min_length=1)
    project_name: str = Field(..., min_length=1)

    @field_validator("project_name")
    @classmethod
    def validate_project_name(cls, v):
        """Project names must contain at least one non-whitespace character"""
        if not v.strip():
            raise ValueError("project_name must be a non-empty string")
        return v


class DeployResponse(CamelModel):
    deployment_url: str
    deployment_id: Optional[str] = None
