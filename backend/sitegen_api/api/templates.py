"""Template catalogue endpoints"""

from typing import List, Optional
from fastapi import APIRouter, Query
from sitegen_api.enhancer.templates import (
    WebsiteTemplate,
    get_all_templates,
    get_template,
    get_template_categories,
    get_templates_by_category,
    search_templates,
)
from sitegen_api.models.errors import ApplicationError, ErrorCode

router = APIRouter()


@router.get("/templates", response_model=List[WebsiteTemplate])
async def list_templates(
    category: Optional[str] = Query(default=None),
    q: Optional[str] = Query(default=None, description="Keyword search over name, description and category"),
) -> List[WebsiteTemplate]:
    """All templates, optionally filtered by category or keyword"""
    if q:
        return search_templates(q)
    if category:
        return get_templates_by_category(category)
    return get_all_templates()


@router.get("/templates/categories", response_model=List[str])
async def list_categories() -> List[str]:
    return get_template_categories()


@router.get("/templates/{template_id}", response_model=WebsiteTemplate)
async def read_template(template_id: str) -> WebsiteTemplate:
    template = get_template(template_id)
    if template is None:
        raise ApplicationError(code=ErrorCode.NOT_FOUND, message=f"Template not found: {template_id}")
    return template
