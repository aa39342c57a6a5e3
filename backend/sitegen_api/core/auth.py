"""Optional X-API-Key guard for the generation, update and deploy routes"""

from typing import Optional
from fastapi import Security, HTTPException, status
from fastapi.security import APIKeyHeader
from sitegen_api.core.config import settings
import logging

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)) -> Optional[str]:
    """
    Guard the routes that spend Claude/OpenAI credits or push to Vercel.

    Prompt enhancement, templates, validation and preview stay open. With
    API_KEY unset every route is open.

    Raises:
        HTTPException: 403 when the header is missing or does not match
    """
    if not settings.api_key:
        return None

    if not api_key:
        logger.warning("[AUTH] Rejected generation/deploy request without X-API-Key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Missing API key. Please provide X-API-Key header.",
        )

    if api_key != settings.api_key:
        logger.warning(f"[AUTH] Rejected generation/deploy request with key {api_key[:4]}...")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid API key",
        )

    return api_key
