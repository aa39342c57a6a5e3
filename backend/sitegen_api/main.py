"""FastAPI application entry point"""

import sys
import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sitegen_api.core.config import settings
from sitegen_api.models.errors import ApplicationError
from sitegen_api.api import deploy, enhance, generate, preview, templates, update, validate

# Configure logging early with force=True to override any existing config
logging.basicConfig(
    level=settings.log_level.upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.api_title,
    version=settings.api_version,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ApplicationError)
async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Render ApplicationError as an ErrorResponse body"""
    log = logger.error if exc.http_status >= 500 else logger.info
    log(f"[ERROR] {request.method} {request.url.path} -> {exc.http_status} {exc.code.value}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.model_dump())


@app.on_event("startup")
async def startup_event():
    """Log which providers are configured"""
    logger.info("=" * 60)
    logger.info(f"{settings.api_title} v{settings.api_version} starting")
    logger.info(f"Anthropic configured: {bool(settings.anthropic_api_key)}")
    logger.info(f"OpenAI configured: {bool(settings.openai_api_key)}")
    logger.info(f"Vercel configured: {bool(settings.vercel_token)}")
    logger.info(f"API key protection: {'enabled' if settings.api_key else 'disabled'}")
    logger.info("=" * 60)


@app.on_event("shutdown")
async def shutdown_event():
    """Close provider clients"""
    logger.info("Shutting down...")
    from sitegen_api.llm.anthropic_client import anthropic_client
    from sitegen_api.llm.openai_client import openai_client
    for client in (anthropic_client, openai_client):
        try:
            await client.close()
        except Exception as e:
            logger.warning(f"Error closing {type(client).__name__}: {e}")
    logger.info("Shutdown complete")


@app.get("/")
async def root():
    """Health check endpoint"""
    return {"status": "healthy", "version": settings.api_version}


@app.get("/health")
async def health():
    """Health check for monitoring"""
    return {"status": "healthy"}


# Register API routes
app.include_router(enhance.router, prefix="/api", tags=["enhance"])
app.include_router(templates.router, prefix="/api", tags=["templates"])
app.include_router(generate.router, prefix="/api", tags=["generate"])
app.include_router(update.router, prefix="/api", tags=["update"])
app.include_router(validate.router, prefix="/api", tags=["validate"])
app.include_router(preview.router, prefix="/api", tags=["preview"])
app.include_router(deploy.router, prefix="/api", tags=["deploy"])
