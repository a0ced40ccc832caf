"""
Main FastAPI application module.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from socialgen import __version__
from socialgen.config import settings
from socialgen.api.endpoints import router as api_router
from socialgen.utils.exceptions import (
    SocialGenError,
    ValidationError,
    FileValidationError,
    MissingCredential
)
from socialgen.utils.ui_text import translate

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting SocialGen API...")

    # Verify configuration
    if not settings.openai_configured:
        logger.warning("OpenAI API key not configured - content generation will fail")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down SocialGen API...")

# Create FastAPI application
app = FastAPI(
    title="SocialGen",
    description="""
    Generate optimized social media posts for every platform and adapt one image to each platform's canvas.

    ## Features

    * **Content Generation**: Platform-specific copy for Facebook, Instagram, X, LinkedIn, VK, Pinterest, YouTube and TikTok
    * **Image Adaptation**: Center-crop and scale the uploaded image to each platform's required size
    * **Post Cards**: Copy text, word and character counts, hashtag and keyword highlighting, download names
    * **Localization**: Arabic and English

    ## Workflow

    1. **Validation**: Description, URL, keyword and image are required
    2. **Generation**: One schema-constrained request to the generation API
    3. **Adaptation**: One image per platform, in parallel with generation
    4. **Join**: Either every platform is returned or the request fails
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.debug else settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


def _language(exc: SocialGenError) -> str:
    return exc.language or settings.default_language


# Global exception handlers
@app.exception_handler(FileValidationError)
async def file_validation_exception_handler(request: Request, exc: FileValidationError):
    """Handle file validation errors."""
    logger.warning(f"File validation error: {str(exc)}")
    return JSONResponse(
        status_code=400,
        content={"error": "FileValidationError", "detail": str(exc)}
    )

@app.exception_handler(ValidationError)
async def validation_exception_handler(request: Request, exc: ValidationError):
    """Handle missing form fields."""
    logger.warning(f"Validation error: {str(exc)}")
    return JSONResponse(
        status_code=400,
        content={"error": "ValidationError", "detail": translate(_language(exc), "fillAll")}
    )

@app.exception_handler(SocialGenError)
async def generation_exception_handler(request: Request, exc: SocialGenError):
    """Handle credential, API, content format and image failures."""
    logger.error(f"Generation failed: {type(exc).__name__}: {str(exc)}")
    status_code = 503 if isinstance(exc, MissingCredential) else 502
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": translate(_language(exc), "error")}
    )

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)

    if settings.debug:
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "detail": str(exc)}
        )
    else:
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "detail": "An unexpected error occurred"}
        )

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "SocialGen API",
        "version": __version__,
        "docs": "/docs",
        "status": "running"
    }

def run():
    import uvicorn

    uvicorn.run(
        "socialgen.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info"
    )

if __name__ == "__main__":
    run()
