"""
Career Tools Backend - Main FastAPI Application

Keyword-weighted scoring engines behind the career tools: resume keyword
analysis, skills gap analysis and the AI/ML salary calculator.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careertools.api.routes import router
from careertools.config import get_settings
from careertools.services.keywords import load_taxonomy
from careertools.services.resume_analyzer import ResumeAnalyzer, set_resume_analyzer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Debug mode: {settings.debug}")

    # A configured taxonomy that cannot be loaded aborts startup
    if settings.taxonomy_path:
        set_resume_analyzer(ResumeAnalyzer(load_taxonomy(settings.taxonomy_path)))
    else:
        set_resume_analyzer(ResumeAnalyzer())
        logger.info("Using built-in AI/ML keyword taxonomy")

    yield

    # Shutdown
    logger.info("Shutting down Career Tools Backend")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="""
## Career Tools API

Deterministic scoring engines for AI/ML job seekers.

### Features

- **Resume Keyword Analyser**: Weighted keyword coverage across seven categories
- **Skills Gap Analyser**: Compare a resume with a job description and prioritise gaps
- **Salary Calculator**: Australian AI/ML salary estimates with skill bonuses
- **City Comparison**: The same profile priced across Australian cities

### Quick Start

1. Send resume text to `/api/resume/analyze`
2. Send resume text and a job description to `/api/skills-gap/analyze`
3. Check calculator inputs at `/api/salary/options`, then call `/api/salary/calculate`
        """,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "message": "An internal error occurred",
                "detail": str(exc) if settings.debug else "Please try again later"
            }
        )

    # Include API routes
    app.include_router(router, prefix="/api")

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
            "docs": "/docs",
            "api": "/api"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "careertools.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
