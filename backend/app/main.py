"""
ClickNGoAI - FastAPI Application

Main entry point for the backend API.
Provides endpoints for projects, builds, templates, subscriptions,
administration and AI app ideas.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.infrastructure.db.database import DatabaseManager
from app.infrastructure.exceptions import (
    ClickNGoAIError,
    ValidationError,
    NotFoundError,
    AccessDeniedError,
    QuotaExceededError,
    AIServiceError,
)

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"ClickNGoAI Backend starting in {settings.environment} mode...")

    db_manager = DatabaseManager.from_settings(settings)
    if db_manager.is_sqlite and settings.is_development:
        await db_manager.create_tables()
        logger.info("SQLite schema created")
    app.state.db_manager = db_manager
    logger.info("Database engine initialized")

    yield

    # Shutdown
    await db_manager.close()
    logger.info("Database connection pool closed")
    logger.info("ClickNGoAI Backend shutting down...")


app = FastAPI(
    title=settings.app_name,
    description="AI app builder: projects, build queue, templates and plans",
    version="1.0.0",
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS configuration from Settings
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Handle validation errors."""
    return JSONResponse(
        status_code=400,
        content=exc.to_dict(),
    )


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    """Handle not found errors."""
    return JSONResponse(
        status_code=404,
        content=exc.to_dict(),
    )


@app.exception_handler(AccessDeniedError)
async def access_denied_error_handler(request: Request, exc: AccessDeniedError):
    """Handle ownership and role failures."""
    return JSONResponse(
        status_code=403,
        content=exc.to_dict(),
    )


@app.exception_handler(QuotaExceededError)
async def quota_exceeded_error_handler(request: Request, exc: QuotaExceededError):
    """Handle plan limit failures."""
    return JSONResponse(
        status_code=403,
        content=exc.to_dict(),
    )


@app.exception_handler(AIServiceError)
async def ai_service_error_handler(request: Request, exc: AIServiceError):
    """Handle upstream AI failures."""
    return JSONResponse(
        status_code=502,
        content=exc.to_dict(),
    )


@app.exception_handler(ClickNGoAIError)
async def general_error_handler(request: Request, exc: ClickNGoAIError):
    """Handle all other application errors."""
    logger.error(f"Unhandled application error: {exc.message}")
    return JSONResponse(
        status_code=500,
        content=exc.to_dict(),
    )


# ============================================================================
# Health Check
# ============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "clickngoai"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "ClickNGoAI API",
        "version": "1.0.0",
        "docs": "/docs",
    }


# ============================================================================
# Import and register routers
# ============================================================================

from app.api.routes import auth, projects, templates, builds, subscriptions, admin, ai

app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(projects.router, prefix="/api", tags=["Projects"])
app.include_router(templates.router, prefix="/api", tags=["Templates"])
app.include_router(builds.router, prefix="/api", tags=["Builds"])
app.include_router(subscriptions.router, prefix="/api", tags=["Subscriptions"])
app.include_router(admin.router, prefix="/api", tags=["Admin"])
app.include_router(ai.router, prefix="/api", tags=["AI"])
