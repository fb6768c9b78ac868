import json
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from core.log_config import setup_logging
from db import init_db
from api.assets.views import router as assets_router
from api.categories.views import router as categories_router
from api.dashboard.views import router as dashboard_router
from api.exports.views import router as exports_router
from api.imports.views import router as imports_router

logger = logging.getLogger(__name__)


def get_cors_origins() -> list[str]:
    """Get CORS origins from environment variable or use defaults."""
    cors_env = os.environ.get("CORS_ORIGINS", "")

    # Try to parse as JSON array
    if cors_env:
        try:
            origins = json.loads(cors_env)
            if isinstance(origins, list):
                return origins
        except json.JSONDecodeError:
            # If not valid JSON, treat as comma-separated
            return [o.strip() for o in cors_env.split(",") if o.strip()]

    # Default origins for local development
    return [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    if settings.CREATE_TABLES_ON_STARTUP:
        await init_db()
        logger.info("Database tables ready (%s)", settings.APP_ENV)
    yield


app = FastAPI(
    title="Fixed Asset Depreciation API",
    description="API for tracking fixed assets and their straight-line depreciation schedules",
    version="1.0.0",
    lifespan=lifespan,
)

# Get CORS origins from environment or use defaults
cors_origins = get_cors_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(assets_router, prefix="/api/v1")
app.include_router(categories_router, prefix="/api/v1")
app.include_router(dashboard_router, prefix="/api/v1")
app.include_router(imports_router, prefix="/api/v1")
app.include_router(exports_router, prefix="/api/v1")


# Health check endpoint
@app.get("/health", tags=["system"])
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}
