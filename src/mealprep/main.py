"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mealprep.config import settings
from mealprep.logging_config import configure_logging, get_logger
from mealprep.routers import grocery_list_router, ingredients_router

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Mealprep API (environment={settings.environment})")
    yield
    logger.info("Shutting down Mealprep API")


app = FastAPI(
    title="Mealprep API",
    description="Unit conversion and grocery list aggregation for weekly meal prep",
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(grocery_list_router)
app.include_router(ingredients_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "mealprep-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Mealprep API",
        "version": API_VERSION,
        "docs": "/docs",
        "health": "/health",
    }
