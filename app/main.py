"""Main FastAPI application."""
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.logging import setup_logging
from app.core.dependencies import get_food_api
from app.services.api.http_api import HttpFoodApi
from app.api import health, food_details


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    yield
    # Shutdown
    api = get_food_api()
    if isinstance(api, HttpFoodApi):
        await api.aclose()
    get_food_api.cache_clear()


app = FastAPI(
    title="Food Details",
    description="Order composition for a single food: extras, totals, favorites and checkout",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(food_details.router, tags=["food-details"])


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
