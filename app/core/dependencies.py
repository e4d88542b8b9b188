"""FastAPI dependencies."""
from functools import lru_cache

from app.core.config import settings
from app.services.api.base import FoodApi
from app.services.api.http_api import HttpFoodApi
from app.services.api.in_memory_api import InMemoryFoodApi
from app.services.screen_session.manager import ScreenSessionManager


@lru_cache
def get_food_api() -> FoodApi:
    """Get food API instance (one per process)."""
    if settings.food_api_backend == "memory":
        return InMemoryFoodApi(menu_file=settings.menu_file)
    return HttpFoodApi(config=settings)


def get_screen_manager() -> ScreenSessionManager:
    """Get screen session manager instance."""
    return ScreenSessionManager(api=get_food_api(), config=settings)
