"""Food API interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from app.services.foods.models import Food


class FoodApi(ABC):
    """Abstract base class for the remote food API."""

    @abstractmethod
    async def get_food(self, food_id: int) -> Food:
        """Get a food with its extras (``GET /foods/{id}``)."""
        pass

    @abstractmethod
    async def get_favorites(self) -> Optional[List[Food]]:
        """Get favorited foods (``GET /favorites``). May return None."""
        pass

    @abstractmethod
    async def add_favorite(self, food: Food) -> None:
        """Add a food to favorites (``POST /favorites``)."""
        pass

    @abstractmethod
    async def remove_favorite(self, food_id: int) -> None:
        """Remove a food from favorites (``DELETE /favorites/{id}``)."""
        pass

    @abstractmethod
    async def create_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create an order (``POST /orders``) and return the created record."""
        pass
