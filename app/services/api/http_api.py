"""HTTP food API client."""
import logging
from typing import Any, Dict, List, Optional

import httpx

from app.core.config import Settings, settings as default_settings
from app.services.api.base import FoodApi
from app.services.foods.models import Food, FoodNotFoundError

logger = logging.getLogger(__name__)


class HttpFoodApi(FoodApi):
    """Food API backed by a remote REST server."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        config: Optional[Settings] = None,
    ):
        config = config or default_settings
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=config.api_base_url,
            timeout=config.api_timeout,
        )

    async def __aenter__(self) -> "HttpFoodApi":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def get_food(self, food_id: int) -> Food:
        """Get a food with its extras."""
        logger.debug(f"[FOOD API] GET /foods/{food_id}")
        response = await self.client.get(f"/foods/{food_id}")
        if response.status_code == 404:
            raise FoodNotFoundError(food_id)
        response.raise_for_status()
        return Food.model_validate(response.json())

    async def get_favorites(self) -> Optional[List[Food]]:
        """Get favorited foods, or None when the server sends no data."""
        logger.debug("[FOOD API] GET /favorites")
        response = await self.client.get("/favorites")
        response.raise_for_status()
        if not response.content:
            return None
        data = response.json()
        if data is None:
            return None
        return [Food.model_validate(item) for item in data]

    async def add_favorite(self, food: Food) -> None:
        """Add a food to favorites, sending the screen's full snapshot."""
        logger.debug(f"[FOOD API] POST /favorites - food_id: {food.id}")
        response = await self.client.post("/favorites", json=food.model_dump())
        response.raise_for_status()

    async def remove_favorite(self, food_id: int) -> None:
        """Remove a food from favorites."""
        logger.debug(f"[FOOD API] DELETE /favorites/{food_id}")
        response = await self.client.delete(f"/favorites/{food_id}")
        response.raise_for_status()

    async def create_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Create an order."""
        logger.debug(f"[FOOD API] POST /orders - product_id: {payload.get('product_id')}")
        response = await self.client.post("/orders", json=payload)
        response.raise_for_status()
        return response.json() if response.content else {}
