"""In-memory food API."""
import yaml
from pathlib import Path
from typing import Any, Dict, List, Optional
from app.services.api.base import FoodApi
from app.services.foods.models import Extra, Food, FoodNotFoundError


class InMemoryFoodApi(FoodApi):
    """In-memory food API seeded from YAML configuration."""

    def __init__(self, menu_file: Optional[str] = None):
        """Initialize with optional menu file path."""
        if menu_file is None:
            menu_file = Path(__file__).parent / "data" / "foods.yaml"
        self.menu_file = Path(menu_file)
        self._foods: Optional[Dict[int, Food]] = None
        self._favorites: Optional[List[Food]] = None
        self.orders: List[Dict[str, Any]] = []

    def _load(self) -> Dict[int, Food]:
        """Load foods and favorites from the YAML file."""
        if self._foods is None:
            if not self.menu_file.exists():
                # Default catalog if file doesn't exist
                foods = [
                    Food(
                        id=1,
                        name="Ao molho",
                        description="Macarrão ao molho branco, fughi e cheiro verde das montanhas.",
                        price=19.90,
                        image_url="https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/ao_molho.png",
                        extras=[
                            Extra(id=1, name="Bacon", value=1.5),
                            Extra(id=2, name="Frango", value=2.0),
                        ],
                    ),
                    Food(
                        id=2,
                        name="Veggie",
                        description="Macarrão com pimentão, ervilha e ervas finas colhidas no himalaia.",
                        price=21.90,
                        image_url="https://storage.googleapis.com/golden-wind/bootcamp-gostack/desafio-gorestaurant-mobile/veggie.png",
                        extras=[Extra(id=3, name="Bacon", value=1.5)],
                    ),
                ]
                favorites_data: List[Dict[str, Any]] = []
            else:
                with open(self.menu_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                foods = [Food(**item) for item in data.get("foods", [])]
                favorites_data = data.get("favorites") or []
            self._foods = {food.id: food for food in foods}
            self._favorites = [Food(**item) for item in favorites_data]
        return self._foods

    async def get_food(self, food_id: int) -> Food:
        """Get a food with its extras."""
        foods = self._load()
        food = foods.get(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food.model_copy(deep=True)

    async def get_favorites(self) -> Optional[List[Food]]:
        """Get favorited foods."""
        self._load()
        return [food.model_copy(deep=True) for food in self._favorites]

    async def add_favorite(self, food: Food) -> None:
        """Add a food to favorites."""
        self._load()
        self._favorites.append(Food.model_validate(food.to_api_payload()))

    async def remove_favorite(self, food_id: int) -> None:
        """Remove a food from favorites."""
        self._load()
        if not any(food.id == food_id for food in self._favorites):
            raise FoodNotFoundError(food_id)
        self._favorites = [food for food in self._favorites if food.id != food_id]

    async def create_order(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Store an order and return it with its new id."""
        order = {"id": len(self.orders) + 1, **payload}
        self.orders.append(order)
        return order
