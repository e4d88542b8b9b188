"""Food details models."""
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FoodNotLoadedError(Exception):
    """Raised when an operation needs a food that has not been loaded yet."""


class FoodNotFoundError(Exception):
    """Raised when the food API has no food with the requested id."""

    def __init__(self, food_id: int):
        super().__init__(f"Food {food_id} not found")
        self.food_id = food_id


class Extra(BaseModel):
    """Optional add-on for a food, priced and counted on its own."""

    id: int
    name: str
    value: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)  # Local only, never sent by the API


class Food(BaseModel):
    """Food item as served by ``GET /foods/{id}``.

    Fields the screen does not use (category, thumbnails...) are kept so the
    item can be sent back to the API untouched.
    """

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    description: str = ""
    price: float = Field(ge=0)
    image_url: str = ""
    extras: List[Extra] = []
    formatted_price: Optional[str] = None

    def to_api_payload(self) -> Dict[str, Any]:
        """Dump the food the way the API stores it (no local-only fields)."""
        payload = self.model_dump(exclude={"formatted_price"})
        payload["extras"] = [
            extra.model_dump(exclude={"quantity"}) for extra in self.extras
        ]
        return payload


class OrderDraft(BaseModel):
    """Order assembled from the screen state, ready for ``POST /orders``."""

    product_id: int
    food: Food
    quantity: int = Field(default=1, ge=1)
    extras: List[Extra]
    price: Union[str, float]

    def to_payload(self, include_quantity: bool = False) -> Dict[str, Any]:
        """Build the request body.

        The food's own ``id`` is carried as ``product_id`` and its
        ``formatted_price`` is dropped. ``price`` holds the order total.
        """
        item_fields = self.food.model_dump(exclude={"id", "formatted_price"})
        payload: Dict[str, Any] = {"product_id": self.product_id}
        payload.update(item_fields)
        payload["price"] = self.price
        payload["extras"] = [extra.model_dump() for extra in self.extras]
        if include_quantity:
            payload["quantity"] = self.quantity
        return payload


class HeaderAction(BaseModel):
    """Favorite action the screen hands to the header of its host."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    icon: str
    size: int
    color: str
    on_press: Callable[[], Awaitable[bool]] = Field(exclude=True)
