"""Food details screen state machine."""
import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from app.core.config import Settings, settings as default_settings
from app.services.api.base import FoodApi
from app.services.foods.calculator import calculate_total
from app.services.foods.formatting import format_value
from app.services.foods.models import (
    Extra,
    Food,
    FoodNotLoadedError,
    HeaderAction,
    OrderDraft,
)
from app.services.navigation.navigator import Navigator

logger = logging.getLogger(__name__)

FAVORITE_ICON = "favorite"
NOT_FAVORITE_ICON = "favorite-border"


class FoodDetailsState(BaseModel):
    """Editable state owned by one food details screen."""

    model_config = ConfigDict(validate_assignment=True)

    food_id: Optional[int] = None  # Id of the last completed load
    food: Optional[Food] = None
    extras: List[Extra] = []
    food_quantity: int = Field(default=1, ge=1)
    is_favorite: bool = False


class FoodDetailsScreen:
    """
    Order composition for a single food.

    Loads a food and its extras, keeps the quantities, derives the order
    total, toggles the favorite flag and submits the finished order.
    Remote failures are never caught here; they reach the caller.
    """

    def __init__(
        self,
        api: FoodApi,
        navigator: Navigator,
        config: Optional[Settings] = None,
    ):
        self.api = api
        self.navigator = navigator
        self.config = config or default_settings
        self.state = FoodDetailsState()

    # Loader

    async def load(self, food_id: int) -> None:
        """
        Load a food, its extras and its favorite status.

        Calling again with the id already loaded does nothing; a new id
        replaces the whole state.
        """
        if self.state.food_id == food_id and self.state.food is not None:
            logger.debug(f"[FOOD DETAILS] Food {food_id} already loaded")
            return

        logger.info(f"[FOOD DETAILS] Loading food {food_id}")
        food = await self.api.get_food(food_id)
        food = food.model_copy(update={"formatted_price": self.format(food.price)})
        favorites = await self.api.get_favorites()

        # Both fetches succeeded; replace the state in one step
        self.state.food = food
        self.state.extras = [
            extra.model_copy(update={"quantity": 0}) for extra in food.extras
        ]
        self.state.food_quantity = 1
        self.state.is_favorite = bool(favorites) and any(
            item.id == food.id for item in favorites
        )
        self.state.food_id = food_id
        logger.info(
            f"[FOOD DETAILS] Food {food_id} loaded - {len(self.state.extras)} extras, "
            f"favorite: {self.state.is_favorite}"
        )

    # Read access

    @property
    def food(self) -> Optional[Food]:
        return self.state.food

    @property
    def extras(self) -> Tuple[Extra, ...]:
        return tuple(self.state.extras)

    @property
    def food_quantity(self) -> int:
        return self.state.food_quantity

    @property
    def is_favorite(self) -> bool:
        return self.state.is_favorite

    def get_extra(self, extra_id: int) -> Optional[Extra]:
        """Get an extra by id, or None if the food has no such extra."""
        return next((extra for extra in self.state.extras if extra.id == extra_id), None)

    def format(self, value: float) -> str:
        return format_value(value, self.config)

    # Quantity controller

    def increment_food(self) -> None:
        self.state.food_quantity += 1

    def decrement_food(self) -> None:
        """Decrement the food quantity, never below 1."""
        if self.state.food_quantity > 1:
            self.state.food_quantity -= 1

    def increment_extra(self, extra_id: int) -> None:
        """Add one of an extra. Unknown ids are ignored."""
        if self.get_extra(extra_id) is None:
            return
        self._replace_extra_quantity(extra_id, 1)

    def decrement_extra(self, extra_id: int) -> None:
        """Remove one of an extra. Unknown ids and empty extras are ignored."""
        extra = self.get_extra(extra_id)
        if extra is None or extra.quantity <= 0:
            return
        self._replace_extra_quantity(extra_id, -1)

    def _replace_extra_quantity(self, extra_id: int, delta: int) -> None:
        # Build a new list; unchanged extras keep their identity
        self.state.extras = [
            extra.model_copy(update={"quantity": extra.quantity + delta})
            if extra.id == extra_id
            else extra
            for extra in self.state.extras
        ]

    # Total calculator

    @property
    def total(self) -> float:
        """Raw order total, 0 until a food is loaded."""
        if self.state.food is None:
            return 0.0
        return calculate_total(
            self.state.food.price, self.state.food_quantity, self.state.extras
        )

    @property
    def cart_total(self) -> str:
        """Order total formatted for display."""
        return self.format(self.total)

    # Favorite toggle

    @property
    def favorite_icon_name(self) -> str:
        return FAVORITE_ICON if self.state.is_favorite else NOT_FAVORITE_ICON

    async def toggle_favorite(self) -> bool:
        """
        Flip the favorite status of the loaded food.

        The local flag changes only after the API call succeeds.

        Returns:
            The new favorite status
        """
        food = self._require_food()
        was_favorite = self.state.is_favorite
        if was_favorite:
            await self.api.remove_favorite(food.id)
        else:
            await self.api.add_favorite(food)
        self.state.is_favorite = not was_favorite
        logger.info(f"[FOOD DETAILS] Food {food.id} favorite: {not was_favorite}")
        return not was_favorite

    def header_action(self) -> HeaderAction:
        """Describe the favorite button for the host's header."""
        return HeaderAction(
            icon=self.favorite_icon_name,
            size=self.config.favorite_icon_size,
            color=self.config.favorite_icon_color,
            on_press=self.toggle_favorite,
        )

    # Order submitter

    def build_order(self) -> OrderDraft:
        """Assemble the order from the current state."""
        food = self._require_food()
        if self.config.order_price_mode == "raw":
            price: Any = self.total
        else:
            price = self.cart_total
        return OrderDraft(
            product_id=food.id,
            food=food,
            quantity=self.state.food_quantity,
            extras=list(self.state.extras),
            price=price,
        )

    async def finish_order(self) -> Dict[str, Any]:
        """
        Submit the order, then navigate to the home destination.

        Returns:
            The order created by the API
        """
        draft = self.build_order()
        payload = draft.to_payload(include_quantity=self.config.order_include_quantity)
        logger.info(
            f"[FOOD DETAILS] Submitting order - product_id: {draft.product_id}, "
            f"quantity: {draft.quantity}, price: {draft.price}"
        )
        order = await self.api.create_order(payload)
        self.navigator.navigate(self.config.home_destination)
        return order

    def _require_food(self) -> Food:
        if self.state.food is None:
            raise FoodNotLoadedError("No food loaded")
        return self.state.food
