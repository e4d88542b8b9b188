"""Food details screen session manager."""
import logging
import secrets
from typing import Callable, Dict, Optional

from app.core.config import Settings
from app.services.api.base import FoodApi
from app.services.foods.details import FoodDetailsScreen
from app.services.navigation.navigator import InMemoryNavigator, Navigator

logger = logging.getLogger(__name__)

# Module-level screen storage (persists across requests)
_screens: Dict[str, FoodDetailsScreen] = {}


class ScreenSessionManager:
    """Owns food details screens from mount to unmount."""

    def __init__(
        self,
        api: FoodApi,
        navigator_factory: Callable[[], Navigator] = InMemoryNavigator,
        config: Optional[Settings] = None,
    ):
        self.api = api
        self.navigator_factory = navigator_factory
        self.config = config

    async def mount(self, food_id: int) -> str:
        """
        Create a screen for a food and load it.

        Returns:
            Session id of the new screen
        """
        screen = FoodDetailsScreen(self.api, self.navigator_factory(), self.config)
        await screen.load(food_id)

        session_id = secrets.token_urlsafe(16)
        _screens[session_id] = screen
        logger.info(f"[SCREEN SESSION] Mounted {session_id} for food {food_id}")
        return session_id

    def get(self, session_id: str) -> Optional[FoodDetailsScreen]:
        """Get a mounted screen."""
        return _screens.get(session_id)

    def unmount(self, session_id: str) -> bool:
        """Destroy a screen and its state. Returns False if it was not mounted."""
        screen = _screens.pop(session_id, None)
        if screen is None:
            return False
        logger.info(f"[SCREEN SESSION] Unmounted {session_id}")
        return True
