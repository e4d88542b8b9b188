"""Food details API endpoints."""
import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from app.core.dependencies import get_screen_manager
from app.services.foods.details import FoodDetailsScreen
from app.services.foods.models import FoodNotFoundError
from app.services.navigation.navigator import InMemoryNavigator
from app.services.screen_session.manager import ScreenSessionManager

router = APIRouter()
logger = logging.getLogger(__name__)


class MountRequest(BaseModel):
    """Mount request model."""
    food_id: int


class ExtraResponse(BaseModel):
    """Extra response model."""
    id: int
    name: str
    value: float
    quantity: int


class FoodDetailsResponse(BaseModel):
    """Food details view model."""
    session_id: str
    food_id: int
    name: str
    description: str
    price: float
    formatted_price: str
    image_url: str
    extras: List[ExtraResponse] = []
    food_quantity: int
    cart_total: str
    is_favorite: bool
    favorite_icon: str


class OrderSubmittedResponse(BaseModel):
    """Order submission response model."""
    order: dict
    navigate_to: Optional[str] = None


def _to_response(session_id: str, screen: FoodDetailsScreen) -> FoodDetailsResponse:
    food = screen.food
    return FoodDetailsResponse(
        session_id=session_id,
        food_id=food.id,
        name=food.name,
        description=food.description,
        price=food.price,
        formatted_price=food.formatted_price or "",
        image_url=food.image_url,
        extras=[ExtraResponse(**extra.model_dump()) for extra in screen.extras],
        food_quantity=screen.food_quantity,
        cart_total=screen.cart_total,
        is_favorite=screen.is_favorite,
        favorite_icon=screen.favorite_icon_name,
    )


def _get_screen(manager: ScreenSessionManager, session_id: str) -> FoodDetailsScreen:
    screen = manager.get(session_id)
    if screen is None:
        raise HTTPException(status_code=404, detail=f"Screen {session_id} not found")
    return screen


def _upstream_error(action: str, session_id: str, error: httpx.HTTPError) -> HTTPException:
    logger.error(
        f"[FOOD DETAILS] Error during {action} - session: {session_id}, "
        f"Error: {type(error).__name__}: {str(error)}",
        exc_info=True,
    )
    return HTTPException(status_code=502, detail=f"Food API error during {action}: {str(error)}")


@router.post("/api/food-details", response_model=FoodDetailsResponse)
async def mount_food_details(
    body: MountRequest,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Open a food details screen."""
    logger.info(f"[FOOD DETAILS] Mount requested - food_id: {body.food_id}")
    try:
        session_id = await manager.mount(body.food_id)
    except FoodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except httpx.HTTPError as e:
        raise _upstream_error("load", "-", e)
    return _to_response(session_id, manager.get(session_id))


@router.get("/api/food-details/{session_id}", response_model=FoodDetailsResponse)
async def get_food_details(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Get the current state of a screen."""
    return _to_response(session_id, _get_screen(manager, session_id))


@router.post("/api/food-details/{session_id}/food/increment", response_model=FoodDetailsResponse)
async def increment_food(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Add one to the food quantity."""
    screen = _get_screen(manager, session_id)
    screen.increment_food()
    return _to_response(session_id, screen)


@router.post("/api/food-details/{session_id}/food/decrement", response_model=FoodDetailsResponse)
async def decrement_food(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Remove one from the food quantity."""
    screen = _get_screen(manager, session_id)
    screen.decrement_food()
    return _to_response(session_id, screen)


@router.post(
    "/api/food-details/{session_id}/extras/{extra_id}/increment",
    response_model=FoodDetailsResponse,
)
async def increment_extra(
    session_id: str,
    extra_id: int,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Add one of an extra."""
    screen = _get_screen(manager, session_id)
    screen.increment_extra(extra_id)
    return _to_response(session_id, screen)


@router.post(
    "/api/food-details/{session_id}/extras/{extra_id}/decrement",
    response_model=FoodDetailsResponse,
)
async def decrement_extra(
    session_id: str,
    extra_id: int,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Remove one of an extra."""
    screen = _get_screen(manager, session_id)
    screen.decrement_extra(extra_id)
    return _to_response(session_id, screen)


@router.post("/api/food-details/{session_id}/favorite", response_model=FoodDetailsResponse)
async def toggle_favorite(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Toggle the favorite status of the screen's food."""
    screen = _get_screen(manager, session_id)
    try:
        await screen.header_action().on_press()
    except FoodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except httpx.HTTPError as e:
        raise _upstream_error("favorite toggle", session_id, e)
    return _to_response(session_id, screen)


@router.post("/api/food-details/{session_id}/order", response_model=OrderSubmittedResponse)
async def finish_order(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Submit the order and close the screen."""
    screen = _get_screen(manager, session_id)
    try:
        order = await screen.finish_order()
    except FoodNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except httpx.HTTPError as e:
        raise _upstream_error("order submission", session_id, e)

    manager.unmount(session_id)
    navigate_to = None
    if isinstance(screen.navigator, InMemoryNavigator):
        navigate_to = screen.navigator.current
    logger.info(f"[FOOD DETAILS] Order submitted - session: {session_id}, navigate_to: {navigate_to}")
    return OrderSubmittedResponse(order=order, navigate_to=navigate_to)


@router.delete("/api/food-details/{session_id}")
async def unmount_food_details(
    session_id: str,
    manager: ScreenSessionManager = Depends(get_screen_manager),
):
    """Close a screen without ordering."""
    if not manager.unmount(session_id):
        raise HTTPException(status_code=404, detail=f"Screen {session_id} not found")
    return {"status": "unmounted"}
