"""Shared test fixtures and configuration."""
import pytest
import yaml
from pathlib import Path
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import Settings
from app.core.dependencies import get_screen_manager
from app.services.api.in_memory_api import InMemoryFoodApi
from app.services.foods.details import FoodDetailsScreen
from app.services.navigation.navigator import InMemoryNavigator
from app.services.screen_session.manager import ScreenSessionManager


TEST_FOODS = {
    "foods": [
        {
            "id": 1,
            "name": "burger",
            "description": "Classic burger",
            "price": 10.00,
            "category": 1,
            "image_url": "https://example.com/burger.png",
            "extras": [
                {"id": 1, "name": "bacon", "value": 2.00},
                {"id": 2, "name": "cheese", "value": 1.50},
            ],
        },
        {
            "id": 2,
            "name": "fries",
            "description": "Crispy fries",
            "price": 3.50,
            "category": 2,
            "image_url": "https://example.com/fries.png",
            "extras": [],
        },
    ],
    "favorites": [
        {
            "id": 2,
            "name": "fries",
            "description": "Crispy fries",
            "price": 3.50,
            "category": 2,
            "image_url": "https://example.com/fries.png",
            "extras": [],
        },
    ],
}


@pytest.fixture
def test_settings():
    """Override settings for testing."""
    return Settings(
        _env_file=None,
        api_base_url="http://food-api.test",
        currency_symbol="$",
        decimal_separator=".",
        thousands_separator=",",
        home_destination="MainBottom",
        order_price_mode="formatted",
        food_api_backend="memory",
    )


@pytest.fixture
def test_foods_path(tmp_path):
    """Write the test foods YAML file and return its path."""
    path = Path(tmp_path) / "test_foods.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(TEST_FOODS, f, default_flow_style=False, sort_keys=False)
    return path


@pytest.fixture
def food_api(test_foods_path):
    """Create in-memory food API with test data."""
    return InMemoryFoodApi(menu_file=str(test_foods_path))


@pytest.fixture
def navigator():
    """Create a navigator that records destinations."""
    return InMemoryNavigator()


@pytest.fixture
def screen(food_api, navigator, test_settings):
    """Create an unloaded food details screen."""
    return FoodDetailsScreen(food_api, navigator, test_settings)


@pytest.fixture
async def burger_screen(screen):
    """Food details screen with the burger loaded."""
    await screen.load(1)
    return screen


@pytest.fixture
def clean_screen_sessions():
    """Clean up mounted screens before and after tests."""
    from app.services.screen_session import manager
    manager._screens.clear()
    yield
    manager._screens.clear()


@pytest.fixture
def screen_manager(food_api, test_settings, clean_screen_sessions):
    """Create screen session manager backed by the test API."""
    return ScreenSessionManager(api=food_api, config=test_settings)


@pytest.fixture
def test_client(screen_manager):
    """Create FastAPI test client with overrides."""
    app.dependency_overrides[get_screen_manager] = lambda: screen_manager

    client = TestClient(app)

    yield client

    # Clear overrides
    app.dependency_overrides.clear()
