"""Unit tests for the food API clients."""
import json

import httpx
import pytest

from app.services.api.http_api import HttpFoodApi
from app.services.api.in_memory_api import InMemoryFoodApi
from app.services.foods.models import Extra, Food, FoodNotFoundError


BURGER = {
    "id": 1,
    "name": "burger",
    "description": "Classic burger",
    "price": 10.0,
    "category": 1,
    "image_url": "https://example.com/burger.png",
    "extras": [{"id": 1, "name": "bacon", "value": 2.0}],
}


def make_client(handler):
    """Build an httpx client answering with ``handler``."""
    return httpx.AsyncClient(
        base_url="http://food-api.test",
        transport=httpx.MockTransport(handler),
    )


class TestHttpFoodApi:
    """Test the httpx food API client."""

    @pytest.mark.asyncio
    async def test_get_food(self):
        """Test GET /foods/{id} is parsed into a Food."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=BURGER)

        async with HttpFoodApi(client=make_client(handler)) as api:
            food = await api.get_food(1)

        assert requests[0].method == "GET"
        assert requests[0].url.path == "/foods/1"
        assert food.name == "burger"
        assert food.extras[0].quantity == 0
        assert food.model_dump()["category"] == 1

    @pytest.mark.asyncio
    async def test_get_food_not_found(self):
        """Test a 404 becomes FoodNotFoundError."""
        api = HttpFoodApi(client=make_client(lambda request: httpx.Response(404)))

        with pytest.raises(FoodNotFoundError):
            await api.get_food(99)

    @pytest.mark.asyncio
    async def test_server_error_propagates(self):
        """Test a 500 raises an httpx error."""
        api = HttpFoodApi(client=make_client(lambda request: httpx.Response(500)))

        with pytest.raises(httpx.HTTPStatusError):
            await api.get_food(1)

    @pytest.mark.asyncio
    async def test_get_favorites(self):
        """Test GET /favorites returns a list of foods."""
        api = HttpFoodApi(client=make_client(lambda request: httpx.Response(200, json=[BURGER])))

        favorites = await api.get_favorites()

        assert [food.id for food in favorites] == [1]

    @pytest.mark.asyncio
    async def test_get_favorites_without_data(self):
        """Test an empty or null body yields None."""
        api = HttpFoodApi(client=make_client(lambda request: httpx.Response(200)))
        assert await api.get_favorites() is None

        api = HttpFoodApi(client=make_client(lambda request: httpx.Response(200, json=None)))
        assert await api.get_favorites() is None

    @pytest.mark.asyncio
    async def test_add_favorite_sends_food(self):
        """Test POST /favorites carries the full food snapshot."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(201, json={})

        api = HttpFoodApi(client=make_client(handler))
        food = Food(**BURGER).model_copy(update={"formatted_price": "$10.00"})

        await api.add_favorite(food)

        body = json.loads(requests[0].content)
        assert requests[0].method == "POST"
        assert requests[0].url.path == "/favorites"
        assert body["id"] == 1
        assert body["category"] == 1
        assert body["formatted_price"] == "$10.00"
        assert body["extras"][0]["name"] == "bacon"

    @pytest.mark.asyncio
    async def test_remove_favorite(self):
        """Test DELETE /favorites/{id}."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={})

        api = HttpFoodApi(client=make_client(handler))
        await api.remove_favorite(1)

        assert requests[0].method == "DELETE"
        assert requests[0].url.path == "/favorites/1"

    @pytest.mark.asyncio
    async def test_create_order(self):
        """Test POST /orders returns the created order."""
        def handler(request):
            return httpx.Response(201, json={"id": 10, **json.loads(request.content)})

        api = HttpFoodApi(client=make_client(handler))
        order = await api.create_order({"product_id": 1, "price": "$10.00", "extras": []})

        assert order["id"] == 10
        assert order["product_id"] == 1

    @pytest.mark.asyncio
    async def test_injected_client_not_closed(self):
        """Test a caller-owned client stays open."""
        client = make_client(lambda request: httpx.Response(200, json=BURGER))

        async with HttpFoodApi(client=client):
            pass

        assert client.is_closed is False
        await client.aclose()


class TestInMemoryFoodApi:
    """Test the in-memory food API."""

    @pytest.mark.asyncio
    async def test_load_foods_from_yaml(self, food_api):
        """Test foods and favorites are read from the YAML file."""
        food = await food_api.get_food(1)
        favorites = await food_api.get_favorites()

        assert food.name == "burger"
        assert [extra.name for extra in food.extras] == ["bacon", "cheese"]
        assert [item.id for item in favorites] == [2]

    @pytest.mark.asyncio
    async def test_get_food_returns_copy(self, food_api):
        """Test callers cannot change the stored food."""
        food = await food_api.get_food(1)
        food.extras[0] = Extra(id=9, name="changed", value=0)

        again = await food_api.get_food(1)
        assert again.extras[0].name == "bacon"

    @pytest.mark.asyncio
    async def test_unknown_food(self, food_api):
        """Test unknown ids raise FoodNotFoundError."""
        with pytest.raises(FoodNotFoundError):
            await food_api.get_food(404)

    @pytest.mark.asyncio
    async def test_remove_unknown_favorite(self, food_api):
        """Test removing a food that is not a favorite raises."""
        with pytest.raises(FoodNotFoundError):
            await food_api.remove_favorite(1)

    @pytest.mark.asyncio
    async def test_default_catalog_when_file_missing(self, tmp_path):
        """Test a missing YAML file falls back to the default catalog."""
        api = InMemoryFoodApi(menu_file=str(tmp_path / "missing.yaml"))

        food = await api.get_food(1)

        assert food.price > 0
        assert await api.get_favorites() == []

    @pytest.mark.asyncio
    async def test_packaged_seed(self):
        """Test the bundled foods file loads."""
        api = InMemoryFoodApi()

        food = await api.get_food(1)

        assert food.name == "Ao molho"
        assert len(food.extras) == 3

    @pytest.mark.asyncio
    async def test_orders_get_ids(self, food_api):
        """Test created orders are numbered and stored."""
        first = await food_api.create_order({"product_id": 1})
        second = await food_api.create_order({"product_id": 2})

        assert (first["id"], second["id"]) == (1, 2)
        assert len(food_api.orders) == 2
