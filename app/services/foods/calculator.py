"""Order total calculation."""
import math
from typing import Iterable

from app.services.foods.models import Extra


def calculate_extras_total(extras: Iterable[Extra]) -> float:
    """Sum of value * quantity over all extras."""
    # fsum is exactly rounded, so the result does not depend on extras order
    return math.fsum(extra.value * extra.quantity for extra in extras)


def calculate_total(price: float, quantity: int, extras: Iterable[Extra]) -> float:
    """Total of an order: food price times quantity plus every extra."""
    return math.fsum([price * quantity, calculate_extras_total(extras)])
