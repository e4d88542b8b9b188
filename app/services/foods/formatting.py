"""Currency formatting."""
from typing import Optional

from app.core.config import Settings, settings as default_settings


def format_value(value: float, config: Optional[Settings] = None) -> str:
    """
    Format a monetary value for display.

    Args:
        value: Amount in the currency base unit
        config: Settings to read symbol and separators from (defaults to app settings)

    Returns:
        Display string, e.g. "$1,234.50"
    """
    config = config or default_settings
    sign = "-" if value < 0 else ""
    integer_part, decimal_part = f"{abs(value):,.2f}".split(".")
    integer_part = integer_part.replace(",", config.thousands_separator)
    return f"{sign}{config.currency_symbol}{integer_part}{config.decimal_separator}{decimal_part}"
