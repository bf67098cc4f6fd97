import logging
from decimal import Decimal
from typing import Any, List, Union

from .converters import option_field, safe_float

logger = logging.getLogger(__name__)

Number = Union[int, float, Decimal]


def calculate_total_price(base_price: Number, selected_options: List[Any]) -> Number:
    """
    Adds the price adjustments of the selected options to a base price.

    Adjustments may be numbers or numeric strings as served by the API;
    missing or non-numeric ones count as zero. Plain float addition, no rounding.
    """
    if isinstance(base_price, bool) or not isinstance(base_price, (int, float, Decimal)) \
            or not isinstance(selected_options, list):
        logger.error("Invalid input for calculate_total_price: base_price=%r", base_price)
        return base_price or 0

    options_total = sum(safe_float(option_field(option, "price_adjustment")) for option in selected_options)
    return float(base_price) + options_total
