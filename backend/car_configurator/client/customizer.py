"""
Customizer state for a single car model.

Holds the model fetched from the catalog, the options the user has toggled
on, and keeps the total price and combination warning in step with every
change.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from .garage import Garage
from .service import CarService
from ..utils.converters import safe_float
from ..utils.pricing import calculate_total_price
from ..utils.validation import validate_combination

logger = logging.getLogger(__name__)

# Tabs shown by the customizer, each bound to one option category
CUSTOMIZER_TABS = [
    {"id": "exterior", "title": "Exterior", "category": "Exterior Color"},
    {"id": "wheels", "title": "Wheels", "category": "Wheel Style"},
    {"id": "interior", "title": "Interior", "category": "Interior Trim"},
]


class InvalidConfigurationError(Exception):
    """Raised when applying a selection that breaks a combination rule."""


class Customizer:
    def __init__(self, car: Dict[str, Any]):
        self.car = car
        self.selected_options: List[Dict[str, Any]] = []
        self.grouped_options = self._group_by_category(car.get("available_customizations") or [])
        self.total_price = self.base_price
        self.validation_error: Optional[str] = None

    @classmethod
    def load(cls, car_id: int, service: Optional[CarService] = None) -> "Customizer":
        service = service or CarService()
        return cls(service.get_by_id(car_id))

    @staticmethod
    def _group_by_category(options: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
        grouped: Dict[str, List[Dict[str, Any]]] = {}
        for option in options:
            grouped.setdefault(option["category"], []).append(option)
        return grouped

    @property
    def base_price(self) -> float:
        return safe_float(self.car.get("base_price"))

    @property
    def options_total(self) -> float:
        return self.total_price - self.base_price

    def options_for_tab(self, tab_id: str) -> List[Dict[str, Any]]:
        for tab in CUSTOMIZER_TABS:
            if tab["id"] == tab_id:
                return self.grouped_options.get(tab["category"], [])
        raise KeyError(f"Unknown customizer tab: {tab_id}")

    def is_selected(self, option_id: int) -> bool:
        return any(option["id"] == option_id for option in self.selected_options)

    def _find_option(self, option_id: int) -> Dict[str, Any]:
        for options in self.grouped_options.values():
            for option in options:
                if option["id"] == option_id:
                    return option
        raise KeyError(f"Option {option_id} is not offered for {self.car.get('name')}")

    def toggle(self, option: Union[int, Dict[str, Any]]) -> None:
        """Select the option if it isn't selected yet, otherwise deselect it."""
        if not isinstance(option, dict):
            option = self._find_option(option)

        if self.is_selected(option["id"]):
            self.selected_options = [item for item in self.selected_options if item["id"] != option["id"]]
        else:
            self.selected_options = self.selected_options + [option]
        self._recalculate()

    def _recalculate(self) -> None:
        result = validate_combination(self.selected_options)
        self.validation_error = None if result.is_valid else result.message
        self.total_price = calculate_total_price(self.base_price, self.selected_options)

    def configured_car(self) -> Dict[str, Any]:
        return {
            "base_car": self.car,
            "selected_options": list(self.selected_options),
            "total_price": self.total_price,
        }

    def apply(self, garage: Garage) -> Dict[str, Any]:
        """Save the current selection to the garage; refuses while a warning is showing."""
        if self.validation_error:
            raise InvalidConfigurationError(
                f'Cannot apply changes. Please resolve the following warning: "{self.validation_error}"'
            )
        saved_car = garage.add(self.configured_car())
        logger.info(f'Configuration for "{self.car.get("name")}" has been saved successfully')
        return saved_car
