"""
The garage: saved car configurations kept in a local JSON file.

Each entry is a snapshot of a model plus the options chosen for it:

    {"base_car": {...}, "selected_options": [{...}, ...],
     "total_price": 330486.0, "garage_id": 1718000000000}

Every mutation rewrites the whole file.
"""
import copy
import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..core.config import settings
from ..utils.converters import safe_float
from ..utils.pricing import calculate_total_price

logger = logging.getLogger(__name__)


class DuplicateConfigurationError(Exception):
    """The same model with the same options is already in the garage."""


def _fingerprint(configured_car: Dict[str, Any]) -> Tuple[Any, Tuple[int, ...]]:
    option_ids = sorted(option["id"] for option in configured_car["selected_options"])
    return configured_car["base_car"]["id"], tuple(option_ids)


def _is_saved_car(entry: Any) -> bool:
    return (
        isinstance(entry, dict)
        and isinstance(entry.get("garage_id"), int)
        and isinstance(entry.get("base_car"), dict)
        and "id" in entry["base_car"]
        and isinstance(entry.get("selected_options"), list)
        and all(isinstance(option, dict) and "id" in option for option in entry["selected_options"])
    )


class Garage:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else Path(settings.GARAGE_PATH)
        self._saved_cars = self._load()

    @property
    def saved_cars(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._saved_cars)

    def _load(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"Error reading saved cars from {self.path}: {e}")
            return []
        if not isinstance(data, list):
            logger.error(f"Ignoring malformed garage file {self.path}")
            return []

        saved_cars = [entry for entry in data if _is_saved_car(entry)]
        if len(saved_cars) != len(data):
            logger.error(f"Dropped {len(data) - len(saved_cars)} malformed entries from {self.path}")
        return saved_cars

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._saved_cars, indent=2), encoding="utf-8")

    def _next_garage_id(self) -> int:
        garage_id = int(time.time() * 1000)
        taken = {car["garage_id"] for car in self._saved_cars}
        while garage_id in taken:
            garage_id += 1
        return garage_id

    def add(self, configured_car: Dict[str, Any]) -> Dict[str, Any]:
        """Save a configuration; raises DuplicateConfigurationError for a repeat."""
        fingerprint = _fingerprint(configured_car)
        if any(_fingerprint(existing) == fingerprint for existing in self._saved_cars):
            raise DuplicateConfigurationError(
                "This exact configuration has already been saved to your garage."
            )

        saved_car = copy.deepcopy(configured_car)
        saved_car["garage_id"] = self._next_garage_id()
        self._saved_cars.append(saved_car)
        self._persist()
        logger.info(f"Saved {saved_car['base_car'].get('name')} as garage entry {saved_car['garage_id']}")
        return copy.deepcopy(saved_car)

    def delete(self, garage_id: int) -> None:
        self._saved_cars = [car for car in self._saved_cars if car["garage_id"] != garage_id]
        self._persist()

    def delete_option(self, garage_id: int, option_id: int) -> None:
        """Drop one option from a saved configuration and reprice it."""
        for car in self._saved_cars:
            if car["garage_id"] != garage_id:
                continue
            car["selected_options"] = [
                option for option in car["selected_options"] if option["id"] != option_id
            ]
            car["total_price"] = calculate_total_price(
                safe_float(car["base_car"].get("base_price")), car["selected_options"]
            )
        self._persist()

    def reset(self) -> None:
        self._saved_cars = []
        self._persist()
