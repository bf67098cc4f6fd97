"""
Validation helpers shared by the customizer and the car create/edit flow.

Two kinds of checks live here:
- option combination rules (which customizations can be selected together)
- car form rules (name, year and base price of a catalog model)
"""
from datetime import date
from typing import Any, Dict, Iterable, List, NamedTuple, Optional

from .converters import option_field, parse_float, parse_int

# ===== COMBINATION VALIDATION =====

# Business rules keyed by customization id (see the seeded catalog)
INCOMPATIBLE_WITH: Dict[int, List[int]] = {
    7: [8],  # Carbon Fibre Wheels vs Standard Leather (Black)
    8: [7],
}
REQUIRES: Dict[int, List[int]] = {
    10: [9],  # Carbon Fibre Driver Zone needs Alcantara Interior
}

MIN_YEAR = 1950


class CombinationResult(NamedTuple):
    is_valid: bool
    message: Optional[str] = None


def validate_combination(selected_options: Iterable[Any]) -> CombinationResult:
    """
    Checks the selected customization options against the fixed rule tables.
    Options may be API dicts or objects with ``id`` and ``option_name``.

    Incompatibilities are looked for first; only when there are none are
    missing requirements reported. The first violation found is returned.
    """
    selected_options = list(selected_options)
    selected_ids = {option_field(option, "id") for option in selected_options}

    for option in selected_options:
        for incompatible_id in INCOMPATIBLE_WITH.get(option_field(option, "id"), []):
            if incompatible_id in selected_ids:
                return CombinationResult(
                    False,
                    f'"{option_field(option, "option_name")}" is not compatible with an option you have selected.',
                )

    for option in selected_options:
        for required_id in REQUIRES.get(option_field(option, "id"), []):
            if required_id not in selected_ids:
                return CombinationResult(
                    False,
                    f'"{option_field(option, "option_name")}" requires another option that is not selected.',
                )

    return CombinationResult(True, None)


# ===== FORM VALIDATION =====

def is_not_empty(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def is_positive_number(value: Any) -> bool:
    num = parse_float(value)
    return num is not None and num > 0


def is_valid_year(value: Any) -> bool:
    """Plausible model year: 1950 up to one year past the current one."""
    year = parse_int(value)
    return year is not None and MIN_YEAR <= year <= date.today().year + 1


def validate_car_form(form_data: Dict[str, Any]) -> Dict[str, str]:
    """Returns field name -> error message. An empty dict means the form is valid."""
    errors = {}

    if not is_not_empty(form_data.get("name")):
        errors["name"] = "Model Name is a required field."

    if not is_valid_year(form_data.get("year")):
        errors["year"] = "Please enter a valid year (e.g., 2024)."

    if not is_positive_number(form_data.get("base_price")):
        errors["base_price"] = "Base Price must be a positive number."

    return errors
