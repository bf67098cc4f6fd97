"""Shared fixtures: a throwaway SQLite catalog and sample API payloads."""

import os
import tempfile

# Must be set before the application modules build their engine
_DB_DIR = tempfile.mkdtemp(prefix="car_configurator_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'catalog.db')}"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from car_configurator.core.database import engine  # noqa: E402
from car_configurator.core.seed import SEED_CUSTOMIZATIONS, SEED_MODELS, reset_database  # noqa: E402
from car_configurator.main import app  # noqa: E402


@pytest.fixture
def seeded_db():
    reset_database(engine)
    return engine


@pytest.fixture
def client(seeded_db):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def options():
    """The seeded options as the API serves them (prices as strings)."""
    return [
        {
            "id": index,
            "category": category,
            "option_name": option_name,
            "price_adjustment": str(price_adjustment),
            "image_url": image_url,
        }
        for index, (category, option_name, price_adjustment, image_url) in enumerate(SEED_CUSTOMIZATIONS, start=1)
    ]


@pytest.fixture
def option(options):
    """Look up a seeded option by id."""
    by_id = {item["id"]: item for item in options}
    return by_id.__getitem__


@pytest.fixture
def car(options):
    """GET /api/cars/1 payload for the Ferrari 296 GTB."""
    model = SEED_MODELS[0]
    return {
        "id": 1,
        "name": model["name"],
        "year": model["year"],
        "base_price": str(model["base_price"]),
        "description": model["description"],
        "image_url": model["image_url"],
        "available_customizations": options,
    }
