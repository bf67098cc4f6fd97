"""
Wipes and recreates the catalog tables, then seeds the starting catalog.

Everything runs in one transaction: either the whole reset lands or the
database is left untouched.
"""
import logging
from decimal import Decimal

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .database import Base
from ..models.car_model import CarModel
from ..models.customization_model import Customization

logger = logging.getLogger(__name__)

SEED_MODELS = [
    {
        "name": "Ferrari 296 GTB",
        "year": 2023,
        "base_price": Decimal("322986.00"),
        "description": "The new V6 hybrid marvel, defining driving pleasure.",
        "image_url": "https://example.com/296gtb.jpg",
    },
    {
        "name": "Ferrari F8 Tributo",
        "year": 2022,
        "base_price": Decimal("280000.00"),
        "description": "A celebration of excellence and an homage to the most powerful V8 in Ferrari history.",
        "image_url": "https://example.com/f8tributo.jpg",
    },
    {
        "name": "Ferrari 812 Superfast",
        "year": 2021,
        "base_price": Decimal("335000.00"),
        "description": "The fastest and most powerful road-going Ferrari ever built.",
        "image_url": "https://example.com/812superfast.jpg",
    },
]

# Order matters: ids 1-10 are referenced by the compatibility rules
SEED_CUSTOMIZATIONS = [
    ("Exterior Color", "Rosso Corsa", Decimal("5000.00"), "https://i.imgur.com/8f7v3j2.png"),
    ("Exterior Color", "Giallo Modena", Decimal("7000.00"), "https://i.imgur.com/O3k4bS1.png"),
    ("Exterior Color", "Nero Daytona", Decimal("12450.00"), "https://i.imgur.com/2m3Xv5b.png"),
    ("Exterior Color", "Blu Tour de France", Decimal("15450.00"), "https://i.imgur.com/gK5t4Y8.png"),
    ("Wheel Style", "Standard Forged Wheels", Decimal("3000.00"), "https://i.imgur.com/s6aV1Yd.png"),
    ("Wheel Style", "Diamond-Forged Wheels", Decimal("8100.00"), "https://i.imgur.com/bX9f8J1.png"),
    ("Wheel Style", "Carbon Fibre Wheels", Decimal("25000.00"), "https://i.imgur.com/pY7q2Nf.png"),
    ("Interior Trim", "Standard Leather (Black)", Decimal("1500.00"), "https://i.imgur.com/k3jO1hS.png"),
    ("Interior Trim", "Alcantara Interior (Charcoal)", Decimal("5900.00"), "https://i.imgur.com/rV7g8E2.png"),
    ("Interior Trim", "Carbon Fibre Driver Zone", Decimal("7500.00"), "https://i.imgur.com/aI8b9c1.png"),
]


def reset_database(engine: Engine) -> None:
    """Drop, recreate and seed the models, customizations and join tables."""
    logger.info("Starting database reset")
    try:
        with engine.begin() as connection:
            logger.info("Dropping existing tables...")
            Base.metadata.drop_all(bind=connection)

            logger.info("Creating new tables...")
            Base.metadata.create_all(bind=connection)

            logger.info("Seeding database with initial data...")
            with Session(bind=connection) as session:
                customizations = []
                for category, option_name, price_adjustment, image_url in SEED_CUSTOMIZATIONS:
                    customization = Customization(
                        category=category,
                        option_name=option_name,
                        price_adjustment=price_adjustment,
                        image_url=image_url,
                    )
                    session.add(customization)
                    customizations.append(customization)
                # Flush options first so they get ids 1-10 in seed order
                session.flush()

                # Every option is offered for every model
                for row in SEED_MODELS:
                    session.add(CarModel(**row, customizations=list(customizations)))
                session.commit()
    except Exception:
        logger.error("Error during database reset. Transaction was rolled back.", exc_info=True)
        raise

    logger.info("Database reset finished: %d models, %d customizations",
                len(SEED_MODELS), len(SEED_CUSTOMIZATIONS))
