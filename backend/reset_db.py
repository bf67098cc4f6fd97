"""
Wipes and reseeds the catalog database.
Run from the `backend` directory; DATABASE_URL comes from the environment or .env.
"""
import logging
import sys

from car_configurator.core.database import engine
from car_configurator.core.seed import reset_database

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

if __name__ == "__main__":
    try:
        reset_database(engine)
    except Exception:
        sys.exit(1)
    finally:
        engine.dispose()
