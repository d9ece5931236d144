import argparse
import logging

from retail_api.config import get_settings
from retail_api.core.logging import setup_logging
from retail_api.database import build_engine, build_session_factory, init_schema
from retail_api.database.seed import reset_data, seed_demo_data

logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Seed the demonstration dataset.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    settings = get_settings()
    setup_logging(settings)
    args = parse_args()

    engine = build_engine(settings.DATABASE_URL)
    init_schema(engine)
    session_factory = build_session_factory(engine)

    db = session_factory()
    try:
        if args.reset:
            reset_data(db)
        if seed_demo_data(db):
            print("Seed data created.")
        else:
            print("Seed skipped: customers already exist.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
