from retail_api.config import Settings
from retail_api.database import build_engine, build_session_factory, init_schema


def make_settings(**overrides) -> Settings:
    values = {
        "DATABASE_URL": "sqlite://",
        "SEED_DEMO_DATA": False,
        "LOG_LEVEL": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


def make_session():
    engine = build_engine("sqlite://")
    init_schema(engine)
    return engine, build_session_factory(engine)()
