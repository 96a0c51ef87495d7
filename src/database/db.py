from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from ..config.settings import settings


def _create_engine(database_url: str):
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            # one shared connection, otherwise every session sees an empty db
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url, pool_pre_ping=True)


engine = _create_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def qualified(table: str) -> str:
    """Table name prefixed with the configured schema, for foreign keys."""
    schema = settings.DATABASE_SCHEMA
    return f"{schema}.{table}" if schema else table


def init_db():
    # register every model on Base.metadata before create_all
    from ..models import user, transaction, gpt  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
