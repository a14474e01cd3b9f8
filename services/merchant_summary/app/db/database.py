# app/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(dsn: str | None) -> Engine:
    if not dsn:
        raise RuntimeError("SUMMARY_DB_DSN environment variable is required for the sql backend")

    return create_engine(dsn, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )


def init_db(engine: Engine):
    """
    Create the summary table if it does not exist.
    Safe to call multiple times.
    """
    import db.models
    Base.metadata.create_all(bind=engine)
