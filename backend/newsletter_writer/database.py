from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from newsletter_writer.config import get_settings

settings = get_settings()


def normalize_database_url(database_url: str) -> str:
    """
    Normalize database URL for psycopg3 compatibility.

    Replaces 'postgresql://' with 'postgresql+psycopg://' if psycopg driver
    is not already specified.

    Args:
        database_url: Original database URL

    Returns:
        Normalized database URL
    """
    if database_url.startswith('postgresql://') and '+psycopg' not in database_url:
        return database_url.replace('postgresql://', 'postgresql+psycopg://')
    return database_url


def engine_options(database_url: str) -> dict:
    """
    Extra create_engine() keyword arguments for the given URL.

    SQLite connections are shared across the request threadpool, and an
    in-memory database must live on a single connection to be visible
    to every session.
    """
    if not database_url.startswith('sqlite'):
        return {}
    options = {"connect_args": {"check_same_thread": False}}
    if database_url in ('sqlite://', 'sqlite:///:memory:'):
        options["poolclass"] = StaticPool
    return options


database_url = normalize_database_url(settings.get_database_url())

engine = create_engine(database_url, **engine_options(database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
