# app/database.py

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import settings

logger = logging.getLogger("app.database")


def build_engine(database_url: str, echo: bool = False):
    """Create an engine; SQLite URLs get the options needed by a threaded server."""
    if database_url.startswith("sqlite"):
        options = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **options)

    return create_engine(
        database_url,
        echo=echo,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def check_connection(bind=None):
    """Ping the store; raises if it cannot be reached."""
    bind = bind or engine
    with bind.connect() as connection:
        connection.execute(text("SELECT 1"))
    logger.info("Successfully connected to database")


def init_db(bind=None):
    # Register every model on Base.metadata before creating tables
    from app.models import categories, products, transactions, transaction_details  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
