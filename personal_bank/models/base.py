"""
Database engine, session management, and base model.

Every persisted model inherits from Base. The persistence
gateway opens one session per load or save through the
factory built here.
"""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from personal_bank.config import get_settings


# --- Base Model Class ---
class Base(DeclarativeBase):
    pass


# --- Engine ---
def make_engine(database_url: str | None = None) -> Engine:
    """
    Build an engine for the configured database.

    pool_pre_ping=True tests connections before using them,
    so a stale connection never fails a save.
    """
    settings = get_settings()
    url = database_url or settings.DATABASE_URL

    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


# --- Session Factory ---
# autocommit=False: the caller decides when changes are saved,
# which is what makes save_all all-or-nothing.
def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
