# File: repo_launcher/core/database/connection.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from repo_launcher.core.config.settings import settings
from .base import Base

# check_same_thread=False is needed only for SQLite.
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db(bind=None):
    """
    Creates all registered tables.
    Importing the models here registers them on Base before create_all.
    """
    import repo_launcher.core.storage.data.sql_models  # noqa: F401

    if bind is None:
        settings.ensure_dirs()
        bind = engine
    Base.metadata.create_all(bind=bind)
