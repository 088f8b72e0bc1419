"""
Database Configuration Module

This module handles database connection setup and configuration
for the Hiring Metrics service.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.core import settings
import logging

logger = logging.getLogger("app_logger")


def _engine_options(uri: str) -> dict:
    if uri.startswith("sqlite"):
        # One shared in-process connection so every session sees the same memory database
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {
        "pool_pre_ping": True,   # Verify connections before use
        "pool_recycle": 3600,    # Recycle connections every hour
    }


# Create the SQLAlchemy engine
try:
    engine = create_engine(
        settings.DB_URI,
        echo=settings.DEBUG,  # Set to True for SQL query logging
        **_engine_options(settings.DB_URI),
    )
    logger.info("Database engine created successfully")
except Exception as e:
    logger.error(f"Failed to create database engine: {e}")
    raise

# Create the SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create the Base class for declarative models
Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    This function provides a database session and ensures it's properly closed.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize the database by creating all tables.
    Safe to call on every startup: existing tables are left untouched.
    """
    try:
        # Import all models to ensure they are registered with Base
        from app.database_layer.db_model import (  # noqa: F401
            DimProcess,
            DimVacancy,
            FactHiringProcess,
            HiringProcessCandidate,
        )

        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise
