"""
Configuration Module

This module handles the configuration settings for the metrics service, including
environment variables and the database credentials used to build the connection URI.

Key components:
- Settings: Pydantic BaseSettings class for managing configuration
- Environment variable loading from an optional .env file

Dependencies:
- pydantic_settings for settings management
- dotenv for .env file loading
- logging for application logging
"""

import logging
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv(override=False)

logger = logging.getLogger("app_logger")


class Settings(BaseSettings):
    """
    Settings class to manage application configuration.

    Development defaults point at a local MySQL instance. Set DATABASE_URL to use
    any other SQLAlchemy URL (tests use in-memory SQLite).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Basic configurations
    APP_NAME: str = "Hiring Metrics Service"
    DEBUG: bool = False
    LOG_DIR: str = "./logs"

    DB_HOST: str = "localhost"
    DB_PORT: str = "3306"
    DB_NAME: str = "hiring_metrics"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""
    DATABASE_URL: Optional[str] = None

    # Reporting configuration
    REPORT_DEFAULT_TZ: str = "UTC"

    @property
    def DB_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        encoded_password = quote_plus(self.DB_PASSWORD)
        uri = f"mysql+pymysql://{self.DB_USER}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        if encoded_password:
            logger.debug(f"Database URI (password masked): {uri.replace(encoded_password, '****')}")
        return uri


# Create an instance of the Settings class
settings = Settings()
