"""
Configuration module for the production deployment.

Same settings surface as the dev module, but database credentials are required
and no .env file is read: everything comes from the process environment.
"""

"""<-----------------------SERVER CONFIGURATION FILE [NOT FOR DEV]------------------------>"""

import logging
from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("app_logger")


class Settings(BaseSettings):
    """
    Settings class that manages all application configuration.

    Attributes:
        APP_NAME (str): Name of the application
        DEBUG (bool): Enables SQL echo on the engine
        LOG_DIR (str): Directory holding the service log file
        DB_HOST, DB_PORT, DB_NAME, DB_USER, DB_PASSWORD: database credentials
        DATABASE_URL (str): Optional full URL overriding the composed credentials
        REPORT_DEFAULT_TZ (str): Time zone used to resolve "today" for reports
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    APP_NAME: str = Field("Hiring Metrics Service")
    DEBUG: bool = Field(False)
    LOG_DIR: str = Field("/var/log/hiring-metrics")

    DB_HOST: str = Field(...)
    DB_PORT: str = Field(...)
    DB_NAME: str = Field(...)
    DB_USER: str = Field(...)
    DB_PASSWORD: str = Field(...)
    DATABASE_URL: Optional[str] = Field(None)

    # Reporting configuration
    REPORT_DEFAULT_TZ: str = Field("UTC")

    @property
    def DB_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        encoded_password = quote_plus(self.DB_PASSWORD)
        uri = f"mysql+pymysql://{self.DB_USER}:{encoded_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        logger.debug(f"Database URI (password masked): {uri.replace(encoded_password, '****')}")
        return uri


# Create an instance of the Settings class
try:
    settings = Settings()
    logger.info("Configuration loaded successfully.")
except Exception as e:
    logger.error(f"Error occurred while loading configuration: {e}")
    raise
