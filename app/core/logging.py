"""
Logging Configuration Module

This module sets up logging for the entire application. It configures logging using a
YAML file when one is present and falls back to a basic file + console configuration.

Key components:
- setup_logging: Function to configure logging based on a YAML file or default settings

Dependencies:
- logging: Python's built-in logging module
- yaml: For parsing YAML configuration files
- pathlib: For file path handling
"""

import logging
import logging.config
import os
from pathlib import Path

import yaml

ENV = os.getenv("APP_ENV", "dev")  # Default to 'dev'

if ENV == "prod":
    from .config_prod import settings
else:
    from .config_dev import settings


def setup_logging(
    default_path='logging.yaml',
    default_level=logging.INFO,
    log_dir=settings.LOG_DIR
):
    """
    Sets up logging configuration for the application.

    Args:
        default_path (str): Path to the YAML logging configuration file.
        default_level (int): Logging level used when the config file is not found.
        log_dir (str): Directory where logs should be stored.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, "hiring_metrics_service.log")

        path = Path(default_path)
        if path.exists():
            with open(path, 'rt') as f:
                config = yaml.safe_load(f.read())

                # Point the file handler at the configured log directory
                if 'handlers' in config and 'file' in config['handlers']:
                    config['handlers']['file']['filename'] = log_file_path

                logging.config.dictConfig(config)
                logging.getLogger("app_logger").info(f"Logging configured using YAML file at {path}")
        else:
            logging.basicConfig(
                level=default_level,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                handlers=[
                    logging.FileHandler(log_file_path),
                    logging.StreamHandler()
                ]
            )
            logging.getLogger("app_logger").warning(
                f"Logging configuration file not found at {path}. Using basic config."
            )

    except Exception as e:
        logging.basicConfig(level=default_level)
        logging.error(f"Error occurred during logging setup: {str(e)}", exc_info=True)


log = setup_logging()
