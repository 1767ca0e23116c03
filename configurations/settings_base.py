# configurations/settings_base.py
"""
Base configuration classes and environment handling.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class EnvironmentVariables:
    """
    This is for the environmental variables:
    """

    env_file_path: Optional[str] = ".env"

    # ***> Variables read by ConfigFactory.from_environment <***
    ENVIRONMENT_KEY: str = "SCRAPER_ENV"
    FIXTURES_URL_KEY: str = "FBREF_FIXTURES_URL"
    BASE_URL_KEY: str = "FBREF_BASE_URL"
    FETCHER_KEY: str = "SCRAPER_FETCHER"
    HEADLESS_KEY: str = "SCRAPER_HEADLESS"
    LOG_LEVEL_KEY: str = "SCRAPER_LOG_LEVEL"
    LOG_STRATEGY_KEY: str = "SCRAPER_LOG_STRATEGY"
    OVERWRITE_POLICY_KEY: str = "RECONCILIATION_POLICY"


def load_environment(env_file_path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Args:
        env_file_path: Path to the .env file (defaults to EnvironmentVariables)

    Returns:
        True if a file was found and loaded
    """
    env_path = env_file_path or EnvironmentVariables.env_file_path
    if env_path and Path(env_path).exists():
        load_dotenv(env_path)
        logging.info("Loaded environment from: %s", env_path)
        return True
    logging.debug("Environment file not found: %s", env_path)
    return False


def env_flag(name: str, default: bool) -> bool:
    """
    Read a boolean flag from the environment.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")
