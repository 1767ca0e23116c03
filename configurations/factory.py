# configurations/factory.py
"""
Configuration factory for creating environment-specific configurations.
"""

import os
from typing import Optional

from .settings_base import EnvironmentVariables, env_flag, load_environment
from .settings_orchestrator import FBrefConfig, ReconciliationConfig, ScraperConfig


class ConfigFactory:
    """
    Factory for creating environment-specific configurations
    """

    @staticmethod
    def development() -> ScraperConfig:
        """
        Development environment configuration
        """
        return ScraperConfig(
            fbref=FBrefConfig(),
            reconciliation=ReconciliationConfig(),
            fetcher="selenium",
            headless=False,
            log_level="DEBUG",
            request_delay=2.0,
            request_min_jitter=1.0,
            request_max_jitter=2.0,
            max_retries=2,
            page_load_timeout=20.0,
            max_matches=5,
            output_file="data/development_matches.csv",
            _environment="development",
        )

    @staticmethod
    def testing() -> ScraperConfig:
        """
        Testing environment configuration
        """
        return ScraperConfig(
            fbref=FBrefConfig(),
            reconciliation=ReconciliationConfig(),
            fetcher="requests",
            headless=True,
            log_level="ERROR",
            request_delay=0.0,
            request_min_jitter=0.0,
            request_max_jitter=0.0,
            max_retries=1,
            page_load_timeout=5.0,
            max_matches=2,
            output_file="data/testing_matches.csv",
            _environment="testing",
        )

    @staticmethod
    def production() -> ScraperConfig:
        """
        Production environment configuration
        """
        return ScraperConfig(
            fbref=FBrefConfig(),
            reconciliation=ReconciliationConfig(),
            fetcher="selenium",
            headless=True,
            log_level="INFO",
            request_delay=4.0,
            request_min_jitter=3.0,
            request_max_jitter=6.0,
            max_retries=3,
            page_load_timeout=30.0,
            max_matches=None,
            output_file="data/EPL_2024_2025_FBref.csv",
            _environment="production",
        )

    @staticmethod
    def custom(environment: str = "development", **kwargs) -> ScraperConfig:
        """
        Create a custom configuration with specified parameters
        """
        config = get_config(environment)
        config._environment = f"custom-{environment}"

        # Apply keyword overrides, routing prefixed keys to sub-configs
        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            elif hasattr(config.fbref, key.replace("fbref_", "")):
                setattr(config.fbref, key.replace("fbref_", ""), value)
            elif hasattr(config.reconciliation, key.replace("rec_", "")):
                setattr(config.reconciliation, key.replace("rec_", ""), value)
            else:
                raise ValueError(f"Unknown configuration key: {key}")

        return config

    @staticmethod
    def from_environment(env_file_path: Optional[str] = None) -> ScraperConfig:
        """
        Build configuration from .env / process environment variables
        """
        load_environment(env_file_path)
        keys = EnvironmentVariables

        config = get_config(os.getenv(keys.ENVIRONMENT_KEY, "production"))

        fixtures_url = os.getenv(keys.FIXTURES_URL_KEY)
        if fixtures_url:
            config.fbref.fixtures_url = fixtures_url

        base_url = os.getenv(keys.BASE_URL_KEY)
        if base_url:
            config.fbref.base_url = base_url.rstrip("/")

        fetcher = os.getenv(keys.FETCHER_KEY)
        if fetcher:
            config.fetcher = fetcher.strip().lower()

        log_level = os.getenv(keys.LOG_LEVEL_KEY)
        if log_level:
            config.log_level = log_level.strip().upper()

        log_strategy = os.getenv(keys.LOG_STRATEGY_KEY)
        if log_strategy:
            config.log_strategy = log_strategy.strip().lower()

        policy = os.getenv(keys.OVERWRITE_POLICY_KEY)
        if policy:
            config.reconciliation.overwrite_policy = policy.strip().lower()

        config.headless = env_flag(keys.HEADLESS_KEY, config.headless)
        return config


# Essential convenience functions only
def get_config(environment: str = "development") -> ScraperConfig:
    """
    Get configuration for specified environment
    """
    environment = environment.lower()

    if environment == "development":
        return ConfigFactory.development()
    elif environment == "testing":
        return ConfigFactory.testing()
    elif environment == "production":
        return ConfigFactory.production()
    else:
        raise ValueError(f"Unknown environment: {environment}")
