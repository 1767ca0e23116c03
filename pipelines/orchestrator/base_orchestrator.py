# pipelines/orchestrator/base_orchestrator.py
"""
Base orchestrator class with common functionality.
Provides shared methods and initialization logic.
"""

from abc import ABC, abstractmethod
from typing import Optional

from configurations import ConfigFactory, ScraperConfig
from exceptions import ConfigurationError


class BaseOrchestrator(ABC):
    """
    Abstract base class for orchestrator implementations.
    Provides common initialization and utility methods.
    """

    def __init__(self, config: Optional[ScraperConfig] = None):
        """
        Initialize base orchestrator with configuration validation.

        Args:
            config: Scraper configuration (uses development if None)

        Raises:
            ConfigurationError: If configuration is invalid
        """
        # ***> Initialize configuration using factory pattern <***
        self.config = config or ConfigFactory.development()

        # ***> Validate configuration before proceeding <***
        self._validate_configuration()

    def _validate_configuration(self) -> None:
        """
        Validate the provided configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            self.config.validate()
        except ConfigurationError:
            raise
        except Exception as error:
            raise ConfigurationError("Invalid configuration: %s" % error)

    @property
    def environment(self) -> str:
        """
        Environment the configuration was built for.
        """
        return getattr(self.config, "_environment", None) or "development"

    @abstractmethod
    def cleanup(self) -> None:
        """
        Clean up resources. Must be implemented by subclasses.
        """
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()
        return False
