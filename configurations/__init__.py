# configurations/__init__.py
"""
configuration module
"""

from .factory import ConfigFactory, get_config
from .settings_base import EnvironmentVariables, load_environment
from .settings_orchestrator import FBrefConfig, ReconciliationConfig, ScraperConfig

__all__ = [
    "EnvironmentVariables",
    "load_environment",
    "FBrefConfig",
    "ReconciliationConfig",
    "ScraperConfig",
    "ConfigFactory",
    "get_config",
]
