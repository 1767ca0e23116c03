# pipelines/orchestrator/orchestrator_config.py
"""
Configuration constants and settings for the match collection pipeline.
Centralizes all hardcoded values for better maintainability.
"""


class OrchestratorConfig:
    """
    Configuration constants for orchestrator operations.
    """

    # ***> Logging <***
    SESSION_LOGGER_NAME: str = "match_collection"

    # ***> Page readiness (selenium) <***
    MATCH_READY_SELECTOR: str = "div.scorebox"
    FIXTURES_READY_SELECTOR: str = "table"
    READY_STATE_SCRIPT: str = "return document.readyState"
    READY_STATE_COMPLETE: str = "complete"
    ELEMENT_WAIT_SECONDS: int = 5
    READY_STATE_GRACE_SECONDS: int = 5
    ELEMENT_GRACE_SECONDS: int = 3

    # ***> Chrome arguments <***
    CHROME_ARGUMENTS = (
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--window-size=1920,1080",
    )
    HEADLESS_ARGUMENT: str = "--headless=new"

    # ***> Runner <***
    DEFAULT_TEST_LIMIT: int = 5
    PROGRESS_EVERY: int = 10

    # ***> String formatting templates <***
    URL_DISPLAY_LENGTH: int = 80
    URL_ELLIPSIS: str = "..."
