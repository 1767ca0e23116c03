# pipelines/orchestrator/document_source.py
"""
Document sources: turn a URL into a parsed ``Document``.

Both sources retry transient failures with exponential backoff and raise
``DocumentUnavailableError`` once retries are exhausted.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Optional

import backoff
import requests
from selenium import webdriver
from selenium.common.exceptions import TimeoutException, WebDriverException
from selenium.webdriver.chrome.options import Options
from selenium.webdriver.common.by import By
from selenium.webdriver.support import expected_conditions as EC
from selenium.webdriver.support.ui import WebDriverWait

from configurations import ScraperConfig
from exceptions import DocumentUnavailableError
from extractors import Document

from .orchestrator_config import OrchestratorConfig

logger = logging.getLogger(__name__)


class DocumentSource(ABC):
    """Fetches pages and hands them over as parsed documents."""

    def __init__(self, config: ScraperConfig):
        self.config = config

    def fetch(self, url: str, ready_selector: Optional[str] = None) -> Document:
        """
        Load ``url`` and parse it.

        Args:
            url: Page address
            ready_selector: CSS selector that marks the page as rendered

        Returns:
            Parsed document

        Raises:
            DocumentUnavailableError: If the page cannot be loaded
        """
        load = backoff.on_exception(
            backoff.expo,
            self.retry_exceptions,
            max_tries=self.config.max_retries,
            giveup=self.give_up,
            logger=logger,
        )(self._load)

        try:
            html = load(url, ready_selector)
        except self.retry_exceptions as error:
            raise DocumentUnavailableError(url, error)

        return Document.from_html(html, url)

    @property
    @abstractmethod
    def retry_exceptions(self) -> tuple:
        """Exceptions that are retried and finally mapped to unavailability."""

    def give_up(self, error: Exception) -> bool:
        return False

    @abstractmethod
    def _load(self, url: str, ready_selector: Optional[str]) -> str:
        """Return the page source for ``url``."""

    def close(self) -> None:
        pass


class SeleniumDocumentSource(DocumentSource):
    """
    Renders pages in Chrome. One browser is reused for every fetch until
    ``close`` is called.
    """

    def __init__(self, config: ScraperConfig):
        super().__init__(config)
        self._driver = None

    @property
    def retry_exceptions(self) -> tuple:
        return (WebDriverException,)

    @property
    def driver(self):
        if self._driver is None:
            self._driver = webdriver.Chrome(options=self._options())
            self._driver.set_page_load_timeout(self.config.page_load_timeout)
        return self._driver

    def _options(self) -> Options:
        options = Options()
        if self.config.headless:
            options.add_argument(OrchestratorConfig.HEADLESS_ARGUMENT)
        for argument in OrchestratorConfig.CHROME_ARGUMENTS:
            options.add_argument(argument)
        options.add_argument(f"--user-agent={self.config.user_agent}")
        return options

    def _load(self, url: str, ready_selector: Optional[str]) -> str:
        driver = self.driver
        driver.get(url)

        # 1) Wait for full document.readyState
        try:
            WebDriverWait(driver, self.config.page_load_timeout).until(
                lambda d: d.execute_script(OrchestratorConfig.READY_STATE_SCRIPT)
                == OrchestratorConfig.READY_STATE_COMPLETE
            )
        except TimeoutException:
            # if still loading, give it a couple more seconds
            time.sleep(OrchestratorConfig.READY_STATE_GRACE_SECONDS)

        # 2) Then ensure the page's main container is present
        if ready_selector:
            try:
                WebDriverWait(driver, OrchestratorConfig.ELEMENT_WAIT_SECONDS).until(
                    EC.presence_of_element_located((By.CSS_SELECTOR, ready_selector))
                )
            except TimeoutException:
                logger.debug("%s not present on %s", ready_selector, url)
                time.sleep(OrchestratorConfig.ELEMENT_GRACE_SECONDS)

        return driver.page_source

    def close(self) -> None:
        if self._driver is not None:
            try:
                self._driver.quit()
            except WebDriverException as error:
                logger.warning("Error closing browser: %s", error)
            finally:
                self._driver = None


class RequestsDocumentSource(DocumentSource):
    """
    Plain HTTP fetches. Suitable for pages that need no script rendering.
    """

    def __init__(self, config: ScraperConfig, session: Optional[requests.Session] = None):
        super().__init__(config)
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": config.user_agent})

    @property
    def retry_exceptions(self) -> tuple:
        return (requests.RequestException,)

    def give_up(self, error: Exception) -> bool:
        # client errors other than rate limiting will not fix themselves
        response = getattr(error, "response", None)
        if response is None:
            return False
        return 400 <= response.status_code < 500 and response.status_code != 429

    def _load(self, url: str, ready_selector: Optional[str]) -> str:
        response = self.session.get(url, timeout=self.config.page_load_timeout)
        response.raise_for_status()
        return response.text

    def close(self) -> None:
        self.session.close()


def create_document_source(config: ScraperConfig) -> DocumentSource:
    """
    Build the document source named by ``config.fetcher``.
    """
    if config.fetcher == "selenium":
        return SeleniumDocumentSource(config)
    elif config.fetcher == "requests":
        return RequestsDocumentSource(config)
    else:
        raise ValueError(f"Unknown fetcher: {config.fetcher}")
