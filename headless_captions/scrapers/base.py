"""Shared wiring for the scraping pipelines"""

from typing import AsyncContextManager, Callable, Optional

from ..browser.session import BrowserSession
from ..config import Config, config

SessionFactory = Callable[[], AsyncContextManager]


class BaseScraper:
    """Holds settings and the factory that opens one browser session per call"""

    def __init__(
        self,
        settings: Optional[Config] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        """Initialize scraper

        Args:
            settings: Configuration to use. If not provided, uses config.
            session_factory: Callable returning an async context manager that
                yields a page. Defaults to a new BrowserSession per call.
        """
        self.settings = settings or config
        self.session_factory = session_factory or (lambda: BrowserSession(self.settings))
