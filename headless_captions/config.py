"""Configuration management"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

WAIT_UNTIL_STATES = ("load", "domcontentloaded", "networkidle", "commit")


class Config:
    """Application configuration"""

    def __init__(self):
        # Browser Configuration
        self.browser_executable_path: Optional[str] = (
            os.getenv("BROWSER_EXECUTABLE_PATH") or None
        )
        self.headless = self._parse_bool(os.getenv("HEADLESS", "true"))
        self.viewport_width = int(os.getenv("VIEWPORT_WIDTH", "1920"))
        self.viewport_height = int(os.getenv("VIEWPORT_HEIGHT", "1080"))
        self.user_agent = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)

        # Timeouts (milliseconds)
        self.navigation_timeout_ms = int(os.getenv("NAVIGATION_TIMEOUT_MS", "60000"))
        self.content_timeout_ms = int(os.getenv("CONTENT_TIMEOUT_MS", "30000"))
        self.selector_timeout_ms = int(os.getenv("SELECTOR_TIMEOUT_MS", "10000"))

        # Playwright load state awaited by page.goto
        self.navigation_wait_until = os.getenv("NAVIGATION_WAIT_UNTIL", "load")

        # Navigation Retry Configuration
        self.navigation_attempts = int(os.getenv("NAVIGATION_ATTEMPTS", "2"))
        self.navigation_retry_backoff = float(
            os.getenv("NAVIGATION_RETRY_BACKOFF", "1.0")
        )

        # Settle delays (milliseconds)
        self.page_settle_ms = int(os.getenv("PAGE_SETTLE_MS", "3000"))
        self.player_settle_ms = int(os.getenv("PLAYER_SETTLE_MS", "5000"))
        self.scroll_settle_ms = int(os.getenv("SCROLL_SETTLE_MS", "2000"))
        self.action_settle_ms = int(os.getenv("ACTION_SETTLE_MS", "1000"))
        self.ad_settle_ms = int(os.getenv("AD_SETTLE_MS", "2000"))

        # Incremental loading
        self.load_poll_interval_ms = int(os.getenv("LOAD_POLL_INTERVAL_MS", "1000"))
        self.load_max_wait_ms = int(os.getenv("LOAD_MAX_WAIT_MS", "5000"))
        self.comments_load_max_wait_ms = int(
            os.getenv("COMMENTS_LOAD_MAX_WAIT_MS", "3000")
        )

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()

    def _parse_bool(self, value: str) -> bool:
        """Parse boolean from string"""
        return value.lower() in ("true", "1", "yes", "on")

    def validate(self) -> None:
        """Validate configuration"""
        if self.viewport_width < 1 or self.viewport_height < 1:
            raise ValueError("VIEWPORT_WIDTH and VIEWPORT_HEIGHT must be positive")

        if self.navigation_wait_until not in WAIT_UNTIL_STATES:
            raise ValueError(
                f"NAVIGATION_WAIT_UNTIL must be one of {', '.join(WAIT_UNTIL_STATES)}"
            )

        if self.navigation_attempts < 1:
            raise ValueError("NAVIGATION_ATTEMPTS must be at least 1")

        if self.load_poll_interval_ms < 1:
            raise ValueError("LOAD_POLL_INTERVAL_MS must be at least 1")

        for name in ("navigation_timeout_ms", "content_timeout_ms", "selector_timeout_ms"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name.upper()} cannot be negative")

        if self.browser_executable_path and not os.path.exists(
            self.browser_executable_path
        ):
            raise ValueError(
                f"BROWSER_EXECUTABLE_PATH does not exist: {self.browser_executable_path}"
            )


# Global configuration instance
config = Config()
