"""Navigation and UI interaction steps shared by the pipelines

Two kinds of click: best-effort steps (consent, ads, expanders, sort menus)
report a bool and never fail the pipeline; load-bearing controls (transcript
button, channel search) raise ControlNotFoundError when nothing matched.
"""

import logging
from typing import Awaitable, Callable, Optional, Sequence, Tuple

from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..config import Config
from ..errors import ControlNotFoundError, NavigationError

logger = logging.getLogger(__name__)

CONSENT_SELECTORS = [
    '[aria-label*="Accept all"]',
    '[aria-label*="Accept cookies"]',
    'button:has-text("Accept all")',
]

SKIP_AD_SELECTORS = [".ytp-ad-skip-button", ".ytp-skip-ad-button"]

PLAYER_SELECTOR = "#movie_player, video"

# Named alternative to a selector list, e.g. a text match run inside the page
Fallback = Tuple[str, Callable[[], Awaitable[bool]]]


async def navigate(page, url: str, settings: Config) -> None:
    """Load url, retrying on navigation failure

    Raises:
        NavigationError: If every attempt failed
    """
    logger.info("Navigating to %s", url)
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(settings.navigation_attempts),
        wait=wait_exponential(multiplier=settings.navigation_retry_backoff, max=8),
        retry=retry_if_exception_type(NavigationError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    ):
        with attempt:
            await page.goto(
                url,
                timeout_ms=settings.navigation_timeout_ms,
                wait_until=settings.navigation_wait_until,
            )


async def _click_first(page, selectors: Sequence[str], wait_ms: Optional[int] = None) -> Optional[str]:
    """Click the first visible candidate; returns the selector that worked"""
    for selector in selectors:
        try:
            if wait_ms:
                await page.wait_for_selector(selector, wait_ms, visible=True)
                await page.click(selector)
                return selector
            if await page.click_if_visible(selector):
                return selector
        except Exception as e:
            logger.debug("Selector %r not clickable: %s", selector, e)
    return None


async def click_optional(page, selectors: Sequence[str], settle_ms: int = 0) -> bool:
    """Best-effort click; never raises"""
    selector = await _click_first(page, selectors)
    if selector is None:
        return False

    logger.debug("Clicked %r", selector)
    if settle_ms:
        await page.sleep(settle_ms)
    return True


async def click_required(
    page,
    selectors: Sequence[str],
    control: str,
    wait_ms: Optional[int] = None,
    fallbacks: Sequence[Fallback] = (),
) -> str:
    """Click a control the rest of the pipeline depends on

    Tries each selector (waiting up to wait_ms for it to become visible), then
    each fallback strategy in order.

    Returns:
        The selector or fallback name that performed the click

    Raises:
        ControlNotFoundError: If no strategy clicked anything
    """
    selector = await _click_first(page, selectors, wait_ms)
    if selector is not None:
        logger.info("Clicked %s with selector: %s", control, selector)
        return selector

    for name, strategy in fallbacks:
        logger.info("Trying to find %s by %s...", control, name)
        try:
            clicked = await strategy()
        except Exception as e:
            logger.debug("Fallback %s failed: %s", name, e)
            continue
        if clicked:
            logger.info("Clicked %s by %s", control, name)
            return name

    raise ControlNotFoundError(control)


async def handle_cookie_consent(page, settings: Config) -> bool:
    if await click_optional(page, CONSENT_SELECTORS, settings.action_settle_ms):
        logger.info("Accepted cookies")
        return True
    return False


async def skip_ads(page, settings: Config) -> bool:
    if await click_optional(page, SKIP_AD_SELECTORS, settings.ad_settle_ms):
        logger.info("Skipped ad")
        return True
    return False


async def scroll_down(page, settings: Config, dy: int = 800) -> None:
    """Scroll part of the way down so lazily rendered sections attach"""
    await page.scroll_by(dy)
    await page.sleep(settings.scroll_settle_ms)


async def open_watch_page(page, url: str, settings: Config, settle_ms: int) -> None:
    """Navigate to a watch page, wait for the player, clear overlays, settle"""
    await navigate(page, url, settings)

    await page.wait_for_selector(PLAYER_SELECTOR, settings.content_timeout_ms)
    logger.info("Video player loaded")

    await handle_cookie_consent(page, settings)
    await skip_ads(page, settings)
    await page.sleep(settle_ms)


async def open_listing_page(page, url: str, settings: Config) -> None:
    """Navigate to a channel or results page, clear consent, settle"""
    await navigate(page, url, settings)
    await handle_cookie_consent(page, settings)
    await page.sleep(settings.page_settle_ms)
