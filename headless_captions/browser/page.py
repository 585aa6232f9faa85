"""Narrow capability interface over a Playwright page

Scrapers never touch Playwright directly: they read the DOM through item
counts and outerHTML snapshots and act through the click/type/scroll methods
here. Anything that offers the same coroutine methods (the test suite's fake
page, for one) can stand in for it.
"""

import logging
from typing import List, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..errors import NavigationError

logger = logging.getLogger(__name__)

_OUTER_HTML_JS = "elements => elements.map(element => element.outerHTML)"

_CLICK_BY_TEXT_JS = """
([selector, needle]) => {
  for (const element of document.querySelectorAll(selector)) {
    const text = (element.textContent || '').toLowerCase();
    const label = (element.getAttribute('aria-label') || '').toLowerCase();
    if (text.includes(needle) || label.includes(needle)) {
      element.click();
      return true;
    }
  }
  return false;
}
"""

_CLICK_CLOSEST_JS = """
([selector, ancestors]) => {
  for (const element of document.querySelectorAll(selector)) {
    for (const ancestor of ancestors) {
      const target = element.closest(ancestor);
      if (target) {
        target.click();
        return true;
      }
    }
  }
  return false;
}
"""

_DISPATCH_CLICK_JS = """
selector => {
  const element = document.querySelector(selector);
  if (element) {
    element.click();
    return true;
  }
  return false;
}
"""


class PlaywrightPage:
    """Page operations used by the scraping pipelines"""

    def __init__(self, page: Page):
        self._page = page

    @property
    def url(self) -> str:
        return self._page.url

    async def goto(self, url: str, timeout_ms: int, wait_until: str = "load") -> None:
        try:
            await self._page.goto(url, wait_until=wait_until, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise NavigationError(f"Timed out loading {url} after {timeout_ms}ms") from e
        except PlaywrightError as e:
            raise NavigationError(f"Failed to load {url}: {e.message}") from e

    async def wait_for_selector(self, selector: str, timeout_ms: int, visible: bool = False) -> None:
        """Wait for an element to appear

        Raises:
            NavigationError: If nothing matched within timeout_ms
        """
        try:
            await self._page.wait_for_selector(
                selector, timeout=timeout_ms, state="visible" if visible else "attached"
            )
        except PlaywrightTimeoutError as e:
            raise NavigationError(
                f"Timed out after {timeout_ms}ms waiting for {selector!r}"
            ) from e

    async def sleep(self, ms: int) -> None:
        await self._page.wait_for_timeout(ms)

    async def count(self, selector: str) -> int:
        return await self._page.locator(selector).count()

    async def outer_html(self, selector: str) -> List[str]:
        """outerHTML of every element matching selector, in document order"""
        return await self._page.locator(selector).evaluate_all(_OUTER_HTML_JS)

    async def content(self) -> str:
        return await self._page.content()

    async def click_if_visible(self, selector: str) -> bool:
        """Click the first match if it has a non-empty bounding box"""
        element = await self._page.query_selector(selector)
        if element is None:
            return False

        box = await element.bounding_box()
        if not box or box["width"] <= 0 or box["height"] <= 0:
            return False

        await element.click()
        return True

    async def click(self, selector: str, timeout_ms: int = 5000) -> None:
        await self._page.click(selector, timeout=timeout_ms)

    async def dispatch_click(self, selector: str) -> bool:
        """Fire a DOM click on the first match without visibility checks"""
        return await self._page.evaluate(_DISPATCH_CLICK_JS, selector)

    async def click_by_text(self, selector: str, needle: str) -> bool:
        """Click the first match whose text or aria-label contains needle"""
        return await self._page.evaluate(_CLICK_BY_TEXT_JS, [selector, needle.lower()])

    async def click_closest(self, selector: str, ancestors: Sequence[str]) -> bool:
        """Click the nearest matching ancestor of the first element that has one"""
        return await self._page.evaluate(_CLICK_CLOSEST_JS, [selector, list(ancestors)])

    async def fill(self, selector: str, text: str) -> None:
        await self._page.locator(selector).first.fill(text)

    async def press(self, key: str) -> None:
        await self._page.keyboard.press(key)

    async def scroll_to_bottom(self) -> None:
        await self._page.evaluate(
            "() => window.scrollTo(0, document.documentElement.scrollHeight)"
        )

    async def scroll_by(self, dy: int) -> None:
        await self._page.evaluate("dy => window.scrollBy(0, dy)", dy)
