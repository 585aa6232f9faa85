"""Incremental loading for lazily paginated lists"""

import logging
from typing import Awaitable, Callable, List, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def trim_to_limit(items: Sequence[T], limit: int) -> List[T]:
    """Truncate to the caller's limit; a non-positive limit yields nothing"""
    return list(items[: max(limit, 0)])


async def scroll_and_wait_for_more(
    page,
    item_selector: str,
    current_count: int,
    max_wait_ms: int = 5000,
    poll_interval_ms: int = 1000,
) -> int:
    """Scroll to the bottom and poll the item count until it grows

    Returns the new count as soon as it exceeds ``current_count``, or
    ``current_count`` unchanged once ``max_wait_ms`` worth of polls elapsed.
    """
    await page.scroll_to_bottom()

    polls = max(1, max_wait_ms // max(poll_interval_ms, 1))
    for _ in range(polls):
        await page.sleep(poll_interval_ms)
        new_count = await page.count(item_selector)
        if new_count > current_count:
            return new_count

    return current_count


async def collect_until_limit(
    page,
    item_selector: str,
    extract: Callable[[], Awaitable[List[T]]],
    limit: int,
    max_wait_ms: int = 5000,
    poll_interval_ms: int = 1000,
) -> List[T]:
    """Extract, scroll for more, repeat until the limit or stagnation

    ``extract`` re-reads every visible item each round. The loop ends when a
    round yields the same number of records as the previous one, or when the
    load step reports that no new DOM items appeared. The returned list is
    not trimmed.
    """
    items: List[T] = []
    previous_count = 0

    while len(items) < limit:
        items = await extract()

        if len(items) == previous_count:
            logger.debug("No new items after extraction round (%d)", previous_count)
            break

        previous_count = len(items)

        if previous_count < limit:
            dom_count = await page.count(item_selector)
            new_count = await scroll_and_wait_for_more(
                page, item_selector, dom_count, max_wait_ms, poll_interval_ms
            )
            if new_count == dom_count:
                logger.debug("Loading stalled at %d items", dom_count)
                break
            logger.info("Loaded %d items, want %d", new_count, limit)

    return items
