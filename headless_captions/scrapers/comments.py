"""Comment section extraction"""

import logging

from ..browser.actions import open_watch_page
from ..errors import NavigationError, ParameterValidationError
from ..extractors.loader import collect_until_limit, trim_to_limit
from ..extractors.parsers import (
    parse_comment_items,
    parse_total_comments,
    parse_video_details,
)
from ..models import CommentsResult
from ..urls import extract_video_id, watch_url
from .base import BaseScraper

logger = logging.getLogger(__name__)

SORT_ORDERS = ("top", "newest")

COMMENTS_SECTION_SELECTOR = "ytd-comments"
COMMENT_THREAD_SELECTOR = "ytd-comment-thread-renderer"

SORT_MENU_SELECTORS = [
    "ytd-comments-header-renderer tp-yt-paper-dropdown-menu-light",
    "#sort-menu yt-sort-filter-sub-menu-renderer tp-yt-paper-button",
    "#sort-menu #label",
    "yt-sort-filter-sub-menu-renderer #label",
]
SORT_OPTION_SELECTOR = "tp-yt-paper-listbox tp-yt-paper-item, tp-yt-paper-listbox a"

COMMENTS_SCROLL_PX = 800


class CommentScraper(BaseScraper):
    """Scrape top-level comments below a video"""

    async def get_video_comments(
        self, video_id: str, limit: int = 50, sort_by: str = "top"
    ) -> CommentsResult:
        """Load comments until the limit is reached or loading stalls

        "newest" is requested through the sort menu on a best-effort basis;
        the resulting order is not checked.

        Raises:
            ParameterValidationError: If sort_by is unknown or the video ID is invalid
            NavigationError: If the comment section never attached
        """
        if sort_by not in SORT_ORDERS:
            raise ParameterValidationError(
                f"sortBy must be one of {', '.join(SORT_ORDERS)}"
            )
        video_id = extract_video_id(video_id)
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_watch_page(
                    page, watch_url(video_id), settings, settings.page_settle_ms
                )

                await page.scroll_by(COMMENTS_SCROLL_PX)
                await page.sleep(settings.page_settle_ms)

                try:
                    await page.wait_for_selector(
                        COMMENTS_SECTION_SELECTOR, settings.selector_timeout_ms
                    )
                except NavigationError as e:
                    raise NavigationError("Could not load comments section") from e

                await page.wait_for_selector(
                    COMMENT_THREAD_SELECTOR, settings.selector_timeout_ms, visible=True
                )

                total_comments = parse_total_comments(await page.content())

                if sort_by == "newest":
                    await self._sort_by_newest(page)

                async def extract():
                    return parse_comment_items(await page.outer_html(COMMENT_THREAD_SELECTOR))

                comments = await collect_until_limit(
                    page,
                    COMMENT_THREAD_SELECTOR,
                    extract,
                    limit,
                    max_wait_ms=settings.comments_load_max_wait_ms,
                    poll_interval_ms=settings.load_poll_interval_ms,
                )

                video = parse_video_details(await page.content(), video_id)

        except Exception as e:
            logger.error("Error getting comments for %s: %s", video_id, e)
            raise

        logger.info("Loaded %d comments", len(comments))
        return CommentsResult(
            video=video,
            comments=trim_to_limit(comments, limit),
            total_comments=total_comments,
            total_loaded=len(comments),
            has_more=len(comments) > limit,
            sort_by=sort_by,
        )

    async def _sort_by_newest(self, page) -> bool:
        for selector in SORT_MENU_SELECTORS:
            try:
                opened = await page.dispatch_click(selector)
            except Exception as e:
                logger.debug("Sort menu %r not clickable: %s", selector, e)
                continue
            if opened:
                break
        else:
            logger.warning("Could not open comment sort menu, keeping default order")
            return False

        await page.sleep(self.settings.action_settle_ms)
        if not await page.click_by_text(SORT_OPTION_SELECTOR, "newest"):
            logger.warning('Could not find "Newest first" option, keeping default order')
            return False

        await page.sleep(self.settings.page_settle_ms)
        logger.info("Sorted comments by newest")
        return True
