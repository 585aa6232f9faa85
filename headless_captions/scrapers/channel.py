"""Channel videos tab and in-channel search"""

import logging

from ..browser.actions import click_required, open_listing_page
from ..errors import ControlNotFoundError, NavigationError, ParameterValidationError
from ..extractors.loader import collect_until_limit, trim_to_limit
from ..extractors.parsers import (
    parse_channel_info,
    parse_channel_search_items,
    parse_video_items,
)
from ..models import ChannelVideoSearchResult, ChannelVideosResult
from ..urls import channel_home_url, channel_videos_url
from .base import BaseScraper

logger = logging.getLogger(__name__)

VIDEO_ITEM_SELECTOR = "ytd-rich-item-renderer"

CHANNEL_SEARCH_BUTTON_SELECTORS = [
    'ytd-channel-header-renderer yt-icon-button[aria-label*="Search"]',
    'ytd-channel-header-renderer button[aria-label*="Search"]',
    '#channel-header yt-icon-button[aria-label*="Search"]',
    "#channel-search button",
]

SEARCH_ICON_SELECTOR = 'ytd-channel-header-renderer yt-icon[icon="yt-icons:search"]'
# Scoped to the channel header first; the masthead has its own search box.
SEARCH_INPUT_SELECTORS = [
    "ytd-channel-header-renderer input",
    "#channel-search input",
    'input[placeholder*="Search"]',
]
SEARCH_INPUT_WAIT_MS = 5000

SEARCH_RESULTS_READY_SELECTOR = "ytd-video-renderer, ytd-rich-item-renderer"
SEARCH_RESULT_ITEM_SELECTORS = ["ytd-video-renderer", "ytd-rich-item-renderer"]


class ChannelScraper(BaseScraper):
    """Scrape a channel's videos tab and its search box"""

    async def get_channel_videos(self, channel_ref: str, limit: int = 30) -> ChannelVideosResult:
        """List a channel's most recent videos

        Args:
            channel_ref: Channel URL, @handle, UC... channel ID or custom slug
            limit: Maximum number of videos to return

        Returns:
            ChannelVideosResult with the header info and up to limit videos
        """
        url = channel_videos_url(channel_ref)
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_listing_page(page, url, settings)
                await page.wait_for_selector(VIDEO_ITEM_SELECTOR, settings.content_timeout_ms)

                channel = parse_channel_info(await page.content())
                logger.info("Channel: %s", channel.name or channel_ref)

                async def extract():
                    return parse_video_items(await page.outer_html(VIDEO_ITEM_SELECTOR))

                videos = await collect_until_limit(
                    page,
                    VIDEO_ITEM_SELECTOR,
                    extract,
                    limit,
                    max_wait_ms=settings.load_max_wait_ms,
                    poll_interval_ms=settings.load_poll_interval_ms,
                )

        except Exception as e:
            logger.error("Error getting channel videos for %s: %s", channel_ref, e)
            raise

        logger.info("Loaded %d videos from channel", len(videos))
        return ChannelVideosResult(
            channel=channel,
            videos=trim_to_limit(videos, limit),
            total_loaded=len(videos),
            has_more=len(videos) > limit,
        )

    async def search_channel_videos(
        self, channel_ref: str, query: str, limit: int = 30
    ) -> ChannelVideoSearchResult:
        """Run a query through the channel page's own search box

        Raises:
            ParameterValidationError: If the query is blank
            ControlNotFoundError: If the channel search control or its search box is missing
        """
        if not query or not query.strip():
            raise ParameterValidationError("Search query cannot be empty")

        url = channel_home_url(channel_ref)
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_listing_page(page, url, settings)

                await click_required(
                    page,
                    CHANNEL_SEARCH_BUTTON_SELECTORS,
                    "channel search button",
                    fallbacks=[
                        (
                            "search icon",
                            lambda: page.click_closest(
                                SEARCH_ICON_SELECTOR, ["button", "yt-icon-button"]
                            ),
                        )
                    ],
                )

                search_input = await self._find_search_input(page)
                await page.fill(search_input, query)
                await page.press("Enter")
                logger.info("Searching channel for %r", query)

                await page.sleep(settings.page_settle_ms)
                await page.wait_for_selector(
                    SEARCH_RESULTS_READY_SELECTOR, settings.content_timeout_ms
                )

                htmls = []
                for selector in SEARCH_RESULT_ITEM_SELECTORS:
                    htmls = await page.outer_html(selector)
                    if htmls:
                        break

        except Exception as e:
            logger.error("Error searching channel %s: %s", channel_ref, e)
            raise

        results = parse_channel_search_items(htmls)
        logger.info("Found %d matching videos", len(results))
        return ChannelVideoSearchResult(
            query=query,
            results=trim_to_limit(results, limit),
            total_found=len(results),
        )

    async def _find_search_input(self, page) -> str:
        for selector in SEARCH_INPUT_SELECTORS:
            try:
                await page.wait_for_selector(selector, SEARCH_INPUT_WAIT_MS)
            except NavigationError:
                logger.debug("Search input %r not found", selector)
                continue
            return selector
        raise ControlNotFoundError("channel search box")
