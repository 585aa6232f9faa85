"""Site-wide search results page"""

import logging
from typing import List, Optional, Sequence

from ..browser.actions import open_listing_page
from ..errors import ParameterValidationError
from ..extractors.parsers import parse_search_results
from ..models import GlobalSearchResult
from ..urls import search_url
from .base import BaseScraper

logger = logging.getLogger(__name__)

RESULT_TYPES = ("all", "videos", "channels")
MIN_RESULTS = 1
MAX_RESULTS = 20

RESULTS_CONTAINER_SELECTOR = "#contents"
VIDEO_RESULT_SELECTOR = "#contents ytd-video-renderer"
CHANNEL_RESULT_SELECTOR = "#contents ytd-channel-renderer"


def validate_search_params(
    query: str, max_results: int, result_types: Optional[Sequence[str]]
) -> List[str]:
    """Check search arguments, returning the normalized result types

    Raises:
        ParameterValidationError: On a blank query, an out-of-range
            max_results or an unknown result type
    """
    if not isinstance(query, str) or not query.strip():
        raise ParameterValidationError("Search query cannot be empty")

    if (
        isinstance(max_results, bool)
        or not isinstance(max_results, int)
        or not MIN_RESULTS <= max_results <= MAX_RESULTS
    ):
        raise ParameterValidationError(
            f"maxResults must be between {MIN_RESULTS} and {MAX_RESULTS}"
        )

    if isinstance(result_types, str):
        result_types = [result_types]
    types = list(result_types) if result_types else ["all"]
    unknown = [t for t in types if t not in RESULT_TYPES]
    if unknown:
        raise ParameterValidationError(
            f"Unknown result type(s): {', '.join(unknown)}. "
            f"Expected any of {', '.join(RESULT_TYPES)}"
        )
    return types


class SearchScraper(BaseScraper):
    """Scrape the global search results page"""

    async def search_global(
        self,
        query: str,
        max_results: int = 10,
        result_types: Optional[Sequence[str]] = None,
    ) -> GlobalSearchResult:
        """Search the whole site for videos and/or channels

        Args:
            query: Search terms
            max_results: Number of results to return, 1 to 20
            result_types: Any of "all", "videos", "channels"; defaults to ["all"]

        Returns:
            GlobalSearchResult with video results ahead of channel results
        """
        types = validate_search_params(query, max_results, result_types)
        query = query.strip()
        want_videos = "all" in types or "videos" in types
        want_channels = "all" in types or "channels" in types
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_listing_page(page, search_url(query), settings)
                await page.wait_for_selector(
                    RESULTS_CONTAINER_SELECTOR, settings.content_timeout_ms
                )

                video_htmls = (
                    await page.outer_html(VIDEO_RESULT_SELECTOR) if want_videos else []
                )
                channel_htmls = (
                    await page.outer_html(CHANNEL_RESULT_SELECTOR) if want_channels else []
                )

        except Exception as e:
            logger.error("Error searching for %r: %s", query, e)
            raise

        results = parse_search_results(video_htmls, channel_htmls, max_results)
        logger.info("Found %d search results for %r", len(results), query)
        return GlobalSearchResult(
            query=query,
            result_types=types,
            max_results=max_results,
            total_found=len(results),
            results=results,
        )
