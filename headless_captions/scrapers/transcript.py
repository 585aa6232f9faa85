"""Transcript extraction from the watch page's transcript panel"""

import logging
from typing import List

from ..browser.actions import click_optional, click_required, open_watch_page, scroll_down
from ..errors import EmptyResultError
from ..extractors.parsers import parse_transcript_segments
from ..extractors.transcript import derive_durations
from ..models import TranscriptSegment
from ..urls import extract_video_id, watch_url
from .base import BaseScraper

logger = logging.getLogger(__name__)

DESCRIPTION_MORE_SELECTORS = [
    "tp-yt-paper-button#expand",
    'tp-yt-paper-button[id="expand"]',
    "#expand",
    "#more",
    'yt-formatted-string:has-text("...more")',
    '[aria-label*="more"]',
]

TRANSCRIPT_BUTTON_SELECTORS = [
    'button[aria-label="Show transcript"]',
    'yt-button-shape button[aria-label="Show transcript"]',
    'button[title*="transcript" i]',
    'button[aria-label*="transcript" i]',
    'yt-button-shape[aria-label*="transcript" i]',
    '#button[aria-label*="transcript" i]',
    'ytd-button-renderer[aria-label*="transcript" i]',
]

SEGMENT_LIST_SELECTORS = [
    "ytd-transcript-segment-renderer",
    "ytd-transcript-body-renderer ytd-transcript-segment-renderer",
    "ytd-engagement-panel-section-list-renderer ytd-transcript-segment-renderer",
    "#segments-container ytd-transcript-segment-renderer",
    "ytd-transcript-segment-list-renderer ytd-transcript-segment-renderer",
    '[class*="transcript"][class*="segment"]',
]

SEGMENTS_READY_SELECTOR = "ytd-transcript-segment-renderer, ytd-transcript-body-renderer"

# How long each transcript button candidate may take to become visible
BUTTON_WAIT_MS = 3000


class TranscriptScraper(BaseScraper):
    """Scrape the transcript panel of a video"""

    async def get_transcript(self, video_id: str, lang: str = "en") -> List[TranscriptSegment]:
        """Extract the transcript of a video

        Args:
            video_id: Video ID or watch URL
            lang: Interface language for the watch page (hl parameter)

        Returns:
            Segments in display order, durations derived from successive starts

        Raises:
            ControlNotFoundError: If the "Show transcript" button cannot be clicked
            EmptyResultError: If the panel opened but no segments were found
            NavigationError: If the page or the panel did not load in time
        """
        video_id = extract_video_id(video_id)
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_watch_page(
                    page, watch_url(video_id, lang), settings, settings.player_settle_ms
                )
                await scroll_down(page, settings)

                if await click_optional(page, DESCRIPTION_MORE_SELECTORS, settings.action_settle_ms):
                    logger.info('Clicked "more" button')

                logger.info('Looking for "Show transcript" button...')
                await click_required(
                    page,
                    TRANSCRIPT_BUTTON_SELECTORS,
                    '"Show transcript" button',
                    wait_ms=BUTTON_WAIT_MS,
                    fallbacks=[
                        (
                            "text search",
                            lambda: page.click_by_text("button, yt-button-shape", "transcript"),
                        )
                    ],
                )

                logger.info("Waiting for transcript panel...")
                await page.sleep(settings.page_settle_ms)
                await page.wait_for_selector(
                    SEGMENTS_READY_SELECTOR, settings.selector_timeout_ms, visible=True
                )

                logger.info("Extracting transcript content...")
                raw = await self._extract_raw_segments(page)

        except Exception as e:
            logger.error("Error extracting transcript for %s: %s", video_id, e)
            raise

        segments = derive_durations(raw)
        logger.info("Successfully extracted %d transcript segments", len(segments))
        return segments

    async def _extract_raw_segments(self, page):
        htmls = []
        for selector in SEGMENT_LIST_SELECTORS:
            htmls = await page.outer_html(selector)
            if htmls:
                break

        raw = parse_transcript_segments(htmls)
        if not raw:
            raise EmptyResultError("No transcript data extracted")
        return raw
