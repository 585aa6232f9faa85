"""Video metadata from the watch page"""

import logging

from ..browser.actions import click_optional, open_watch_page, scroll_down
from ..errors import EmptyResultError
from ..extractors.parsers import parse_video_page
from ..models import ExtractionMetadata, VideoMetadataResult
from ..urls import extract_video_id, watch_url
from .base import BaseScraper

logger = logging.getLogger(__name__)

DESCRIPTION_EXPAND_SELECTORS = ["#description-inline-expander #expand"]


class MetadataScraper(BaseScraper):
    async def get_video_metadata(
        self, video_id: str, expand_description: bool = True
    ) -> VideoMetadataResult:
        """Read title, description, counts and channel from a watch page

        Raises:
            EmptyResultError: If no title could be read
        """
        video_id = extract_video_id(video_id)
        settings = self.settings

        try:
            async with self.session_factory() as page:
                await open_watch_page(
                    page, watch_url(video_id), settings, settings.page_settle_ms
                )
                await scroll_down(page, settings)

                expanded = False
                if expand_description:
                    expanded = await click_optional(
                        page, DESCRIPTION_EXPAND_SELECTORS, settings.action_settle_ms
                    )
                    if expanded:
                        logger.info("Expanded description")

                video, channel = parse_video_page(await page.content(), video_id)

        except Exception as e:
            logger.error("Error getting metadata for %s: %s", video_id, e)
            raise

        if not video.title:
            raise EmptyResultError(
                "Could not extract video metadata - video may not exist or be private"
            )

        logger.info("Extracted metadata for %r", video.title)
        return VideoMetadataResult(
            video=video,
            channel=channel,
            metadata=ExtractionMetadata(description_expanded=expanded),
        )
