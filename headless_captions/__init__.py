"""Headless-browser extraction of YouTube transcripts, comments and listings"""

from typing import List, Optional, Sequence

from .errors import (
    ControlNotFoundError,
    EmptyResultError,
    NavigationError,
    ParameterValidationError,
    ScraperError,
)
from .models import (
    ChannelVideoSearchResult,
    ChannelVideosResult,
    CommentsResult,
    GlobalSearchResult,
    TranscriptSegment,
    VideoMetadataResult,
)
from .scrapers import (
    ChannelScraper,
    CommentScraper,
    MetadataScraper,
    SearchScraper,
    TranscriptScraper,
)

__version__ = "1.0.0"


async def get_transcript(video_id: str, lang: str = "en") -> List[TranscriptSegment]:
    return await TranscriptScraper().get_transcript(video_id, lang)


async def get_channel_videos(channel_ref: str, limit: int = 30) -> ChannelVideosResult:
    return await ChannelScraper().get_channel_videos(channel_ref, limit)


async def search_channel_videos(
    channel_ref: str, query: str, limit: int = 30
) -> ChannelVideoSearchResult:
    return await ChannelScraper().search_channel_videos(channel_ref, query, limit)


async def get_video_comments(
    video_id: str, limit: int = 50, sort_by: str = "top"
) -> CommentsResult:
    return await CommentScraper().get_video_comments(video_id, limit, sort_by)


async def get_video_metadata(
    video_id: str, expand_description: bool = True
) -> VideoMetadataResult:
    return await MetadataScraper().get_video_metadata(video_id, expand_description)


async def search_global(
    query: str,
    max_results: int = 10,
    result_types: Optional[Sequence[str]] = None,
) -> GlobalSearchResult:
    return await SearchScraper().search_global(query, max_results, result_types)


__all__ = [
    "ControlNotFoundError",
    "EmptyResultError",
    "NavigationError",
    "ParameterValidationError",
    "ScraperError",
    "get_channel_videos",
    "get_transcript",
    "get_video_comments",
    "get_video_metadata",
    "search_channel_videos",
    "search_global",
]
