"""Channel models"""

from typing import List
from pydantic import Field

from .base import ScrapedModel
from .video import VideoSummary


class ChannelInfo(ScrapedModel):
    """Channel header as rendered on the videos tab"""

    name: str = Field("", description="Channel name")
    subscribers: str = Field("", description="Subscriber count as displayed")
    video_count: str = Field("", description="Video count as displayed")


class ChannelVideosResult(ScrapedModel):
    """Videos listed on a channel's videos tab"""

    channel: ChannelInfo = Field(..., description="Channel information")
    videos: List[VideoSummary] = Field(default_factory=list, description="Videos, trimmed to the limit")
    total_loaded: int = Field(0, description="Videos loaded before trimming")
    has_more: bool = Field(False, description="Whether more videos were loaded than requested")


class ChannelVideoSearchResult(ScrapedModel):
    """Results of the search box inside a channel page"""

    query: str = Field(..., description="Search query")
    results: List[VideoSummary] = Field(default_factory=list, description="Matching videos, trimmed to the limit")
    total_found: int = Field(0, description="Matching videos before trimming")
