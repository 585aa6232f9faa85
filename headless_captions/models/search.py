"""Global search result models"""

from typing import Annotated, List, Literal, Union
from pydantic import Field

from .base import ScrapedModel


class VideoSearchResult(ScrapedModel):
    """A video row on the search results page"""

    type: Literal["video"] = "video"
    id: str = Field(..., description="YouTube video ID")
    title: str = Field(..., description="Video title")
    url: str = Field(..., description="Watch page URL")
    thumbnail: str = Field("", description="Thumbnail URL")
    channel: str = Field("", description="Channel name")
    views: str = Field("", description="View count as displayed")
    upload_time: str = Field("", description="Relative upload time as displayed")
    duration: str = Field("", description="Duration badge text")


class ChannelSearchResult(ScrapedModel):
    """A channel row on the search results page"""

    type: Literal["channel"] = "channel"
    id: str = Field(..., description="Channel ID or handle")
    title: str = Field(..., description="Channel name")
    url: str = Field(..., description="Channel URL")
    thumbnail: str = Field("", description="Channel avatar URL")
    subscribers: str = Field("", description="Subscriber count as displayed")
    video_count: str = Field("", description="Video count as displayed")


SearchResult = Annotated[
    Union[VideoSearchResult, ChannelSearchResult], Field(discriminator="type")
]


class GlobalSearchResult(ScrapedModel):
    """Site-wide search results"""

    query: str = Field(..., description="Trimmed search query")
    result_types: List[str] = Field(default_factory=lambda: ["all"], description="Requested result types")
    max_results: int = Field(10, description="Requested maximum number of results")
    total_found: int = Field(0, description="Number of results returned")
    results: List[SearchResult] = Field(default_factory=list, description="Videos first, then channels")
