"""Comment models"""

from typing import List
from pydantic import Field

from .base import ScrapedModel
from .video import ChannelRef


class Comment(ScrapedModel):
    """A top-level comment thread"""

    author: str = Field(..., description="Author display name")
    author_url: str = Field("", description="Author channel URL")
    author_avatar: str = Field("", description="Author avatar URL")
    text: str = Field(..., description="Comment text")
    time: str = Field("", description="Relative publish time as displayed")
    likes: str = Field("0", description="Like count as displayed")
    reply_count: str = Field("0", description="Number of replies")


class VideoDetails(ScrapedModel):
    """Video fields shown alongside the comment section"""

    id: str = Field(..., description="YouTube video ID")
    title: str = Field("", description="Video title")
    channel: ChannelRef = Field(default_factory=ChannelRef, description="Owning channel")
    views: str = Field("", description="View count as displayed")
    upload_date: str = Field("", description="Upload date as displayed")
    like_count: str = Field("", description="Like count as displayed")


class CommentsResult(ScrapedModel):
    """Comments loaded for one video"""

    video: VideoDetails = Field(..., description="Video information")
    comments: List[Comment] = Field(default_factory=list, description="Comments, trimmed to the limit")
    total_comments: int = Field(0, description="Comment total from the section header")
    total_loaded: int = Field(0, description="Comments loaded before trimming")
    has_more: bool = Field(False, description="Whether more comments were loaded than requested")
    sort_by: str = Field("top", description="Requested sort order")
