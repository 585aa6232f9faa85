"""Data models for scraped YouTube pages"""

from .transcript import TranscriptSegment, Transcript
from .video import VideoSummary, ChannelRef, VideoInfo, ExtractionMetadata, VideoMetadataResult
from .channel import ChannelInfo, ChannelVideosResult, ChannelVideoSearchResult
from .comment import Comment, VideoDetails, CommentsResult
from .search import VideoSearchResult, ChannelSearchResult, SearchResult, GlobalSearchResult

__all__ = [
    "TranscriptSegment",
    "Transcript",
    "VideoSummary",
    "ChannelRef",
    "VideoInfo",
    "ExtractionMetadata",
    "VideoMetadataResult",
    "ChannelInfo",
    "ChannelVideosResult",
    "ChannelVideoSearchResult",
    "Comment",
    "VideoDetails",
    "CommentsResult",
    "VideoSearchResult",
    "ChannelSearchResult",
    "SearchResult",
    "GlobalSearchResult",
]
