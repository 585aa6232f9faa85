"""Video models"""

from datetime import datetime, timezone
from pydantic import Field

from .base import ScrapedModel


class VideoSummary(ScrapedModel):
    """A video tile from a listing page"""

    id: str = Field(..., description="YouTube video ID")
    title: str = Field(..., description="Video title")
    views: str = Field("", description="View count as displayed")
    upload_time: str = Field("", description="Relative upload time as displayed")
    duration: str = Field("", description="Duration badge text")
    thumbnail: str = Field("", description="Thumbnail URL")
    url: str = Field(..., description="Watch page URL")


class ChannelRef(ScrapedModel):
    """Channel owning a video"""

    name: str = Field("", description="Channel name")
    url: str = Field("", description="Channel URL")


class VideoInfo(ScrapedModel):
    """Primary video fields read from a watch page"""

    id: str = Field(..., description="YouTube video ID")
    title: str = Field(..., description="Video title")
    description: str = Field("", description="Video description")
    upload_date: str = Field("", description="Upload date as displayed")
    view_count: str = Field("", description="View count as displayed")
    like_count: str = Field("", description="Like count as displayed")
    duration: str = Field("", description="Duration from the player")


class ExtractionMetadata(ScrapedModel):
    """Metadata about the extraction process"""

    extracted_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), description="Extraction timestamp"
    )
    description_expanded: bool = Field(False, description="Whether the description was expanded")


class VideoMetadataResult(ScrapedModel):
    """Complete metadata for one video"""

    video: VideoInfo = Field(..., description="Video fields")
    channel: ChannelRef = Field(default_factory=ChannelRef, description="Owning channel")
    metadata: ExtractionMetadata = Field(default_factory=ExtractionMetadata, description="Extraction metadata")
