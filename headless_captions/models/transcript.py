"""Transcript data models"""

from typing import List, Optional
from pydantic import Field, computed_field

from .base import ScrapedModel


class TranscriptSegment(ScrapedModel):
    """A single line of the transcript panel"""

    start: str = Field(..., description="Start offset in whole seconds")
    dur: str = Field(..., description="Duration in seconds, derived from the next segment")
    text: str = Field(..., description="The text content of this segment")


class Transcript(ScrapedModel):
    """Transcript of one video with its segments"""

    video_id: str = Field(..., description="YouTube video ID")
    language: Optional[str] = Field(None, description="Interface language requested (e.g., 'en')")
    segments: List[TranscriptSegment] = Field(default_factory=list, description="Transcript segments in display order")

    @computed_field
    @property
    def full_text(self) -> str:
        """Complete transcript text joined from all segments"""
        return " ".join(segment.text for segment in self.segments)

    @computed_field
    @property
    def word_count(self) -> int:
        """Approximate word count"""
        return len(self.full_text.split())

    @computed_field
    @property
    def character_count(self) -> int:
        """Total character count"""
        return len(self.full_text)
