"""Extraction pipelines, one per public operation"""

from .base import BaseScraper
from .channel import ChannelScraper
from .comments import CommentScraper
from .metadata import MetadataScraper
from .search import SearchScraper, validate_search_params
from .transcript import TranscriptScraper

__all__ = [
    "BaseScraper",
    "ChannelScraper",
    "CommentScraper",
    "MetadataScraper",
    "SearchScraper",
    "TranscriptScraper",
    "validate_search_params",
]
