"""URL builders and input normalisation for video and channel references"""

import re
from typing import Optional
from urllib.parse import quote, urljoin

from .errors import ParameterValidationError

BASE_URL = "https://www.youtube.com"


def watch_url(video_id: str, lang: Optional[str] = None) -> str:
    """Build the watch page URL for a video, optionally pinning the UI language"""
    url = f"{BASE_URL}/watch?v={video_id}"
    if lang:
        url += f"&hl={quote(lang)}"
    return url


def search_url(query: str) -> str:
    return f"{BASE_URL}/results?search_query={quote(query.strip())}"


def absolute_url(href: str) -> str:
    """Resolve a possibly relative href against the site root"""
    if not href:
        return ""
    return urljoin(BASE_URL + "/", href)


def video_id_from_href(href: str) -> str:
    match = re.search(r"watch\?v=([^&]+)", href or "")
    return match.group(1) if match else ""


def channel_id_from_href(href: str) -> str:
    """Channel id from a /channel/<id> URL, else the handle from /@handle"""
    match = re.search(r"channel/([^/?#]+)", href or "") or re.search(
        r"@([^/?#]+)", href or ""
    )
    return match.group(1) if match else ""


def extract_video_id(video_input: str) -> str:
    """Extract video ID from various input formats

    Args:
        video_input: Video ID or URL

    Returns:
        Video ID (11 characters)

    Raises:
        ParameterValidationError: If video ID cannot be extracted
    """
    video_input = (video_input or "").strip()

    # Already a video ID (11 characters, alphanumeric + - and _)
    if re.match(r"^[a-zA-Z0-9_-]{11}$", video_input):
        return video_input

    patterns = [
        r"youtube\.com/watch\?(?:[^#]*&)?v=([a-zA-Z0-9_-]{11})",
        r"youtu\.be/([a-zA-Z0-9_-]{11})",
        r"youtube\.com/embed/([a-zA-Z0-9_-]{11})",
        r"youtube\.com/shorts/([a-zA-Z0-9_-]{11})",
    ]

    for pattern in patterns:
        match = re.search(pattern, video_input)
        if match:
            return match.group(1)

    raise ParameterValidationError(
        f"Invalid video input: {video_input!r}. "
        "Please provide a video ID or valid YouTube video URL."
    )


def _require_channel_ref(channel_ref: str) -> str:
    channel_ref = (channel_ref or "").strip()
    if not channel_ref:
        raise ParameterValidationError("Channel reference cannot be empty")
    return channel_ref


def channel_videos_url(channel_ref: str) -> str:
    """Map a channel reference to the URL of its videos tab

    Accepts a full URL, an @handle, a raw channel id (UC...) or a custom-URL slug.
    A full URL that already points at /videos is returned unchanged.
    """
    channel_ref = _require_channel_ref(channel_ref)

    if channel_ref.startswith("http"):
        if "/videos" in channel_ref:
            return channel_ref
        return re.sub(r"/?$", "/videos", channel_ref, count=1)
    if channel_ref.startswith("@"):
        return f"{BASE_URL}/{channel_ref}/videos"
    if channel_ref.startswith("UC"):
        return f"{BASE_URL}/channel/{channel_ref}/videos"
    return f"{BASE_URL}/c/{channel_ref}/videos"


def channel_home_url(channel_ref: str) -> str:
    """Map a channel reference to the channel's main page (no tab)"""
    channel_ref = _require_channel_ref(channel_ref)

    if channel_ref.startswith("http"):
        return re.sub(r"/videos/?$", "", channel_ref)
    if channel_ref.startswith("@"):
        return f"{BASE_URL}/{channel_ref}"
    if channel_ref.startswith("UC"):
        return f"{BASE_URL}/channel/{channel_ref}"
    return f"{BASE_URL}/c/{channel_ref}"
