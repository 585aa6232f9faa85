"""Record parsers over HTML snapshots of the rendered page

Each parser receives outerHTML strings captured from the live DOM (one per
item) or the serialised document, and maps them to models. Records that lack
their required fields are dropped; missing optional fields become ''.
"""

import re
from typing import List, Optional, Sequence, Tuple, Union

from bs4 import Tag

from ..models import (
    ChannelInfo,
    ChannelRef,
    ChannelSearchResult,
    Comment,
    VideoDetails,
    VideoInfo,
    VideoSearchResult,
    VideoSummary,
)
from ..urls import absolute_url, channel_id_from_href, video_id_from_href, watch_url
from .selectors import Node, first_attr, first_element, first_text, node_text, soup_from_html
from .transcript import is_bare_timestamp, looks_like_timestamp, parse_timestamp

# ── Selector candidates ────────────────────────────────────────────

CHANNEL_NAME_SELECTORS = [
    "ytd-channel-name yt-formatted-string",
    "#channel-name yt-formatted-string",
    ".ytd-channel-name",
    "#text.ytd-channel-name",
    "yt-formatted-string.ytd-channel-name",
    "yt-page-header-renderer h1",
]

VIDEO_TITLE_SELECTORS = [
    "h1.ytd-video-primary-info-renderer yt-formatted-string",
    "h1.ytd-video-primary-info-renderer",
    "#title h1",
    ".ytd-video-primary-info-renderer h1",
    "ytd-watch-metadata h1 yt-formatted-string",
]

DESCRIPTION_SELECTORS = [
    ".ytd-expandable-video-description-body-renderer",
    "#description-inline-expander yt-formatted-string",
    "#description yt-formatted-string",
    ".ytd-video-secondary-info-renderer #description",
    "#description-inline-expander yt-attributed-string",
]

UPLOAD_DATE_SELECTORS = [
    "#info-strings yt-formatted-string",
    "#info .date",
    ".ytd-video-primary-info-renderer #info-strings",
]

VIEW_COUNT_SELECTORS = [
    "#info .view-count",
    ".ytd-video-primary-info-renderer .view-count",
    "#count .view-count",
]

DETAILS_VIEW_COUNT_SELECTORS = [
    "#info .view-count",
    ".view-count",
    ".ytd-video-primary-info-renderer .view-count",
]

LIKE_COUNT_SELECTORS = [
    '#top-level-buttons-computed button[aria-label*="like"] span',
    "#segmented-like-button span",
    'button[aria-label*="like"] .yt-spec-button-shape-next__button-text-content',
]

OWNER_SELECTORS = [
    "#owner-name a",
    ".ytd-channel-name a",
    "ytd-channel-name a",
    "#channel-name yt-formatted-string",
]

PLAYER_DURATION_SELECTORS = [
    ".ytp-time-duration",
    "ytd-thumbnail-overlay-time-status-renderer span",
    ".ytd-thumbnail-overlay-time-status-renderer",
]

COMMENT_COUNT_SELECTORS = [
    "ytd-comments-header-renderer h2 yt-formatted-string",
    "ytd-comments-header-renderer #count yt-formatted-string",
]

SEGMENT_TIMESTAMP_SELECTORS = [
    ".segment-timestamp",
    '[class*="timestamp"]',
    ".ytd-transcript-segment-renderer:first-child",
    "div:first-child",
]

SEGMENT_TEXT_SELECTORS = [
    ".segment-text",
    "yt-formatted-string.segment-text",
    '[class*="segment-text"]',
    "yt-formatted-string:last-child",
    ".ytd-transcript-segment-renderer:last-child",
]

DURATION_BADGE_SELECTORS = [
    "ytd-thumbnail-overlay-time-status-renderer span",
    ".video-time",
    "badge-shape .badge-shape-wiz__text",
]


def _root(html: str) -> Node:
    """The captured element itself, so lookups only see its descendants"""
    soup = soup_from_html(html)
    container = soup.body or soup
    for child in container.children:
        if isinstance(child, Tag):
            return child
    return soup


def _not_like_label(text: str) -> bool:
    return "LIKE" not in text


# ── Listings ───────────────────────────────────────────────────────


def parse_video_item(html: str) -> Optional[VideoSummary]:
    """Parse one channel-tab tile (ytd-rich-item-renderer)"""
    item = _root(html)

    href = first_attr(item, ["a#video-title-link", "a#thumbnail", "a#video-title"], "href")
    video_id = video_id_from_href(href)
    title = first_text(item, ["#video-title", "a#video-title-link", "h3 a"])
    if not video_id or not title:
        return None

    spans = item.select("#metadata-line span")
    views = node_text(spans[0]) if spans else ""
    upload_time = node_text(spans[-1]) if spans else ""

    return VideoSummary(
        id=video_id,
        title=title,
        views=views,
        upload_time=upload_time,
        duration=first_text(item, DURATION_BADGE_SELECTORS),
        thumbnail=absolute_url(first_attr(item, ["img#img", "yt-image img", "img"], "src")),
        url=watch_url(video_id),
    )


def parse_video_items(htmls: Sequence[str]) -> List[VideoSummary]:
    return [video for video in map(parse_video_item, htmls) if video is not None]


def parse_channel_search_item(html: str) -> Optional[VideoSummary]:
    """Parse one row of a channel's in-page search results"""
    item = _root(html)

    href = first_attr(item, ["a#video-title", "a#video-title-link"], "href")
    video_id = video_id_from_href(href)
    title = first_text(item, ["#video-title"])
    if not video_id or not title:
        return None

    return VideoSummary(
        id=video_id,
        title=title,
        views=first_text(item, ["#metadata-line span:first-child", ".view-count"]),
        upload_time=first_text(item, ["#metadata-line span:last-child", ".published-time"]),
        duration=first_text(item, DURATION_BADGE_SELECTORS),
        thumbnail=absolute_url(first_attr(item, ["img#img", "img"], "src")),
        url=watch_url(video_id),
    )


def parse_channel_search_items(htmls: Sequence[str]) -> List[VideoSummary]:
    return [video for video in map(parse_channel_search_item, htmls) if video is not None]


def parse_channel_info(html: str) -> ChannelInfo:
    page = soup_from_html(html)
    return ChannelInfo(
        name=first_text(page, CHANNEL_NAME_SELECTORS),
        subscribers=first_text(page, ["#subscriber-count"]),
        video_count=first_text(page, ["#videos-count"]),
    )


# ── Comments ───────────────────────────────────────────────────────


def parse_comment_item(html: str) -> Optional[Comment]:
    """Parse one ytd-comment-thread-renderer"""
    thread = _root(html)

    author_element = first_element(thread, ["#author-text", "a#author-text", "#header-author h3 a"])
    author = node_text(author_element)
    text = first_text(thread, ["#content-text", "#content #content-text"])
    if not author or not text:
        return None

    reply_text = first_text(thread, ["#more-replies", "#more-replies-sub-thread"])
    reply_match = re.search(r"\d+", reply_text)

    return Comment(
        author=author,
        author_url=absolute_url(author_element.get("href", "")) if author_element else "",
        author_avatar=absolute_url(first_attr(thread, ["#author-thumbnail img", "#author-thumbnail-button img"], "src")),
        text=text,
        time=first_text(thread, ["#published-time-text"]),
        likes=first_text(thread, ["#vote-count-middle"]) or "0",
        reply_count=reply_match.group(0) if reply_match else "0",
    )


def parse_comment_items(htmls: Sequence[str]) -> List[Comment]:
    return [comment for comment in map(parse_comment_item, htmls) if comment is not None]


def parse_total_comments(html: str) -> int:
    """Comment total from the section header, 0 when absent"""
    header = first_text(soup_from_html(html), COMMENT_COUNT_SELECTORS)
    match = re.search(r"[\d,]+", header)
    if not match:
        return 0
    digits = match.group(0).replace(",", "")
    return int(digits) if digits else 0


# ── Watch page ─────────────────────────────────────────────────────


def _owner(page: Node) -> ChannelRef:
    element = first_element(page, OWNER_SELECTORS)
    if element is None:
        return ChannelRef()
    return ChannelRef(name=node_text(element), url=absolute_url(element.get("href", "")))


def parse_video_details(html: str, video_id: str) -> VideoDetails:
    """Video fields shown next to the comment section"""
    page = soup_from_html(html)
    return VideoDetails(
        id=video_id,
        title=first_text(page, VIDEO_TITLE_SELECTORS[:3]),
        channel=_owner(page),
        views=first_text(page, DETAILS_VIEW_COUNT_SELECTORS),
        upload_date=first_text(page, UPLOAD_DATE_SELECTORS),
        like_count=first_text(page, LIKE_COUNT_SELECTORS[:2], accept=_not_like_label),
    )


def parse_video_page(html: str, video_id: str) -> Tuple[VideoInfo, ChannelRef]:
    """Full metadata of a watch page; title is empty when the video is missing"""
    page = soup_from_html(html)
    video = VideoInfo(
        id=video_id,
        title=first_text(page, VIDEO_TITLE_SELECTORS),
        description=first_text(page, DESCRIPTION_SELECTORS),
        upload_date=first_text(page, UPLOAD_DATE_SELECTORS),
        view_count=first_text(page, VIEW_COUNT_SELECTORS),
        like_count=first_text(page, LIKE_COUNT_SELECTORS, accept=_not_like_label),
        duration=first_text(page, PLAYER_DURATION_SELECTORS),
    )
    return video, _owner(page)


# ── Transcript ─────────────────────────────────────────────────────


def parse_transcript_segment(html: str) -> Optional[Tuple[str, str]]:
    """(start seconds, text) for one transcript line, None when it has no text"""
    segment = _root(html)

    timestamp = first_text(segment, SEGMENT_TIMESTAMP_SELECTORS, accept=looks_like_timestamp)
    text = first_text(
        segment, SEGMENT_TEXT_SELECTORS, accept=lambda value: not is_bare_timestamp(value)
    )
    if not text:
        text = node_text(segment).replace(timestamp, "", 1).strip()
    if not text:
        return None

    return str(parse_timestamp(timestamp)), text


def parse_transcript_segments(htmls: Sequence[str]) -> List[Tuple[str, str]]:
    return [raw for raw in map(parse_transcript_segment, htmls) if raw is not None]


# ── Global search ──────────────────────────────────────────────────


def parse_search_video(html: str) -> Optional[VideoSearchResult]:
    element = _root(html)

    title_link = element.select_one("h3 a")
    title = node_text(title_link)
    url = absolute_url(title_link.get("href", "")) if title_link is not None else ""
    video_id = video_id_from_href(url)
    if not title or not url or not video_id:
        return None

    spans = element.select("#metadata-line span")
    views = node_text(spans[0]) if len(spans) >= 2 else ""
    upload_time = node_text(spans[1]) if len(spans) >= 2 else ""

    return VideoSearchResult(
        id=video_id,
        title=title,
        url=url,
        channel=first_text(element, ['#text a[href*="/channel/"]', '#text a[href*="/@"]']),
        views=views,
        upload_time=upload_time,
        duration=first_text(element, DURATION_BADGE_SELECTORS[:1]),
        thumbnail=absolute_url(first_attr(element, ["img"], "src")),
    )


def parse_search_channel(html: str) -> Optional[ChannelSearchResult]:
    element = _root(html)

    title_link = element.select_one("#text a")
    title = node_text(title_link)
    url = absolute_url(title_link.get("href", "")) if title_link is not None else ""
    channel_id = channel_id_from_href(url)
    if not title or not url or not channel_id:
        return None

    return ChannelSearchResult(
        id=channel_id,
        title=title,
        url=url,
        subscribers=first_text(element, ["#subscribers"]),
        video_count=first_text(element, ["#video-count"]),
        thumbnail=absolute_url(first_attr(element, ["img"], "src")),
    )


def parse_search_results(
    video_htmls: Sequence[str], channel_htmls: Sequence[str], max_results: int
) -> List[Union[VideoSearchResult, ChannelSearchResult]]:
    """Videos first, then channels, never more than max_results in total"""
    candidates = [(parse_search_video, html) for html in video_htmls]
    candidates += [(parse_search_channel, html) for html in channel_htmls]

    results = []
    for parse, html in candidates:
        if len(results) >= max_results:
            break
        result = parse(html)
        if result is not None:
            results.append(result)
    return results
