"""Shared fixtures for all tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from headless_captions.config import Config  # noqa: E402
from headless_captions.errors import NavigationError  # noqa: E402


# ── Fake browser ───────────────────────────────────────────────────


class FakePage:
    """In-memory stand-in for PlaywrightPage.

    ``items`` maps a selector to every outerHTML string the page can ever
    show for it. ``batches`` maps a selector to (initial, step): only the
    first ``initial`` items are visible, and each scroll to the bottom
    reveals ``step`` more. Sleeping is instant and only recorded.
    """

    def __init__(
        self,
        items=None,
        batches=None,
        content="",
        clickable=(),
        text_clicks=(),
        missing=(),
        fail_goto=0,
    ):
        self.items = dict(items or {})
        self.batches = dict(batches or {})
        self.html = content
        self.clickable = set(clickable)
        self.text_clicks = set(text_clicks)
        self.missing = set(missing)
        self.fail_goto = fail_goto

        self.visited = []
        self.waited = []
        self.clicks = []
        self.filled = []
        self.pressed = []
        self.slept = []
        self.scrolls = 0

    @property
    def url(self):
        return self.visited[-1] if self.visited else "about:blank"

    async def goto(self, url, timeout_ms, wait_until="load"):
        self.visited.append(url)
        if self.fail_goto:
            self.fail_goto -= 1
            raise NavigationError(f"Navigation to {url} timed out after {timeout_ms}ms")

    async def wait_for_selector(self, selector, timeout_ms, visible=False):
        self.waited.append(selector)
        if selector in self.missing:
            raise NavigationError(f"Timed out waiting for {selector}")

    async def sleep(self, ms):
        self.slept.append(ms)

    def _visible(self, selector):
        everything = self.items.get(selector, [])
        if selector not in self.batches:
            return list(everything)
        initial, step = self.batches[selector]
        return list(everything[: initial + step * self.scrolls])

    async def count(self, selector):
        return len(self._visible(selector))

    async def outer_html(self, selector):
        return self._visible(selector)

    async def content(self):
        return self.html

    async def click_if_visible(self, selector):
        if selector in self.clickable:
            self.clicks.append(selector)
            return True
        return False

    async def click(self, selector, timeout_ms=5000):
        if selector not in self.clickable:
            raise RuntimeError(f"{selector} is not clickable")
        self.clicks.append(selector)

    async def dispatch_click(self, selector):
        return await self.click_if_visible(selector)

    async def click_by_text(self, selector, needle):
        if (selector, needle) in self.text_clicks:
            self.clicks.append(f"text:{needle}")
            return True
        return False

    async def click_closest(self, selector, ancestors):
        return await self.click_if_visible(selector)

    async def fill(self, selector, text):
        self.filled.append((selector, text))

    async def press(self, key):
        self.pressed.append(key)

    async def scroll_to_bottom(self):
        self.scrolls += 1

    async def scroll_by(self, dy):
        pass


class FakeSession:
    """Async context manager yielding a FakePage, recording teardown."""

    def __init__(self, page):
        self.page = page
        self.opened = False
        self.closed = False

    async def __aenter__(self):
        self.opened = True
        return self.page

    async def __aexit__(self, *args):
        self.closed = True


@pytest.fixture
def settings():
    """Config with a fast, deterministic retry policy."""
    settings = Config()
    settings.navigation_attempts = 2
    settings.navigation_retry_backoff = 0
    settings.load_poll_interval_ms = 1000
    settings.load_max_wait_ms = 5000
    settings.comments_load_max_wait_ms = 3000
    return settings


@pytest.fixture
def make_scraper(settings):
    """Build a scraper wired to a FakeSession around the given page."""

    def _make(scraper_cls, page):
        session = FakeSession(page)
        scraper = scraper_cls(settings=settings, session_factory=lambda: session)
        return scraper, session

    return _make


# ── HTML fixtures ──────────────────────────────────────────────────


def video_tile(video_id, title, views="1.2K views", age="2 days ago", duration="10:05"):
    return (
        "<ytd-rich-item-renderer>"
        f'<a id="thumbnail" href="/watch?v={video_id}"><img id="img" src="https://i.ytimg.com/vi/{video_id}/hq.jpg"></a>'
        f'<a id="video-title-link" href="/watch?v={video_id}"><yt-formatted-string id="video-title">{title}</yt-formatted-string></a>'
        f'<div id="metadata-line"><span>{views}</span><span>{age}</span></div>'
        f"<ytd-thumbnail-overlay-time-status-renderer><span>{duration}</span></ytd-thumbnail-overlay-time-status-renderer>"
        "</ytd-rich-item-renderer>"
    )


def comment_thread(author, text, likes="12", replies="3 replies"):
    return (
        "<ytd-comment-thread-renderer>"
        '<div id="author-thumbnail"><img src="https://yt3.ggpht.com/avatar.jpg"></div>'
        f'<a id="author-text" href="/{author}"><span>{author}</span></a>'
        '<a id="published-time-text">2 days ago</a>'
        f'<yt-attributed-string id="content-text">{text}</yt-attributed-string>'
        f'<span id="vote-count-middle">{likes}</span>'
        f'<div id="more-replies"><button>{replies}</button></div>'
        "</ytd-comment-thread-renderer>"
    )


def transcript_segment(timestamp, text):
    return (
        "<ytd-transcript-segment-renderer>"
        f'<div class="segment-timestamp">{timestamp}</div>'
        f'<yt-formatted-string class="segment-text">{text}</yt-formatted-string>'
        "</ytd-transcript-segment-renderer>"
    )


WATCH_PAGE_HTML = """
<html><body>
<div id="title"><h1><yt-formatted-string>My Test Video</yt-formatted-string></h1></div>
<div id="owner-name"><a href="/@creator">Creator Name</a></div>
<div id="info"><span class="view-count">1,234 views</span></div>
<div id="info-strings"><yt-formatted-string>Jan 15, 2024</yt-formatted-string></div>
<div id="segmented-like-button"><span>5.6K</span></div>
<div id="description-inline-expander"><yt-attributed-string>Full description here</yt-attributed-string></div>
<span class="ytp-time-duration">3:32</span>
<ytd-comments-header-renderer><h2><yt-formatted-string>1,234 Comments</yt-formatted-string></h2></ytd-comments-header-renderer>
</body></html>
"""

CHANNEL_PAGE_HTML = """
<html><body>
<ytd-channel-name><yt-formatted-string>Test Channel</yt-formatted-string></ytd-channel-name>
<span id="subscriber-count">1.2M subscribers</span>
<span id="videos-count">300 videos</span>
</body></html>
"""

SEARCH_VIDEO_HTML = """
<ytd-video-renderer>
<a id="thumbnail" href="/watch?v=abcdefghijk"><img src="https://i.ytimg.com/vi/abcdefghijk/hq.jpg"></a>
<h3><a id="video-title" href="/watch?v=abcdefghijk">Python Tutorial</a></h3>
<div id="metadata-line"><span>1M views</span><span>2 years ago</span></div>
<div id="channel-info"><div id="text"><a href="/@pychannel">Py Channel</a></div></div>
<ytd-thumbnail-overlay-time-status-renderer><span>10:05</span></ytd-thumbnail-overlay-time-status-renderer>
</ytd-video-renderer>
"""

SEARCH_CHANNEL_HTML = """
<ytd-channel-renderer>
<img src="https://yt3.ggpht.com/channel.jpg">
<div id="text"><a href="/@pychannel">Py Channel</a></div>
<span id="subscribers">1.5M subscribers</span>
<span id="video-count">420 videos</span>
</ytd-channel-renderer>
"""


@pytest.fixture
def watch_page_html():
    return WATCH_PAGE_HTML


@pytest.fixture
def channel_page_html():
    return CHANNEL_PAGE_HTML
