"""Tests for the ranked selector resolution helpers."""

from headless_captions.extractors.selectors import (
    Locator,
    first_attr,
    first_element,
    first_of,
    first_text,
    soup_from_html,
)

HTML = """
<div id="root">
  <span class="empty">   </span>
  <span class="label">LIKE</span>
  <span class="count">42</span>
  <a class="link" href="/watch?v=abc">Watch</a>
  <img class="thumb" src="">
</div>
"""


class TestLocator:
    def test_text_value(self):
        soup = soup_from_html(HTML)
        assert Locator(".count")(soup) == "42"

    def test_missing_selector(self):
        soup = soup_from_html(HTML)
        assert Locator(".nope")(soup) is None

    def test_whitespace_only_is_empty(self):
        soup = soup_from_html(HTML)
        assert Locator(".empty")(soup) is None

    def test_attribute(self):
        soup = soup_from_html(HTML)
        assert Locator(".link", attr="href")(soup) == "/watch?v=abc"

    def test_empty_attribute(self):
        soup = soup_from_html(HTML)
        assert Locator(".thumb", attr="src")(soup) is None

    def test_accept_rejects(self):
        soup = soup_from_html(HTML)
        assert Locator(".label", accept=lambda v: "LIKE" not in v)(soup) is None


class TestFirstOf:
    def test_priority_order(self):
        soup = soup_from_html(HTML)
        assert first_text(soup, [".nope", ".empty", ".count", ".label"]) == "42"

    def test_all_fail(self):
        soup = soup_from_html(HTML)
        assert first_text(soup, [".nope", ".empty"]) == ""

    def test_accept_skips_to_next_candidate(self):
        soup = soup_from_html(HTML)
        assert first_text(soup, [".label", ".count"], accept=lambda v: v != "LIKE") == "42"

    def test_mixed_strategies(self):
        soup = soup_from_html(HTML)
        strategies = [Locator(".thumb", attr="src"), lambda node: "fallback"]
        assert first_of(soup, strategies) == "fallback"

    def test_first_attr(self):
        soup = soup_from_html(HTML)
        assert first_attr(soup, [".thumb", ".link"], "href") == "/watch?v=abc"

    def test_first_element_needs_text(self):
        soup = soup_from_html(HTML)
        element = first_element(soup, [".empty", ".link"])
        assert element is not None
        assert element["href"] == "/watch?v=abc"
