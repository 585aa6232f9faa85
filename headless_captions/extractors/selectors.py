"""Ranked field resolution over parsed DOM fragments

The site renders different markup across experiment cohorts, locales and
surfaces, so every field is described by an ordered list of candidate
locators. Resolution walks the list and keeps the first non-empty value.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, Union

from bs4 import BeautifulSoup, Tag

Node = Union[BeautifulSoup, Tag]
Strategy = Callable[[Node], Optional[str]]


def soup_from_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def node_text(element: Optional[Tag]) -> str:
    """Trimmed text content of an element, or an empty string"""
    if element is None:
        return ""
    return element.get_text().strip()


@dataclass(frozen=True)
class Locator:
    """One candidate for a field: a CSS selector, optionally an attribute

    ``accept`` filters out matches whose trimmed value is present but wrong
    (a timestamp where text is expected, a "LIKE" label instead of a count).
    """

    selector: str
    attr: Optional[str] = None
    accept: Optional[Callable[[str], bool]] = None

    def __call__(self, node: Node) -> Optional[str]:
        element = node.select_one(self.selector)
        if element is None:
            return None

        if self.attr:
            raw = element.get(self.attr)
            if isinstance(raw, list):
                raw = " ".join(raw)
            value = (raw or "").strip()
        else:
            value = node_text(element)

        if not value:
            return None
        if self.accept is not None and not self.accept(value):
            return None
        return value


def first_of(node: Node, strategies: Iterable[Strategy]) -> str:
    """Return the first non-empty value produced by the strategies, else ''"""
    for strategy in strategies:
        value = strategy(node)
        if value:
            return value
    return ""


def first_text(node: Node, selectors: Sequence[str], accept: Optional[Callable[[str], bool]] = None) -> str:
    return first_of(node, [Locator(selector, accept=accept) for selector in selectors])


def first_attr(node: Node, selectors: Sequence[str], attr: str) -> str:
    return first_of(node, [Locator(selector, attr=attr) for selector in selectors])


def first_element(node: Node, selectors: Sequence[str]) -> Optional[Tag]:
    """First element with non-empty text among the selectors"""
    for selector in selectors:
        element = node.select_one(selector)
        if element is not None and node_text(element):
            return element
    return None
