"""Browser session management and page interaction"""

from .page import PlaywrightPage
from .session import BrowserSession

__all__ = ["BrowserSession", "PlaywrightPage"]
