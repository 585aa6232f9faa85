"""Error types raised by the scraping pipelines"""


class ScraperError(Exception):
    """Base class for every failure surfaced by an extraction call"""


class NavigationError(ScraperError):
    """A page or a required element did not appear within its time budget"""


class ControlNotFoundError(ScraperError):
    """A load-bearing control (transcript button, channel search) was not found"""

    def __init__(self, control: str):
        self.control = control
        super().__init__(f"Could not find or click {control}")


class ParameterValidationError(ScraperError, ValueError):
    """A caller-supplied parameter is outside its allowed range"""


class EmptyResultError(ScraperError):
    """Extraction finished but produced no qualifying records"""
