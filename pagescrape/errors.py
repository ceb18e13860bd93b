from typing import Optional


class ScrapeError(Exception):
    """Base class for failures of a single scrape run."""

    def __init__(self, message: str, url: str, selector: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url
        self.selector = selector


class NavigationFailure(ScrapeError):
    """The page could not be loaded (DNS, network, navigation timeout)."""


class TargetNotFound(ScrapeError):
    """The awaited selector never appeared within the wait bound."""


class ElementNotFound(ScrapeError):
    """An element expected after the wait was absent from the DOM."""
