from .browser import PageScraper, scrape_title
from .errors import ElementNotFound, NavigationFailure, ScrapeError, TargetNotFound
from .models import ExtractedTitle, ScrapeConfig

__all__ = [
    "PageScraper",
    "scrape_title",
    "ScrapeConfig",
    "ExtractedTitle",
    "ScrapeError",
    "NavigationFailure",
    "TargetNotFound",
    "ElementNotFound",
]
