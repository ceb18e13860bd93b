from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

DEFAULT_URL = "https://www.youtube.com/watch?v=yV52TMdGkng"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.15; rv:107.0) "
    "Gecko/20100101 Firefox/107.0"
)
DEFAULT_SCREENSHOT_PATH = "screenshot.png"
# one of the last items to render on a watch page
DEFAULT_WAIT_SELECTOR = "ytd-compact-video-renderer"
DEFAULT_TITLE_SELECTOR = "#title.ytd-watch-metadata"
DEFAULT_HEADING_SELECTOR = "h1 > yt-formatted-string"


@dataclass(frozen=True)
class ScrapeConfig:
    """Everything one scrape run needs; the defaults reproduce the watch-page title grab."""

    url: str = DEFAULT_URL
    user_agent: str = DEFAULT_USER_AGENT
    screenshot_path: str = DEFAULT_SCREENSHOT_PATH
    wait_selector: str = DEFAULT_WAIT_SELECTOR
    title_selector: str = DEFAULT_TITLE_SELECTOR
    heading_selector: str = DEFAULT_HEADING_SELECTOR
    headless: bool = True
    # False keeps the historical order: the header lands after the first load
    user_agent_before_navigation: bool = False
    wait_until: str = "load"
    wait_timeout_ms: Optional[int] = None


@dataclass(frozen=True)
class ExtractedTitle:
    markup: str
    url: str

    @property
    def text(self) -> str:
        """Return the markup with tags stripped."""
        soup = BeautifulSoup(self.markup, "html.parser")
        return soup.get_text(" ", strip=True)

    def __str__(self) -> str:
        return self.markup
