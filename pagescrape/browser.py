import logging
import os
from typing import Optional

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .errors import ElementNotFound, NavigationFailure, TargetNotFound
from .models import ExtractedTitle, ScrapeConfig

logger = logging.getLogger(__name__)


class PageScraper:
    def __init__(self, config: Optional[ScrapeConfig] = None) -> None:
        """Create a single-page scraper; the browser starts on the first ``run``."""
        self.config = config or ScrapeConfig()
        self.playwright = None
        self.browser = None
        self.page = None

    async def __aenter__(self) -> "PageScraper":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()

    async def _ensure_page(self) -> None:
        """Lazily start Playwright, browser and page."""
        if self.page:
            return

        if not self.playwright:
            self.playwright = await async_playwright().start()

        if not self.browser:
            logger.info(f"Launching Chromium (headless={self.config.headless})")
            self.browser = await self.playwright.chromium.launch(
                headless=self.config.headless
            )

        if not self.page:
            if self.config.user_agent_before_navigation:
                self.page = await self.browser.new_page(user_agent=self.config.user_agent)
            else:
                self.page = await self.browser.new_page()

    async def _navigate(self) -> None:
        url = self.config.url
        logger.info(f"Navigating to URL: {url}")
        try:
            response = await self.page.goto(url, wait_until=self.config.wait_until)
        except PlaywrightError as e:
            error_msg = f"Error navigating to {url}: {str(e)}"
            logger.error(error_msg)
            raise NavigationFailure(error_msg, url=url) from e

        if response is not None and not response.ok:
            logger.warning(f"{url} answered with HTTP {response.status}")

    async def _apply_user_agent(self) -> None:
        if self.config.user_agent_before_navigation:
            return
        # The initial document has already been fetched; only later requests see this header.
        logger.warning(
            "User agent applied after navigation; the initial load of "
            f"{self.config.url} used the browser default"
        )
        await self.page.set_extra_http_headers({"User-Agent": self.config.user_agent})

    async def _wait_for_target(self) -> None:
        selector = self.config.wait_selector
        # present in the DOM is enough; visibility is not required
        kwargs = {"state": "attached"}
        if self.config.wait_timeout_ms is not None:
            kwargs["timeout"] = self.config.wait_timeout_ms
        logger.info(f"Waiting for selector: {selector}")
        try:
            await self.page.wait_for_selector(selector, **kwargs)
        except PlaywrightError as e:
            error_msg = f"Selector {selector} never appeared on {self.config.url}: {str(e)}"
            logger.error(error_msg)
            raise TargetNotFound(error_msg, url=self.config.url, selector=selector) from e

    async def _screenshot(self) -> None:
        path = self.config.screenshot_path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        await self.page.screenshot(path=path, full_page=True)
        logger.info(f"Saved screenshot to {path}")

    async def _extract_heading(self) -> str:
        url = self.config.url
        title = await self.page.query_selector(self.config.title_selector)
        if title is None:
            error_msg = f"Title element {self.config.title_selector} missing on {url}"
            logger.error(error_msg)
            raise ElementNotFound(error_msg, url=url, selector=self.config.title_selector)

        heading = await title.query_selector(self.config.heading_selector)
        if heading is None:
            error_msg = f"Heading element {self.config.heading_selector} missing on {url}"
            logger.error(error_msg)
            raise ElementNotFound(error_msg, url=url, selector=self.config.heading_selector)

        return await heading.inner_html()

    async def run(self) -> ExtractedTitle:
        """Load the configured page once and return the heading's inner HTML."""
        try:
            await self._ensure_page()
            await self._navigate()
            await self._apply_user_agent()
            await self._wait_for_target()
            await self._screenshot()
            markup = await self._extract_heading()
            logger.info(f"Successfully extracted title markup from {self.config.url}")
            return ExtractedTitle(markup=markup, url=self.config.url)
        finally:
            await self.cleanup()

    async def cleanup(self) -> None:
        if self.browser:
            try:
                await self.browser.close()
                logger.info("Playwright browser cleaned up successfully")
            except PlaywrightError as e:
                logger.error(f"Error during Playwright cleanup: {str(e)}")
        if self.playwright:
            try:
                await self.playwright.stop()
            except PlaywrightError as e:
                logger.error(f"Error stopping Playwright: {str(e)}")
        self.page = None
        self.browser = None
        self.playwright = None


async def scrape_title(config: Optional[ScrapeConfig] = None) -> ExtractedTitle:
    """Run one scrape with ``config`` and return the extracted title."""
    async with PageScraper(config) as scraper:
        return await scraper.run()
