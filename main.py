import argparse
import asyncio
import logging
import os
from typing import List, Optional

from rich.console import Console

from pagescrape import ScrapeError, scrape_title
from settings import get_setting, load_config

console = Console(stderr=True)
logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = os.path.join(
    os.path.expanduser("~"), "Documents", "page-scrape-logs", "page-scrape.log"
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load one page in a headless browser and print its title markup"
    )
    parser.add_argument("--url", help="page to load")
    parser.add_argument("--user-agent", dest="user_agent", help="user agent override")
    parser.add_argument("--screenshot", dest="screenshot_path", help="screenshot output path")
    parser.add_argument("--wait-selector", dest="wait_selector", help="element to wait for")
    parser.add_argument("--title-selector", dest="title_selector", help="title container element")
    parser.add_argument(
        "--heading-selector",
        dest="heading_selector",
        help="element inside the title container whose inner HTML is printed",
    )
    parser.add_argument("--wait-timeout-ms", dest="wait_timeout_ms", type=int, help="selector wait bound")
    parser.add_argument(
        "--wait-until",
        dest="wait_until",
        choices=["load", "domcontentloaded", "networkidle", "commit"],
        help="load state navigation waits for",
    )
    parser.add_argument(
        "--headful",
        dest="headless",
        action="store_false",
        default=None,
        help="show the browser window",
    )
    parser.add_argument(
        "--user-agent-before-navigation",
        dest="user_agent_before_navigation",
        action="store_true",
        default=None,
        help="apply the user agent to the initial request instead of after it",
    )
    parser.add_argument("--text", action="store_true", help="print plain text instead of markup")
    parser.add_argument(
        "--log-level",
        default=get_setting("log_level", "WARNING"),
        help="Logging level (debug, info, warning, error, critical)",
    )
    parser.add_argument("--log-file", default=get_setting("log_file", DEFAULT_LOG_FILE))
    return parser


def _setup_logging(log_level: str, log_file: str) -> None:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(), logging.FileHandler(log_file)],
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.log_level, args.log_file)

    config = load_config(
        url=args.url,
        user_agent=args.user_agent,
        screenshot_path=args.screenshot_path,
        wait_selector=args.wait_selector,
        title_selector=args.title_selector,
        heading_selector=args.heading_selector,
        wait_timeout_ms=args.wait_timeout_ms,
        wait_until=args.wait_until,
        headless=args.headless,
        user_agent_before_navigation=args.user_agent_before_navigation,
    )
    console.print(f"Scraping {config.url}", style="cyan", markup=False)

    try:
        title = asyncio.run(scrape_title(config))
    except ScrapeError as e:
        logger.error("scrape failed: %s", e)
        console.print(f"{type(e).__name__}: {e}", style="red", markup=False)
        return 1

    print(title.text if args.text else title.markup)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
