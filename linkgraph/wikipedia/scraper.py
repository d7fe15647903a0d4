"""
Wikipedia scraper for extracting article links from live pages.

Uses requests + BeautifulSoup. Transport failures surface as NetworkError
so crawlers can skip a page without catching requests internals.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from urllib.parse import quote, unquote, urljoin

import requests
from bs4 import BeautifulSoup

from linkgraph.config import (
    USER_AGENT,
    WIKIPEDIA_BASE_URL,
    WIKIPEDIA_MAX_RETRIES,
    WIKIPEDIA_REQUEST_DELAY,
    WIKIPEDIA_TIMEOUT,
)
from linkgraph.errors import NetworkError

logger = logging.getLogger(__name__)


@dataclass
class WikiPage:
    """
    A scraped Wikipedia page.

    Attributes:
        title: The article title (from page heading)
        url: Full URL of the page
        links: Article titles this page links to (main content only)
    """

    title: str
    url: str
    links: list[str]


class WikiScraper:
    """
    Scrapes Wikipedia pages to extract article links.

    Only links from the main article content are kept; navigation boxes,
    infoboxes, references and non-article namespaces are skipped.
    """

    ARTICLE_PATTERN = re.compile(r"^/wiki/([^#?]+)")

    # Titles get underscores converted to spaces before this check
    EXCLUDED_PREFIXES = (
        "Wikipedia:",
        "Help:",
        "Template:",
        "Template talk:",
        "Category:",
        "Portal:",
        "File:",
        "Special:",
        "Talk:",
        "User:",
        "User talk:",
        "Module:",
        "MediaWiki:",
        "Draft:",
        "MOS:",
        "WP:",
    )

    SKIP_CLASSES = frozenset({
        "navbox",
        "infobox",
        "sidebar",
        "references",
        "reflist",
        "refbegin",
        "mw-references-wrap",
        "toc",
        "vertical-navbox",
        "navigation-not-searchable",
    })

    def __init__(
        self,
        rate_limit: float = WIKIPEDIA_REQUEST_DELAY,
        timeout: float = WIKIPEDIA_TIMEOUT,
        max_retries: int = WIKIPEDIA_MAX_RETRIES,
        retry_backoff: float = 1.0,
        base_url: str = WIKIPEDIA_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            rate_limit: Minimum seconds between requests
            timeout: Per-request timeout in seconds
            max_retries: Attempts per page on timeouts / connection errors
            retry_backoff: Base seconds for exponential backoff between attempts
            base_url: Article URL prefix
            session: Pre-configured session (a new one is created if omitted)
        """
        if max_retries < 1:
            raise ValueError(f"max_retries must be >= 1, got {max_retries}")

        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})
        self._rate_limit = rate_limit
        self._timeout = timeout
        self._max_retries = max_retries
        self._retry_backoff = retry_backoff
        self._base_url = base_url
        self._last_request_time: float = 0

    def _wait_for_rate_limit(self) -> None:
        elapsed = time.time() - self._last_request_time
        if elapsed < self._rate_limit:
            time.sleep(self._rate_limit - elapsed)

    def title_to_url(self, title: str) -> str:
        """Convert article title to Wikipedia URL."""
        # Keep underscores and slashes (subpages) unencoded
        url_title = quote(title.replace(" ", "_"), safe="_/")
        return urljoin(self._base_url, url_title)

    def url_to_title(self, url: str) -> str | None:
        """Extract article title from Wikipedia URL."""
        if "/wiki/" not in url:
            return None
        path = url.split("/wiki/")[-1]
        path = path.split("?")[0].split("#")[0]
        return unquote(path).replace("_", " ")

    def _is_valid_article_link(self, href: str | None) -> bool:
        if not href:
            return False

        match = self.ARTICLE_PATTERN.match(href)
        if not match:
            return False

        title = unquote(match.group(1)).replace("_", " ")
        return not title.startswith(self.EXCLUDED_PREFIXES)

    def _extract_title_from_href(self, href: str) -> str:
        match = self.ARTICLE_PATTERN.match(href)
        if match:
            return unquote(match.group(1)).replace("_", " ")
        return ""

    def _fetch(self, url: str) -> str:
        """
        GET a URL, retrying timeouts and dropped connections.

        Raises:
            NetworkError: If no attempt got a response, or the response
                was an HTTP error
        """
        for attempt in range(self._max_retries):
            self._wait_for_rate_limit()
            try:
                response = self._session.get(url, timeout=self._timeout)
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError) as e:
                if attempt == self._max_retries - 1:
                    logger.debug(f"No response from {url} ({e})")
                    continue
                wait_time = self._retry_backoff * 2 ** attempt
                logger.debug(
                    f"No response from {url} ({e}), retry {attempt + 1}/{self._max_retries} "
                    f"in {wait_time:.1f}s"
                )
                time.sleep(wait_time)
                continue
            except requests.exceptions.RequestException as e:
                raise NetworkError(f"GET {url} ({e})") from e
            finally:
                self._last_request_time = time.time()

            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                raise NetworkError(f"GET {url} -> HTTP {response.status_code}") from e
            return response.text

        logger.warning(f"Giving up on {url} after {self._max_retries} attempts")
        raise NetworkError()

    def get_page(self, title: str) -> WikiPage:
        """
        Fetch and parse a Wikipedia page.

        Raises:
            NetworkError: If the page cannot be fetched
        """
        url = self.title_to_url(title)
        logger.debug(f"Fetching: {url}")
        return self._parse_page(self._fetch(url), url)

    def _parse_page(self, html: str, url: str) -> WikiPage:
        """Parse HTML and extract article links in document order."""
        soup = BeautifulSoup(html, "lxml")

        title_elem = soup.find("h1", {"id": "firstHeading"})
        title = title_elem.get_text(strip=True) if title_elem else self.url_to_title(url) or ""

        content = soup.find("div", {"id": "mw-content-text"})
        if not content:
            logger.warning(f"No content found for {url}")
            return WikiPage(title=title, url=url, links=[])

        parser_output = content.find("div", {"class": "mw-parser-output"}) or content

        links: list[str] = []
        seen: set[str] = set()

        for elem in parser_output.find_all(["p", "li", "td", "th", "dd"]):
            parent_classes: set[str] = set()
            for parent in elem.parents:
                parent_classes.update(parent.get("class") or [])
            if self.SKIP_CLASSES & parent_classes:
                continue

            for link in elem.find_all("a", href=True):
                href = link.get("href", "")
                if not self._is_valid_article_link(href):
                    continue
                link_title = self._extract_title_from_href(href)
                if link_title and link_title not in seen:
                    links.append(link_title)
                    seen.add(link_title)

        logger.debug(f"Found {len(links)} links on '{title}'")
        return WikiPage(title=title, url=url, links=links)

    def get_links(self, title: str) -> list[str]:
        """Get just the links from a Wikipedia page."""
        return self.get_page(title).links
