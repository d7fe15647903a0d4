"""
Breadth-first crawler that populates a DirectedGraph from a link source.

A link source is anything with get_links(title) -> list[str]; the
WikiScraper is the usual one. Pages that fail with NetworkError are logged
and skipped so a single bad page doesn't abort the crawl.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Protocol

from linkgraph.config import CRAWL_MAX_DEPTH, CRAWL_MAX_PAGES
from linkgraph.errors import NetworkError
from linkgraph.graph import DirectedGraph

logger = logging.getLogger(__name__)


class LinkSource(Protocol):
    def get_links(self, title: str) -> list[str]: ...


@dataclass
class CrawlResult:
    """
    Outcome of a crawl.

    Attributes:
        graph: The populated graph (page -> linked page edges)
        pages_fetched: Number of pages successfully fetched
        failed: Titles whose fetch raised NetworkError
        target_found: Whether the target appeared among fetched links
    """

    graph: DirectedGraph[str]
    pages_fetched: int = 0
    failed: list[str] = field(default_factory=list)
    target_found: bool = False

    def path(self, start: str, target: str) -> list[str]:
        """Shortest path within the crawled graph, or [] if none."""
        return self.graph.get_path(start, target)


class LinkCrawler:
    """
    Crawls outward from a start title, level by level.

    Args:
        source: Link source used to fetch each page's links
        max_depth: Pages further than this many links from start are
            added as nodes but never fetched
        max_pages: Maximum number of pages successfully fetched per
            crawl; failed fetches do not count
    """

    def __init__(
        self,
        source: LinkSource,
        max_depth: int = CRAWL_MAX_DEPTH,
        max_pages: int = CRAWL_MAX_PAGES,
    ) -> None:
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        if max_pages < 1:
            raise ValueError(f"max_pages must be >= 1, got {max_pages}")
        self._source = source
        self._max_depth = max_depth
        self._max_pages = max_pages

    def crawl(
        self,
        start: str,
        target: str | None = None,
        graph: DirectedGraph[str] | None = None,
    ) -> CrawlResult:
        """
        Crawl from start, stopping early once target is linked.

        Args:
            start: Title to start from
            target: Optional title; crawling stops as soon as a fetched
                page links to it
            graph: Existing graph to extend (a new one is created if omitted)

        Returns:
            CrawlResult with the populated graph and crawl statistics
        """
        result = CrawlResult(graph=graph if graph is not None else DirectedGraph())
        result.graph.add_node(start)

        if target is not None and start == target:
            result.target_found = True
            return result

        queue: deque[tuple[str, int]] = deque([(start, 0)])
        queued: set[str] = {start}

        while queue and result.pages_fetched < self._max_pages:
            title, depth = queue.popleft()

            try:
                links = self._source.get_links(title)
            except NetworkError as e:
                logger.warning(f"Failed to fetch '{title}': {e}")
                result.failed.append(title)
                continue

            result.pages_fetched += 1
            logger.debug(f"[{result.pages_fetched}] '{title}' (depth {depth}, {len(links)} links)")

            for link in links:
                result.graph.add_edge(title, link)

            if target is not None and target in links:
                result.target_found = True
                logger.info(f"Reached '{target}' after {result.pages_fetched} pages")
                break

            if depth + 1 > self._max_depth:
                continue
            for link in links:
                if link not in queued:
                    queued.add(link)
                    queue.append((link, depth + 1))

        logger.info(
            f"Crawl from '{start}' done: {result.pages_fetched} pages, "
            f"{len(result.graph)} nodes, {len(result.failed)} failures"
        )
        return result
