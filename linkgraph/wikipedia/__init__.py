"""
Wikipedia interaction module.

Provides link scraping of live Wikipedia pages for graph population.
"""

from linkgraph.wikipedia.scraper import WikiPage, WikiScraper

__all__ = ["WikiPage", "WikiScraper"]
