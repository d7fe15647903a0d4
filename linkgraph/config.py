"""
Configuration constants for linkgraph.

All network settings and crawl limits are defined here.
Overrides are read from environment variables (scripts load .env first).
"""

import os

# =============================================================================
# Wikipedia Scraping Configuration
# =============================================================================

# Base URL for Wikipedia articles
WIKIPEDIA_BASE_URL = os.environ.get("WIKIPEDIA_BASE_URL", "https://en.wikipedia.org/wiki/")

# Rate limiting: minimum seconds between requests
# Set to 0 for max speed, 1.0 to be polite to Wikipedia
WIKIPEDIA_REQUEST_DELAY = float(os.environ.get("WIKIPEDIA_REQUEST_DELAY", "0.5"))

# Request timeout in seconds
WIKIPEDIA_TIMEOUT = 10

# Attempts per page before giving up on timeouts / dropped connections
WIKIPEDIA_MAX_RETRIES = 3

# User agent for requests (be a good citizen)
USER_AGENT = "linkgraph/0.1 (directed graph crawler)"

# =============================================================================
# Crawl Configuration
# =============================================================================

# Maximum link depth explored from the start article
CRAWL_MAX_DEPTH = int(os.environ.get("CRAWL_MAX_DEPTH", "2"))

# Hard cap on pages fetched per crawl
CRAWL_MAX_PAGES = int(os.environ.get("CRAWL_MAX_PAGES", "200"))

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
