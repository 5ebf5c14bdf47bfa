"""
Fandom wiki search scraping.
"""

import logging
import re
from typing import List
from urllib.parse import quote

import aiohttp
from bs4 import BeautifulSoup

from config import WIKI_BASE_URL
from models import WikiSearchResult

logger = logging.getLogger(__name__)

SEARCH_PATH = "/wiki/Special:Search?scope=internal&navigationSearch=true&query="
DESCRIPTION_LIMIT = 100

_WHITESPACE_RE = re.compile(r"\s+")


def build_search_url(query: str) -> str:
    return f"{WIKI_BASE_URL}{SEARCH_PATH}{quote(query, safe='')}"


def extract_search_results(html: str) -> List[WikiSearchResult]:
    """Parse a search results page; results without a title are dropped"""
    soup = BeautifulSoup(html, "html.parser")
    results = []

    for element in soup.select(".unified-search__result"):
        title = ""
        url = ""
        description = ""

        title_element = element.select_one(".unified-search__result__title")
        if title_element is not None:
            title = title_element.get_text().strip()
            href = title_element.get("href") or ""
            url = f"{WIKI_BASE_URL}{href}" if href.startswith("/") else href

        snippet_element = element.select_one(".unified-search__result__snippet")
        if snippet_element is not None:
            description = _WHITESPACE_RE.sub(" ", snippet_element.get_text().strip())

        if title:
            results.append(WikiSearchResult(title=title, description=description, url=url))

    return results


def truncate_description(description: str, limit: int = DESCRIPTION_LIMIT) -> str:
    if len(description) > limit:
        return description[:limit - 3] + "..."
    return description


async def search_wiki(session: aiohttp.ClientSession, query: str) -> List[WikiSearchResult]:
    url = build_search_url(query)
    logger.debug(f"🔎 Wiki search: {url}")

    async with session.get(url) as response:
        response.raise_for_status()
        html = await response.text()

    return extract_search_results(html)
