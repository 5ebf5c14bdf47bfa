"""Tests for wiki search URL building and result scraping."""

from utils.wiki import build_search_url, extract_search_results, truncate_description


SEARCH_PAGE = """
<html><body>
<ul>
  <li class="unified-search__result">
    <a class="unified-search__result__title" href="/wiki/Iron_Leg">Iron Leg</a>
    <p class="unified-search__result__snippet">
      Iron Leg is a
      fighting style   focused on kicks.
    </p>
  </li>
  <li class="unified-search__result">
    <a class="unified-search__result__title" href="https://roblox-arcane-odyssey.fandom.com/wiki/Boxing">Boxing</a>
  </li>
  <li class="unified-search__result">
    <p class="unified-search__result__snippet">Orphan snippet without a title.</p>
  </li>
</ul>
</body></html>
"""


def test_build_search_url_escapes_query():
    url = build_search_url("Iron Leg & more")
    assert url.startswith("https://roblox-arcane-odyssey.fandom.com/wiki/Special:Search?")
    assert url.endswith("query=Iron%20Leg%20%26%20more")


def test_extract_search_results():
    results = extract_search_results(SEARCH_PAGE)
    assert [r.title for r in results] == ["Iron Leg", "Boxing"]

    iron_leg = results[0]
    assert iron_leg.url == "https://roblox-arcane-odyssey.fandom.com/wiki/Iron_Leg"
    assert iron_leg.description == "Iron Leg is a fighting style focused on kicks."

    boxing = results[1]
    assert boxing.url == "https://roblox-arcane-odyssey.fandom.com/wiki/Boxing"
    assert boxing.description == ""


def test_extract_search_results_empty_page():
    assert extract_search_results("<html><body><p>No results</p></body></html>") == []


def test_truncate_description():
    assert truncate_description("short") == "short"
    assert truncate_description("a" * 100) == "a" * 100
    truncated = truncate_description("a" * 101)
    assert len(truncated) == 100
    assert truncated.endswith("...")
