"""Tests for catalog search, suggestions and category listing."""

import dataclasses

import pytest

from phosphor.catalog import POPULAR_ICONS, Catalog, CatalogEntry, default_catalog


def small_catalog() -> Catalog:
    return Catalog(
        [
            CatalogEntry("house", "interface", ("home", "main", "dashboard")),
            CatalogEntry("heart", "social", ("like", "favorite", "love")),
            CatalogEntry("user", "people", ("person", "profile", "account")),
            CatalogEntry("gear", "interface", ("settings", "config", "preferences")),
            CatalogEntry("sparkle"),
        ]
    )


def test_default_catalog_matches_records():
    catalog = default_catalog()
    assert len(catalog) == len(POPULAR_ICONS)
    assert [entry.name for entry in catalog] == [record["name"] for record in POPULAR_ICONS]


def test_entries_are_immutable():
    entry = next(iter(default_catalog()))
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.name = "changed"


def test_search_matches_name_category_and_tags():
    catalog = small_catalog()
    assert [e.name for e in catalog.search("house", 10)] == ["house"]
    assert [e.name for e in catalog.search("interface", 10)] == ["house", "gear"]
    assert [e.name for e in catalog.search("favorite", 10)] == ["heart"]


def test_search_is_case_insensitive_and_truncated():
    catalog = small_catalog()
    assert [e.name for e in catalog.search("  INTERFACE ", 1)] == ["house"]


def test_search_preserves_catalog_order():
    results = default_catalog().search("arrow", 100)
    names = [entry.name for entry in results]
    assert names == ["arrow-left", "arrow-right", "download", "upload"]


def test_suggest_by_name_token():
    catalog = default_catalog()
    names = [entry.name for entry in catalog.suggest("arrow-up", 5)]
    assert names[:2] == ["arrow-left", "arrow-right"]


def test_suggest_when_query_contains_catalog_name():
    names = [entry.name for entry in small_catalog().suggest("hearts", 5)]
    assert "heart" in names


def test_suggest_by_tag_and_category():
    catalog = small_catalog()
    assert [e.name for e in catalog.suggest("settings", 5)] == ["gear"]
    assert [e.name for e in catalog.suggest("peop", 5)] == ["user"]


def test_suggest_respects_limit():
    assert len(default_catalog().suggest("a", 3)) == 3


def test_suggest_ignores_empty_tokens():
    # "--" splits into empty tokens, which must not match every entry
    assert small_catalog().suggest("zz--qq", 5) == []


def test_categories_sorted_with_counts():
    categories = small_catalog().categories()
    assert categories == [("interface", 2, "house"), ("people", 1, "user"), ("social", 1, "heart")]


def test_category_counts_cover_whole_catalog():
    catalog = default_catalog()
    assert sum(count for _, count, _ in catalog.categories()) == len(catalog)


def test_uncategorized_entry_displays_as_general():
    entry = CatalogEntry("sparkle")
    assert entry.display_category == "general"
    assert entry.tags == ()
