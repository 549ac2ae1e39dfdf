"""Tests for search-icons, list-categories, resources and the implement-icon prompt."""

import re

import pytest
from mcp.shared.memory import create_connected_server_and_client_session
from pydantic import AnyUrl

from phosphor.catalog import default_catalog
from server import create_server

pytestmark = pytest.mark.anyio


@pytest.fixture
def mcp(upstream):
    return create_server(fetcher=upstream.fetcher())


async def call_tool(mcp, tool, arguments=None):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        return await client.call_tool(tool, arguments or {})


async def test_lists_all_tools(mcp):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        tools = await client.list_tools()

    assert {tool.name for tool in tools.tools} == {
        "get-icon",
        "get-multiple-icons",
        "search-icons",
        "list-categories",
    }


async def test_search_matches_in_catalog_order(mcp):
    result = await call_tool(mcp, "search-icons", {"query": "arrow"})

    assert not result.isError
    text = result.content[0].text
    assert text.startswith('Found 4 icon(s) matching "arrow":')
    names = re.findall(r"^- \*\*([a-z0-9-]+)\*\*", text, flags=re.MULTILINE)
    assert names == ["arrow-left", "arrow-right", "download", "upload"]
    assert "Tags: navigation, back, previous" in text
    assert 'get-icon({ name: "arrow-left", weight: "regular" })' in text


async def test_search_limit_truncates(mcp):
    result = await call_tool(mcp, "search-icons", {"query": "arrow", "limit": 1})

    text = result.content[0].text
    assert text.startswith('Found 1 icon(s) matching "arrow":')
    assert "arrow-right" not in text


async def test_search_limit_upper_bound_accepted(mcp):
    result = await call_tool(mcp, "search-icons", {"query": "e", "limit": 100})

    assert not result.isError
    count = int(re.match(r"Found (\d+) icon", result.content[0].text).group(1))
    assert 0 < count <= 100


@pytest.mark.parametrize("limit", [0, 101])
async def test_search_limit_out_of_range(mcp, limit):
    result = await call_tool(mcp, "search-icons", {"query": "arrow", "limit": limit})

    assert result.isError
    assert "between 1 and 100" in result.content[0].text


async def test_search_requires_query(mcp):
    result = await call_tool(mcp, "search-icons", {"query": "  "})

    assert result.isError
    assert "Search query is required" in result.content[0].text


async def test_search_no_match_points_at_categories(mcp):
    result = await call_tool(mcp, "search-icons", {"query": "qqqq"})

    assert not result.isError
    text = result.content[0].text
    assert text.startswith('No icons found matching "qqqq".')
    categories = [category for category, _, _ in default_catalog().categories()]
    assert f"({len(categories)} categories available, e.g., {', '.join(categories[:5])})" in text


async def test_list_categories_sorted_with_consistent_counts(mcp):
    result = await call_tool(mcp, "list-categories")

    assert not result.isError
    text = result.content[0].text
    rows = re.findall(r"^- \*\*([a-z]+)\*\*: (\d+) icon\(s\) \(e\.g\., ([a-z0-9-]+)\)", text, flags=re.MULTILINE)
    categories = [category for category, _, _ in rows]
    assert categories == sorted(categories)
    assert sum(int(count) for _, count, _ in rows) == len(default_catalog())
    assert ("arrows", "2", "arrow-left") in rows
    assert 'search-icons({ query: "arrows" })' in text


async def test_catalog_resource(mcp):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        resources = await client.list_resources()
        result = await client.read_resource(AnyUrl("phosphor://catalog"))

    assert {str(resource.uri) for resource in resources.resources} == {
        "phosphor://catalog",
        "phosphor://weights",
    }
    text = result.contents[0].text
    assert text.startswith("# Phosphor Icons Catalog")
    assert f"{len(default_catalog())} Popular Icons" in text
    assert "### heart\n- **Category**: social\n- **Tags**: like, favorite, love" in text
    assert result.contents[0].mimeType == "text/markdown"


async def test_weights_resource(mcp):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        result = await client.read_resource(AnyUrl("phosphor://weights"))

    text = result.contents[0].text
    for heading in ["## 1. Thin", "## 3. Regular (Default)", "## 6. Duotone"]:
        assert heading in text


async def test_implement_icon_prompt_defaults_to_react(mcp):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        result = await client.get_prompt("implement-icon", {"iconName": "arrow-left"})

    message = result.messages[0]
    assert message.role == "user"
    assert "my react project" in message.content.text
    assert "import { ArrowLeft } from '@phosphor-icons/react';" in message.content.text


async def test_implement_icon_prompt_for_vue(mcp):
    async with create_connected_server_and_client_session(mcp._mcp_server) as client:
        result = await client.get_prompt(
            "implement-icon", {"iconName": "magnifying-glass", "framework": "vue"}
        )

    text = result.messages[0].content.text
    assert "my vue project" in text
    assert "@phosphor-icons/vue" in text
