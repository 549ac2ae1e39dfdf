"""
Catalog tools: search icons and list categories.
"""
from mcp.types import CallToolResult

from .errors import InvalidArgument
from .names import validate_limit, validate_query
from .results import error_result, text_result

DEFAULT_LIMIT = 10


def register_search_tools(mcp, state):
    """Register catalog browsing tools with the MCP server."""
    catalog = state.catalog

    @mcp.tool(name="search-icons", title="Search Phosphor Icons")
    async def search_icons(query: str, limit: int = DEFAULT_LIMIT) -> CallToolResult:
        """
        Search for icons by name, category, or tags.

        Args:
            query: Search query (searches icon names, categories, and tags)
            limit: Maximum number of results to return (1-100, default 10)

        Returns:
            List of matching icons with their category and tags
        """
        try:
            term = validate_query(query)
            limit = validate_limit(limit)
        except InvalidArgument as e:
            return error_result(f"Error: {e}")

        matches = catalog.search(term, limit)

        if not matches:
            categories = [category for category, _, _ in catalog.categories()]
            return text_result(
                f'No icons found matching "{query}".\n\n'
                "**Available options:**\n"
                f"- Use 'list-categories' to see all icon categories ({len(categories)} "
                f"categories available, e.g., {', '.join(categories[:5])})\n"
                "- Try different search keywords\n"
                "- Check the full catalog at https://phosphoricons.com\n\n"
                "**Tip:** Use 'list-categories' first to see what's available, "
                "then search within specific categories."
            )

        lines = []
        for entry in matches:
            tags = ", ".join(entry.tags) or "none"
            lines.append(f"- **{entry.name}** ({entry.display_category})\n  Tags: {tags}")

        example = matches[0].name
        return text_result(
            f'Found {len(matches)} icon(s) matching "{query}":\n\n'
            + "\n\n".join(lines)
            + f'\n\n**Quick start:** Use `get-icon` with name "{example}" to retrieve the SVG:\n'
            f'`get-icon({{ name: "{example}", weight: "regular" }})`\n\n'
            "Or retrieve multiple icons at once with `get-multiple-icons`.\n\n"
            "Use the 'get-icon' tool with any icon name above to retrieve the SVG."
        )

    @mcp.tool(name="list-categories", title="List Icon Categories")
    async def list_categories() -> CallToolResult:
        """
        Get a list of all icon categories available in the catalog.

        Returns:
            Categories in alphabetical order with the number of icons in each
        """
        categories = catalog.categories()
        if not categories:
            return text_result("# Phosphor Icons Categories\n\nThe catalog has no categories.")

        lines = [
            f"- **{category}**: {count} icon(s) (e.g., {example})"
            for category, count, example in categories
        ]

        first_category = categories[0][0]
        first_icons = ", ".join(entry.name for entry in catalog.in_category(first_category)[:3])
        return text_result(
            "# Phosphor Icons Categories\n\n"
            + "\n".join(lines)
            + "\n\n**Next steps:**\n"
            f'- Use \'search-icons\' with a category name (e.g., "{first_category}") '
            "to find icons in that category\n"
            f'- Use \'search-icons\' with an icon name (e.g., "{first_icons}") to find specific icons\n'
            "- Use 'get-icon' with any icon name to retrieve the SVG\n\n"
            f'**Example:** `search-icons({{ query: "{first_category}" }})` '
            f"to see all {first_category} icons."
        )
