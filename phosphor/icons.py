"""
Icon tools: fetch Phosphor SVG icons, one at a time or in batches.
"""
import logging
from typing import List, Optional

import anyio
from mcp.types import CallToolResult

from .config import WEIGHTS, Weight
from .errors import IconNotFound, InvalidArgument, PhosphorError, TransportError
from .names import sanitize_name, validate_names, validate_size
from .results import error_result, text_result
from .styling import style_svg

logger = logging.getLogger(__name__)

SINGLE_SUGGESTIONS = 5
BATCH_SUGGESTIONS = 3

CATALOG_URL = "https://phosphoricons.com"


def _not_found_message(icon_name: str, weight: str, suggestions) -> str:
    """Build the get-icon error text for an icon the upstream repository lacks."""
    if suggestions:
        listed = "\n".join(f"- **{entry.name}** ({entry.display_category})" for entry in suggestions)
        hint = (
            f"\n\n**Similar icons found in catalog:**\n{listed}\n\n"
            f"Try using the 'search-icons' tool with \"{icon_name}\" to find more options, "
            "or use 'list-categories' to browse available icons."
        )
    else:
        hint = (
            "\n\n**Suggestions:**\n"
            f"- Use the 'search-icons' tool with \"{icon_name}\" to find similar icons\n"
            "- Use 'list-categories' to browse available icon categories\n"
            f"- Check the full catalog at {CATALOG_URL}"
        )
    return (
        f"Error: Icon '{icon_name}' not found with weight '{weight}'.{hint}\n\n"
        "Icon names should be in kebab-case (e.g., 'arrow-left', 'user-circle'). "
        f"Available weights: {', '.join(WEIGHTS)}."
    )


def register_icon_tools(mcp, state):
    """Register icon retrieval tools with the MCP server."""

    async def load_icon(icon_name: str, weight: str, color: str = None, size: int = None) -> str:
        response = await state.fetcher.fetch_icon(icon_name, weight)
        svg = response.svg(icon_name, weight)
        return style_svg(svg, weight, color=color, size=size)

    @mcp.tool(name="get-icon", title="Get Phosphor Icon")
    async def get_icon(
        name: str,
        weight: Optional[Weight] = None,
        color: Optional[str] = None,
        size: Optional[int] = None,
    ) -> CallToolResult:
        """
        Retrieve an SVG icon from the Phosphor Icons library.

        Returns the SVG content with the requested weight/style and optional color and size.

        Args:
            name: Icon name in kebab-case (e.g., "arrow-left", "magnifying-glass", "user")
            weight: Icon weight/style. Defaults to the server's configured weight.
                    Options: thin, light, regular, bold, fill, duotone
            color: Icon color. Accepts hex codes (#000000), rgb()/rgba(), hsl(),
                   named colors (red, blue), currentColor or var(--custom-property)
            size: Icon size in pixels (1-4096), sets both width and height

        Returns:
            Markdown with the SVG in a code block, or an error message with suggestions
        """
        try:
            icon_name = sanitize_name(name)
            validate_size(size)
        except InvalidArgument as e:
            return error_result(f"Error: {e}")

        selected_weight = state.resolve_weight(weight)

        try:
            svg = await load_icon(icon_name, selected_weight, color=color, size=size)
        except IconNotFound:
            suggestions = state.catalog.suggest(icon_name, SINGLE_SUGGESTIONS)
            return error_result(_not_found_message(icon_name, selected_weight, suggestions))
        except TransportError as e:
            return error_result(
                f"Error fetching icon: {e}. Please verify the icon name and try again."
            )
        except PhosphorError as e:
            return error_result(f"Error: {e}")
        except Exception as e:
            logger.exception(f"Error fetching icon '{icon_name}'")
            return error_result(
                f"Error fetching icon: {str(e)}. Please verify the icon name and try again."
            )

        color_info = f" with color '{color}'" if color else ""
        size_info = f" at {size}px" if size else ""
        return text_result(
            f"# {icon_name} ({selected_weight}{color_info}{size_info})\n\n"
            f"```svg\n{svg}\n```\n\n"
            "You can use this SVG directly in your HTML or React components."
        )

    async def batch_entry(name: str, weight: str, color: str, size: int) -> str:
        """One section of the batch output. Never raises."""
        try:
            icon_name = sanitize_name(name)
        except InvalidArgument:
            return f"## {name}\n❌ Error: Invalid icon name"

        try:
            svg = await load_icon(icon_name, weight, color=color, size=size)
        except IconNotFound:
            similar = state.catalog.suggest(icon_name, BATCH_SUGGESTIONS)
            suggestion = ""
            if similar:
                suggestion = f" (Similar: {', '.join(entry.name for entry in similar)})"
            return f"## {name}\n❌ Not found{suggestion}"
        except Exception as e:
            if not isinstance(e, PhosphorError):
                logger.exception(f"Error fetching icon '{icon_name}' in batch")
            return f"## {name}\n❌ Error: {e}"

        return f"## {name}\n```svg\n{svg}\n```"

    @mcp.tool(name="get-multiple-icons", title="Get Multiple Icons")
    async def get_multiple_icons(
        names: List[str],
        weight: Optional[Weight] = None,
        color: Optional[str] = None,
        size: Optional[int] = None,
    ) -> CallToolResult:
        """
        Retrieve multiple SVG icons at once. Useful for batch operations.

        Args:
            names: Icon names in kebab-case (1-50 names)
            weight: Icon weight/style for all icons. Defaults to the server's configured weight.
            color: Icon color applied to all icons (hex, rgb(), named colors or currentColor)
            size: Icon size in pixels (1-4096) applied to all icons

        Returns:
            Markdown with one section per requested name, in request order.
            A missing icon does not fail the whole batch.
        """
        try:
            names = validate_names(names)
            validate_size(size)
        except InvalidArgument as e:
            return error_result(f"Error: {e}")

        selected_weight = state.resolve_weight(weight)
        results = [None] * len(names)
        limiter = anyio.CapacityLimiter(state.settings.batch_concurrency)

        async def run(index: int, name: str):
            async with limiter:
                results[index] = await batch_entry(name, selected_weight, color, size)

        async with anyio.create_task_group() as tg:
            for index, name in enumerate(names):
                tg.start_soon(run, index, name)

        color_info = f" • Color: {color}" if color else ""
        size_info = f" • Size: {size}px" if size else ""
        return text_result(
            f"# Batch Icon Results ({selected_weight}{color_info}{size_info})\n\n"
            + "\n\n".join(results)
        )
