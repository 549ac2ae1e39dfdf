"""
Color and size rewriting for Phosphor SVG markup.

The markup is treated as opaque text and rewritten with regular expressions;
it is never parsed into a tree. Color values are substituted verbatim, so a
color containing a double quote produces broken markup.
"""
import re

# Attribute names are matched whole so that e.g. stroke-width is not taken for stroke
_FILL_ATTR = re.compile(r'(?<![\w:-])fill="[^"]*"')
_STROKE_ATTR = re.compile(r'(?<![\w:-])stroke="[^"]*"')
_WIDTH_ATTR = re.compile(r'(?<![\w:-])width="[^"]*"')
_HEIGHT_ATTR = re.compile(r'(?<![\w:-])height="[^"]*"')
_ROOT_TAG = re.compile(r"<svg\b([^>]*?)(\s*/?)>")


def apply_color(svg: str, weight: str, color: str) -> str:
    """Apply a color to every fill (and, except for the fill weight, stroke) attribute.

    Args:
        svg: Raw SVG content
        weight: Icon weight the SVG was fetched with
        color: Any CSS color (hex, rgb(), hsl(), named, currentColor, var(--x))

    Returns:
        SVG content with the color applied
    """
    if not color:
        return svg

    # Use a function so backslashes in the color are not read as group references
    svg = _FILL_ATTR.sub(lambda _: f'fill="{color}"', svg)
    if weight != "fill":
        # duotone, thin, light, regular and bold mix fills and strokes
        svg = _STROKE_ATTR.sub(lambda _: f'stroke="{color}"', svg)
    return svg


def apply_size(svg: str, size: int) -> str:
    """Set width and height, replacing the first pair or adding one to the root tag."""
    if not size:
        return svg

    if _WIDTH_ATTR.search(svg) is None:
        return _ROOT_TAG.sub(
            lambda m: f'<svg{m.group(1)} width="{size}" height="{size}"{m.group(2)}>',
            svg,
            count=1,
        )

    svg = _WIDTH_ATTR.sub(f'width="{size}"', svg, count=1)
    svg = _HEIGHT_ATTR.sub(f'height="{size}"', svg, count=1)
    return svg


def style_svg(svg: str, weight: str, color: str = None, size: int = None) -> str:
    svg = apply_color(svg, weight, color)
    return apply_size(svg, size)
