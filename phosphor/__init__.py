"""
Phosphor Icons MCP server: fetch, recolor and resize Phosphor SVG icons.
"""

__version__ = "1.0.0"
