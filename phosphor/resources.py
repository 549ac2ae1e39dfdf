"""
Read-only resources (catalog dump, weight guide) and the implement-icon prompt.
"""
from typing import Literal, Optional

from .config import WEIGHTS

Framework = Literal["html", "react", "vue", "svelte", "angular"]

WEIGHTS_GUIDE = """# Phosphor Icon Weights

Phosphor Icons are available in 6 different weights/styles:

## 1. Thin
- Delicate, minimal strokes
- Best for: Large sizes, elegant interfaces

## 2. Light
- Subtle, refined appearance
- Best for: Modern, clean designs

## 3. Regular (Default)
- Balanced, versatile
- Best for: General use, body text sizes

## 4. Bold
- Strong, impactful presence
- Best for: Emphasis, small sizes

## 5. Fill
- Solid, filled shapes
- Best for: Strong emphasis, iconography

## 6. Duotone
- Two-tone design with depth
- Best for: Visual interest, brand identity

---

Configure your default weight in the server settings or specify per-request."""


def format_catalog(catalog) -> str:
    sections = []
    for entry in catalog:
        tags = ", ".join(entry.tags) or "none"
        sections.append(
            f"### {entry.name}\n"
            f"- **Category**: {entry.display_category}\n"
            f"- **Tags**: {tags}\n"
            f"- **Weights**: {', '.join(WEIGHTS)}"
        )
    return (
        "# Phosphor Icons Catalog\n\n"
        f"{len(catalog)} Popular Icons\n\n"
        + "\n\n".join(sections)
        + "\n\n---\n\nFull catalog: https://phosphoricons.com\n"
        "GitHub: https://github.com/phosphor-icons/core"
    )


def component_name(icon_name: str) -> str:
    """PascalCase component name used by the Phosphor framework packages (arrow-left -> ArrowLeft)."""
    return "".join(part[:1].upper() + part[1:] for part in icon_name.split("-"))


def implementation_guide(icon_name: str, framework: str) -> str:
    component = component_name(icon_name)
    guides = {
        "html": (
            f"To use '{icon_name}' in HTML:\n"
            "1. Get the SVG using the 'get-icon' tool\n"
            "2. Copy the SVG code directly into your HTML\n"
            "3. Customize with CSS classes"
        ),
        "react": (
            f"To use '{icon_name}' in React:\n"
            "1. Get the SVG using the 'get-icon' tool\n"
            "2. Or install: npm install @phosphor-icons/react\n\n"
            f"With package:\nimport {{ {component} }} from '@phosphor-icons/react';\n"
            f'<{component} size={{32}} weight="bold" />'
        ),
        "vue": (
            f"To use '{icon_name}' in Vue:\n"
            "1. Get the SVG using the 'get-icon' tool\n"
            "2. Or install: npm install @phosphor-icons/vue"
        ),
        "svelte": (
            f"To use '{icon_name}' in Svelte:\n"
            "1. Get the SVG using the 'get-icon' tool\n"
            "2. Check https://phosphoricons.com for Svelte packages"
        ),
        "angular": (
            f"To use '{icon_name}' in Angular:\n"
            "1. Get the SVG using the 'get-icon' tool\n"
            "2. Check https://phosphoricons.com for Angular packages"
        ),
    }
    return guides.get(framework, guides["react"])


def register_resources(mcp, state):
    """Register catalog/weight resources and the implement-icon prompt."""

    @mcp.resource(
        "phosphor://catalog",
        name="icon-catalog",
        title="Phosphor Icons Catalog",
        description="Complete catalog of popular Phosphor Icons with metadata",
        mime_type="text/markdown",
    )
    def icon_catalog() -> str:
        return format_catalog(state.catalog)

    @mcp.resource(
        "phosphor://weights",
        name="icon-weights-info",
        title="Icon Weights Information",
        description="Information about available icon weights/styles in Phosphor Icons",
        mime_type="text/markdown",
    )
    def icon_weights_info() -> str:
        return WEIGHTS_GUIDE

    @mcp.prompt(
        name="implement-icon",
        title="Icon Implementation Guide",
        description="Get guidance on implementing a Phosphor icon in your project",
    )
    def implement_icon(iconName: str, framework: Optional[Framework] = None) -> str:
        if not iconName or not iconName.strip():
            return "Error: Icon name is required and must be a non-empty string."

        selected = framework or "react"
        icon_name = iconName.strip()
        return (
            f"Please help me implement the '{icon_name}' Phosphor icon in my {selected} project. "
            f"{implementation_guide(icon_name, selected)}"
        )
