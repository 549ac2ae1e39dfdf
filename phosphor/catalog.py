"""
Static icon catalog used for search, category listing and "did you mean" suggestions.

The catalog is never consulted to decide whether an icon exists; the upstream
repository is authoritative for that.
"""
from dataclasses import dataclass
from typing import Iterator, Optional

# Popular Phosphor icons with category and tags
POPULAR_ICONS = [
    {"name": "activity", "category": "health", "tags": ["fitness", "health", "monitor"]},
    {"name": "alarm", "category": "time", "tags": ["clock", "time", "alert"]},
    {"name": "archive", "category": "storage", "tags": ["box", "storage", "save"]},
    {"name": "arrow-left", "category": "arrows", "tags": ["navigation", "back", "previous"]},
    {"name": "arrow-right", "category": "arrows", "tags": ["navigation", "forward", "next"]},
    {"name": "at", "category": "communication", "tags": ["email", "mention", "social"]},
    {"name": "bell", "category": "communication", "tags": ["notification", "alert", "sound"]},
    {"name": "book", "category": "education", "tags": ["read", "library", "documentation"]},
    {"name": "calendar", "category": "time", "tags": ["date", "schedule", "event"]},
    {"name": "camera", "category": "media", "tags": ["photo", "image", "capture"]},
    {"name": "chat", "category": "communication", "tags": ["message", "conversation", "talk"]},
    {"name": "check", "category": "interface", "tags": ["tick", "success", "done"]},
    {"name": "clock", "category": "time", "tags": ["time", "hour", "minute"]},
    {"name": "cloud", "category": "weather", "tags": ["sky", "storage", "sync"]},
    {"name": "code", "category": "development", "tags": ["programming", "developer", "brackets"]},
    {"name": "copy", "category": "interface", "tags": ["duplicate", "clipboard", "paste"]},
    {"name": "download", "category": "interface", "tags": ["save", "export", "arrow"]},
    {"name": "edit", "category": "interface", "tags": ["pencil", "modify", "write"]},
    {"name": "eye", "category": "interface", "tags": ["view", "see", "visible"]},
    {"name": "file", "category": "files", "tags": ["document", "paper", "text"]},
    {"name": "folder", "category": "files", "tags": ["directory", "collection", "organize"]},
    {"name": "gear", "category": "interface", "tags": ["settings", "config", "preferences"]},
    {"name": "heart", "category": "social", "tags": ["like", "favorite", "love"]},
    {"name": "house", "category": "interface", "tags": ["home", "main", "dashboard"]},
    {"name": "image", "category": "media", "tags": ["picture", "photo", "gallery"]},
    {"name": "info", "category": "interface", "tags": ["information", "help", "about"]},
    {"name": "link", "category": "interface", "tags": ["chain", "url", "hyperlink"]},
    {"name": "list", "category": "interface", "tags": ["menu", "items", "bullets"]},
    {"name": "lock", "category": "security", "tags": ["secure", "private", "protected"]},
    {"name": "magnifying-glass", "category": "interface", "tags": ["search", "find", "zoom"]},
    {"name": "map-pin", "category": "location", "tags": ["marker", "location", "place"]},
    {"name": "music-note", "category": "media", "tags": ["audio", "sound", "song"]},
    {"name": "paper-plane-tilt", "category": "communication", "tags": ["send", "message", "mail"]},
    {"name": "play", "category": "media", "tags": ["start", "video", "audio"]},
    {"name": "plus", "category": "interface", "tags": ["add", "new", "create"]},
    {"name": "printer", "category": "office", "tags": ["print", "paper", "document"]},
    {"name": "question", "category": "interface", "tags": ["help", "support", "unknown"]},
    {"name": "share", "category": "social", "tags": ["export", "send", "distribute"]},
    {"name": "shopping-cart", "category": "commerce", "tags": ["buy", "purchase", "shop"]},
    {"name": "star", "category": "social", "tags": ["favorite", "rating", "bookmark"]},
    {"name": "trash", "category": "interface", "tags": ["delete", "remove", "bin"]},
    {"name": "upload", "category": "interface", "tags": ["import", "arrow", "send"]},
    {"name": "user", "category": "people", "tags": ["person", "profile", "account"]},
    {"name": "warning", "category": "interface", "tags": ["alert", "caution", "danger"]},
    {"name": "x", "category": "interface", "tags": ["close", "cancel", "remove"]},
]


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    category: Optional[str] = None
    tags: tuple = ()

    @property
    def display_category(self) -> str:
        return self.category or "general"

    def matches(self, term: str) -> bool:
        """Substring match on name, category and tags (term already lowercased)."""
        return (
            term in self.name.lower()
            or (self.category is not None and term in self.category.lower())
            or any(term in tag.lower() for tag in self.tags)
        )

    def resembles(self, term: str) -> bool:
        """Looser match used for suggestions after a failed lookup."""
        name = self.name.lower()
        if term in name or name in term:
            return True
        # Empty tokens (from "a--b") are skipped, or every entry would match
        if any(part and part in term for part in name.split("-")):
            return True
        if any(part and part in name for part in term.split("-")):
            return True
        if any(term in tag.lower() for tag in self.tags):
            return True
        return self.category is not None and term in self.category.lower()


class Catalog:
    """Read-only, ordered collection of catalog entries.

    Built once at startup and shared by every handler. Every query preserves
    insertion order; nothing is relevance-ranked.
    """

    def __init__(self, entries):
        self._entries = tuple(entries)

    @classmethod
    def from_records(cls, records) -> "Catalog":
        return cls(
            CatalogEntry(
                name=record["name"],
                category=record.get("category"),
                tags=tuple(record.get("tags") or ()),
            )
            for record in records
        )

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def search(self, query: str, limit: int) -> list:
        """Entries whose name, category or tags contain the query.

        The query may be raw user input; it is trimmed and lowercased here.
        """
        term = query.strip().lower()
        matches = [entry for entry in self._entries if entry.matches(term)]
        return matches[:limit]

    def suggest(self, name: str, limit: int) -> list:
        """Entries that resemble a name the upstream repository did not have.

        Args:
            name: Sanitized icon name that produced a not-found outcome
            limit: Maximum number of suggestions (5 for single lookups, 3 for batches)

        Returns:
            Matching entries in catalog order
        """
        term = name.lower()
        if not term:
            return []
        matches = [entry for entry in self._entries if entry.resembles(term)]
        return matches[:limit]

    def categories(self) -> list:
        """Distinct categories, sorted, as (category, count, first icon) tuples."""
        counts = {}
        examples = {}
        for entry in self._entries:
            if entry.category is None:
                continue
            counts[entry.category] = counts.get(entry.category, 0) + 1
            examples.setdefault(entry.category, entry.name)
        return [(cat, counts[cat], examples[cat]) for cat in sorted(counts)]

    def in_category(self, category: str) -> list:
        return [entry for entry in self._entries if entry.category == category]


def default_catalog() -> Catalog:
    return Catalog.from_records(POPULAR_ICONS)
