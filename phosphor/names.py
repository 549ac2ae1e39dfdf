"""
Input validation: icon name sanitizing and numeric range checks.
"""
import re

from .errors import InvalidArgument

MIN_SIZE = 1
MAX_SIZE = 4096
MIN_LIMIT = 1
MAX_LIMIT = 100
MAX_BATCH = 50

_DISALLOWED = re.compile(r"[^a-z0-9-]")


def normalize_name(value: str) -> str:
    """Trim, lowercase and drop every character outside [a-z0-9-]."""
    return _DISALLOWED.sub("", value.strip().lower())


def sanitize_name(value) -> str:
    """Validate an icon name and return it as a safe lookup key.

    Names carrying disallowed characters are rejected rather than cleaned,
    since the result is used to build the upstream file path.

    Args:
        value: Icon name as supplied by the caller (e.g., "Arrow-Left")

    Returns:
        Normalized kebab-case name (e.g., "arrow-left")

    Raises:
        InvalidArgument: If the name is empty or contains disallowed characters
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgument("Icon name is required and must be a non-empty string.")

    cleaned = value.strip().lower()
    normalized = normalize_name(value)
    if normalized != cleaned or not normalized:
        raise InvalidArgument(
            f"Invalid icon name '{value}'. Icon names must be in kebab-case and contain "
            "only lowercase letters, numbers, and hyphens (e.g., 'arrow-left', 'user-circle')."
        )
    return normalized


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_size(size):
    """Check an optional pixel size; None means "leave the SVG as is"."""
    if size is None:
        return None
    if not _is_int(size) or size < MIN_SIZE or size > MAX_SIZE:
        raise InvalidArgument(
            f"Size must be a positive number between {MIN_SIZE} and {MAX_SIZE} pixels."
        )
    return size


def validate_limit(limit) -> int:
    if not _is_int(limit) or limit < MIN_LIMIT or limit > MAX_LIMIT:
        raise InvalidArgument(
            f"Limit must be a positive number between {MIN_LIMIT} and {MAX_LIMIT}."
        )
    return limit


def validate_names(names) -> list:
    """Check the batch name list is a non-empty list within the batch cap."""
    if not isinstance(names, (list, tuple)) or len(names) == 0:
        raise InvalidArgument("'names' must be a non-empty array of icon names.")
    if len(names) > MAX_BATCH:
        raise InvalidArgument(
            f"Maximum {MAX_BATCH} icons can be retrieved in a single batch request."
        )
    return list(names)


def validate_query(query) -> str:
    if not isinstance(query, str) or not query.strip():
        raise InvalidArgument("Search query is required and must be a non-empty string.")
    return query.strip().lower()
