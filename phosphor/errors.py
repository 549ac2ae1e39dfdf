"""
Error types raised while resolving and fetching icons.
"""


class PhosphorError(Exception):
    """Base class for all icon server errors."""


class InvalidArgument(PhosphorError, ValueError):
    """A request argument is malformed or out of range."""


class IconNotFound(PhosphorError):
    """The upstream repository has no asset at the resolved path."""

    def __init__(self, name: str, weight: str):
        super().__init__(f"Icon '{name}' not found with weight '{weight}'")
        self.name = name
        self.weight = weight


class UpstreamTimeout(PhosphorError):
    """The upstream request did not complete in time."""


class InvalidUpstreamContent(PhosphorError):
    """The upstream response does not look like SVG markup."""


class TransportError(PhosphorError):
    """Unexpected network failure talking to the upstream repository."""

    def __init__(self, message: str, cause: Exception = None):
        super().__init__(message)
        self.cause = cause
