"""Service-layer exceptions."""


class SessionError(Exception):
    """Raised when the game session is used out of order."""


class MetadataError(Exception):
    """Raised when an item metadata payload cannot be rebuilt."""
