from __future__ import annotations


class MalformedBoard(ValueError):
    """Raised when tile input cannot form a valid n×n board."""
