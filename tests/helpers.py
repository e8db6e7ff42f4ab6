"""Helpers shared by tasktrack tests."""

from __future__ import annotations

from uuid import UUID

HEX_DIGITS = "abcdef0123456789"


def make_id(char: str) -> UUID:
    """Build a UUID whose text is the given hex digit repeated."""
    return UUID(f"{char * 8}-{char * 4}-{char * 4}-{char * 4}-{char * 12}")
