"""Error types raised by precondition checks."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Input violates a precondition: unpadded image, too few points, etc."""
