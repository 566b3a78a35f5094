"""Layout error taxonomy.

Configuration errors are raised before any wrapping starts.
Internal errors signal a broken invariant inside the engine itself.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for all layout failures."""


class LayoutConfigError(LayoutError, ValueError):
    """A layout configuration violates one of its constraints."""


class LayoutInternalError(LayoutError, RuntimeError):
    """The engine hit an internal guard (e.g. the zoning loop limit)."""
