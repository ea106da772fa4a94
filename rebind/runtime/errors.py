"""Configuration error taxonomy.

Translation itself never fails; these are raised only while a translator is
being configured.
"""

from __future__ import annotations


class RebindConfigError(ValueError):
    """Base class for rejected translator configuration."""


class InvalidViewportError(RebindConfigError):
    """Window extents are missing, malformed or not positive."""


class InvalidBindingError(RebindConfigError):
    """A physical input or action cannot take part in a binding."""


class InvalidMouseModeError(RebindConfigError):
    """Unknown mouse interpretation mode."""


__all__ = [
    "InvalidBindingError",
    "InvalidMouseModeError",
    "InvalidViewportError",
    "RebindConfigError",
]
