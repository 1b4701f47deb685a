"""Exceptions raised by the planner."""

from __future__ import annotations


class InvalidConfigurationError(ValueError):
    """Search center or radius is unusable; raised before any scoring happens."""


class EBirdError(RuntimeError):
    """Base class for eBird data source failures."""


class EBirdAuthError(EBirdError):
    """No eBird API key was configured."""
