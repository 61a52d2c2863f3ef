"""Exceptions raised by gl-share operations."""

from __future__ import annotations


class GlShareError(Exception):
    """Base class. The message is shown to the user as-is; empty means silent."""

    exit_code = 0


class ConfigError(GlShareError):
    """Required configuration is missing."""

    exit_code = 1


class UserInputError(GlShareError):
    """A required argument is missing or invalid."""


class NotFoundError(GlShareError):
    """A search returned no matches."""


class AmbiguousSelectionError(GlShareError):
    """The group chosen interactively is not one of the matches."""


class ConfirmationDeclined(GlShareError):
    """The user declined, or gave an invalid answer to, the confirmation prompt."""
