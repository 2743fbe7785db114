# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings.

Every error carries the rejected input and, where known, the character
offset at which the parser gave up.
"""

from __future__ import annotations

from typing import Optional


class VersionError(ValueError):
    """Base class for all version parsing errors."""

    default_message = "Invalid version"

    def __init__(self, version: str, message: str = "", position: Optional[int] = None):
        self.version = version
        self.position = position
        self.message = message or f"{self.default_message}: {version}"
        super().__init__(self.message)


class InvalidVersionError(VersionError):
    """Raised when a string does not resemble a version.

    Covers unknown release names, stray or dangling separators, a malformed
    ``+build`` suffix and names appearing after the specifier section.
    """

    default_message = "Given string does not resemble a version"


class TooManyColumnsError(VersionError):
    """Raised when a number lands where a release name was expected."""

    default_message = "Version consists of too many columns"


class IntegerFormatError(VersionError):
    """Raised when a numeric column does not convert to a 64-bit integer."""

    default_message = "Version column is not a valid integer"


class VersionTooLongError(VersionError):
    """Raised when a version needs more than the available slots."""

    default_message = "Version is too long"
