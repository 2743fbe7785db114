# SPDX-License-Identifier: MIT
"""Version parsing into a fixed record of integer columns.

A version consists of up to four base columns, optionally followed by a
'release' and a 'specifier' section. Each section is a release type name
followed by up to four numeric columns:

- Base: 1, 1.2, 1.2.4.99
- Release: 1.0-rc.1, 1.0-beta, 1.2-634.0
- Specifier: 1.2-634.0-99.8, 2.0-rc1-p2
- Build: 2.0+build42
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from .errors import (
    IntegerFormatError,
    InvalidVersionError,
    TooManyColumnsError,
    VersionError,
    VersionTooLongError,
)

logger = logging.getLogger(__name__)

# Layout of the flat column record
NUM_SLOTS = 14
IDX_RELEASE_TYPE = 4
IDX_RELEASE = 5
IDX_SPECIFIER_TYPE = 9
IDX_SPECIFIER = 10

# Columns and build numbers must fit a signed 64-bit integer
MAX_COLUMN_VALUE = 2**63 - 1

_DIGITS = frozenset("0123456789")
_BUILD_PREFIX = "+build"
_ZERO_COLUMNS = (0, 0, 0, 0)


class ReleaseType(IntEnum):
    """Maturity of a release or specifier section.

    Negative values are pre-releases, positive values are post-releases,
    so ordering by value orders by maturity.
    """

    ALPHA = -4
    BETA = -3
    PRE = -2
    RC = -1
    COMMON = 0
    REVISION = 1
    PATCH = 2

    @classmethod
    def from_label(cls, label: str) -> Optional[ReleaseType]:
        """Return the release type spelled ``label``, or None if unknown."""
        return _TYPES_BY_LABEL.get(label)

    @property
    def label(self) -> str:
        """Short name of the release type; empty for COMMON."""
        return _LABELS_BY_TYPE.get(self, "")


_TYPES_BY_LABEL = {
    "alpha": ReleaseType.ALPHA,
    "beta": ReleaseType.BETA,
    "pre": ReleaseType.PRE,
    "": ReleaseType.PRE,
    "rc": ReleaseType.RC,
    "r": ReleaseType.REVISION,
    "p": ReleaseType.PATCH,
}

_LABELS_BY_TYPE = {
    ReleaseType.ALPHA: "alpha",
    ReleaseType.BETA: "beta",
    ReleaseType.PRE: "pre",
    ReleaseType.RC: "rc",
    ReleaseType.REVISION: "r",
    ReleaseType.PATCH: "p",
}


@dataclass(frozen=True, slots=True)
class Release:
    """A release or specifier section: a type and up to four columns."""

    type: ReleaseType = ReleaseType.COMMON
    columns: tuple[int, int, int, int] = _ZERO_COLUMNS


@dataclass(slots=True)
class Version:
    """Represents a parsed version.

    A default-constructed Version is the zero record, which compares as the
    smallest common version.

    Attributes:
        base: Major, minor, patch and revision numbers
        release: Release section (e.g. the ``rc.1`` of ``1.0-rc.1``)
        specifier: Specifier section refining the release (e.g. ``p2``)
        build: Build number from a ``+build<N>`` suffix; only used as the
            final tiebreak when sorting
    """

    base: tuple[int, int, int, int] = _ZERO_COLUMNS
    release: Release = field(default_factory=Release)
    specifier: Release = field(default_factory=Release)
    build: int = 0

    @classmethod
    def from_slots(cls, slots: Sequence[int], build: int = 0) -> Version:
        """Create a Version from a flat sequence of 14 integer columns."""
        return cls()._assign(slots, build)

    @property
    def slots(self) -> tuple[int, ...]:
        """The 14 columns in comparison order, excluding the build."""
        return (
            *self.base,
            int(self.release.type),
            *self.release.columns,
            int(self.specifier.type),
            *self.specifier.columns,
        )

    @property
    def major(self) -> int:
        return self.base[0]

    @property
    def minor(self) -> int:
        return self.base[1]

    @property
    def patch(self) -> int:
        return self.base[2]

    @property
    def revision(self) -> int:
        return self.base[3]

    @property
    def is_prerelease(self) -> bool:
        """Return True if the release section is alpha, beta, pre or rc."""
        return self.release.type < ReleaseType.COMMON

    def parse(self, text: str) -> Version:
        """Parse a string into this version, overwriting any existing values.

        The string must be free of whitespace. On failure the record is left
        as it was, but callers should discard it all the same.

        Args:
            text: The version string

        Returns:
            This Version, for chaining

        Raises:
            InvalidVersionError: On malformed tokens, unknown release names,
                dangling separators or a malformed ``+build`` suffix
            TooManyColumnsError: If a number appears where a release name
                was expected
            IntegerFormatError: If a column is not a valid 64-bit integer
            VersionTooLongError: If the version needs more than 14 columns
        """
        try:
            slots, build = _scan(text)
        except VersionError as exc:
            logger.debug(
                "Rejected version %r at offset %s: %s", exc.version, exc.position, exc.message
            )
            raise
        return self._assign(slots, build)

    def _assign(self, slots: Sequence[int], build: int) -> Version:
        if len(slots) != NUM_SLOTS:
            raise ValueError(f"Expected {NUM_SLOTS} columns, got {len(slots)}")
        self.base = tuple(slots[:IDX_RELEASE_TYPE])
        self.release = Release(
            ReleaseType(slots[IDX_RELEASE_TYPE]),
            tuple(slots[IDX_RELEASE:IDX_SPECIFIER_TYPE]),
        )
        self.specifier = Release(
            ReleaseType(slots[IDX_SPECIFIER_TYPE]),
            tuple(slots[IDX_SPECIFIER:]),
        )
        self.build = build
        return self


def parse_version(text: str) -> Version:
    """Parse a version string into a new Version.

    Args:
        text: A whitespace-free version string

    Returns:
        A Version holding the parsed columns

    Raises:
        VersionError: If the string is not a valid version; see
            :meth:`Version.parse` for the individual error kinds

    Examples:
        >>> parse_version("1.2.4.99").slots
        (1, 2, 4, 99, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)

        >>> parse_version("1.0-rc.1").release
        Release(type=<ReleaseType.RC: -1>, columns=(1, 0, 0, 0))

        >>> parse_version("2.0+build42").build
        42
    """
    return Version().parse(text)


def is_valid_version(text: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.2-634.0-99.8")
        True
        >>> is_valid_version("1.0-unknown")
        False
    """
    try:
        parse_version(text)
    except VersionError:
        return False
    return True


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _scan(text: str) -> tuple[list[int], int]:
    """Tokenize ``text`` in a single pass and return (columns, build).

    Runs of digits and runs of lowercase letters form tokens. A token is
    flushed into the next column when a separator or a change of character
    class ends it. Letters always land on the nearest type column ahead;
    a separator followed by a digit skips the type column.
    """
    if not isinstance(text, str):
        raise InvalidVersionError(str(text), f"Version must be a string, got {type(text).__name__}")
    if not text:
        raise InvalidVersionError(text, "Version string cannot be empty")

    slots = [0] * NUM_SLOTS
    from_idx = from_len = field_num = 0
    is_alpha = False
    last = len(text) - 1

    for idx, char in enumerate(text):
        if (_is_lower(char) if is_alpha else char in _DIGITS):
            from_len += 1
            if idx < last:
                continue
            # the final character closes the current run
            break

        field_num = _flush(slots, text, from_idx, from_len, is_alpha, field_num)
        from_len = 0

        if char == ".":
            if idx == last:
                raise InvalidVersionError(text, "Version ends with a separator", idx)
            from_idx = idx + 1
            is_alpha = False
        elif char in "-_":
            if idx == last:
                raise InvalidVersionError(text, "Version ends with a separator", idx)
            from_idx = idx + 1
            is_alpha = _is_lower(text[from_idx])
            field_num = _type_slot(text, field_num, idx)
            if not is_alpha:
                field_num += 1
        elif char == "+":
            return slots, _parse_build(text, idx)
        else:
            from_idx = idx
            is_alpha = _is_lower(char)
            from_len = 1

    _flush(slots, text, from_idx, from_len, is_alpha, field_num)
    return slots, 0


def _flush(
    slots: list[int], text: str, start: int, length: int, is_alpha: bool, field_num: int
) -> int:
    """Store the token at ``text[start:start+length]`` and return the next column."""
    token = text[start : start + length]
    if is_alpha:
        field_num = _type_slot(text, field_num, start)
        release_type = ReleaseType.from_label(token)
        if release_type is None:
            raise InvalidVersionError(text, f"Unknown release type {token!r}", start)
        slots[field_num] = int(release_type)
    else:
        if field_num in (IDX_RELEASE_TYPE, IDX_SPECIFIER_TYPE):
            raise TooManyColumnsError(text, f"Expected a release type, got {token!r}", start)
        if field_num >= NUM_SLOTS:
            raise VersionTooLongError(text, position=start)
        slots[field_num] = _to_int(text, token, start)
    return field_num + 1


def _type_slot(text: str, field_num: int, position: int) -> int:
    """Return the type column a release name at ``field_num`` belongs to."""
    if field_num <= IDX_RELEASE_TYPE:
        return IDX_RELEASE_TYPE
    if field_num <= IDX_SPECIFIER_TYPE:
        return IDX_SPECIFIER_TYPE
    raise InvalidVersionError(text, "Version has no room for another release section", position)


def _to_int(text: str, token: str, position: int) -> int:
    if not token:
        raise InvalidVersionError(text, "Version has an empty column", position)
    if not _DIGITS.issuperset(token):
        raise IntegerFormatError(text, f"Column {token!r} is not a number", position)
    value = int(token)
    if value > MAX_COLUMN_VALUE:
        raise IntegerFormatError(text, f"Column {token} is out of range", position)
    return value


def _parse_build(text: str, position: int) -> int:
    start = position + len(_BUILD_PREFIX)
    digits = text[start:]
    if not text.startswith(_BUILD_PREFIX, position) or not digits or not _DIGITS.issuperset(digits):
        raise InvalidVersionError(text, "Version has no suffix +build and numbers", position)
    return _to_int(text, digits, start)
