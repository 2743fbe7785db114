# SPDX-License-Identifier: MIT
"""Version comparison over the flat column record.

Every comparison is a lexicographic walk over the leading columns of two
versions, cut off at a given precision:

- 4: base version only (the "prefix")
- 9: base version plus release type and release columns
- 14: all columns

The build number never takes part, except as the final tiebreak of
:func:`less` and :func:`version_key`.
"""

from __future__ import annotations

from typing import Sequence, Union

from .semver import (
    IDX_RELEASE_TYPE,
    IDX_SPECIFIER_TYPE,
    NUM_SLOTS,
    ReleaseType,
    Version,
    parse_version,
)

PREFIX_CUTOFF = IDX_RELEASE_TYPE
RELEASE_CUTOFF = IDX_SPECIFIER_TYPE
FULL_CUTOFF = NUM_SLOTS

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def sign_delta(a: Sequence[int], b: Sequence[int], cutoff: int) -> int:
    """Return the signum of the difference of ``a`` and ``b``.

    Only the first ``cutoff`` columns are compared; the first differing
    column decides. A cutoff of zero or less compares nothing.

    Examples:
        >>> sign_delta((1, 2, 3), (1, 2, 4), 3)
        -1
        >>> sign_delta((1, 2, 3), (1, 2, 4), 2)
        0
    """
    cutoff = max(cutoff, 0)
    for x, y in zip(a[:cutoff], b[:cutoff]):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions with full precision.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionError: If either version string is invalid

    Note:
        The build number is not compared.

    Examples:
        >>> compare_versions("1.2.4.99", "1.2.4.100")
        -1
        >>> compare_versions("1.0-rc.1", "1.0")
        -1
        >>> compare_versions("1.0+build1", "1.0+build2")
        0
    """
    v1, v2 = _coerce(version1), _coerce(version2)
    return sign_delta(v1.slots, v2.slots, FULL_CUTOFF)


def less(version1: VersionLike, version2: VersionLike) -> bool:
    """Strict total order over versions, suitable for sorting.

    Falls back to the build number when all columns are equal.

    Examples:
        >>> less("1.0-alpha", "1.0-beta")
        True
        >>> less("2.0+build1", "2.0+build2")
        True
    """
    v1, v2 = _coerce(version1), _coerce(version2)
    delta = sign_delta(v1.slots, v2.slots, FULL_CUTOFF)
    return delta < 0 or (delta == 0 and v1.build < v2.build)


def _limited_less(version1: VersionLike, version2: VersionLike) -> bool:
    """Order by base version, release type and release columns only."""
    v1, v2 = _coerce(version1), _coerce(version2)
    return sign_delta(v1.slots, v2.slots, RELEASE_CUTOFF) < 0


def limited_equal(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if two versions are the same release.

    Compares the base version, the release type and the release columns;
    the specifier is ignored. Revisions and patch levels of a common
    version are equal to it, so ``1.2.3`` equals ``1.2.3-p1``.

    Use this, for example, to tell a beta from a regular version, or to
    accept a patched version as the regular one.

    Note:
        The patch-level rule applies whichever side is the common version,
        so ``limited_equal("1.2.3-p1", "1.2.3")`` is also True.

    Examples:
        >>> limited_equal("1.2.3", "1.2.3-p1")
        True
        >>> limited_equal("1.2.3", "1.2.3-beta")
        False
        >>> limited_equal("1.0-rc.1", "1.0-rc.1-p4")
        True
    """
    v1, v2 = _coerce(version1), _coerce(version2)
    type1, type2 = v1.release.type, v2.release.type
    if (type1 == ReleaseType.COMMON and type2 > ReleaseType.COMMON) or (
        type2 == ReleaseType.COMMON and type1 > ReleaseType.COMMON
    ):
        return shares_prefix_with(v1, v2)
    return sign_delta(v1.slots, v2.slots, RELEASE_CUTOFF) == 0


def is_prerelease(version: VersionLike) -> bool:
    """Return True if the version is an alpha, beta, pre or rc release.

    Examples:
        >>> is_prerelease("1.0-rc.1")
        True
        >>> is_prerelease("1.0.0")
        False
    """
    return _coerce(version).is_prerelease


def shares_prefix_with(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if major, minor, patch and revision numbers match.

    Examples:
        >>> shares_prefix_with("1.2.3.4-beta", "1.2.3.4-p7")
        True
    """
    v1, v2 = _coerce(version1), _coerce(version2)
    return sign_delta(v1.slots, v2.slots, PREFIX_CUTOFF) == 0


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, ordering exactly like :func:`less`.

    Examples:
        >>> sorted(["1.0", "1.0-beta", "1.0-alpha", "0.9-p1"], key=version_key)
        ['0.9-p1', '1.0-alpha', '1.0-beta', '1.0']
    """
    v = _coerce(version)
    return (*v.slots, v.build)
