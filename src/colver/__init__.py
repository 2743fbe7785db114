# SPDX-License-Identifier: MIT
"""Column-based version parsing and comparison.

Versions are parsed into a fixed record of 14 integer columns (base
version, release section, specifier section) plus a build number, and
compared lexicographically with configurable precision.

Example:
    >>> from colver import parse_version, compare_versions, limited_equal
    >>>
    >>> version = parse_version("1.2-rc.3+build7")
    >>> version.base
    (1, 2, 0, 0)
    >>> version.is_prerelease
    True
    >>>
    >>> compare_versions("1.2.4.99", "1.2.4.100")
    -1
    >>> limited_equal("1.2.3", "1.2.3-p1")
    True
"""

__version__ = "0.1.0"

from .errors import (
    VersionError,
    InvalidVersionError,
    TooManyColumnsError,
    IntegerFormatError,
    VersionTooLongError,
)
from .semver import (
    ReleaseType,
    Release,
    Version,
    parse_version,
    is_valid_version,
    NUM_SLOTS,
    MAX_COLUMN_VALUE,
)
from .compare import (
    sign_delta,
    compare_versions,
    less,
    limited_equal,
    is_prerelease,
    shares_prefix_with,
    version_key,
)

__all__ = [
    # Errors
    "VersionError",
    "InvalidVersionError",
    "TooManyColumnsError",
    "IntegerFormatError",
    "VersionTooLongError",
    # Version parsing
    "ReleaseType",
    "Release",
    "Version",
    "parse_version",
    "is_valid_version",
    "NUM_SLOTS",
    "MAX_COLUMN_VALUE",
    # Version comparison
    "sign_delta",
    "compare_versions",
    "less",
    "limited_equal",
    "is_prerelease",
    "shares_prefix_with",
    "version_key",
]
