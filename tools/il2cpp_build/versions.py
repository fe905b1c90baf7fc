from __future__ import annotations

import re
from typing import NamedTuple

from il2cpp_build.errors import InvalidVersion

VERSION_PATTERN = re.compile(r"^(\d{1,4})\.(\d{0,6})\.(\d{1,2})")


class Version(NamedTuple):
    major: int
    minor: int
    build: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.build}"


def parse_version(text: str) -> Version:
    """Parse the leading ``major.minor.build`` of a Unity style version string.

    Trailing text is ignored, so ``2019.4.40f1`` parses as ``2019.4.40``.
    An empty minor field counts as zero.
    """
    match = VERSION_PATTERN.match(text.strip())
    if not match:
        raise InvalidVersion(text)
    major, minor, build = match.groups()
    return Version(int(major), int(minor or 0), int(build))


def compare(left: str | Version, right: str | Version) -> int:
    """Return a negative number, zero or a positive number like a C comparator."""
    a = left if isinstance(left, Version) else parse_version(left)
    b = right if isinstance(right, Version) else parse_version(right)
    for x, y in zip(a, b):
        if x != y:
            return -1 if x < y else 1
    return 0


def at_least(version: str | Version, threshold: str | Version) -> bool:
    return compare(version, threshold) >= 0
