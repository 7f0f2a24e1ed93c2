"""Version information for devsnap."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class Version:
    """Semantic version plus a hash of the installed sources and a build date."""

    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return full version info including hash and date."""
        return f"{self} (hash: {self.hash[:8]}, date: {self.date:%Y-%m-%d})"

    def semver(self) -> tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)


def _compute_package_hash() -> str:
    """SHA256 over the package's .py sources, in sorted path order."""
    package_dir = Path(__file__).resolve().parent.parent
    hasher = hashlib.sha256()
    for path in sorted(package_dir.rglob("*.py")):
        try:
            hasher.update(path.read_bytes())
        except OSError:
            continue
    return hasher.hexdigest()


DEVSNAP_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 19),
)
