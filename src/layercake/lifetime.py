from __future__ import annotations

from enum import Enum


class Lifetime(str, Enum):
    """Defines how long a wired component lives."""

    SINGLETON = "singleton"
    """Constructed once per composition root and shared on every access."""

    TRANSIENT = "transient"
    """Constructed anew at each use site and never cached."""
