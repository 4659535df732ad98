"""Build-mode switches, read from the environment."""

from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


def _flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def is_dev() -> bool:
    """Whether development features are enabled (``PEERSWAP_DEV``)."""
    return _flag("PEERSWAP_DEV")


def fast_tests() -> bool:
    """Whether shortened timings for tests are enabled (``PEERSWAP_FAST_TEST``)."""
    return _flag("PEERSWAP_FAST_TEST")