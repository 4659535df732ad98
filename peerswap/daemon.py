"""Start-up checks for the swap daemon: node version, networks and data directory."""

from __future__ import annotations

import os
import re
import sys
from enum import Enum

MIN_LND_VERSION = 14.1

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class UnsupportedLndVersionError(ValueError):
    """Raised when the connected node is older than the minimum supported version."""

    def __init__(self, minimum: float = MIN_LND_VERSION) -> None:
        self.minimum = minimum
        super().__init__(f"Lnd version unsupported, requires {minimum}")


class BitcoinNetwork(Enum):
    """Bitcoin networks a node can run on, valued by their canonical names."""

    MAINNET = "mainnet"
    TESTNET = "testnet3"
    SIGNET = "signet"
    REGTEST = "regtest"


class LiquidNetwork(Enum):
    """Liquid networks an elements node can run on."""

    LIQUID = "liquid"
    TESTNET = "testnet"
    REGTEST = "regtest"


_BITCOIN_NETWORKS = {
    "regtest": BitcoinNetwork.REGTEST,
    "testnet": BitcoinNetwork.TESTNET,
    "signet": BitcoinNetwork.SIGNET,
    "bitcoin": BitcoinNetwork.MAINNET,
    "mainnet": BitcoinNetwork.MAINNET,
}

_LIQUID_NETWORKS = {
    "liquidv1": LiquidNetwork.LIQUID,
    "liquidregtest": LiquidNetwork.REGTEST,
    "liquidtestnet": LiquidNetwork.TESTNET,
}


def check_lnd_version(full_version: str) -> float:
    """Check a version string such as ``0.14.1-beta`` and return its parsed value.

    The part before the first ``-`` loses its first two characters and is read
    as a decimal number; anything below ``MIN_LND_VERSION`` is rejected.
    """
    version_string = full_version.split("-", 1)[0][2:]
    if not _DECIMAL_RE.fullmatch(version_string):
        raise ValueError(f"invalid version number {version_string!r} in {full_version!r}")
    version = float(version_string)
    if version < MIN_LND_VERSION:
        raise UnsupportedLndVersionError()
    return version


def bitcoin_network(name: str) -> BitcoinNetwork:
    """Map a network name reported by the node to a Bitcoin network."""
    try:
        return _BITCOIN_NETWORKS[name]
    except KeyError:
        raise ValueError("unknown bitcoin network") from None


def liquid_network(chain: str) -> LiquidNetwork:
    """Map an elements chain name to a Liquid network; unknown chains mean testnet."""
    return _LIQUID_NETWORKS.get(chain, LiquidNetwork.TESTNET)


def make_directories(full_dir: str | os.PathLike[str]) -> None:
    """Create ``full_dir`` and its parents with owner-only permissions.

    An existing directory is fine. On failure the reason is written to
    standard error and an ``OSError`` is raised; a dangling symlink in the
    way is reported as a likely unmounted target.
    """
    path = os.fspath(full_dir)
    try:
        os.makedirs(path, mode=0o700, exist_ok=True)
    except OSError as err:
        reason: object = err
        if isinstance(err, FileExistsError) and os.path.islink(path):
            reason = f"is symlink {path} -> {os.readlink(path)} mounted?"
        message = f"failed to create directory {path}: {reason}"
        print(message, file=sys.stderr)
        raise OSError(message) from err