import os

import pytest

from peerswap.daemon import (
    MIN_LND_VERSION,
    BitcoinNetwork,
    LiquidNetwork,
    UnsupportedLndVersionError,
    bitcoin_network,
    check_lnd_version,
    liquid_network,
    make_directories,
)


def test_minimum_version_is_accepted():
    assert check_lnd_version("0.14.1-beta") == MIN_LND_VERSION


def test_newer_version_is_accepted():
    assert check_lnd_version("0.15.0-beta") >= MIN_LND_VERSION


def test_version_without_suffix():
    assert check_lnd_version("0.14.1") == MIN_LND_VERSION


def test_older_version_is_rejected():
    with pytest.raises(UnsupportedLndVersionError) as info:
        check_lnd_version("0.13.0-beta")
    assert "requires 14.1" in str(info.value)


@pytest.mark.parametrize("version", ["", "v0.14.1-beta", "0.x-beta", "abc"])
def test_unparsable_version_raises(version):
    with pytest.raises(ValueError):
        check_lnd_version(version)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("regtest", BitcoinNetwork.REGTEST),
        ("testnet", BitcoinNetwork.TESTNET),
        ("signet", BitcoinNetwork.SIGNET),
        ("bitcoin", BitcoinNetwork.MAINNET),
        ("mainnet", BitcoinNetwork.MAINNET),
    ],
)
def test_bitcoin_network_names(name, expected):
    assert bitcoin_network(name) is expected


def test_unknown_bitcoin_network_raises():
    with pytest.raises(ValueError, match="unknown bitcoin network"):
        bitcoin_network("litecoin")


@pytest.mark.parametrize(
    "chain, expected",
    [
        ("liquidv1", LiquidNetwork.LIQUID),
        ("liquidregtest", LiquidNetwork.REGTEST),
        ("liquidtestnet", LiquidNetwork.TESTNET),
        ("something-else", LiquidNetwork.TESTNET),
    ],
)
def test_liquid_network_names(chain, expected):
    assert liquid_network(chain) is expected


def test_make_directories_creates_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    make_directories(target)
    assert target.is_dir()


def test_make_directories_is_idempotent(tmp_path):
    target = tmp_path / "data"
    make_directories(target)
    make_directories(str(target))
    assert target.is_dir()


def test_make_directories_over_file_fails(tmp_path, capsys):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(OSError) as info:
        make_directories(target)
    assert "failed to create directory" in str(info.value)
    assert "failed to create directory" in capsys.readouterr().err


def test_make_directories_dangling_symlink(tmp_path):
    link = tmp_path / "link"
    os.symlink(tmp_path / "missing", link)
    with pytest.raises(OSError) as info:
        make_directories(link)
    assert "mounted?" in str(info.value)