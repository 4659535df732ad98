# peerswap

Pure-Python helpers for peer-to-peer swaps that rebalance Lightning
channels against on-chain Bitcoin or Liquid funds. The package has no
third-party dependencies and needs Python 3.10 or later.

## Modules

| Module | Purpose |
| --- | --- |
| `peerswap.preimage` | 32-byte `Preimage` and `PaymentHash` values, the `Invoice` record, and constructors |
| `peerswap.payments` | Multi-part payment splitting, the `mpp_payment` driver, invoice labels and channel id normalisation |
| `peerswap.peerstats` | `SwapStats`, `PeerSwapPeerChannel` and `PeerSwapPeer` records with JSON-ready `to_dict()` output |
| `peerswap.lndutil` | `ShortChannelId` conversion between the 64-bit integer, `block:tx:out` and `blockxtxxout` forms |
| `peerswap.daemon` | Node version check, Bitcoin and Liquid network name mapping, data directory creation |
| `peerswap.logger` | Process-wide logger with `info` and `debug` helpers and a replaceable backend |
| `peerswap.isdev` | Mode switches `is_dev()` and `fast_tests()` read from the environment |

## Examples

### Preimages

```python
from peerswap.preimage import random_preimage, make_preimage_from_str

preimage = random_preimage()
same = make_preimage_from_str(str(preimage))   # 64 hex characters
assert same == preimage
assert preimage.matches(preimage.hash())        # SHA-256 of the preimage
```

`make_preimage` and `make_preimage_from_str` raise `ValueError` for input
of the wrong length or for invalid hex.

### Multi-part payments

Payments are split into parts of at most 1,000,000,000 msat:

```python
from peerswap.payments import split_payment

split_payment(5_100_000_000)
# [1_000_000_000] * 5 + [100_000_000]
```

`mpp_payment(mpp_payer, pay_waiter, payreq, channel, bolt11)` sends every
part through `channel` with `mpp_payer.send_pay_channel(...)`, then waits
for all parts in parallel with `pay_waiter.wait_send_pay_part(...)` and
returns the first preimage found. An exception from a send stops at once;
an exception from a wait is raised after all waits have finished. A
zero-amount invoice raises `ValueError`, and `RuntimeError` is raised if
no part returned a preimage. `bolt11` is a `DecodedBolt11`; the waiter
returns `SendPayFields`.

```python
from peerswap.payments import get_label, normalize_channel_id

get_label("swap123", "fee")        # "swap123_fee"
normalize_channel_id("1:2:3")      # "1x2x3"
```

### Short channel ids

```python
from peerswap.lndutil import ShortChannelId

scid = ShortChannelId(700000, 1234, 1)
str(scid)                 # "700000:1234:1"
scid.to_cl_string()       # "700000x1234x1"
scid.matches("700000x1234x1")                      # True
assert ShortChannelId.from_int(scid.to_int()) == scid
```

### Peer statistics

```python
from peerswap.peerstats import PeerSwapPeer, PeerSwapPeerChannel, SwapStats

channel = PeerSwapPeerChannel.from_balances("700000x1234x1", 300, 1000, "CHANNELD_NORMAL")
# local_balance 300, remote_balance 700, balance 0.3
peer = PeerSwapPeer(node_id="02ab...", swaps_allowed=True,
                    supported_assets=["btc"], channels=[channel],
                    as_sender=SwapStats(swaps_out=1, sats_out=50_000))
peer.to_dict()   # keys: nodeid, swaps_allowed, supported_assets, channels, sent, total_fee_paid
```

An empty channel gives a `balance` of NaN; negative amounts, or a local
balance above capacity, raise `ValueError`.

### Start-up checks

```python
from peerswap.daemon import check_lnd_version, bitcoin_network, liquid_network, make_directories

check_lnd_version("0.14.1-beta")   # 14.1; older versions raise UnsupportedLndVersionError
bitcoin_network("bitcoin")         # BitcoinNetwork.MAINNET; unknown names raise ValueError
liquid_network("liquidv1")         # LiquidNetwork.LIQUID; unknown chains give TESTNET
make_directories("/tmp/peerswap-data")   # created with mode 0700, existing is fine
```

## Logging

`peerswap.logger.info(fmt, *args)` and `peerswap.logger.debug(fmt, *args)`
format with `%` and, by default, write lines such as
`2024/01/01 12:00:00 [INFO] message` to standard error. Pass any object
with `info` and `debug` methods to `peerswap.logger.set_logger` to route
messages elsewhere; `set_logger(None)` restores the default. A
`PeerswapLogger(stream, debug_enabled)` writes to a chosen stream and can
drop debug lines.

## Modes

`peerswap.isdev.is_dev()` is true when `PEERSWAP_DEV` is set to `1`,
`true`, `yes` or `on`; `fast_tests()` does the same for
`PEERSWAP_FAST_TEST`.

## What this package does not do

It is a library of helpers, not a running swap service. It has no daemon
or command-line client, does not connect to a Lightning or Elements node,
does not encode or send peer messages, does not build or broadcast
on-chain transactions, and keeps no record of swaps. Callers supply the
node connections themselves, for example as the payer and waiter objects
handed to `mpp_payment`.

## Tests

The test suite uses pytest and is installed with the `test` extra:

```
pip install -e .[test]
pytest
```