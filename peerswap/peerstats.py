"""Per-peer swap statistics and channel balances as reported by the list-peers command."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class SwapStats:
    """Counts and volumes of completed swaps in one role."""

    swaps_out: int = 0
    swaps_in: int = 0
    sats_out: int = 0
    sats_in: int = 0

    def __post_init__(self) -> None:
        for name in ("swaps_out", "swaps_in", "sats_out", "sats_in"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative")

    def to_dict(self) -> dict[str, int]:
        """JSON-ready mapping with the wire field names."""
        return {
            "total_swaps_out": self.swaps_out,
            "total_swaps_in": self.swaps_in,
            "total_sats_swapped_out": self.sats_out,
            "total_sats_swapped_in": self.sats_in,
        }


@dataclass
class PeerSwapPeerChannel:
    """A channel with a swap-capable peer and its balances in sats."""

    channel_id: str
    local_balance: int
    remote_balance: int
    balance: float
    state: str

    @classmethod
    def from_balances(
        cls,
        short_channel_id: str,
        channel_sat: int,
        channel_total_sat: int,
        state: str,
    ) -> "PeerSwapPeerChannel":
        """Build from the local and total channel amounts.

        ``balance`` is the local share of the channel's capacity; an empty
        channel yields NaN, as does any division of zero by zero.
        """
        if channel_sat < 0 or channel_total_sat < 0:
            raise ValueError("channel amounts must not be negative")
        if channel_sat > channel_total_sat:
            raise ValueError(
                f"local balance {channel_sat} exceeds channel capacity {channel_total_sat}"
            )
        if channel_total_sat == 0:
            ratio = math.nan
        else:
            ratio = channel_sat / channel_total_sat
        return cls(
            channel_id=short_channel_id,
            local_balance=channel_sat,
            remote_balance=channel_total_sat - channel_sat,
            balance=ratio,
            state=state,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping with the wire field names."""
        return {
            "short_channel_id": self.channel_id,
            "local_balance": self.local_balance,
            "remote_balance": self.remote_balance,
            "balance": self.balance,
            "state": self.state,
        }


@dataclass
class PeerSwapPeer:
    """A peer that runs the swap protocol, with its channels and swap history."""

    node_id: str
    swaps_allowed: bool = False
    supported_assets: list[str] = field(default_factory=list)
    channels: list[PeerSwapPeerChannel] = field(default_factory=list)
    as_sender: Optional[SwapStats] = None
    as_receiver: Optional[SwapStats] = None
    paid_fee: int = 0

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; absent sender and receiver stats are left out."""
        result: dict[str, Any] = {
            "nodeid": self.node_id,
            "swaps_allowed": self.swaps_allowed,
            "supported_assets": list(self.supported_assets),
            "channels": [channel.to_dict() for channel in self.channels],
        }
        if self.as_sender is not None:
            result["sent"] = self.as_sender.to_dict()
        if self.as_receiver is not None:
            result["received"] = self.as_receiver.to_dict()
        result["total_fee_paid"] = self.paid_fee
        return result