"""Short channel ids in their integer, colon and ``x``-separated forms."""

from __future__ import annotations

from dataclasses import dataclass

_BLOCK_HEIGHT_BITS = 24
_TX_INDEX_BITS = 24
_TX_POSITION_BITS = 16

_MAX_BLOCK_HEIGHT = (1 << _BLOCK_HEIGHT_BITS) - 1
_MAX_TX_INDEX = (1 << _TX_INDEX_BITS) - 1
_MAX_TX_POSITION = (1 << _TX_POSITION_BITS) - 1
_MAX_VALUE = (1 << 64) - 1


@dataclass(frozen=True)
class ShortChannelId:
    """A channel's location on chain: block height, transaction index and output."""

    block_height: int
    tx_index: int
    tx_position: int

    def __post_init__(self) -> None:
        for name, limit in (
            ("block_height", _MAX_BLOCK_HEIGHT),
            ("tx_index", _MAX_TX_INDEX),
            ("tx_position", _MAX_TX_POSITION),
        ):
            value = getattr(self, name)
            if not 0 <= value <= limit:
                raise ValueError(f"{name} {value} out of range 0..{limit}")

    @classmethod
    def from_int(cls, value: int) -> "ShortChannelId":
        """Unpack the 64-bit integer form used by the gRPC interface."""
        if not 0 <= value <= _MAX_VALUE:
            raise ValueError(f"short channel id {value} does not fit in 64 bits")
        return cls(
            block_height=value >> (_TX_INDEX_BITS + _TX_POSITION_BITS),
            tx_index=(value >> _TX_POSITION_BITS) & _MAX_TX_INDEX,
            tx_position=value & _MAX_TX_POSITION,
        )

    def to_int(self) -> int:
        """Pack into the 64-bit integer form."""
        return (
            (self.block_height << (_TX_INDEX_BITS + _TX_POSITION_BITS))
            | (self.tx_index << _TX_POSITION_BITS)
            | self.tx_position
        )

    def __str__(self) -> str:
        return f"{self.block_height}:{self.tx_index}:{self.tx_position}"

    def to_cl_string(self) -> str:
        """The ``blockxtxxout`` form used by c-lightning."""
        return f"{self.block_height}x{self.tx_index}x{self.tx_position}"

    def matches(self, short_channel_id: str) -> bool:
        """Whether ``short_channel_id`` names this channel in either string form."""
        return short_channel_id in (str(self), self.to_cl_string())