"""Payment preimages and hashes."""

from __future__ import annotations

import binascii
import hashlib
import secrets
from dataclasses import dataclass

PREIMAGE_SIZE = 32
HASH_SIZE = 32


@dataclass(frozen=True)
class PaymentHash:
    """A 32-byte payment hash."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != HASH_SIZE:
            raise ValueError(f"invalid hash length of {len(self.value)}, want {HASH_SIZE}")

    def __str__(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value


ZERO_HASH = PaymentHash(bytes(HASH_SIZE))


@dataclass(frozen=True)
class Preimage:
    """A 32-byte payment preimage."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != PREIMAGE_SIZE:
            raise ValueError(
                f"invalid preimage length of {len(self.value)}, want {PREIMAGE_SIZE}"
            )

    def __str__(self) -> str:
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def hash(self) -> PaymentHash:
        """SHA-256 of the preimage."""
        return PaymentHash(hashlib.sha256(self.value).digest())

    def matches(self, payment_hash: PaymentHash) -> bool:
        """Whether this preimage hashes to ``payment_hash``."""
        return payment_hash == self.hash()


@dataclass(frozen=True)
class Invoice:
    """The decoded parts of a payment request that swaps need."""

    payment_hash: str
    amount: int
    description: str


def make_preimage(data: bytes) -> Preimage:
    """Build a preimage from exactly 32 bytes."""
    return Preimage(bytes(data))


def make_preimage_from_str(hex_str: str) -> Preimage:
    """Build a preimage from a 64-character hex string."""
    if len(hex_str) != PREIMAGE_SIZE * 2:
        raise ValueError(
            f"invalid preimage string length of {len(hex_str)}, want {PREIMAGE_SIZE * 2}"
        )
    try:
        data = binascii.unhexlify(hex_str)
    except binascii.Error as err:
        raise ValueError(f"invalid preimage hex: {err}") from err
    return make_preimage(data)


def random_preimage() -> Preimage:
    """A preimage of cryptographically random bytes."""
    return Preimage(secrets.token_bytes(PREIMAGE_SIZE))