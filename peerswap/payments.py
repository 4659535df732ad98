"""Lightning payment helpers: invoice labels, channel ids and multi-part payments."""

from __future__ import annotations

import secrets
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Any, Protocol

PAYMENT_SPLITTER_MSAT = 1_000_000_000
WAIT_SEND_PAY_TIMEOUT = 30


@dataclass
class DecodedBolt11:
    """The fields of a decoded BOLT 11 invoice that payments need."""

    milli_satoshis: int
    payment_hash: str = ""
    payee: str = ""
    min_final_cltv_expiry: int = 0
    payment_secret: str = ""


@dataclass
class SendPayFields:
    """The result of a finished (part) payment."""

    payment_preimage: str = ""
    payment_hash: str = ""
    status: str = ""
    part_id: int = 0


class MppPayer(Protocol):
    """Sends one part of a payment through a given channel."""

    def send_pay_channel(
        self,
        payreq: str,
        bolt11: DecodedBolt11,
        amount_msat: int,
        channel: str,
        label: str,
        part_id: int,
    ) -> str:
        """Send ``amount_msat`` of the invoice as part ``part_id``."""


class PayWaiter(Protocol):
    """Waits for one part of a payment to finish."""

    def wait_send_pay_part(
        self, payment_hash: str, timeout: int, part_id: int
    ) -> SendPayFields:
        """Block until part ``part_id`` of the payment completes."""


def split_payment(amount_msat: int) -> list[int]:
    """Split ``amount_msat`` into full-size parts followed by the remainder, if any."""
    if amount_msat < 0:
        raise ValueError(f"amount must not be negative, got {amount_msat}")
    full_parts, remainder = divmod(amount_msat, PAYMENT_SPLITTER_MSAT)
    parts = [PAYMENT_SPLITTER_MSAT] * full_parts
    if remainder:
        parts.append(remainder)
    return parts


def mpp_payment(
    mpp_payer: MppPayer,
    pay_waiter: PayWaiter,
    payreq: str,
    channel: str,
    bolt11: DecodedBolt11,
) -> str:
    """Pay ``bolt11`` in parts through ``channel`` and return the preimage.

    Every part is sent before any is waited on; a failed send aborts at once.
    After all parts have completed, the first preimage found is returned, or
    the first error met is raised.
    """
    parts = split_payment(bolt11.milli_satoshis)
    if not parts:
        raise ValueError("payment amount is zero, nothing to pay")
    label = secrets.token_hex(32)

    for part_id, amount in enumerate(parts, start=1):
        mpp_payer.send_pay_channel(
            payreq, bolt11, amount, channel, f"{label}{part_id}", part_id
        )

    with ThreadPoolExecutor(max_workers=len(parts)) as pool:
        futures = [
            pool.submit(
                pay_waiter.wait_send_pay_part,
                bolt11.payment_hash,
                WAIT_SEND_PAY_TIMEOUT,
                part_id,
            )
            for part_id in range(1, len(parts) + 1)
        ]
        completed = list(as_completed(futures))

    for future in completed:
        error = future.exception()
        if error is not None:
            raise error
        result = future.result()
        if result is not None and result.payment_preimage:
            return result.payment_preimage
    raise RuntimeError("no payment part returned a preimage")


def get_label(swap_id: str, invoice_type: Any) -> str:
    """Invoice label for a swap and invoice type."""
    return f"{swap_id}_{invoice_type}"


def normalize_channel_id(channel: str) -> str:
    """Turn a ``block:tx:out`` short channel id into ``blockxtxxout`` form."""
    if "x" not in channel:
        return channel.replace(":", "x")
    return channel