import hashlib

import pytest

from peerswap.preimage import (
    ZERO_HASH,
    Invoice,
    PaymentHash,
    Preimage,
    make_preimage,
    make_preimage_from_str,
    random_preimage,
)


def test_zero_preimage_hash_is_sha256_of_zeros():
    preimage = make_preimage(bytes(32))
    assert str(preimage.hash()) == (
        "66687aadf862bd776c8fc18b8e9f8e20089714856ee233b3902a591d0d5f2925"
    )


def test_string_round_trip():
    preimage = random_preimage()
    text = str(preimage)
    assert len(text) == 64
    assert make_preimage_from_str(text) == preimage


def test_hash_matches_own_preimage_only():
    first = random_preimage()
    second = random_preimage()
    assert first.matches(first.hash())
    assert not first.matches(second.hash())
    assert not first.matches(ZERO_HASH)


def test_hash_is_sha256_digest():
    data = bytes(range(32))
    assert bytes(make_preimage(data).hash()) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("size", [0, 31, 33])
def test_make_preimage_wrong_length(size):
    with pytest.raises(ValueError, match="invalid preimage length"):
        make_preimage(bytes(size))


def test_make_preimage_from_str_wrong_length():
    with pytest.raises(ValueError, match="invalid preimage string length"):
        make_preimage_from_str("ab")


def test_make_preimage_from_str_bad_hex():
    with pytest.raises(ValueError):
        make_preimage_from_str("zz" * 32)


def test_payment_hash_length_checked():
    with pytest.raises(ValueError):
        PaymentHash(bytes(5))


def test_random_preimages_are_full_length_and_distinct():
    a = random_preimage()
    b = random_preimage()
    assert len(bytes(a)) == 32
    assert a.value != b.value


def test_preimage_is_immutable():
    preimage = Preimage(bytes(32))
    with pytest.raises(AttributeError):
        preimage.value = bytes(32)


def test_invoice_fields():
    invoice = Invoice(payment_hash="ab", amount=10, description="liquid swap")
    assert (invoice.payment_hash, invoice.amount, invoice.description) == ("ab", 10, "liquid swap")