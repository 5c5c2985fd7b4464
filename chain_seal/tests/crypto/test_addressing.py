import hashlib

import pytest

from chain_seal.crypto.addressing import ContentAddresser


def test_address_of_is_sha256_hex_by_default() -> None:
    addresser = ContentAddresser()

    assert addresser.address_of(b"hello") == hashlib.sha256(b"hello").hexdigest()


def test_address_of_is_stable_across_calls() -> None:
    addresser = ContentAddresser()
    value = bytes(range(256))

    assert addresser.address_of(value) == addresser.address_of(value)
    assert ContentAddresser().address_of(value) == addresser.address_of(value)


def test_address_of_differs_for_different_bytes() -> None:
    addresser = ContentAddresser()

    assert addresser.address_of(b"a") != addresser.address_of(b"b")


def test_custom_algorithm_is_used() -> None:
    addresser = ContentAddresser("sha512")

    assert addresser.algorithm == "sha512"
    assert addresser.address_of(b"x") == hashlib.sha512(b"x").hexdigest()


def test_unknown_algorithm_is_rejected() -> None:
    with pytest.raises(ValueError):
        ContentAddresser("not-a-hash")


@pytest.mark.parametrize("algorithm", ["shake_128", "shake_256"])
def test_variable_length_algorithm_is_rejected(algorithm: str) -> None:
    with pytest.raises(ValueError, match="Variable-length"):
        ContentAddresser(algorithm)


def test_share_key_depends_on_recipient_and_address() -> None:
    addresser = ContentAddresser()
    address = addresser.address_of(b"payload")
    other_address = addresser.address_of(b"other")
    alice = b"\x02" + b"\x01" * 32
    bob = b"\x03" + b"\x01" * 32

    key = addresser.share_key_for(alice, address)

    assert key == addresser.share_key_for(alice, address)
    assert key != addresser.share_key_for(bob, address)
    assert key != addresser.share_key_for(alice, other_address)
    assert key == hashlib.sha256(alice + bytes.fromhex(address)).hexdigest()
