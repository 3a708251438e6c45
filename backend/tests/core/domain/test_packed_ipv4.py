from ipaddress import IPv4Address

import pytest

from core.domain.packed_ipv4 import to_ipv4_address


def test_to_ipv4_address_reads_least_significant_byte_first() -> None:
    packed = int.from_bytes(bytes([4, 3, 2, 1]), byteorder="little")

    assert to_ipv4_address(packed) == IPv4Address("4.3.2.1")
    assert to_ipv4_address(0x0100007F) == IPv4Address("127.0.0.1")


def test_to_ipv4_address_accepts_signed_and_unsigned_ranges() -> None:
    assert to_ipv4_address(-1) == IPv4Address("255.255.255.255")
    assert to_ipv4_address(0xFFFFFFFF) == IPv4Address("255.255.255.255")
    assert to_ipv4_address(-(2**31)) == IPv4Address("0.0.0.128")


@pytest.mark.parametrize("packed", [2**32, -(2**31) - 1])
def test_to_ipv4_address_rejects_values_wider_than_32_bits(packed: int) -> None:
    with pytest.raises(OverflowError):
        to_ipv4_address(packed)
