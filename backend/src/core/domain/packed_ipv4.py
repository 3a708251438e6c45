from ipaddress import IPv4Address


def to_ipv4_address(packed: int) -> IPv4Address:
    """Unpack a little-endian (LSB first) 32-bit integer, e.g. 0x01020304 is 4.3.2.1.

    Both the signed and the unsigned 32-bit ranges are accepted. Values outside
    them raise ``OverflowError``.
    """
    return IPv4Address(packed.to_bytes(4, byteorder="little", signed=packed < 0))
