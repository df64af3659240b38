def to_little_endian_64(value: int) -> bytes:
    if not 0 <= value < 2**64:
        raise ValueError(f"value {value} does not fit in 64 bits")
    return bytes((value >> (8 * i)) & 0xFF for i in range(8))


def from_little_endian_64(data: bytes) -> int:
    if len(data) != 8:
        raise ValueError(f"expected 8 bytes, got {len(data)}")
    return int.from_bytes(data, "little")
