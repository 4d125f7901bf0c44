"""Reading, setting and clearing single bits of an integer."""


def _mask(i: int) -> int:
    if i < 0:
        raise ValueError(f"bit index must be non-negative, got {i}")
    return 1 << i


def extract_bit(n: int, i: int) -> int:
    """Return the i-th bit of ``n`` (0 or 1)."""
    mask = _mask(i)
    bit = (n & mask) >> i
    return bit


def set_bit(n: int, i: int) -> int:
    """Return ``n`` with its i-th bit set."""
    return n | _mask(i)


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with its i-th bit cleared."""
    return n & ~_mask(i)