"""Bit-level helpers for treating a Python int as an unbounded two's-complement value.

The signed LEB128 encoder works on the two's-complement form of a negative
number, but an unbounded integer has no fixed width to hold that form. These
helpers operate on the magnitude's bytes and on individual bits, and rebuild the
sign-fill that an arithmetic right shift would have produced.

All functions return new values; none of them modifies its arguments.
"""
from .scratch import get_pool


def magnitude_bytes(n: int) -> bytes:
    """Return the minimal big-endian bytes of abs(n). Zero yields b''."""
    n = abs(n)
    return n.to_bytes((n.bit_length() + 7) // 8, 'big')


def from_magnitude_bytes(data: bytes) -> int:
    return int.from_bytes(data, 'big')


def get_bit(n: int, pos: int) -> int:
    return (n >> pos) & 1


def set_bit(n: int, pos: int, bit: int = 1) -> int:
    if bit:
        return n | (1 << pos)
    return n & ~(1 << pos)


def add_one(n: int) -> int:
    """Add one to n; completes the flip-and-add-one of twos_complement()."""
    return n + 1


def negate(n: int) -> int:
    """Flip the sign of n; turns a decoded magnitude into its negative value."""
    return -n


def twos_complement(n: int) -> int:
    """Flip every bit of the magnitude's byte representation and add one.

    The width is that of magnitude_bytes(n), i.e. a whole number of bytes. For a
    negative n the result is its two's-complement form as a non-negative int; for
    a value whose top bits are already all ones it reverses the conversion and
    yields the magnitude.

    Args:
        n: Integer whose magnitude is converted. The sign is ignored.

    Returns:
        Non-negative integer holding the two's-complement bit pattern
    """
    with get_pool().acquire() as buf:
        buf.extend(magnitude_bytes(n))
        for i, b in enumerate(buf):
            buf[i] = ~b & 0xFF
        flipped = from_magnitude_bytes(buf)
    return add_one(flipped)


def sign_extend(value: int, size: int) -> int:
    """Force the bits a 7-bit arithmetic right shift would have filled with ones.

    Sets bits [size - 7, size), or [0, 7) when size is less than 7.

    Args:
        value: Working value after a logical shift by 7
        size: Bit length of the original magnitude
    """
    bit_pos = size - 7
    end = size
    if bit_pos < 0:
        bit_pos = 0
        end = 7
    for pos in range(bit_pos, end):
        value = set_bit(value, pos)
    return value


def is_all_ones(value: int, size: int) -> bool:
    """Check that the low ``size`` bits of value are all set."""
    for pos in range(size):
        if not get_bit(value, pos):
            return False
    return True
