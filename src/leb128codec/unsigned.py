"""LEB128 encoding for unsigned 64-bit integers.

Each byte carries 7 payload bits, least significant group first, with the high
bit (0x80) set on every byte except the last. A 64-bit value needs at most
ceil(64 / 7) = 10 bytes.
"""
import logging

from .errors import InvalidEncoding, Overflow
from .settings import OverflowPolicy, get_settings

logger = logging.getLogger(__name__)

U64_MAX = (1 << 64) - 1
MAX_U64_GROUPS = 10


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as LEB128.

    Args:
        value: Integer in the range 0 to 2^64-1

    Returns:
        Minimal LEB128 encoding, 1 to 10 bytes long

    Raises:
        TypeError: If value is not an int
        ValueError: If value is negative or exceeds 2^64-1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot encode {type(value).__name__} as an unsigned integer")
    if value < 0:
        raise ValueError(f"Cannot encode negative value: {value}")
    if value > U64_MAX:
        raise ValueError(f"Value {value} exceeds maximum (2^64-1)")

    result = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value == 0:
            result.append(byte)
            break
        result.append(byte | 0x80)

    return bytes(result)


def decode_u64_at(data: bytes, offset: int = 0, *,
                  overflow: OverflowPolicy | str | None = None) -> tuple[int, int]:
    """Decode one unsigned LEB128 value starting at ``offset``.

    Reading stops after the first byte whose continuation bit is clear; nothing
    beyond it is touched.

    Args:
        data: Buffer containing the encoded value
        offset: Starting position in the buffer
        overflow: Policy for values wider than 64 bits. Defaults to the
            ``decode.overflow`` setting.

    Returns:
        Tuple of (decoded_value, bytes_consumed)

    Raises:
        InvalidEncoding: If the buffer is empty at offset or the value has no
            terminating byte
        Overflow: If the value does not fit in 64 bits under OverflowPolicy.ERROR
    """
    if offset < 0:
        raise ValueError(f"Offset must be non-negative: {offset}")
    if offset >= len(data):
        raise InvalidEncoding(f"No data to decode at offset {offset} (length {len(data)})", offset)

    policy = OverflowPolicy(overflow) if overflow is not None else get_settings().overflow_policy

    result = 0
    shift = 0
    truncated = False
    pos = offset
    while True:
        if pos >= len(data):
            raise InvalidEncoding(f"Unterminated LEB128 value starting at offset {offset}", pos)
        byte = data[pos]
        payload = byte & 0x7F

        if shift >= 64 or (payload << shift) > U64_MAX:
            if policy is OverflowPolicy.ERROR:
                raise Overflow(f"LEB128 value starting at offset {offset} exceeds 64 bits", pos)
            truncated = True

        result |= payload << shift
        pos += 1
        if byte & 0x80 == 0:
            break
        shift += 7

    if truncated:
        logger.warning("Truncated LEB128 value at offset %d (%d bytes) to 64 bits", offset, pos - offset)
        result &= U64_MAX

    return result, pos - offset


def decode_u64(data: bytes, *, overflow: OverflowPolicy | str | None = None) -> int:
    """Decode an unsigned LEB128 value from the start of ``data``.

    Trailing bytes after the terminating group are ignored.
    """
    value, _ = decode_u64_at(data, overflow=overflow)
    return value
