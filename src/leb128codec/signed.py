"""Signed LEB128 encoding for arbitrary-precision integers.

Negative values are written in two's complement. Python ints are sign and
magnitude with no fixed width, so the encoder converts the magnitude with
twos_complement() and then restores the sign fill after every 7-bit shift with
sign_extend(). The output is always the shortest encoding: the last byte's 0x40
bit equals the sign of the value.
"""
from .errors import InvalidEncoding
from .utils.bigint import get_bit, is_all_ones, negate, set_bit, sign_extend, twos_complement


def encode_big_signed(value: int) -> bytes:
    """Encode a signed integer of any size as LEB128.

    The argument is left untouched.

    Args:
        value: Integer to encode

    Returns:
        Minimal two's-complement LEB128 encoding

    Raises:
        TypeError: If value is not an int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Cannot encode {type(value).__name__} as a signed integer")

    size = abs(value).bit_length()
    negative = value < 0
    n = twos_complement(value) if negative else int(value)

    result = bytearray()
    more = True
    while more:
        # Mask and logical shift in one step
        n, byte = divmod(n, 128)

        if negative:
            n = sign_extend(n, size)

        if (n == 0 and not byte & 0x40) or (negative and is_all_ones(n, size) and byte & 0x40):
            more = False
        else:
            byte |= 0x80
        result.append(byte)

    return bytes(result)


def decode_big_signed_at(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one signed LEB128 value starting at ``offset``.

    Args:
        data: Buffer containing the encoded value
        offset: Starting position in the buffer

    Returns:
        Tuple of (decoded_value, bytes_consumed)

    Raises:
        InvalidEncoding: If the buffer is empty at offset or the value has no
            terminating byte
    """
    if offset < 0:
        raise ValueError(f"Offset must be non-negative: {offset}")
    if offset >= len(data):
        raise InvalidEncoding(f"No data to decode at offset {offset} (length {len(data)})", offset)

    result = 0
    shift = 0
    pos = offset
    while True:
        if pos >= len(data):
            raise InvalidEncoding(f"Unterminated LEB128 value starting at offset {offset}", pos)
        byte = data[pos]
        result |= (byte & 0x7F) << shift
        shift += 7
        pos += 1
        if byte & 0x80 == 0:
            break

    consumed = pos - offset
    if get_bit(byte, 6):
        for bit_pos in range(shift, consumed * 8):
            result = set_bit(result, bit_pos)
        result = negate(twos_complement(result))

    return result, consumed


def decode_big_signed(data: bytes) -> int:
    """Decode a signed LEB128 value from the start of ``data``.

    Trailing bytes after the terminating group are ignored.
    """
    value, _ = decode_big_signed_at(data)
    return value
