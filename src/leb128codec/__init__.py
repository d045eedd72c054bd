from .errors import LEB128Error, InvalidEncoding, Overflow
from .settings import CodecSettings, OverflowPolicy
from .unsigned import encode_u64, decode_u64, decode_u64_at
from .signed import encode_big_signed, decode_big_signed, decode_big_signed_at
