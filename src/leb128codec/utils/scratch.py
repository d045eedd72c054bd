"""Reusable scratch buffers for big-integer byte manipulation.

ScratchPool keeps a bounded free list of bytearray objects so that repeated
two's-complement conversions do not allocate a fresh buffer every time. The
pool is purely a throughput aid: buffers are cleared when they are handed out
and again when they come back, so nothing a caller writes survives into the
next use.

Typical usage example:

    with get_pool().acquire() as buf:
        buf.extend(data)
        ...

Thread-safety:
    acquire() may be called from any number of threads. Each call receives its
    own buffer; a buffer is never checked out twice at the same time.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from ..settings import get_settings

logger = logging.getLogger(__name__)


class ScratchPool:
    """A lock-guarded free list of bytearray buffers.

    Args:
        max_size: Maximum number of idle buffers kept for reuse. 0 disables
            retention, so every acquire() allocates a new buffer.
    """

    def __init__(self, max_size: int):
        if max_size < 0:
            raise ValueError(f"max_size must be non-negative: {max_size}")
        self._max_size = max_size
        self._free: list[bytearray] = []
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        return self._max_size

    def idle_count(self) -> int:
        with self._lock:
            return len(self._free)

    def get(self) -> bytearray:
        """Check out an empty buffer. Must be returned with put()."""
        with self._lock:
            buf = self._free.pop() if self._free else None
        if buf is None:
            return bytearray()
        buf.clear()
        return buf

    def put(self, buf: bytearray):
        """Return a buffer obtained from get()."""
        buf.clear()
        with self._lock:
            if len(self._free) < self._max_size:
                self._free.append(buf)

    @contextmanager
    def acquire(self) -> Iterator[bytearray]:
        buf = self.get()
        try:
            yield buf
        finally:
            self.put(buf)


_pool: ScratchPool | None = None
_pool_lock = threading.Lock()


def get_pool() -> ScratchPool:
    """Return the shared pool, creating it from the current settings on first use."""
    global _pool
    with _pool_lock:
        if _pool is None:
            _pool = ScratchPool(get_settings().pool_max_size)
            logger.debug("Created scratch pool with max_size=%d", _pool.max_size)
        return _pool


def reset_pool():
    """Discard the shared pool; the next get_pool() builds a new one."""
    global _pool
    with _pool_lock:
        _pool = None
