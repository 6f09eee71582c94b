"""Byte-buffer array descriptors and element swapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]


@dataclass
class Array:
    """A buffer holding ``size`` elements of ``memb_size`` bytes each."""

    buffer: Optional[Buffer] = None
    size: int = 0
    memb_size: int = 0

    def element(self, idx: int) -> bytes:
        """Return a copy of the element at ``idx``."""
        if is_arr_null(self):
            raise ValueError("array is null")
        if not 0 <= idx < self.size:
            raise IndexError(f"index {idx} out of range for size {self.size}")
        start = idx * self.memb_size
        return bytes(self.buffer[start:start + self.memb_size])


def is_arr_null(arr: Optional[Array]) -> bool:
    """True if ``arr`` is missing, has no buffer or has a zero size."""
    return arr is None or arr.buffer is None or arr.size == 0 or arr.memb_size == 0


def buf_idx(buffer: Buffer, i: int, memb_size: int) -> memoryview:
    """Return a view of the ``i``-th ``memb_size``-byte element of ``buffer``."""
    start = i * memb_size
    return memoryview(buffer)[start:start + memb_size]


def _check(arr: Optional[Array], idx_a: int, idx_b: int) -> None:
    if is_arr_null(arr):
        raise ValueError("array is null")
    for idx in (idx_a, idx_b):
        if not 0 <= idx < arr.size:
            raise IndexError(f"index {idx} out of range for size {arr.size}")


def swap(arr: Array, idx_a: int, idx_b: int) -> None:
    """Swap two elements of ``arr`` in place."""
    _check(arr, idx_a, idx_b)
    if idx_a == idx_b:
        return
    m = arr.memb_size
    a, b = idx_a * m, idx_b * m
    buf = arr.buffer
    buf[a:a + m], buf[b:b + m] = bytes(buf[b:b + m]), bytes(buf[a:a + m])


def swap_with_mbuffer(arr: Array, memb_buffer: Optional[Buffer], idx_a: int, idx_b: int) -> None:
    """Swap two elements of ``arr`` using ``memb_buffer`` as scratch space."""
    if is_arr_null(arr):
        raise ValueError("array is null")
    if memb_buffer is None:
        raise ValueError("member buffer is missing")
    _check(arr, idx_a, idx_b)
    if idx_a == idx_b:
        return
    m = arr.memb_size
    if len(memb_buffer) < m:
        raise ValueError("member buffer is smaller than an element")
    a, b = idx_a * m, idx_b * m
    buf = arr.buffer
    memb_buffer[:m] = buf[a:a + m]
    buf[a:a + m] = buf[b:b + m]
    buf[b:b + m] = memb_buffer[:m]