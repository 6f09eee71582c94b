"""A dynamic array of fixed-size byte elements."""

from __future__ import annotations

from typing import Callable

from bytevec.growth import exponential_growth
from bytevec.memory import Array, is_arr_null, swap_with_mbuffer

Growth = Callable[[int], int]


class Vector:
    """Growable array of ``memb_size``-byte elements backed by a bytearray."""

    def __init__(self, size: int, memb_size: int, growth: Growth = exponential_growth):
        if size <= 0 or memb_size <= 0:
            raise ValueError("size and memb_size must be positive")
        if not callable(growth):
            raise ValueError("growth must be callable")
        self._setup(Array(bytearray(size * memb_size), size, memb_size), size, growth)

    def _setup(self, arr: Array, size: int, growth: Growth) -> None:
        self._arr = arr
        self._size = size
        self._growth = growth
        self._memb_buffer = bytearray(arr.memb_size)

    @classmethod
    def from_array(cls, arr: Array, growth: Growth = exponential_growth) -> "Vector":
        """Take over the buffer of ``arr`` and clear ``arr``."""
        if is_arr_null(arr) or not callable(growth):
            raise ValueError("array is null or growth is not callable")
        needed = arr.size * arr.memb_size
        buffer = arr.buffer if isinstance(arr.buffer, bytearray) else bytearray(arr.buffer)
        if len(buffer) < needed:
            raise ValueError("array buffer is shorter than its declared size")
        del buffer[needed:]
        vec = cls.__new__(cls)
        vec._setup(Array(buffer, arr.size, arr.memb_size), arr.size, growth)
        arr.buffer, arr.size, arr.memb_size = None, 0, 0
        return vec

    def to_array(self) -> Array:
        """Return the underlying array; its size is the vector's capacity."""
        return self._arr

    def __len__(self) -> int:
        return self._size

    def _check_index(self, idx: int) -> None:
        if not 0 <= idx < self._size:
            raise IndexError(f"index {idx} out of range for size {self._size}")

    def __getitem__(self, idx: int) -> bytes:
        self._check_index(idx)
        m = self._arr.memb_size
        return bytes(self._arr.buffer[idx * m:(idx + 1) * m])

    def capacity(self) -> int:
        """Number of elements the buffer holds without reallocating."""
        return self._arr.size

    def swap(self, idx_a: int, idx_b: int) -> None:
        """Swap the elements at two indices."""
        self._check_index(idx_a)
        self._check_index(idx_b)
        swap_with_mbuffer(self._arr, self._memb_buffer, idx_a, idx_b)

    def insert(self, elem: bytes, idx: int) -> None:
        """Insert ``elem`` at ``idx``, shifting later elements up."""
        m = self._arr.memb_size
        if elem is None or len(elem) != m:
            raise ValueError(f"element must be exactly {m} bytes")
        if not 0 <= idx <= self._size:
            raise IndexError(f"index {idx} out of range for insertion into size {self._size}")
        old_size = self._size
        self.resize(old_size + 1)
        buf = self._arr.buffer
        start = idx * m
        buf[start + m:(old_size + 1) * m] = buf[start:old_size * m]
        buf[start:start + m] = elem

    def remove(self, idx: int) -> None:
        """Remove the element at ``idx``, shifting later elements down."""
        self._check_index(idx)
        m = self._arr.memb_size
        buf = self._arr.buffer
        buf[idx * m:(self._size - 1) * m] = buf[(idx + 1) * m:self._size * m]
        self._size -= 1

    def append(self, elem: bytes) -> None:
        """Add ``elem`` at the end."""
        self.insert(elem, self._size)

    def pop(self) -> None:
        """Remove the last element."""
        if self._size == 0:
            raise IndexError("pop from empty vector")
        self.remove(self._size - 1)

    def resize(self, size: int) -> None:
        """Set the length, growing capacity with the growth function if needed."""
        if size < 0:
            raise ValueError("size must not be negative")
        capacity = self._arr.size
        if size > capacity:
            while size > capacity:
                grown = self._growth(capacity)
                if grown <= capacity:
                    raise ValueError("growth function does not increase capacity")
                capacity = grown
            m = self._arr.memb_size
            self._arr.buffer.extend(bytes((capacity - self._arr.size) * m))
            self._arr.size = capacity
        self._size = size

    def reserve(self, capacity: int) -> None:
        """Set the capacity exactly, truncating elements beyond it."""
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        m = self._arr.memb_size
        buf = self._arr.buffer
        if capacity < self._arr.size:
            del buf[capacity * m:]
        else:
            buf.extend(bytes((capacity - self._arr.size) * m))
        self._arr.size = capacity
        self._size = min(self._size, capacity)