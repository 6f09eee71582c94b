# bytevec

`bytevec` provides a dynamic array whose elements are fixed-size runs of
bytes. It also includes the helpers the array is built from: growth
strategies, a three-way comparison, and an array descriptor with element
swapping.

## Installing

```
pip install bytevec
```

To run the test suite:

```
pip install "bytevec[test]"
pytest
```

## Growth strategies

When a vector must hold more elements than its capacity allows, it applies a
growth function to the capacity again and again until the new size fits.
`bytevec.growth` provides three of them:

- `exponential_growth(n)`: doubles the capacity.
- `exponential_m_growth(n)`: multiplies the capacity by `EXPONENTIAL_BASE_M`,
  which is 3.
- `complete_binary_tree_growth(n)`: doubles the capacity and adds one
  (1, 3, 7, 15, ...).

Any callable that takes an `int` and returns a larger `int` also works. If a
growth function does not increase the capacity, `Vector.resize` raises
`ValueError`.

## Vectors

```python
from bytevec.growth import exponential_growth
from bytevec.vector import Vector

vec = Vector(4, 2, exponential_growth)   # 4 zero-filled elements of 2 bytes
vec.append(b"\x01\x02")
vec.insert(b"\xff\xff", 0)
vec.swap(0, 1)
vec.remove(0)
vec.pop()
print(vec[0], len(vec))

vec.resize(10)      # grows capacity using the growth function
vec.reserve(32)     # sets capacity exactly, truncating if smaller
print(len(vec), vec.capacity())
```

If you leave out the growth function, the vector uses `exponential_growth`.
Indexing a vector returns a copy of the element as `bytes`. The methods
behave as follows:

- `insert(elem, idx)` accepts indices from 0 up to `len(vec)`.
- `append(elem)` adds an element at the end.
- `remove(idx)` removes the element at `idx` and shifts the later elements down.
- `pop()` removes the last element.
- `resize(size)` sets the length and grows the capacity if needed. It never
  shrinks the capacity.
- `reserve(capacity)` sets the capacity exactly. If the new capacity is
  smaller than the length, it shortens the length to match.

`Vector.from_array(arr, growth)` builds a vector that takes over the buffer of
an existing `bytevec.memory.Array`. It then clears that array, setting its
buffer to `None` and its sizes to 0. `Vector.to_array()` returns the vector's
underlying `Array`. The `size` of that array is the vector's capacity, not its
length.

Operations that cannot be done raise an exception:

- An index out of range raises `IndexError`. This includes `pop()` on an empty
  vector.
- An element of the wrong width, a non-positive size or capacity, or a growth
  function that is not callable raises `ValueError`.

## Arrays and swapping

`bytevec.memory.Array` is a dataclass. It describes a buffer (a `bytearray` or
`memoryview`) as `size` elements of `memb_size` bytes each. The other
functions in `bytevec.memory` are:

- `Array.element(idx)` returns a copy of one element.
- `buf_idx(buffer, i, memb_size)` returns a `memoryview` of element `i`
  alone.
- `swap(arr, a, b)` exchanges two elements in place.
- `swap_with_mbuffer(arr, scratch, a, b)` exchanges two elements in place and
  uses `scratch` as temporary space. `scratch` must be at least one element
  long.
- `is_arr_null(arr)` tells you whether an array descriptor is `None`, has no
  buffer, or has a `size` or `memb_size` of zero.

The swap functions raise errors as follows:

- A null array raises `ValueError`.
- A missing or too-small scratch buffer raises `ValueError`.
- An index out of range raises `IndexError`.

## Comparison

`bytevec.compare.compare(a, b)` returns `-1`, `0` or `1` when `a` is less
than, equal to or greater than `b`. It works on any values that support `==`
and `>`.