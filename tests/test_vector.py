import pytest

from bytevec.growth import complete_binary_tree_growth, exponential_growth
from bytevec.memory import Array, is_arr_null
from bytevec.vector import Vector


def _elem(value, size=4):
    return bytes([value]) * size


def test_new_vector_is_zeroed():
    vec = Vector(3, 4)
    assert len(vec) == 3
    assert vec.capacity() == 3
    assert list(vec) == [bytes(4)] * 3


@pytest.mark.parametrize("size, memb_size, growth", [(0, 4, exponential_growth), (3, 0, exponential_growth), (3, 4, None)])
def test_invalid_construction(size, memb_size, growth):
    with pytest.raises(ValueError):
        Vector(size, memb_size, growth)


def test_append_round_trip_and_growth():
    vec = Vector(1, 4, exponential_growth)
    vec.append(_elem(7))
    assert len(vec) == 2
    assert vec[1] == _elem(7)
    assert vec.capacity() == exponential_growth(1)
    for value in range(10):
        vec.append(_elem(value))
    assert list(vec)[2:] == [_elem(v) for v in range(10)]
    assert vec.capacity() >= len(vec)


def test_growth_function_is_used():
    vec = Vector(1, 2, complete_binary_tree_growth)
    vec.append(_elem(1, 2))
    assert vec.capacity() == complete_binary_tree_growth(1)


def test_insert_shifts_elements():
    vec = Vector(1, 4)
    vec.pop()
    for value in (1, 2, 3):
        vec.append(_elem(value))
    vec.insert(_elem(9), 0)
    vec.insert(_elem(8), 2)
    assert list(vec) == [_elem(9), _elem(1), _elem(8), _elem(2), _elem(3)]


def test_insert_errors():
    vec = Vector(2, 4)
    with pytest.raises(ValueError):
        vec.insert(b"ab", 0)
    with pytest.raises(IndexError):
        vec.insert(_elem(1), 3)


def test_remove_and_pop():
    vec = Vector(1, 4)
    vec.pop()
    for value in range(5):
        vec.append(_elem(value))
    vec.remove(1)
    assert list(vec) == [_elem(0), _elem(2), _elem(3), _elem(4)]
    vec.pop()
    assert list(vec) == [_elem(0), _elem(2), _elem(3)]
    with pytest.raises(IndexError):
        vec.remove(3)


def test_pop_empty_raises():
    vec = Vector(1, 4)
    vec.pop()
    assert len(vec) == 0
    with pytest.raises(IndexError):
        vec.pop()


def test_index_out_of_range():
    vec = Vector(2, 4)
    vec.insert(_elem(5), 1)
    assert vec[1] == _elem(5)
    assert vec[2] == bytes(4)
    with pytest.raises(IndexError):
        vec[3]
    with pytest.raises(IndexError):
        vec[-1]
    assert len(vec) == 3


def test_swap():
    vec = Vector(1, 4)
    vec.pop()
    for value in (1, 2, 3):
        vec.append(_elem(value))
    vec.swap(0, 2)
    assert list(vec) == [_elem(3), _elem(2), _elem(1)]
    with pytest.raises(IndexError):
        vec.swap(0, 3)


def test_resize_keeps_prefix():
    vec = Vector(1, 4)
    vec.pop()
    for value in (1, 2, 3):
        vec.append(_elem(value))
    vec.resize(2)
    assert list(vec) == [_elem(1), _elem(2)]
    vec.resize(10)
    assert len(vec) == 10
    assert vec.capacity() >= 10
    assert list(vec)[:2] == [_elem(1), _elem(2)]


def test_resize_rejects_stalled_growth():
    vec = Vector(1, 4, lambda n: n)
    with pytest.raises(ValueError):
        vec.resize(2)


def test_reserve():
    vec = Vector(4, 4)
    vec.swap(0, 1)
    vec.reserve(10)
    assert vec.capacity() == 10
    assert len(vec) == 4
    vec.reserve(2)
    assert vec.capacity() == 2
    assert len(vec) == 2
    with pytest.raises(ValueError):
        vec.reserve(0)


def test_from_array_takes_buffer():
    buffer = bytearray(b"aabbcc")
    arr = Array(buffer, 3, 2)
    vec = Vector.from_array(arr)
    assert is_arr_null(arr)
    assert arr.buffer is None
    assert list(vec) == [b"aa", b"bb", b"cc"]
    vec.append(b"dd")
    assert vec[3] == b"dd"


def test_from_null_array_raises():
    with pytest.raises(ValueError):
        Vector.from_array(Array())


def test_to_array_reflects_capacity():
    vec = Vector(2, 3)
    vec.append(b"xyz")
    arr = vec.to_array()
    assert arr.size == vec.capacity()
    assert arr.memb_size == 3
    assert arr.element(2) == b"xyz"