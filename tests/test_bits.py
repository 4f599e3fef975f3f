import pytest

from daily_algorithms.bits import (
    MOD,
    bitwise_complement,
    concatenated_binary,
    find_different_binary_string,
    has_alternating_bits,
    min_bitwise_array,
    min_bitwise_array_primes,
    read_binary_watch,
    reverse_bits,
    sort_by_bits,
)


def test_concatenated_binary_small():
    assert concatenated_binary(1) == 1
    assert concatenated_binary(3) == int("11011", 2)


@pytest.mark.parametrize("n", [10, 100, 1000])
def test_concatenated_binary_is_reduced(n):
    assert 0 <= concatenated_binary(n) < MOD


@pytest.mark.parametrize("n", [1, 5, 7, 10, 1000, 2**20 + 3])
def test_bitwise_complement_invariants(n):
    result = bitwise_complement(n)
    assert result & n == 0
    assert result + n == (1 << n.bit_length()) - 1


def test_bitwise_complement_zero():
    assert bitwise_complement(0) == 1


def test_bitwise_complement_rejects_negative():
    with pytest.raises(ValueError):
        bitwise_complement(-1)


def test_reverse_bits_examples():
    assert reverse_bits(1) == 1 << 31
    assert reverse_bits(43261596) == 964176192


@pytest.mark.parametrize("n", [0, 1, 12345, 2**32 - 1, 2**31 + 7])
def test_reverse_bits_round_trip(n):
    assert reverse_bits(reverse_bits(n)) == n


@pytest.mark.parametrize("n", [-1, 2**32])
def test_reverse_bits_out_of_range(n):
    with pytest.raises(ValueError):
        reverse_bits(n)


@pytest.mark.parametrize(
    "bits, expected",
    [("101", True), ("111", False), ("1011", False), ("1010", True), ("1", True)],
)
def test_has_alternating_bits(bits, expected):
    assert has_alternating_bits(int(bits, 2)) is expected


def _check_minimal(values, results):
    for value, x in zip(values, results):
        assert x | (x + 1) == value
        assert all((y | (y + 1)) != value for y in range(x))


def test_min_bitwise_array_odd_values():
    values = [3, 5, 7, 9, 11, 13, 31, 127, 1001]
    results = min_bitwise_array(values)
    assert len(results) == len(values)
    _check_minimal(values, results)


def test_min_bitwise_array_even_values():
    assert min_bitwise_array([2, 4, 0, 100]) == [-1, -1, -1, -1]


def test_min_bitwise_array_primes():
    primes = [3, 5, 7, 11, 13, 17, 31, 97]
    results = min_bitwise_array_primes([2] + primes)
    assert results[0] == -1
    _check_minimal(primes, results[1:])


def test_read_binary_watch_none_lit():
    assert read_binary_watch(0) == ["0:00"]


def test_read_binary_watch_one_lit():
    times = read_binary_watch(1)
    for expected in ("1:00", "0:01", "8:00", "0:32"):
        assert expected in times
    for text in times:
        hour, minute = (int(part) for part in text.split(":"))
        assert hour.bit_count() + minute.bit_count() == 1


def test_read_binary_watch_too_many():
    assert read_binary_watch(9) == []


def test_sort_by_bits_example():
    assert sort_by_bits([0, 1, 2, 3, 4, 5, 6, 7, 8]) == [0, 1, 2, 4, 8, 3, 5, 6, 7]


def test_sort_by_bits_invariants():
    values = [1024, 512, 256, 7, 3, 3, 1000, 999]
    result = sort_by_bits(values)
    assert sorted(result) == sorted(values)
    keys = [(v.bit_count(), v) for v in result]
    assert keys == sorted(keys)


@pytest.mark.parametrize(
    "strings", [["01", "10"], ["00", "01"], ["111", "011", "001"], ["0"]]
)
def test_find_different_binary_string(strings):
    result = find_different_binary_string(strings)
    assert len(result) == len(strings)
    assert set(result) <= {"0", "1"}
    assert result not in strings