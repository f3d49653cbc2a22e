import pytest
from hypothesis import given
from hypothesis import strategies as st

from gpartition.rng import Rng


def test_first_values_of_seed_one():
    rng = Rng(1)
    assert [rng.rand() for _ in range(3)] == [41, 18467, 6334]


def test_default_seed_is_4321():
    a = Rng(-1)
    b = Rng(4321)
    assert a.state == 4321
    assert [a.rand() for _ in range(20)] == [b.rand() for _ in range(20)]


def test_negative_seed_wraps_to_unsigned():
    a = Rng(-5)
    b = Rng(2**32 - 5)
    assert a.state == b.state
    assert a.rand() == b.rand()


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_rand_stays_in_15_bits(seed):
    rng = Rng(seed)
    for _ in range(50):
        assert 0 <= rng.rand() <= 32767


def test_call_count_tracks_draws():
    rng = Rng(42)
    for _ in range(7):
        rng.rand()
    rng.rand_in_range(5)
    assert rng.call_count() == 8


@given(st.integers(min_value=0, max_value=2**31), st.integers(min_value=1, max_value=1000))
def test_rand_in_range_bounds(seed, bound):
    rng = Rng(seed)
    for _ in range(20):
        assert 0 <= rng.rand_in_range(bound) < bound


def test_rand_in_range_rejects_zero():
    with pytest.raises(ValueError):
        Rng(42).rand_in_range(0)


def test_same_seed_same_sequence():
    a, b = Rng(12345), Rng(12345)
    assert [a.rand() for _ in range(100)] == [b.rand() for _ in range(100)]


@given(st.integers(min_value=0, max_value=9), st.integers(min_value=0, max_value=2**31))
def test_small_permute_is_a_permutation(n, seed):
    arr = [0] * n
    rng = Rng(seed)
    rng.permute(arr, n)
    assert sorted(arr) == list(range(n))
    assert rng.call_count() == 2 * n


def test_permute_respects_offset():
    arr = [-1, -1, 0, 0, 0, 0, -2]
    Rng(42).permute(arr, 4, offset=2)
    assert arr[:2] == [-1, -1]
    assert arr[6] == -2
    assert sorted(arr[2:6]) == [0, 1, 2, 3]


def test_permute_without_identity_shuffles_existing_values():
    arr = [10, 20, 30, 40, 50]
    Rng(7).permute(arr, 5, identity=False)
    assert sorted(arr) == [10, 20, 30, 40, 50]


def test_large_permute_only_initialises():
    arr = [0] * 12
    rng = Rng(42)
    rng.permute(arr, 12)
    assert arr == list(range(12))
    assert rng.call_count() == 0


def test_permute_window_out_of_range():
    with pytest.raises(IndexError):
        Rng(1).permute([0, 0, 0], 3, offset=1)


@given(
    st.integers(min_value=10, max_value=60),
    st.integers(min_value=0, max_value=40),
    st.integers(min_value=0, max_value=2**31),
)
def test_nshuffles_is_a_permutation(n, nshuffles, seed):
    arr = [0] * n
    rng = Rng(seed)
    rng.permute_with_nshuffles(arr, n, 0, nshuffles)
    assert sorted(arr) == list(range(n))
    assert rng.call_count() == 2 * nshuffles


def test_nshuffles_zero_keeps_identity():
    arr = [0] * 15
    Rng(3).permute_with_nshuffles(arr, 15, 0, 0)
    assert arr == list(range(15))


def test_nshuffles_small_window_matches_permute():
    a = [0] * 6
    b = [0] * 6
    Rng(99).permute_with_nshuffles(a, 6, 0, 100)
    Rng(99).permute(b, 6)
    assert a == b


def test_nshuffles_with_offset_keeps_outside():
    arr = [-7] * 3 + [0] * 20 + [-8]
    Rng(5).permute_with_nshuffles(arr, 20, 3, 30)
    assert arr[:3] == [-7, -7, -7]
    assert arr[-1] == -8
    assert sorted(arr[3:23]) == list(range(20))