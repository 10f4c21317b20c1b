from itertools import pairwise

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fractional_indexing import (
    BASE_10_DIGITS,
    BASE_62_DIGITS,
    SMALLEST_INTEGER,
    InvalidKeyError,
    OrderingViolationError,
    generate_key_between,
    generate_n_keys_between,
)


def test_readme_examples() -> None:
    first = generate_key_between(None, None)
    assert first == "a0"

    second = generate_key_between(first, None)
    assert second == "a1"

    third = generate_key_between(second, None)
    assert third == "a2"

    zeroth = generate_key_between(None, first)
    assert zeroth == "Zz"

    second_and_half = generate_key_between(second, third)
    assert second_and_half == "a1V"


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("a0", "a2", "a1"),
        ("a0", "a1", "a0V"),
        ("Zz", "a0", "ZzV"),
        ("a0V", None, "a1"),
        (None, "a0V", "a0"),
        (None, SMALLEST_INTEGER + "V", SMALLEST_INTEGER + "G"),
        ("z" + "z" * 26, None, "z" + "z" * 26 + "V"),
    ],
)
def test_generate_key_between(a: str | None, b: str | None, expected: str) -> None:
    assert generate_key_between(a, b) == expected


def test_generate_key_between_decimal() -> None:
    assert generate_key_between("a9", None, BASE_10_DIGITS) == "b00"
    assert generate_key_between(None, "a0", BASE_10_DIGITS) == "Z9"
    assert generate_key_between("a1", "a2", BASE_10_DIGITS) == "a15"


def test_generate_key_between_rejects_bad_input() -> None:
    with pytest.raises(OrderingViolationError):
        _ = generate_key_between("b", "a")
    with pytest.raises(OrderingViolationError):
        _ = generate_key_between("a1", "a1")
    with pytest.raises(InvalidKeyError):
        _ = generate_key_between(SMALLEST_INTEGER, None)
    with pytest.raises(InvalidKeyError):
        _ = generate_key_between("a10", None, BASE_10_DIGITS)
    with pytest.raises(InvalidKeyError):
        _ = generate_key_between(None, "b1")


def test_generate_n_keys_between() -> None:
    assert generate_n_keys_between(None, None, 5, BASE_10_DIGITS) == ["a0", "a1", "a2", "a3", "a4"]
    assert generate_n_keys_between("a4", None, 10, BASE_10_DIGITS) == [
        "a5", "a6", "a7", "a8", "a9", "b00", "b01", "b02", "b03", "b04",
    ]  # fmt: skip
    assert generate_n_keys_between(None, "a0", 5, BASE_10_DIGITS) == ["Z5", "Z6", "Z7", "Z8", "Z9"]
    assert " ".join(generate_n_keys_between("a0", "a2", 20, BASE_10_DIGITS)) == (
        "a01 a02 a03 a035 a04 a05 a06 a07 a08 a09 a1 a11 a12 a13 a14 a15 a16 a17 a18 a19"
    )


def test_generate_n_keys_between_small_counts() -> None:
    assert generate_n_keys_between("a0", "a1", 0) == []
    assert generate_n_keys_between("a0", "a1", 1) == ["a0V"]
    with pytest.raises(ValueError, match="must not be negative"):
        _ = generate_n_keys_between(None, None, -1)


def test_generation_is_deterministic() -> None:
    assert generate_n_keys_between("a0", "a1", 7) == generate_n_keys_between("a0", "a1", 7)
    assert generate_key_between("a1", "a2") == generate_key_between("a1", "a2")


@given(st.lists(st.integers(min_value=0, max_value=1_000), min_size=1, max_size=60))
def test_random_insertions_keep_keys_sorted(positions: list[int]) -> None:
    keys: list[str] = []
    for position in positions:
        index = position % (len(keys) + 1)
        lower = keys[index - 1] if index > 0 else None
        upper = keys[index] if index < len(keys) else None
        key = generate_key_between(lower, upper)
        assert lower is None or lower < key
        assert upper is None or key < upper
        keys.insert(index, key)
    assert keys == sorted(set(keys))


@given(st.integers(min_value=0, max_value=50), st.integers(min_value=0, max_value=3))
def test_n_keys_are_strictly_increasing_within_bounds(n: int, case: int) -> None:
    bounds = [(None, None), ("a0", None), (None, "a0"), ("a0", "a0V")][case]
    lower, upper = bounds
    keys = generate_n_keys_between(lower, upper, n, BASE_62_DIGITS)
    assert len(keys) == n
    assert all(left < right for left, right in pairwise(keys))
    if keys:
        assert lower is None or lower < keys[0]
        assert upper is None or keys[-1] < upper


def test_generate_key_between_rejects_foreign_fraction_digits() -> None:
    with pytest.raises(InvalidKeyError, match="invalid digit"):
        _ = generate_key_between("a0!", "a0#")
    with pytest.raises(InvalidKeyError, match="invalid digit"):
        _ = generate_key_between(None, "a05V", BASE_10_DIGITS)
