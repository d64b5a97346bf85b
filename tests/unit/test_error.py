from __future__ import annotations

import copy
import pickle

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from linux_errno import TABLE
from linux_errno.error import ERRNO_MAX, Error
from linux_errno.ints import NonZero

valid_errnos = st.integers(min_value=1, max_value=ERRNO_MAX)


@settings(database=None)
@given(raw=valid_errnos)
def test_new_accepts_every_valid_errno(raw: int) -> None:
    err = Error.new(raw)
    assert err is not None
    assert err.get() == raw
    assert int(err) == raw


@settings(database=None)
@given(raw=st.one_of(st.integers(max_value=0), st.integers(min_value=ERRNO_MAX + 1)))
def test_new_rejects_out_of_range(raw: int) -> None:
    assert Error.new(raw) is None


def test_new_boundaries() -> None:
    assert Error.new(0) is None
    assert Error.new(1) is not None
    assert Error.new(0xFFF) is not None
    assert Error.new(0x1000) is None
    assert Error.new(0xFFFF) is None


@pytest.mark.parametrize("raw", [1.0, "1", None, True, False])
def test_new_rejects_non_integers(raw: object) -> None:
    with pytest.raises(TypeError):
        Error.new(raw)  # type: ignore[arg-type]


def test_new_unchecked_builds_the_same_value() -> None:
    assert Error.new_unchecked(12) == Error.new(12)


def test_direct_construction_is_rejected() -> None:
    with pytest.raises(TypeError):
        Error(5)  # type: ignore[call-arg]


def test_error_is_final() -> None:
    with pytest.raises(TypeError):

        class _Bad(Error):  # type: ignore[misc]
            pass


def test_error_is_immutable() -> None:
    err = Error.new_unchecked(5)
    with pytest.raises(AttributeError):
        err._errno = 6  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.extra = 1  # type: ignore[attr-defined]
    assert err.get() == 5


@settings(database=None)
@given(a=valid_errnos, b=valid_errnos, c=valid_errnos)
def test_equality_ordering_and_hash_follow_the_value(a: int, b: int, c: int) -> None:
    ea, eb, ec = Error.new_unchecked(a), Error.new_unchecked(b), Error.new_unchecked(c)
    assert ea == Error.new_unchecked(a)
    assert (ea == eb) == (a == b) == (eb == ea)
    assert (ea != eb) == (a != b)
    assert (ea < eb) == (a < b)
    assert (ea <= eb) == (a <= b)
    assert (ea > eb) == (a > b)
    assert (ea >= eb) == (a >= b)
    if ea == eb and eb == ec:
        assert ea == ec
    if ea == eb:
        assert hash(ea) == hash(eb)
    assert sorted([ea, eb, ec]) == [Error.new_unchecked(v) for v in sorted([a, b, c])]


def test_ordering_against_other_types_is_unsupported() -> None:
    with pytest.raises(TypeError):
        _ = Error.new_unchecked(1) < 2  # type: ignore[operator]


def test_hash_matches_plain_int() -> None:
    err = Error.new_unchecked(110)
    assert hash(err) == hash(110)
    assert {110: "timeout"}[err] == "timeout"
    assert len({err, Error.new_unchecked(110)}) == 1


def test_error_is_always_truthy() -> None:
    assert bool(Error.new_unchecked(1))


def test_nonzero_accessor_is_unsigned_16_bit() -> None:
    nonzero = Error.new_unchecked(42).get_nonzero()
    assert isinstance(nonzero, NonZero)
    assert nonzero.ctype.__name__ == "c_ushort"
    assert nonzero.value == 42


def test_integer_protocols() -> None:
    err = Error.new_unchecked(0x2A)
    assert hex(err) == "0x2a"
    assert bin(err) == "0b101010"
    assert [0, 1, 2][Error.new_unchecked(2)] == 2


@pytest.mark.parametrize(
    ("spec", "expected"),
    [("x", "2a"), ("X", "2A"), ("b", "101010"), ("o", "52"), ("d", "42"), ("#06x", "0x002a")],
)
def test_numeric_format_specs(spec: str, expected: str) -> None:
    assert format(Error.new_unchecked(42), spec) == expected


def test_repr_uses_active_target_name() -> None:
    assert repr(TABLE.ENOENT) == "ENOENT"
    assert f"{TABLE.EPERM}" == "EPERM"
    assert repr(Error.new_unchecked(4000)) == "Error(4000)"


def test_repr_of_alias_is_primary_name() -> None:
    assert repr(TABLE.EWOULDBLOCK) == "EAGAIN"


def test_pickle_and_copy_preserve_value() -> None:
    err = Error.new_unchecked(17)
    assert pickle.loads(pickle.dumps(err)) == err
    assert copy.copy(err) is err
    assert copy.deepcopy(err) is err
