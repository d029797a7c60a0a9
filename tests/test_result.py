"""Tests for the Ok/Err result type."""

import pytest

from petsim.result import Err, Ok, collect_results, err, ok


class TestOk:
    def test_unwrap_returns_value(self) -> None:
        assert Ok(5).unwrap() == 5
        assert Ok(5).is_ok()
        assert not Ok(5).is_err()

    def test_map_and_then(self) -> None:
        assert Ok(2).map(lambda v: v * 3) == Ok(6)
        assert Ok(2).and_then(lambda v: Err("nope")) == Err("nope")

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(1).unwrap_or(9) == 1


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError):
            Err("broken").unwrap()

    def test_error_and_default(self) -> None:
        result = Err("broken")
        assert result.is_err()
        assert result.error == "broken"
        assert result.unwrap_or(7) == 7

    def test_map_skips_function(self) -> None:
        called = []
        assert Err("x").map(lambda v: called.append(v)) == Err("x")
        assert called == []

    def test_map_err_transforms_error(self) -> None:
        assert Err("x").map_err(str.upper) == Err("X")


def test_collect_results_returns_first_error() -> None:
    assert collect_results([Ok(1), Ok(2)]) == Ok([1, 2])
    assert collect_results([Ok(1), Err("a"), Err("b")]) == Err("a")


def test_helpers() -> None:
    assert ok() == Ok(None)
    assert err("m") == Err("m")
