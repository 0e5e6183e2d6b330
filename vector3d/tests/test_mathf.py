"""Scalar helper tests."""
from __future__ import annotations

import math

import pytest

from vector3d import mathf


def test_approx_eq_uses_shared_epsilon() -> None:
    assert mathf.approx_eq(1.0, 1.0 + mathf.EPSILON / 2.0)
    assert not mathf.approx_eq(1.0, 1.0 + mathf.EPSILON * 10.0)
    assert mathf.approx_eq(0.0, mathf.EPSILON / 2.0)


def test_approx_eq_scales_with_magnitude() -> None:
    assert mathf.approx_eq(1e6, 1e6 + 0.5)
    assert not mathf.approx_eq(1e6, 1e6 + 5.0)


def test_approx_eq_explicit_epsilon() -> None:
    assert mathf.approx_eq(1.0, 1.05, epsilon=0.1)
    assert not mathf.approx_eq(1.0, 1.05, epsilon=0.01)


def test_approx_eq_follows_module_epsilon(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(mathf, "EPSILON", 0.5)
    assert mathf.approx_eq(1.0, 1.4)


def test_approx_eq_non_finite() -> None:
    assert mathf.approx_eq(math.inf, math.inf)
    assert not mathf.approx_eq(math.nan, math.nan)


@pytest.mark.parametrize("value, expected", [(-2.0, -1.0), (0.3, 0.3), (4.0, 1.0)])
def test_clamp(value: float, expected: float) -> None:
    assert mathf.clamp(value, -1.0, 1.0) == expected


@pytest.mark.parametrize("value, expected", [(-0.5, 0.0), (0.0, 0.0), (0.75, 0.75), (1.0, 1.0), (7.0, 1.0)])
def test_clamp01(value: float, expected: float) -> None:
    assert mathf.clamp01(value) == expected


def test_to_single_rounds_to_float32() -> None:
    assert mathf.to_single(0.1) != 0.1
    assert mathf.to_single(0.1) == pytest.approx(0.1, rel=1e-7)
    assert isinstance(mathf.to_single(3), float)


def test_format_single() -> None:
    assert mathf.format_single(1.0) == "1.0"
    assert mathf.format_single(mathf.to_single(0.1)) == "0.1"
    assert mathf.format_single(-0.25) == "-0.25"
    assert mathf.format_single(math.nan) == "nan"
    assert mathf.format_single(math.inf) == "inf"


def test_to_single_rejects_text() -> None:
    with pytest.raises(TypeError, match="real number"):
        mathf.to_single("1.5")  # type: ignore[arg-type]
