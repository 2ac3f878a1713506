import pytest

from coherentnoise.core.interp import cubic_interp, linear_interp, s_curve3, s_curve5


def test_linear_interp_endpoints():
    assert linear_interp(-3.5, 8.25, 0.0) == -3.5
    assert linear_interp(-3.5, 8.25, 1.0) == 8.25
    assert linear_interp(0.0, 2.0, 0.25) == 0.5


def test_cubic_interp_endpoints():
    n0, n1, n2, n3 = 0.3, -0.7, 0.9, 0.1
    assert cubic_interp(n0, n1, n2, n3, 0.0) == n1
    assert cubic_interp(n0, n1, n2, n3, 1.0) == pytest.approx(n2)


def test_cubic_interp_is_linear_on_collinear_points():
    assert cubic_interp(0.0, 1.0, 2.0, 3.0, 0.5) == pytest.approx(1.5)


def test_s_curves():
    assert s_curve3(0.0) == 0.0
    assert s_curve3(1.0) == 1.0
    assert s_curve3(0.5) == 0.5
    assert s_curve5(0.0) == 0.0
    assert s_curve5(1.0) == 1.0
    assert s_curve5(0.5) == pytest.approx(0.5)


def test_s_curves_are_monotonic():
    samples = [i / 50 for i in range(51)]
    for curve in (s_curve3, s_curve5):
        values = [curve(a) for a in samples]
        assert values == sorted(values)
