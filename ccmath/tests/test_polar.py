import math

import numpy as np
import pytest

from ccmath import Complex, ComplexPolar
from ccmath.polar import std_angle
from ccmath.float_wrapper import get_float_type
from ccmath.tests.common import assert_complex_close, assert_polar_close


def random_polar(n=20, seed=1):
    rng = np.random.default_rng(seed)
    r = rng.uniform(0.1, 5.0, n)
    a = rng.uniform(-math.pi, math.pi, n)
    return [ComplexPolar(i, j) for i, j in zip(r, a)]


def test_canonical():
    p = ComplexPolar(-2.0, 0.5)
    assert p.radius == 2.0
    assert_polar_close(p, 2.0, 0.5 - math.pi)
    assert ComplexPolar(1.0, -math.pi).angle == math.pi
    assert ComplexPolar(1.0, math.pi).angle == math.pi
    assert ComplexPolar(1.0, 0.75).angle == 0.75
    assert_complex_close(ComplexPolar(1.0, 3 * math.pi), -1.0)
    assert_polar_close(ComplexPolar(1.0, 0.5 + 4 * math.pi), 1.0, 0.5)
    q = ComplexPolar(-0.0, 1.0)
    assert q.radius == 0.0
    assert not np.signbit(q.radius)


def test_std_angle():
    F = get_float_type("float64")
    for a in np.linspace(-20, 20, 101):
        b = std_angle(F.cast(a), F)
        assert -math.pi < b <= math.pi
        assert abs(math.cos(b) - math.cos(a)) < 1e-12
        assert abs(math.sin(b) - math.sin(a)) < 1e-12
    assert math.isnan(std_angle(F.inf, F))


def test_real_imag():
    p = ComplexPolar(2.0, math.pi / 2)
    assert abs(p.real) < 1e-15
    assert p.imag == 2.0
    assert p.abs() == 2.0
    assert p.arg() == math.pi / 2
    assert p.square_abs() == 4.0
    assert abs(p) == 2.0


def test_round_trip():
    for p in random_polar():
        q = p.unpolarize().polarize()
        assert_polar_close(q, float(p.radius), float(p.angle))
    z = Complex(-3.0, 4.0)
    assert_complex_close(z.polarize().unpolarize(), z)
    assert ComplexPolar.from_complex(-1.0).angle == math.pi
    p = ComplexPolar(2.0, 1.0)
    assert p.polarize() is p


def test_sqrt_inv():
    p = ComplexPolar(4.0, 1.0)
    assert p.sqrt() == ComplexPolar(2.0, 0.5)
    assert p.inv() == ComplexPolar(0.25, -1.0)
    assert ComplexPolar(0.0, 1.0).inv().radius == np.inf
    for p in random_polar():
        assert_complex_close(p.sqrt(), p.unpolarize().sqrt())
        assert_complex_close(p.inv(), p.unpolarize().inv())


def test_pow():
    p = ComplexPolar(2.0, 0.5)
    assert_polar_close(p.powf(3.0), 8.0, 1.5)
    assert_polar_close(p.powi(3), 8.0, 1.5)
    assert_polar_close(p.powi(-2), 0.25, -1.0)
    assert p.powi(0) == ComplexPolar(1.0, 0.0)
    assert ComplexPolar(0.0, 0.0).powi(0) == ComplexPolar(1.0, 0.0)
    with pytest.raises(TypeError):
        p.powi(0.5)
    for p in random_polar(5):
        assert_complex_close(p.powf(1.5), p.unpolarize().powf(1.5))
        assert_complex_close(p.powi(5), p.unpolarize().powi(5), rtol=1e-10)


def test_delegated():
    w = Complex(0.5, -0.25)
    wp = w.polarize()
    for p in random_polar(5):
        z = p.unpolarize()
        assert isinstance(p.exp(), ComplexPolar)
        assert_complex_close(p.powc(w), z.powc(w), rtol=1e-10)
        assert_complex_close(p.powcp(wp), z.powc(w), rtol=1e-10)
        assert_complex_close(p.exp(), z.exp())
        assert_complex_close(p.ln(), z.ln())
        assert_complex_close(p.log(), z.log())
        assert_complex_close(p.logn(3.0), z.logn(3.0))


def test_conj():
    assert ComplexPolar(2.0, math.pi).conj() == ComplexPolar(2.0, math.pi)
    assert ComplexPolar(2.0, 0.5).conj() == ComplexPolar(2.0, -0.5)


def test_dtype():
    p = ComplexPolar(np.float32(2.0), np.float32(0.5))
    assert p.dtype == np.float32
    assert isinstance(p.radius, np.float32)
    assert p.unpolarize().dtype == np.float32
    assert p.astype("float64").dtype == np.float64
    assert ComplexPolar.from_complex(1 + 1j, "float32").dtype == np.float32
    with pytest.raises(TypeError):
        ComplexPolar.from_complex(None)


def test_str():
    p = ComplexPolar(2.0, 0.0)
    assert str(p) == "2.0 + 0.0i"
    assert repr(p) == "ComplexPolar(2.0, 0.0)"
    assert complex(p) == 2 + 0j
    assert p == ComplexPolar(2.0, 0.0)
    assert p != Complex(2.0, 0.0)
    assert Complex(2.0, 0.0) != p
    assert len({p, Complex(2.0, 0.0), ComplexPolar(2.0, 0.0)}) == 2
    assert hash(p) == hash(ComplexPolar(2.0, 0.0))
