import numpy as np
import pytest
import sympy as sym

from ccmath import Complex
from ccmath.tests.common import assert_complex_close


def sympy_value(f, z):
    w = sym.Float(float(z.real)) + sym.I * sym.Float(float(z.imag))
    return complex(sym.N(f(w), 30))


entire_functions = [
    ("sin", sym.sin),
    ("cos", sym.cos),
    ("tan", sym.tan),
    ("cot", sym.cot),
    ("sec", sym.sec),
    ("csc", sym.csc),
    ("sinh", sym.sinh),
    ("cosh", sym.cosh),
    ("tanh", sym.tanh),
    ("coth", sym.coth),
    ("sech", sym.sech),
    ("csch", sym.csch),
]

# points away from the branch cuts of the formulas
inverse_functions = [
    ("arcsin", sym.asin, [0.3 + 0.4j, -1.7 + 0.2j, 2.5 - 1.5j]),
    ("arccos", sym.acos, [0.3 + 0.4j, -1.7 + 0.2j, 2.5 - 1.5j]),
    ("arctan", sym.atan, [0.3 + 0.4j, -0.5 + 0.2j, 0.1 - 0.6j]),
    ("arccot", lambda w: sym.atan(1 / w), [1.5 + 2.0j, -2.0 - 1.0j]),
    ("arcsec", lambda w: sym.acos(1 / w), [1.5 + 2.0j, -0.3 + 0.4j]),
    ("arccsc", lambda w: sym.asin(1 / w), [1.5 + 2.0j, -0.3 + 0.4j]),
    ("arcsinh", sym.asinh, [0.3 + 0.4j, 1.7 - 0.2j, 2.5 + 1.5j]),
    ("arccosh", sym.acosh, [1.5 + 0.7j, 0.3 - 0.4j, 2.5 + 1.5j]),
    ("arctanh", sym.atanh, [0.3 + 0.4j, -1.7 + 0.2j, 2.5 - 1.5j]),
    ("arccoth", lambda w: sym.atanh(1 / w), [1.5 + 2.0j, -0.3 + 0.4j]),
    ("arcsech", lambda w: sym.acosh(1 / w), [0.5 + 0.3j, 1.2 - 0.4j]),
    ("arccsch", lambda w: sym.asinh(1 / w), [1.5 + 2.0j, 0.3 - 0.4j]),
]


@pytest.mark.parametrize("name,f", entire_functions)
def test_entire(name, f):
    for z in [0.3 + 0.4j, -1.7 + 0.2j, 2.5 - 1.5j, 1.0 + 0j]:
        a = getattr(Complex.from_complex(z), name)()
        assert_complex_close(a, sympy_value(f, z), rtol=1e-12)


@pytest.mark.parametrize("name,f,points", inverse_functions)
def test_inverse(name, f, points):
    for z in points:
        a = getattr(Complex.from_complex(z), name)()
        assert_complex_close(a, sympy_value(f, z), rtol=1e-10)


def test_identities():
    rng = np.random.default_rng(2)
    for x, y in rng.uniform(-1, 1, size=(10, 2)):
        z = Complex(x, y)
        assert_complex_close(z.sin() ** 2 + z.cos() ** 2, 1.0, atol=1e-13)
        assert_complex_close(z.cosh() ** 2 - z.sinh() ** 2, 1.0, atol=1e-13)
        assert_complex_close(z.sin().arcsin(), z, rtol=1e-10)
        assert_complex_close(z.tanh().arctanh(), z, rtol=1e-10)
        assert_complex_close(z.sinh().arcsinh(), z, rtol=1e-10)
        assert_complex_close(z.tan() * z.cot(), 1.0, atol=1e-12)


def test_real_axis():
    for x in [-0.9, -0.2, 0.0, 0.5, 0.8]:
        z = Complex(x, 0.0)
        assert_complex_close(z.sin(), np.sin(x))
        assert_complex_close(z.cosh(), np.cosh(x))
        assert_complex_close(z.arcsin(), np.arcsin(x), atol=1e-15)
        assert_complex_close(z.arccos(), np.arccos(x), atol=1e-15)
        assert_complex_close(z.arctan(), np.arctan(x), atol=1e-15)
        assert_complex_close(z.arctanh(), np.arctanh(x), atol=1e-15)


def test_no_domain_check():
    z = Complex(1.0, 0.0).arctanh()
    assert z.isinf() or z.isnan()
    assert Complex(0.0, 0.0).csc().isnan()
    assert Complex(0.0, 0.0).cot().isnan()


def test_float32():
    z = Complex(0.3, 0.4, "float32")
    for name, f in entire_functions[:6]:
        a = getattr(z, name)()
        assert a.dtype == np.float32
        assert_complex_close(a, getattr(z.astype("float64"), name)(), 1e-5)
