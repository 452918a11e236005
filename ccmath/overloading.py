"""
Arithmetic operators of **Complex** and **ComplexPolar**.

The operators are registered onto the classes with **regist_operator()** when
the package is imported. Real numbers act on the real part (addition) or on
both parts / the radius (multiplication). Mixed float widths promote to the
wider one. Compound assignments such as ``z += w`` rebind ``z`` to the new
value, nothing is mutated.
"""
import numbers

from .complex import Complex, to_complex
from .float_wrapper import ieee_errors, numpy_float_type, promote
from .polar import ComplexPolar


def regist_operator(cls, *names):
    """
    Register the decorated function as the special methods ``names`` of
    ``cls``.
    """

    def wrapper(f):
        f = ieee_errors(f)
        for name in names:
            setattr(cls, name, f)
        return f

    return wrapper


def _is_real(x):
    return isinstance(x, numbers.Real)


def _real_operand(z, x):
    """cast real number ``x`` into the width of ``z``, promoting numpy floats"""
    F = promote(z._F, numpy_float_type(x))
    return F, F.cast(x)


def _complex_operand(z, other):
    return to_complex(other, z._F)


def _polar_operand(p, other):
    if isinstance(other, ComplexPolar):
        return other
    other = _complex_operand(p, other)
    if other is None:
        return None
    return other.polarize()


def _complex_mul(a, b):
    return Complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
        promote(a._F, b._F),
    )


# Complex


@regist_operator(Complex, "__add__", "__radd__")
def complex_add(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return Complex(self.real + x, self.imag, F)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return Complex(
        self.real + other.real,
        self.imag + other.imag,
        promote(self._F, other._F),
    )


@regist_operator(Complex, "__sub__")
def complex_sub(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return Complex(self.real - x, self.imag, F)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return Complex(
        self.real - other.real,
        self.imag - other.imag,
        promote(self._F, other._F),
    )


@regist_operator(Complex, "__rsub__")
def complex_rsub(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return Complex(x - self.real, -self.imag, F)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return complex_sub(other, self)


@regist_operator(Complex, "__neg__")
def complex_neg(self):
    return Complex(-self.real, -self.imag, self._F)


@regist_operator(Complex, "__pos__")
def complex_pos(self):
    return self


@regist_operator(Complex, "__mul__", "__rmul__")
def complex_mul(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return Complex(self.real * x, self.imag * x, F)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return _complex_mul(self, other)


@regist_operator(Complex, "__truediv__")
def complex_div(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return Complex(self.real / x, self.imag / x, F)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return _complex_mul(self, other.inv())


@regist_operator(Complex, "__rtruediv__")
def complex_rdiv(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return complex_mul(self.astype(F).inv(), x)
    other = _complex_operand(self, other)
    if other is None:
        return NotImplemented
    return _complex_mul(other, self.inv())


@regist_operator(Complex, "__pow__")
def complex_pow(self, exponent):
    if isinstance(exponent, numbers.Integral):
        return self.powi(exponent)
    if _is_real(exponent):
        return self.powf(exponent)
    if to_complex(exponent) is None:
        return NotImplemented
    return self.powc(exponent)


@regist_operator(Complex, "__rpow__")
def complex_rpow(self, base):
    if _is_real(base):
        return self.expf(base)
    base = _complex_operand(self, base)
    if base is None:
        return NotImplemented
    return base.powc(self)


# ComplexPolar


@regist_operator(ComplexPolar, "__add__", "__radd__")
def polar_add(self, other):
    if not _is_real(other) and _complex_operand(self, other) is None:
        return NotImplemented
    return (self.unpolarize() + other).polarize()


@regist_operator(ComplexPolar, "__sub__")
def polar_sub(self, other):
    if not _is_real(other) and _complex_operand(self, other) is None:
        return NotImplemented
    return (self.unpolarize() - other).polarize()


@regist_operator(ComplexPolar, "__rsub__")
def polar_rsub(self, other):
    if not _is_real(other) and _complex_operand(self, other) is None:
        return NotImplemented
    return (other - self.unpolarize()).polarize()


@regist_operator(ComplexPolar, "__neg__")
def polar_neg(self):
    # the constructor turns a negative radius into the angle
    return ComplexPolar(-self.radius, self.angle, self._F)


@regist_operator(ComplexPolar, "__pos__")
def polar_pos(self):
    return self


@regist_operator(ComplexPolar, "__mul__", "__rmul__")
def polar_mul(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return ComplexPolar(self.radius * x, self.angle, F)
    other = _polar_operand(self, other)
    if other is None:
        return NotImplemented
    return ComplexPolar(
        self.radius * other.radius,
        self.angle + other.angle,
        promote(self._F, other._F),
    )


@regist_operator(ComplexPolar, "__truediv__")
def polar_div(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return ComplexPolar(self.radius / x, self.angle, F)
    other = _polar_operand(self, other)
    if other is None:
        return NotImplemented
    return ComplexPolar(
        self.radius / other.radius,
        self.angle - other.angle,
        promote(self._F, other._F),
    )


@regist_operator(ComplexPolar, "__rtruediv__")
def polar_rdiv(self, other):
    if _is_real(other):
        F, x = _real_operand(self, other)
        return ComplexPolar(x / self.radius, -self.angle, F)
    other = _polar_operand(self, other)
    if other is None:
        return NotImplemented
    return polar_div(other, self)


@regist_operator(ComplexPolar, "__pow__")
def polar_pow(self, exponent):
    if isinstance(exponent, numbers.Integral):
        return self.powi(exponent)
    if _is_real(exponent):
        return self.powf(exponent)
    if isinstance(exponent, ComplexPolar):
        return self.powcp(exponent)
    if to_complex(exponent) is None:
        return NotImplemented
    return self.powc(exponent)


@regist_operator(ComplexPolar, "__rpow__")
def polar_rpow(self, base):
    if _is_real(base):
        return self.unpolarize().expf(base).polarize()
    base = _polar_operand(self, base)
    if base is None:
        return NotImplemented
    return base.powcp(self)
