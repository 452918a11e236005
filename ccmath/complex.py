"""
This module implements the rectangular complex number **Complex** and its
power, exponential, logarithmic and trigonometric function families.

Every operation returns a new value. Exceptional arithmetic (division by zero,
logarithm of zero, ...) is not checked, it yields ``nan`` or ``inf``
components through IEEE floating-point propagation.
"""
import numbers
import operator

from .float_wrapper import (
    get_float_type,
    ieee_errors,
    ieee_methods,
    infer_float_type,
    numpy_float_type,
    promote,
)


def to_complex(value, dtype=None):
    """
    Convert ``value`` into **Complex**.

    :param value: **Complex**, **ComplexPolar**, Python ``complex`` or real number
    :param dtype: Float width used for Python numbers
    :return: **Complex**, or ``None`` if ``value`` is not a number
    """
    if isinstance(value, Complex):
        return value
    if hasattr(value, "unpolarize"):
        return value.unpolarize()
    if isinstance(value, numbers.Complex):
        F = promote(dtype, numpy_float_type(value.real, value.imag))
        return Complex(value.real, value.imag, F)
    return None


@ieee_methods
class Complex(object):
    """
    Complex number :math:`real + imag \\cdot i` stored in a generic float
    width.

    :param real: Real part
    :param imag: Imaginary part
    :param dtype: Float width. Inferred from numpy inputs when ``None``, see **infer_float_type()**.
    """

    __slots__ = ("_F", "_real", "_imag")
    # let numpy scalars defer to the reflected operators
    __array_ufunc__ = None

    @ieee_errors
    def __init__(self, real, imag=0.0, dtype=None):
        if dtype is None:
            F = infer_float_type(real, imag)
        else:
            F = get_float_type(dtype)
        self._F = F
        self._real = F.cast(real)
        self._imag = F.cast(imag)

    def _new(self, real, imag):
        return Complex(real, imag, self._F)

    @classmethod
    def i(cls, dtype=None):
        """
        The imaginary unit.
        """
        F = get_float_type(dtype)
        return cls(F.zero, F.one, F)

    @classmethod
    def from_complex(cls, z, dtype=None):
        """
        Build from a Python ``complex`` (or any number).
        """
        ret = to_complex(z, dtype)
        if ret is None:
            raise TypeError("Cannot convert {!r} to Complex".format(z))
        if dtype is not None:
            return ret.astype(dtype)
        return ret

    @classmethod
    def from_polar(cls, radius, angle, dtype=None):
        """
        Build from the polar form :math:`radius \\cdot e^{i \\cdot angle}`.
        """
        from .polar import ComplexPolar

        return ComplexPolar(radius, angle, dtype).unpolarize()

    @property
    def real(self):
        return self._real

    @property
    def imag(self):
        return self._imag

    @property
    def dtype(self):
        return self._F.np_dtype

    def astype(self, dtype):
        return Complex(self._real, self._imag, dtype)

    def conj(self):
        """
        The complex conjugate :math:`real - imag \\cdot i`.
        """
        return self._new(self._real, -self._imag)

    def square_abs(self):
        """
        :math:`real^2 + imag^2`
        """
        return self._real * self._real + self._imag * self._imag

    def abs(self):
        return self._F.sqrt(self.square_abs())

    def arg(self):
        """
        The argument on the interval :math:`(-\\pi, \\pi]`. It is ``0`` for
        the zero value. A ``-0.0`` imaginary part on the negative real axis
        follows ``atan2`` and gives :math:`-\\pi`.
        """
        F = self._F
        if self._real == F.zero and self._imag == F.zero:
            return F.zero
        return F.atan2(self._imag, self._real)

    def sqrt(self):
        """
        The principal square root, its real part is not negative.

        .. math::
            \\sqrt{z} = \\sqrt{\\frac{|z| + real}{2}} + \\mathrm{sign}(imag) \\sqrt{\\frac{|z| - real}{2}} i

        """
        F = self._F
        r = self.abs()
        return self._new(
            F.sqrt((self._real + r) / F.two),
            F.signum(self._imag) * F.sqrt((-self._real + r) / F.two),
        )

    def inv(self):
        """
        The multiplicative inverse :math:`\\bar{z} / |z|^2`. ``nan`` parts for
        the zero value.
        """
        rho = self.square_abs()
        return self._new(self._real / rho, -self._imag / rho)

    def powi(self, exponent):
        """
        Integer power using exponentiation by squaring.

        :param exponent: Any integral number. ``z.powi(0)`` is ``1`` for every ``z``.
        """
        n = operator.index(exponent)
        F = self._F
        if n == 0:
            return self._new(F.one, F.zero)
        if n < 0:
            return self.powi(-n).inv()
        ret = None
        base = self
        while True:
            if n & 1:
                ret = base if ret is None else ret * base
            n >>= 1
            if not n:
                return ret
            base = base * base

    def powf(self, exponent):
        """
        Real power using De Moivre's formula.

        .. math::
            z^{x} = |z|^{x} e^{i x \\arg z}

        """
        F = self._F
        exponent = F.cast(exponent)
        theta = self.arg() * exponent
        return self._new(F.cos(theta), F.sin(theta)) * F.powf(
            self.abs(), exponent
        )

    def powc(self, exponent):
        """
        Complex power.

        .. math::
            z^{a + bi} = z^{a} e^{i b \\ln z}

        """
        w = to_complex(exponent, self._F)
        if w is None:
            raise TypeError(
                "Unsupported exponent type {}".format(type(exponent))
            )
        rotation = (self.ln() * Complex.i(self._F) * w.imag).exp()
        return self.powf(w.real) * rotation

    def exp(self):
        F = self._F
        return self._new(F.cos(self._imag), F.sin(self._imag)) * F.exp(
            self._real
        )

    def expf(self, base):
        """
        ``base`` raised to this number, :math:`e^{z \\ln base}`. It is ``0``
        for ``base == 0``.
        """
        F = self._F
        base = F.cast(base)
        if base == F.zero:
            return self._new(F.zero, F.zero)
        return (self * F.ln(base)).exp()

    def ln_abs(self):
        """
        :math:`\\ln |z|`, ``-inf`` for the zero value.
        """
        F = self._F
        return F.ln(self.square_abs()) / F.two

    def ln(self):
        """
        The principal natural logarithm :math:`\\ln |z| + i \\arg z`.
        """
        return self._new(self.ln_abs(), self.arg())

    def log(self):
        F = self._F
        return self.ln() / F.ln(F.ten)

    def logn(self, base):
        F = self._F
        return self.ln() / F.ln(F.cast(base))

    def polarize(self):
        """
        Convert into **ComplexPolar** :math:`(|z|, \\arg z)`.
        """
        from .polar import ComplexPolar

        return ComplexPolar(self.abs(), self.arg(), self._F)

    # Trig

    def sin(self):
        F = self._F
        return self._new(
            F.sin(self._real) * F.cosh(self._imag),
            F.cos(self._real) * F.sinh(self._imag),
        )

    def cos(self):
        F = self._F
        return self._new(
            F.cos(self._real) * F.cosh(self._imag),
            -F.sin(self._real) * F.sinh(self._imag),
        )

    def tan(self):
        return self.sin() / self.cos()

    def cot(self):
        return self.tan().inv()

    def sec(self):
        return self.cos().inv()

    def csc(self):
        return self.sin().inv()

    # Inverse trig

    def arcsin(self):
        """
        :math:`\\arcsin z = -i \\ln(\\sqrt{1 - z^2} + i z)`
        """
        i = Complex.i(self._F)
        return -i * ((-self.powi(2) + self._F.one).sqrt() + i * self).ln()

    def arccos(self):
        """
        :math:`\\arccos z = i \\ln(\\sqrt{1 - z^2} / i + z)`
        """
        i = Complex.i(self._F)
        return i * ((-self.powi(2) + self._F.one).sqrt() / i + self).ln()

    def arctan(self):
        """
        :math:`\\arctan z = \\arcsin(z / \\sqrt{z^2 + 1})`
        """
        return (self / (self.powi(2) + self._F.one).sqrt()).arcsin()

    def arccot(self):
        return self.inv().arctan()

    def arcsec(self):
        return self.inv().arccos()

    def arccsc(self):
        return self.inv().arcsin()

    # Hyperbolic trig

    def sinh(self):
        F = self._F
        return self._new(
            F.sinh(self._real) * F.cos(self._imag),
            F.cosh(self._real) * F.sin(self._imag),
        )

    def cosh(self):
        F = self._F
        return self._new(
            F.cosh(self._real) * F.cos(self._imag),
            F.sinh(self._real) * F.sin(self._imag),
        )

    def tanh(self):
        return self.sinh() / self.cosh()

    def coth(self):
        return self.tanh().inv()

    def sech(self):
        return self.cosh().inv()

    def csch(self):
        return self.sinh().inv()

    # Inverse hyperbolic trig

    def arcsinh(self):
        """
        :math:`\\mathrm{arcsinh}\\, z = \\ln(\\sqrt{z^2 + 1} + z)`
        """
        return ((self.powi(2) + self._F.one).sqrt() + self).ln()

    def arccosh(self):
        """
        :math:`\\mathrm{arccosh}\\, z = \\ln(\\sqrt{z^2 - 1} + z)`
        """
        return ((self.powi(2) - self._F.one).sqrt() + self).ln()

    def arctanh(self):
        """
        :math:`\\mathrm{arctanh}\\, z = \\frac{1}{2} \\ln \\frac{1 + z}{1 - z}`
        """
        F = self._F
        return ((self + F.one) / (-self + F.one)).ln() * F.half

    def arccoth(self):
        return self.inv().arctanh()

    def arcsech(self):
        return self.inv().arccosh()

    def arccsch(self):
        return self.inv().arcsinh()

    # predicates

    def isnan(self):
        return bool(self._F.isnan(self._real) or self._F.isnan(self._imag))

    def isinf(self):
        return bool(self._F.isinf(self._real) or self._F.isinf(self._imag))

    def isfinite(self):
        return bool(
            self._F.isfinite(self._real) and self._F.isfinite(self._imag)
        )

    # Python protocols, the arithmetic operators live in overloading.py

    def __abs__(self):
        return self.abs()

    def __complex__(self):
        return complex(float(self._real), float(self._imag))

    def __eq__(self, other):
        # exact comparison at the wider width, Python numbers count as float64
        if isinstance(other, Complex):
            F = promote(self._F, other._F)
        elif isinstance(other, numbers.Complex):
            other_F = numpy_float_type(other.real, other.imag)
            F = promote(self._F, other_F or "float64")
        else:
            return NotImplemented
        return bool(
            F.cast(self._real) == F.cast(other.real)
            and F.cast(self._imag) == F.cast(other.imag)
        )

    def __hash__(self):
        return hash(complex(self))

    def __repr__(self):
        if self._F is get_float_type():
            return "Complex({}, {})".format(self._real, self._imag)
        return "Complex({}, {}, dtype={})".format(
            self._real, self._imag, self._F.name
        )

    def __str__(self):
        if self._F.signbit(self._imag):
            return "{} - {}i".format(self._real, -self._imag)
        return "{} + {}i".format(self._real, self._imag)


CC = Complex
