"""
This module implements **ComplexPolar**, the complex number in polar form
:math:`radius \\cdot e^{i \\cdot angle}`.

Multiplication, division, square root, inverse and real powers work directly
on ``(radius, angle)``. The other functions go through **Complex**.
"""
import operator

from .complex import Complex, to_complex
from .float_wrapper import (
    get_float_type,
    ieee_errors,
    ieee_methods,
    infer_float_type,
)


def std_angle(angle, F):
    """
    Reduce ``angle`` into :math:`(-\\pi, \\pi]`.

    :param angle: Scalar of width ``F``
    :param F: **FloatType**
    """
    if -F.pi < angle <= F.pi:
        return angle
    ret = F.pi - F.mod(F.pi - angle, F.two * F.pi)
    # mod may round up to exactly 2 pi
    if ret == -F.pi:
        return F.pi
    return ret


def std_polar(radius, angle, F):
    """
    To standardize a polar variable. By standard form, it means
    :math:`radius \\geq 0, -\\pi < angle \\leq \\pi`.

    :return: ``radius``, ``angle``
    """
    if radius < F.zero:
        radius = -radius
        angle = angle + F.pi
    return F.abs(radius), std_angle(angle, F)


@ieee_methods
class ComplexPolar(object):
    """
    Complex number in polar form. The radius is stored non-negative and the
    angle in :math:`(-\\pi, \\pi]`, a negative ``radius`` turns the angle by
    :math:`\\pi`.

    :param radius: Radius
    :param angle: Angle in radians
    :param dtype: Float width, see **Complex**.
    """

    __slots__ = ("_F", "_radius", "_angle")
    __array_ufunc__ = None

    @ieee_errors
    def __init__(self, radius, angle=0.0, dtype=None):
        if dtype is None:
            F = infer_float_type(radius, angle)
        else:
            F = get_float_type(dtype)
        self._F = F
        self._radius, self._angle = std_polar(F.cast(radius), F.cast(angle), F)

    def _new(self, radius, angle):
        return ComplexPolar(radius, angle, self._F)

    @classmethod
    def from_complex(cls, z, dtype=None):
        ret = to_complex(z, dtype)
        if ret is None:
            raise TypeError("Cannot convert {!r} to ComplexPolar".format(z))
        if dtype is not None:
            ret = ret.astype(dtype)
        return ret.polarize()

    @property
    def radius(self):
        return self._radius

    @property
    def angle(self):
        return self._angle

    @property
    def real(self):
        return self._radius * self._F.cos(self._angle)

    @property
    def imag(self):
        return self._radius * self._F.sin(self._angle)

    @property
    def dtype(self):
        return self._F.np_dtype

    def astype(self, dtype):
        return ComplexPolar(self._radius, self._angle, dtype)

    def unpolarize(self):
        """
        Convert into **Complex**.
        """
        return Complex(self.real, self.imag, self._F)

    def polarize(self):
        return self

    def abs(self):
        return self._radius

    def arg(self):
        return self._angle

    def square_abs(self):
        return self._radius * self._radius

    def conj(self):
        return self._new(self._radius, -self._angle)

    def sqrt(self):
        """
        The principal square root :math:`(\\sqrt{radius}, angle / 2)`.
        """
        F = self._F
        return self._new(F.sqrt(self._radius), self._angle / F.two)

    def inv(self):
        return self._new(self._F.one / self._radius, -self._angle)

    def powi(self, exponent):
        n = operator.index(exponent)
        F = self._F
        if n == 0:
            return self._new(F.one, F.zero)
        x = F.cast(n)
        return self._new(F.powf(self._radius, x), self._angle * x)

    def powf(self, exponent):
        """
        De Moivre's formula :math:`(radius^x, x \\cdot angle)`.
        """
        F = self._F
        exponent = F.cast(exponent)
        return self._new(F.powf(self._radius, exponent), self._angle * exponent)

    def powc(self, exponent):
        return self.unpolarize().powc(exponent).polarize()

    def powcp(self, exponent):
        """
        Raised to a **ComplexPolar** exponent.
        """
        return self.unpolarize().powc(exponent.unpolarize()).polarize()

    def exp(self):
        return self.unpolarize().exp().polarize()

    def ln(self):
        return self.unpolarize().ln().polarize()

    def log(self):
        return self.unpolarize().log().polarize()

    def logn(self, base):
        return self.unpolarize().logn(base).polarize()

    def __abs__(self):
        return self._radius

    def __complex__(self):
        return complex(self.unpolarize())

    def __eq__(self, other):
        # never equal to Complex, the hash is taken on (radius, angle)
        if not isinstance(other, ComplexPolar):
            return NotImplemented
        return bool(
            self._radius == other.radius and self._angle == other.angle
        )

    def __hash__(self):
        return hash((self._radius, self._angle))

    def __repr__(self):
        if self._F is get_float_type():
            return "ComplexPolar({}, {})".format(self._radius, self._angle)
        return "ComplexPolar({}, {}, dtype={})".format(
            self._radius, self._angle, self._F.name
        )

    def __str__(self):
        return str(self.unpolarize())
