"""
This module provides the floating-point capability set **FloatType** that the
complex types are written against. One **FloatType** is registered for each
supported float width. It holds the exact small constants of that width and
the elementary primitives (numpy ufuncs) evaluated in it.

New widths can be added with **regist_float_type()**.
"""
import functools
import inspect
import logging
import warnings

import numpy as np

from .config import get_config, regist_config_check

logger = logging.getLogger(__file__)

float_type_dict = {}


def _signum(x):
    """sign with IEEE semantics: +1 for +0.0, -1 for -0.0, NaN for NaN"""
    if np.isnan(x):
        return x
    return np.copysign(type(x)(1), x)


default_primitives = {
    "sin": np.sin,
    "cos": np.cos,
    "sinh": np.sinh,
    "cosh": np.cosh,
    "exp": np.exp,
    "ln": np.log,
    "sqrt": np.sqrt,
    "atan2": np.arctan2,
    "powf": np.power,
    "abs": np.abs,
    "mod": np.mod,
    "signum": _signum,
    "signbit": np.signbit,
    "isnan": np.isnan,
    "isinf": np.isinf,
    "isfinite": np.isfinite,
}


class FloatType(object):
    """
    Constants and primitives of one float width.

    :param name: Registered name, such as ``"float64"``.
    :param dtype: numpy scalar type, such as ``numpy.float64``.
    :param primitives: Override some of the default primitives.
    """

    def __init__(self, name, dtype, **primitives):
        self.name = name
        self.dtype = dtype
        self.np_dtype = np.dtype(dtype)
        funcs = dict(default_primitives)
        funcs.update(primitives)
        for k, v in funcs.items():
            setattr(self, k, v)
        self.zero = dtype(0)
        self.one = dtype(1)
        self.two = self.one + self.one
        self.ten = dtype(10)
        self.half = self.one / self.two
        # computed in the width itself, keeps the extra digits of longdouble
        self.pi = np.arccos(-self.one)
        self.nan = dtype(np.nan)
        self.inf = dtype(np.inf)

    def cast(self, x):
        """Convert a real scalar into this width."""
        return self.dtype(x)

    def __repr__(self):
        return "FloatType({})".format(self.name)


def regist_float_type(name, dtype=None, **primitives):
    """
    Register a float width.

    :param name: String name of the width
    :param dtype: numpy scalar type, ``name`` is used when it is ``None``
    :return: The new **FloatType**
    """
    if dtype is None:
        dtype = np.dtype(name).type
    if name in float_type_dict:
        warnings.warn("{} already exists.".format(name))
    ret = FloatType(name, dtype, **primitives)
    float_type_dict[name] = ret
    logger.debug("regist float type %s (%s)", name, ret.np_dtype)
    return ret


regist_float_type("float16", np.float16)
regist_float_type("float32", np.float32)
regist_float_type("float64", np.float64)
regist_float_type("longdouble", np.longdouble)


def get_float_type(dtype=None):
    """
    Find the **FloatType** of ``dtype``.

    :param dtype: A registered name, a numpy dtype or scalar type, or a **FloatType**. ``None`` means ``get_config("dtype")``.
    :return: **FloatType**
    """
    if dtype is None:
        dtype = get_config("dtype")
    if isinstance(dtype, FloatType):
        return dtype
    if isinstance(dtype, str) and dtype in float_type_dict:
        return float_type_dict[dtype]
    try:
        np_dtype = np.dtype(dtype)
    except TypeError:
        raise ValueError("No float type named {} found.".format(dtype))
    for i in float_type_dict.values():
        if i.np_dtype == np_dtype:
            return i
    raise ValueError("No float type named {} found.".format(dtype))


def numpy_float_type(*values):
    """
    The **FloatType** carried by the numpy floating scalars in ``values``,
    ``None`` if there is no such scalar.
    """
    dtypes = [i.dtype for i in values if isinstance(i, np.floating)]
    if not dtypes:
        return None
    return get_float_type(np.result_type(*dtypes))


def infer_float_type(*values):
    """
    The width used to store ``values``. Python numbers adopt the configured
    default width.
    """
    ret = numpy_float_type(*values)
    if ret is None:
        return get_float_type()
    return ret


def promote(*dtypes):
    """
    The widest of ``dtypes`` following numpy promotion, ``None`` entries are
    skipped.
    """
    types = [get_float_type(i) for i in dtypes if i is not None]
    if not types:
        return get_float_type()
    if all(i is types[0] for i in types):
        return types[0]
    return get_float_type(np.result_type(*[i.np_dtype for i in types]))


def ieee_errors(f):
    """
    Run ``f`` under ``numpy.errstate(all=get_config("float_errors"))``.
    """

    @functools.wraps(f)
    def _f(*args, **kwargs):
        with np.errstate(all=get_config("float_errors")):
            return f(*args, **kwargs)

    return _f


def ieee_methods(cls):
    """
    Class decorator, wraps every public method of ``cls`` with
    **ieee_errors()**.
    """
    for name, f in list(vars(cls).items()):
        if name.startswith("_") or not inspect.isfunction(f):
            continue
        setattr(cls, name, ieee_errors(f))
    return cls


@regist_config_check("dtype")
def _check_dtype(var):
    get_float_type(var)
