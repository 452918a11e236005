"""
 Complex-number arithmetic and elementary transcendental functions over any
 numpy floating-point width.

"""
from .config import get_config, set_config, temp_config, using_dtype
from .float_wrapper import get_float_type, regist_float_type
from .version import __version__
from .complex import CC, Complex
from .polar import ComplexPolar
from . import overloading

__all__ = [
    "CC",
    "Complex",
    "ComplexPolar",
    "get_config",
    "set_config",
    "temp_config",
    "using_dtype",
    "get_float_type",
    "regist_float_type",
    "__version__",
]
