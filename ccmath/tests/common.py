import numpy as np


def assert_complex_close(a, b, rtol=1e-12, atol=1e-14):
    """compare anything convertible by ``complex()``"""
    np.testing.assert_allclose(complex(a), complex(b), rtol=rtol, atol=atol)


def assert_polar_close(p, radius, angle, rtol=1e-12, atol=1e-14):
    np.testing.assert_allclose(
        [float(p.radius), float(p.angle)],
        [radius, angle],
        rtol=rtol,
        atol=atol,
    )
