"""
Roots of unity
--------------

The n-th roots of unity built in polar form, checked with ``powi`` and shown
in the complex plane.

"""

import matplotlib.pyplot as plt
import numpy as np

from ccmath import Complex, ComplexPolar

n = 7
roots = [ComplexPolar(1.0, 2 * np.pi * k / n) for k in range(n)]

# %%
# Each root raised to the n-th power is one, up to rounding.

for p in roots:
    print(p, "->", p.unpolarize().powi(n))

# %%
# The same values in the complex plane, with the unit circle.

theta = np.linspace(0, 2 * np.pi, 200)
plt.plot(np.cos(theta), np.sin(theta), color="gray", linewidth=0.5)
plt.scatter([p.real for p in roots], [p.imag for p in roots])
plt.gca().set_aspect("equal")
plt.xlabel("Re")
plt.ylabel("Im")
plt.show()

# %%
# Euler's identity: :math:`e^{i\pi} = -1`.

print(Complex(0.0, np.pi).exp())
