"""Values and time derivatives of a multi-dimensional quantity."""

from __future__ import annotations

from enum import IntEnum

import numpy as np

NODE_DERIVATIVES = 2
"""A spline node holds a position and a velocity."""


class Dx(IntEnum):
    """Order of the time derivative."""

    POS = 0
    VEL = 1
    ACC = 2


class State:
    """Position and its time derivatives, each a vector of the same size."""

    def __init__(self, dim, n_derivatives):
        self._values = [np.zeros(dim) for _ in range(n_derivatives)]

    def at(self, deriv):
        """The vector of the given derivative; changes to it change the state."""
        return self._values[int(deriv)]

    def p(self):
        """Position."""
        return self.at(Dx.POS)

    def v(self):
        """Velocity."""
        return self.at(Dx.VEL)

    def a(self):
        """Acceleration."""
        return self.at(Dx.ACC)

    def __repr__(self):
        return f"State({[list(v) for v in self._values]})"