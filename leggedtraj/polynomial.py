"""Polynomials in time, and the cubic Hermite segment between two nodes."""

from __future__ import annotations

import copy

import numpy as np

from leggedtraj.state import NODE_DERIVATIVES, Dx, State


def _check_node_derivative(node_derivative):
    if node_derivative not in (Dx.POS, Dx.VEL):
        raise ValueError(f"nodes hold only position and velocity, not {node_derivative!r}")


class Polynomial:
    """A vector-valued polynomial x(t) = sum_c coeff[c] * t**c."""

    def __init__(self, order, dim):
        self._coeff_ids = list(range(order + 1))
        self._coeff = [np.zeros(dim) for _ in self._coeff_ids]

    def get_point(self, t_local):
        """Position, velocity and acceleration at local time t."""
        if t_local < 0.0:
            raise ValueError("polynomial evaluated at negative time")
        out = State(self._coeff[0].size, 3)
        for d in (Dx.POS, Dx.VEL, Dx.ACC):
            for c in self._coeff_ids:
                out.at(d)[:] += self.get_derivative_wrt_coeff(t_local, d, c) * self._coeff[c]
        return out

    def get_derivative_wrt_coeff(self, t, deriv, coeff):
        """Sensitivity of the given derivative of x(t) to coefficient c."""
        c = int(coeff)
        if deriv == Dx.POS:
            return float(t ** c)
        if deriv == Dx.VEL:
            return float(c * t ** (c - 1)) if c >= 1 else 0.0
        if deriv == Dx.ACC:
            return float(c * (c - 1) * t ** (c - 2)) if c >= 2 else 0.0
        raise ValueError(f"derivative {deriv!r} not defined")


class CubicHermitePolynomial(Polynomial):
    """Cubic segment fixed by start and end node (position and velocity) and duration."""

    def __init__(self, dim):
        super().__init__(3, dim)
        self._n0 = State(dim, NODE_DERIVATIVES)
        self._n1 = State(dim, NODE_DERIVATIVES)
        self._T = 0.0

    def set_nodes(self, n0, n1):
        self._n0 = copy.deepcopy(n0)
        self._n1 = copy.deepcopy(n1)

    def set_duration(self, duration):
        self._T = float(duration)

    def get_duration(self):
        return self._T

    def update_coeff(self):
        """Recompute the coefficients from the nodes and duration."""
        p0, v0 = self._n0.p(), self._n0.v()
        p1, v1 = self._n1.p(), self._n1.v()
        T = self._T
        with np.errstate(divide="ignore", invalid="ignore"):
            self._coeff[0] = p0.copy()
            self._coeff[1] = v0.copy()
            self._coeff[2] = -(3 * (p0 - p1) + T * (2 * v0 + v1)) / T ** 2
            self._coeff[3] = (2 * (p0 - p1) + T * (v0 + v1)) / T ** 3

    def get_derivative_wrt_start_node(self, dfdt, node_derivative, t_local):
        """Sensitivity of the dfdt derivative to a start-node value."""
        _check_node_derivative(node_derivative)
        is_pos = node_derivative == Dx.POS
        t, T = t_local, self._T
        if dfdt == Dx.POS:
            if is_pos:
                return (2 * t ** 3) / T ** 3 - (3 * t ** 2) / T ** 2 + 1
            return t - (2 * t ** 2) / T + t ** 3 / T ** 2
        if dfdt == Dx.VEL:
            if is_pos:
                return (6 * t ** 2) / T ** 3 - (6 * t) / T ** 2
            return (3 * t ** 2) / T ** 2 - (4 * t) / T + 1
        if dfdt == Dx.ACC:
            if is_pos:
                return (12 * t) / T ** 3 - 6 / T ** 2
            return (6 * t) / T ** 2 - 4 / T
        raise ValueError(f"derivative {dfdt!r} not implemented")

    def get_derivative_wrt_end_node(self, dfdt, node_derivative, t_local):
        """Sensitivity of the dfdt derivative to an end-node value."""
        _check_node_derivative(node_derivative)
        is_pos = node_derivative == Dx.POS
        t, T = t_local, self._T
        if dfdt == Dx.POS:
            if is_pos:
                return (3 * t ** 2) / T ** 2 - (2 * t ** 3) / T ** 3
            return t ** 3 / T ** 2 - t ** 2 / T
        if dfdt == Dx.VEL:
            if is_pos:
                return (6 * t) / T ** 2 - (6 * t ** 2) / T ** 3
            return (3 * t ** 2) / T ** 2 - (2 * t) / T
        if dfdt == Dx.ACC:
            if is_pos:
                return 6 / T ** 2 - (12 * t) / T ** 3
            return (6 * t) / T ** 2 - 2 / T
        raise ValueError(f"derivative {dfdt!r} not implemented")

    def get_derivative_of_pos_wrt_duration(self, t):
        """Sensitivity of the position at local time t to the duration."""
        x0, x1 = self._n0.p(), self._n1.p()
        v0, v1 = self._n0.v(), self._n1.v()
        T = self._T
        return (
            (t ** 3 * (v0 + v1)) / T ** 3
            - (t ** 2 * (2 * v0 + v1)) / T ** 2
            - (3 * t ** 3 * (2 * x0 - 2 * x1 + T * v0 + T * v1)) / T ** 4
            + (2 * t ** 2 * (3 * x0 - 3 * x1 + 2 * T * v0 + T * v1)) / T ** 3
        )