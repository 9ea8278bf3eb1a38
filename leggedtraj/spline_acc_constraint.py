"""Continuous acceleration across the junctions of a node spline."""

from __future__ import annotations

import numpy as np

from leggedtraj.nodes_variables import Bounds
from leggedtraj.state import Dx


class SplineAccConstraint:
    """At every junction the acceleration at the end of one polynomial equals
    that at the start of the next."""

    def __init__(self, spline, node_variable_name):
        self.spline = spline
        self.node_variables_id = node_variable_name
        self.name = "splineacc-" + node_variable_name
        self.n_dim = spline.get_point(0.0).p().size
        self.n_junctions = spline.get_polynomial_count() - 1
        self.T = spline.get_poly_durations()
        self.rows = self.n_dim * self.n_junctions

    def get_values(self):
        g = np.zeros(self.rows)
        for j in range(self.n_junctions):
            acc_prev = self.spline.get_point_local(j, self.T[j]).a()
            acc_next = self.spline.get_point_local(j + 1, 0.0).a()
            g[j * self.n_dim:(j + 1) * self.n_dim] = acc_prev - acc_next
        return g

    def get_bounds(self):
        return [Bounds(0.0, 0.0)] * self.rows

    def fill_jacobian_block(self, var_set, jac):
        """Write the derivatives wrt the spline's node variables into jac, in place."""
        if var_set != self.node_variables_id:
            return jac
        for j in range(self.n_junctions):
            acc_prev = self.spline.get_jacobian_wrt_nodes_local(j, self.T[j], Dx.ACC)
            acc_next = self.spline.get_jacobian_wrt_nodes_local(j + 1, 0.0, Dx.ACC)
            jac[j * self.n_dim:(j + 1) * self.n_dim] = acc_prev - acc_next
        return jac