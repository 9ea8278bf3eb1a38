"""A spline whose polynomials are shaped by a set of node variables."""

from __future__ import annotations

import numpy as np

from leggedtraj.nodes_variables import Side
from leggedtraj.spline import Spline


class NodeSpline(Spline):
    """Spline kept in step with its node variables, with Jacobians wrt them.

    The spline registers itself with the node variables, so every change of
    the variables updates the polynomials.
    """

    def __init__(self, node_variables, polynomial_durations):
        super().__init__(polynomial_durations, node_variables.get_dim())
        self.node_values = node_variables
        node_variables.add_observer(self)
        self.update_nodes()
        self.jac_wrt_nodes_structure = np.zeros(
            (node_variables.get_dim(), node_variables.rows)
        )

    def update_nodes(self):
        """Take the current node values into the polynomials."""
        for i, poly in enumerate(self.cubic_polys):
            start, end = self.node_values.get_boundary_nodes(i)
            poly.set_nodes(start, end)
        self.update_polynomial_coeff()

    def get_node_variables_count(self):
        return self.node_values.rows

    def get_jacobian_wrt_nodes(self, t_global, dxdt):
        """Sensitivity of the dxdt derivative at global time t to every variable."""
        poly_id, t_local = self.get_local_time(t_global, self.get_poly_durations())
        return self.get_jacobian_wrt_nodes_local(poly_id, t_local, dxdt)

    def get_jacobian_wrt_nodes_local(self, poly_id, t_local, dxdt):
        """Same as get_jacobian_wrt_nodes, at a local time of one polynomial."""
        jac = self.jac_wrt_nodes_structure.copy()
        self.fill_jacobian_wrt_nodes(poly_id, t_local, dxdt, jac, False)
        return jac

    def fill_jacobian_wrt_nodes(self, poly_id, t_local, dxdt, jac, fill_with_zeros):
        """Add the sensitivities of polynomial poly_id into jac, in place."""
        poly = self.cubic_polys[poly_id]
        for idx in range(jac.shape[1]):
            for nvi in self.node_values.get_node_values_info(idx):
                for side in (Side.START, Side.END):
                    if self.node_values.get_node_id(poly_id, side) != nvi.node_id:
                        continue
                    if side == Side.START:
                        val = poly.get_derivative_wrt_start_node(dxdt, nvi.deriv, t_local)
                    else:
                        val = poly.get_derivative_wrt_end_node(dxdt, nvi.deriv, t_local)
                    if fill_with_zeros:
                        val = 0.0
                    jac[nvi.dim, idx] += val
        return jac