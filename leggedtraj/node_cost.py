"""Quadratic cost on one derivative and dimension of every node."""

from __future__ import annotations

import numpy as np


class NodeCost:
    """Weighted sum of squares of nodes[i].at(deriv)[dim] over all nodes."""

    def __init__(self, nodes_id, deriv, dim, weight):
        self.node_id = nodes_id
        self.deriv = deriv
        self.dim = dim
        self.weight = float(weight)
        self.name = f"{nodes_id}-dx_{int(deriv)}-dim_{int(dim)}"
        self.nodes = None

    def init_variable_dependent_quantities(self, variables):
        """Link to the node variables named nodes_id in the given mapping."""
        self.nodes = variables[self.node_id]

    def get_cost(self):
        return sum(
            self.weight * float(node.at(self.deriv)[self.dim]) ** 2
            for node in self.nodes.get_nodes()
        )

    def get_values(self):
        return np.array([self.get_cost()])

    def fill_jacobian_block(self, var_set, jac):
        """Add the gradient wrt the variable set var_set into row 0 of jac."""
        if var_set != self.node_id:
            return jac
        nodes = self.nodes.get_nodes()
        for i in range(self.nodes.rows):
            for nvi in self.nodes.get_node_values_info(i):
                if nvi.deriv == self.deriv and nvi.dim == self.dim:
                    val = nodes[nvi.node_id].at(self.deriv)[self.dim]
                    jac[0, i] += self.weight * 2.0 * val
        return jac