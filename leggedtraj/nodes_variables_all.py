"""Node variables where every position and velocity is optimized."""

from __future__ import annotations

from leggedtraj.nodes_variables import NO_BOUND, NodesVariables, NodeValueInfo
from leggedtraj.state import NODE_DERIVATIVES, Dx, State


class NodesVariablesAll(NodesVariables):
    """All node values are variables, ordered p.x, p.y, ..., v.x, v.y, ... per node."""

    def __init__(self, n_nodes, n_dim, variable_id):
        super().__init__(variable_id)
        n_opt_variables = n_nodes * NODE_DERIVATIVES * n_dim
        self.n_dim = n_dim
        self.nodes = [State(n_dim, NODE_DERIVATIVES) for _ in range(n_nodes)]
        self.bounds = [NO_BOUND] * n_opt_variables
        self.rows = n_opt_variables

    def get_node_values_info(self, idx):
        per_node = 2 * self.get_dim()
        internal_id = idx % per_node
        deriv = Dx.POS if internal_id < self.get_dim() else Dx.VEL
        return [NodeValueInfo(idx // per_node, deriv, internal_id % self.get_dim())]