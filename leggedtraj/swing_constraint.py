"""Keeps swing nodes of a foot midway between the footholds around them."""

from __future__ import annotations

import numpy as np

from leggedtraj.nodes_variables import Bounds, NodeValueInfo
from leggedtraj.state import NODE_DERIVATIVES, Dx

_X, _Y = 0, 1
_DIM_2D = 2


class SwingConstraint:
    """For every swing node, xy position at the center and xy velocity toward the target.

    Assumes two polynomials per swing phase and that swings start and end in
    stance. The variables are taken from a mapping of names to node variables.
    """

    t_swing_avg = 0.3

    def __init__(self, ee_motion):
        self.ee_motion_id = ee_motion
        self.name = "swing-" + ee_motion
        self.rows = 0
        self.ee_motion = None
        self.pure_swing_node_ids = []

    def init_variable_dependent_quantities(self, variables):
        self.ee_motion = variables[self.ee_motion_id]
        self.pure_swing_node_ids = self.ee_motion.get_indices_of_non_constant_nodes()
        self.rows = len(self.pure_swing_node_ids) * NODE_DERIVATIVES * _DIM_2D

    def get_values(self):
        g = []
        nodes = self.ee_motion.get_nodes()
        for node_id in self.pure_swing_node_ids:
            curr = nodes[node_id]
            prev = nodes[node_id - 1].p()[:_DIM_2D]
            nxt = nodes[node_id + 1].p()[:_DIM_2D]
            distance = nxt - prev
            center = prev + 0.5 * distance
            des_vel = distance / self.t_swing_avg
            for dim in (_X, _Y):
                g.append(curr.p()[dim] - center[dim])
                g.append(curr.v()[dim] - des_vel[dim])
        return np.array(g, dtype=float)

    def get_bounds(self):
        return [Bounds(0.0, 0.0)] * self.rows

    def fill_jacobian_block(self, var_set, jac):
        """Write the derivatives wrt the motion variables into jac, in place."""
        if var_set != self.ee_motion_id:
            return jac

        def index(node_id, deriv, dim):
            return self.ee_motion.get_opt_index(NodeValueInfo(node_id, deriv, dim))

        row = 0
        for node_id in self.pure_swing_node_ids:
            for dim in (_X, _Y):
                jac[row, index(node_id, Dx.POS, dim)] = 1.0
                jac[row, index(node_id + 1, Dx.POS, dim)] = -0.5
                jac[row, index(node_id - 1, Dx.POS, dim)] = -0.5
                row += 1

                jac[row, index(node_id, Dx.VEL, dim)] = 1.0
                jac[row, index(node_id + 1, Dx.POS, dim)] = -1.0 / self.t_swing_avg
                jac[row, index(node_id - 1, Dx.POS, dim)] = 1.0 / self.t_swing_avg
                row += 1
        return jac