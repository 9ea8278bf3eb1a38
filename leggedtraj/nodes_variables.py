"""Optimization variables stored as spline nodes (position and velocity)."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from leggedtraj.state import Dx

SPECIFY_LATER = -1
NODE_VALUE_NOT_OPTIMIZED = -1


@dataclass(frozen=True)
class Bounds:
    """Lower and upper limit of a variable or constraint value."""

    lower: float = 0.0
    upper: float = 0.0

    def __add__(self, offset):
        return Bounds(self.lower + offset, self.upper + offset)


NO_BOUND = Bounds(-math.inf, math.inf)
BOUND_ZERO = Bounds(0.0, 0.0)
BOUND_GREATER_ZERO = Bounds(0.0, math.inf)
BOUND_SMALLER_ZERO = Bounds(-math.inf, 0.0)


class Side(IntEnum):
    """Which end of a polynomial a node sits at."""

    START = 0
    END = 1


@dataclass(frozen=True)
class NodeValueInfo:
    """Identifies one scalar inside the nodes: node, derivative and dimension."""

    node_id: int
    deriv: Dx
    dim: int


class NodesVariables(ABC):
    """Nodes whose values, or some of them, are optimization variables.

    Subclasses fill ``nodes``, ``n_dim``, ``bounds`` and ``rows`` and map each
    optimization index to the node values it sets.
    """

    def __init__(self, name):
        self.name = name
        self.rows = SPECIFY_LATER
        self.n_dim = 0
        self.nodes = []
        self.bounds = []
        self._observers = []

    @abstractmethod
    def get_node_values_info(self, idx):
        """The node values set by optimization variable idx."""

    def get_opt_index(self, nvi_des):
        """Index of the variable setting the given node value, or NODE_VALUE_NOT_OPTIMIZED."""
        for idx in range(self.rows):
            if nvi_des in self.get_node_values_info(idx):
                return idx
        return NODE_VALUE_NOT_OPTIMIZED

    def get_values(self):
        x = np.zeros(self.rows)
        for idx in range(self.rows):
            for nvi in self.get_node_values_info(idx):
                x[idx] = self.nodes[nvi.node_id].at(nvi.deriv)[nvi.dim]
        return x

    def set_variables(self, x):
        for idx, value in enumerate(x):
            for nvi in self.get_node_values_info(idx):
                self.nodes[nvi.node_id].at(nvi.deriv)[nvi.dim] = value
        self.update_observers()

    def update_observers(self):
        for observer in self._observers:
            observer.update_nodes()

    def add_observer(self, observer):
        self._observers.append(observer)

    @staticmethod
    def get_node_id(poly_id, side):
        return poly_id + int(side)

    def get_boundary_nodes(self, poly_id):
        return [
            self.nodes[self.get_node_id(poly_id, Side.START)],
            self.nodes[self.get_node_id(poly_id, Side.END)],
        ]

    def get_dim(self):
        return self.n_dim

    def get_polynomial_count(self):
        return len(self.nodes) - 1

    def get_bounds(self):
        return list(self.bounds)

    def get_nodes(self):
        """Copies of the nodes."""
        return copy.deepcopy(self.nodes)

    def set_by_linear_interpolation(self, initial_val, final_val, t_total):
        """Set optimized positions on a straight line and velocities to the average."""
        initial_val = np.asarray(initial_val, dtype=float)
        dp = np.asarray(final_val, dtype=float) - initial_val
        average_velocity = dp / t_total
        num_nodes = len(self.nodes)
        for idx in range(self.rows):
            for nvi in self.get_node_values_info(idx):
                if nvi.deriv == Dx.POS:
                    pos = initial_val + nvi.node_id / (num_nodes - 1) * dp
                    self.nodes[nvi.node_id].at(Dx.POS)[nvi.dim] = pos[nvi.dim]
                if nvi.deriv == Dx.VEL:
                    self.nodes[nvi.node_id].at(Dx.VEL)[nvi.dim] = average_velocity[nvi.dim]

    def add_bounds(self, node_id, deriv, dimensions, val):
        for dim in dimensions:
            self.add_bound(NodeValueInfo(node_id, deriv, dim), val[dim])

    def add_bound(self, nvi_des, val):
        for idx in range(self.rows):
            if nvi_des in self.get_node_values_info(idx):
                self.bounds[idx] = Bounds(float(val), float(val))

    def add_start_bound(self, deriv, dimensions, val):
        self.add_bounds(0, deriv, dimensions, val)

    def add_final_bound(self, deriv, dimensions, val):
        self.add_bounds(len(self.nodes) - 1, deriv, dimensions, val)