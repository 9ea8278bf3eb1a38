import math

import numpy as np
import pytest

from leggedtraj.nodes_variables import (
    NO_BOUND,
    NODE_VALUE_NOT_OPTIMIZED,
    Bounds,
    NodesVariables,
    NodeValueInfo,
    Side,
)
from leggedtraj.state import Dx, State


class PositionsOnly(NodesVariables):
    """Three 2-D nodes; only positions are optimized."""

    def __init__(self):
        super().__init__("positions")
        self.n_dim = 2
        self.nodes = [State(2, 2) for _ in range(3)]
        self.rows = 6
        self.bounds = [NO_BOUND] * self.rows

    def get_node_values_info(self, idx):
        return [NodeValueInfo(idx // 2, Dx.POS, idx % 2)]


class Recorder:
    def __init__(self):
        self.calls = 0

    def update_nodes(self):
        self.calls += 1


def test_bounds_shift_and_constants():
    assert Bounds(1.0, 2.0) + 1.0 == Bounds(2.0, 3.0)
    assert NO_BOUND.lower == -math.inf
    assert NO_BOUND.upper == math.inf


def test_node_value_info_equality():
    assert NodeValueInfo(1, Dx.VEL, 2) == NodeValueInfo(1, Dx.VEL, 2)
    assert NodeValueInfo(1, Dx.VEL, 2) != NodeValueInfo(1, Dx.POS, 2)


def test_node_id():
    assert NodesVariables.get_node_id(2, Side.START) == 2
    assert NodesVariables.get_node_id(2, Side.END) == 3


def test_opt_index_round_trip():
    nv = PositionsOnly()
    for idx in range(nv.rows):
        for nvi in nv.get_node_values_info(idx):
            assert nv.get_opt_index(nvi) == idx
    assert nv.get_opt_index(NodeValueInfo(0, Dx.VEL, 0)) == NODE_VALUE_NOT_OPTIMIZED


def test_set_and_get_values_notify_observers():
    nv = PositionsOnly()
    rec = Recorder()
    NodesVariables.add_observer(nv, rec)
    x = np.arange(6, dtype=float) * 0.5
    NodesVariables.set_variables(nv, x)
    assert np.array_equal(NodesVariables.get_values(nv), x)
    assert rec.calls == 1
    assert np.array_equal(NodesVariables.get_nodes(nv)[1].p(), x[2:4])


def test_get_nodes_returns_copies():
    nv = PositionsOnly()
    nodes = NodesVariables.get_nodes(nv)
    nodes[0].at(Dx.POS)[0] = 9.0
    assert NodesVariables.get_nodes(nv)[0].p()[0] == 0.0


def test_linear_interpolation_positions():
    nv = PositionsOnly()
    initial, final = np.array([0.0, 1.0]), np.array([2.0, 5.0])
    NodesVariables.set_by_linear_interpolation(nv, initial, final, 2.0)
    nodes = NodesVariables.get_nodes(nv)
    assert np.allclose(nodes[0].p(), initial)
    assert np.allclose(nodes[-1].p(), final)
    assert np.allclose(nodes[1].p(), (initial + final) / 2)
    # velocities are not optimized here and stay untouched
    assert np.array_equal(nodes[1].v(), np.zeros(2))


def test_start_and_final_bounds():
    nv = PositionsOnly()
    nv.add_start_bound(Dx.POS, [0, 1], np.array([0.3, -0.4]))
    nv.add_final_bound(Dx.POS, [1], np.array([0.0, 0.7]))
    bounds = nv.get_bounds()
    assert bounds[0] == Bounds(0.3, 0.3)
    assert bounds[1] == Bounds(-0.4, -0.4)
    assert bounds[4] == NO_BOUND
    assert bounds[5] == Bounds(0.7, 0.7)


def test_velocity_bound_ignored_when_not_optimized():
    nv = PositionsOnly()
    NodesVariables.add_start_bound(nv, Dx.VEL, [0, 1], np.array([1.0, 1.0]))
    assert NodesVariables.get_bounds(nv) == [Bounds(-math.inf, math.inf)] * nv.rows


def test_boundary_nodes_and_counts():
    nv = PositionsOnly()
    NodesVariables.set_variables(nv, np.arange(6, dtype=float))
    start, end = NodesVariables.get_boundary_nodes(nv, 1)
    assert np.array_equal(start.p(), np.array([2.0, 3.0]))
    assert np.array_equal(end.p(), np.array([4.0, 5.0]))
    assert NodesVariables.get_polynomial_count(nv) == 2
    assert NodesVariables.get_dim(nv) == 2


def test_abstract_base_cannot_be_built():
    with pytest.raises(TypeError):
        NodesVariables("x")