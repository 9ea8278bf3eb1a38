import numpy as np
import pytest

from leggedtraj.node_spline import NodeSpline
from leggedtraj.nodes_variables import Bounds
from leggedtraj.nodes_variables_all import NodesVariablesAll
from leggedtraj.spline_acc_constraint import SplineAccConstraint


def _setup(durations=(0.4, 0.5, 0.3), seed=0):
    nodes = NodesVariablesAll(len(durations) + 1, 3, "base-lin")
    nodes.set_variables(np.random.default_rng(seed).normal(size=nodes.rows))
    spline = NodeSpline(nodes, list(durations))
    return SplineAccConstraint(spline, "base-lin"), nodes


def test_name_and_rows():
    c, _ = _setup()
    assert c.name == "splineacc-base-lin"
    assert c.rows == 6
    assert c.get_values().shape == (6,)


def test_constant_velocity_has_continuous_acceleration():
    nodes = NodesVariablesAll(4, 3, "base-lin")
    nodes.set_by_linear_interpolation(np.zeros(3), np.array([1.0, 2.0, -1.0]), 1.5)
    spline = NodeSpline(nodes, [0.5, 0.5, 0.5])
    c = SplineAccConstraint(spline, "base-lin")
    np.testing.assert_allclose(c.get_values(), 0.0, atol=1e-9)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_values_equal_jacobian_times_variables(seed):
    c, nodes = _setup(seed=seed)
    jac = np.zeros((c.rows, nodes.rows))
    c.fill_jacobian_block("base-lin", jac)
    np.testing.assert_allclose(c.get_values(), jac @ nodes.get_values(), atol=1e-9)


def test_single_polynomial_has_no_rows():
    c, _ = _setup(durations=(0.7,))
    assert c.rows == 0
    assert c.get_values().size == 0
    assert c.get_bounds() == []


def test_bounds_are_zero():
    c, _ = _setup()
    assert c.get_bounds() == [Bounds(0.0, 0.0)] * 6


def test_other_variable_set_ignored():
    c, nodes = _setup()
    jac = np.zeros((c.rows, nodes.rows))
    c.fill_jacobian_block("base-ang", jac)
    assert not jac.any()