import numpy as np
import pytest

from leggedtraj.node_cost import NodeCost
from leggedtraj.nodes_variables_all import NodesVariablesAll
from leggedtraj.state import Dx


def _setup(deriv, dim, weight, seed=0):
    nodes = NodesVariablesAll(4, 3, "nodes")
    nodes.set_variables(np.random.default_rng(seed).normal(size=nodes.rows))
    cost = NodeCost("nodes", deriv, dim, weight)
    cost.init_variable_dependent_quantities({"nodes": nodes})
    return cost, nodes


def test_name_format():
    assert NodeCost("ee-force_1", Dx.POS, 2, 1.0).name == "ee-force_1-dx_0-dim_2"
    assert NodeCost("ee-motion_0", Dx.VEL, 0, 1.0).name == "ee-motion_0-dx_1-dim_0"


def test_cost_zero_for_zero_nodes():
    nodes = NodesVariablesAll(3, 3, "nodes")
    nodes.set_variables(np.zeros(nodes.rows))
    cost = NodeCost("nodes", Dx.POS, 1, 2.0)
    cost.init_variable_dependent_quantities({"nodes": nodes})
    assert cost.get_cost() == 0.0


def test_cost_scales_with_weight():
    c1, _ = _setup(Dx.VEL, 1, 1.0)
    c3, _ = _setup(Dx.VEL, 1, 3.0)
    assert c3.get_cost() == pytest.approx(3.0 * c1.get_cost())
    assert c1.get_cost() > 0.0


@pytest.mark.parametrize("deriv, dim", [(Dx.POS, 0), (Dx.POS, 2), (Dx.VEL, 1)])
def test_gradient_satisfies_euler_identity(deriv, dim):
    cost, nodes = _setup(deriv, dim, 1.5, seed=3)
    jac = np.zeros((1, nodes.rows))
    cost.fill_jacobian_block("nodes", jac)
    # cost is homogeneous of degree two in the variables
    assert jac[0] @ nodes.get_values() == pytest.approx(2.0 * cost.get_cost())
    assert np.count_nonzero(jac) == 4


def test_gradient_matches_finite_differences():
    cost, nodes = _setup(Dx.POS, 2, 0.7, seed=5)
    jac = np.zeros((1, nodes.rows))
    cost.fill_jacobian_block("nodes", jac)
    x0 = nodes.get_values()
    c0 = cost.get_cost()
    h = 1e-6
    for i in range(nodes.rows):
        x = x0.copy()
        x[i] += h
        nodes.set_variables(x)
        assert (cost.get_cost() - c0) / h == pytest.approx(jac[0, i], abs=1e-4)


def test_other_variable_set_ignored():
    cost, nodes = _setup(Dx.POS, 0, 1.0)
    jac = np.zeros((1, nodes.rows))
    cost.fill_jacobian_block("other", jac)
    assert not jac.any()