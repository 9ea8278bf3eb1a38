import numpy as np
import pytest

from leggedtraj.node_spline import NodeSpline
from leggedtraj.nodes_variables_all import NodesVariablesAll
from leggedtraj.nodes_variables_phase_based import NodesVariablesEEMotion
from leggedtraj.state import Dx


@pytest.fixture
def all_nodes():
    nodes = NodesVariablesAll(3, 2, "base")
    rng = np.random.default_rng(3)
    nodes.set_variables(rng.normal(size=nodes.rows))
    return nodes


@pytest.fixture
def spline(all_nodes):
    return NodeSpline(all_nodes, [0.5, 0.7])


def _point(spline, t, deriv):
    state = spline.get_point(t)
    return state.at(deriv).copy()


def test_passes_through_nodes(spline, all_nodes):
    nodes = all_nodes.get_nodes()
    np.testing.assert_allclose(spline.get_point(0.0).p(), nodes[0].p())
    np.testing.assert_allclose(spline.get_point(0.5).p(), nodes[1].p(), atol=1e-9)
    np.testing.assert_allclose(spline.get_point(1.2).p(), nodes[2].p(), atol=1e-9)
    np.testing.assert_allclose(spline.get_point(1.2).v(), nodes[2].v(), atol=1e-9)


def test_follows_variable_changes(spline, all_nodes):
    x = np.full(all_nodes.rows, 2.0)
    all_nodes.set_variables(x)
    np.testing.assert_allclose(spline.get_point(0.0).p(), [2.0, 2.0])
    np.testing.assert_allclose(spline.get_point(0.0).v(), [2.0, 2.0])


def test_node_variables_count(spline, all_nodes):
    assert spline.get_node_variables_count() == all_nodes.rows
    assert spline.get_jacobian_wrt_nodes(0.3, Dx.POS).shape == (2, all_nodes.rows)


@pytest.mark.parametrize("deriv", [Dx.POS, Dx.VEL, Dx.ACC])
@pytest.mark.parametrize("t", [0.1, 0.5, 0.9, 1.15])
def test_jacobian_matches_finite_difference(spline, all_nodes, deriv, t):
    jac = spline.get_jacobian_wrt_nodes(t, deriv)
    x0 = all_nodes.get_values()
    base = _point(spline, t, deriv)
    h = 1e-6
    for idx in range(all_nodes.rows):
        x = x0.copy()
        x[idx] += h
        all_nodes.set_variables(x)
        numeric = (_point(spline, t, deriv) - base) / h
        np.testing.assert_allclose(jac[:, idx], numeric, atol=1e-4)
    all_nodes.set_variables(x0)


def test_jacobian_at_start_is_identity_on_first_position(spline):
    jac = spline.get_jacobian_wrt_nodes_local(0, 0.0, Dx.POS)
    np.testing.assert_allclose(jac[:, :2], np.eye(2))
    np.testing.assert_allclose(jac[:, 2:], 0.0)


def test_fill_with_zeros_keeps_zeros(spline, all_nodes):
    jac = np.zeros((2, all_nodes.rows))
    spline.fill_jacobian_wrt_nodes(1, 0.3, Dx.VEL, jac, True)
    assert not jac.any()


def test_structure_not_modified(spline):
    spline.get_jacobian_wrt_nodes(0.4, Dx.ACC)
    assert not spline.jac_wrt_nodes_structure.any()


def test_phase_based_spline_holds_still_in_stance():
    motion = NodesVariablesEEMotion(3, True, "ee", 2)
    rng = np.random.default_rng(7)
    motion.set_variables(rng.normal(size=motion.rows))
    durations = motion.convert_phase_to_poly_durations([0.4, 0.3, 0.5])
    spline = NodeSpline(motion, durations)
    start = spline.get_point(0.0).p().copy()
    for t in (0.1, 0.2, 0.35):
        np.testing.assert_allclose(spline.get_point(t).p(), start, atol=1e-9)
        np.testing.assert_allclose(spline.get_point(t).v(), 0.0, atol=1e-9)
    assert spline.get_total_time() == pytest.approx(1.2)


def test_time_beyond_spline_raises(spline):
    with pytest.raises(ValueError):
        spline.get_jacobian_wrt_nodes(5.0, Dx.POS)