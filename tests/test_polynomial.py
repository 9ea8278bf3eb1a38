import numpy as np
import pytest

from leggedtraj.polynomial import CubicHermitePolynomial, Polynomial
from leggedtraj.state import Dx, State


def make_node(p, v):
    n = State(len(p), 2)
    n.at(Dx.POS)[:] = p
    n.at(Dx.VEL)[:] = v
    return n


def make_poly(p0, v0, p1, v1, T):
    poly = CubicHermitePolynomial(len(p0))
    poly.set_nodes(make_node(p0, v0), make_node(p1, v1))
    poly.set_duration(T)
    poly.update_coeff()
    return poly


def test_zero_polynomial_point():
    s = Polynomial(3, 2).get_point(0.7)
    assert np.array_equal(s.p(), np.zeros(2))
    assert np.array_equal(s.a(), np.zeros(2))


def test_negative_time_raises():
    with pytest.raises(ValueError):
        Polynomial(3, 1).get_point(-0.1)


def test_coeff_derivatives_consistent():
    p = Polynomial(3, 1)
    h = 1e-6
    for c in range(4):
        for t in (0.3, 1.2):
            num_vel = (p.get_derivative_wrt_coeff(t + h, Dx.POS, c)
                       - p.get_derivative_wrt_coeff(t - h, Dx.POS, c)) / (2 * h)
            assert p.get_derivative_wrt_coeff(t, Dx.VEL, c) == pytest.approx(num_vel, abs=1e-6)
            num_acc = (p.get_derivative_wrt_coeff(t + h, Dx.VEL, c)
                       - p.get_derivative_wrt_coeff(t - h, Dx.VEL, c)) / (2 * h)
            assert p.get_derivative_wrt_coeff(t, Dx.ACC, c) == pytest.approx(num_acc, abs=1e-5)


def test_low_order_coeff_derivatives():
    p = Polynomial(3, 1)
    assert p.get_derivative_wrt_coeff(0.4, Dx.POS, 0) == 1.0
    assert p.get_derivative_wrt_coeff(0.4, Dx.VEL, 0) == 0.0
    assert p.get_derivative_wrt_coeff(0.4, Dx.ACC, 1) == 0.0


def test_invalid_deriv_raises():
    with pytest.raises(ValueError):
        Polynomial(3, 1).get_derivative_wrt_coeff(0.1, 7, 1)


def test_hermite_interpolates_nodes():
    p0, v0, p1, v1 = [1.0, -2.0], [0.5, 0.0], [3.0, 4.0], [-1.0, 2.0]
    poly = make_poly(p0, v0, p1, v1, 0.8)
    start = poly.get_point(0.0)
    end = poly.get_point(0.8)
    assert np.allclose(start.p(), p0)
    assert np.allclose(start.v(), v0)
    assert np.allclose(end.p(), p1)
    assert np.allclose(end.v(), v1)
    assert poly.get_duration() == 0.8


@pytest.mark.parametrize("dfdt", [Dx.POS, Dx.VEL, Dx.ACC])
@pytest.mark.parametrize("node_deriv", [Dx.POS, Dx.VEL])
def test_node_derivatives_match_finite_difference(dfdt, node_deriv):
    base = dict(p0=[0.2], v0=[0.1], p1=[1.5], v1=[-0.3])
    T, t, h = 0.9, 0.35, 1e-6
    key0 = "p0" if node_deriv == Dx.POS else "v0"
    key1 = "p1" if node_deriv == Dx.POS else "v1"
    poly = make_poly(base["p0"], base["v0"], base["p1"], base["v1"], T)
    value = poly.get_point(t).at(dfdt)[0]

    bumped = dict(base)
    bumped[key0] = [base[key0][0] + h]
    p_start = make_poly(bumped["p0"], bumped["v0"], bumped["p1"], bumped["v1"], T)
    num = (p_start.get_point(t).at(dfdt)[0] - value) / h
    assert poly.get_derivative_wrt_start_node(dfdt, node_deriv, t) == pytest.approx(num, abs=1e-4)

    bumped = dict(base)
    bumped[key1] = [base[key1][0] + h]
    p_end = make_poly(bumped["p0"], bumped["v0"], bumped["p1"], bumped["v1"], T)
    num = (p_end.get_point(t).at(dfdt)[0] - value) / h
    assert poly.get_derivative_wrt_end_node(dfdt, node_deriv, t) == pytest.approx(num, abs=1e-4)


def test_node_acc_derivative_rejected():
    poly = make_poly([0.0], [0.0], [1.0], [0.0], 1.0)
    with pytest.raises(ValueError):
        poly.get_derivative_wrt_start_node(Dx.POS, Dx.ACC, 0.5)
    with pytest.raises(ValueError):
        poly.get_derivative_wrt_end_node(Dx.POS, Dx.ACC, 0.5)


def test_derivative_wrt_duration_matches_finite_difference():
    args = ([0.2, 1.0], [0.1, -0.5], [1.5, 0.0], [-0.3, 0.7])
    T, t, h = 0.9, 0.4, 1e-6
    poly = make_poly(*args, T)
    bumped = make_poly(*args, T + h)
    num = (bumped.get_point(t).p() - poly.get_point(t).p()) / h
    assert np.allclose(poly.get_derivative_of_pos_wrt_duration(t), num, atol=1e-4)