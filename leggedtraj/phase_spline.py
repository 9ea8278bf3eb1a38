"""A node spline whose polynomial durations follow changing phase durations."""

from __future__ import annotations

from leggedtraj.node_spline import NodeSpline
from leggedtraj.state import Dx


class PhaseSpline(NodeSpline):
    """Spline over phase-based nodes, kept in step with the phase durations."""

    def __init__(self, nodes, phase_durations):
        super().__init__(
            nodes,
            nodes.convert_phase_to_poly_durations(phase_durations.get_phase_durations()),
        )
        self.phase_nodes = nodes
        self.phase_durations = phase_durations
        phase_durations.add_observer(self)

        self.update_polynomial_durations()

        # a global time may fall into any polynomial once durations change,
        # so the Jacobian structure covers all of them
        for poly_id in range(nodes.get_polynomial_count()):
            self.fill_jacobian_wrt_nodes(
                poly_id, 0.0, Dx.POS, self.jac_wrt_nodes_structure, True
            )

    def update_polynomial_durations(self):
        """Take the current phase durations into the polynomials."""
        poly_durations = self.phase_nodes.convert_phase_to_poly_durations(
            self.phase_durations.get_phase_durations()
        )
        for poly, duration in zip(self.cubic_polys, poly_durations):
            poly.set_duration(duration)
        self.update_polynomial_coeff()

    def get_jacobian_of_pos_wrt_durations(self, t_global):
        """Sensitivity of the position at t to the optimized phase durations."""
        dx_dT = self.get_derivative_of_pos_wrt_phase_duration(t_global)
        xd = self.get_point(t_global).v()
        current_phase = self.get_segment_id(
            t_global, self.phase_durations.get_phase_durations()
        )
        return self.phase_durations.get_jacobian_of_pos(current_phase, dx_dT, xd)

    def get_derivative_of_pos_wrt_phase_duration(self, t_global):
        """Derivative of the position at t wrt the duration of its own phase."""
        poly_id, t_local = self.get_local_time(t_global, self.get_poly_durations())
        vel = self.get_point(t_global).v()
        dxdT = self.cubic_polys[poly_id].get_derivative_of_pos_wrt_duration(t_local)

        inner = self.phase_nodes.get_derivative_of_poly_duration_wrt_phase_duration(poly_id)
        prev_polys = self.phase_nodes.get_number_of_prev_polynomials_in_phase(poly_id)

        # earlier polynomials of the same phase shift the current one in time
        return inner * (dxdT - prev_polys * vel)