"""The splines of base and end-effectors built from their node variables."""

from __future__ import annotations

from leggedtraj.node_spline import NodeSpline
from leggedtraj.phase_spline import PhaseSpline


class SplineHolder:
    """Base motion, foot motion and foot force splines of one trajectory."""

    def __init__(
        self,
        base_lin_nodes,
        base_ang_nodes,
        base_poly_durations,
        ee_motion_nodes,
        ee_force_nodes,
        phase_durations,
        durations_change,
    ):
        self.base_linear = NodeSpline(base_lin_nodes, base_poly_durations)
        self.base_angular = NodeSpline(base_ang_nodes, base_poly_durations)
        self.phase_durations = list(phase_durations)
        self.ee_motion = []
        self.ee_force = []

        for motion, force, durations in zip(ee_motion_nodes, ee_force_nodes, phase_durations):
            if durations_change:
                # polynomial durations follow the optimized phase durations
                self.ee_motion.append(PhaseSpline(motion, durations))
                self.ee_force.append(PhaseSpline(force, durations))
            else:
                phases = durations.get_phase_durations()
                self.ee_motion.append(
                    NodeSpline(motion, motion.convert_phase_to_poly_durations(phases))
                )
                self.ee_force.append(
                    NodeSpline(force, force.convert_phase_to_poly_durations(phases))
                )