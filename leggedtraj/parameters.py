"""Settings of the trajectory optimization problem."""

from __future__ import annotations

from enum import Enum

_X, _Y, _Z = 0, 1, 2
_EPS = 1e-10
_TOTAL_TIME_TOLERANCE = 1e-6


class ConstraintName(Enum):
    DYNAMIC = "dynamic"
    ENDEFFECTOR_ROM = "endeffector_rom"
    TOTAL_TIME = "total_time"
    TERRAIN = "terrain"
    FORCE = "force"
    SWING = "swing"
    BASE_ROM = "base_rom"
    BASE_ACC = "base_acc"


class CostName(Enum):
    FORCES_COST = "forces_cost"
    EE_MOTION_COST = "ee_motion_cost"


class Parameters:
    """Which variables, constraints and costs make up the problem, and how."""

    def __init__(self):
        # optimization variables
        self.duration_base_polynomial = 0.1
        self.force_polynomials_per_stance_phase = 3
        self.ee_polynomials_per_swing_phase = 2  # so a step can lift the leg

        # constraint settings, used only when the constraint is added
        self.force_limit_in_normal_direction = 1000.0
        self.dt_constraint_range_of_motion = 0.08
        self.dt_constraint_dynamic = 0.1
        self.dt_constraint_base_motion = self.duration_base_polynomial / 4.0
        self.bound_phase_duration = (0.2, 1.0)

        self.constraints = [
            ConstraintName.TERRAIN,
            ConstraintName.DYNAMIC,
            ConstraintName.BASE_ACC,
            ConstraintName.ENDEFFECTOR_ROM,
            ConstraintName.FORCE,
            ConstraintName.SWING,
        ]
        # (CostName, weight) pairs
        self.costs = []

        # dimensions of the final base state that are bounded
        self.bounds_final_lin_pos = [_X, _Y]
        self.bounds_final_lin_vel = [_X, _Y, _Z]
        self.bounds_final_ang_pos = [_X, _Y, _Z]
        self.bounds_final_ang_vel = [_X, _Y, _Z]

        # per end-effector gait description
        self.ee_phase_durations = []
        self.ee_in_contact_at_start = []

    def optimize_phase_durations(self):
        """Optimize over the phase durations too, keeping the total time fixed."""
        self.constraints.append(ConstraintName.TOTAL_TIME)

    def get_base_poly_durations(self):
        """Durations of the base polynomials; the last one may be shorter."""
        dt = self.duration_base_polynomial
        t_left = self.get_total_time()
        durations = []
        while t_left > _EPS:
            durations.append(dt if t_left > dt else t_left)
            t_left -= dt
        return durations

    def get_phase_count(self, ee):
        return len(self.ee_phase_durations[ee])

    def get_ee_count(self):
        return len(self.ee_in_contact_at_start)

    def get_total_time(self):
        """Duration of the motion; every foot's phases must add up to it."""
        totals = [sum(d) for d in self.ee_phase_durations]
        if not totals:
            return 0.0
        reference = totals[0]
        for total in totals:
            if abs(total - reference) >= _TOTAL_TIME_TOLERANCE:
                raise ValueError(
                    f"phase durations of the feet add up to different times: {totals}"
                )
        return reference

    def is_optimize_timings(self):
        return ConstraintName.TOTAL_TIME in self.constraints