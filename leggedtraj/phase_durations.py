"""Durations of the alternating contact and swing phases of one end-effector."""

from __future__ import annotations

import numpy as np

from leggedtraj.nodes_variables import Bounds
from leggedtraj.spline import Spline


def schedule_variable_name(ee):
    """Name of the phase-duration variable set of end-effector ee."""
    return f"ee-schedule_{ee}"


class PhaseDurations:
    """Phase durations of one foot as optimization variables.

    The last duration is not a variable: it fills the remaining time so that
    the phases always add up to the total time. Observers are told through
    ``update_polynomial_durations`` whenever the durations change.
    """

    def __init__(self, ee, timings, is_first_phase_in_contact, min_duration, max_duration):
        self.ee = ee
        self.name = schedule_variable_name(ee)
        self._durations = [float(d) for d in timings]
        self.rows = len(self._durations) - 1
        self._t_total = sum(self._durations)
        self._phase_duration_bounds = Bounds(float(min_duration), float(max_duration))
        self._initial_contact_state = bool(is_first_phase_in_contact)
        self._observers = []

    def add_observer(self, observer):
        self._observers.append(observer)

    def update_observers(self):
        for observer in self._observers:
            observer.update_polynomial_durations()

    def get_values(self):
        """The optimized durations: all but the last."""
        return np.array(self._durations[: self.rows])

    def set_variables(self, x):
        """Set all durations but the last, which then fills up to the total time."""
        x = np.asarray(x, dtype=float)
        total = float(x.sum())
        if not self._t_total > total:
            raise ValueError(
                f"phase durations sum to {total}, not less than the total time {self._t_total}"
            )
        self._durations[: self.rows] = [float(v) for v in x[: self.rows]]
        self._durations[-1] = self._t_total - total
        self.update_observers()

    def get_bounds(self):
        return [self._phase_duration_bounds] * self.rows

    def get_phase_durations(self):
        return list(self._durations)

    def is_contact_phase(self, t):
        """Whether the foot is in contact at global time t."""
        phase_id = Spline.get_segment_id(t, self._durations)
        if phase_id % 2 == 0:
            return self._initial_contact_state
        return not self._initial_contact_state

    def get_jacobian_of_pos(self, current_phase, dx_dT, xd):
        """Sensitivity of a position to the optimized durations.

        dx_dT is the derivative of the position with respect to the duration of
        the current phase, xd the velocity at that time.
        """
        dx_dT = np.asarray(dx_dT, dtype=float)
        xd = np.asarray(xd, dtype=float)
        jac = np.zeros((xd.size, self.rows))
        in_last_phase = current_phase == len(self._durations) - 1

        # the current phase stretches or compresses the spline
        if not in_last_phase:
            jac[:, current_phase] = dx_dT

        for phase in range(current_phase):
            # every earlier phase shifts the spline along the time axis
            jac[:, phase] = -xd
            # in the last phase the final time is fixed, so earlier phases
            # also stretch or compress it
            if in_last_phase:
                jac[:, phase] -= dx_dT

        return jac