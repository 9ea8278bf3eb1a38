"""Contact schedules of legged gaits: which feet touch the ground, and for how long."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto


class Gaits(Enum):
    """Strides that can be chained into a gait."""

    STAND = auto()
    FLIGHT = auto()
    WALK1 = auto()
    WALK2 = auto()
    WALK2E = auto()
    RUN1 = auto()
    RUN2 = auto()
    RUN2E = auto()
    RUN3 = auto()
    RUN3E = auto()
    HOP1 = auto()
    HOP1E = auto()
    HOP2 = auto()
    HOP3 = auto()
    HOP3E = auto()
    HOP5 = auto()


class Combos(Enum):
    """Predefined sequences of strides."""

    C0 = auto()
    C1 = auto()
    C2 = auto()
    C3 = auto()
    C4 = auto()


def make_gait_generator(leg_count):
    """A gait generator for a robot with the given number of legs (1, 2 or 4)."""
    if leg_count == 1:
        from leggedtraj.monoped_gait_generator import MonopedGaitGenerator

        return MonopedGaitGenerator()
    if leg_count == 2:
        from leggedtraj.biped_gait_generator import BipedGaitGenerator

        return BipedGaitGenerator()
    if leg_count == 4:
        from leggedtraj.quadruped_gait_generator import QuadrupedGaitGenerator

        return QuadrupedGaitGenerator()
    raise ValueError(f"no gait generator for {leg_count} legs")


class GaitGenerator(ABC):
    """A sequence of phases, each with a duration and a contact state per foot.

    A stride ("gait info") is a pair of lists: phase durations and contact
    states, where a contact state is a tuple of booleans, one per foot.
    """

    def __init__(self):
        self._times = []
        self._contacts = []

    @abstractmethod
    def get_gait(self, gait):
        """The (times, contacts) of one stride; ValueError if not available."""

    @abstractmethod
    def set_combo(self, combo):
        """Set the phases from a predefined sequence of strides."""

    def get_phase_durations(self, t_total, ee):
        """Durations of the contact and swing phases of foot ee, scaled to t_total."""
        return [d * t_total for d in self.get_normalized_phase_durations(ee)]

    def get_normalized_phase_durations(self, ee):
        """Durations of the phases of foot ee, as fractions of the whole."""
        durations = self.get_foot_durations()[ee]
        total = sum(durations)
        return [d / total for d in durations]

    def get_foot_durations(self):
        """For every foot, the durations of its alternating contact and swing phases."""
        if not self._contacts:
            raise ValueError("no gait has been set")
        n_ee = len(self._contacts[0])
        pending = [0.0] * n_ee
        foot_durations = [[] for _ in range(n_ee)]

        for time, curr, nxt in zip(self._times, self._contacts, self._contacts[1:]):
            for ee, (now, then) in enumerate(zip(curr, nxt)):
                pending[ee] += time
                # the contact changes in the next phase, so this one is complete
                if now != then:
                    foot_durations[ee].append(pending[ee])
                    pending[ee] = 0.0

        for durations, accumulated in zip(foot_durations, pending):
            durations.append(accumulated + self._times[-1])
        return foot_durations

    def is_in_contact_at_start(self, ee):
        if not self._contacts:
            raise ValueError("no gait has been set")
        return self._contacts[0][ee]

    def set_gaits(self, gaits):
        """Set the phases by chaining the given strides."""
        times = []
        contacts = []
        for gait in gaits:
            stride_times, stride_contacts = self.get_gait(gait)
            if len(stride_times) != len(stride_contacts):
                raise ValueError(f"stride {gait!r} has not one time per phase")
            times.extend(float(t) for t in stride_times)
            contacts.extend(tuple(c) for c in stride_contacts)
        self._times = times
        self._contacts = contacts

    def remove_transition(self, gait):
        """Drop the final transition phase, adding its time to the phase before."""
        times, contacts = gait
        if len(times) < 2 or len(contacts) < 2:
            raise ValueError("a stride needs at least two phases to drop one")
        new_times = list(times[:-1])
        new_times[-1] += times[-1]
        return new_times, list(contacts[:-1])