"""Gaits of a one-legged robot."""

from __future__ import annotations

from leggedtraj.gait_generator import Combos, GaitGenerator, Gaits


class MonopedGaitGenerator(GaitGenerator):
    """Standing and hopping on a single leg."""

    _COMBOS = {
        Combos.C0: (Gaits.STAND, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.STAND),
        Combos.C1: (Gaits.STAND, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.STAND),
        Combos.C2: (Gaits.STAND, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.STAND),
        Combos.C3: (Gaits.STAND, Gaits.HOP2, Gaits.HOP2, Gaits.HOP2, Gaits.STAND),
        Combos.C4: (
            Gaits.STAND, Gaits.HOP2, Gaits.HOP2, Gaits.HOP2, Gaits.HOP2, Gaits.HOP2, Gaits.STAND,
        ),
    }

    def __init__(self):
        super().__init__()
        self._o = (True,)   # in contact
        self._x = (False,)  # in the air
        self.set_gaits([Gaits.STAND])

    def set_combo(self, combo):
        try:
            gaits = self._COMBOS[combo]
        except KeyError:
            raise ValueError(f"gait combination {combo!r} not defined") from None
        self.set_gaits(gaits)

    def get_gait(self, gait):
        strides = {
            Gaits.STAND: self._stride_stand,
            Gaits.FLIGHT: self._stride_flight,
            Gaits.HOP1: self._stride_hop,
            Gaits.HOP2: self._stride_hop_long,
        }
        try:
            stride = strides[gait]
        except KeyError:
            raise ValueError(f"gait {gait!r} not available for a monoped") from None
        return stride()

    def _stride_stand(self):
        return [0.5], [self._o]

    def _stride_flight(self):
        return [0.5], [self._x]

    def _stride_hop(self):
        return [0.3, 0.3], [self._o, self._x]

    def _stride_hop_long(self):
        return [0.2, 0.3], [self._o, self._x]