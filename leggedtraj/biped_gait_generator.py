"""Gaits of a two-legged robot."""

from __future__ import annotations

from leggedtraj.gait_generator import Combos, GaitGenerator, Gaits

_L, _R = 0, 1


class BipedGaitGenerator(GaitGenerator):
    """Walking, running and hopping on two legs."""

    _COMBOS = {
        Combos.C0: (Gaits.STAND, Gaits.WALK1, Gaits.WALK1, Gaits.WALK1, Gaits.WALK1, Gaits.STAND),
        Combos.C1: (Gaits.STAND, Gaits.RUN1, Gaits.RUN1, Gaits.RUN1, Gaits.RUN1, Gaits.STAND),
        Combos.C2: (Gaits.STAND, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.STAND),
        Combos.C3: (Gaits.STAND, Gaits.HOP1, Gaits.HOP2, Gaits.HOP2, Gaits.STAND),
        Combos.C4: (Gaits.STAND, Gaits.HOP5, Gaits.HOP5, Gaits.HOP5, Gaits.STAND),
    }

    def __init__(self):
        super().__init__()
        self._I = (False, False)        # both feet in the air
        self._P = self._with(_L)        # only left foot in contact
        self._b = self._with(_R)        # only right foot in contact
        self._B = (True, True)          # both feet in contact
        self.set_gaits([Gaits.STAND])

    @staticmethod
    def _with(*legs):
        return tuple(leg in legs for leg in (_L, _R))

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
            Gaits.WALK1: self._stride_walk,
            Gaits.WALK2: self._stride_walk,
            Gaits.RUN1: self._stride_run,
            Gaits.RUN3: self._stride_run,
            Gaits.HOP1: self._stride_hop,
            Gaits.HOP2: self._stride_left_hop,
            Gaits.HOP3: self._stride_right_hop,
            Gaits.HOP5: self._stride_gallop_hop,
        }
        try:
            stride = strides[gait]
        except KeyError:
            raise ValueError(f"gait {gait!r} not available for a biped") from None
        return stride()

    def _stride_stand(self):
        return [0.2], [self._B]

    def _stride_flight(self):
        return [0.5], [self._I]

    def _stride_walk(self):
        step, stance = 0.3, 0.05
        times = [step, stance, step, stance]
        contacts = [
            self._b, self._B,  # swing left foot
            self._P, self._B,  # swing right foot
        ]
        return times, contacts

    def _stride_run(self):
        flight, pushoff, landing = 0.4, 0.15, 0.15
        times = [pushoff, flight, landing + pushoff, flight, landing]
        contacts = [
            self._b, self._I,           # swing left foot
            self._P, self._I, self._b,  # swing right foot
        ]
        return times, contacts

    def _stride_hop(self):
        push, flight, land = 0.15, 0.5, 0.15
        return [push, flight, land], [self._B, self._I, self._B]

    def _stride_gallop_hop(self):
        push, flight, land = 0.2, 0.3, 0.2
        times = [push, flight, land, land]
        contacts = [self._P, self._I, self._b, self._B]
        return times, contacts

    def _stride_left_hop(self):
        push, flight, land = 0.15, 0.4, 0.15
        return [push, flight, land], [self._b, self._I, self._b]

    def _stride_right_hop(self):
        push, flight, land = 0.2, 0.2, 0.2
        return [push, flight, land], [self._P, self._I, self._P]