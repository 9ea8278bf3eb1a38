"""Gaits of a four-legged robot."""

from __future__ import annotations

from leggedtraj.gait_generator import Combos, GaitGenerator, Gaits

_LF, _RF, _LH, _RH = 0, 1, 2, 3
_N_EE = 4


def _stance(*legs):
    """Contact state with exactly the given legs on the ground."""
    return tuple(leg in legs for leg in range(_N_EE))


class QuadrupedGaitGenerator(GaitGenerator):
    """Walks, trots, paces, bounds, pronks and gallops on four legs."""

    _COMBOS = {
        Combos.C0: (Gaits.STAND, Gaits.WALK2, Gaits.WALK2, Gaits.WALK2, Gaits.WALK2E, Gaits.STAND),
        Combos.C1: (Gaits.STAND, Gaits.RUN2, Gaits.RUN2, Gaits.RUN2, Gaits.RUN2E, Gaits.STAND),
        Combos.C2: (Gaits.STAND, Gaits.RUN3, Gaits.RUN3, Gaits.RUN3, Gaits.RUN3E, Gaits.STAND),
        Combos.C3: (Gaits.STAND, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1, Gaits.HOP1E, Gaits.STAND),
        Combos.C4: (Gaits.STAND, Gaits.HOP3, Gaits.HOP3, Gaits.HOP3, Gaits.HOP3E, Gaits.STAND),
    }

    def __init__(self):
        super().__init__()
        # flight phase
        self._II = _stance()
        # one leg in contact
        self._PI = _stance(_LH)
        self._bI = _stance(_RH)
        self._IP = _stance(_LF)
        self._Ib = _stance(_RF)
        # two legs in contact
        self._Pb = _stance(_LH, _RF)
        self._bP = _stance(_RH, _LF)
        self._BI = _stance(_LH, _RH)
        self._IB = _stance(_LF, _RF)
        self._PP = _stance(_LH, _LF)
        self._bb = _stance(_RH, _RF)
        # three legs in contact
        self._Bb = _stance(_LH, _RH, _RF)
        self._BP = _stance(_LH, _RH, _LF)
        self._bB = _stance(_RH, _LF, _RF)
        self._PB = _stance(_LH, _LF, _RF)
        # four legs in contact
        self._BB = _stance(_LF, _RF, _LH, _RH)

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
            Gaits.WALK1: self._stride_walk,
            Gaits.WALK2: self._stride_walk_overlap,
            Gaits.WALK2E: lambda: self.remove_transition(self._stride_walk_overlap()),
            Gaits.RUN1: self._stride_trot,
            Gaits.RUN2: self._stride_trot_fly,
            Gaits.RUN2E: self._stride_trot_fly_end,
            Gaits.RUN3: self._stride_pace,
            Gaits.RUN3E: self._stride_pace_end,
            Gaits.HOP1: self._stride_bound,
            Gaits.HOP1E: self._stride_bound_end,
            Gaits.HOP2: self._stride_pronk,
            Gaits.HOP3: self._stride_gallop,
            Gaits.HOP3E: lambda: self.remove_transition(self._stride_gallop()),
            Gaits.HOP5: self._stride_limp,
        }
        try:
            stride = strides[gait]
        except KeyError:
            raise ValueError(f"gait {gait!r} not available for a quadruped") from None
        return stride()

    def _stride_stand(self):
        return [0.3], [self._BB]

    def _stride_flight(self):
        return [0.3], [self._Bb]

    def _stride_pronk(self):
        push, flight, land = 0.3, 0.4, 0.3
        return [push, flight, land], [self._BB, self._II, self._BB]

    def _stride_walk(self):
        step, stand = 0.3, 0.2
        times = [step, stand, step, stand, step, stand, step, stand]
        contacts = [
            self._bB, self._BB, self._Bb, self._BB,
            self._PB, self._BB, self._BP, self._BB,
        ]
        return times, contacts

    def _stride_walk_overlap(self):
        three, lateral, diagonal = 0.25, 0.13, 0.13
        times = [three, lateral, three, diagonal, three, lateral, three, diagonal]
        contacts = [
            self._bB, self._bb, self._Bb,
            self._Pb,  # start lifting RH
            self._PB, self._PP, self._BP,
            self._bP,  # start lifting LH
        ]
        return times, contacts

    def _stride_trot(self):
        t_step, t_stand = 0.3, 0.2
        times = [t_step, t_stand, t_step, t_stand]
        contacts = [self._bP, self._BB, self._Pb, self._BB]
        return times, contacts

    def _stride_trot_fly(self):
        stand, flight = 0.4, 0.1
        times = [stand, flight, stand, flight]
        contacts = [self._bP, self._II, self._Pb, self._II]
        return times, contacts

    def _stride_trot_fly_end(self):
        return [0.4], [self._bP]

    def _stride_pace(self):
        stand, flight = 0.3, 0.1
        times = [stand, flight, stand, flight]
        contacts = [self._PP, self._II, self._bb, self._II]
        return times, contacts

    def _stride_pace_end(self):
        return [0.3], [self._PP]

    def _stride_bound(self):
        stand, flight = 0.3, 0.1
        times = [stand, flight, stand, flight]
        contacts = [self._BI, self._II, self._IB, self._II]
        return times, contacts

    def _stride_bound_end(self):
        return [0.3], [self._BI]

    def _stride_gallop(self):
        a = 0.3  # both feet in the air
        b = 0.2  # overlap
        c = 0.2  # transition front to hind
        times = [b, a, b, c, b, a, b, c]
        contacts = [
            self._Bb, self._BI, self._BP,  # front legs swing forward
            self._bP,                      # transition
            self._bB, self._IB, self._PB,  # hind legs swing forward
            self._Pb,
        ]
        return times, contacts

    def _stride_limp(self):
        a = 0.1  # three in contact
        b = 0.2  # all in contact
        c = 0.1  # one in contact
        times = [a, b, c, a, b, c]
        contacts = [self._Bb, self._BB, self._IP, self._Bb, self._BB, self._IP]
        return times, contacts