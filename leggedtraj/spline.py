"""A chain of cubic Hermite polynomials over consecutive time intervals."""

from __future__ import annotations

from leggedtraj.polynomial import CubicHermitePolynomial

_EPS = 1e-10


class Spline:
    """Piecewise cubic trajectory; segment i lasts poly_durations[i]."""

    def __init__(self, poly_durations, n_dim):
        self.cubic_polys = []
        for duration in poly_durations:
            poly = CubicHermitePolynomial(n_dim)
            poly.set_duration(duration)
            self.cubic_polys.append(poly)
        self.update_polynomial_coeff()

    @staticmethod
    def get_segment_id(t_global, durations):
        """Index of the segment containing t; at junctions the earlier one."""
        if t_global < 0.0:
            raise ValueError("time must not be negative")
        t = 0.0
        for i, d in enumerate(durations):
            t += d
            if t >= t_global - _EPS:
                return i
        raise ValueError(f"time {t_global} lies beyond the last segment")

    def get_local_time(self, t_global, durations):
        """Segment id and the time since that segment began."""
        seg = self.get_segment_id(t_global, durations)
        return seg, t_global - sum(durations[:seg])

    def get_point(self, t_global):
        seg, t_local = self.get_local_time(t_global, self.get_poly_durations())
        return self.get_point_local(seg, t_local)

    def get_point_local(self, poly_id, t_local):
        return self.cubic_polys[poly_id].get_point(t_local)

    def update_polynomial_coeff(self):
        for poly in self.cubic_polys:
            poly.update_coeff()

    def get_polynomial_count(self):
        return len(self.cubic_polys)

    def get_poly_durations(self):
        return [poly.get_duration() for poly in self.cubic_polys]

    def get_total_time(self):
        return sum(self.get_poly_durations())