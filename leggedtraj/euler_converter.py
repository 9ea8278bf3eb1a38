"""Angular quantities of a base whose orientation is a spline of ZYX Euler angles.

The Euler angles are ordered (x, y, z), i.e. roll, pitch and yaw, and the
rotation from base to world is R = Rz(z) * Ry(y) * Rx(x). Jacobians are dense
arrays with one column per optimization variable of the Euler-angle nodes.
"""

from __future__ import annotations

import math

import numpy as np

from leggedtraj.state import Dx

_X, _Y, _Z = 0, 1, 2
_DIM_3D = 3


def _quaternion_from_matrix(m):
    """Unit quaternion (w, x, y, z) of a rotation matrix."""
    q = np.zeros(4)
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        t = math.sqrt(trace + 1.0)
        q[0] = 0.5 * t
        t = 0.5 / t
        q[1] = (m[2, 1] - m[1, 2]) * t
        q[2] = (m[0, 2] - m[2, 0]) * t
        q[3] = (m[1, 0] - m[0, 1]) * t
        return q

    i = 0
    if m[1, 1] > m[0, 0]:
        i = 1
    if m[2, 2] > m[i, i]:
        i = 2
    j = (i + 1) % 3
    k = (j + 1) % 3
    t = math.sqrt(m[i, i] - m[j, j] - m[k, k] + 1.0)
    q[1 + i] = 0.5 * t
    t = 0.5 / t
    q[0] = (m[k, j] - m[j, k]) * t
    q[1 + j] = (m[j, i] + m[i, j]) * t
    q[1 + k] = (m[k, i] + m[i, k]) * t
    return q


def _deriv_m_rows(pos, jac_pos, dim):
    """Derivative of row dim of M wrt the nodes; row c is d M[dim, c] / du."""
    z, y = pos[_Z], pos[_Y]
    jac_z, jac_y = jac_pos[_Z], jac_pos[_Y]
    jac = np.zeros((_DIM_3D, jac_pos.shape[1]))
    if dim == _X:
        jac[_Y] = -math.cos(z) * jac_z
        jac[_X] = -math.cos(z) * math.sin(y) * jac_y - math.cos(y) * math.sin(z) * jac_z
    elif dim == _Y:
        jac[_Y] = -math.sin(z) * jac_z
        jac[_X] = math.cos(y) * math.cos(z) * jac_z - math.sin(y) * math.sin(z) * jac_y
    elif dim == _Z:
        jac[_X] = -math.cos(y) * jac_y
    else:
        raise ValueError(f"dimension {dim} does not exist")
    return jac


def _deriv_mdot_rows(pos, vel, jac_pos, jac_vel, dim):
    """Derivative of row dim of M-dot wrt the nodes."""
    z, zd = pos[_Z], vel[_Z]
    y, yd = pos[_Y], vel[_Y]
    jac_z, jac_y = jac_pos[_Z], jac_pos[_Y]
    jac_zd, jac_yd = jac_vel[_Z], jac_vel[_Y]
    sy, cy, sz, cz = math.sin(y), math.cos(y), math.sin(z), math.cos(z)

    jac = np.zeros((_DIM_3D, jac_pos.shape[1]))
    if dim == _X:
        jac[_Y] = sz * zd * jac_z - cz * jac_zd
        jac[_X] = (
            sy * sz * yd * jac_z
            - cy * sz * jac_zd
            - cy * cz * yd * jac_y
            - cy * cz * zd * jac_z
            - cz * sy * jac_yd
            + sy * sz * jac_y * zd
        )
    elif dim == _Y:
        jac[_Y] = -sz * jac_zd - cz * zd * jac_z
        jac[_X] = (
            cy * cz * jac_zd
            - sy * sz * jac_yd
            - cy * sz * yd * jac_y
            - cz * sy * yd * jac_z
            - cz * sy * jac_y * zd
            - cy * sz * zd * jac_z
        )
    elif dim == _Z:
        jac[_X] = sy * yd * jac_y - cy * jac_yd
    else:
        raise ValueError(f"dimension {dim} does not exist")
    return jac


class EulerConverter:
    """Rotation, angular velocity and acceleration from an Euler-angle spline."""

    def __init__(self, euler):
        self._euler = euler
        self._jac_structure = np.zeros((_DIM_3D, euler.get_node_variables_count()))

    # -- values at a time --------------------------------------------------

    def get_quaternion_base_to_world(self, t):
        """Orientation at time t as a quaternion (w, x, y, z)."""
        return self.quaternion_from_euler(self._euler.get_point(t).p())

    @staticmethod
    def quaternion_from_euler(pos):
        """Quaternion (w, x, y, z) of the given Euler angles."""
        return _quaternion_from_matrix(EulerConverter.rotation_matrix_from_euler(pos))

    def get_angular_velocity_in_world(self, t):
        ori = self._euler.get_point(t)
        return self.angular_velocity_from_euler(ori.p(), ori.v())

    @staticmethod
    def angular_velocity_from_euler(pos, vel):
        """Angular velocity in world frame from Euler angles and their rates."""
        return EulerConverter.get_m(pos) @ np.asarray(vel, dtype=float)

    def get_angular_acceleration_in_world(self, t):
        return self.angular_acceleration_from_state(self._euler.get_point(t))

    @staticmethod
    def angular_acceleration_from_state(ori):
        """Angular acceleration in world frame from Euler angles, rates and accelerations."""
        p, v, a = ori.p(), ori.v(), ori.a()
        return EulerConverter.get_mdot(p, v) @ v + EulerConverter.get_m(p) @ a

    def get_rotation_matrix_base_to_world(self, t):
        return self.rotation_matrix_from_euler(self._euler.get_point(t).p())

    @staticmethod
    def rotation_matrix_from_euler(xyz):
        """Rotation matrix from base to world frame for ZYX Euler angles."""
        x, y, z = (float(v) for v in xyz[:3])
        sx, cx = math.sin(x), math.cos(x)
        sy, cy = math.sin(y), math.cos(y)
        sz, cz = math.sin(z), math.cos(z)
        return np.array(
            [
                [cy * cz, cz * sx * sy - cx * sz, sx * sz + cx * cz * sy],
                [cy * sz, cx * cz + sx * sy * sz, cx * sy * sz - cz * sx],
                [-sy, cy * sx, cx * cy],
            ]
        )

    @staticmethod
    def get_m(xyz):
        """Matrix mapping Euler ZYX rates to angular velocity in world frame."""
        z, y = xyz[_Z], xyz[_Y]
        m = np.zeros((_DIM_3D, _DIM_3D))
        m[0, _Y] = -math.sin(z)
        m[0, _X] = math.cos(y) * math.cos(z)
        m[1, _Y] = math.cos(z)
        m[1, _X] = math.cos(y) * math.sin(z)
        m[2, _Z] = 1.0
        m[2, _X] = -math.sin(y)
        return m

    @staticmethod
    def get_mdot(xyz, xyz_d):
        """Time derivative of get_m."""
        z, zd = xyz[_Z], xyz_d[_Z]
        y, yd = xyz[_Y], xyz_d[_Y]
        mdot = np.zeros((_DIM_3D, _DIM_3D))
        mdot[0, _Y] = -math.cos(z) * zd
        mdot[0, _X] = -math.cos(z) * math.sin(y) * yd - math.cos(y) * math.sin(z) * zd
        mdot[1, _Y] = -math.sin(z) * zd
        mdot[1, _X] = math.cos(y) * math.cos(z) * zd - math.sin(y) * math.sin(z) * yd
        mdot[2, _X] = -math.cos(y) * yd
        return mdot

    # -- Jacobians wrt the Euler-angle nodes -------------------------------

    def get_deriv_of_ang_vel_wrt_euler_nodes(self, t):
        """Jacobian of the world angular velocity at t wrt the node variables."""
        ori = self._euler.get_point(t)
        jac_pos = self._euler.get_jacobian_wrt_nodes(t, Dx.POS)
        jac_vel = self._euler.get_jacobian_wrt_nodes(t, Dx.VEL)
        m = self.get_m(ori.p())

        jac = self._jac_structure.copy()
        for dim in (_X, _Y, _Z):
            dm_du = _deriv_m_rows(ori.p(), jac_pos, dim)
            jac[dim] = ori.v() @ dm_du + m[dim] @ jac_vel
        return jac

    def get_deriv_of_ang_acc_wrt_euler_nodes(self, t):
        """Jacobian of the world angular acceleration at t wrt the node variables."""
        ori = self._euler.get_point(t)
        jac_pos = self._euler.get_jacobian_wrt_nodes(t, Dx.POS)
        jac_vel = self._euler.get_jacobian_wrt_nodes(t, Dx.VEL)
        jac_acc = self._euler.get_jacobian_wrt_nodes(t, Dx.ACC)
        m = self.get_m(ori.p())
        mdot = self.get_mdot(ori.p(), ori.v())

        jac = self._jac_structure.copy()
        for dim in (_X, _Y, _Z):
            dmdot_du = _deriv_mdot_rows(ori.p(), ori.v(), jac_pos, jac_vel, dim)
            dm_du = _deriv_m_rows(ori.p(), jac_pos, dim)
            jac[dim] = (
                ori.v() @ dmdot_du
                + mdot[dim] @ jac_vel
                + ori.a() @ dm_du
                + m[dim] @ jac_acc
            )
        return jac

    def deriv_of_rot_vec_mult(self, t, v, inverse):
        """Jacobian of R(t) @ v, or R(t).T @ v if inverse, wrt the nodes, v held fixed."""
        rd = self.get_derivative_of_rotation_matrix_wrt_nodes(t)
        v = np.asarray(v, dtype=float)
        if inverse:
            # R^-1 = R^T, so swap rows and columns of the derivative
            return self._jac_structure + np.einsum("crn,c->rn", rd, v)
        return self._jac_structure + np.einsum("rcn,c->rn", rd, v)

    def get_derivative_of_rotation_matrix_wrt_nodes(self, t):
        """Array d[r, c, :] holding the derivative of R[r, c] wrt every node variable."""
        ori = self._euler.get_point(t)
        x, y, z = ori.p()[_X], ori.p()[_Y], ori.p()[_Z]
        jac_pos = self._euler.get_jacobian_wrt_nodes(t, Dx.POS)
        jx, jy, jz = jac_pos[_X], jac_pos[_Y], jac_pos[_Z]
        sx, cx = math.sin(x), math.cos(x)
        sy, cy = math.sin(y), math.cos(y)
        sz, cz = math.sin(z), math.cos(z)

        rd = np.zeros((_DIM_3D, _DIM_3D, jac_pos.shape[1]))
        rd[_X, _X] = -cz * sy * jy - cy * sz * jz
        rd[_X, _Y] = (
            sx * sz * jx - cx * cz * jz - sx * sy * sz * jz
            + cx * cz * sy * jx + cy * cz * sx * jy
        )
        rd[_X, _Z] = (
            cx * sz * jx + cz * sx * jz - cz * sx * sy * jx
            - cx * sy * sz * jz + cx * cy * cz * jy
        )
        rd[_Y, _X] = cy * cz * jz - sy * sz * jy
        rd[_Y, _Y] = (
            cx * sy * sz * jx - cx * sz * jz - cz * sx * jx
            + cy * sx * sz * jy + cz * sx * sy * jz
        )
        rd[_Y, _Z] = (
            sx * sz * jz - cx * cz * jx - sx * sy * sz * jx
            + cx * cy * sz * jy + cx * cz * sy * jz
        )
        rd[_Z, _X] = -cy * jy
        rd[_Z, _Y] = cx * cy * jx - sx * sy * jy
        rd[_Z, _Z] = -cy * sx * jx - cx * sy * jy
        return rd