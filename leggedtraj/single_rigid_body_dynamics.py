"""Newton-Euler dynamics of a single rigid body pushed by end-effector forces."""

from __future__ import annotations

import numpy as np

from leggedtraj.dynamic_model import DynamicModel

_AX = 0  # angular rows 0..2
_LX = 3  # linear rows 3..5
_DIM_3D = 3
_DIM_6D = 6


def build_inertia_tensor(Ixx, Iyy, Izz, Ixy, Ixz, Iyz):
    """Inertia matrix from its moments and products of inertia."""
    return np.array(
        [
            [Ixx, -Ixy, -Ixz],
            [-Ixy, Iyy, -Iyz],
            [-Ixz, -Iyz, Izz],
        ],
        dtype=float,
    )


def cross_matrix(vec):
    """Matrix X with X @ v equal to vec x v."""
    x, y, z = (float(c) for c in vec)
    return np.array(
        [
            [0.0, -z, y],
            [z, 0.0, -x],
            [-y, x, 0.0],
        ]
    )


class SingleRigidBodyDynamics(DynamicModel):
    """The robot as one rigid body with a constant inertia in base frame."""

    def __init__(self, mass, inertia_b, ee_count):
        super().__init__(mass, ee_count)
        self.I_b = np.array(inertia_b, dtype=float)

    @classmethod
    def from_inertia_terms(cls, mass, Ixx, Iyy, Izz, Ixy, Ixz, Iyz, ee_count):
        """Build the model from the six inertia terms."""
        return cls(mass, build_inertia_tensor(Ixx, Iyy, Izz, Ixy, Ixz, Iyz), ee_count)

    def _inertia_in_world(self):
        return self.w_R_b @ self.I_b @ self.w_R_b.T

    def get_dynamic_violation(self):
        """Angular then linear residual of the Newton-Euler equations."""
        f_sum = np.zeros(3)
        tau_sum = np.zeros(3)
        for force, pos in zip(self.ee_force, self.ee_pos):
            tau_sum += np.cross(force, self.com_pos - pos)
            f_sum += force

        I_w = self._inertia_in_world()
        acc = np.zeros(_DIM_6D)
        acc[_AX:_AX + _DIM_3D] = (
            I_w @ self.omega_dot + np.cross(self.omega, I_w @ self.omega) - tau_sum
        )
        acc[_LX:_LX + _DIM_3D] = (
            self.m * self.com_acc - f_sum - np.array([0.0, 0.0, -self.m * self.g])
        )
        return acc

    def get_jacobian_wrt_base_lin(self, jac_pos_base_lin, jac_acc_base_lin):
        jac_pos_base_lin = np.asarray(jac_pos_base_lin, dtype=float)
        jac_acc_base_lin = np.asarray(jac_acc_base_lin, dtype=float)
        n = jac_pos_base_lin.shape[1]

        jac_tau_sum = np.zeros((_DIM_3D, n))
        for force in self.ee_force:
            jac_tau_sum += cross_matrix(force) @ jac_pos_base_lin

        jac = np.zeros((_DIM_6D, n))
        jac[_AX:_AX + _DIM_3D] = -jac_tau_sum
        jac[_LX:_LX + _DIM_3D] = self.m * jac_acc_base_lin
        return jac

    def get_jacobian_wrt_base_ang(self, base_euler, t):
        R = self.w_R_b
        I_w = self._inertia_in_world()

        # derivative of R * I_b * R^T * omega_dot by the product rule
        v11 = self.I_b @ R.T @ self.omega_dot
        jac11 = base_euler.deriv_of_rot_vec_mult(t, v11, False)
        jac12 = R @ self.I_b @ base_euler.deriv_of_rot_vec_mult(t, self.omega_dot, True)
        jac13 = I_w @ base_euler.get_deriv_of_ang_acc_wrt_euler_nodes(t)
        jac1 = jac11 + jac12 + jac13

        # derivative of omega x (I_w * omega)
        v21 = self.I_b @ R.T @ self.omega
        jac21 = base_euler.deriv_of_rot_vec_mult(t, v21, False)
        jac22 = R @ self.I_b @ base_euler.deriv_of_rot_vec_mult(t, self.omega, True)
        jac_ang_vel = base_euler.get_deriv_of_ang_vel_wrt_euler_nodes(t)
        jac23 = I_w @ jac_ang_vel
        jac2 = (
            cross_matrix(self.omega) @ (jac21 + jac22 + jac23)
            - cross_matrix(I_w @ self.omega) @ jac_ang_vel
        )

        jac = np.zeros((_DIM_6D, jac_ang_vel.shape[1]))
        jac[_AX:_AX + _DIM_3D] = jac1 + jac2
        return jac

    def get_jacobian_wrt_force(self, jac_force, ee):
        jac_force = np.asarray(jac_force, dtype=float)
        r = self.com_pos - self.ee_pos[ee]
        jac_tau = -cross_matrix(r) @ jac_force

        jac = np.zeros((_DIM_6D, jac_force.shape[1]))
        jac[_AX:_AX + _DIM_3D] = -jac_tau
        jac[_LX:_LX + _DIM_3D] = -jac_force
        return jac

    def get_jacobian_wrt_ee_pos(self, jac_ee_pos, ee):
        jac_ee_pos = np.asarray(jac_ee_pos, dtype=float)
        jac_tau = cross_matrix(self.ee_force[ee]) @ (-jac_ee_pos)

        jac = np.zeros((_DIM_6D, jac_tau.shape[1]))
        jac[_AX:_AX + _DIM_3D] = -jac_tau
        # the linear dynamics do not depend on the end-effector positions
        return jac