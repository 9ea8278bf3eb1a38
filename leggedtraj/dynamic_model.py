"""Common state of a dynamic model of a legged robot."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

GRAVITY = 9.80665


class DynamicModel(ABC):
    """A robot body of mass m with end-effectors applying forces at given positions.

    The current state is set with set_current; subclasses turn it into the
    violation of the equations of motion and their Jacobians.
    """

    def __init__(self, mass, ee_count):
        self.m = float(mass)
        self.g = GRAVITY

        self.com_pos = np.zeros(3)
        self.com_acc = np.zeros(3)

        self.w_R_b = np.eye(3)
        self.omega = np.zeros(3)
        self.omega_dot = np.zeros(3)

        self.ee_force = [np.zeros(3) for _ in range(ee_count)]
        self.ee_pos = [np.zeros(3) for _ in range(ee_count)]

    def set_current(self, com_pos, com_acc, w_R_b, omega, omega_dot, ee_force, ee_pos):
        """Set the state in world frame at which the model is evaluated."""
        self.com_pos = np.array(com_pos, dtype=float)
        self.com_acc = np.array(com_acc, dtype=float)

        self.w_R_b = np.array(w_R_b, dtype=float)
        self.omega = np.array(omega, dtype=float)
        self.omega_dot = np.array(omega_dot, dtype=float)

        self.ee_force = [np.array(f, dtype=float) for f in ee_force]
        self.ee_pos = [np.array(p, dtype=float) for p in ee_pos]

    def get_ee_count(self):
        return len(self.ee_pos)

    @abstractmethod
    def get_dynamic_violation(self):
        """Six values that are zero when the motion obeys the dynamics."""

    @abstractmethod
    def get_jacobian_wrt_base_lin(self, jac_pos_base_lin, jac_acc_base_lin):
        """Jacobian of the violation wrt the linear base variables."""

    @abstractmethod
    def get_jacobian_wrt_base_ang(self, base_euler, t):
        """Jacobian of the violation wrt the angular base variables."""

    @abstractmethod
    def get_jacobian_wrt_force(self, jac_force, ee):
        """Jacobian of the violation wrt the force variables of ee."""

    @abstractmethod
    def get_jacobian_wrt_ee_pos(self, jac_ee_pos, ee):
        """Jacobian of the violation wrt the motion variables of ee."""