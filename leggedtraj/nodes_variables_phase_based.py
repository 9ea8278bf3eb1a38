"""Node variables whose parameterization follows alternating contact phases."""

from __future__ import annotations

from dataclasses import dataclass

from leggedtraj.nodes_variables import NO_BOUND, NodesVariables, NodeValueInfo, Side
from leggedtraj.state import NODE_DERIVATIVES, Dx, State

_DIM_3D = 3
_Z = 2


@dataclass(frozen=True)
class PolyInfo:
    """Where a polynomial sits: its phase, its place in that phase, and more."""

    phase: int
    poly_in_phase: int
    n_polys_in_phase: int
    is_constant: bool


def build_poly_infos(phase_count, first_phase_constant, n_polys_in_changing_phase):
    """Describe every polynomial of a spline with alternating constant phases."""
    infos = []
    phase_constant = first_phase_constant
    for phase in range(phase_count):
        if phase_constant:
            infos.append(PolyInfo(phase, 0, 1, True))
        else:
            infos.extend(
                PolyInfo(phase, j, n_polys_in_changing_phase, False)
                for j in range(n_polys_in_changing_phase)
            )
        phase_constant = not phase_constant
    return infos


class NodesVariablesPhaseBased(NodesVariables):
    """Nodes of a spline whose phases alternate between constant and changing.

    A constant phase is described by a single polynomial whose two nodes share
    their optimized values; a changing phase by several polynomials.
    """

    def __init__(self, phase_count, first_phase_constant, name, n_polys_in_changing_phase):
        super().__init__(name)
        self.polynomial_info = build_poly_infos(
            phase_count, first_phase_constant, n_polys_in_changing_phase
        )
        self.n_dim = _DIM_3D
        n_nodes = len(self.polynomial_info) + 1
        self.nodes = [State(self.n_dim, NODE_DERIVATIVES) for _ in range(n_nodes)]
        self.index_to_node_value_info = {}

    def get_node_values_info(self, idx):
        return list(self.index_to_node_value_info.get(idx, []))

    def _set_number_of_variables(self, n_variables):
        self.bounds = [NO_BOUND] * n_variables
        self.rows = n_variables

    def convert_phase_to_poly_durations(self, phase_durations):
        """Split every phase duration evenly over the polynomials of that phase."""
        return [
            phase_durations[info.phase] / info.n_polys_in_phase
            for info in self.polynomial_info
        ]

    def get_derivative_of_poly_duration_wrt_phase_duration(self, poly_id):
        return 1.0 / self.polynomial_info[poly_id].n_polys_in_phase

    def get_number_of_prev_polynomials_in_phase(self, poly_id):
        return self.polynomial_info[poly_id].poly_in_phase

    def is_constant_node(self, node_id):
        """A node is constant if a polynomial on either side is in a constant phase."""
        return any(self.is_in_constant_phase(p) for p in self.get_adjacent_poly_ids(node_id))

    def is_in_constant_phase(self, poly_id):
        return self.polynomial_info[poly_id].is_constant

    def get_indices_of_non_constant_nodes(self):
        return [i for i in range(len(self.nodes)) if not self.is_constant_node(i)]

    def get_phase(self, node_id):
        """Phase of a non-constant node."""
        if self.is_constant_node(node_id):
            raise ValueError(f"node {node_id} is constant and belongs to two phases")
        poly_id = self.get_adjacent_poly_ids(node_id)[0]
        return self.polynomial_info[poly_id].phase

    def get_poly_id_at_start_of_phase(self, phase):
        for i, info in enumerate(self.polynomial_info):
            if info.phase == phase:
                return i
        raise ValueError(f"phase {phase} does not exist")

    def get_value_at_start_of_phase(self, phase):
        """Position of the node that starts the phase."""
        node_id = self.get_node_id_at_start_of_phase(phase)
        return self.nodes[node_id].p().copy()

    def get_node_id_at_start_of_phase(self, phase):
        return self.get_node_id(self.get_poly_id_at_start_of_phase(phase), Side.START)

    def get_adjacent_poly_ids(self, node_id):
        last_node_id = len(self.nodes) - 1
        if node_id == 0:
            return [0]
        if node_id == last_node_id:
            return [last_node_id - 1]
        return [node_id - 1, node_id]


class NodesVariablesEEMotion(NodesVariablesPhaseBased):
    """End-effector motion: the foot stays put while in contact."""

    def __init__(self, phase_count, is_in_contact_at_start, name, n_polys_in_changing_phase):
        super().__init__(phase_count, is_in_contact_at_start, name, n_polys_in_changing_phase)
        self.index_to_node_value_info = self._phase_based_parameterization()
        self._set_number_of_variables(len(self.index_to_node_value_info))

    def _phase_based_parameterization(self):
        index_map = {}
        idx = 0
        node_id = 0
        while node_id < len(self.nodes):
            if not self.is_constant_node(node_id):
                for dim in range(self.get_dim()):
                    index_map.setdefault(idx, []).append(NodeValueInfo(node_id, Dx.POS, dim))
                    idx += 1
                    if dim == _Z:
                        # vertical swing velocity is fixed to zero, not optimized
                        self.nodes[node_id].at(Dx.VEL)[_Z] = 0.0
                    else:
                        index_map.setdefault(idx, []).append(NodeValueInfo(node_id, Dx.VEL, dim))
                        idx += 1
                node_id += 1
            else:
                self.nodes[node_id].at(Dx.VEL)[:] = 0.0
                self.nodes[node_id + 1].at(Dx.VEL)[:] = 0.0
                for dim in range(self.get_dim()):
                    index_map[idx] = [
                        NodeValueInfo(node_id, Dx.POS, dim),
                        NodeValueInfo(node_id + 1, Dx.POS, dim),
                    ]
                    idx += 1
                node_id += 2
        return index_map


class NodesVariablesEEForce(NodesVariablesPhaseBased):
    """End-effector force: zero while swinging, optimized while in contact."""

    def __init__(self, phase_count, is_in_contact_at_start, name, n_polys_in_changing_phase):
        super().__init__(phase_count, not is_in_contact_at_start, name, n_polys_in_changing_phase)
        self.index_to_node_value_info = self._phase_based_parameterization()
        self._set_number_of_variables(len(self.index_to_node_value_info))

    def _phase_based_parameterization(self):
        index_map = {}
        idx = 0
        node_id = 0
        while node_id < len(self.nodes):
            if not self.is_constant_node(node_id):
                for dim in range(self.get_dim()):
                    index_map[idx] = [NodeValueInfo(node_id, Dx.POS, dim)]
                    idx += 1
                    index_map[idx] = [NodeValueInfo(node_id, Dx.VEL, dim)]
                    idx += 1
                node_id += 1
            else:
                for nid in (node_id, node_id + 1):
                    self.nodes[nid].at(Dx.POS)[:] = 0.0
                    self.nodes[nid].at(Dx.VEL)[:] = 0.0
                node_id += 2
        return index_map