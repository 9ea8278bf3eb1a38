# leggedtraj

Building blocks for formulating trajectory optimization problems for legged
robots: cubic Hermite splines parameterized by node values, phase-based
parameterizations of foot motion and contact forces, optimizable phase
durations, ZYX Euler-angle kinematics with analytic Jacobians, single rigid
body dynamics, gait generators, and a few constraint and cost terms that
evaluate values, bounds and Jacobians over these variables.

All vectors and Jacobians are dense NumPy arrays.

## Installation

```
pip install .
```

Run the tests with the `test` extra installed:

```
pip install .[test]
pytest
```

## Modules

- `leggedtraj.state` – `State` holding position, velocity and acceleration
  vectors, indexed with the `Dx` enum (`POS`, `VEL`, `ACC`).
- `leggedtraj.polynomial` – `Polynomial` and `CubicHermitePolynomial`, with
  derivatives with respect to the start and end node values and to the
  duration.
- `leggedtraj.spline` – `Spline`, a chain of cubic Hermite polynomials;
  `Spline.get_segment_id` finds the segment for a global time.
- `leggedtraj.nodes_variables` – the `NodesVariables` base class, plus
  `Bounds`, `Side` and `NodeValueInfo`; node values as optimization variables
  with bounds, linear-interpolation initialization and observers.
- `leggedtraj.nodes_variables_all` – `NodesVariablesAll`, where every node
  position and velocity is a variable.
- `leggedtraj.nodes_variables_phase_based` – `NodesVariablesPhaseBased` with
  alternating constant and changing phases, and its foot-motion
  (`NodesVariablesEEMotion`) and foot-force (`NodesVariablesEEForce`)
  variants; `build_poly_infos` describes the polynomials of such a spline.
- `leggedtraj.node_spline` – `NodeSpline`, a spline that follows its node
  variables and gives Jacobians with respect to them.
- `leggedtraj.phase_durations` – `PhaseDurations`, the optimizable contact
  schedule of one foot; the last phase fills up to the fixed total time.
- `leggedtraj.phase_spline` – `PhaseSpline`, a node spline that also follows
  changing phase durations and gives Jacobians with respect to them.
- `leggedtraj.spline_holder` – `SplineHolder`, building base and foot splines
  at once.
- `leggedtraj.parameters` – `Parameters`, with `ConstraintName` and
  `CostName`, describing the problem's settings.
- `leggedtraj.euler_converter` – `EulerConverter`: rotation matrix,
  quaternion `(w, x, y, z)`, angular velocity and acceleration from an
  Euler-angle spline, and their Jacobians.
- `leggedtraj.dynamic_model` – the abstract `DynamicModel`.
- `leggedtraj.single_rigid_body_dynamics` – `SingleRigidBodyDynamics` with
  Newton-Euler residuals and Jacobians; `build_inertia_tensor` and
  `cross_matrix` helpers.
- `leggedtraj.gait_generator` – `GaitGenerator`, the `Gaits` and `Combos`
  enums and `make_gait_generator(leg_count)` for 1, 2 or 4 legs.
- `leggedtraj.monoped_gait_generator`, `leggedtraj.biped_gait_generator`,
  `leggedtraj.quadruped_gait_generator` – predefined strides and
  combinations.
- `leggedtraj.swing_constraint` – `SwingConstraint`, keeping swing nodes
  midway between footholds.
- `leggedtraj.spline_acc_constraint` – `SplineAccConstraint`, continuous
  acceleration at spline junctions.
- `leggedtraj.node_cost` – `NodeCost`, a weighted sum of squares of one node
  derivative and dimension.

The constraint and cost terms find their variables through
`init_variable_dependent_quantities(variables)`, where `variables` maps
variable-set names to node variables, and write Jacobian entries into a
NumPy array passed to `fill_jacobian_block(var_set, jac)`.

## Example

```python
import numpy as np

from leggedtraj.nodes_variables_all import NodesVariablesAll
from leggedtraj.node_spline import NodeSpline
from leggedtraj.state import Dx

nodes = NodesVariablesAll(3, 3, "base-lin")
nodes.set_by_linear_interpolation(np.zeros(3), np.array([1.0, 0.0, 0.5]), 2.0)

spline = NodeSpline(nodes, [1.0, 1.0])
print(spline.get_point(0.5).p())
print(spline.get_jacobian_wrt_nodes(0.5, Dx.POS).shape)  # (3, 18)
```

A gait generator produces phase durations per foot:

```python
from leggedtraj.gait_generator import Combos, make_gait_generator

gait = make_gait_generator(4)
gait.set_combo(Combos.C1)
print(gait.get_phase_durations(2.4, 0))
print(gait.is_in_contact_at_start(0))
```

## What the package does not do

- It contains no solver and no problem container: it evaluates values,
  bounds and Jacobians, and assembling and solving the optimization problem
  is left to the caller.
- It has no terrain models. There is no height map, so there is no terrain
  constraint and no constraint keeping contact forces unilateral and inside
  a friction cone.
- Apart from the swing, spline-acceleration and node-cost terms, it offers no
  ready-made constraints (such as dynamics, range of motion or total time),
  even though `Parameters` lists their names.
- It has no command-line tool.