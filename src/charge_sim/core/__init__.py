# MIT License (see LICENSE)
"""
Core electrostatics computations.

This subpackage provides:
    - Forces: Net Coulomb force per body, boundary confinement, drag.
    - Field: Field vector and potential at arbitrary points, grid sampling.
    - Tracer: Field line tracing from seed points.
    - Integrators: Optional Euler, Verlet and RK4 steps for host loops.
    - Invariants: Energy and momentum diagnostics.

Typical usage:
    from charge_sim.core import net_force, field_at, trace

    f = net_force(body, registry, ForceConfig(k=1.0))
    e = field_at((1, 0, 0), registry)
    line = trace(seed, outward=True, bodies=registry)
"""
from .forces import net_force, net_forces, boundary_force, apply_linear_drag
from .field import FieldSample, field_at, potential_at, sample_field_grid
from .tracer import (
    FieldLine,
    TerminationReason,
    iter_trace,
    trace,
    seed_points,
    trace_body,
)
from .integrators import euler_step, verlet_step, rk4_step, INTEGRATORS
from .invariants import kinetic_energy, linear_momentum, potential_energy, total_force

__all__ = [
    # Forces
    "net_force",
    "net_forces",
    "boundary_force",
    "apply_linear_drag",
    # Field
    "FieldSample",
    "field_at",
    "potential_at",
    "sample_field_grid",
    # Tracing
    "FieldLine",
    "TerminationReason",
    "iter_trace",
    "trace",
    "seed_points",
    "trace_body",
    # Integrators
    "euler_step",
    "verlet_step",
    "rk4_step",
    "INTEGRATORS",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "potential_energy",
    "total_force",
]
