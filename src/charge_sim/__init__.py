# MIT License (see LICENSE)
"""
charge_sim - A point-charge electrostatics engine.

This package computes pairwise Coulomb forces between charged bodies, the
electric field at arbitrary points, and field line geometry for
visualisation. Rendering, entity spawning and rigid-body integration belong
to the host; the optional integrators here cover simple standalone loops.

Main entry points:
    - ChargeSystem: Owns the bodies and configuration, exposes tick()/step().
    - ChargedBody: A point charge with position, mass and velocity.
    - ChargeRegistry: The explicitly owned set of live bodies.
    - ForceConfig, FieldConfig, TraceConfig, BoundaryConfig: Numeric knobs.

Submodules:
    - core: Force solver, field evaluator, line tracer, integrators.

Example:
    from charge_sim import ChargeSystem, ChargedBody, ForceConfig

    system = ChargeSystem(force_config=ForceConfig(k=1.0))
    system.add_body(ChargedBody(charge=+1.0, position=(0, 0, 0)))
    system.add_body(ChargedBody(charge=-1.0, position=(2, 0, 0)))
    forces = system.tick()
"""
import logging

from .system import ChargeSystem
from .types import ChargedBody
from .registry import ChargeRegistry
from .config import ForceConfig, FieldConfig, TraceConfig, BoundaryConfig
from .core.tracer import FieldLine, TerminationReason

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Simulation
    "ChargeSystem",
    "ChargedBody",
    "ChargeRegistry",
    # Configuration
    "ForceConfig",
    "FieldConfig",
    "TraceConfig",
    "BoundaryConfig",
    # Tracing results
    "FieldLine",
    "TerminationReason",
]
