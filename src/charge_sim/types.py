# MIT License (see LICENSE)
"""
Core type definitions for the electrostatics simulation.

Defines ChargedBody, the point source/sink of the simulated field. Bodies
are compared and hashed by identity: two bodies with equal charge and
position are still distinct entities.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import vec3, zero3


@dataclass(eq=False)
class ChargedBody:
    """
    A point charge with the kinematic state an integrator needs.

    Attributes:
        charge: Signed charge. The sign gives the polarity; exactly 0 is neutral.
        mass: Mass, used only by the integrators (not by the force law). Must
              be positive unless the body is static.
        position: Position [x, y, z]. The force and field code only reads it.
        velocity: Velocity [vx, vy, vz], integrator state.
        is_static: Static bodies never receive a net force but still act
                   as field sources.
        name: Optional label used in log messages.
        force: Net force written by the last ChargeSystem.tick().
        id: Identifier assigned by ChargeRegistry.register(); -1 when detached.

    Note:
        Position and velocity are converted to float64 arrays on init.
    """
    charge: float
    mass: float = 1.0
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    is_static: bool = False
    name: str = ""

    # Runtime state (not user-specified)
    force: np.ndarray = field(default_factory=zero3)
    id: int = -1

    def __post_init__(self) -> None:
        self.charge = float(self.charge)
        self.mass = float(self.mass)
        if self.mass <= 0 and not self.is_static:
            raise ValueError(f"mass must be positive for a non-static body, got {self.mass}")
        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)
        self.force = vec3(self.force)

    @property
    def polarity(self) -> int:
        """+1 for positive, -1 for negative, 0 for a neutral body."""
        if self.charge > 0:
            return 1
        if self.charge < 0:
            return -1
        return 0

    @property
    def inv_mass(self) -> float:
        """Inverse mass. 0 for static bodies."""
        if self.is_static or self.mass <= 0:
            return 0.0
        return 1.0 / self.mass

    @property
    def label(self) -> str:
        return self.name or f"body#{self.id}"

    def clear_force(self) -> None:
        self.force[:] = 0.0
