# MIT License (see LICENSE)
"""
Numeric configuration for the force, field, tracer and boundary steps.

Each step takes its own frozen config so a host can tune them
independently (e.g. a smaller distance floor for field queries than for
body-to-body forces).
"""
from __future__ import annotations
from dataclasses import dataclass

from .constants import (
    DEFAULT_K,
    DEFAULT_MIN_DISTANCE,
    DEFAULT_FIELD_MIN_DISTANCE,
    DEFAULT_MAX_FORCE,
    DEFAULT_BOUNDARY_RADIUS,
    DEFAULT_BOUNDARY_STIFFNESS,
    DEFAULT_TRACE_MAX_POINTS,
    DEFAULT_TRACE_MAX_LENGTH,
    DEFAULT_TRACE_STEP,
    DEFAULT_TERMINATION_RADIUS,
    DEFAULT_MIN_FIELD,
)


@dataclass(frozen=True)
class ForceConfig:
    """
    Body-to-body Coulomb force parameters.

    Attributes:
        k: Coulomb constant (tunable, not required to be physical).
        min_distance: Separations below this are replaced by it.
        max_force: Cap on the magnitude of the summed net force.
    """
    k: float = DEFAULT_K
    min_distance: float = DEFAULT_MIN_DISTANCE
    max_force: float = DEFAULT_MAX_FORCE

    def __post_init__(self) -> None:
        if self.min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}")
        if self.max_force <= 0:
            raise ValueError(f"max_force must be positive, got {self.max_force}")


@dataclass(frozen=True)
class FieldConfig:
    """
    Point field query parameters.

    Attributes:
        k: Coulomb constant.
        min_distance: Distance floor for field queries.
    """
    k: float = DEFAULT_K
    min_distance: float = DEFAULT_FIELD_MIN_DISTANCE

    def __post_init__(self) -> None:
        if self.min_distance <= 0:
            raise ValueError(f"min_distance must be positive, got {self.min_distance}")


@dataclass(frozen=True)
class TraceConfig:
    """
    Field line tracing bounds.

    Not validated: non-positive max_points, max_length or step_length make
    trace() return the seed alone.

    Attributes:
        max_points: Maximum number of points in a line, seed included.
        max_length: Maximum accumulated arc length.
        step_length: Distance advanced per step.
        termination_radius: Stop when this close to an opposite-polarity body.
        min_field: Stop when the field magnitude drops below this.
    """
    max_points: int = DEFAULT_TRACE_MAX_POINTS
    max_length: float = DEFAULT_TRACE_MAX_LENGTH
    step_length: float = DEFAULT_TRACE_STEP
    termination_radius: float = DEFAULT_TERMINATION_RADIUS
    min_field: float = DEFAULT_MIN_FIELD

    @property
    def is_degenerate(self) -> bool:
        return self.max_points <= 0 or self.max_length <= 0 or self.step_length <= 0


@dataclass(frozen=True)
class BoundaryConfig:
    """
    Spherical confinement around the origin.

    Attributes:
        radius: Bodies farther than this from the origin are pushed back.
        stiffness: Restoring force per unit of overshoot.
    """
    radius: float = DEFAULT_BOUNDARY_RADIUS
    stiffness: float = DEFAULT_BOUNDARY_STIFFNESS

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError(f"radius must be non-negative, got {self.radius}")
        if self.stiffness < 0:
            raise ValueError(f"stiffness must be non-negative, got {self.stiffness}")
