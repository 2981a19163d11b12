# MIT License (see LICENSE)
"""
The simulation container and tick driver.

ChargeSystem owns a ChargeRegistry and the configuration of every step.
The host calls tick() once per frame from its own loop (the system has no
opinion on timestep size), then integrates the returned forces itself, or
calls step(dt) to use one of the bundled integrators.

Structure:
    - Host creates a ChargeSystem.
    - Host adds/removes bodies via add_body()/remove_body() between ticks.
    - Host calls tick() or step() in a loop.
    - Visualisation calls field_at(), trace(), field_lines() on demand.
      Nothing is cached; call again for fresh geometry.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import ContextManager

import numpy as np

from .config import ForceConfig, FieldConfig, TraceConfig, BoundaryConfig
from .constants import DEFAULT_LINES_PER_BODY, DEFAULT_SEED_OFFSET
from .profiler import Profiler
from .registry import ChargeRegistry
from .types import ChargedBody
from .core.forces import net_force, boundary_force, apply_linear_drag
from .core.field import FieldSample, field_at, potential_at, sample_field_grid
from .core.tracer import FieldLine, trace, trace_body
from .core.integrators import INTEGRATORS

logger = logging.getLogger(__name__)


@dataclass
class ChargeSystem:
    """
    Electrostatics world.

    Attributes:
        force_config: Coulomb force parameters for tick().
        field_config: Parameters for point field queries and line tracing.
        trace_config: Default field line bounds.
        boundary: Spherical confinement; None disables it.
        drag_c: Linear drag coefficient applied in tick() (0 disables it).
        integrator: "euler", "verlet" or "rk4", used by step().
        dt: Default timestep for step().
        profiler: Optional Profiler for timing statistics.
    """
    force_config: ForceConfig = field(default_factory=ForceConfig)
    field_config: FieldConfig = field(default_factory=FieldConfig)
    trace_config: TraceConfig = field(default_factory=TraceConfig)
    boundary: BoundaryConfig | None = None
    drag_c: float = 0.0
    integrator: str = "euler"
    dt: float = 1 / 50
    profiler: Profiler | None = None

    # Internal state
    registry: ChargeRegistry = field(default_factory=ChargeRegistry)
    time: float = 0.0

    def __post_init__(self) -> None:
        if self.integrator not in INTEGRATORS:
            raise ValueError(f"Unknown integrator: {self.integrator}")

    @property
    def bodies(self) -> tuple[ChargedBody, ...]:
        return self.registry.all_bodies()

    def add_body(self, body: ChargedBody) -> int:
        """
        Register a body with the simulation.

        Returns:
            The assigned body id.
        """
        return self.registry.register(body)

    def remove_body(self, body: ChargedBody) -> None:
        self.registry.deregister(body)

    def tick(self) -> dict[int, np.ndarray]:
        """
        Compute this frame's force on every body in one read pass.

        Each non-static body gets the capped Coulomb force, plus the
        boundary force when a BoundaryConfig is set, plus drag when
        drag_c != 0. The result is stored in body.force.

        Returns:
            Dict mapping body id to the force just stored (zero for static
            bodies).
        """
        with self._section("forces"):
            forces: dict[int, np.ndarray] = {}
            with self.registry.reading() as snapshot:
                for b in snapshot:
                    b.clear_force()
                    if not b.is_static:
                        b.force += net_force(b, snapshot, self.force_config)
                        if self.boundary is not None:
                            b.force += boundary_force(b, self.boundary)
                        apply_linear_drag(b, self.drag_c)
                    forces[b.id] = b.force.copy()
        return forces

    def step(self, dt: float | None = None) -> dict[int, np.ndarray]:
        """
        tick(), then advance every non-static body by dt.

        Returns:
            The forces computed by tick().
        """
        dt = float(self.dt if dt is None else dt)
        integrate = INTEGRATORS.get(self.integrator)
        if integrate is None:
            raise ValueError(f"Unknown integrator: {self.integrator}")

        forces = self.tick()
        with self._section("integrate"):
            with self.registry.reading() as snapshot:
                for b in snapshot:
                    integrate(b, dt)
        self.time += dt
        return forces

    # -------------------------------------------------------------------------
    # Visualisation queries
    # -------------------------------------------------------------------------

    def field_at(self, point) -> np.ndarray:
        return field_at(point, self.registry, self.field_config)

    def potential_at(self, point) -> float:
        return potential_at(point, self.registry, self.field_config)

    def trace(self, seed, outward: bool, config: TraceConfig | None = None) -> FieldLine:
        """Trace one field line; config defaults to self.trace_config."""
        return trace(seed, outward, self.registry, config or self.trace_config, self.field_config)

    def field_lines(
        self,
        count: int = DEFAULT_LINES_PER_BODY,
        offset: float = DEFAULT_SEED_OFFSET,
        plane: str = "xz",
    ) -> list[FieldLine]:
        """
        Field lines around every charged body, in registration order.

        Positive bodies emit outward lines, negative bodies collect inward
        lines, neutral bodies contribute none.
        """
        lines: list[FieldLine] = []
        with self.registry.reading() as snapshot:
            for b in snapshot:
                lines.extend(
                    trace_body(b, snapshot, self.trace_config, self.field_config, count, offset, plane)
                )
        logger.debug("traced %d field lines for %d bodies", len(lines), len(snapshot))
        return lines

    def field_grid(self, **kwargs) -> list[FieldSample]:
        """Field vectors on a planar grid; see core.field.sample_field_grid."""
        return sample_field_grid(self.registry, self.field_config, **kwargs)

    def _section(self, name: str) -> ContextManager:
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)
