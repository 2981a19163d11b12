# MIT License (see LICENSE)
"""
Electric field queries at arbitrary points.

Unlike net_force(), these functions are not tied to a body: they evaluate
the superposed field (or potential) of every registered source at a point
in space. Used for force-vector overlays and by the field line tracer.
"""
from __future__ import annotations
from typing import NamedTuple

import numpy as np

from ..config import FieldConfig
from ..registry import BodySource, read_pass
from ..util import norm, plane_axes, vec3, zero3


class FieldSample(NamedTuple):
    """Field vector evaluated at one grid node."""
    position: np.ndarray
    field: np.ndarray


def field_at(point, bodies: BodySource, config: FieldConfig | None = None) -> np.ndarray:
    """
    Superposed field vector at a point.

    Implements E = Σ ± k * |q| / max(r, min_distance)² * r̂, with r̂ pointing
    from the source to the point. Positive sources contribute +r̂ (lines
    leave them), negative sources -r̂ (lines enter them). Not capped.

    Args:
        point: Query position [x, y, z].
        bodies: Registry (or iterable) of sources.
        config: Field parameters. Defaults to FieldConfig().

    Note:
        A source located exactly at the query point contributes nothing,
        since the direction from it is undefined.
    """
    if config is None:
        config = FieldConfig()
    p = vec3(point)
    total = zero3()
    with read_pass(bodies) as snapshot:
        for source in snapshot:
            direction = p - source.position
            r = norm(direction)
            if r == 0.0:
                continue
            distance = max(r, config.min_distance)
            magnitude = config.k * abs(source.charge) / (distance * distance)
            contribution = (direction / r) * magnitude
            if source.charge > 0:
                total += contribution
            else:
                total -= contribution
    return total


def potential_at(point, bodies: BodySource, config: FieldConfig | None = None) -> float:
    """
    Electric potential V = Σ k * q / max(r, min_distance) at a point.
    """
    if config is None:
        config = FieldConfig()
    p = vec3(point)
    v = 0.0
    with read_pass(bodies) as snapshot:
        for source in snapshot:
            distance = max(norm(p - source.position), config.min_distance)
            v += config.k * source.charge / distance
    return v


def sample_field_grid(
    bodies: BodySource,
    config: FieldConfig | None = None,
    center=(0.0, 0.0, 0.0),
    spacing: float = 1.0,
    shape: tuple[int, int] = (10, 10),
    plane: str = "xz",
    exclusion_radius: float = 0.5,
    min_magnitude: float = 0.1,
) -> list[FieldSample]:
    """
    Evaluate the field on a regular planar grid for vector overlays.

    The grid has shape[0] x shape[1] nodes, spacing apart, centred on
    center and lying in the given coordinate plane.

    Args:
        bodies: Registry (or iterable) of sources.
        config: Field parameters.
        center: Grid centre.
        spacing: Distance between neighbouring nodes.
        shape: Node count along the first and second plane axes.
        plane: "xz" (default), "xy" or "yz".
        exclusion_radius: Nodes closer than this to any body are skipped.
        min_magnitude: Nodes with a weaker field are skipped.

    Returns:
        Samples in row-major order (first axis outer), skipped nodes omitted.
    """
    c = vec3(center)
    a, b = plane_axes(plane)
    nx, ny = shape
    half_x = (nx - 1) * spacing * 0.5
    half_y = (ny - 1) * spacing * 0.5

    samples: list[FieldSample] = []
    with read_pass(bodies) as snapshot:
        for ix in range(nx):
            for iy in range(ny):
                pos = c + (ix * spacing - half_x) * a + (iy * spacing - half_y) * b

                if any(norm(pos - s.position) < exclusion_radius for s in snapshot):
                    continue

                e = field_at(pos, snapshot, config)
                if norm(e) < min_magnitude:
                    continue
                samples.append(FieldSample(pos, e))
    return samples
