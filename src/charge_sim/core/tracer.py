# MIT License (see LICENSE)
"""
Field line tracing.

A field line is approximated by a polyline that starts at a seed point and
repeatedly steps a fixed distance along the local field direction:

    x_{n+1} = x_n ± step_length * E(x_n) / |E(x_n)|

Outward lines (from positive sources) follow +E, inward lines (into
negative sinks) follow -E so that they visually converge on the sink.

A trace stops, in this order of checks after each step, when it has
max_points points, when its arc length exceeds max_length, or when it gets
within termination_radius of a body of the opposite polarity. It also stops
before a step when the field is too weak to give a direction, which guards
against stalling near equilibrium points. Both bounds being finite is what
guarantees termination.

Reference:
    https://en.wikipedia.org/wiki/Field_line
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from ..config import FieldConfig, TraceConfig
from ..constants import DEFAULT_LINES_PER_BODY, DEFAULT_SEED_OFFSET
from ..registry import BodySource, read_pass
from ..types import ChargedBody
from ..util import f64, norm, plane_axes, vec3
from .field import field_at

logger = logging.getLogger(__name__)


class TerminationReason(enum.Enum):
    """Why a trace stopped."""
    MAX_POINTS = "max_points"
    MAX_LENGTH = "max_length"
    REACHED_SINK = "reached_sink"
    WEAK_FIELD = "weak_field"
    DEGENERATE_CONFIG = "degenerate_config"


@dataclass(frozen=True, eq=False)
class FieldLine:
    """
    One traced field line.

    Attributes:
        points: Array [N, 3] of sample positions, seed first. Read-only.
        length: Accumulated arc length.
        reason: Why tracing stopped.
        outward: True if traced along +E (away from a positive source).
    """
    points: np.ndarray
    length: float
    reason: TerminationReason
    outward: bool

    def __post_init__(self) -> None:
        pts = f64(self.points).reshape(-1, 3)
        pts.setflags(write=False)
        object.__setattr__(self, "points", pts)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.points)

    @property
    def end(self) -> np.ndarray:
        return self.points[-1]


class _Tracer:
    """Stepping state for one trace (RUNNING until reason is set)."""

    def __init__(self, seed, outward: bool, snapshot, config: TraceConfig, field: FieldConfig):
        self.current = vec3(seed)
        self.outward = outward
        self.snapshot = snapshot
        self.config = config
        self.field = field
        self.count = 1
        self.length = 0.0
        self.reason: TerminationReason | None = None
        # Outward lines end on negative bodies, inward lines on positive ones.
        self._sink_polarity = -1 if outward else 1

    def points(self) -> Iterator[np.ndarray]:
        cfg = self.config
        yield self.current.copy()

        if cfg.is_degenerate:
            logger.warning(
                "degenerate trace config (max_points=%s, max_length=%s, step_length=%s)",
                cfg.max_points, cfg.max_length, cfg.step_length,
            )
            self.reason = TerminationReason.DEGENERATE_CONFIG
            return

        while True:
            if self.count >= cfg.max_points:
                self.reason = TerminationReason.MAX_POINTS
                return

            e = field_at(self.current, self.snapshot, self.field)
            e_mag = norm(e)
            if e_mag < cfg.min_field:
                self.reason = TerminationReason.WEAK_FIELD
                return

            step = e * (cfg.step_length / e_mag)
            if not self.outward:
                step = -step

            self.current = self.current + step
            self.count += 1
            self.length += cfg.step_length
            yield self.current.copy()

            if self.count >= cfg.max_points:
                self.reason = TerminationReason.MAX_POINTS
                return
            if self.length > cfg.max_length:
                self.reason = TerminationReason.MAX_LENGTH
                return
            if self._near_sink():
                self.reason = TerminationReason.REACHED_SINK
                return

    def _near_sink(self) -> bool:
        radius = self.config.termination_radius
        for body in self.snapshot:
            if body.polarity != self._sink_polarity:
                continue
            if norm(self.current - body.position) < radius:
                return True
        return False


def iter_trace(
    seed,
    outward: bool,
    bodies: BodySource,
    config: TraceConfig | None = None,
    field_config: FieldConfig | None = None,
) -> Iterator[np.ndarray]:
    """
    Lazily yield the points of a field line, seed first.

    The generator is single use. The body snapshot is taken when the first
    point is requested; the registry stays writable while the generator is
    paused, and later changes do not affect the line.
    """
    config = config or TraceConfig()
    field_config = field_config or FieldConfig()
    with read_pass(bodies) as snapshot:
        tracer = _Tracer(seed, outward, snapshot, config, field_config)
    yield from tracer.points()


def trace(
    seed,
    outward: bool,
    bodies: BodySource,
    config: TraceConfig | None = None,
    field_config: FieldConfig | None = None,
) -> FieldLine:
    """
    Trace one field line from a seed point.

    Args:
        seed: Starting position [x, y, z]; always the first point.
        outward: True to follow +E (away from a positive source), False to
                 follow -E (into a negative sink).
        bodies: Registry (or iterable) of sources.
        config: Bounds and step length. Defaults to TraceConfig().
        field_config: Field parameters used at each step.

    Returns:
        FieldLine with at least one point. A config with non-positive
        max_points, max_length or step_length yields just the seed.
    """
    config = config or TraceConfig()
    field_config = field_config or FieldConfig()
    with read_pass(bodies) as snapshot:
        tracer = _Tracer(seed, outward, snapshot, config, field_config)
        pts = list(tracer.points())

    logger.debug("trace stopped after %d points: %s", len(pts), tracer.reason.value)
    return FieldLine(
        points=np.array(pts, dtype=np.float64),
        length=tracer.length,
        reason=tracer.reason,
        outward=outward,
    )


def seed_points(
    center,
    count: int = DEFAULT_LINES_PER_BODY,
    offset: float = DEFAULT_SEED_OFFSET,
    plane: str = "xz",
) -> np.ndarray:
    """
    Seeds equally spaced on a circle around a centre.

    Seed i sits at angle 2πi/count measured from the first plane axis.

    Returns:
        Array [count, 3]. Empty when count <= 0.
    """
    c = vec3(center)
    if count <= 0:
        return np.empty((0, 3), dtype=np.float64)
    a, b = plane_axes(plane)
    angles = 2.0 * np.pi * np.arange(count) / count
    return c + offset * (np.outer(np.cos(angles), a) + np.outer(np.sin(angles), b))


def trace_body(
    body: ChargedBody,
    bodies: BodySource,
    config: TraceConfig | None = None,
    field_config: FieldConfig | None = None,
    count: int = DEFAULT_LINES_PER_BODY,
    offset: float = DEFAULT_SEED_OFFSET,
    plane: str = "xz",
) -> list[FieldLine]:
    """
    Trace the field lines leaving (positive) or entering (negative) a body.

    Neutral bodies have no lines and return an empty list.
    """
    if body.polarity == 0:
        return []
    outward = body.polarity > 0
    with read_pass(bodies) as snapshot:
        return [
            trace(seed, outward, snapshot, config, field_config)
            for seed in seed_points(body.position, count, offset, plane)
        ]
