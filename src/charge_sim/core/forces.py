# MIT License (see LICENSE)
"""
Force generators for the electrostatics simulation.

This module computes the net Coulomb force on a body from every other
registered body, the optional spherical confinement force, and linear
drag for the host-side integrators.

Key concepts:
- net_force() is pure: it reads positions and charges, returns a vector,
  and never writes to any body.
- Separations are floored at ForceConfig.min_distance and the summed force
  is capped at ForceConfig.max_force.
- The direction policy is fixed by the sign of q_i * q_j: a negative product
  attracts, anything else (including a zero charge) repels.
- Brute force O(N²) over the registry snapshot.
"""
from __future__ import annotations
import logging

import numpy as np

from ..config import ForceConfig, BoundaryConfig
from ..registry import BodySource, ChargeRegistry, read_pass
from ..types import ChargedBody
from ..util import DEGENERATE_AXIS, clamp_magnitude, norm, zero3

logger = logging.getLogger(__name__)


def net_force(
    body: ChargedBody,
    bodies: BodySource,
    config: ForceConfig | None = None,
) -> np.ndarray:
    """
    Net electrostatic force on one body from all other bodies.

    Implements |F| = k * |q_i * q_j| / max(r, min_distance)², summed over
    all other bodies and capped at max_force.

    Args:
        body: The body the force acts on. Skipped in the iteration.
        bodies: Registry (or iterable) of all field sources.
        config: Force parameters. Defaults to ForceConfig().

    Returns:
        Force vector [Fx, Fy, Fz]. Zero for static bodies.

    Note:
        Two bodies at exactly the same position have no direction between
        them. The earlier one in the snapshot is pushed/pulled along the
        fixed +x axis and the later one along -x, so the pair still gets
        equal and opposite forces evaluated at min_distance.
    """
    if config is None:
        config = ForceConfig()
    if body.is_static:
        return zero3()

    total = zero3()
    with read_pass(bodies) as snapshot:
        own_index = _index_of(body, snapshot)
        for index, other in enumerate(snapshot):
            if other is body:
                continue

            direction = other.position - body.position
            r = norm(direction)
            if r > 0.0:
                u = direction / r
            else:
                logger.warning("%s and %s overlap exactly", body.label, other.label)
                u = DEGENERATE_AXIS if own_index < index else -DEGENERATE_AXIS

            distance = max(r, config.min_distance)
            product = body.charge * other.charge
            magnitude = config.k * abs(product) / (distance * distance)

            if product < 0.0:
                total += u * magnitude  # attraction, towards other
            else:
                total -= u * magnitude  # repulsion, away from other

    return clamp_magnitude(total, config.max_force)


def net_forces(
    bodies: BodySource,
    config: ForceConfig | None = None,
) -> dict[int, np.ndarray]:
    """
    Net force for every body in one read pass.

    Returns:
        Dict mapping body id to force vector when `bodies` is a
        ChargeRegistry, otherwise mapping the body's index in the iterable.
        Static bodies map to zero.
    """
    if config is None:
        config = ForceConfig()
    by_id = isinstance(bodies, ChargeRegistry)
    with read_pass(bodies) as snapshot:
        return {
            (b.id if by_id else i): net_force(b, snapshot, config)
            for i, b in enumerate(snapshot)
        }


def boundary_force(body: ChargedBody, config: BoundaryConfig | None = None) -> np.ndarray:
    """
    Restoring force keeping a body inside a sphere around the origin.

    Implements F = -r̂ * (|r| - radius) * stiffness when |r| > radius, zero
    otherwise. The result is not subject to ForceConfig.max_force.

    Args:
        body: Body to confine.
        config: Sphere radius and stiffness. Defaults to BoundaryConfig().
    """
    if config is None:
        config = BoundaryConfig()
    r = norm(body.position)
    if r <= config.radius:
        return zero3()
    overshoot = r - config.radius
    return -(body.position / r) * (overshoot * config.stiffness)


def apply_linear_drag(body: ChargedBody, c: float) -> None:
    """
    Apply linear drag force proportional to velocity.

    Implements F = -c * v.

    Note:
        Modifies body.force in-place. Has no effect if c == 0 or the body
        is static.
    """
    if c != 0.0 and not body.is_static:
        body.force += -c * body.velocity


def _index_of(body: ChargedBody, snapshot: tuple[ChargedBody, ...]) -> int:
    """Position of body in snapshot by identity, -1 if absent."""
    for i, b in enumerate(snapshot):
        if b is body:
            return i
    return -1
