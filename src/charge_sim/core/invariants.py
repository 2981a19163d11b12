# MIT License (see LICENSE)
"""
Conserved quantities and diagnostics for a set of charged bodies.

Used for verifying the force law (Newton's third law gives zero total
force on an isolated, uncapped pair) and for watching a running system
for numerical blow-up.
"""
from __future__ import annotations
from typing import Iterable

import numpy as np

from ..config import ForceConfig
from ..registry import BodySource, read_pass
from ..types import ChargedBody
from ..util import norm


def kinetic_energy(bodies: Iterable[ChargedBody]) -> float:
    """
    T = Σ 0.5 * m * v², static bodies excluded.
    """
    ke = 0.0
    for b in bodies:
        if b.is_static:
            continue
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: Iterable[ChargedBody]) -> np.ndarray:
    """
    P = Σ m * v, static bodies excluded.
    """
    p = np.zeros(3, dtype=np.float64)
    for b in bodies:
        if b.is_static:
            continue
        p += b.mass * b.velocity
    return p


def potential_energy(bodies: BodySource, config: ForceConfig | None = None) -> float:
    """
    Pairwise electrostatic energy U = Σ_{i<j} k * q_i * q_j / max(r_ij, min_distance).

    Uses the same distance floor as the force solver.
    """
    if config is None:
        config = ForceConfig()
    u = 0.0
    with read_pass(bodies) as snapshot:
        n = len(snapshot)
        for i in range(n):
            bi = snapshot[i]
            for j in range(i + 1, n):
                bj = snapshot[j]
                r = max(norm(bj.position - bi.position), config.min_distance)
                u += config.k * bi.charge * bj.charge / r
    return u


def total_force(forces: dict[int, np.ndarray] | Iterable[np.ndarray]) -> np.ndarray:
    """Vector sum of a set of forces (zero for an isolated uncapped system)."""
    values = forces.values() if isinstance(forces, dict) else forces
    out = np.zeros(3, dtype=np.float64)
    for f in values:
        out += f
    return out
