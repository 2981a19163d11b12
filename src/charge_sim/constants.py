# MIT License (see LICENSE)
"""
Numeric defaults used throughout the simulation.

Values are simulation units, not SI. The Coulomb constant is scaled down
so that unit charges a few units apart produce forces of order one.
"""
from __future__ import annotations

# Coulomb's constant (electrostatic constant), k = 1/(4πε₀)
# Value: 8.9875517923 × 10⁹ N·m²/C²
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?k
K_COULOMB: float = 8.9875517923e9

# Scaled constant used by default for charges of magnitude ~1.
DEFAULT_K: float = 8.99e9 * 1e-6

# Distance floor for body-to-body forces.
DEFAULT_MIN_DISTANCE: float = 0.5

# Smaller floor for field queries at arbitrary points (line tracing gets close).
DEFAULT_FIELD_MIN_DISTANCE: float = 0.1

# Net force magnitude cap per body.
DEFAULT_MAX_FORCE: float = 50.0

# Spherical confinement
DEFAULT_BOUNDARY_RADIUS: float = 50.0
DEFAULT_BOUNDARY_STIFFNESS: float = 10.0

# Field line tracing
DEFAULT_TRACE_MAX_POINTS: int = 30
DEFAULT_TRACE_MAX_LENGTH: float = 5.0
DEFAULT_TRACE_STEP: float = 0.2
DEFAULT_TERMINATION_RADIUS: float = 0.3
DEFAULT_MIN_FIELD: float = 1e-3

# Seeds per body and their distance from the body centre
DEFAULT_LINES_PER_BODY: int = 8
DEFAULT_SEED_OFFSET: float = 0.3
