# MIT License (see LICENSE)
"""
Utility functions for 3D vector math.

All vectors are numpy float64 arrays of shape (3,). Tuples and lists are
accepted wherever a vector is read and converted with f64().
"""
from __future__ import annotations

import numpy as np

# Unit axis used when two positions coincide exactly and no direction exists.
DEGENERATE_AXIS = np.array([1.0, 0.0, 0.0], dtype=np.float64)


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always copies, so callers may mutate the result freely.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """Convert to a float64 vector and check it has three components."""
    v = f64(x)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {v.shape}")
    return v


def zero3() -> np.ndarray:
    return np.zeros(3, dtype=np.float64)


def norm2(v: np.ndarray) -> float:
    """Squared magnitude. Avoids sqrt for comparisons."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def clamp_magnitude(v: np.ndarray, max_len: float) -> np.ndarray:
    """
    Scale v down to max_len if it is longer, keeping its direction.

    Vectors already within the limit are returned unchanged.
    """
    n = norm(v)
    if n > max_len:
        return v * (max_len / n)
    return v


def plane_axes(plane: str) -> tuple[np.ndarray, np.ndarray]:
    """
    Two orthonormal in-plane axes for a coordinate plane name.

    "xz" is the ground plane of a y-up world, the default for seed rings
    and field grids.
    """
    axes = {
        "xy": ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
        "xz": ((1.0, 0.0, 0.0), (0.0, 0.0, 1.0)),
        "yz": ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0)),
    }
    if plane not in axes:
        raise ValueError(f"Unknown plane: '{plane}' (expected one of {sorted(axes)})")
    a, b = axes[plane]
    return f64(a), f64(b)
