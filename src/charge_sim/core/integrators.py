# MIT License (see LICENSE)
"""
Optional time-stepping helpers for hosts without their own physics engine.

The force solver never moves bodies. A host that wants a self-contained
loop can use these to advance position and velocity from body.force:
    dx/dt = v,         dv/dt = F/m

Available integrators:
- euler_step: Semi-implicit (symplectic) Euler, the cheapest stable choice
- verlet_step: Velocity Verlet with forces held constant over the step
- rk4_step: Classical 4th-order Runge-Kutta

All of them leave static bodies untouched.

Reference:
    Runge-Kutta methods: https://en.wikipedia.org/wiki/Runge-Kutta_methods
    Velocity Verlet: https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
"""
from __future__ import annotations

import numpy as np

from ..types import ChargedBody


def euler_step(body: ChargedBody, dt: float) -> None:
    """
    Semi-implicit Euler: update velocity first, then position with the new velocity.

    Args:
        body: Body to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    inv_m = body.inv_mass
    if inv_m == 0.0:
        return
    body.velocity = body.velocity + body.force * inv_m * dt
    body.position = body.position + body.velocity * dt


def verlet_step(body: ChargedBody, dt: float) -> None:
    """
    Advance body state using velocity Verlet integration.

    The standard velocity Verlet update is:
        x(t+dt) = x(t) + v(t)*dt + 0.5*a(t)*dt²
        v(t+dt) = v(t) + 0.5*(a(t) + a(t+dt))*dt

    Forces are recomputed once per tick, so a(t+dt) ≈ a(t) and the
    velocity update reduces to v + a*dt.
    """
    inv_m = body.inv_mass
    if inv_m == 0.0:
        return
    a0 = body.force * inv_m
    body.position = body.position + body.velocity * dt + 0.5 * a0 * dt * dt
    body.velocity = body.velocity + a0 * dt


def rk4_step(body: ChargedBody, dt: float) -> None:
    """
    Advance body state by dt using classical 4th-order Runge-Kutta.

    RK4 evaluates derivatives at 4 points within the timestep and combines
    them with weights (1, 2, 2, 1)/6. Forces are held constant over the
    timestep (explicit integrator).
    """
    inv_m = body.inv_mass
    if inv_m == 0.0:
        return

    x0 = body.position.copy()
    v0 = body.velocity.copy()
    a = body.force * inv_m

    def f(x: np.ndarray, v: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        return v, a

    k1 = f(x0, v0)
    k2 = f(x0 + 0.5 * dt * k1[0], v0 + 0.5 * dt * k1[1])
    k3 = f(x0 + 0.5 * dt * k2[0], v0 + 0.5 * dt * k2[1])
    k4 = f(x0 + dt * k3[0], v0 + dt * k3[1])

    body.position = x0 + (dt / 6.0) * (k1[0] + 2 * k2[0] + 2 * k3[0] + k4[0])
    body.velocity = v0 + (dt / 6.0) * (k1[1] + 2 * k2[1] + 2 * k3[1] + k4[1])


INTEGRATORS = {
    "euler": euler_step,
    "verlet": verlet_step,
    "rk4": rk4_step,
}
