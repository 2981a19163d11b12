import numpy as np
import pytest

from charge_sim.config import ForceConfig, BoundaryConfig
from charge_sim.core.forces import net_force, net_forces, boundary_force, apply_linear_drag
from charge_sim.registry import ChargeRegistry
from charge_sim.types import ChargedBody


def _registry(*bodies):
    reg = ChargeRegistry()
    for b in bodies:
        reg.register(b)
    return reg


def test_two_body_scenario():
    """
    A(+1) at origin, B(-1) at (2, 0, 0), k=1, min_distance=0.5:
      |F| = 1*1/2² = 0.25, attraction along x.
    """
    cfg = ForceConfig(k=1.0, min_distance=0.5)
    a = ChargedBody(charge=+1.0, position=(0, 0, 0))
    b = ChargedBody(charge=-1.0, position=(2, 0, 0))
    reg = _registry(a, b)

    fa = net_force(a, reg, cfg)
    fb = net_force(b, reg, cfg)

    assert np.allclose(fa, [0.25, 0.0, 0.0])
    assert np.allclose(fb, [-0.25, 0.0, 0.0])


def test_pair_forces_are_equal_and_opposite():
    cfg = ForceConfig(k=3.0, max_force=1e9)
    a = ChargedBody(charge=+2.0, position=(0.3, -1.2, 0.7))
    b = ChargedBody(charge=-3.5, position=(-1.1, 0.4, 2.0))
    reg = _registry(a, b)

    fa = net_force(a, reg, cfg)
    fb = net_force(b, reg, cfg)

    assert np.linalg.norm(fa) > 0
    assert np.allclose(fa, -fb)


@pytest.mark.parametrize("qa, qb, attract", [
    (+1.0, +1.0, False),
    (-1.0, -1.0, False),
    (+1.0, -1.0, True),
    (-2.0, +0.5, True),
])
def test_sign_policy(qa, qb, attract):
    """Opposite signs attract (force along A→B), like signs repel."""
    cfg = ForceConfig(k=1.0)
    a = ChargedBody(charge=qa, position=(0, 0, 0))
    b = ChargedBody(charge=qb, position=(1.0, 2.0, -1.0))
    reg = _registry(a, b)

    f = net_force(a, reg, cfg)
    towards_b = b.position - a.position
    if attract:
        assert np.dot(f, towards_b) > 0
    else:
        assert np.dot(f, towards_b) < 0


def test_zero_charge_gets_and_gives_no_force():
    cfg = ForceConfig(k=1.0)
    neutral = ChargedBody(charge=0.0, position=(0, 0, 0))
    charged = ChargedBody(charge=5.0, position=(1, 0, 0))
    reg = _registry(neutral, charged)

    assert np.allclose(net_force(neutral, reg, cfg), 0.0)
    assert np.allclose(net_force(charged, reg, cfg), 0.0)


@pytest.mark.parametrize("separation", [0.5, 0.4, 0.1, 1e-6])
def test_distance_floor(separation):
    """Below min_distance the magnitude stays at k*|q1 q2|/min_distance²."""
    cfg = ForceConfig(k=1.0, min_distance=0.5, max_force=1e9)
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=1.0, position=(separation, 0, 0))
    reg = _registry(a, b)

    f = net_force(a, reg, cfg)
    assert np.isclose(np.linalg.norm(f), 1.0 / 0.25)
    assert f[0] < 0  # repelled away from b


def test_exact_overlap_uses_fixed_axis():
    """Coincident bodies are pushed apart along ±x with equal and opposite forces."""
    cfg = ForceConfig(k=1.0, min_distance=0.5)
    a = ChargedBody(charge=1.0, position=(1, 1, 1))
    b = ChargedBody(charge=1.0, position=(1, 1, 1))
    reg = _registry(a, b)

    fa = net_force(a, reg, cfg)
    fb = net_force(b, reg, cfg)

    assert np.all(np.isfinite(fa))
    assert np.allclose(fa, [-4.0, 0.0, 0.0])
    assert np.allclose(fb, [4.0, 0.0, 0.0])


def test_force_cap_preserves_direction():
    """Three close attractors exceed max_force; result has max_force magnitude."""
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    others = [
        ChargedBody(charge=-1.0, position=(0.6, 0, 0)),
        ChargedBody(charge=-1.0, position=(0, 0.7, 0)),
        ChargedBody(charge=-1.0, position=(0, 0, 0.8)),
    ]
    reg = _registry(a, *others)

    raw = net_force(a, reg, ForceConfig(k=100.0, max_force=1e12))
    capped = net_force(a, reg, ForceConfig(k=100.0, max_force=5.0))

    assert np.linalg.norm(raw) > 5.0
    assert np.isclose(np.linalg.norm(capped), 5.0)
    assert np.allclose(capped / 5.0, raw / np.linalg.norm(raw))


def test_force_below_cap_is_untouched():
    cfg = ForceConfig(k=1.0, max_force=50.0)
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=1.0, position=(0, 0, 4))
    reg = _registry(a, b)

    assert np.allclose(net_force(a, reg, cfg), [0.0, 0.0, -1.0 / 16.0])


def test_static_body_gets_zero_but_still_acts():
    cfg = ForceConfig(k=1.0)
    anchor = ChargedBody(charge=-1.0, position=(0, 0, 0), is_static=True)
    mover = ChargedBody(charge=1.0, position=(0, 2, 0))
    reg = _registry(anchor, mover)

    assert np.array_equal(net_force(anchor, reg, cfg), np.zeros(3))
    assert np.allclose(net_force(mover, reg, cfg), [0.0, -0.25, 0.0])


def test_lone_body_feels_nothing():
    a = ChargedBody(charge=3.0, position=(4, 5, 6))
    assert np.allclose(net_force(a, _registry(a)), 0.0)


def test_net_force_accepts_plain_list():
    cfg = ForceConfig(k=1.0)
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=-1.0, position=(2, 0, 0))
    assert np.allclose(net_force(a, [a, b], cfg), [0.25, 0.0, 0.0])


def test_net_forces_keyed_by_id():
    cfg = ForceConfig(k=1.0)
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=-1.0, position=(2, 0, 0))
    s = ChargedBody(charge=1.0, position=(0, 5, 0), is_static=True)
    reg = _registry(a, b, s)

    forces = net_forces(reg, cfg)

    assert set(forces) == {a.id, b.id, s.id}
    assert np.allclose(forces[s.id], 0.0)
    assert np.allclose(forces[a.id], net_force(a, reg, cfg))
    assert not reg.in_pass


def test_net_forces_on_plain_list_keyed_by_index():
    """Unregistered bodies share id -1, so a list is keyed by position."""
    cfg = ForceConfig(k=1.0)
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=-1.0, position=(2, 0, 0))

    forces = net_forces([a, b], cfg)

    assert set(forces) == {0, 1}
    assert np.allclose(forces[0], [0.25, 0.0, 0.0])
    assert np.allclose(forces[1], [-0.25, 0.0, 0.0])
    assert a.id == b.id == -1


def test_net_force_does_not_mutate_bodies():
    a = ChargedBody(charge=1.0, position=(0, 0, 0))
    b = ChargedBody(charge=-1.0, position=(1, 0, 0))
    reg = _registry(a, b)
    before = (a.position.copy(), a.force.copy(), b.position.copy())

    net_force(a, reg)

    assert np.array_equal(a.position, before[0])
    assert np.array_equal(a.force, before[1])
    assert np.array_equal(b.position, before[2])


@pytest.mark.parametrize("kwargs", [
    {"min_distance": 0.0},
    {"min_distance": -1.0},
    {"max_force": 0.0},
])
def test_force_config_validation(kwargs):
    with pytest.raises(ValueError):
        ForceConfig(**kwargs)


def test_boundary_force_outside_sphere():
    """Overshoot of 10 with stiffness 10 gives |F| = 100 towards the origin."""
    body = ChargedBody(charge=1.0, position=(0, 0, 60))
    f = boundary_force(body, BoundaryConfig(radius=50.0, stiffness=10.0))
    assert np.allclose(f, [0.0, 0.0, -100.0])


def test_boundary_force_inside_sphere():
    body = ChargedBody(charge=1.0, position=(30, 30, 0))
    assert np.array_equal(boundary_force(body, BoundaryConfig(radius=50.0)), np.zeros(3))


def test_boundary_config_validation():
    with pytest.raises(ValueError):
        BoundaryConfig(radius=-1.0)
    with pytest.raises(ValueError):
        BoundaryConfig(stiffness=-0.1)


def test_linear_drag():
    body = ChargedBody(charge=1.0, velocity=(2.0, 0.0, -1.0))
    apply_linear_drag(body, 0.5)
    assert np.allclose(body.force, [-1.0, 0.0, 0.5])

    static = ChargedBody(charge=1.0, velocity=(2.0, 0.0, 0.0), is_static=True)
    apply_linear_drag(static, 0.5)
    assert np.allclose(static.force, 0.0)
