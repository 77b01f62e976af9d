import math

import pytest

from sphsod.force import compute_force, compute_pressure_soundspeed_factor
from sphsod.system import GAMMA, allocate_sph_system


def _pair(x1, v0=0.0, v1=0.0, h0=1.0, h1=1.0, m0=1.0, m1=1.0):
    sph = allocate_sph_system(2)
    p0, p1 = sph.particles
    for p, x, v, h, m in ((p0, 0.0, v0, h0, m0), (p1, x1, v1, h1, m1)):
        p.x = x
        p.vx = v
        p.h = h
        p.mass = m
        p.rho = 1.0
        p.pressure = 1.0
        p.cs = 1.0
        p.factor = 1.0
        p.u = 1.0
    return sph


def test_pressure_follows_ideal_gas():
    sph = allocate_sph_system(2)
    for p, rho, u in zip(sph.particles, (1.0, 0.125), (2.5, 2.0)):
        p.rho, p.u, p.h = rho, u, 0.1
    compute_pressure_soundspeed_factor(sph)
    for p in sph.particles:
        assert p.pressure / (p.rho * p.u) == pytest.approx(GAMMA - 1)
        assert p.cs ** 2 / p.u == pytest.approx(GAMMA * (GAMMA - 1))


def test_factor_without_h_gradient_is_unity():
    sph = allocate_sph_system(1)
    p = sph.particles[0]
    p.rho, p.u, p.h, p.drho_dh = 2.0, 1.0, 0.5, 0.0
    compute_pressure_soundspeed_factor(sph)
    assert p.factor == pytest.approx(1.0)


def test_factor_grows_with_negative_density_gradient():
    sph = allocate_sph_system(2)
    a, b = sph.particles
    for p in (a, b):
        p.rho, p.u, p.h = 1.0, 1.0, 1.0
    a.drho_dh = -0.2
    b.drho_dh = -0.6
    compute_pressure_soundspeed_factor(sph)
    assert b.factor > a.factor > 1.0


def test_static_pair_repels_symmetrically():
    sph = _pair(0.5)
    compute_force(sph)
    p0, p1 = sph.particles
    assert p0.ax < 0.0
    assert p1.ax == pytest.approx(-p0.ax)
    assert p0.ay == 0.0 and p1.ay == 0.0


def test_static_pair_has_no_heating():
    sph = _pair(0.5)
    compute_force(sph)
    assert [p.dudt for p in sph.particles] == [0.0, 0.0]


def test_momentum_conserved_for_unequal_masses_at_rest():
    sph = _pair(0.4, m0=1.0, m1=2.5)
    compute_force(sph)
    p0, p1 = sph.particles
    assert p0.mass * p0.ax + p1.mass * p1.ax == pytest.approx(0.0, abs=1e-12)


def test_far_pair_resets_accumulators():
    sph = _pair(3.0)
    for p in sph.particles:
        p.ax, p.ay, p.dudt = 5.0, -2.0, 7.0
    compute_force(sph)
    assert [(p.ax, p.ay, p.dudt) for p in sph.particles] == [(0.0, 0.0, 0.0)] * 2


def test_coincident_particles_do_not_interact():
    sph = _pair(0.0, v0=1.0, v1=-1.0)
    compute_force(sph)
    assert [(p.ax, p.dudt) for p in sph.particles] == [(0.0, 0.0)] * 2


def test_interaction_uses_larger_smoothing_length():
    sph = _pair(0.5, h0=0.4, h1=1.0)
    compute_force(sph)
    p0, p1 = sph.particles
    assert p0.ax < 0.0
    assert p1.ax == pytest.approx(-p0.ax)


def test_approaching_pair_heats_and_viscosity_adds_heat():
    inviscid = _pair(0.5, v0=1.0, v1=-1.0)
    inviscid.alpha = 0.0
    inviscid.beta = 0.0
    compute_force(inviscid)

    viscous = _pair(0.5, v0=1.0, v1=-1.0)
    compute_force(viscous)

    assert inviscid.particles[0].dudt > 0.0
    assert viscous.particles[0].dudt > inviscid.particles[0].dudt
    assert viscous.particles[1].dudt > inviscid.particles[1].dudt


def test_receding_pair_ignores_viscosity_parameters():
    a = _pair(0.5, v0=-1.0, v1=1.0)
    b = _pair(0.5, v0=-1.0, v1=1.0)
    b.alpha = 5.0
    b.beta = 10.0
    compute_force(a)
    compute_force(b)
    assert [(p.ax, p.dudt) for p in a.particles] == [(p.ax, p.dudt) for p in b.particles]
    assert a.particles[0].dudt < 0.0


def test_force_direction_follows_separation():
    sph = allocate_sph_system(2)
    p0, p1 = sph.particles
    p1.x, p1.y = 0.3, 0.3
    for p in (p0, p1):
        p.h, p.mass, p.rho, p.pressure, p.factor, p.cs = 1.0, 1.0, 1.0, 1.0, 1.0, 1.0
    compute_force(sph)
    assert p0.ax == pytest.approx(p0.ay)
    assert p0.ax < 0.0
    assert math.hypot(p1.ax, p1.ay) == pytest.approx(math.hypot(p0.ax, p0.ay))