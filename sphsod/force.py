"""Pressure, sound speed, accelerations and heating rates."""

from __future__ import annotations

import math
from itertools import combinations

from .kernel import cubic_spline_kernel_2d
from .system import GAMMA, Particle, SPHSystem


def compute_pressure_soundspeed_factor(sph: SPHSystem) -> None:
    """Set pressure, sound speed and the grad-h correction factor of each particle."""
    gg1 = math.sqrt(GAMMA * (GAMMA - 1))
    for p in sph.particles:
        p.pressure = (GAMMA - 1) * p.rho * p.u
        p.cs = gg1 * math.sqrt(p.u)
        p.factor = 1.0 / (1 + p.h / (2.0 * p.rho) * p.drho_dh)


def _pairwise(p_i: Particle, p_j: Particle, sph: SPHSystem) -> None:
    dx = p_i.x - p_j.x
    dy = p_i.y - p_j.y
    r = math.sqrt(dx * dx + dy * dy)
    if r < 1e-12:
        return
    if r > max(p_i.h, p_j.h):
        return

    dvx = p_i.vx - p_j.vx
    dvy = p_i.vy - p_j.vy

    k_i = cubic_spline_kernel_2d(r, p_i.h)
    k_j = cubic_spline_kernel_2d(r, p_j.h)

    press_i = p_i.factor * p_i.pressure / (p_i.rho * p_i.rho)
    press_j = p_j.factor * p_j.pressure / (p_j.rho * p_j.rho)

    # Pressure force.
    scalar_force = p_j.mass * (press_i * k_i.dwdr + press_j * k_j.dwdr)
    ax = -scalar_force * (dx / r)
    ay = -scalar_force * (dy / r)
    p_i.ax += ax
    p_i.ay += ay

    # Thermal energy evolution, pressure part.
    inner_i = dvx * (k_i.dwdr * dx / r) + dvy * (k_i.dwdr * dy / r)
    inner_j = dvx * (k_j.dwdr * dx / r) + dvy * (k_j.dwdr * dy / r)
    p_i.dudt += press_i * p_j.mass * inner_i

    # Artificial viscosity, active only for approaching pairs.
    r_dot_v = dx * dvx + dy * dvy
    if r_dot_v < 0.0:
        h_ij = (p_i.h + p_j.h) / 2.0
        mu_ij = h_ij * r_dot_v / (r * r + sph.epsilon * (h_ij * h_ij))
        c_ij = (p_i.cs + p_j.cs) / 2.0
        rho_ij = (p_i.rho + p_j.rho) / 2.0
        pi_ij = (-sph.alpha * c_ij * mu_ij + sph.beta * mu_ij * mu_ij) / rho_ij

        avg_inner = (inner_i + inner_j) / 2.0
        p_i.dudt += p_j.mass / 2.0 * pi_ij * avg_inner

        mean_dwdr = (k_i.dwdr + k_j.dwdr) / 2.0
        p_i.ax += -p_j.mass * pi_ij * (mean_dwdr * dx / r)
        p_i.ay += -p_j.mass * pi_ij * (mean_dwdr * dy / r)
        p_j.dudt += p_i.mass / 2.0 * pi_ij * avg_inner

    # Reaction on p_j: only the pressure acceleration is mirrored.
    mass_ratio = p_i.mass / p_j.mass
    p_j.ax -= ax * mass_ratio
    p_j.ay -= ay * mass_ratio
    p_j.dudt += press_j * p_i.mass * inner_j


def compute_force(sph: SPHSystem) -> None:
    """Reset and accumulate ``ax``, ``ay`` and ``dudt`` over all particle pairs."""
    for p in sph.particles:
        p.ax = 0.0
        p.ay = 0.0
        p.dudt = 0.0
    for p_i, p_j in combinations(sph.particles, 2):
        _pairwise(p_i, p_j, sph)