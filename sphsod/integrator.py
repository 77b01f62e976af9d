"""Time-step selection and time integration schemes."""

from __future__ import annotations

import math
import sys
from typing import Callable

from .density import compute_density
from .force import compute_pressure_soundspeed_factor
from .system import SPHSystem

TimeStepFunction = Callable[[SPHSystem], float]
ForceFunction = Callable[[SPHSystem], None]

_U_FLOOR = 1e-10


def compute_timestep(sph: SPHSystem) -> float:
    """Return and store the CFL time step ``min(cfl * h / cs)``.

    Particles with non-positive ``h`` or ``cs`` are ignored; if none remain
    the largest finite float is returned.
    """
    dt_min = sys.float_info.max
    for p in sph.particles:
        if p.h > 0.0 and p.cs > 0.0:
            dt_min = min(dt_min, sph.cfl * p.h / p.cs)
    sph.dt = dt_min
    return dt_min


def compute_timestep_signal_velocity(sph: SPHSystem) -> float:
    """Return and store the time step limited by the pairwise signal velocity.

    For each particle the signal velocity is the largest of its own sound
    speed and ``c_i + c_j - 3 w_ij`` over neighbours within ``2 h_i``, where
    the compression term only applies to approaching pairs.  Raises
    ValueError if no valid positive finite step results.
    """
    dt_min = sys.float_info.max
    particles = sph.particles

    for p_i in particles:
        h_i = p_i.h
        vmax_i = p_i.cs
        for p_j in particles:
            if p_j is p_i:
                continue
            dx = p_i.x - p_j.x
            dy = p_i.y - p_j.y
            r = math.sqrt(dx * dx + dy * dy)
            if r < 1.0e-12 or r > 2.0 * h_i:
                continue

            dvx = p_i.vx - p_j.vx
            dvy = p_i.vy - p_j.vy
            wij = (dvx * dx + dvy * dy) / r

            vsig_ij = p_i.cs + p_j.cs
            if wij < 0.0:
                vsig_ij -= 3.0 * wij
            vmax_i = max(vmax_i, vsig_ij)

        if h_i > 0.0 and vmax_i > 0.0:
            dt_min = min(dt_min, sph.cfl * h_i / vmax_i)

    if dt_min == sys.float_info.max or not math.isfinite(dt_min) or dt_min <= 0.0:
        raise ValueError(
            f"invalid timestep in compute_timestep_signal_velocity. dt={dt_min:e}"
        )

    sph.dt = dt_min
    return dt_min


def _update_hydro(sph: SPHSystem, compute_forces: ForceFunction) -> None:
    compute_density(sph)
    compute_pressure_soundspeed_factor(sph)
    compute_forces(sph)


def step_euler(
    sph: SPHSystem,
    calculate_time_step: TimeStepFunction,
    compute_forces: ForceFunction,
) -> float:
    """Advance one explicit Euler step and return the step size used.

    Positions use the old velocities, velocities and internal energies the
    old accelerations and heating rates; the internal energy is kept at or
    above a small floor.
    """
    dt = calculate_time_step(sph)

    for p in sph.particles:
        p.x += p.vx * dt
        p.y += p.vy * dt
        p.vx += p.ax * dt
        p.vy += p.ay * dt
        p.u = max(p.u + p.dudt * dt, _U_FLOOR)

    _update_hydro(sph, compute_forces)
    sph.time += dt
    return dt


def _half_kick(sph: SPHSystem, dt: float) -> None:
    for p in sph.particles:
        p.vx += 0.5 * p.ax * dt
        p.vy += 0.5 * p.ay * dt
        p.u = max(p.u + 0.5 * p.dudt * dt, _U_FLOOR)


def step_leapfrog_kdk(
    sph: SPHSystem,
    calculate_time_step: TimeStepFunction,
    compute_forces: ForceFunction,
) -> float:
    """Advance one kick-drift-kick leapfrog step and return the step size used."""
    dt = calculate_time_step(sph)

    _half_kick(sph, dt)
    for p in sph.particles:
        p.x += p.vx * dt
        p.y += p.vy * dt
    sph.time += dt

    _update_hydro(sph, compute_forces)
    _half_kick(sph, dt)
    return dt