"""Initial particle configurations, including 2-D Sod shock-tube setups."""

from __future__ import annotations

import math

from .system import SPHSystem, allocate_sph_system

# Adiabatic index used by the initial conditions (diatomic gas).
_GAMMA_INIT = 1.4

_RHO_L, _P_L = 1.0, 1.0
_RHO_R, _P_R = 0.125, 0.1
_ETA = 1.3


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _specific_energy(pressure: float, rho: float) -> float:
    return pressure / ((_GAMMA_INIT - 1.0) * rho)


def _sound_speed(pressure: float, rho: float) -> float:
    return math.sqrt(_GAMMA_INIT * pressure / rho)


def check_particle_number(sph: SPHSystem | None, nx: int, ny: int, func_name: str) -> int:
    """Return ``nx * ny`` after checking that it equals the particle count.

    Raises ValueError if the system holds no particles or the counts differ.
    """
    if sph is None or not sph.particles:
        raise ValueError(f"Error in {func_name}: SPH system is not allocated.")
    n_expected = nx * ny
    if sph.n != n_expected:
        raise ValueError(
            f"Error in {func_name}: sph->N = {sph.n}, but nx * ny = {n_expected}"
        )
    return n_expected


def init_uniform_box(sph: SPHSystem, nx: int, ny: int) -> None:
    """Lay the particles on a regular ``nx`` by ``ny`` grid over the unit square."""
    n_expected = check_particle_number(sph, nx, ny, "init_uniform_box")

    xmin, xmax = 0.0, 1.0
    ymin, ymax = 0.0, 1.0
    dx = (xmax - xmin) / (nx - 1)
    dy = (ymax - ymin) / (ny - 1)

    mass = 1.0 / n_expected
    rho0 = 1.0
    p0 = 1.0
    u0 = 1.0
    h0 = 1.3 * dx
    cs0 = _sound_speed(p0, rho0)

    for iy in range(ny):
        for ix in range(nx):
            pid = iy * nx + ix
            p = sph.particles[pid]
            p.id = pid
            p.x = xmin + ix * dx
            p.y = ymin + iy * dy
            p.vx = 0.0
            p.vy = 0.0
            p.ax = 0.0
            p.ay = 0.0
            p.mass = mass
            p.rho = rho0
            p.pressure = p0
            p.u = u0
            p.h = h0
            p.cs = cs0


def init_sod_2d(sph: SPHSystem, nx: int, ny: int) -> None:
    """Lay a Sod shock tube on a regular grid over the unit square.

    Particles with x > 0.5 get the dense high-pressure state, the rest the
    thin low-pressure state.
    """
    check_particle_number(sph, nx, ny, "init_sod_2d")

    xmin, xmax = 0.0, 1.0
    ymin, ymax = 0.0, 1.0
    dx = (xmax - xmin) / (nx - 1)
    dy = (ymax - ymin) / (ny - 1)
    h0 = 1.3 * dx

    for iy in range(ny):
        for ix in range(nx):
            pid = iy * nx + ix
            x = xmin + ix * dx
            y = ymin + iy * dy
            p = sph.particles[pid]
            p.id = pid
            p.x = x
            p.y = y
            p.vx = 0.0
            p.vy = 0.0
            p.ax = 0.0
            p.ay = 0.0
            rho, pressure = (_RHO_L, _P_L) if x > 0.5 else (_RHO_R, _P_R)
            p.rho = rho
            p.pressure = pressure
            p.u = _specific_energy(pressure, rho)
            p.mass = rho * dx * dy
            p.h = h0
            p.cs = _sound_speed(pressure, rho)


def calculate_position(
    n: int,
    x_min: float,
    x_max: float,
    y_min: float,
    y_max: float,
    tail: str,
) -> tuple[list[float], list[float]]:
    """Place ``n`` points column by column in a rectangle.

    The grid is chosen to follow the aspect ratio of the rectangle; the column
    on the side named by ``tail`` (``"l"`` or ``"r"``) takes up the remainder
    so that exactly ``n`` points are produced.  Returns the x and y lists.
    """
    if n < 0:
        raise ValueError(f"number of points must not be negative: {n}")
    if n == 0:
        return [], []

    lx = x_max - x_min
    ly = y_max - y_min
    ratio = ly / lx

    nx = math.floor(math.sqrt(n / ratio))
    ny = math.floor(ratio * nx)
    while nx * ny < n:
        if ny < math.floor(ratio * nx):
            ny += 1
        else:
            nx += 1

    n_tail = n - (nx - 1) * ny
    if tail == "l":
        tail_column = 0
    elif tail == "r":
        tail_column = nx - 1
    else:
        tail_column = None

    dx = lx / nx
    dy = ly / ny
    xs: list[float] = []
    ys: list[float] = []
    for i in range(nx):
        cx = x_min + (i + 0.5) * dx
        if i == tail_column:
            count = max(n_tail, 0)
            step = ly / count if count else 0.0
        else:
            count, step = ny, dy
        xs.extend(cx for _ in range(count))
        ys.extend(y_min + (j + 0.5) * step for j in range(count))

    if len(xs) != n:
        raise ValueError(f"calculate position n != N ({len(xs)} != {n})")
    return xs, ys


def init_sod_2d_2(x: float, y: float, mass: float) -> SPHSystem:
    """Build a Sod shock tube in an ``x`` by ``y`` box from a particle mass.

    The particle count of each half follows from its density; positions come
    from :func:`calculate_position`.  Particle masses are left at zero.
    """
    h_l = math.sqrt(_ETA * _ETA * mass / _RHO_L)
    h_r = math.sqrt(_ETA * _ETA * mass / _RHO_R)

    x_mid = x / 2.0
    total_mass_l = _RHO_L * x_mid * y
    total_mass_r = _RHO_R * x_mid * y
    total_mass = total_mass_l + total_mass_r
    n = _round_half_away(total_mass / mass)
    n_l = _round_half_away(total_mass_l / mass)
    n_r = n - n_l

    sph = allocate_sph_system(n)

    xs_l, ys_l = calculate_position(n_l, 0.0, x_mid, 0.0, y, "l")
    xs_r, ys_r = calculate_position(n_r, x_mid, x, 0.0, y, "r")

    u_l, cs_l = _specific_energy(_P_L, _RHO_L), _sound_speed(_P_L, _RHO_L)
    u_r, cs_r = _specific_energy(_P_R, _RHO_R), _sound_speed(_P_R, _RHO_R)

    left = sph.particles[:n_l]
    right = sph.particles[n_l:]
    for p, px, py in zip(left, xs_l, ys_l):
        p.x, p.y = px, py
        p.rho, p.pressure, p.u, p.h, p.cs = _RHO_L, _P_L, u_l, h_l, cs_l
    for p, px, py in zip(right, xs_r, ys_r):
        p.x, p.y = px, py
        p.rho, p.pressure, p.u, p.h, p.cs = _RHO_R, _P_R, u_r, h_r, cs_r
    for pid, p in enumerate(sph.particles):
        p.id = pid
    return sph


def init_sod_2d_3(x_max: float, y_max: float, target_mass: float) -> SPHSystem:
    """Build a Sod shock tube on square lattices of equal-mass particles.

    Each half of the ``x_max`` by ``y_max`` box gets a lattice whose spacing
    makes the particle mass ``target_mass`` match its density; the lattice is
    centred in its half.  Particle ids run from 1 to N.
    """
    x_mid = x_max / 2.0

    dx_l = math.sqrt(target_mass / _RHO_L)
    dx_r = math.sqrt(target_mass / _RHO_R)

    nx_l = int(x_mid / dx_l)
    ny_l = int(y_max / dx_l)
    nx_r = int((x_max - x_mid) / dx_r)
    ny_r = int(y_max / dx_r)

    n = nx_l * ny_l + nx_r * ny_r
    sph = allocate_sph_system(n)

    offset_x_l = (x_mid - nx_l * dx_l) / 2.0 + dx_l / 2.0
    offset_y_l = (y_max - ny_l * dx_l) / 2.0 + dx_l / 2.0
    offset_x_r = x_mid + (x_max - x_mid - nx_r * dx_r) / 2.0 + dx_r / 2.0
    offset_y_r = (y_max - ny_r * dx_r) / 2.0 + dx_r / 2.0

    regions = (
        (nx_l, ny_l, dx_l, offset_x_l, offset_y_l, _RHO_L, _P_L),
        (nx_r, ny_r, dx_r, offset_x_r, offset_y_r, _RHO_R, _P_R),
    )
    particles = iter(sph.particles)
    pid = 0
    for nx, ny, spacing, off_x, off_y, rho, pressure in regions:
        u = _specific_energy(pressure, rho)
        cs = _sound_speed(pressure, rho)
        h = _ETA * spacing
        for i in range(nx):
            for j in range(ny):
                p = next(particles)
                pid += 1
                p.id = pid
                p.x = off_x + i * spacing
                p.y = off_y + j * spacing
                p.mass = target_mass
                p.rho = rho
                p.pressure = pressure
                p.u = u
                p.h = h
                p.cs = cs
                p.vx = 0.0
                p.vy = 0.0
    return sph