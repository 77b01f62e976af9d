"""Particle and system state for 2-D smoothed particle hydrodynamics."""

from __future__ import annotations

from dataclasses import dataclass, field

DIM = 2

# Adiabatic index of a monatomic ideal gas.
GAMMA = 1.666666666666667

DEFAULT_CFL = 0.25
DEFAULT_EPSILON = 0.01
DEFAULT_ALPHA = 1.0


@dataclass
class Particle:
    """A single SPH particle with its kinematic and thermodynamic state."""

    id: int = 0
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    dudt: float = 0.0
    mass: float = 0.0
    rho: float = 0.0
    pressure: float = 0.0
    u: float = 0.0
    h: float = 0.0
    cs: float = 0.0
    drho_dh: float = 0.0
    factor: float = 0.0


@dataclass
class SPHSystem:
    """A collection of particles together with time and viscosity settings."""

    particles: list[Particle] = field(default_factory=list)
    time: float = 0.0
    dt: float = 0.0
    t_end: float = 0.0
    cfl: float = DEFAULT_CFL
    epsilon: float = DEFAULT_EPSILON
    alpha: float = DEFAULT_ALPHA
    beta: float = 2.0 * DEFAULT_ALPHA

    @property
    def n(self) -> int:
        """Number of particles in the system."""
        return len(self.particles)

    def init_viscosity(self) -> None:
        """Set the artificial-viscosity parameters to their standard values."""
        self.epsilon = DEFAULT_EPSILON
        self.alpha = DEFAULT_ALPHA
        self.beta = 2.0 * self.alpha

    def clear(self) -> None:
        """Drop all particles and reset every parameter to zero."""
        self.particles = []
        self.time = 0.0
        self.dt = 0.0
        self.t_end = 0.0
        self.cfl = 0.0
        self.epsilon = 0.0
        self.alpha = 0.0
        self.beta = 0.0


def allocate_sph_system(n: int) -> SPHSystem:
    """Create a system of ``n`` zeroed particles with default parameters."""
    if n <= 0:
        raise ValueError(f"N must be positive. N = {n}")
    sph = SPHSystem(
        particles=[Particle(id=i) for i in range(n)],
        time=0.0,
        dt=0.0,
        t_end=0.0,
        cfl=DEFAULT_CFL,
    )
    sph.init_viscosity()
    return sph