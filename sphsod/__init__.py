"""Two-dimensional SPH hydrodynamics with Sod shock tube initial conditions and CSV output."""

__version__ = "0.1.0"

__all__ = ["cli", "density", "force", "init", "integrator", "kernel", "output", "system"]