# sphsod

A small two-dimensional smoothed particle hydrodynamics (SPH) code for
ideal gases, with initial conditions for the Sod shock tube.

## What it provides

- `sphsod.system`: the `Particle` and `SPHSystem` dataclasses and
  `allocate_sph_system(n)`, which builds a system of `n` zeroed particles
  with a CFL number of 0.25 and artificial-viscosity parameters
  `epsilon = 0.01`, `alpha = 1.0`, `beta = 2.0`. `SPHSystem.n` is the
  particle count; `init_viscosity()` restores the viscosity parameters and
  `clear()` drops all particles and zeroes every parameter. A non-positive
  `n` raises `ValueError`.
- `sphsod.kernel.cubic_spline_kernel_2d(r, h)`: the 2D cubic spline kernel
  with compact support of radius `h`, returning a `KernelValue` named tuple
  `(w, dwdr, dwdh)`; all three are zero for `r > h`.
- `sphsod.density.compute_density(sph)`: gather-style density summation,
  setting `rho` and `drho_dh` of every particle (each particle counts
  itself).
- `sphsod.force`: `compute_pressure_soundspeed_factor(sph)` sets pressure,
  sound speed and the grad-h correction factor; `compute_force(sph)` resets
  and accumulates `ax`, `ay` and `dudt` from pairwise pressure forces and an
  artificial viscosity that acts only on approaching pairs. Each pair is
  visited once; the second particle of a pair receives the mirrored
  pressure acceleration (not the viscous one) and its own heating terms.
- `sphsod.init`: initial conditions.
  - `init_uniform_box(sph, nx, ny)` and `init_sod_2d(sph, nx, ny)` fill an
    existing system on a regular grid over the unit square; both check the
    particle count with `check_particle_number`, which raises `ValueError`
    on an empty system or a count other than `nx * ny`.
  - `calculate_position(n, x_min, x_max, y_min, y_max, tail)` returns the
    x and y lists of `n` points laid out column by column, with the
    remainder in the column on the `"l"` or `"r"` side.
  - `init_sod_2d_2(x, y, mass)` and `init_sod_2d_3(x_max, y_max,
    target_mass)` return a new Sod tube system in an `x` by `y` box. The
    first places particles with `calculate_position` and leaves their
    masses at zero; the second uses a centred square lattice in each half,
    gives every particle `target_mass`, and numbers the ids from 1.
- `sphsod.integrator`: `compute_timestep(sph)` (CFL step `min(cfl * h / cs)`)
  and `compute_timestep_signal_velocity(sph)` (pairwise signal velocity
  within `2 h`, raising `ValueError` if no valid step results), plus
  `step_euler` and `step_leapfrog_kdk`, each taking the system, a time-step
  function and a force function. Both recompute density, pressure and
  sound speed before calling the force function, and keep the internal
  energy at or above `1e-10`.
- `sphsod.output.write_csv(sph, filename)`: writes the columns
  `id,x,y,vx,vy,ax,ay,m,rho,P,u,h,cs`, the values in scientific notation
  with ten decimals.

The pressure and sound speed computed in `sphsod.force` use an adiabatic
index of 5/3; the initial conditions in `sphsod.init` set `u` and `cs`
with an index of 1.4. Density, force and signal-velocity evaluation visit
every pair of particles, so the cost grows with the square of the particle
count.

## Installation

```
pip install .
```

## Command line

Set up the Sod shock tube on a unit square (with `init_sod_2d_3`) and write
its initial state:

```
sod-2d -o output_0000.csv -m 0.001
```

`-o` names the output file (default `output_0000.csv`) and `-m` sets the
mass of each particle (default `0.001`). A non-positive mass, or an output
file that cannot be opened, makes the command report an error and exit
with status 1.

## Library use

```python
from sphsod.init import init_sod_2d_3
from sphsod.density import compute_density
from sphsod.force import compute_pressure_soundspeed_factor, compute_force
from sphsod.integrator import compute_timestep, step_leapfrog_kdk
from sphsod.output import write_csv

sph = init_sod_2d_3(1.0, 1.0, 0.001)
compute_density(sph)
compute_pressure_soundspeed_factor(sph)
compute_force(sph)

sph.t_end = 0.01
while sph.time < sph.t_end:
    step_leapfrog_kdk(sph, compute_timestep, compute_force)

write_csv(sph, "output_final.csv")
```

## What it does not do

The `sod-2d` command only writes the initial state; it does not run the
time evolution. Evolving a system, and saving snapshots along the way, is
done from Python as shown above. There is no boundary treatment, no
neighbour search structure, and no plotting or animation of the output.

## Tests

```
pip install ".[test]"
pytest
```