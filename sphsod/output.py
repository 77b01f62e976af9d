"""Writing particle data to CSV files."""

from __future__ import annotations

import os

from .system import SPHSystem

HEADER = "id,x,y,vx,vy,ax,ay,m,rho,P,u,h,cs"


def write_csv(sph: SPHSystem, filename: str | os.PathLike[str]) -> None:
    """Write one row per particle with its id and state in scientific notation."""
    with open(filename, "w", encoding="utf-8", newline="") as fp:
        fp.write(HEADER + "\n")
        for p in sph.particles:
            values = (
                p.x, p.y, p.vx, p.vy, p.ax, p.ay,
                p.mass, p.rho, p.pressure, p.u, p.h, p.cs,
            )
            fp.write(f"{p.id}," + ",".join(f"{v:.10e}" for v in values) + "\n")