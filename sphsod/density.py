"""Density summation over neighbouring particles."""

from __future__ import annotations

import math

from .kernel import cubic_spline_kernel_2d
from .system import SPHSystem


def compute_density(sph: SPHSystem) -> None:
    """Set ``rho`` and ``drho_dh`` of every particle by gather summation.

    rho_i = sum_j m_j W(r_ij, h_i), including the particle itself; only
    neighbours within h_i contribute.
    """
    particles = sph.particles
    for p_i in particles:
        rho = 0.0
        drho_dh = 0.0
        for p_j in particles:
            dx = p_i.x - p_j.x
            dy = p_i.y - p_j.y
            r = math.sqrt(dx * dx + dy * dy)
            if r <= p_i.h:
                k = cubic_spline_kernel_2d(r, p_i.h)
                rho += p_j.mass * k.w
                drho_dh += p_j.mass * k.dwdh
        p_i.rho = rho
        p_i.drho_dh = drho_dh