"""Cubic spline smoothing kernel in two dimensions."""

from __future__ import annotations

import math
from typing import NamedTuple


class KernelValue(NamedTuple):
    """Kernel weight and its derivatives with respect to r and h."""

    w: float
    dwdr: float
    dwdh: float


_OUTSIDE = KernelValue(0.0, 0.0, 0.0)


def cubic_spline_kernel_2d(r: float, h: float) -> KernelValue:
    """Evaluate the 2-D cubic spline kernel with compact support of radius ``h``.

    Returns the weight W together with dW/dr and dW/dh.  Outside the support
    (q = r/h > 1) all three are zero.
    """
    q = r / h
    norm = 40.0 / (7.0 * math.pi * h * h)
    norm_dw = norm / h

    if 0.0 <= q <= 0.5:
        w = norm * (1.0 - 6.0 * q * q + 6.0 * q * q * q)
        dwdr = norm_dw * (-12.0 * q + 18.0 * q * q)
    elif 0.5 < q <= 1.0:
        diff = 1.0 - q
        w = norm * 2.0 * diff * diff * diff
        dwdr = norm_dw * (-6.0 * diff * diff)
    else:
        return _OUTSIDE

    # dW/dh = (-2/h) W - q dW/dr, from W = k(h) P(r/h) with k ~ 1/h^2.
    dwdh = (-2.0 / h) * w - q * dwdr
    return KernelValue(w, dwdr, dwdh)