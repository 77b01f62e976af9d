"""Command that builds a 2-D Sod shock tube and writes it to CSV."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .init import init_sod_2d_3
from .output import write_csv

DEFAULT_OUTPUT = "output_0000.csv"
DEFAULT_MASS = 0.001

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _lenient_float(text: str) -> float:
    """Parse the leading number of ``text``, giving 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def _parse_args(argv: Sequence[str]) -> tuple[str, float]:
    output = DEFAULT_OUTPUT
    mass = DEFAULT_MASS
    args = iter(argv)
    for arg in args:
        if arg not in ("-o", "-m"):
            continue
        value = next(args, None)
        if value is None:
            break
        if arg == "-o":
            output = value
        else:
            mass = _lenient_float(value)
    return output, mass


def main(argv: Sequence[str] | None = None) -> int:
    """Build the initial condition, write it out and report; return an exit code.

    Options: ``-o FILE`` sets the output file, ``-m MASS`` the particle mass.
    """
    if argv is None:
        argv = sys.argv[1:]
    output, mass = _parse_args(argv)

    print("====================================")
    print("   Starting SPH simulation...")
    print("====================================")

    if mass <= 0.0:
        print(f"Error: particle mass must be positive, got {mass:f}", file=sys.stderr)
        return 1

    try:
        sph = init_sod_2d_3(1.0, 1.0, mass)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        write_csv(sph, output)
    except OSError:
        print(f"Error: cannot open file {output}", file=sys.stderr)
        return 1

    print("\nInitialisation finished ...")
    print(f"Output file: {output}")
    print(f"Particle mass: {mass:f}")

    sph.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())