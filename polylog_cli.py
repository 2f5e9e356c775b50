#!/usr/bin/env python
"""
polylog_cli.py

Evaluate the dilogarithm and trilogarithm from the command line.

Values use Python complex syntax:

    python polylog_cli.py 0.5 -1 "1+1j" 2
    python polylog_cli.py 3 --complex --order 2

Purely real values go through the real kernels (real part on the cut
x > 1) unless --complex is given, in which case the principal value,
continuous from above on the cut, is printed.
"""

import time
import argparse

import polylog
from polylog import DEFAULT_DIGITS, DEFAULT_ORDERS, POLYLOG_FUNCS


def parse_value(tok: str, force_complex: bool = False):
    """Parse a real or complex literal; real unless it has an imaginary part."""
    s = tok.strip().replace(" ", "")
    try:
        z = complex(s)
    except ValueError:
        raise SystemExit(f"cannot parse value '{tok}'")
    if z.imag == 0.0 and not force_complex and "j" not in s.lower():
        return z.real
    return z


def format_value(v, digits: int) -> str:
    if isinstance(v, complex):
        return f"({v.real:.{digits}g}{v.imag:+.{digits}g}j)"
    return f"{v:.{digits}g}"


def evaluate(orders, values, digits: int) -> list[str]:
    lines = []
    for order in orders:
        for tok, z in values:
            v = polylog.polylog(order, z)
            lines.append(f"Li{order}({tok}) = {format_value(v, digits)}")
    return lines


def main():
    p = argparse.ArgumentParser(
        "polylog-cli",
        description=(
            "Real and complex dilogarithm/trilogarithm evaluator.\n"
            "Real arguments use the real kernels, complex ones the principal branch."
        ),
    )

    p.add_argument(
        "values",
        nargs="+",
        help="Arguments, e.g. 0.5 -2 1+1j.",
    )
    p.add_argument(
        "--order",
        type=int,
        nargs="+",
        default=list(DEFAULT_ORDERS),
        help="Polylogarithm orders to evaluate.",
    )
    p.add_argument(
        "--complex",
        action="store_true",
        help="Evaluate real arguments with the complex kernels.",
    )
    p.add_argument(
        "--digits",
        type=int,
        default=DEFAULT_DIGITS,
        help="Significant digits in the output.",
    )
    p.add_argument(
        "--time",
        action="store_true",
        help="Print evaluation time.",
    )

    args = p.parse_args()

    for order in args.order:
        if order not in POLYLOG_FUNCS:
            raise SystemExit(f"unsupported order {order}, choose from {sorted(POLYLOG_FUNCS)}")
    if args.digits < 1:
        raise SystemExit("--digits must be positive")

    values = [(tok, parse_value(tok, args.complex)) for tok in args.values]

    t0 = time.perf_counter()
    lines = evaluate(args.order, values, args.digits)
    dt = time.perf_counter() - t0

    for line in lines:
        print(line)
    if args.time:
        print(f"eval time: {dt:.6f}s")


if __name__ == "__main__":
    main()
