"""
Command-line demonstration of the Matrix container.

Builds two value-initialized matrices A and B, adds them, compares the
sum with a matrix C filled with the expected value, and prints the
comparison outcome followed by A, the sum and C.

Usage:
    python -m yamatrix                      # 2x2, 4 + 8
    python -m yamatrix --rows 3 --cols 2 --a 1.5 --b 2
    python -m yamatrix --dtype float
"""

import argparse
import sys
from typing import Sequence, TextIO

import numpy as np

from yamatrix.core.exceptions import YamatrixError
from yamatrix.matrix import Matrix

DTYPES = {
    'int': np.int64,
    'float': np.float64,
}


def _number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='yamatrix',
        description='Add two constant matrices and check the result',
    )
    parser.add_argument('--rows', type=int, default=2, help='number of rows (default: 2)')
    parser.add_argument('--cols', type=int, default=2, help='number of columns (default: 2)')
    parser.add_argument('--a', type=_number, default=4, help='fill value of A (default: 4)')
    parser.add_argument('--b', type=_number, default=8, help='fill value of B (default: 8)')
    parser.add_argument(
        '--dtype', choices=sorted(DTYPES), default=None,
        help='element type (default: inferred from the fill values)',
    )
    return parser


def run(rows: int, cols: int, a_val, b_val, dtype=None, out: TextIO | None = None) -> bool:
    """
    Run the demonstration and write its report to ``out``.

    Returns:
        Whether A + B equals the expected matrix C
    """
    out = sys.stdout if out is None else out
    if dtype is None and isinstance(a_val, float) != isinstance(b_val, float):
        dtype = np.float64

    a = Matrix(rows, cols, a_val, dtype=dtype)
    b = Matrix(rows, cols, b_val, dtype=dtype)
    c = Matrix(rows, cols, a_val + b_val, dtype=dtype)

    res = a.add(b)
    matches = res == c

    out.write(f"{matches}\n")
    a.write_to(out)
    out.write("\nResult:\n")
    res.write_to(out)
    out.write("\nC:\n")
    c.write_to(out)
    out.write("\n")
    return matches


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    dtype = DTYPES[args.dtype] if args.dtype else None
    try:
        run(args.rows, args.cols, args.a, args.b, dtype=dtype, out=sys.stdout)
    except YamatrixError as e:
        print(f"yamatrix: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
