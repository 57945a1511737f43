"""
Demonstration program: sum two constant matrices and print the result.

Usage:
    python -m pymatrix
    python -m pymatrix --rows 3 --cols 4 --left 0.5 --right 1.5

Each row of the sum is printed as its elements, each followed by ', '.
"""

import argparse
import sys

from pymatrix.core.exceptions import PyMatrixError
from pymatrix.matrix import Matrix


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m pymatrix',
        description='Add two constant-filled matrices and print the sum',
    )
    parser.add_argument('--rows', type=int, default=10, help='Number of rows (default: 10)')
    parser.add_argument('--cols', type=int, default=10, help='Number of columns (default: 10)')
    parser.add_argument('--left', type=float, default=1.0, help='Fill value of the first matrix')
    parser.add_argument('--right', type=float, default=2.0, help='Fill value of the second matrix')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        total = Matrix(args.rows, args.cols, args.left) + Matrix(args.rows, args.cols, args.right)
    except PyMatrixError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for line in total.format_rows():
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
