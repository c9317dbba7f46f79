"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from trigomestre.config import DEFAULT_LOG_LEVEL, DEFAULT_QTY_RIGHT, DEFAULT_QTY_OBLIQUE
from trigomestre.logging_config import setup_logging
from trigomestre.model.exercises import ExerciseGenerator
from trigomestre.model.io import exercise_rows, results_text, write_csv
from trigomestre.model.solver import solve_triangle
from trigomestre.model.steps import solving_steps
from trigomestre.model.triangle import TriangleMode


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trigomestre", description="Triangle solver and exercise generator.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Solve a triangle.")
    p_solve.add_argument("mode", choices=[m.value for m in TriangleMode])
    p_solve.add_argument("values", type=float, nargs="+", help="Two or three values, by mode.")

    p_gen = sub.add_parser("generate", help="Generate a worksheet.")
    p_gen.add_argument("--right", type=int, default=DEFAULT_QTY_RIGHT)
    p_gen.add_argument("--oblique", type=int, default=DEFAULT_QTY_OBLIQUE)
    p_gen.add_argument("--seed", type=int, default=None)
    p_gen.add_argument("--steps", action="store_true", help="Print solving hints.")
    p_gen.add_argument("--csv", default=None, help="Write the solutions to this CSV file.")
    return parser


def _solve(args: argparse.Namespace) -> int:
    mode = TriangleMode(args.mode)
    needed = 2 if mode.is_right else 3
    if len(args.values) != needed:
        print(f"{mode} needs {needed} values: {', '.join(mode.inputs)}", file=sys.stderr)
        return 2

    values = list(args.values) + [0.0] * (3 - len(args.values))
    triangle = solve_triangle(mode, *values)
    if not triangle.valid:
        print(triangle.error, file=sys.stderr)
        return 1
    print(results_text(triangle))
    return 0


def _generate(args: argparse.Namespace) -> int:
    generator = ExerciseGenerator(rng=np.random.default_rng(args.seed))
    exercises = generator.generate_list(args.right, args.oblique)

    for ex in exercises:
        given = ", ".join(f"{label} = {value}" for label, value in ex.given.items())
        print(f"{ex.id}. [{ex.mode.label}] {given}")
        if args.steps:
            for step in solving_steps(ex.mode):
                print(f"     {step}")

    if args.csv:
        write_csv(exercise_rows(exercises), args.csv)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else DEFAULT_LOG_LEVEL)

    if args.command == "solve":
        return _solve(args)
    return _generate(args)


if __name__ == "__main__":
    sys.exit(main())
