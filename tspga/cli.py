"""Command line entry point: solve a TSPLIB instance with the genetic algorithm."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Sequence

from tspga.config import ConfigError, load_config
from tspga.solver import GeneticSolver
from tspga.tsplib import TsplibError, load_tsplib


def default_config_path() -> Path:
    """Location of config.json: the parent of the directory holding the program."""
    program = Path(sys.argv[0]).resolve()
    return program.parent.parent / "config.json"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tspga",
        description="Find a short tour for a TSPLIB instance with a genetic algorithm.",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        help="TSPLIB file; when omitted, the data file named in the configuration is used",
    )
    parser.add_argument("--config", type=Path, help="configuration file (JSON)")
    parser.add_argument("--population", type=int, default=1000, help="population size")
    parser.add_argument("--time", type=float, default=10.0, help="running time in seconds")
    parser.add_argument("--crossover", type=float, default=0.8, help="crossover probability")
    parser.add_argument("--mutation", type=float, default=0.01, help="mutation probability")
    parser.add_argument(
        "--swap", action="store_true", help="use swap mutation instead of inversion"
    )
    parser.add_argument("--seed", type=int, help="seed for the random number generator")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the solver and print the best cost found."""
    args = _parser().parse_args(argv)
    try:
        data_file = args.data_file
        if data_file is None:
            config = load_config(args.config or default_config_path())
            data_file = config.data_file
        matrix = load_tsplib(data_file)
        solver = GeneticSolver(matrix, random.Random(args.seed))
        solution = solver.run(
            args.population, args.time, args.crossover, args.mutation, args.swap
        )
    except (ConfigError, TsplibError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Best cost: {solution.cost}")
    return 0


if __name__ == "__main__":
    sys.exit(main())