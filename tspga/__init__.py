"""Genetic algorithm solver for the travelling salesman problem on TSPLIB weight matrices."""

__version__ = "0.1.0"
__all__ = ["config", "tsplib", "solver", "cli"]