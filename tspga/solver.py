"""Genetic algorithm for the travelling salesman problem."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from itertools import accumulate
from math import factorial
from typing import Sequence


@dataclass(frozen=True)
class Solution:
    """A tour and its total cost."""

    cost: int
    path: tuple[int, ...]


class GeneticSolver:
    """Searches for a short closed tour over a weight matrix."""

    def __init__(self, matrix: Sequence[Sequence[int]], rng: random.Random | None = None):
        self.matrix = [list(row) for row in matrix]
        self.size = len(self.matrix)
        if any(len(row) != self.size for row in self.matrix):
            raise ValueError("weight matrix must be square")
        self.rng = rng if rng is not None else random.Random()
        self.population: list[list[int]] = []

    def initial_population(self, pop_size: int) -> list[list[int]]:
        """Build pop_size distinct random permutations of the cities."""
        if pop_size < 1:
            raise ValueError("population size must be positive")
        if pop_size > factorial(self.size):
            raise ValueError(
                f"cannot draw {pop_size} distinct tours over {self.size} cities"
            )
        seen: set[tuple[int, ...]] = set()
        population: list[list[int]] = []
        perm = list(range(self.size))
        while len(population) < pop_size:
            self.rng.shuffle(perm)
            key = tuple(perm)
            if key not in seen:
                seen.add(key)
                population.append(list(perm))
        self.population = population
        return population

    def calc_fitness(self, population: Sequence[Sequence[int]]) -> list[float]:
        """Return each tour's share of the total fitness.

        A tour's fitness is how much cheaper it is than the most expensive
        tour; the shares sum to one. When all tours cost the same, every
        tour gets an equal share.
        """
        if not population:
            raise ValueError("population is empty")
        costs = [self.find_cost(path) for path in population]
        worst = max(costs)
        fitness = [worst - cost for cost in costs]
        total = sum(fitness)
        if total == 0:
            return [1.0 / len(population)] * len(population)
        return [value / total for value in fitness]

    def select_permutation(
        self, population: Sequence[Sequence[int]], fitness: Sequence[float]
    ) -> list[int]:
        """Pick a tour with probability proportional to its fitness share."""
        if not population:
            raise ValueError("population is empty")
        draw = self.rng.random()
        for path, bound in zip(population, accumulate(fitness)):
            if draw < bound:
                return list(path)
        return list(population[-1])

    def crossover(
        self, parent1: Sequence[int], parent2: Sequence[int]
    ) -> tuple[list[int], list[int]]:
        """One-point ordered crossover producing two children."""
        if self.size < 2:
            raise ValueError("crossover needs at least two cities")
        index = self.rng.randint(1, self.size - 1)

        def breed(head_parent: Sequence[int], tail_parent: Sequence[int]) -> list[int]:
            head = list(head_parent[:index])
            taken = set(head)
            return head + [city for city in tail_parent if city not in taken]

        return breed(parent1, parent2), breed(parent2, parent1)

    def _two_positions(self) -> tuple[int, int]:
        if self.size < 2:
            raise ValueError("mutation needs at least two cities")
        first, second = self.rng.sample(range(self.size), 2)
        return first, second

    def mutation_swap(self, path: Sequence[int]) -> list[int]:
        """Return a copy of path with two random cities exchanged."""
        first, second = self._two_positions()
        mutated = list(path)
        mutated[first], mutated[second] = mutated[second], mutated[first]
        return mutated

    def mutation_inverse(self, path: Sequence[int]) -> list[int]:
        """Return a copy of path with a random segment reversed."""
        low, high = sorted(self._two_positions())
        mutated = list(path)
        mutated[low:high + 1] = reversed(mutated[low:high + 1])
        return mutated

    def find_cost(self, path: Sequence[int]) -> int:
        """Cost of the closed tour that visits path and returns to its start."""
        if not path:
            raise ValueError("path is empty")
        following = list(path[1:]) + [path[0]]
        return sum(self.matrix[a][b] for a, b in zip(path, following))

    def run(
        self,
        pop_size: int,
        stop_time: float,
        crossover_prob: float,
        mutation_prob: float,
        use_swap_mutation: bool,
    ) -> Solution:
        """Evolve a population for stop_time seconds and return the best tour."""
        population = self.initial_population(pop_size)
        fitness = self.calc_fitness(population)
        best = min(
            (Solution(self.find_cost(path), tuple(path)) for path in population),
            key=lambda solution: solution.cost,
        )
        mutate = self.mutation_swap if use_swap_mutation else self.mutation_inverse
        parent_count = int(crossover_prob * pop_size)

        start = time.monotonic()
        while time.monotonic() - start < stop_time:
            parents = [
                self.select_permutation(population, fitness)
                for _ in range(parent_count)
            ]
            children: list[list[int]] = []
            for parent1, parent2 in zip(parents[0::2], parents[1::2]):
                children.extend(self.crossover(parent1, parent2))

            children = [
                mutate(child) if self.rng.random() < mutation_prob else child
                for child in children
            ]

            scored = sorted(
                (self.find_cost(path), path) for path in population + children
            )
            if scored[0][0] < best.cost:
                best = Solution(scored[0][0], tuple(scored[0][1]))

            population = [path for _, path in scored[:pop_size]]
            fitness = self.calc_fitness(population)

        self.population = population
        return best