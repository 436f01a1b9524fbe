# tspga

A genetic algorithm for the travelling salesman problem, working on
full weight matrices in the TSPLIB `EDGE_WEIGHT_SECTION` format (for
example asymmetric `.atsp` instances).

The solver keeps a population of distinct random tours. Each
generation it:

1. picks parents by roulette-wheel selection, weighted by how much
   cheaper a tour is than the most expensive tour in the population;
2. crosses pairs of parents with a one-point order crossover;
3. mutates each child with a given probability, either by swapping two
   cities or by reversing a segment of the tour;
4. merges the children into the population and keeps only the cheapest
   tours.

It runs until a time limit expires and reports the cheapest tour seen.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Command line

```
tspga graphs/ftv47.atsp
```

solves the instance in the given TSPLIB file and prints the best tour
cost found, for example:

```
Best cost: 1812
```

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `--population N` | 1000 | population size |
| `--time SECONDS` | 10.0 | running time in seconds |
| `--crossover P` | 0.8 | crossover probability; `int(P * population)` parents are drawn per generation |
| `--mutation P` | 0.01 | probability that a child is mutated |
| `--swap` | off | use swap mutation instead of segment reversal |
| `--seed N` | none | seed for the random number generator |
| `--config FILE` | see below | configuration file to take the data file from |

When no data file is given, the program reads a JSON configuration and
uses its `dataFile` entry. Without `--config` it looks for
`config.json` in the parent of the directory holding the running
program (see `tspga.cli.default_config_path`).

On a missing or malformed file, or invalid solver settings, the
program prints `error: ...` to standard error and exits with status 1.

## Configuration file

The configuration is a JSON document with a `mode` of either `test` or
`simulation` and a section of the same name:

```json
{
  "mode": "test",
  "test": {
    "dataFile": "graphs/ftv47.atsp",
    "worseAcceptanceProbability": 0.99,
    "alpha": 0.999,
    "neighbourDefinition": 1,
    "stopSeconds": 10,
    "initialPathFromNearestNeighbour": true
  }
}
```

A `simulation` section holds the same keys plus `outputFileName`,
`runsNumber` and `showProgress`. Any other mode, a missing key or a
value of the wrong type raises `tspga.config.ConfigError`.

## What it does not do

The command uses only `dataFile` from the configuration. The other
settings are read and checked, and available on `tspga.config.Config`,
but nothing acts on them: there is no repeated-run simulation mode, no
results file is written, and no progress is shown. Solver settings come
from the command-line options alone.

## Library use

```python
import random

from tspga.tsplib import load_tsplib
from tspga.solver import GeneticSolver

matrix = load_tsplib("graphs/ftv47.atsp")
solver = GeneticSolver(matrix, random.Random(42))
best = solver.run(
    pop_size=1000,
    stop_time=10.0,
    crossover_prob=0.8,
    mutation_prob=0.01,
    use_swap_mutation=False,
)
print(best.cost, best.path)
```

`run` returns a `Solution` with the cheapest tour cost (`cost`) and the
tour itself (`path`, a tuple of city indices). The building blocks are
available on their own as well:

- `initial_population(pop_size)`: distinct random permutations; raises
  `ValueError` if more are asked for than exist;
- `calc_fitness(population)`: each tour's share of the total fitness,
  summing to one (equal shares when all tours cost the same);
- `select_permutation(population, fitness)`: roulette-wheel choice;
- `crossover(parent1, parent2)`: returns two children;
- `mutation_swap(path)` and `mutation_inverse(path)`: return mutated
  copies;
- `find_cost(path)`: cost of the closed tour.

Passing your own `random.Random` makes runs reproducible.

Instances can also be parsed from text with
`tspga.tsplib.parse_tsplib`. The header is scanned for a
`DIMENSION: n` line up to `EDGE_WEIGHT_SECTION`, then `n * n` integer
weights are read; malformed input raises `tspga.tsplib.TsplibError`.
Configuration can be read with `tspga.config.load_config` from a file
or `tspga.config.parse_config` from an already decoded JSON object.

## Running the tests

```
pip install ".[test]"
pytest
```