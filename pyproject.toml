[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tspga"
version = "0.1.0"
description = "Genetic algorithm solver for the travelling salesman problem on TSPLIB weight matrices"
requires-python = ">=3.10"
dependencies = []
keywords = ["tsp", "atsp", "travelling salesman", "genetic algorithm", "metaheuristic", "tsplib", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tspga = "tspga.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tspga"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
