"""Reading of explicit weight matrices in the TSPLIB format."""

from __future__ import annotations

import re
from os import PathLike

_DIMENSION = re.compile(r"DIMENSION:\s*([+-]?\d+)")


class TsplibError(ValueError):
    """Raised when a TSPLIB file cannot be read or is malformed."""


def parse_tsplib(text: str) -> list[list[int]]:
    """Return the square weight matrix held in TSPLIB text.

    The header is scanned for a ``DIMENSION:`` line until the
    ``EDGE_WEIGHT_SECTION`` marker; the matrix is then read row by row.
    """
    lines = iter(text.splitlines())
    size = 0
    for line in lines:
        if line.startswith("DIMENSION"):
            match = _DIMENSION.match(line)
            if match:
                size = int(match.group(1))
        elif line.strip() == "EDGE_WEIGHT_SECTION":
            break

    if size < 0:
        raise TsplibError(f"invalid dimension: {size}")

    tokens = " ".join(lines).split()
    needed = size * size
    if len(tokens) < needed:
        raise TsplibError(
            f"expected {needed} weights for dimension {size}, found {len(tokens)}"
        )
    try:
        weights = [int(token) for token in tokens[:needed]]
    except ValueError as exc:
        raise TsplibError(f"invalid weight in edge weight section: {exc}") from exc
    return [weights[row * size:(row + 1) * size] for row in range(size)]


def load_tsplib(path: str | PathLike[str]) -> list[list[int]]:
    """Read the TSPLIB file at path and return its weight matrix."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise TsplibError(f"cannot open file {path!s}: {exc}") from exc
    return parse_tsplib(text)