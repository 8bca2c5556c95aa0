"""Abelian sandpile model on a grid that grows as sand spreads."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from toolbench.sandpile_options import SandpileOptions

MAX_STABLE = 3
TOPPLE_AMOUNT = 4

Grain = Tuple[int, int, int]


@dataclass
class Sandpile:
    """A rectangular grid of sand heights, indexed as ``grid[row][column]``."""

    grid: List[List[int]] = field(default_factory=lambda: [[0]])

    @classmethod
    def from_grains(cls, grains: Iterable[Grain]) -> "Sandpile":
        """Build the smallest grid holding every ``(x, y, count)`` triple.

        Rows run along y and columns along x; a later triple for the same
        cell replaces an earlier one.
        """
        triples = list(grains)
        if not triples:
            raise ValueError("a sandpile needs at least one cell")
        for x, y, count in triples:
            if count < 0:
                raise ValueError(f"negative sand count at ({x}, {y}): {count}")
        min_x = min(x for x, _, _ in triples)
        max_x = max(x for x, _, _ in triples)
        min_y = min(y for _, y, _ in triples)
        max_y = max(y for _, y, _ in triples)
        grid = [[0] * (max_x - min_x + 1) for _ in range(max_y - min_y + 1)]
        for x, y, count in triples:
            grid[y - min_y][x - min_x] = count
        return cls(grid)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def unstable_count(self) -> int:
        """Number of cells holding more sand than a cell can keep."""
        return sum(value > MAX_STABLE for row in self.grid for value in row)

    @property
    def total(self) -> int:
        return sum(map(sum, self.grid))

    def is_stable(self) -> bool:
        return self.unstable_count == 0

    def step(self) -> None:
        """Topple every unstable cell once, growing the grid where needed."""
        grid = self.grid
        pad_top = any(value > MAX_STABLE for value in grid[0])
        pad_bottom = any(value > MAX_STABLE for value in grid[-1])
        pad_left = any(row[0] > MAX_STABLE for row in grid)
        pad_right = any(row[-1] > MAX_STABLE for row in grid)

        width = len(grid[0]) + pad_left + pad_right
        grown: List[List[int]] = []
        if pad_top:
            grown.append([0] * width)
        grown.extend([0] * pad_left + row + [0] * pad_right for row in grid)
        if pad_bottom:
            grown.append([0] * width)

        before = [row[:] for row in grown]
        for i, row in enumerate(before[1:-1], start=1):
            for j, value in enumerate(row[1:-1], start=1):
                if value > MAX_STABLE:
                    grown[i][j] -= TOPPLE_AMOUNT
                    grown[i + 1][j] += 1
                    grown[i - 1][j] += 1
                    grown[i][j + 1] += 1
                    grown[i][j - 1] += 1
        self.grid = grown


def load_grains(path) -> List[Grain]:
    """Read whitespace-separated ``x y count`` triples from a file.

    A trailing incomplete triple is ignored; a token that is not an
    integer raises ValueError.
    """
    tokens = Path(path).read_text().split()
    numbers = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer in {path}: {token!r}") from None
    usable = len(numbers) - len(numbers) % 3
    return [tuple(numbers[k:k + 3]) for k in range(0, usable, 3)]


def simulate(
    options: SandpileOptions,
    on_snapshot: Optional[Callable[[Sandpile, int], None]] = None,
) -> Tuple[Sandpile, int]:
    """Run the model from ``options.input_path``.

    One step always runs; further steps run while the pile is unstable and
    the iteration limit allows. Every ``options.freq`` steps the live pile
    is passed to ``on_snapshot`` with a running snapshot number. Returns the
    final pile and the number of snapshots taken.
    """
    if options.input_path is None:
        raise ValueError("no input file given")
    pile = Sandpile.from_grains(load_grains(options.input_path))
    limit = options.max_iter if options.max_iter > 0 else None

    pile.step()
    steps = 1
    snapshots = 0
    while not pile.is_stable() and (limit is None or steps < limit):
        if options.freq > 0 and steps % options.freq == 0:
            snapshots += 1
            if on_snapshot is not None:
                on_snapshot(pile, snapshots)
        pile.step()
        steps += 1
    return pile, snapshots