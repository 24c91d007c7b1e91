from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from npuzzle.errors import MalformedBoard

Pos = Tuple[int, int]
BLANK = 0

# Precomputed blank moves per board size, ordered up, down, left, right
_NEIGHBOUR_TABLES: Dict[int, Dict[Pos, Tuple[Pos, ...]]] = {}


def _neighbour_table(n: int) -> Dict[Pos, Tuple[Pos, ...]]:
    table = _NEIGHBOUR_TABLES.get(n)
    if table is None:
        table = {}
        for r in range(n):
            for c in range(n):
                moves: List[Pos] = []
                if r > 0:       moves.append((r - 1, c))
                if r < n - 1:   moves.append((r + 1, c))
                if c > 0:       moves.append((r, c - 1))
                if c < n - 1:   moves.append((r, c + 1))
                table[(r, c)] = tuple(moves)
        _NEIGHBOUR_TABLES[n] = table
    return table


def _check_cells(n: int, cells: Sequence[int]) -> None:
    if n < 2:
        raise MalformedBoard(f"Board size must be at least 2, got {n}.")
    if len(cells) != n * n:
        raise MalformedBoard(
            f"Expected {n * n} cells for a {n}×{n} board, got {len(cells)}."
        )
    labels = sorted(v for v in cells if v != BLANK)
    if len(labels) != n * n - 1:
        raise MalformedBoard(f"Expected exactly one blank, got {n * n - len(labels)}.")
    if labels != list(range(1, n * n)):
        raise MalformedBoard(
            f"Tile labels must be 1..{n * n - 1} with no repeats, got {labels}."
        )


@dataclass(frozen=True)
class Board:
    """Immutable N×N sliding-tile board (0 is the blank).

    ``cells`` holds the grid row-major; ``blank`` caches the blank's
    (row, col). Every move returns a new Board.
    """

    n: int
    cells: Tuple[int, ...]
    blank: Pos = field(compare=False)

    def __post_init__(self):
        _check_cells(self.n, self.cells)
        r, c = self.blank
        if not (0 <= r < self.n and 0 <= c < self.n) or self.cells[r * self.n + c] != BLANK:
            raise MalformedBoard(f"Blank position {self.blank} does not hold the blank.")

    # ---------- Construction ----------
    @classmethod
    def from_tiles(cls, n: int, tiles: Iterable[int], blank_position: Pos) -> "Board":
        """Build a board from the n²-1 tile labels, splicing the blank in at
        ``blank_position`` (row-major).

        Example::

            Board.from_tiles(3, [1, 2, 3, 4, 5, 6, 7, 8], (2, 2))
        """
        try:
            tiles = [int(t) for t in tiles]
        except (TypeError, ValueError):
            raise MalformedBoard(f"Tiles must be integers, got {tiles!r}") from None
        if n < 2:
            raise MalformedBoard(f"Board size must be at least 2, got {n}.")
        if len(tiles) != n * n - 1:
            raise MalformedBoard(
                f"Expected {n * n - 1} tiles for a {n}×{n} board, got {len(tiles)}."
            )
        r, c = blank_position
        if not (0 <= r < n and 0 <= c < n):
            raise MalformedBoard(
                f"Blank position {blank_position} is outside a {n}×{n} board."
            )
        idx = n * r + c
        cells = tiles[:idx] + [BLANK] + tiles[idx:]
        return cls(n=n, cells=tuple(cells), blank=(r, c))

    @classmethod
    def goal(cls, n: int) -> "Board":
        return cls.from_tiles(n, range(1, n * n), (n - 1, n - 1))

    @classmethod
    def parse(cls, text: str) -> "Board":
        """Inverse of :meth:`render`."""
        rows = [line.split() for line in text.splitlines() if line.strip()]
        n = len(rows)
        if any(len(row) != n for row in rows):
            raise MalformedBoard(f"Board text is not square: {[len(r) for r in rows]}")
        cells: List[int] = []
        for row in rows:
            for token in row:
                if token == "--":
                    cells.append(BLANK)
                    continue
                try:
                    cells.append(int(token))
                except ValueError:
                    raise MalformedBoard(f"Unreadable cell {token!r}") from None
        _check_cells(n, cells)
        z = cells.index(BLANK)
        return cls(n=n, cells=tuple(cells), blank=divmod(z, n))

    # ---------- Queries ----------
    @property
    def rows(self) -> Tuple[Tuple[int, ...], ...]:
        n = self.n
        return tuple(self.cells[r * n:(r + 1) * n] for r in range(n))

    def tile(self, row: int, col: int) -> int:
        return self.cells[row * self.n + col]

    def neighbours(self, position: Pos) -> Tuple[Pos, ...]:
        return _neighbour_table(self.n)[position]

    # ---------- Core dynamics ----------
    def move_blank(self, new_blank_position: Pos) -> "Board":
        assert new_blank_position in self.neighbours(self.blank), (
            f"{new_blank_position} is not adjacent to the blank at {self.blank}"
        )
        n = self.n
        z = self.blank[0] * n + self.blank[1]
        j = new_blank_position[0] * n + new_blank_position[1]
        lst = list(self.cells)
        lst[z], lst[j] = lst[j], lst[z]
        return Board(n=n, cells=tuple(lst), blank=new_blank_position)

    def successors(self) -> Tuple["Board", ...]:
        return tuple(self.move_blank(p) for p in self.neighbours(self.blank))

    def successors_with_cost(self) -> Tuple[Tuple["Board", int], ...]:
        """Unit edge costs."""
        return tuple((s, 1) for s in self.successors())

    # ---------- Heuristics / goal ----------
    def num_incorrect(self) -> int:
        """Number of tiles (blank ignored) away from their goal cell."""
        return sum(1 for idx, tile in enumerate(self.cells)
                   if tile != BLANK and idx != tile - 1)

    def taxicab_distance(self) -> int:
        """Sum of Manhattan distances to goal positions (blank ignored)."""
        n = self.n
        dist = 0
        for idx, tile in enumerate(self.cells):
            if tile == BLANK:
                continue
            r, c = divmod(idx, n)
            gr, gc = divmod(tile - 1, n)
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def is_goal(self) -> bool:
        return self.num_incorrect() == 0

    def is_solvable(self) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)
        """
        arr = [x for x in self.cells if x != BLANK]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.n % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.n - self.blank[0]
        return ((inv + blank_row_from_bottom) % 2) == 1

    # ---------- Rendering ----------
    def render(self) -> str:
        lines = []
        for row in self.rows:
            lines.append("".join("-- " if v == BLANK else f"{v:>2} " for v in row))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()
