"""A falling-blocks game played on a 10 by 24 board in the terminal."""

from __future__ import annotations

import random
import sys
import time
from dataclasses import dataclass, field
from typing import Optional, Protocol

WIDTH = 10
HEIGHT = 24
FPS = 20
NORMAL_SPEED = 0.1
FAST_SPEED = 1.4
SPAWN_COLUMN = 4
GAME_OVER_TEXT = "GAME  OVER"
GAME_OVER_ROW = 10

Cell = tuple[int, int]

_KINDS = "OLJITZS"

# Starting cells (x, y) of every piece before it is moved to the spawn column.
_SHAPES: dict[str, tuple[Cell, ...]] = {
    "O": ((0, 0), (1, 0), (0, 1), (1, 1)),
    "L": ((0, 0), (1, 0), (1, 1), (1, 2)),
    "J": ((1, 0), (0, 0), (0, 1), (0, 2)),
    "I": ((0, 0), (0, 1), (0, 2), (0, 3)),
    "T": ((0, 0), (1, 0), (2, 0), (1, 1)),
    "Z": ((0, 0), (1, 0), (1, 1), (2, 1)),
    "S": ((2, 0), (1, 0), (1, 1), (0, 1)),
}

# For each rotation state, the (dx, dy) that moves each cell to the next
# state; dy points up, so a cell's new row is y - dy.
_ROTATIONS: dict[str, tuple[tuple[Cell, ...], ...]] = {
    "I": (
        ((-2, -2), (-1, -1), (0, 0), (1, 1)),
        ((1, 2), (0, 1), (-1, 0), (-2, -1)),
        ((-1, -1), (0, 0), (1, 1), (2, 2)),
        ((2, 1), (1, 0), (0, -1), (-1, -2)),
    ),
    "L": (
        ((1, -1), (0, -2), (-1, -1), (-2, 0)),
        ((0, -1), (-1, 0), (0, 1), (1, 2)),
        ((-2, 0), (-1, 1), (0, 0), (1, -1)),
        ((1, 2), (2, 1), (1, 0), (0, -1)),
    ),
    "J": (
        ((0, -2), (1, -1), (0, 0), (-1, 1)),
        ((-1, 0), (0, -1), (1, 0), (2, 1)),
        ((-1, 1), (-2, 0), (-1, -1), (0, -2)),
        ((2, 1), (1, 2), (0, 1), (-1, 0)),
    ),
    "S": (
        ((-1, -2), (0, -1), (-1, 0), (0, 1)),
        ((1, 2), (0, 1), (1, 0), (0, -1)),
    ),
    "Z": (
        ((1, 0), (0, -1), (-1, 0), (-2, -1)),
        ((-1, 0), (0, 1), (1, 0), (2, 1)),
    ),
    "T": (
        ((2, 0), (1, -1), (0, -2), (0, 0)),
        ((0, -2), (-1, -1), (-2, 0), (0, 0)),
        ((-2, 0), (-1, 1), (0, 2), (0, 0)),
        ((0, 2), (1, 1), (2, 0), (0, 0)),
    ),
}


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Piece:
    """The falling piece: its kind, the cells it covers and its fall progress."""

    kind: str
    cells: list[Cell]
    rotation: int = 0
    fall: float = 0.0


@dataclass
class Game:
    """Board state and the rules that move, rotate, land and clear pieces."""

    rng: Optional[_RandomSource] = None
    board: list[list[bool]] = field(init=False)
    piece: Optional[Piece] = field(init=False, default=None)
    game_over: bool = field(init=False, default=False)
    speed: float = field(init=False, default=NORMAL_SPEED)

    def __post_init__(self) -> None:
        if self.rng is None:
            self.rng = random.Random()
        self.board = [[False] * WIDTH for _ in range(HEIGHT)]

    def _free(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < WIDTH and 0 <= y < HEIGHT and not self.board[y][x]

    def spawn(self) -> Piece:
        """Add a random piece at the top; set game_over if it overlaps the stack."""
        kind = _KINDS[self.rng.randrange(len(_KINDS))]
        cells = [(x + SPAWN_COLUMN, y) for x, y in _SHAPES[kind]]
        self.piece = Piece(kind, cells)
        self.speed = NORMAL_SPEED
        if any(self.board[y][x] for x, y in cells):
            self.game_over = True
        return self.piece

    def rotate(self) -> bool:
        """Turn the falling piece one step if the target cells are free."""
        if self.piece is None:
            return False
        states = _ROTATIONS.get(self.piece.kind)
        if not states:
            return False
        offsets = states[self.piece.rotation]
        target = [(x + dx, y - dy) for (x, y), (dx, dy) in zip(self.piece.cells, offsets)]
        if not all(self._free(cell) for cell in target):
            return False
        self.piece.cells = target
        self.piece.rotation = (self.piece.rotation + 1) % len(states)
        return True

    def shift(self, direction: int) -> bool:
        """Move the falling piece one column left (-1) or right (1) if it fits."""
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, not {direction!r}")
        if self.piece is None:
            return False
        target = [(x + direction, y) for x, y in self.piece.cells]
        if not all(self._free(cell) for cell in target):
            return False
        self.piece.cells = target
        return True

    def tick(self) -> bool:
        """Advance one frame; return False once the game is over."""
        if self.game_over:
            return False
        if self.piece is None:
            self.spawn()
            return not self.game_over
        self.piece.fall += self.speed
        if self.piece.fall >= 1:
            self.piece.fall = 0.0
            self.piece.cells = [(x, y + 1) for x, y in self.piece.cells]
        self._settle()
        return True

    def _settle(self) -> None:
        piece = self.piece
        if piece is None or all(self._free(cell) for cell in piece.cells):
            return
        for x, y in piece.cells:
            if 0 <= y - 1 < HEIGHT and 0 <= x < WIDTH:
                self.board[y - 1][x] = True
        self.piece = None
        self.clear_lines()

    def clear_lines(self) -> int:
        """Remove full rows, drop the rows above them, and return how many went."""
        full = [y for y, row in enumerate(self.board) if all(row)]
        for y in full:
            del self.board[y]
            self.board.insert(0, [False] * WIDTH)
        return len(full)

    def render(self) -> str:
        """Draw the board: '#' stack, '@' piece, '-' the columns below and above it."""
        cells = set(self.piece.cells) if self.piece else set()
        columns = {x for x, _ in cells}
        rows = []
        for y, row in enumerate(self.board):
            chars = []
            for x, occupied in enumerate(row):
                if (x, y) in cells:
                    chars.append("@")
                elif occupied:
                    chars.append("#")
                else:
                    chars.append("-" if x in columns else ".")
            rows.append("".join(chars))
        if self.game_over:
            rows[GAME_OVER_ROW] = GAME_OVER_TEXT
        return "\n".join(rows) + "\n"


def _play(screen, game: Game) -> None:
    import curses

    try:
        curses.curs_set(0)
    except curses.error:
        pass
    screen.nodelay(True)
    screen.keypad(True)
    armed = True
    next_frame = time.monotonic()
    while True:
        down = False
        key = screen.getch()
        while key != -1:
            if key in (27, ord("q")):
                return
            if key == curses.KEY_UP:
                game.rotate()
            elif key == curses.KEY_LEFT:
                game.shift(-1)
            elif key == curses.KEY_RIGHT:
                game.shift(1)
            elif key == curses.KEY_DOWN:
                down = True
            key = screen.getch()
        if not down:
            armed = True
        now = time.monotonic()
        if now >= next_frame:
            had_piece = game.piece is not None
            game.speed = FAST_SPEED if down and armed else NORMAL_SPEED
            game.tick()
            if had_piece and game.piece is None:
                armed = False
            for row, line in enumerate(game.render().splitlines()):
                try:
                    screen.addstr(row, 0, line)
                except curses.error:
                    pass
            screen.refresh()
            next_frame = now + 1 / FPS
        time.sleep(0.005)


def main(argv: Optional[list[str]] = None) -> int:
    import curses

    args = sys.argv[1:] if argv is None else argv
    seed = int(args[0]) if args else None
    game = Game(random.Random(seed))
    if hasattr(curses, "set_escdelay"):
        try:
            curses.wrapper(lambda screen: (curses.set_escdelay(25), _play(screen, game)))
        except curses.error:
            return 1
    else:
        curses.wrapper(_play, game)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())