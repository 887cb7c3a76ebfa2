import logging
from pathlib import Path

log = logging.getLogger(__name__)

# Directions, in the fixed order neighbors are generated (row delta, col delta)
UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"
DIRECTIONS = (
    (UP, -1, 0),
    (DOWN, 1, 0),
    (LEFT, 0, -1),
    (RIGHT, 0, 1),
)

START_CHAR = "A"
EXIT_CHAR = "B"
OPEN_CHAR = " "


class MazeFormatError(ValueError):
    """Raised when a maze description cannot be turned into a valid grid."""


class Maze:
    """
    Immutable wall grid with a start cell and an exit cell.

    Maze Data Structure Context:
      - self.walls is a tuple of rows, each a tuple of booleans
        (True = wall, False = open floor), indexed walls[row][col].
      - Cells are (row, col) tuples, origin (0, 0) at the top-left.
      - start and exit are open cells; they may be equal.

    Integration:
      - Built by from_text/from_file (the text maze loader) or directly from a
        boolean matrix.
      - Read-only input to the Solver; renderers only query it.
    """
    def __init__(self, walls, start, exit):
        rows = tuple(tuple(bool(v) for v in row) for row in walls)
        if not rows or not rows[0]:
            raise MazeFormatError("Maze must have at least one cell")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise MazeFormatError("Maze rows must all have the same width")

        self.walls = rows
        self.height = len(rows)
        self.width = width
        self.start = tuple(start)
        self.exit = tuple(exit)

        for name, cell in (("start", self.start), ("exit", self.exit)):
            if not self.in_bounds(cell):
                raise MazeFormatError(f"Maze {name} {cell} is out of bounds")
            if self.is_wall(cell):
                raise MazeFormatError(f"Maze {name} {cell} is inside a wall")

    @classmethod
    def from_text(cls, text):
        """
        Parses the text maze format.

        Format:
          - One grid row per line; lines shorter than the longest are padded
            with open space on the right.
          - 'A' marks the start, 'B' the exit, ' ' open floor; every other
            character is a wall.
          - Exactly one 'A' and exactly one 'B' are required.
          - Empty lines before the first row and after the last are ignored;
            a row of spaces is kept as open floor.
        """
        if text.count(START_CHAR) != 1:
            raise MazeFormatError("Maze must have exactly one start point")
        if text.count(EXIT_CHAR) != 1:
            raise MazeFormatError("Maze must have exactly one exit point")

        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        while lines and lines[0] == "":
            lines.pop(0)
        while lines and lines[-1] == "":
            lines.pop()

        width = max(len(line) for line in lines)
        walls = []
        start = exit = None
        for i, line in enumerate(lines):
            row = []
            for j in range(width):
                char = line[j] if j < len(line) else OPEN_CHAR
                if char == START_CHAR:
                    start = (i, j)
                    row.append(False)
                elif char == EXIT_CHAR:
                    exit = (i, j)
                    row.append(False)
                elif char == OPEN_CHAR:
                    row.append(False)
                else:
                    row.append(True)
            walls.append(row)

        maze = cls(walls, start, exit)
        log.debug("Parsed %dx%d maze, start=%s exit=%s", maze.height, maze.width, maze.start, maze.exit)
        return maze

    @classmethod
    def from_file(cls, path):
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Maze file not found: {path}")
        return cls.from_text(path.read_text(encoding="utf-8"))

    def in_bounds(self, cell):
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def is_wall(self, cell):
        """Out-of-bounds cells count as walls."""
        if not self.in_bounds(cell):
            return True
        row, col = cell
        return self.walls[row][col]

    def neighbors(self, cell):
        """
        Returns the (direction, cell) moves available from a cell.

        Candidates are tried in the fixed order up, down, left, right and kept
        only when in bounds and not a wall. The order decides tie-breaking
        between equally distant cells queued in the same expansion.
        """
        row, col = cell
        result = []
        for action, dr, dc in DIRECTIONS:
            candidate = (row + dr, col + dc)
            if self.in_bounds(candidate) and not self.walls[candidate[0]][candidate[1]]:
                result.append((action, candidate))
        return result

    def open_cells(self):
        return [(r, c) for r in range(self.height) for c in range(self.width) if not self.walls[r][c]]

    def __repr__(self):
        return f"Maze(height={self.height}, width={self.width}, start={self.start}, exit={self.exit})"
