import collections
import logging
import random

from .maze import START_CHAR, EXIT_CHAR, OPEN_CHAR

log = logging.getLogger(__name__)

WALL_CHAR = "#"
MIN_SIZE = 3


def _odd(n):
    n = max(MIN_SIZE, int(n))
    return n if n % 2 == 1 else n - 1


def carve_grid(width, height, rng):
    """Randomized depth-first backtracker on an odd-sized grid.

    Grid uses odd dimensions so that walls occupy even indices and cells odd
    indices. Returns grid[row][col] with True for walls.
    """
    grid = [[True for _ in range(width)] for _ in range(height)]
    # (dr, dc) two-step jumps to the next cell; the wall between is carved too
    dirs = [(-2, 0), (2, 0), (0, -2), (0, 2)]

    stack = [(1, 1)]
    grid[1][1] = False
    while stack:
        r, c = stack[-1]
        rng.shuffle(dirs)
        for dr, dc in dirs:
            nr, nc = r + dr, c + dc
            if 1 <= nr < height - 1 and 1 <= nc < width - 1 and grid[nr][nc]:
                grid[r + dr // 2][c + dc // 2] = False
                grid[nr][nc] = False
                stack.append((nr, nc))
                break
        else:
            stack.pop()  # Backtrack
    return grid


def add_loops(grid, percentage, rng):
    """Knock down a percentage of the walls that separate two open cells, creating cycles."""
    height, width = len(grid), len(grid[0])
    candidates = []
    for r in range(1, height - 1):
        for c in range(1, width - 1):
            if not grid[r][c]:
                continue
            if not grid[r - 1][c] and not grid[r + 1][c] and grid[r][c - 1] and grid[r][c + 1]:
                candidates.append((r, c))
            elif not grid[r][c - 1] and not grid[r][c + 1] and grid[r - 1][c] and grid[r + 1][c]:
                candidates.append((r, c))
    rng.shuffle(candidates)
    count = int(len(candidates) * percentage / 100)
    for r, c in candidates[:count]:
        grid[r][c] = False
    return count


def farthest_cell(grid, origin):
    """Open cell with the greatest BFS distance from origin (first found on ties)."""
    height, width = len(grid), len(grid[0])
    visited = {origin}
    queue = collections.deque([origin])
    last = origin
    while queue:
        last = r, c = queue.popleft()
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < height and 0 <= nc < width and not grid[nr][nc] and (nr, nc) not in visited:
                visited.add((nr, nc))
                queue.append((nr, nc))
    return last


def generate_maze(width, height, seed=None, loop_percent=0):
    """Text maze ('#' walls, 'A' start, 'B' exit) ready for Maze.from_text."""
    rng = random.Random(seed)
    width, height = _odd(width), _odd(height)
    grid = carve_grid(width, height, rng)
    loops = add_loops(grid, loop_percent, rng) if loop_percent > 0 else 0

    start = (1, 1)
    exit = farthest_cell(grid, start)
    if exit == start:
        exit = (1, 2) if width > MIN_SIZE else (2, 1)
        grid[exit[0]][exit[1]] = False

    lines = []
    for r in range(height):
        row = []
        for c in range(width):
            if (r, c) == start:
                row.append(START_CHAR)
            elif (r, c) == exit:
                row.append(EXIT_CHAR)
            else:
                row.append(WALL_CHAR if grid[r][c] else OPEN_CHAR)
        lines.append("".join(row))
    log.debug("Generated %dx%d maze (seed=%s, loops=%d), exit at %s", height, width, seed, loops, exit)
    return "\n".join(lines) + "\n"
