import os

# --- Configuration ---
DEFAULT_ALGORITHM = "BFS"   # breadth-first: fewest-edges solution
ALGORITHM_ENV_VAR = "MAZE_SEARCH_ALGORITHM"

# --- Image output ---
CELL_SIZE = 64   # pixels per maze cell in PNG output
CELL_BORDER = 1  # pixels left around each cell
IMAGE_DPI = 100

# --- Text glyphs ---
WALL_GLYPH = "█"
START_GLYPH = "A"
EXIT_GLYPH = "B"
SOLUTION_GLYPH = "*"
EXPLORED_GLYPH = "^"
OPEN_GLYPH = " "

# --- Color Scheme ---
BG_COLOR = "#000000"
WALL_COLOR = "#2c3539"       # gunmetal
START_COLOR = "#ffa700"      # chrome yellow
EXIT_COLOR = "#ff4f00"       # orange
SOLUTION_COLOR = "#ff854d"   # light orange
EXPLORED_COLOR = "#00b3ff"   # azure
OPEN_COLOR = "#f5f5f5"
FRONTIER_COLOR = "#95a5a6"   # viewer only

# --- Viewer ---
VIEWER_CELL_SIZE = 24
VIEWER_BG_COLOR = "#2c3e50"
DELAY_FAST_MS = 1
DELAY_SLOW_MS = 200
GENERATED_WIDTH = 31
GENERATED_HEIGHT = 21


def resolve_algorithm(name=None):
    """Pick the exploration strategy name: explicit value, then env var, then default."""
    if name:
        return name
    return os.getenv(ALGORITHM_ENV_VAR) or DEFAULT_ALGORITHM
