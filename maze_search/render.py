from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from . import config


def _cell_sets(solution, explored):
    solution_cells = {cell for _, cell in solution} if solution else set()
    explored_cells = set(explored) if explored else set()
    return solution_cells, explored_cells


def render_text(maze, solution=None, explored=None):
    """Text picture of the maze: walls, start/exit, solution cells and explored cells."""
    solution_cells, explored_cells = _cell_sets(solution, explored)
    lines = []
    for i in range(maze.height):
        row = []
        for j in range(maze.width):
            if maze.walls[i][j]:
                row.append(config.WALL_GLYPH)
            elif (i, j) == maze.start:
                row.append(config.START_GLYPH)
            elif (i, j) == maze.exit:
                row.append(config.EXIT_GLYPH)
            elif (i, j) in solution_cells:
                row.append(config.SOLUTION_GLYPH)
            elif (i, j) in explored_cells:
                row.append(config.EXPLORED_GLYPH)
            else:
                row.append(config.OPEN_GLYPH)
        lines.append("".join(row) + "\n")
    return "".join(lines)


def print_maze(maze, solution=None, explored=None):
    print(render_text(maze, solution, explored))


def cell_color(maze, cell, solution_cells, explored_cells, show_solution=True, show_explored=False):
    row, col = cell
    if maze.walls[row][col]:
        return config.WALL_COLOR
    if cell == maze.start:
        return config.START_COLOR
    if cell == maze.exit:
        return config.EXIT_COLOR
    if show_solution and cell in solution_cells:
        return config.SOLUTION_COLOR
    if show_explored and cell in explored_cells:
        return config.EXPLORED_COLOR
    return config.OPEN_COLOR


def build_figure(maze, solution=None, explored=None, show_solution=True, show_explored=False,
                 cell_size=config.CELL_SIZE, cell_border=config.CELL_BORDER, dpi=config.IMAGE_DPI):
    """One filled square per cell, inset by cell_border pixels, on a dark background."""
    solution_cells, explored_cells = _cell_sets(solution, explored)

    fig = Figure(figsize=(maze.width * cell_size / dpi, maze.height * cell_size / dpi), dpi=dpi)
    fig.patch.set_facecolor(config.BG_COLOR)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, maze.width)
    ax.set_ylim(maze.height, 0)  # row 0 at the top
    ax.set_axis_off()

    inset = cell_border / cell_size
    side = 1 - 2 * inset
    for i in range(maze.height):
        for j in range(maze.width):
            fill = cell_color(maze, (i, j), solution_cells, explored_cells, show_solution, show_explored)
            ax.add_patch(Rectangle((j + inset, i + inset), side, side, facecolor=fill, edgecolor="none"))
    return fig


def save_image(maze, filename, solution=None, explored=None, show_solution=True, show_explored=False):
    fig = build_figure(maze, solution, explored, show_solution=show_solution, show_explored=show_explored)
    fig.savefig(filename, facecolor=fig.get_facecolor(), format="png")
    return filename
