"""Maze solving by uninformed frontier search (breadth-first or depth-first).

Submodules:
  maze           Wall grid, start/exit cells, neighbor queries, text loader.
  frontier       Search tree nodes and the stack/queue frontiers.
  solver         Search engine: explored set, goal test, path reconstruction.
  render         Text and PNG pictures of a solved maze.
  visualization  Search tree export as a graphviz Digraph.
  generator      Random maze generation.
  metrics        Strategy benchmark (CSV + charts).
  app            Tkinter step-by-step viewer.
"""

from .frontier import Node, StackFrontier, QueueFrontier, EmptyFrontierError, ALGORITHMS, frontier_for
from .maze import Maze, MazeFormatError, DIRECTIONS, UP, DOWN, LEFT, RIGHT
from .solver import Solver, NoSolutionError, READY, RUNNING, SOLVED, FAILED

__all__ = [
    # Grid
    "Maze", "MazeFormatError", "DIRECTIONS", "UP", "DOWN", "LEFT", "RIGHT",
    # Frontier
    "Node", "StackFrontier", "QueueFrontier", "EmptyFrontierError", "ALGORITHMS", "frontier_for",
    # Engine
    "Solver", "NoSolutionError", "READY", "RUNNING", "SOLVED", "FAILED",
]
