import logging

from . import config
from .frontier import ALGORITHMS, Node, algorithm_name

log = logging.getLogger(__name__)

# Solver status
READY = "ready"
RUNNING = "running"
SOLVED = "solved"
FAILED = "failed"


class NoSolutionError(Exception):
    """The frontier ran out before the exit was reached: no path exists."""


class Solver:
    """
    Frontier search from a maze's start cell to its exit cell.

    Status lifecycle: READY -> RUNNING -> SOLVED | FAILED.

    Search Semantics:
      - The frontier class decides the exploration order (QueueFrontier for
        BFS, StackFrontier for DFS); everything else is shared.
      - A node is counted as explored when it is removed from the frontier,
        including the goal node itself.
      - A cell is pushed at most once: only when it is neither explored nor
        already held by the frontier. The loop therefore ends after at most
        height * width removals.
      - The goal test happens on removal, not on insertion.

    Exposed after a run (read-only):
      solution      tuple of (action, cell) pairs, start excluded, exit included
      explored      frozenset of expanded cells
      num_explored  number of nodes removed from the frontier
      tree_edges    (parent_cell, child_cell, action) for every node created
      metrics       summary counters for display and benchmarking
    """
    def __init__(self, maze, algorithm=None):
        self.maze = maze
        if isinstance(algorithm, type):
            self.frontier_cls = algorithm
            self.algorithm = next((k for k, v in ALGORITHMS.items() if v is algorithm), algorithm.__name__)
        else:
            self.algorithm = algorithm_name(config.resolve_algorithm(algorithm))
            self.frontier_cls = ALGORITHMS[self.algorithm]

        self.status = READY
        self.solution = None
        self.num_explored = 0
        self.frontier = None
        self.tree_edges = []
        self.frontier_max = 0
        self._explored = set()

    @property
    def explored(self):
        return frozenset(self._explored)

    @property
    def actions(self):
        if self.solution is None:
            return None
        return [action for action, _ in self.solution]

    @property
    def cells(self):
        if self.solution is None:
            return None
        return [cell for _, cell in self.solution]

    @property
    def done(self):
        return self.status in (SOLVED, FAILED)

    @property
    def metrics(self):
        return {
            "algorithm": self.algorithm,
            "nodes_expanded": self.num_explored,
            "unique_explored": len(self._explored),
            "frontier_max": self.frontier_max,
            "path_length": len(self.solution) if self.solution is not None else 0,
        }

    def start(self):
        """Reset all per-run state and seed a fresh frontier with the start node."""
        self.num_explored = 0
        self.solution = None
        self.tree_edges = []
        self._explored = set()

        self.frontier = self.frontier_cls()
        self.frontier.add(Node(state=self.maze.start, parent=None, action=None))
        self.frontier_max = 1
        self.status = RUNNING
        log.debug("%s search started at %s, exit %s", self.algorithm, self.maze.start, self.maze.exit)

    def step(self):
        """
        Runs one iteration of the search loop and returns the new status.

        A READY solver is started first; a finished solver is left untouched.
        Raises NoSolutionError when the frontier is exhausted.
        """
        if self.status == READY:
            self.start()
        if self.done:
            return self.status

        if self.frontier.empty():
            self.status = FAILED
            log.debug("%s search failed after %d states", self.algorithm, self.num_explored)
            raise NoSolutionError("no solution")

        node = self.frontier.remove()
        self.num_explored += 1

        if node.state == self.maze.exit:
            self.solution = tuple(node.path())
            self.status = SOLVED
            log.debug("%s search solved: %d moves, %d states explored",
                      self.algorithm, len(self.solution), self.num_explored)
            return self.status

        self._explored.add(node.state)

        for action, state in self.maze.neighbors(node.state):
            if state not in self._explored and not self.frontier.contains_state(state):
                self.frontier.add(Node(state=state, parent=node, action=action))
                self.tree_edges.append((node.state, state, action))

        if len(self.frontier) > self.frontier_max:
            self.frontier_max = len(self.frontier)
        return self.status

    def solve(self):
        """
        Runs a complete search from scratch and returns the solution.

        Each call starts over with a fresh frontier and explored set, so two
        calls on the same maze produce the same result.
        """
        self.start()
        while not self.done:
            self.step()
        return self.solution

    def __repr__(self):
        return f"Solver(algorithm={self.algorithm!r}, status={self.status!r}, explored={self.num_explored})"
