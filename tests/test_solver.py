"""Tests for the search engine.

Covers:
  - BFS returns fewest-edge paths (checked against brute-force distances)
  - unsolvable mazes fail with NoSolutionError within height*width removals
  - explored set / explored count bookkeeping
  - fixed up/down/left/right tie-breaking, for both strategies
  - status lifecycle and repeated solves
"""

from __future__ import annotations

import os
import unittest
from unittest import mock

from maze_search.frontier import QueueFrontier, StackFrontier
from maze_search.generator import generate_maze
from maze_search.maze import Maze
from maze_search.solver import Solver, NoSolutionError, READY, RUNNING, SOLVED, FAILED
from tests.maze_fixtures import (
    MAZE_DIR, OPEN_3X3, TWO_BY_TWO, WALL_BETWEEN, WALLED_RING, CORRIDOR_6, LOOPED,
    maze, brute_force_distance, is_adjacent,
)


def assert_valid_path(test, m, solution):
    """Consecutive solution cells are open neighbors joined by the recorded action."""
    prev = m.start
    for action, cell in solution:
        test.assertIn((action, cell), m.neighbors(prev))
        prev = cell
    test.assertEqual(prev, m.exit)


class TestScenarios(unittest.TestCase):

    def test_open_grid_manhattan_distance(self):
        m = maze(OPEN_3X3)
        solver = Solver(m, "BFS")
        solution = solver.solve()
        self.assertEqual(len(solution), 4)
        self.assertIn(solution[0][1], [(0, 1), (1, 0)])
        self.assertEqual(solution[-1][1], (2, 2))
        assert_valid_path(self, m, solution)

    def test_open_grid_exact_bfs_path(self):
        solver = Solver(maze(OPEN_3X3), "BFS")
        solver.solve()
        self.assertEqual(solver.actions, ["down", "down", "right", "right"])
        self.assertEqual(solver.cells, [(1, 0), (2, 0), (2, 1), (2, 2)])
        self.assertEqual(solver.num_explored, 9)

    def test_complete_wall_fails(self):
        solver = Solver(maze(WALL_BETWEEN))
        with self.assertRaises(NoSolutionError):
            solver.solve()
        self.assertEqual(solver.status, FAILED)
        self.assertIsNone(solver.solution)
        self.assertEqual(solver.num_explored, 1)

    def test_corridor(self):
        solver = Solver(maze(CORRIDOR_6))
        solution = solver.solve()
        self.assertEqual(len(solution), 5)
        self.assertEqual(solver.num_explored, 6)
        self.assertEqual(set(solver.actions), {"right"})

    def test_corridor_from_file(self):
        m = Maze.from_file(MAZE_DIR / "maze1.txt")
        solver = Solver(m)
        solution = solver.solve()
        self.assertEqual(len(solution), 10)
        self.assertEqual(solver.num_explored, 11)
        assert_valid_path(self, m, solution)

    def test_tie_break_follows_direction_order(self):
        runs = []
        for _ in range(3):
            solver = Solver(maze(TWO_BY_TWO), "BFS")
            runs.append(solver.solve())
        self.assertEqual(runs[0], (("down", (1, 0)), ("right", (1, 1))))
        self.assertEqual(runs[0], runs[1])
        self.assertEqual(runs[1], runs[2])

    def test_depth_first_tie_break(self):
        solver = Solver(maze(TWO_BY_TWO), "DFS")
        self.assertEqual(solver.solve(), (("right", (0, 1)), ("down", (1, 1))))
        self.assertEqual(solver.num_explored, 3)

    def test_start_equals_exit(self):
        m = Maze([[False, False]], (0, 1), (0, 1))
        solver = Solver(m)
        self.assertEqual(solver.solve(), ())
        self.assertEqual(solver.num_explored, 1)
        self.assertEqual(solver.explored, frozenset())


class TestUnsolvable(unittest.TestCase):

    def test_walled_ring(self):
        m = maze(WALLED_RING)
        solver = Solver(m)
        with self.assertRaises(NoSolutionError):
            solver.solve()
        self.assertLessEqual(solver.num_explored, m.height * m.width)
        self.assertEqual(solver.num_explored, 11)
        self.assertNotIn(m.exit, solver.explored)

    def test_unsolvable_file(self):
        m = Maze.from_file(MAZE_DIR / "unsolvable.txt")
        for algorithm in ("BFS", "DFS"):
            solver = Solver(m, algorithm)
            with self.assertRaises(NoSolutionError):
                solver.solve()
            self.assertEqual(len(solver.explored), solver.num_explored)

    def test_failed_step_is_terminal(self):
        solver = Solver(maze(WALL_BETWEEN))
        with self.assertRaises(NoSolutionError):
            solver.solve()
        self.assertEqual(solver.step(), FAILED)


class TestBookkeeping(unittest.TestCase):

    def test_explored_count_includes_goal(self):
        solver = Solver(maze(LOOPED))
        solver.solve()
        # every removed node except the goal was added to the explored set
        self.assertEqual(len(solver.explored), solver.num_explored - 1)
        self.assertNotIn(solver.maze.exit, solver.explored)

    def test_explored_cells_are_reachable(self):
        for algorithm in ("BFS", "DFS"):
            solver = Solver(maze(LOOPED), algorithm)
            solver.solve()
            reached = set(solver.explored) | set(solver.cells)
            for cell in solver.explored:
                if cell == solver.maze.start:
                    continue
                self.assertTrue(any(is_adjacent(cell, other) for other in reached if other != cell))

    def test_each_cell_pushed_once(self):
        solver = Solver(maze(LOOPED))
        solver.solve()
        children = [child for _, child, _ in solver.tree_edges]
        self.assertEqual(len(children), len(set(children)))
        self.assertNotIn(solver.maze.start, children)

    def test_explored_view_is_read_only(self):
        solver = Solver(maze(OPEN_3X3))
        solver.solve()
        self.assertIsInstance(solver.explored, frozenset)

    def test_metrics(self):
        solver = Solver(maze(LOOPED))
        solver.solve()
        m = solver.metrics
        self.assertEqual(m["algorithm"], "BFS")
        self.assertEqual(m["nodes_expanded"], solver.num_explored)
        self.assertEqual(m["path_length"], 8)
        self.assertGreaterEqual(m["frontier_max"], 1)


class TestOptimality(unittest.TestCase):

    def test_bfs_matches_brute_force_distance(self):
        for seed in range(5):
            m = Maze.from_text(generate_maze(11, 11, seed=seed, loop_percent=30))
            solution = Solver(m, "BFS").solve()
            self.assertEqual(len(solution), brute_force_distance(m, m.start, m.exit))

    def test_bfs_on_fixture_mazes(self):
        for name in ("maze1.txt", "maze2.txt"):
            m = Maze.from_file(MAZE_DIR / name)
            solution = Solver(m, "BFS").solve()
            self.assertEqual(len(solution), brute_force_distance(m, m.start, m.exit))
            assert_valid_path(self, m, solution)

    def test_dfs_finds_a_valid_longer_path(self):
        m = maze(LOOPED)
        bfs = Solver(m, "BFS").solve()
        dfs = Solver(m, "DFS").solve()
        assert_valid_path(self, m, dfs)
        self.assertEqual(len(bfs), 8)
        self.assertEqual(len(dfs), 12)

    def test_dfs_paths_valid_on_generated_mazes(self):
        for seed in range(5):
            m = Maze.from_text(generate_maze(15, 9, seed=seed, loop_percent=20))
            dfs = Solver(m, "DFS").solve()
            assert_valid_path(self, m, dfs)
            self.assertGreaterEqual(len(dfs), brute_force_distance(m, m.start, m.exit))


class TestLifecycle(unittest.TestCase):

    def test_initial_state(self):
        solver = Solver(maze(OPEN_3X3))
        self.assertEqual(solver.status, READY)
        self.assertIsNone(solver.solution)
        self.assertIsNone(solver.actions)
        self.assertEqual(solver.num_explored, 0)
        self.assertIsNone(solver.frontier)

    def test_step_by_step(self):
        solver = Solver(maze(CORRIDOR_6))
        statuses = []
        while not solver.done:
            statuses.append(solver.step())
        self.assertEqual(statuses[:-1], [RUNNING] * 5)
        self.assertEqual(statuses[-1], SOLVED)
        self.assertEqual(solver.step(), SOLVED)
        self.assertEqual(solver.num_explored, 6)

    def test_repeated_solve_is_fresh_and_identical(self):
        solver = Solver(maze(LOOPED))
        first = solver.solve()
        first_explored = solver.explored
        second = solver.solve()
        self.assertEqual(first, second)
        self.assertEqual(first_explored, solver.explored)
        self.assertEqual(solver.num_explored, len(first_explored) + 1)

    def test_independent_solvers_agree(self):
        m = Maze.from_file(MAZE_DIR / "maze2.txt")
        self.assertEqual(Solver(m).solve(), Solver(m).solve())


class TestStrategySelection(unittest.TestCase):

    def test_default_is_breadth_first(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            solver = Solver(maze(OPEN_3X3))
        self.assertEqual(solver.algorithm, "BFS")
        self.assertIs(solver.frontier_cls, QueueFrontier)

    def test_env_var_selects_strategy(self):
        with mock.patch.dict(os.environ, {"MAZE_SEARCH_ALGORITHM": "dfs"}):
            solver = Solver(maze(OPEN_3X3))
        self.assertEqual(solver.algorithm, "DFS")

    def test_explicit_name_beats_env_var(self):
        with mock.patch.dict(os.environ, {"MAZE_SEARCH_ALGORITHM": "DFS"}):
            solver = Solver(maze(OPEN_3X3), "bfs")
        self.assertEqual(solver.algorithm, "BFS")

    def test_frontier_class_accepted(self):
        solver = Solver(maze(OPEN_3X3), StackFrontier)
        self.assertEqual(solver.algorithm, "DFS")
        solver.solve()
        self.assertIsInstance(solver.frontier, StackFrontier)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            Solver(maze(OPEN_3X3), "dijkstra")


if __name__ == "__main__":
    unittest.main()
