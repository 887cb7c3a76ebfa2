from __future__ import annotations

import csv
import os
import tempfile
import unittest

from maze_search.metrics import run_single, run_benchmark, aggregate_results, write_csv, plot_metric, write_report
from tests.maze_fixtures import LOOPED, WALL_BETWEEN, maze


class TestRunSingle(unittest.TestCase):

    def test_solved_row(self):
        row = run_single(maze(LOOPED), "BFS")
        self.assertTrue(row["solved"])
        self.assertEqual(row["algorithm"], "BFS")
        self.assertEqual(row["path_length"], 8)
        self.assertEqual((row["width"], row["height"]), (7, 7))
        self.assertGreaterEqual(row["elapsed_sec"], 0)

    def test_unsolved_row(self):
        row = run_single(maze(WALL_BETWEEN), "DFS")
        self.assertFalse(row["solved"])
        self.assertEqual(row["path_length"], 0)
        self.assertEqual(row["nodes_expanded"], 1)


class TestBenchmark(unittest.TestCase):

    def setUp(self):
        self.rows = run_benchmark(runs=3, width=11, height=11, loop_percent=20, seed=100)

    def test_one_row_per_maze_and_algorithm(self):
        self.assertEqual(len(self.rows), 6)
        self.assertEqual({r["algorithm"] for r in self.rows}, {"BFS", "DFS"})
        self.assertTrue(all(r["solved"] for r in self.rows))

    def test_bfs_never_longer_than_dfs(self):
        by_seed = {}
        for r in self.rows:
            by_seed.setdefault(r["seed"], {})[r["algorithm"]] = r["path_length"]
        for lengths in by_seed.values():
            self.assertLessEqual(lengths["BFS"], lengths["DFS"])

    def test_aggregate(self):
        summary = aggregate_results(self.rows)
        self.assertEqual(len(summary), 2)
        for entry in summary:
            self.assertEqual(entry["count"], 3)
            self.assertEqual(entry["solved_rate"], 1)
            self.assertLessEqual(entry["path_length_min"], entry["path_length_avg"])
            self.assertLessEqual(entry["path_length_avg"], entry["path_length_max"])

    def test_write_report(self):
        with tempfile.TemporaryDirectory() as tmp:
            summary, charts = write_report(self.rows, tmp)
            self.assertTrue(os.path.exists(os.path.join(tmp, "raw_results.csv")))
            self.assertTrue(os.path.exists(os.path.join(tmp, "summary.csv")))
            self.assertEqual(len(charts), 5)
            for chart in charts:
                self.assertTrue(os.path.getsize(chart) > 0)


class TestOutputs(unittest.TestCase):

    def test_write_csv(self):
        rows = [{"algorithm": "BFS", "path_length": 4}, {"algorithm": "DFS", "path_length": 6}]
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "nested", "out.csv")
            write_csv(path, rows)
            with open(path, newline="", encoding="utf-8") as f:
                read = list(csv.DictReader(f))
        self.assertEqual(read[1], {"algorithm": "DFS", "path_length": "6"})

    def test_write_csv_empty_is_noop(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "out.csv")
            write_csv(path, [])
            self.assertFalse(os.path.exists(path))

    def test_plot_metric(self):
        summary = [{"algorithm": "BFS", "path_length_avg": 4}, {"algorithm": "DFS", "path_length_avg": 6}]
        with tempfile.TemporaryDirectory() as tmp:
            out = plot_metric(summary, "path_length_avg", os.path.join(tmp, "chart.png"))
            self.assertTrue(os.path.getsize(out) > 0)


if __name__ == "__main__":
    unittest.main()
