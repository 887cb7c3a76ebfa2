import csv
import logging
import os
import statistics
import time

from matplotlib.figure import Figure

from .frontier import ALGORITHMS
from .generator import generate_maze
from .maze import Maze
from .solver import Solver, NoSolutionError

log = logging.getLogger(__name__)

DEFAULT_ALGOS = list(ALGORITHMS)

METRICS = [
    "elapsed_sec",
    "nodes_expanded",
    "unique_explored",
    "frontier_max",
    "path_length",
]


def run_single(maze, algorithm):
    solver = Solver(maze, algorithm)
    t0 = time.perf_counter()
    try:
        solver.solve()
    except NoSolutionError:
        log.info("%s found no solution for %r", solver.algorithm, maze)
    elapsed = time.perf_counter() - t0

    m = solver.metrics
    return {
        "algorithm": solver.algorithm,
        "width": maze.width,
        "height": maze.height,
        "solved": solver.solution is not None,
        "elapsed_sec": elapsed,
        "nodes_expanded": m["nodes_expanded"],
        "unique_explored": m["unique_explored"],
        "frontier_max": m["frontier_max"],
        "path_length": m["path_length"],
    }


def run_benchmark(runs=10, width=21, height=21, algorithms=None, loop_percent=0, seed=None):
    """Solve `runs` generated mazes with every algorithm; one result row per (maze, algorithm)."""
    algorithms = algorithms or DEFAULT_ALGOS
    seed_base = int(time.time()) if seed is None else seed

    rows = []
    for i in range(runs):
        maze_seed = seed_base + i
        maze = Maze.from_text(generate_maze(width, height, seed=maze_seed, loop_percent=loop_percent))
        for algo in algorithms:
            res = run_single(maze, algo)
            res["seed"] = maze_seed
            res["loop_percent"] = loop_percent
            rows.append(res)
    log.info("Benchmark finished: %d runs x %d algorithms", runs, len(algorithms))
    return rows


def aggregate_results(rows, group_by=("algorithm",)):
    grouped = {}
    for r in rows:
        key = tuple(r[k] for k in group_by)
        grouped.setdefault(key, []).append(r)

    def agg_stat(values):
        if not values:
            return {"avg": 0, "min": 0, "max": 0, "stdev": 0}
        return {
            "avg": statistics.mean(values),
            "min": min(values),
            "max": max(values),
            "stdev": statistics.pstdev(values) if len(values) > 1 else 0,
        }

    summary = []
    for key, items in grouped.items():
        entry = dict(zip(group_by, key))
        entry["count"] = len(items)
        for m in METRICS:
            stats = agg_stat([it[m] for it in items])
            for stat_name, value in stats.items():
                entry[f"{m}_{stat_name}"] = value
        entry["solved_rate"] = sum(1 for it in items if it["solved"]) / len(items)
        summary.append(entry)
    return summary


def write_csv(path, rows):
    if not rows:
        return
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)


def plot_metric(summary, metric_key, out_path):
    labels = [str(row.get("algorithm", "")) for row in summary]
    values = [row.get(metric_key, 0) for row in summary]

    fig = Figure(figsize=(max(4, len(labels) * 1.5), 4))
    ax = fig.add_subplot(1, 1, 1)
    ax.bar(range(len(values)), values)
    ax.set_xticks(range(len(values)))
    ax.set_xticklabels(labels)
    ax.set_ylabel(metric_key)
    fig.tight_layout()
    directory = os.path.dirname(out_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    fig.savefig(out_path)
    return out_path


def write_report(rows, out_dir):
    """raw_results.csv, summary.csv and one bar chart per averaged metric."""
    os.makedirs(out_dir, exist_ok=True)
    write_csv(os.path.join(out_dir, "raw_results.csv"), rows)
    summary = aggregate_results(rows)
    write_csv(os.path.join(out_dir, "summary.csv"), summary)
    charts = []
    for metric in METRICS:
        charts.append(plot_metric(summary, f"{metric}_avg", os.path.join(out_dir, f"{metric}_avg.png")))
    return summary, charts
