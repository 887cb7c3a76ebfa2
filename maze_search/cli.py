import argparse
import logging
import sys

from . import config
from .frontier import ALGORITHMS, algorithm_name
from .maze import Maze, MazeFormatError
from .render import print_maze, save_image
from .solver import Solver, NoSolutionError

log = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog="maze-search", description="Solve text mazes with breadth-first or depth-first search.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", help="Solve a maze file")
    p.add_argument("maze", help="Maze text file ('A' start, 'B' exit, ' ' open, anything else wall)")
    p.add_argument("--algorithm", default=None, help=f"One of {', '.join(ALGORITHMS)} (default: ${config.ALGORITHM_ENV_VAR} or {config.DEFAULT_ALGORITHM})")
    p.add_argument("--image", default=None, help="Write a PNG of the solved maze")
    p.add_argument("--show-explored", action="store_true", help="Colour explored cells in the PNG")
    p.add_argument("--tree", default=None, help="Render the search tree with graphviz to this path (without extension)")
    p.add_argument("--quiet", action="store_true", help="Only print the summary line")

    p = sub.add_parser("generate", help="Write a random maze")
    p.add_argument("--width", type=int, default=config.GENERATED_WIDTH)
    p.add_argument("--height", type=int, default=config.GENERATED_HEIGHT)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--loop_percent", type=int, default=0, help="Percentage of inner walls knocked down to add cycles")
    p.add_argument("-o", "--output", default=None, help="Output file (default: stdout)")

    p = sub.add_parser("benchmark", help="Compare strategies on generated mazes")
    p.add_argument("--runs", type=int, default=10, help="Mazes per algorithm")
    p.add_argument("--width", type=int, default=21)
    p.add_argument("--height", type=int, default=21)
    p.add_argument("--loop_percent", type=int, default=10)
    p.add_argument("--algorithms", nargs="*", default=list(ALGORITHMS))
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--out_dir", default="metrics_output")

    p = sub.add_parser("gui", help="Open the interactive viewer")
    p.add_argument("maze", nargs="?", default=None)
    p.add_argument("--algorithm", default=None)
    return parser


def check_algorithms(names):
    """Prints an error and returns False if any name is not a known strategy."""
    try:
        for name in names:
            algorithm_name(config.resolve_algorithm(name))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False
    return True


def cmd_solve(args):
    if not check_algorithms([args.algorithm]):
        return 1
    maze = Maze.from_file(args.maze)
    solver = Solver(maze, args.algorithm)

    if not args.quiet:
        print("Maze:")
        print_maze(maze)
        print("Solving...")
    try:
        solver.solve()
    except NoSolutionError:
        print(f"States Explored: {solver.num_explored}")
        print("No solution.", file=sys.stderr)
        return 1
    finally:
        if args.image:
            save_image(maze, args.image, solver.solution, solver.explored, show_solution=True, show_explored=args.show_explored)
            log.info("Wrote %s", args.image)
        if args.tree:
            from .visualization import render_search_tree
            out = render_search_tree(solver, args.tree)
            log.info("Wrote %s", out)

    print(f"States Explored: {solver.num_explored}")
    if not args.quiet:
        print("Solution:")
        print_maze(maze, solver.solution, solver.explored)
    return 0


def cmd_generate(args):
    from .generator import generate_maze

    text = generate_maze(args.width, args.height, seed=args.seed, loop_percent=args.loop_percent)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote maze to {args.output}")
    else:
        sys.stdout.write(text)
    return 0


def cmd_benchmark(args):
    from .metrics import run_benchmark, write_report

    if not check_algorithms(args.algorithms):
        return 1
    rows = run_benchmark(args.runs, args.width, args.height, args.algorithms, args.loop_percent, args.seed)
    summary, _ = write_report(rows, args.out_dir)
    for row in summary:
        print(f"{row['algorithm']}: explored avg {row['nodes_expanded_avg']:.1f}, "
              f"path avg {row['path_length_avg']:.1f}, solved {row['solved_rate']:.0%}")
    print(f"Wrote results to {args.out_dir}")
    return 0


def cmd_gui(args):
    from .app import run

    if not check_algorithms([args.algorithm]):
        return 1
    maze = Maze.from_file(args.maze) if args.maze else None
    run(maze, args.algorithm)
    return 0


COMMANDS = {
    "solve": cmd_solve,
    "generate": cmd_generate,
    "benchmark": cmd_benchmark,
    "gui": cmd_gui,
}


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        return COMMANDS[args.command](args)
    except (MazeFormatError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
