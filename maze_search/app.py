import random
import tkinter as tk
from tkinter import ttk, messagebox, filedialog

from . import config
from .frontier import ALGORITHMS, algorithm_name
from .generator import generate_maze
from .maze import Maze, MazeFormatError
from .solver import Solver, NoSolutionError, SOLVED, FAILED

BG_COLOR = config.VIEWER_BG_COLOR


class MazeApp:
    """
    Tkinter viewer that animates a Solver one frontier removal at a time.

    Components:
      1. Control row: Open Maze, New Maze, Restart, algorithm choice,
         speed slider and steps per tick.
      2. Canvas: walls, explored cells, frontier cells and, once solved,
         the solution path; start and exit markers on top.
      3. Metrics label fed from solver.metrics.

    The animation is driven by update_loop() through root.after(); a maze
    without a path ends with a "No Solution" overlay instead of an error.
    """
    def __init__(self, root, maze=None, algorithm=None):
        self.root = root
        self.root.title("Maze Search Visualizer")
        self.root.configure(bg=BG_COLOR)

        self.speed_min = 1; self.speed_max = 100
        self.speed = tk.IntVar(value=self.speed_max // 2)
        self.steps_per_tick = tk.IntVar(value=1)
        self.algorithm_var = tk.StringVar(value=algorithm_name(config.resolve_algorithm(algorithm)))
        self.metrics_var = tk.StringVar(value="")
        self.is_running = False
        self.message = None
        self._after_id = None

        self.maze = maze or self._random_maze()
        self._setup_ui()
        self.start_new_simulation()

    def _random_maze(self):
        text = generate_maze(config.GENERATED_WIDTH, config.GENERATED_HEIGHT, seed=random.randrange(1 << 30), loop_percent=10)
        return Maze.from_text(text)

    def _setup_ui(self):
        style = ttk.Style()
        style.configure("TButton", padding=6, relief="flat")
        style.configure("TLabel", background=BG_COLOR, foreground="white")

        control_frame = tk.Frame(self.root, bg=BG_COLOR, padx=10, pady=5)
        control_frame.pack(side=tk.TOP, fill=tk.X)
        maze_frame = tk.Frame(self.root, bg=BG_COLOR, padx=10, pady=10)
        maze_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        ttk.Button(control_frame, text="Open Maze", command=self.open_maze).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="New Maze", command=self.new_maze).pack(side=tk.LEFT, padx=5)
        ttk.Button(control_frame, text="Restart", command=self.start_new_simulation).pack(side=tk.LEFT, padx=5)

        ttk.Label(control_frame, text="Algorithm:").pack(side=tk.LEFT, padx=(10, 5))
        self.algo_combo = ttk.Combobox(control_frame, textvariable=self.algorithm_var, values=list(ALGORITHMS), state="readonly", width=6)
        self.algo_combo.pack(side=tk.LEFT, padx=5)
        self.algo_combo.bind("<<ComboboxSelected>>", lambda e: self.start_new_simulation())

        ttk.Label(control_frame, text="Speed:").pack(side=tk.LEFT, padx=(10, 5))
        ttk.Scale(control_frame, from_=self.speed_min, to=self.speed_max, orient=tk.HORIZONTAL, variable=self.speed).pack(side=tk.LEFT, fill=tk.X, expand=True)
        ttk.Label(control_frame, text="Steps/tick:").pack(side=tk.LEFT, padx=(10, 5))
        ttk.Spinbox(control_frame, from_=1, to=500, textvariable=self.steps_per_tick, width=6).pack(side=tk.LEFT)

        ttk.Label(self.root, textvariable=self.metrics_var, anchor=tk.W).pack(side=tk.BOTTOM, fill=tk.X, padx=10, pady=(0, 8))

        self.canvas = tk.Canvas(maze_frame, bg=BG_COLOR, highlightthickness=0)
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", lambda e: self.redraw())
        self._resize_canvas()

    def _resize_canvas(self):
        cs = config.VIEWER_CELL_SIZE
        self.canvas.configure(width=self.maze.width * cs, height=self.maze.height * cs)

    # --- UI Event Handlers ---
    def open_maze(self):
        path = filedialog.askopenfilename(title="Open maze", filetypes=[("Maze files", "*.txt"), ("All files", "*")])
        if not path:
            return
        try:
            self.maze = Maze.from_file(path)
        except (MazeFormatError, OSError) as e:
            messagebox.showerror("Invalid maze", str(e))
            return
        self._resize_canvas()
        self.start_new_simulation()

    def new_maze(self):
        self.maze = self._random_maze()
        self._resize_canvas()
        self.start_new_simulation()

    def start_new_simulation(self):
        self.is_running = False
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None
        self.message = None
        self.solver = Solver(self.maze, self.algorithm_var.get())
        self.solver.start()
        self.draw_maze(); self._update_metrics_label()
        self.is_running = True
        self._after_id = self.root.after(100, self.update_loop)

    def update_loop(self):
        self._after_id = None
        if not self.is_running: return
        steps = max(1, int(self.steps_per_tick.get()))
        try:
            for _ in range(steps):
                if self.solver.done: break
                self.solver.step()
        except NoSolutionError:
            pass  # status is FAILED, reported below
        self.draw_maze(); self._update_metrics_label()
        if self.solver.status == SOLVED:
            self.finish(f"Solved in {len(self.solver.solution)} moves")
            return
        if self.solver.status == FAILED:
            self.finish("No Solution")
            return
        span = max(1, self.speed_max - self.speed_min)
        norm = (self.speed.get() - self.speed_min) / span  # 0..1
        delay = int(config.DELAY_SLOW_MS - norm * (config.DELAY_SLOW_MS - config.DELAY_FAST_MS))
        self._after_id = self.root.after(max(0, delay), self.update_loop)

    def finish(self, message):
        self.is_running = False
        self.message = message
        self.draw_message(message)

    def _update_metrics_label(self):
        m = self.solver.metrics
        self.metrics_var.set(
            f"Algorithm: {m['algorithm']}  |  "
            f"States explored: {m['nodes_expanded']}  |  "
            f"Frontier: {len(self.solver.frontier) if self.solver.frontier is not None else 0}  |  "
            f"Frontier max: {m['frontier_max']}  |  "
            f"Path length: {m['path_length']}"
        )

    # --- Drawing ---
    def _layout(self):
        c_width = self.canvas.winfo_width(); c_height = self.canvas.winfo_height()
        cell_size = max(1, int(min(c_width / self.maze.width, c_height / self.maze.height)))
        x_off = (c_width - cell_size * self.maze.width) // 2
        y_off = (c_height - cell_size * self.maze.height) // 2
        return cell_size, x_off, y_off

    def draw_maze(self):
        canvas = self.canvas
        canvas.delete("all")
        if canvas.winfo_width() <= 1 or canvas.winfo_height() <= 1:
            return
        cell_size, x_off, y_off = self._layout()

        explored = self.solver.explored
        frontier = {node.state for node in self.solver.frontier} if self.solver.frontier is not None else set()
        path = set(self.solver.cells or ())

        for r in range(self.maze.height):
            for c in range(self.maze.width):
                x1, y1 = x_off + c * cell_size, y_off + r * cell_size
                if self.maze.walls[r][c]: fill = config.WALL_COLOR
                elif (r, c) == self.maze.start: fill = config.START_COLOR
                elif (r, c) == self.maze.exit: fill = config.EXIT_COLOR
                elif (r, c) in path: fill = config.SOLUTION_COLOR
                elif (r, c) in frontier: fill = config.FRONTIER_COLOR
                elif (r, c) in explored: fill = config.EXPLORED_COLOR
                else: fill = config.OPEN_COLOR
                canvas.create_rectangle(x1 + 1, y1 + 1, x1 + cell_size - 1, y1 + cell_size - 1, fill=fill, outline="")

    def redraw(self):
        self.draw_maze()
        if self.message:
            self.draw_message(self.message)

    def draw_message(self, message):
        canvas = self.canvas; w = canvas.winfo_width(); h = canvas.winfo_height()
        if w <= 1 or h <= 1: return  # drawn by redraw() once the canvas is sized
        canvas.create_rectangle(w/2-120, h/2-30, w/2+120, h/2+30, fill=BG_COLOR, outline="white", width=2)
        canvas.create_text(w/2, h/2, text=message, fill="white", font=("Helvetica", 16, "bold"))


def run(maze=None, algorithm=None):
    root = tk.Tk()
    MazeApp(root, maze=maze, algorithm=algorithm)
    root.mainloop()
