from graphviz import Digraph

SOLUTION_EDGE_COLOR = "#e74c3c"


def _label(cell):
    return str(cell)


def search_tree(solver, highlight_solution=True):
    """
    Builds the search tree of a finished run as a graphviz Digraph.

    Every node the solver created becomes a graph node labelled with its
    (row, col) cell, and every parent -> child link an edge labelled with the
    move. The start -> exit chain is drawn in red when highlight_solution is set.
    """
    dot = Digraph(name="search_tree")
    dot.attr("node", shape="box", fontname="Helvetica")

    on_path = set()
    if highlight_solution and solver.solution is not None:
        on_path.add(solver.maze.start)
        on_path.update(cell for _, cell in solver.solution)

    dot.node(_label(solver.maze.start), style="bold")
    for parent, child, action in solver.tree_edges:
        if child in on_path and parent in on_path:
            dot.node(_label(child), color=SOLUTION_EDGE_COLOR)
            dot.edge(_label(parent), _label(child), label=action, color=SOLUTION_EDGE_COLOR, penwidth="2")
        else:
            dot.node(_label(child))
            dot.edge(_label(parent), _label(child), label=action)
    return dot


def render_search_tree(solver, filename, format="png", view=False):
    # needs the Graphviz `dot` executable on PATH
    dot = search_tree(solver)
    dot.format = format
    return dot.render(filename, view=view, cleanup=True)
