import collections
from dataclasses import dataclass
from typing import Optional


class EmptyFrontierError(Exception):
    """remove() was called on an empty frontier."""


@dataclass(frozen=True, eq=False)
class Node:
    """One search tree record: a cell, the node it was reached from, and the move taken."""
    state: tuple
    parent: Optional["Node"] = None
    action: Optional[str] = None

    def path(self):
        """(action, cell) pairs from the root's first move down to this node."""
        steps = []
        node = self
        while node.parent is not None:
            steps.append((node.action, node.state))
            node = node.parent
        steps.reverse()
        return steps


class StackFrontier:
    """
    Last-in-first-out frontier (depth-first exploration).

    Frontier Semantics:
      - add() appends without de-duplication; the solver checks
        contains_state() before adding.
      - contains_state() is a linear scan over held nodes.
      - remove() takes the most recently added node.
    """
    def __init__(self):
        self.frontier = collections.deque()

    def add(self, node):
        self.frontier.append(node)

    def contains_state(self, state):
        return any(node.state == state for node in self.frontier)

    def empty(self):
        return len(self.frontier) == 0

    def remove(self):
        if self.empty():
            raise EmptyFrontierError("Empty frontier")
        return self.frontier.pop()

    def __len__(self):
        return len(self.frontier)

    def __iter__(self):
        return iter(self.frontier)


class QueueFrontier(StackFrontier):
    """First-in-first-out frontier (breadth-first exploration): remove() takes the oldest node."""

    def remove(self):
        if self.empty():
            raise EmptyFrontierError("Empty frontier")
        return self.frontier.popleft()


ALGORITHMS = {
    "BFS": QueueFrontier,
    "DFS": StackFrontier,
}

_ALIASES = {
    "BREADTH-FIRST": "BFS",
    "BREADTH-FIRST SEARCH": "BFS",
    "QUEUE": "BFS",
    "DEPTH-FIRST": "DFS",
    "DEPTH-FIRST SEARCH": "DFS",
    "STACK": "DFS",
}


def algorithm_name(name):
    key = name.strip().upper()
    key = _ALIASES.get(key, key)
    if key not in ALGORITHMS:
        raise ValueError(f"Unknown search algorithm {name!r}; expected one of {sorted(ALGORITHMS)}")
    return key


def frontier_for(name):
    """Frontier class for an algorithm name ("BFS", "DFS" or an alias)."""
    return ALGORITHMS[algorithm_name(name)]
