import random
from typing import List

from .grid import Cell, Edge, in_bounds, neighbors


def build_spanning_tree(start: Cell, rows: int, cols: int, rng=None) -> List[Edge]:
    """Randomized depth-first spanning tree of the rows x cols grid.

    Edges come back in discovery order. ``rng`` only needs a ``shuffle``
    method; pass ``random.Random(seed)`` for a reproducible maze.

    The walk keeps its own stack of (cell, remaining neighbors) frames
    instead of recursing, so a long corridor cannot exhaust the call stack.
    Each cell's neighbors are shuffled once, when the cell is first reached,
    which keeps the edge order the same as the recursive backtracker.
    """
    if rows < 1 or cols < 1:
        raise ValueError(f"grid must have at least one cell, got {rows}x{cols}")
    start = Cell(*start)
    if not in_bounds(start, rows, cols):
        raise ValueError(f"start cell {tuple(start)} is outside the {rows}x{cols} grid")
    if rng is None:
        rng = random

    visited = [[False] * cols for _ in range(rows)]
    tree: List[Edge] = []

    def enter(cell):
        visited[cell.y][cell.x] = True
        candidates = neighbors(cell, rows, cols)
        rng.shuffle(candidates)
        return cell, iter(candidates)

    stack = [enter(start)]
    while stack:
        current, pending = stack[-1]
        for neighbor in pending:
            if not visited[neighbor.y][neighbor.x]:
                tree.append(Edge(current, neighbor))
                stack.append(enter(neighbor))
                break
        else:
            stack.pop()

    return tree


def create_spanning_tree(rows: int, cols: int, rng=None) -> List[Edge]:
    return build_spanning_tree(Cell(0, 0), rows, cols, rng)


def is_spanning_tree(tree: List[Edge], rows: int, cols: int) -> bool:
    """Union-find check that ``tree`` connects every cell without a cycle."""
    if len(tree) != rows * cols - 1:
        return False

    parent = list(range(rows * cols))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    for a, b in tree:
        if not (in_bounds(a, rows, cols) and in_bounds(b, rows, cols)):
            return False
        if abs(a.x - b.x) + abs(a.y - b.y) != 1:
            return False
        root_a = find(a.x + a.y * cols)
        root_b = find(b.x + b.y * cols)
        if root_a == root_b:
            return False
        parent[root_a] = root_b

    return True
