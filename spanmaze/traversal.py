from typing import List, Tuple

from .grid import Edge


def extent(tree: List[Edge]) -> int:
    """Largest discovery index in ``tree``, used to normalize color progress.

    This is the edge count minus one, not the depth of the tree. An empty
    tree reports 0.
    """
    return max(len(tree) - 1, 0)


def discovery_levels(tree: List[Edge]) -> List[Tuple[int, Edge]]:
    # "level" is the position in discovery order, not distance from the root
    return list(enumerate(tree))
