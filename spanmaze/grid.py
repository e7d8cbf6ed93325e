from typing import List, NamedTuple, Tuple


class Cell(NamedTuple):
    x: int
    y: int


class Edge(NamedTuple):
    parent: Cell
    child: Cell


def neighbors(cell: Cell, rows: int, cols: int) -> List[Cell]:
    x, y = cell
    result = []
    if x > 0:
        result.append(Cell(x - 1, y))
    if x < cols - 1:
        result.append(Cell(x + 1, y))
    if y > 0:
        result.append(Cell(x, y - 1))
    if y < rows - 1:
        result.append(Cell(x, y + 1))
    return result


def in_bounds(cell: Cell, rows: int, cols: int) -> bool:
    return 0 <= cell.x < cols and 0 <= cell.y < rows


def grid_dimensions(width: int, height: int, cell_size: int) -> Tuple[int, int]:
    """Rows and columns of cells that fit in a width x height pixel area.

    Leftover pixels on the right and bottom are unused margin.
    """
    if cell_size <= 0:
        raise ValueError(f"cell_size must be positive, got {cell_size}")
    rows = height // cell_size
    cols = width // cell_size
    if rows < 1 or cols < 1:
        raise ValueError(
            f"{width}x{height} px holds no {cell_size}px cells (rows={rows}, cols={cols})"
        )
    return rows, cols
