import numpy as np
from typing import Tuple

from .grid import Cell, Edge


def pack_rgb(color: Tuple[int, int, int]) -> int:
    r, g, b = color
    return ((int(r) & 0xFF) << 16) | ((int(g) & 0xFF) << 8) | (int(b) & 0xFF)


def new_buffer(width: int, height: int, color: int = 0) -> np.ndarray:
    """Flat row-major 0x00RRGGBB pixel buffer; pixel (x, y) lives at x + y * width."""
    return np.full(width * height, color, dtype=np.uint32)


def clear_screen(buffer, color: int):
    if isinstance(buffer, np.ndarray):
        buffer.fill(color)
    else:
        for i in range(len(buffer)):
            buffer[i] = color


def fill_rect(buffer, width: int, height: int, x: int, y: int, w: int, h: int, color: int):
    for j in range(max(y, 0), min(y + h, height)):
        for i in range(max(x, 0), min(x + w, width)):
            buffer[i + j * width] = color


def draw_line(buffer, width: int, height: int,
              p0: Tuple[int, int], p1: Tuple[int, int], color: int):
    """Bresenham line from p0 to p1, both endpoints included.

    Pixels outside the buffer are skipped. The endpoints are ordered before
    stepping, so drawing p1 -> p0 lights exactly the same pixels.
    """
    (x0, y0), (x1, y1) = sorted((tuple(p0), tuple(p1)))
    x0, y0, x1, y1 = int(x0), int(y0), int(x1), int(y1)

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if 0 <= x0 < width and 0 <= y0 < height:
            buffer[x0 + y0 * width] = color
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def cell_to_pixel(cell: Cell, cell_size: int) -> Tuple[int, int]:
    return cell.x * cell_size, cell.y * cell_size


def draw_edge(buffer, width: int, height: int, edge: Edge, cell_size: int, color: int):
    draw_line(buffer, width, height,
              cell_to_pixel(edge.parent, cell_size),
              cell_to_pixel(edge.child, cell_size),
              color)


def buffer_to_rgb(buffer, width: int, height: int) -> np.ndarray:
    """(height, width, 3) uint8 RGB view of a packed pixel buffer, for image writers."""
    packed = np.asarray(buffer, dtype=np.uint32).reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[..., 0] = (packed >> 16) & 0xFF
    rgb[..., 1] = (packed >> 8) & 0xFF
    rgb[..., 2] = packed & 0xFF
    return rgb
