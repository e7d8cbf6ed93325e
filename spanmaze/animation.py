from tqdm import tqdm
from typing import List, Optional

from .colors import cyclic_gradient, hex_to_rgb, segmented_color
from .config import (BG_COLOR, CELL_SIZE, EDGES_PER_FRAME, HEIGHT, NUM_BUCKETS,
                     WIDTH)
from .grid import Edge
from .raster import cell_to_pixel, clear_screen, draw_edge, fill_rect, new_buffer, pack_rgb
from .traversal import discovery_levels, extent


def animate_tree(tree: List[Edge], presenter, width: int = WIDTH, height: int = HEIGHT,
                 cell_size: int = CELL_SIZE, num_buckets: int = NUM_BUCKETS,
                 edges_per_frame: int = EDGES_PER_FRAME, hold_frames: int = 0,
                 background: str = BG_COLOR, buffer=None, progress: bool = True) -> int:
    """Reveal ``tree`` edge by edge in discovery order, sweeping the hue as it goes.

    The buffer is handed to ``presenter`` after every ``edges_per_frame`` edges
    and once more at the end, followed by ``hold_frames`` copies of the
    finished maze. The presenter is polled before each edge; when it reports
    closed or cancelled, drawing stops. Returns the number of edges drawn.
    """
    if edges_per_frame < 1:
        raise ValueError(f"edges_per_frame must be at least 1, got {edges_per_frame}")
    if buffer is None:
        buffer = new_buffer(width, height)
    clear_screen(buffer, pack_rgb(hex_to_rgb(background)))

    max_level = extent(tree)
    drawn = 0
    cancelled = False

    for level, edge in tqdm(discovery_levels(tree), desc="Drawing edges", unit="edge",
                            ncols=100, disable=not progress):
        if presenter.poll_closed_or_cancelled():
            cancelled = True
            break
        if max_level > 0:
            color = cyclic_gradient(level, max_level, num_buckets)
        else:
            color = cyclic_gradient(0, 1, num_buckets)
        draw_edge(buffer, width, height, edge, cell_size, pack_rgb(color))
        drawn += 1
        if drawn % edges_per_frame == 0:
            presenter.present(buffer, width, height)

    if cancelled:
        return drawn

    if drawn % edges_per_frame != 0 or drawn == 0:
        presenter.present(buffer, width, height)
    for _ in range(hold_frames):
        if presenter.poll_closed_or_cancelled():
            break
        presenter.present(buffer, width, height)

    return drawn


def render_static(tree: List[Edge], width: int = WIDTH, height: int = HEIGHT,
                  cell_size: int = CELL_SIZE, num_buckets: int = NUM_BUCKETS,
                  background: str = BG_COLOR, line_color: Optional[str] = None,
                  start_color: Optional[str] = None, buffer=None):
    """Draw the whole tree at once.

    Edges are colored green to red by discovery index with the segmented
    map, or all with ``line_color`` when one is given. With ``start_color``
    the root cell gets a small filled square on top.
    """
    if buffer is None:
        buffer = new_buffer(width, height)
    clear_screen(buffer, pack_rgb(hex_to_rgb(background)))

    max_level = extent(tree)
    for level, edge in discovery_levels(tree):
        if line_color is not None:
            color = hex_to_rgb(line_color)
        elif max_level > 0:
            color = segmented_color(level, max_level, num_buckets)
        else:
            color = segmented_color(0, 1, num_buckets)
        draw_edge(buffer, width, height, edge, cell_size, pack_rgb(color))

    if start_color is not None and tree:
        x, y = cell_to_pixel(tree[0].parent, cell_size)
        radius = max(cell_size // 4, 1)
        fill_rect(buffer, width, height, x - radius, y - radius,
                  2 * radius + 1, 2 * radius + 1, pack_rgb(hex_to_rgb(start_color)))

    return buffer
