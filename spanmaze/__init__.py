from .grid import Cell, Edge, grid_dimensions, neighbors
from .spanning_tree import build_spanning_tree, create_spanning_tree, is_spanning_tree
from .traversal import discovery_levels, extent
from .raster import (buffer_to_rgb, clear_screen, draw_edge, draw_line, fill_rect,
                     new_buffer, pack_rgb)
from .colors import cyclic_gradient, segment_bucket, segmented_color

__version__ = "0.1.0"
