WIDTH = 800
HEIGHT = 600
CELL_SIZE = 10

BG_COLOR = '#000000'
LINE_COLOR = '#FFFFFF'
START_COLOR = '#FF1493'

NUM_BUCKETS = 20
FPS = 60
EDGES_PER_FRAME = 8
HOLD_FRAMES = 90

# None draws a different maze on every run
SEED = None

VIDEO_FILE = "spanning_tree_maze.mp4"
STILL_FILE = "spanning_tree_maze.png"
WINDOW_TITLE = "Spanning Tree Maze"
