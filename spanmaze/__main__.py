import random

from . import config
from .animation import animate_tree, render_static
from .grid import grid_dimensions
from .presenters import VideoPresenter, WindowPresenter, save_png
from .spanning_tree import create_spanning_tree


def build_maze():
    rows, cols = grid_dimensions(config.WIDTH, config.HEIGHT, config.CELL_SIZE)
    rng = random.Random(config.SEED) if config.SEED is not None else random
    print(f"🧩 Growing spanning tree over {cols}x{rows} cells...")
    tree = create_spanning_tree(rows, cols, rng)
    print(f"Spanning tree has {len(tree)} edges")
    return tree


def run_video(tree):
    try:
        presenter = VideoPresenter(config.VIDEO_FILE, config.WIDTH, config.HEIGHT, config.FPS)
    except IOError as e:
        print(f"Error: {e}")
        return False
    with presenter:
        print("🎬 Rendering animation frames...")
        animate_tree(tree, presenter, width=config.WIDTH, height=config.HEIGHT,
                     cell_size=config.CELL_SIZE, num_buckets=config.NUM_BUCKETS,
                     edges_per_frame=config.EDGES_PER_FRAME,
                     hold_frames=config.HOLD_FRAMES, background=config.BG_COLOR)
    return True


def run_window(tree):
    print("🪟 Opening window (close it or press Escape to stop)...")
    with WindowPresenter(config.WIDTH, config.HEIGHT, config.WINDOW_TITLE) as presenter:
        drawn = animate_tree(tree, presenter, width=config.WIDTH, height=config.HEIGHT,
                             cell_size=config.CELL_SIZE, num_buckets=config.NUM_BUCKETS,
                             edges_per_frame=config.EDGES_PER_FRAME,
                             background=config.BG_COLOR)
        if drawn < len(tree):
            print(f"Stopped after {drawn}/{len(tree)} edges")
        else:
            presenter.wait_until_closed()
    return True


def run_still(tree):
    print("🎨 Drawing still image...")
    buffer = render_static(tree, width=config.WIDTH, height=config.HEIGHT,
                           cell_size=config.CELL_SIZE, num_buckets=config.NUM_BUCKETS,
                           background=config.BG_COLOR, start_color=config.START_COLOR)
    save_png(buffer, config.WIDTH, config.HEIGHT, config.STILL_FILE)
    return True


def run_plain_still(tree):
    print("🎨 Drawing plain still image...")
    buffer = render_static(tree, width=config.WIDTH, height=config.HEIGHT,
                           cell_size=config.CELL_SIZE, background=config.BG_COLOR,
                           line_color=config.LINE_COLOR, start_color=config.START_COLOR)
    save_png(buffer, config.WIDTH, config.HEIGHT, config.STILL_FILE)
    return True


def main():
    modes = {
        '1': ('Animated video (rainbow sweep)', run_video),
        '2': ('Live window (rainbow sweep)', run_window),
        '3': ('Still image (segmented colors)', run_still),
        '4': ('Still image (plain lines)', run_plain_still),
    }

    print("Available render modes:")
    for key, (name, _) in modes.items():
        print(f"{key}. {name}")

    choice = input("Choose mode (1-4): ").strip()
    if choice not in modes:
        print("Invalid choice. Using animated video as default.")
        choice = '1'

    name, run = modes[choice]
    try:
        tree = build_maze()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if not run(tree):
        return 1
    print(f"✅ {name} finished")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
