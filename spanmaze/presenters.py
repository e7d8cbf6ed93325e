import cv2
import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from PIL import Image
from typing import Optional

from .config import FPS, WINDOW_TITLE
from .raster import buffer_to_rgb

NON_INTERACTIVE_BACKENDS = {"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"}


def save_png(buffer, width: int, height: int, output_file: str):
    image = Image.fromarray(buffer_to_rgb(buffer, width, height))
    image.save(output_file)
    print(f"Image saved as: {output_file}")


class VideoPresenter:
    """Writes every presented buffer as one frame of an mp4 file."""

    def __init__(self, output_file: str, width: int, height: int, fps: int = FPS,
                 max_frames: Optional[int] = None):
        self.output_file = output_file
        self.width = width
        self.height = height
        self.max_frames = max_frames
        self.frame_count = 0

        fourcc = cv2.VideoWriter_fourcc(*'mp4v')
        self.video_writer = cv2.VideoWriter(output_file, fourcc, fps, (width, height))
        if not self.video_writer.isOpened():
            raise IOError(f"Could not open video writer for {output_file}")
        print(f"Video writer initialized: {output_file}")

    def present(self, buffer, width: int, height: int):
        if (width, height) != (self.width, self.height):
            raise ValueError(
                f"frame is {width}x{height}, video is {self.width}x{self.height}"
            )
        frame_bgr = cv2.cvtColor(buffer_to_rgb(buffer, width, height), cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame_bgr)
        self.frame_count += 1

    def poll_closed_or_cancelled(self) -> bool:
        return self.max_frames is not None and self.frame_count >= self.max_frames

    def close(self):
        if self.video_writer is not None:
            self.video_writer.release()
            self.video_writer = None
            print(f"Video saved as: {self.output_file} ({self.frame_count} frames)")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class WindowPresenter:
    """Shows the buffer in a matplotlib figure; closing it or pressing Escape cancels."""

    def __init__(self, width: int, height: int, title: str = WINDOW_TITLE,
                 pause: float = 0.001, dpi: int = 100):
        self.pause = pause
        self.escape_pressed = False

        self.fig, self.ax = plt.subplots(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.fig.subplots_adjust(left=0, right=1, top=1, bottom=0)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(title)
        self.ax.axis('off')
        self.image = self.ax.imshow(np.zeros((height, width, 3), dtype=np.uint8),
                                    interpolation='nearest')
        self.fig.canvas.mpl_connect('key_press_event', self._on_key)

    def _on_key(self, event):
        if event.key == 'escape':
            self.escape_pressed = True

    def present(self, buffer, width: int, height: int):
        self.image.set_data(buffer_to_rgb(buffer, width, height))
        self.fig.canvas.draw_idle()
        plt.pause(self.pause)

    def poll_closed_or_cancelled(self) -> bool:
        return self.escape_pressed or not plt.fignum_exists(self.fig.number)

    def wait_until_closed(self):
        # a file-only backend never shows the window, so it can never be closed
        if matplotlib.get_backend().lower() in NON_INTERACTIVE_BACKENDS:
            return
        while not self.poll_closed_or_cancelled():
            plt.pause(0.05)

    def close(self):
        plt.close(self.fig)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
