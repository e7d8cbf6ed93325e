import colorsys
from typing import Tuple


def _check_range(max_value, num_buckets):
    if max_value <= 0:
        raise ValueError(f"max_value must be positive, got {max_value}")
    if num_buckets < 1:
        raise ValueError(f"num_buckets must be at least 1, got {num_buckets}")


def segment_bucket(value, max_value, num_buckets: int) -> int:
    """Index of the equal-width segment of [0, max_value] that ``value`` falls in."""
    _check_range(max_value, num_buckets)
    segment_width = max_value / num_buckets
    bucket = int(value / segment_width)
    return max(0, min(bucket, num_buckets - 1))


def segmented_color(value, max_value, num_buckets: int) -> Tuple[int, int, int]:
    """Green at the low end, red at the high end, in ``num_buckets`` steps."""
    bucket = segment_bucket(value, max_value, num_buckets)
    if num_buckets == 1:
        return (0, 255, 0)
    red = bucket * 255 // (num_buckets - 1)
    return (red, 255 - red, 0)


def cyclic_gradient(value, max_value, num_buckets: int) -> Tuple[int, int, int]:
    """Rainbow color for ``value``: one full hue turn over [0, max_value].

    ``num_buckets`` is accepted to match ``segmented_color``; the hue is not
    quantized.
    """
    _check_range(max_value, num_buckets)
    hue = (value / max_value) % 1.0
    r, g, b = colorsys.hsv_to_rgb(hue, 1.0, 1.0)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
