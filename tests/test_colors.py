import pytest

from spanmaze.colors import cyclic_gradient, hex_to_rgb, segment_bucket, segmented_color


def test_segment_bucket_bounds():
    for value in range(0, 101):
        bucket = segment_bucket(value, 100, 7)
        assert 0 <= bucket < 7


def test_segment_bucket_edges():
    assert segment_bucket(0, 10, 4) == 0
    assert segment_bucket(2.4, 10, 4) == 0
    assert segment_bucket(2.5, 10, 4) == 1
    assert segment_bucket(10, 10, 4) == 3
    assert segment_bucket(-3, 10, 4) == 0


def test_segment_bucket_small_range():
    # fewer values than buckets still spreads out
    assert [segment_bucket(v, 3, 20) for v in range(4)] == [0, 6, 13, 19]


def test_segmented_color_ramp():
    assert segmented_color(0, 10, 5) == (0, 255, 0)
    assert segmented_color(10, 10, 5) == (255, 0, 0)
    reds = [segmented_color(v, 100, 5)[0] for v in range(101)]
    assert reds == sorted(reds)
    for v in range(101):
        r, g, b = segmented_color(v, 100, 5)
        assert r + g == 255
        assert b == 0


def test_segmented_color_single_bucket():
    assert segmented_color(7, 10, 1) == (0, 255, 0)


def test_cyclic_gradient_red_at_start():
    assert cyclic_gradient(0, 10, 20) == (255, 0, 0)


def test_cyclic_gradient_cyan_halfway():
    r, g, b = cyclic_gradient(5, 10, 20)
    assert r == 0
    assert g > 0 and b > 0


def test_cyclic_gradient_sectors():
    assert cyclic_gradient(1, 6, 1) == (255, 255, 0)
    assert cyclic_gradient(2, 6, 1) == (0, 255, 0)
    assert cyclic_gradient(4, 6, 1) == (0, 0, 255)
    assert cyclic_gradient(5, 6, 1) == (255, 0, 255)


def test_cyclic_gradient_channels_in_range():
    for value in range(0, 361):
        for channel in cyclic_gradient(value, 360, 20):
            assert 0 <= channel <= 255


def test_cyclic_gradient_is_smooth():
    colors = [cyclic_gradient(v, 1000, 20) for v in range(1001)]
    for a, b in zip(colors, colors[1:]):
        assert max(abs(x - y) for x, y in zip(a, b)) <= 3
    assert colors[-1] == colors[0]


def test_cyclic_gradient_ignores_buckets():
    assert cyclic_gradient(3, 10, 2) == cyclic_gradient(3, 10, 50)


@pytest.mark.parametrize("func", [segment_bucket, segmented_color, cyclic_gradient])
def test_zero_max_value_rejected(func):
    with pytest.raises(ValueError):
        func(0, 0, 10)


def test_hex_to_rgb():
    assert hex_to_rgb('#FF1493') == (255, 20, 147)
    assert hex_to_rgb('000000') == (0, 0, 0)
