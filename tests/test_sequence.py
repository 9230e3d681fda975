import pytest

from mahigui.sequence import Sequence, linear
from mahigui.vec2 import Vec2


def test_linear_endpoints():
    assert linear(2.0, 8.0, 0.0) == 2.0
    assert linear(2.0, 8.0, 1.0) == 8.0


def test_linear_vec2():
    result = linear(Vec2(0, 0), Vec2(10, 20), 0.5)
    assert result == Vec2(5, 10)


def test_exact_key_returned():
    seq = Sequence()
    seq[0.0] = 1.0
    seq[0.3] = 7.0
    seq[1.0] = 3.0
    assert seq(0.3) == 7.0
    assert seq(0.0) == 1.0
    assert seq(1.0) == 3.0


def test_interpolates_between_neighbours():
    seq = Sequence()
    seq[0.0] = 0.0
    seq[0.5] = 10.0
    seq[1.0] = 0.0
    assert seq(0.25) == pytest.approx(linear(0.0, 10.0, 0.5))
    assert seq(0.75) == pytest.approx(linear(10.0, 0.0, 0.5))


def test_custom_tween():
    seq = Sequence(lambda a, b, t: a)
    seq[0.0] = "start"
    seq[1.0] = "end"
    assert seq(0.9) == "start"
    seq.tween = lambda a, b, t: b
    assert seq(0.1) == "end"


def test_missing_endpoints_raise():
    seq = Sequence()
    seq[0.0] = 1.0
    with pytest.raises(ValueError):
        seq(0.5)


def test_out_of_range_raises():
    seq = Sequence()
    seq[0.0] = 1.0
    seq[1.0] = 2.0
    with pytest.raises(ValueError):
        seq(1.5)
    with pytest.raises(ValueError):
        seq[-0.1] = 3.0


def test_getitem_reads_keyframe():
    seq = Sequence()
    seq[0.4] = 9.0
    assert seq[0.4] == 9.0
    with pytest.raises(KeyError):
        seq[0.6]


def test_keys_sorted_and_overwrite():
    seq = Sequence()
    seq[1.0] = "c"
    seq[0.0] = "a"
    seq[0.5] = "b"
    seq[0.5] = "B"
    stops, values = seq.keys()
    assert stops == [0.0, 0.5, 1.0]
    assert values == ["a", "B", "c"]
    assert len(seq) == 3