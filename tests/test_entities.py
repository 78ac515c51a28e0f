"""
Collider and laser geometry tests.
"""

import pytest

from lameboy.entities import Box, UltimateLaser


def make_laser(**overrides):
    values = dict(
        start_x=50.0,
        end_x=320.0,
        start_y=132.0,
        start_height=24.0,
        end_y=72.0,
        end_height=144.0,
        center_y=144.0,
        start_time=1000.0,
    )
    values.update(overrides)
    return UltimateLaser(**values)


@pytest.mark.parametrize(
    "other, expected",
    [
        (Box(5, 5, 10, 10), True),
        (Box(10, 0, 10, 10), False),  # touching on the right
        (Box(0, 10, 10, 10), False),  # touching below
        (Box(-5, -5, 30, 30), True),  # containing
        (Box(50, 50, 1, 1), False),
    ],
)
def test_box_intersects(other, expected):
    box = Box(0, 0, 10, 10)
    assert box.intersects(other) is expected
    assert other.intersects(box) is expected


def test_box_contains_is_half_open():
    box = Box(0, 0, 10, 10)
    assert box.contains(0, 0)
    assert not box.contains(10, 5)


def test_laser_span_interpolates():
    laser = make_laser()
    assert laser.span_at(50) == (132.0, 24.0)
    assert laser.span_at(320) == (72.0, 144.0)
    top, height = laser.span_at(185)
    assert top == pytest.approx(102.0)
    assert height == pytest.approx(84.0)


def test_laser_span_is_clamped():
    laser = make_laser()
    assert laser.span_at(-100) == laser.span_at(50)
    assert laser.span_at(1000) == laser.span_at(320)


def test_degenerate_laser_uses_narrow_end():
    laser = make_laser(start_x=320.0)
    assert laser.span_at(400) == (132.0, 24.0)


def test_laser_hits_only_inside_beam():
    laser = make_laser()
    assert laser.hits(Box(200, 130, 30, 30))
    assert not laser.hits(Box(200, 0, 30, 30))
    # left of the ship
    assert not laser.hits(Box(0, 130, 30, 30))
    # straddling the start is tested at the narrow end
    assert laser.hits(Box(30, 130, 30, 30))


def test_laser_expiry_is_strict():
    laser = make_laser()
    assert not laser.expired(2000)
    assert laser.expired(2000.5)
