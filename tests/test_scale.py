import math

import pytest
from conftest import make_image

from sza import Animation, Frame, InvalidScaleFactorError, sza
from sza.zipped.anim import scale


@pytest.fixture
def animation() -> Animation:
    return Animation([Frame(make_image(10, 20), 50), Frame(make_image(30, 5), 75)])


def test_scale_by_one_is_identity(animation: Animation) -> None:
    scaled = scale(animation, 1.0)
    assert scaled is not animation
    assert scaled.size == animation.size
    assert len(scaled) == len(animation)
    assert scaled.durations == animation.durations
    assert [frame.size for frame in scaled] == [frame.size for frame in animation]


def test_scale_frames(animation: Animation) -> None:
    scaled = animation.scale(2)
    assert scaled.size == (60, 40)
    assert [frame.size for frame in scaled] == [(20, 40), (60, 10)]
    assert scaled.durations == [50, 75]
    assert all(frame.image.mode == 'RGBA' for frame in scaled)
    assert scaled[0].image.getpixel((10, 20)) == (255, 0, 0, 255)


def test_scale_does_not_touch_source(animation: Animation) -> None:
    images = [frame.image for frame in animation]
    scaled = animation.scale(0.5)
    assert [frame.image for frame in animation] == images
    assert animation.size == (30, 20)
    assert not {id(frame.image) for frame in scaled} & {id(im) for im in images}


def test_scale_rounds(animation: Animation) -> None:
    scaled = animation.scale(0.33)
    assert scaled.size == (round(30 * 0.33), round(20 * 0.33))
    assert [frame.size for frame in scaled] == [(3, 7), (10, 2)]


def test_scale_keeps_pixels_positive() -> None:
    scaled = Animation([Frame(make_image(1, 3), 10)]).scale(0.1)
    assert scaled.size == (1, 1)
    assert scaled[0].size == (1, 1)


def test_bounds_are_scaled_not_measured() -> None:
    boxed = Animation([Frame(make_image(4, 4), 10)], size=(100, 50))
    scaled = boxed.scale(0.5)
    assert scaled.size == (50, 25)
    assert scaled[0].size == (2, 2)


def test_scale_composes_with_intermediate_rounding() -> None:
    animation = Animation([Frame(make_image(10, 10), 10)])
    twice = animation.scale(0.33).scale(3)
    assert twice.size == (round(round(10 * 0.33) * 3),) * 2 == (9, 9)
    once = animation.scale(0.33 * 3)
    assert once.size == (10, 10)
    assert twice.size != once.size


@pytest.mark.parametrize('factor', [0, -1, -0.5, math.nan, math.inf])
def test_invalid_factor(animation: Animation, factor: float) -> None:
    with pytest.raises(InvalidScaleFactorError) as excinfo:
        animation.scale(factor)
    assert excinfo.value.factor is factor


def test_preset_scale(animation: Animation) -> None:
    assert sza.scale(animation, 3).size == (90, 60)
