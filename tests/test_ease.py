import numpy
import pytest

from camber import ease
from camber import compose

NON_MONOTONIC = {'in_back', 'out_back', 'in_out_back', 'in_elastic', 'out_elastic',
    'in_out_elastic', 'in_bounce', 'out_bounce', 'in_out_bounce'}


@pytest.mark.parametrize('kind', sorted(ease.EASINGS))
def test_boundaries_exact(kind):
    assert ease.ease(kind, 0) == 0
    assert ease.ease(kind, 1) == 1
    assert ease.ease(kind, 0.0) == 0
    assert ease.ease(kind, 1.0) == 1


@pytest.mark.parametrize('kind', sorted(set(ease.EASINGS) - NON_MONOTONIC))
def test_monotonic(kind):
    ts = numpy.linspace(0, 1, 501)
    values = ease.ease(kind, ts)
    assert values.shape == ts.shape
    assert numpy.all(numpy.diff(values) >= -1e-12)
    assert numpy.all((values >= -1e-12) & (values <= 1 + 1e-12))


@pytest.mark.parametrize('kind', sorted(ease.EASINGS))
def test_array_matches_scalar(kind):
    ts = numpy.linspace(0, 1, 11)
    values = ease.ease(kind, ts)
    for t, v in zip(ts, values):
        assert ease.ease(kind, t) == pytest.approx(v)


@pytest.mark.parametrize('kind', sorted(ease.EASINGS))
def test_accepts_lists(kind):
    values = ease.ease(kind, [0, 0.25, 0.5, 1])
    assert isinstance(values, numpy.ndarray)
    assert values.shape == (4,)
    assert numpy.allclose(values, ease.ease(kind, numpy.array([0, 0.25, 0.5, 1])))
    assert values[0] == 0 and values[-1] == 1


def test_non_monotonic_kinds_overshoot():
    ts = numpy.linspace(0, 1, 1001)
    assert ease.in_back(ts).min() < 0
    assert ease.out_back(ts).max() > 1
    assert ease.out_elastic(ts).max() > 1
    assert numpy.any(numpy.diff(ease.out_bounce(ts)) < 0)
    assert ease.out_bounce(ts).max() <= 1 + 1e-12


def test_unknown_kind():
    with pytest.raises(ValueError):
        ease.ease('in_out_wobble', 0.5)


def test_smooth_families():
    t = 0.3
    assert ease.smooth_start_2(t) == pytest.approx(t**2)
    assert ease.smooth_start_9(t) == pytest.approx(t**9)
    assert ease.smooth_stop_3(t) == pytest.approx(1 - (1 - t)**3)
    assert ease.smooth_start(t, 2.5) == pytest.approx(t**2.5)
    assert ease.smooth_stop_2(t) == pytest.approx(compose.flip(ease.smooth_start_2(compose.flip(t))))
    # crossfade of start and stop
    expected = (1 - t) * t**4 + t * (1 - (1 - t)**4)
    assert ease.smooth_step_4(t) == pytest.approx(expected)
    assert ease.smooth_step_3(0.5) == pytest.approx(0.5)


def test_named_easings():
    assert ease.in_out_quad(0.25) == pytest.approx(0.125)
    assert ease.in_out_cubic(0.75) == pytest.approx(1 - 0.5**3 / 2)
    assert ease.in_out_sine(0.5) == pytest.approx(0.5)
    assert ease.out_sine(0.5) == pytest.approx(numpy.sin(numpy.pi / 4))
    assert ease.in_out_expo(0.5) == pytest.approx(0.5)
    assert ease.in_out_circ(0.5) == pytest.approx(0.5)


def test_compose():
    assert compose.flip(0.25) == 0.75
    assert compose.mix(ease.smooth_start_2, ease.smooth_stop_2, 0.5, 0.5) == pytest.approx(0.5)
    assert compose.scale(ease.smooth_start_2, 0.5) == pytest.approx(0.125)
    assert compose.reverse_scale(ease.linear, 0.5) == pytest.approx(0.25)
    assert compose.arch(0.5) == 1
    assert compose.arch(0) == 0 and compose.arch(1) == 0
