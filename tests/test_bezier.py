import numpy
import pytest

from camber import errors
from camber.curve import bezier

CUBIC = numpy.array([(0, 0), (1, 2), (3, 2), (4, 0)], dtype=float)


def test_cubic_midpoint():
    assert numpy.allclose(bezier.evaluate(CUBIC, 0.5), (2.0, 1.5))


def test_endpoints():
    assert numpy.allclose(bezier.evaluate(CUBIC, 0), CUBIC[0])
    assert numpy.allclose(bezier.evaluate(CUBIC, 1), CUBIC[-1])
    points = numpy.random.RandomState(0).normal(size=(9, 3))
    assert numpy.allclose(bezier.evaluate(points, [0, 1]), points[[0, -1]])


def test_matches_bernstein_sum():
    points = numpy.random.RandomState(1).normal(size=(7, 2))
    ts = numpy.linspace(0, 1, 33)
    values = bezier.evaluate(points, ts)
    assert values.shape == (33, 2)
    assert numpy.allclose(values, bezier.bernstein_evaluate(points, ts))


def test_one_dimensional():
    assert bezier.evaluate([0, 1], 0.25) == pytest.approx(0.25)
    assert bezier.evaluate([0, 0, 1], [0.5]).shape == (1,)


def test_inputs_not_modified():
    points = CUBIC.copy()
    bezier.evaluate(points, 0.3)
    bezier.truncate(points, 0.3)
    assert numpy.all(points == CUBIC)


@pytest.mark.parametrize('bad_t', [-0.01, 1.01, [0.5, 2]])
def test_parameter_out_of_domain(bad_t):
    with pytest.raises(errors.DomainError):
        bezier.evaluate(CUBIC, bad_t)


def test_truncate_out_of_domain():
    with pytest.raises(errors.DomainError):
        bezier.truncate(CUBIC, 1.5)
    with pytest.raises(errors.DomainError):
        bezier.truncate(CUBIC, -0.5)


def test_too_few_points():
    with pytest.raises(errors.DomainError):
        bezier.evaluate([(1, 1)], 0.5)
    with pytest.raises(errors.DomainError):
        bezier.truncate([(1, 1)], 0.5)


@pytest.mark.parametrize('split', [0.1, 0.5, 0.73])
def test_truncate_reproduces_curve(split):
    left, right = bezier.truncate(CUBIC, split)
    assert left.shape == right.shape == CUBIC.shape
    assert numpy.allclose(left[0], CUBIC[0])
    assert numpy.allclose(right[-1], CUBIC[-1])
    assert numpy.allclose(left[-1], right[0])
    assert numpy.allclose(left[-1], bezier.evaluate(CUBIC, split))
    s = numpy.linspace(0, 1, 21)
    assert numpy.allclose(bezier.evaluate(left, s), bezier.evaluate(CUBIC, s*split))
    assert numpy.allclose(bezier.evaluate(right, s), bezier.evaluate(CUBIC, split + s*(1 - split)))


def test_truncate_known_values():
    left, right = bezier.truncate(CUBIC, 0.5)
    assert numpy.allclose(left, [(0, 0), (0.5, 1), (1.25, 1.5), (2, 1.5)])
    assert numpy.allclose(right, [(2, 1.5), (2.75, 1.5), (3.5, 1), (4, 0)])


def test_truncate_range():
    segment = bezier.truncate_range(CUBIC, 0.2, 0.7)
    s = numpy.linspace(0, 1, 11)
    assert numpy.allclose(bezier.evaluate(segment, s), bezier.evaluate(CUBIC, 0.2 + 0.5*s))
    assert numpy.allclose(bezier.truncate_range(CUBIC, 0, 1), CUBIC)
    assert numpy.allclose(bezier.truncate_range(CUBIC, 0, 0.5), bezier.truncate(CUBIC, 0.5)[0])
    with pytest.raises(errors.DomainError):
        bezier.truncate_range(CUBIC, 0.7, 0.2)
    with pytest.raises(errors.DomainError):
        bezier.truncate_range(CUBIC, 0.5, 1.5)


def test_derivative():
    hodograph = bezier.derivative(CUBIC)
    assert numpy.allclose(hodograph, [(3, 6), (6, 0), (3, -6)])
    # compare against a central difference
    h = 1e-6
    t = 0.4
    numeric = (bezier.evaluate(CUBIC, t + h) - bezier.evaluate(CUBIC, t - h)) / (2*h)
    assert numpy.allclose(bezier.evaluate(hodograph, t), numeric, atol=1e-5)


def test_elevate_degree():
    elevated = bezier.elevate_degree(CUBIC)
    assert elevated.shape == (5, 2)
    ts = numpy.linspace(0, 1, 17)
    assert numpy.allclose(bezier.evaluate(elevated, ts), bezier.evaluate(CUBIC, ts))
