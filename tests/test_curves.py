import numpy
import pytest

from camber import errors
from camber.curve import bezier
from camber.curve import bspline
from camber.curve import curves
from camber.curve import spline

POINTS = [(0, 0), (1, 2), (3, 2), (4, 0)]
KNOTS = [0, 0, 0, 1, 2, 2, 2]


def _all_curves():
    return [
        curves.BezierCurve(POINTS),
        curves.HermiteCurve((0, 0), (1, 3), (4, 0), (1, -3)),
        curves.CatmullRomSpline(POINTS),
        curves.CubicSpline(POINTS),
        curves.BSpline(POINTS, KNOTS, 2),
        curves.NURBSCurve(POINTS, KNOTS, 2, [1, 2, 2, 1]),
    ]


@pytest.mark.parametrize('curve', _all_curves(), ids=lambda c: type(c).__name__)
def test_common_interface(curve):
    start, end = curve.domain
    points = curve.sample(25)
    assert points.shape == (25, 2)
    assert numpy.allclose(points[0], curve.evaluate(start))
    assert numpy.allclose(points[-1], curve(end))
    assert numpy.allclose(points[0], (0, 0))
    assert numpy.allclose(points[-1], (4, 0))
    with pytest.raises(errors.DomainError):
        curve.evaluate(end + 1)


def test_matches_functions():
    ts = numpy.linspace(0, 1, 9)
    assert numpy.allclose(curves.BezierCurve(POINTS)(ts), bezier.evaluate(POINTS, ts))
    assert numpy.allclose(curves.CubicSpline(POINTS, 'clamped', ((1, 0), (1, 0)))(ts),
        spline.cubic_spline(POINTS, ts, 'clamped', ((1, 0), (1, 0))))
    assert numpy.allclose(curves.CatmullRomSpline(POINTS, alpha=0.5, endpoints='reflect')(ts),
        spline.catmull_rom(POINTS, ts, alpha=0.5, endpoints='reflect'))
    assert numpy.allclose(curves.BSpline(POINTS, KNOTS, 2)(2*ts), bspline.evaluate(POINTS, KNOTS, 2, 2*ts))


def test_validation_at_construction():
    with pytest.raises(errors.DomainError):
        curves.BezierCurve([(0, 0)])
    with pytest.raises(errors.DegenerateInputError):
        curves.CatmullRomSpline(POINTS[:3])
    with pytest.raises(errors.DegenerateInputError):
        curves.CubicSpline(POINTS[:2])
    with pytest.raises(errors.InvalidKnotVector):
        curves.BSpline(POINTS, KNOTS[:-1], 2)
    with pytest.raises(errors.DomainError):
        curves.NURBSCurve(POINTS, KNOTS, 2, [1, 1, 0, 1])
    with pytest.raises(errors.InvalidKnotVector):
        curves.NURBSCurve(POINTS, [0, 0], 2, [1, 1, 1, 1])
    with pytest.raises(errors.DegenerateInputError):
        curves.NURBSCurve(POINTS, KNOTS, 9, [1, 1, 1, 1])
    with pytest.raises(errors.DomainError):
        curves.NURBSCurve(POINTS, KNOTS, 2, [1, 1, 1])


def test_curve_base_is_abstract():
    with pytest.raises(TypeError):
        curves.Curve()

    class Incomplete(curves.Curve):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_curves_are_immutable():
    source = numpy.array(POINTS, dtype=float)
    curve = curves.BezierCurve(source)
    source[0] = (10, 10)
    assert numpy.allclose(curve.evaluate(0), (0, 0))
    with pytest.raises(ValueError):
        curve.points[0] = (5, 5)


def test_bezier_truncate():
    curve = curves.BezierCurve(POINTS)
    left, right = curve.truncate(0.25)
    assert isinstance(left, curves.BezierCurve)
    assert left.degree == right.degree == 3
    assert numpy.allclose(left(1), curve(0.25))
    assert numpy.allclose(right(0.5), curve(0.625))


def test_arc_length():
    line = curves.BezierCurve([(0, 0), (3, 4)])
    assert line.arc_length(10) == pytest.approx(5)
    quarter_circle = curves.NURBSCurve([(1, 0), (1, 1), (0, 1)], [0, 0, 0, 1, 1, 1], 2, [1, numpy.sqrt(2) / 2, 1])
    assert quarter_circle.arc_length(1000) == pytest.approx(numpy.pi / 2, rel=1e-5)
    assert curves.CubicSpline([0, 1, 3]).arc_length() == pytest.approx(3)


def test_insert_knot():
    curve = curves.BSpline(POINTS, KNOTS, 2)
    refined = curve.insert_knot(0.5)
    assert len(refined.control_points) == 5
    assert numpy.allclose(refined.sample(20), curve.sample(20))
    nurbs = curves.NURBSCurve(POINTS, KNOTS, 2, [1, 3, 1, 2])
    refined = nurbs.insert_knot(1.5, m=2)
    assert isinstance(refined, curves.NURBSCurve)
    assert numpy.allclose(refined.sample(20), nurbs.sample(20))
