"""Curve objects: each curve family as a class that validates its inputs once
and then evaluates like any other curve.

Every class provides:
    domain: the (start, end) range of valid parameter values.
    evaluate(t) (or simply calling the curve): curve points at t.
    sample(num_points): points at num_points equally-spaced parameter values
        spanning the domain.
    arc_length(num_points): polyline approximation of the curve's length.

Example:
    curve = BSpline([(0, 0), (1, 1), (2, -1), (3, 0)], [0, 0, 0, 1, 2, 2, 2], degree=2)
    points = curve.sample(50)
"""

import abc

import numpy

from . import bezier
from . import bspline
from . import spline

def _frozen(array):
    array = numpy.array(array, dtype=float)
    array.flags.writeable = False
    return array

class Curve(abc.ABC):
    domain = (0.0, 1.0)

    @abc.abstractmethod
    def evaluate(self, t):
        """Return the curve point(s) at parameter value(s) t."""

    def __call__(self, t):
        return self.evaluate(t)

    def sample(self, num_points):
        return self.evaluate(numpy.linspace(self.domain[0], self.domain[1], num_points))

    def arc_length(self, num_points=200):
        """Approximate the arc-length of the curve by evaluating it at num_points
        positions and calculating the length of the resulting polyline."""
        points = self.sample(num_points)
        if points.ndim == 1:
            points = points[:, numpy.newaxis]
        return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)).sum()

class BezierCurve(Curve):
    def __init__(self, points):
        # validate via the de Casteljau evaluator at the start point
        bezier.evaluate(points, 0)
        self.points = _frozen(points)

    @property
    def degree(self):
        return len(self.points) - 1

    def evaluate(self, t):
        return bezier.evaluate(self.points, t)

    def truncate(self, t):
        """Split into two BezierCurves at t."""
        return tuple(BezierCurve(points) for points in bezier.truncate(self.points, t))

class HermiteCurve(Curve):
    def __init__(self, p0, m0, p1, m1):
        self.p0, self.m0, self.p1, self.m1 = (_frozen(v) for v in (p0, m0, p1, m1))

    def evaluate(self, t):
        return spline.hermite(self.p0, self.m0, self.p1, self.m1, t)

class CatmullRomSpline(Curve):
    def __init__(self, points, alpha=0, endpoints='duplicate'):
        spline.catmull_rom(points, 0, alpha, endpoints)
        self.points = _frozen(points)
        self.alpha = alpha
        self.endpoints = endpoints

    def evaluate(self, t):
        return spline.catmull_rom(self.points, t, self.alpha, self.endpoints)

class CubicSpline(Curve):
    """C2 cubic spline through a sequence of points; the tridiagonal system for
    its moments is solved once, at construction."""
    def __init__(self, points, boundary='natural', end_tangents=None):
        self.moments = _frozen(spline.cubic_spline_moments(points, boundary, end_tangents))
        self.points = _frozen(points)
        self.boundary = boundary

    def evaluate(self, t):
        return spline.cubic_spline_evaluate(self.points, self.moments, t)

class BSpline(Curve):
    def __init__(self, control_points, knots, degree):
        bspline.validate(control_points, knots, degree)
        self.control_points = _frozen(control_points)
        self.knots = _frozen(knots)
        self.degree = int(degree)

    @property
    def domain(self):
        return bspline.domain(self.knots, self.degree)

    def evaluate(self, t):
        return bspline.evaluate(self.control_points, self.knots, self.degree, t)

    def insert_knot(self, u, m=1):
        """Return an equivalent BSpline with the knot u inserted m times."""
        control_points, knots = bspline.insert_knot(self.control_points, self.knots, self.degree, u, m)
        return BSpline(control_points, knots, self.degree)

class NURBSCurve(BSpline):
    def __init__(self, control_points, knots, degree, weights):
        super().__init__(control_points, knots, degree)
        # the weights are checked by evaluating at the start of the domain
        bspline.evaluate(self.control_points, self.knots, self.degree, self.domain[0], weights)
        self.weights = _frozen(weights)

    def evaluate(self, t):
        return bspline.evaluate(self.control_points, self.knots, self.degree, t, self.weights)

    def insert_knot(self, u, m=1):
        """Return an equivalent NURBSCurve with the knot u inserted m times."""
        control_points, knots, weights = bspline.insert_knot(self.control_points, self.knots, self.degree, u, m, self.weights)
        return NURBSCurve(control_points, knots, self.degree, weights)
