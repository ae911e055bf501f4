"""Bezier curves of any degree, evaluated and subdivided with de Casteljau's
algorithm.

A Bezier curve is given by an array of n >= 2 control points of shape (n, d)
(or a sequence of n scalars for a 1-dimensional curve); its degree is n-1. The
curve starts at the first control point (t=0) and ends at the last (t=1).
Parameters outside [0, 1] are rejected with DomainError, never clamped.
"""

import numpy

from .. import errors
from .. import util
from . import basis

def _de_casteljau_rows(points, t):
    """Yield each row of the de Casteljau triangle, from the control points
    themselves down to the single curve point."""
    row = points
    yield row
    while len(row) > 1:
        row = (1 - t)*row[:-1] + t*row[1:]
        yield row

def evaluate(points, t):
    """Evaluate a Bezier curve at t by repeated linear interpolation of adjacent
    control points. O(n^2) in the number of control points, and numerically
    more stable than summing Bernstein-weighted points for high degrees.

    Parameters:
        points: control points; shape (n, d)
        t: scalar or array of parameter values in [0, 1]

    Returns: array of shape t.shape + (d,)
    """
    points, scalar = util.as_points(points, min_points=2)
    t = util.check_unit_parameter(t)
    # give each parameter value its own copy of the triangle
    tt = t[..., numpy.newaxis, numpy.newaxis]
    work = numpy.broadcast_to(points, t.shape + points.shape)
    while work.shape[-2] > 1:
        work = (1 - tt)*work[..., :-1, :] + tt*work[..., 1:, :]
    return util.unpack_points(work[..., 0, :], scalar)

def bernstein_evaluate(points, t):
    """Evaluate a Bezier curve at t as the Bernstein-weighted sum of its control
    points. Equivalent to evaluate(), but less accurate for high degrees."""
    points, scalar = util.as_points(points, min_points=2)
    t = util.check_unit_parameter(t)
    weights = basis.bernstein_basis(len(points) - 1, t)
    return util.unpack_points(numpy.dot(weights, points), scalar)

def truncate(points, t):
    """Split a Bezier curve at t into two Bezier curves of the same degree.

    The left curve covers [0, t] of the original and the right curve [t, 1];
    each is reparameterized to [0, 1]. So, for 0 < t < 1:
        evaluate(left, s) == evaluate(points, s*t)
        evaluate(right, s) == evaluate(points, t + s*(1-t))

    Returns: (left, right), each an array of the same shape as points.
    """
    points, scalar = util.as_points(points, min_points=2)
    t = util.check_unit_parameter(t)
    if t.ndim != 0:
        raise ValueError('A Bezier curve can only be split at a single parameter value.')
    rows = list(_de_casteljau_rows(points, float(t)))
    # the left curve runs down the first entries of the triangle's rows, the
    # right curve back up the last entries
    left = numpy.array([row[0] for row in rows])
    right = numpy.array([row[-1] for row in rows[::-1]])
    return util.unpack_points(left, scalar), util.unpack_points(right, scalar)

def truncate_range(points, t0, t1):
    """Return the control points of the part of a Bezier curve between t0 and t1,
    as a new Bezier curve parameterized over [0, 1].

    Requires 0 <= t0 < t1 <= 1; otherwise raises DomainError.
    """
    segment, scalar = util.as_points(points, min_points=2)
    util.check_unit_parameter([t0, t1])
    if not t0 < t1:
        raise errors.DomainError(f'Truncation range must have t0 < t1; got [{t0}, {t1}].')
    if t0 > 0:
        segment = truncate(segment, t0)[1]
    # position of t1 within the remaining [t0, 1] piece
    s = (t1 - t0) / (1 - t0)
    if s < 1:
        segment = truncate(segment, s)[0]
    return util.unpack_points(segment, scalar)

def derivative(points):
    """Return the control points of the derivative (hodograph) of a Bezier
    curve: a curve of one lower degree whose points are degree*(p[i+1] - p[i])."""
    points, scalar = util.as_points(points, min_points=2)
    degree = len(points) - 1
    return util.unpack_points(degree * numpy.diff(points, axis=0), scalar)

def elevate_degree(points):
    """Return control points describing the same curve with one higher degree."""
    points, scalar = util.as_points(points, min_points=2)
    n = len(points)
    a = (numpy.arange(1, n) / n)[:, numpy.newaxis]
    interior = a*points[:-1] + (1 - a)*points[1:]
    elevated = numpy.concatenate([points[:1], interior, points[-1:]])
    return util.unpack_points(elevated, scalar)
