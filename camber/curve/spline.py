"""Curves assembled from cubic polynomial pieces: Hermite curves, cubic curves,
Catmull-Rom splines and C2 cubic splines.

Whole-sequence splines (catmull_rom(), cubic_spline()) take a single global
parameter t in [0, 1] spread evenly over their n-1 segments, so that t=0 is the
first control point and t=1 the last. Parameters outside [0, 1] raise
DomainError.
"""

import warnings

import numpy
from scipy import linalg

from .. import errors
from .. import util
from . import basis

def hermite(p0, m0, p1, m1, t):
    """Evaluate the cubic that starts at p0 with tangent m0 and ends at p1 with
    tangent m1.

    Parameters:
        p0, p1: endpoints (scalars, or points of shape (d,))
        m0, m1: tangents at p0 and p1, in the same form
        t: scalar or array of parameter values in [0, 1]
    """
    constraints, scalar = util.as_points([p0, m0, p1, m1])
    t = util.check_unit_parameter(t)
    return util.unpack_points(numpy.dot(basis.hermite_basis(t), constraints), scalar)

CUBIC_CURVE_PARAMETERS = numpy.array([0, 1/3, 2/3, 1])

def cubic_coefficients(points):
    """Return the power-basis coefficients (a3, a2, a1, a0) of the cubic curve
    passing through four points at t = 0, 1/3, 2/3 and 1, in the order
    expected by util.poly_eval()."""
    points, scalar = util.as_points(points, min_points=4)
    if len(points) != 4:
        raise errors.DegenerateInputError(f'A cubic curve is defined by exactly 4 points; got {len(points)}.')
    coefficients = numpy.linalg.solve(numpy.vander(CUBIC_CURVE_PARAMETERS, 4), points)
    return util.unpack_points(coefficients, scalar)

def cubic_curve(points, t):
    """Evaluate the cubic curve through four points at t = 0, 1/3, 2/3 and 1."""
    coefficients = cubic_coefficients(points)
    t = util.check_unit_parameter(t)
    return util.poly_eval(coefficients, t)

def _catmull_rom(quads, u, alpha):
    """Evaluate Catmull-Rom segments.

    quads: array of shape (..., 4, d): four consecutive points per segment
    u: array of shape (...): parameter in [0, 1] within each segment
    """
    if alpha == 0:
        weights = basis.catmull_rom_basis(u)
        return numpy.einsum('...k,...kd->...d', weights, quads)
    spacing = numpy.linalg.norm(numpy.diff(quads, axis=-2), axis=-1)**alpha
    middle = spacing[..., 1:2]
    degenerate = middle == 0
    if numpy.any(degenerate):
        warnings.warn('Coincident control points in non-uniform Catmull-Rom segment: using unit knot spacing.', RuntimeWarning)
        middle = numpy.where(degenerate, 1, middle)
    # a neighbour coincident with its endpoint (as with duplicated ends) takes
    # the spacing of the segment itself
    spacing = numpy.where(spacing == 0, middle, spacing)
    knots = numpy.concatenate([numpy.zeros(spacing.shape[:-1] + (1,)), numpy.cumsum(spacing, axis=-1)], axis=-1)
    knots = knots[..., numpy.newaxis] # shape (..., 4, 1) to broadcast over coordinates
    p0, p1, p2, p3 = numpy.moveaxis(quads, -2, 0)
    t0, t1, t2, t3 = numpy.moveaxis(knots, -2, 0)
    u = t1 + u[..., numpy.newaxis]*(t2 - t1)
    # Barry-Goldman pyramid
    a1 = ((t1 - u)*p0 + (u - t0)*p1) / (t1 - t0)
    a2 = ((t2 - u)*p1 + (u - t1)*p2) / (t2 - t1)
    a3 = ((t3 - u)*p2 + (u - t2)*p3) / (t3 - t2)
    b1 = ((t2 - u)*a1 + (u - t0)*a2) / (t2 - t0)
    b2 = ((t3 - u)*a2 + (u - t1)*a3) / (t3 - t1)
    return ((t2 - u)*b1 + (u - t1)*b2) / (t2 - t1)

def catmull_rom_segment(p0, p1, p2, p3, t, alpha=0):
    """Evaluate the Catmull-Rom segment running from p1 (t=0) to p2 (t=1), with
    tangents estimated from the neighbouring points p0 and p3.

    Parameters:
        p0, p1, p2, p3: consecutive control points
        t: scalar or array of parameter values in [0, 1]
        alpha: knot parameterization: 0 for uniform (the default), 0.5 for
            centripetal, 1 for chordal. Non-uniform parameterizations avoid
            cusps and self-intersections in unevenly spaced points.

    With non-uniform parameterization, a neighbour coinciding with its
    endpoint is spaced as far from it as p1 is from p2. If p1 and p2
    themselves coincide, unit spacing is used and a RuntimeWarning issued.
    """
    quad, scalar = util.as_points([p0, p1, p2, p3])
    t = util.check_unit_parameter(t)
    quads = numpy.broadcast_to(quad, t.shape + quad.shape)
    return util.unpack_points(_catmull_rom(quads, t, alpha), scalar)

def _pad_endpoints(points, endpoints):
    if endpoints == 'duplicate':
        first, last = points[0], points[-1]
    elif endpoints == 'reflect':
        first, last = 2*points[0] - points[1], 2*points[-1] - points[-2]
    else:
        raise ValueError(f'Endpoint policy must be "duplicate" or "reflect", not "{endpoints}".')
    return numpy.concatenate([[first], points, [last]])

def _segment_positions(t, num_segments):
    """Map global parameters t in [0, 1] to (segment index, local parameter)."""
    s = t * num_segments
    segment = numpy.minimum(numpy.floor(s), num_segments - 1).astype(int)
    return segment, s - segment

def catmull_rom(points, t, alpha=0, endpoints='duplicate'):
    """Evaluate a C1 Catmull-Rom spline passing through every control point.

    Parameters:
        points: control points; shape (n, d), n >= 4
        t: scalar or array of global parameter values in [0, 1]; each of the
            n-1 segments gets an equal share of the range.
        alpha: knot parameterization; see catmull_rom_segment().
        endpoints: how to estimate the tangents at the first and last control
            points, which lack a neighbour on one side:
            'duplicate' (default): repeat the endpoint as its own neighbour.
            'reflect': use the mirror image of the adjacent point through the
            endpoint, i.e. 2*p[0] - p[1].
    """
    points, scalar = util.as_points(points, min_points=4)
    t = util.check_unit_parameter(t)
    padded = _pad_endpoints(points, endpoints)
    segment, u = _segment_positions(t, len(points) - 1)
    quads = padded[segment[..., numpy.newaxis] + numpy.arange(4)]
    return util.unpack_points(_catmull_rom(quads, u, alpha), scalar)

def cubic_spline_moments(points, boundary='natural', end_tangents=None):
    """Solve for the second derivatives ("moments") of a C2 cubic spline through
    the given points at unit knot spacing.

    Parameters:
        points: control points; shape (n, d), n >= 3
        boundary: 'natural' for zero second derivative at both ends, or
            'clamped' for prescribed tangents at both ends.
        end_tangents: for 'clamped' splines, the pair (start, end) of tangent
            vectors, in units of one segment's parameter. If None, both are zero.

    Returns: array of the same shape as points.
    """
    points, scalar = util.as_points(points, min_points=3)
    n = len(points)
    banded = numpy.zeros((3, n))
    banded[0, 1:] = 1 # superdiagonal
    banded[1] = 4
    banded[2, :-1] = 1 # subdiagonal
    rhs = numpy.zeros_like(points)
    rhs[1:-1] = 6 * (points[2:] - 2*points[1:-1] + points[:-2])
    if boundary == 'natural':
        banded[1, [0, -1]] = 1
        banded[0, 1] = banded[2, -2] = 0
    elif boundary == 'clamped':
        if end_tangents is None:
            start, end = 0, 0
        else:
            start, end = end_tangents
        banded[1, [0, -1]] = 2
        rhs[0] = 6 * (points[1] - points[0] - numpy.asarray(start, dtype=float))
        rhs[-1] = 6 * (numpy.asarray(end, dtype=float) - (points[-1] - points[-2]))
    else:
        raise ValueError(f'Boundary condition must be "natural" or "clamped", not "{boundary}".')
    moments = linalg.solve_banded((1, 1), banded, rhs)
    return util.unpack_points(moments, scalar)

def cubic_spline_evaluate(points, moments, t):
    """Evaluate a cubic spline from its control points and moments (as from
    cubic_spline_moments()) at global parameter values t in [0, 1]."""
    points, scalar = util.as_points(points, min_points=3)
    moments = numpy.asarray(moments, dtype=float).reshape(points.shape)
    t = util.check_unit_parameter(t)
    segment, u = _segment_positions(t, len(points) - 1)
    u = u[..., numpy.newaxis]
    v = 1 - u
    result = (v*points[segment] + u*points[segment + 1] +
        ((v**3 - v)*moments[segment] + (u**3 - u)*moments[segment + 1]) / 6)
    return util.unpack_points(result, scalar)

def cubic_spline(points, t, boundary='natural', end_tangents=None):
    """Evaluate a C2 cubic spline passing through every control point.

    Parameters:
        points: control points; shape (n, d), n >= 3
        t: scalar or array of global parameter values in [0, 1]; each of the
            n-1 segments gets an equal share of the range.
        boundary, end_tangents: see cubic_spline_moments().
    """
    moments = cubic_spline_moments(points, boundary, end_tangents)
    return cubic_spline_evaluate(points, moments, t)
