"""B-splines and non-uniform rational B-splines (NURBS).

A B-spline of degree k is defined by n >= k+1 control points and a
non-decreasing knot vector of length n+k+1. The curve is defined over the
knot domain [knots[k], knots[n]]; evaluating outside that range raises
DomainError rather than extrapolating.

Uniform and non-uniform B-splines differ only in their knot vectors and go
through the same code. A NURBS curve additionally carries one positive weight
per control point; with all weights equal to 1 it is the plain B-spline.

Repeated knots are allowed up to multiplicity k+1. A knot of multiplicity m
reduces the continuity of the curve there to C(k-m). In the Cox-de Boor
recurrence, terms of the form 0/0 that repeated knots produce are taken to
be 0.
"""

import numpy

from .. import errors
from .. import util

def _check_knots(knots, degree, n):
    knots = numpy.array(knots, dtype=float)
    if knots.ndim != 1 or len(knots) != n + degree + 1:
        raise errors.InvalidKnotVector(f'A degree {degree} B-spline with {n} control points needs {n + degree + 1} knots; got {knots.size}.')
    if numpy.any(numpy.diff(knots) < 0):
        raise errors.InvalidKnotVector(f'Knot vector must be non-decreasing: {knots}')
    values, multiplicities = numpy.unique(knots, return_counts=True)
    if numpy.any(multiplicities > degree + 1):
        raise errors.InvalidKnotVector(f'Knot {values[multiplicities.argmax()]} is repeated more than degree+1 = {degree + 1} times.')
    if not knots[degree] < knots[n]:
        raise errors.InvalidKnotVector(f'Knot domain [{knots[degree]}, {knots[n]}] is empty.')
    return knots

def _check_degree(degree):
    if int(degree) != degree or degree < 0:
        raise errors.DegenerateInputError(f'Degree must be a non-negative integer, not {degree}.')
    return int(degree)

def _prepare(control_points, knots, degree):
    degree = _check_degree(degree)
    points, scalar = util.as_points(control_points, min_points=degree + 1, name='control points')
    knots = _check_knots(knots, degree, len(points))
    return points, scalar, knots, degree

def validate(control_points, knots, degree):
    """Check that control points, knots and degree define a valid B-spline.

    Raises:
        DegenerateInputError: degree is negative, or there are fewer than
            degree+1 control points.
        InvalidKnotVector: the knot vector does not have len(control_points)
            + degree + 1 entries, decreases, repeats a knot more than degree+1
            times, or has an empty domain.
    """
    _prepare(control_points, knots, degree)

def domain(knots, degree, n=None):
    """Return the (start, end) parameter values over which a B-spline with the
    given knots is defined. If the number of control points n is not given,
    it is inferred from the length of the knot vector."""
    if n is None:
        n = len(knots) - degree - 1
    return knots[degree], knots[n]

def _check_domain(knots, degree, n, t):
    start, end = domain(knots, degree, n)
    if not numpy.all((t >= start) & (t <= end)):
        raise errors.DomainError(f'Parameter must lie in the knot domain [{start}, {end}]; got {t}.')

def find_span(knots, degree, t, n=None):
    """Return the index i of the knot span containing the scalar t, such that
    knots[i] <= t < knots[i+1].

    The end of the domain, t == knots[n], belongs to no half-open span, so it
    is assigned to the last non-empty span instead.
    """
    if numpy.ndim(t) != 0:
        raise ValueError(f'find_span() takes a single parameter value; got an array of shape {numpy.shape(t)}.')
    knots = numpy.asarray(knots, dtype=float)
    if n is None:
        n = len(knots) - degree - 1
    _check_domain(knots, degree, n, t)
    if t == knots[n]:
        return int(numpy.searchsorted(knots, t, side='left')) - 1
    return int(numpy.searchsorted(knots, t, side='right')) - 1

def basis_functions(knots, degree, span, t):
    """Return the degree+1 B-spline basis functions that may be non-zero at t,
    namely N[span-degree], ..., N[span].

    Builds the Cox-de Boor triangle bottom-up from the degree-0 indicator of
    the span, raising the degree by one each pass and reusing the previous
    pass's values. Any 0/0 term is taken to be 0.
    """
    N = numpy.zeros(degree + 1)
    left = numpy.zeros(degree + 1)
    right = numpy.zeros(degree + 1)
    N[0] = 1
    for j in range(1, degree + 1):
        left[j] = t - knots[span + 1 - j]
        right[j] = knots[span + j] - t
        saved = 0.0
        for r in range(j):
            denominator = right[r + 1] + left[j - r]
            temp = N[r] / denominator if denominator != 0 else 0.0
            N[r] = saved + right[r + 1]*temp
            saved = left[j - r]*temp
        N[j] = saved
    return N

def basis(knots, degree, t, n=None):
    """Return all n B-spline basis functions at t (most of which are zero).

    Parameters:
        t: scalar or array of parameter values in the knot domain.

    Returns: array of shape t.shape + (n,). For any t in the knot domain, the
        values along the last axis sum to 1.
    """
    knots = numpy.asarray(knots, dtype=float)
    if n is None:
        n = len(knots) - degree - 1
    t = numpy.asarray(t, dtype=float)
    _check_domain(knots, degree, n, t)
    values = numpy.zeros(t.shape + (n,))
    for index in numpy.ndindex(t.shape):
        u = t[index]
        span = find_span(knots, degree, u, n)
        values[index + (slice(span - degree, span + 1),)] = basis_functions(knots, degree, span, u)
    return values

def _homogeneous(points, weights):
    weights = numpy.array(weights, dtype=float)
    if weights.shape != (len(points),):
        raise errors.DomainError(f'Need one weight per control point ({len(points)}); got shape {weights.shape}.')
    if numpy.any(weights <= 0):
        raise errors.DomainError(f'NURBS weights must be positive: {weights}')
    return numpy.concatenate([points * weights[:, numpy.newaxis], weights[:, numpy.newaxis]], axis=1)

def evaluate(control_points, knots, degree, t, weights=None):
    """Evaluate a B-spline or NURBS curve.

    Parameters:
        control_points: array of shape (n, d)
        knots: knot vector of length n + degree + 1
        degree: polynomial degree of the curve
        t: scalar or array of parameter values within the knot domain
        weights: if not None, n positive weights, making this a NURBS curve.
            Each control point's contribution is scaled by its weight and the
            result divided by the sum of the weighted basis functions.

    Returns: array of shape t.shape + (d,)
    """
    points, scalar, knots, degree = _prepare(control_points, knots, degree)
    n = len(points)
    t = numpy.asarray(t, dtype=float)
    _check_domain(knots, degree, n, t)
    if weights is not None:
        points = _homogeneous(points, weights)
    out = numpy.empty((t.size, points.shape[1]))
    for i, u in enumerate(t.flat):
        span = find_span(knots, degree, u, n)
        N = basis_functions(knots, degree, span, u)
        out[i] = numpy.dot(N, points[span - degree:span + 1])
    if weights is not None:
        out = out[:, :-1] / out[:, -1:]
    return util.unpack_points(out.reshape(t.shape + out.shape[1:]), scalar)

def uniform_knots(n, degree, clamped=True, domain=(0, 1)):
    """Return a uniform knot vector for n control points of the given degree,
    whose knot domain is the given (start, end) range.

    If clamped, the first and last knots are repeated degree+1 times, so the
    curve starts and ends at the first and last control points (an
    "open uniform" vector). Otherwise all knots are evenly spaced and the
    curve starts and ends near, but not at, its end control points.
    """
    degree = _check_degree(degree)
    if n < degree + 1:
        raise errors.DegenerateInputError(f'A degree {degree} B-spline needs at least {degree + 1} control points; got {n}.')
    start, end = domain
    if clamped:
        interior = util.linspace(start, end, n - degree + 1)
        return numpy.concatenate([[start]*degree, interior, [end]*degree])
    spacing = (end - start) / (n - degree)
    return start + (numpy.arange(n + degree + 1) - degree) * spacing

def _insert_once(points, knots, degree, u):
    n = len(points)
    k = find_span(knots, degree, u, n)
    new_points = numpy.empty((n + 1, points.shape[1]))
    new_points[:k - degree + 1] = points[:k - degree + 1]
    new_points[k + 1:] = points[k:]
    for i in range(k - degree + 1, k + 1):
        a = (u - knots[i]) / (knots[i + degree] - knots[i])
        new_points[i] = (1 - a)*points[i - 1] + a*points[i]
    return new_points, numpy.insert(knots, k + 1, u)

def insert_knot(control_points, knots, degree, u, m=1, weights=None):
    """Insert the knot u into a B-spline m times without changing its shape.

    Knot insertion adds one control point per inserted knot; it is useful to
    gain finer local control over a curve, or (with multiplicity raised to the
    degree) to split it into independent pieces.

    Parameters:
        control_points, knots, degree, weights: as in evaluate()
        u: parameter value within the knot domain at which to insert
        m: number of times to insert u.

    Returns: (control_points, knots), or (control_points, knots, weights) for
        a NURBS curve.

    Raises InvalidKnotVector if u would then be repeated more than degree+1
    times.
    """
    points, scalar, knots, degree = _prepare(control_points, knots, degree)
    d = points.shape[1]
    if m < 0:
        raise ValueError(f'Knot insertion count must be non-negative, not {m}.')
    _check_domain(knots, degree, len(points), u)
    multiplicity = numpy.sum(knots == u)
    if multiplicity + m > degree + 1:
        raise errors.InvalidKnotVector(f'Inserting knot {u} {m} more times would exceed multiplicity degree+1 = {degree + 1}.')
    if weights is not None:
        points = _homogeneous(points, weights)
    for _ in range(m):
        points, knots = _insert_once(points, knots, degree, u)
    if weights is None:
        return util.unpack_points(points, scalar), knots
    new_weights = points[:, d]
    return util.unpack_points(points[:, :d] / new_weights[:, numpy.newaxis], scalar), knots, new_weights
