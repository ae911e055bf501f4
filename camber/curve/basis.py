"""Blending weights for polynomial curves.

Each function takes a parameter t (scalar or array) and returns the weights
stacked along the last axis, so that for control points of shape (n, d),
numpy.dot(weights, points) gives the curve point(s).
"""

import numpy
from scipy import special

from .. import errors

def _check_distinct(abscissae, tol):
    x = numpy.array(abscissae, dtype=float)
    if x.ndim != 1 or len(x) == 0:
        raise errors.DegenerateInputError('Abscissae must be a non-empty 1-dimensional sequence.')
    gaps = numpy.diff(numpy.sort(x))
    if numpy.any(gaps <= tol):
        raise errors.DegenerateInputError(f'Abscissae must be distinct (to within {tol}); got {x}.')
    return x

def lagrange_weights(abscissae, t, tol=0):
    """Return the Lagrange cardinal weights of a set of abscissae at t.

    Weight j is the product over m != j of (t - x[m]) / (x[j] - x[m]); it is 1
    at x[j] and 0 at every other abscissa. The weights sum to 1 for any t.

    Parameters:
        abscissae: n distinct sample positions.
        t: scalar or array of query positions.
        tol: abscissae closer together than this are treated as duplicates.

    Returns: array of shape t.shape + (n,)

    Raises DegenerateInputError if the abscissae are not distinct, which would
    otherwise cause division by zero.
    """
    x = _check_distinct(abscissae, tol)
    t = numpy.asarray(t, dtype=float)
    n = len(x)
    others = ~numpy.eye(n, dtype=bool)
    denominators = numpy.prod(numpy.where(others, x[:, numpy.newaxis] - x, 1), axis=1)
    offsets = t[..., numpy.newaxis] - x # shape t.shape + (n,)
    numerators = numpy.prod(numpy.where(others, offsets[..., numpy.newaxis, :], 1), axis=-1)
    return numerators / denominators

def divided_differences(abscissae, values, tol=0):
    """Return the coefficients of the Newton form of the polynomial interpolating
    (abscissae[i], values[i]).

    Coefficient k is the divided difference f[x0, ..., xk]. Values may be
    scalars (shape (n,)) or points (shape (n, d)), in which case each
    coefficient is a point too.

    Raises DegenerateInputError if the abscissae are not distinct.
    """
    x = _check_distinct(abscissae, tol)
    coefficients = numpy.array(values, dtype=float)
    n = len(x)
    if len(coefficients) != n:
        raise ValueError(f'Got {len(coefficients)} values for {n} abscissae.')
    for j in range(1, n):
        spans = x[j:] - x[:n-j]
        if coefficients.ndim > 1:
            spans = spans[:, numpy.newaxis]
        coefficients[j:] = (coefficients[j:] - coefficients[j-1:-1]) / spans
    return coefficients

def newton_evaluate(abscissae, coefficients, t):
    """Evaluate a polynomial in Newton form (as from divided_differences()) at t
    by nested multiplication."""
    x = numpy.asarray(abscissae, dtype=float)
    coefficients = numpy.asarray(coefficients, dtype=float)
    t = numpy.asarray(t, dtype=float)
    if coefficients.ndim > 1:
        t = t[..., numpy.newaxis]
    result = numpy.zeros(numpy.broadcast(t, coefficients[-1]).shape) + coefficients[-1]
    for xk, ck in zip(x[-2::-1], coefficients[-2::-1]):
        result = ck + (t - xk) * result
    return result

def lagrange_interpolate(abscissae, values, t, tol=0):
    """Evaluate the unique polynomial of degree n-1 through n points
    (abscissae[i], values[i]) at t, using divided differences."""
    coefficients = divided_differences(abscissae, values, tol)
    return newton_evaluate(abscissae, coefficients, t)

def hermite_basis(t):
    """Return the cubic Hermite basis (h00, h10, h01, h11) at t.

    For endpoints p0, p1 and tangents m0, m1, the curve is
    h00*p0 + h10*m0 + h01*p1 + h11*m1."""
    t = numpy.asarray(t, dtype=float)
    t2 = t*t
    t3 = t2*t
    return numpy.stack([2*t3 - 3*t2 + 1, t3 - 2*t2 + t, -2*t3 + 3*t2, t3 - t2], axis=-1)

def bernstein_basis(degree, t):
    """Return the degree+1 Bernstein polynomials of the given degree at t:
    C(degree, i) * t^i * (1-t)^(degree-i). They sum to 1."""
    if degree < 0:
        raise errors.DegenerateInputError(f'Degree must be non-negative, not {degree}.')
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    i = numpy.arange(degree + 1)
    return special.comb(degree, i) * t**i * (1 - t)**(degree - i)

def catmull_rom_basis(t, tension=0.5):
    """Return the weights of four consecutive points p0..p3 for a cardinal
    spline segment running from p1 (t=0) to p2 (t=1).

    The tangent at p1 is tension*(p2-p0), and at p2 is tension*(p3-p1); the
    default of 0.5 gives the uniform Catmull-Rom spline. The weights sum to 1.
    """
    h00, h10, h01, h11 = numpy.moveaxis(hermite_basis(t), -1, 0)
    return numpy.stack([-tension*h10, h00 - tension*h11, h01 + tension*h10, tension*h11], axis=-1)

def power_basis(degree, t):
    """Return (t^degree, ..., t, 1), matching the coefficient order of
    util.poly_eval()."""
    t = numpy.asarray(t, dtype=float)[..., numpy.newaxis]
    return t**numpy.arange(degree, -1, -1)
