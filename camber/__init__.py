'''
# camber

camber: _v._ to curve (an object)

Python modules for curve interpolation: evaluate curves and splines from control
points, knots and weights, and remap parameters with easing functions.

Curve
-----
Functions for evaluating parametric curves given their control points.
 - curve.basis: blending weights for Lagrange, Hermite, Bernstein and Catmull-Rom curves.
 - curve.bezier: evaluate and truncate (subdivide) Bezier curves of any degree.
 - curve.spline: Hermite curves, cubic curves, Catmull-Rom splines and C2 cubic splines.
 - curve.bspline: uniform and non-uniform B-splines and NURBS.
 - curve.curves: the curve families above as objects sharing one evaluation interface.

Easing
------
Functions remapping a parameter in [0, 1] non-linearly.
 - ease: the usual named easing functions (quad, cubic, sine, expo, elastic, bounce...) and the smooth start/stop/step power families.
 - compose: flip, mix and crossfade easing functions together.

Utilities
---------
 - util: Horner polynomial evaluation and parameter ranges (linspace, Linspace, Stepper).
 - errors: DomainError, InvalidKnotVector and DegenerateInputError, all ValueErrors.

'''

from .errors import CamberError, DomainError, InvalidKnotVector, DegenerateInputError
