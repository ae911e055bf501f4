'''
Curve
-----
Functions for evaluating interpolating and approximating curves from control points.
 - curve.basis: blending weights (Lagrange/Newton divided differences, Hermite, Bernstein, Catmull-Rom).
 - curve.bezier: evaluate, subdivide, differentiate and degree-elevate Bezier curves with de Casteljau's algorithm.
 - curve.spline: Hermite curves, cubic curves, Catmull-Rom splines and C2 cubic splines (using scipy.linalg.solve_banded).
 - curve.bspline: uniform and non-uniform B-splines and NURBS via the Cox-de Boor recurrence, plus knot insertion.
 - curve.curves: each curve family as an object with a common evaluate/sample interface.
 '''
