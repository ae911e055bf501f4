class CamberError(ValueError):
    """Base class for errors raised when evaluating curves or easing functions."""


class DomainError(CamberError):
    """A parameter value or control-point count lies outside the valid domain
    for the requested curve. Such values are never clamped or extrapolated."""


class InvalidKnotVector(CamberError):
    """A knot vector has the wrong length for its control points and degree,
    decreases somewhere, or repeats a knot more than degree+1 times."""


class DegenerateInputError(DomainError):
    """The input cannot define a curve: repeated interpolation abscissae, or
    fewer control points than the curve type requires."""
