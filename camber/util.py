import numpy

from . import errors

def poly_eval(coefficients, x):
    """Evaluate a polynomial from its coefficients with Horner's rule.

    Parameters:
        coefficients: sequence of coefficients in the order a[n] .. a[0]. An
            empty sequence is the constant 0. Coefficients may themselves be
            points (arrays of shape (d,)), giving a polynomial curve.
        x: scalar or array of positions at which to evaluate.

    Example:
        poly_eval([1, 6, 3], 1) == 10 # x^2 + 6x + 3
    """
    x = numpy.asarray(x, dtype=float)
    coefficients = numpy.asarray(coefficients, dtype=float)
    if coefficients.ndim == 2:
        # point-valued coefficients: broadcast positions against coordinates
        x = x[..., numpy.newaxis]
        result = numpy.zeros(x.shape[:-1] + coefficients.shape[1:])
    else:
        result = numpy.zeros_like(x)
    # p(x) = (((a_n*x + a_n-1)*x + ... + a_2)*x + a_1)*x + a_0
    for c in coefficients:
        result = result * x + c
    return result

def lerp(a, b, t):
    """Linearly interpolate between a and b: a at t=0, b at t=1."""
    return a*(1 - t) + b*t

def linspace(start, end, numel):
    """Return an inclusive range of numel values from start to end.

    The range may run in either direction, or be constant. Every value lies
    within [start, end], and the first and last values equal start and end
    exactly. Zero elements gives an empty array; one element gives [end]."""
    if numel < 0:
        raise ValueError(f'Number of elements must be non-negative, not {numel}.')
    if numel == 0:
        return numpy.empty(0)
    if numel == 1:
        return numpy.array([float(end)])
    t = numpy.arange(numel) / (numel - 1)
    return lerp(float(start), float(end), t)

class Linspace:
    """Iterator over an inclusive range of numel values from start to end.

    Iterates like linspace(), but lazily, and can also be stepped backwards
    with reversed() or restarted:

        lin = Linspace(0, 1, 3)
        list(lin) == [0, 0.5, 1]
        list(reversed(Linspace(0, 1, 3))) == [1, 0.5, 0]
    """
    def __init__(self, start, end, numel):
        if numel < 0:
            raise ValueError(f'Number of elements must be non-negative, not {numel}.')
        self.start = float(start)
        self.end = float(end)
        self.numel = numel
        self._i = 0

    @classmethod
    def normal(cls, numel):
        """Inclusive range over [0, 1]."""
        return cls(0, 1, numel)

    @classmethod
    def with_stepsize(cls, start, end, step):
        """Inclusive range whose step is as close to 'step' as possible."""
        if step <= 0:
            raise ValueError(f'Step size must be positive, not {step}.')
        return cls(start, end, int(round(abs(end - start) / step)) + 1)

    def _value(self, i):
        if self.numel == 1:
            return self.end
        return lerp(self.start, self.end, i / (self.numel - 1))

    def restart(self):
        self._i = 0
        return self

    def __iter__(self):
        return self

    def __next__(self):
        if self._i >= self.numel:
            raise StopIteration
        value = self._value(self._i)
        self._i += 1
        return value

    def __len__(self):
        return self.numel - self._i

    def __reversed__(self):
        return (self._value(i) for i in range(self.numel - 1, self._i - 1, -1))

class Stepper:
    """Iterator from 0 towards 1 with a fixed step size.

    Faster than Linspace but less exact: accumulated floating-point error
    usually makes it stop just short of 1. Always yields 0 first, then stops
    once the value would exceed 1.
    """
    def __init__(self, dt):
        if dt <= 0:
            raise ValueError(f'Step size must be positive, not {dt}.')
        self.dt = dt
        self.t = 0.0

    @classmethod
    def with_numel(cls, n):
        """Stepper taking approximately n steps over [0, 1]. With n == 1 it yields
        0 once; with n == 0 it yields nothing."""
        if n > 1:
            stepper = cls(1 / (n - 1))
        else:
            stepper = cls(2.0)
        if n == 0:
            stepper.t = 2.0
        return stepper

    def restart(self):
        self.t = 0.0
        return self

    def __iter__(self):
        return self

    def __next__(self):
        if self.t > 1:
            raise StopIteration
        t = self.t
        self.t += self.dt
        return t

def as_points(points, min_points=1, name='points'):
    """Convert an array-like of control points to a float array of shape (n, d).

    A 1-dimensional input of n scalars is treated as n 1-dimensional points.

    Returns: (points, scalar), where scalar is True if the input was
        1-dimensional, so that results can be returned in the same form.
    """
    points = numpy.array(points, dtype=float)
    scalar = points.ndim == 1
    if scalar:
        points = points[:, numpy.newaxis]
    if points.ndim != 2:
        raise ValueError(f'{name} must be an array of shape (n, d), not {points.shape}.')
    if len(points) < min_points:
        raise errors.DegenerateInputError(f'At least {min_points} {name} are required; got {len(points)}.')
    return points, scalar

def check_unit_parameter(t):
    """Convert t to a float array and require it to lie in [0, 1]."""
    t = numpy.asarray(t, dtype=float)
    if not numpy.all((t >= 0) & (t <= 1)):
        raise errors.DomainError(f'Parameter must lie in [0, 1]; got {t}.')
    return t

def unpack_points(result, scalar):
    """Drop the trailing coordinate axis of results computed from 1-D input."""
    if scalar:
        return result[..., 0]
    return result
