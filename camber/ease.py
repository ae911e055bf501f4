"""Easing functions: non-linear remappings of a parameter t in [0, 1] to [0, 1].

Every function here takes t as a scalar or a numpy array and satisfies
f(0) == 0 and f(1) == 1 exactly. Values of t outside [0, 1] are not clamped:
the result there is whatever the formula gives.

The functions are monotonic on [0, 1] except for the "back", "elastic" and
"bounce" families, which overshoot (back, elastic) or rebound (bounce) by
design; their outputs may leave [0, 1] or change direction mid-curve.

Use a function directly, or look one up by name:
    ease('in_out_cubic', 0.25)
    EASINGS['smooth_step_3'](numpy.linspace(0, 1, 100))
"""

import numpy

from . import compose

def _exact_ends(value, t):
    # pin the endpoints for formulas whose endpoint values are subject to rounding
    value = numpy.where(t == 0, 0.0, numpy.where(t == 1, 1.0, value))
    return value[()]

def linear(t):
    return numpy.asarray(t, dtype=float)[()]

def smooth_start(t, n):
    """t^n"""
    t = numpy.asarray(t, dtype=float)
    return (t**n)[()]

def smooth_stop(t, n):
    """1 - (1-t)^n: smooth_start mirrored in both axes."""
    t = numpy.asarray(t, dtype=float)
    return compose.flip(compose.flip(t)**n)[()]

def smooth_step(t, n):
    """Crossfade from smooth_start to smooth_stop of the same degree."""
    t = numpy.asarray(t, dtype=float)
    return compose.crossfade(lambda x: smooth_start(x, n), lambda x: smooth_stop(x, n), t)[()]

def _smooth_family(n):
    def start(t):
        return smooth_start(t, n)
    def stop(t):
        return smooth_stop(t, n)
    def step(t):
        return smooth_step(t, n)
    start.__name__, stop.__name__, step.__name__ = f'smooth_start_{n}', f'smooth_stop_{n}', f'smooth_step_{n}'
    start.__doc__ = f't^{n}'
    stop.__doc__ = f'1 - (1-t)^{n}'
    step.__doc__ = f'Crossfade of smooth_start_{n} and smooth_stop_{n}'
    return start, stop, step

smooth_start_2, smooth_stop_2, smooth_step_2 = _smooth_family(2)
smooth_start_3, smooth_stop_3, smooth_step_3 = _smooth_family(3)
smooth_start_4, smooth_stop_4, smooth_step_4 = _smooth_family(4)
smooth_start_5, smooth_stop_5, smooth_step_5 = _smooth_family(5)
smooth_start_6, smooth_stop_6, smooth_step_6 = _smooth_family(6)
smooth_start_7, smooth_stop_7, smooth_step_7 = _smooth_family(7)
smooth_start_8, smooth_stop_8, smooth_step_8 = _smooth_family(8)
smooth_start_9, smooth_stop_9, smooth_step_9 = _smooth_family(9)

def _in_out_power(n):
    def in_out(t):
        t = numpy.asarray(t, dtype=float)
        first_half = 2**(n-1) * t**n
        second_half = 1 - (2 - 2*t)**n / 2
        return numpy.where(t < 0.5, first_half, second_half)[()]
    return in_out

in_quad, out_quad = smooth_start_2, smooth_stop_2
in_cubic, out_cubic = smooth_start_3, smooth_stop_3
in_quart, out_quart = smooth_start_4, smooth_stop_4
in_quint, out_quint = smooth_start_5, smooth_stop_5
in_out_quad = _in_out_power(2)
in_out_cubic = _in_out_power(3)
in_out_quart = _in_out_power(4)
in_out_quint = _in_out_power(5)

def in_sine(t):
    t = numpy.asarray(t, dtype=float)
    # cos(pi/2) is not exactly 0 in floating point
    return _exact_ends(1 - numpy.cos(t * numpy.pi / 2), t)

def out_sine(t):
    t = numpy.asarray(t, dtype=float)
    return numpy.sin(t * numpy.pi / 2)[()]

def in_out_sine(t):
    t = numpy.asarray(t, dtype=float)
    return ((1 - numpy.cos(numpy.pi * t)) / 2)[()]

def in_expo(t):
    t = numpy.asarray(t, dtype=float)
    return _exact_ends(2**(10*t - 10), t)

def out_expo(t):
    t = numpy.asarray(t, dtype=float)
    return _exact_ends(1 - 2**(-10*t), t)

def in_out_expo(t):
    t = numpy.asarray(t, dtype=float)
    value = numpy.where(t < 0.5, 2**(20*t - 10) / 2, (2 - 2**(10 - 20*t)) / 2)
    return _exact_ends(value, t)

def in_circ(t):
    t = numpy.asarray(t, dtype=float)
    return (1 - numpy.sqrt(numpy.maximum(0, 1 - t**2)))[()]

def out_circ(t):
    t = numpy.asarray(t, dtype=float)
    return numpy.sqrt(numpy.maximum(0, 1 - (t - 1)**2))[()]

def in_out_circ(t):
    t = numpy.asarray(t, dtype=float)
    first_half = (1 - numpy.sqrt(numpy.maximum(0, 1 - (2*t)**2))) / 2
    second_half = (numpy.sqrt(numpy.maximum(0, 1 - (2 - 2*t)**2)) + 1) / 2
    return numpy.where(t < 0.5, first_half, second_half)[()]

_BACK_OVERSHOOT = 1.70158

def in_back(t):
    """Pulls back below 0 before accelerating to 1. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    c = _BACK_OVERSHOOT
    return _exact_ends((c + 1) * t**3 - c * t**2, t)

def out_back(t):
    """Overshoots past 1 before settling. Non-monotonic."""
    return compose.flip(in_back(compose.flip(numpy.asarray(t, dtype=float))))

def in_out_back(t):
    """Pulls back below 0, then overshoots past 1. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    c = _BACK_OVERSHOOT * 1.525
    first_half = (2*t)**2 * ((c + 1) * 2*t - c) / 2
    second_half = ((2*t - 2)**2 * ((c + 1) * (2*t - 2) + c) + 2) / 2
    return _exact_ends(numpy.where(t < 0.5, first_half, second_half), t)

def in_elastic(t):
    """Oscillates around 0 with growing amplitude before snapping to 1.
    Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    c = 2 * numpy.pi / 3
    return _exact_ends(-2**(10*t - 10) * numpy.sin((10*t - 10.75) * c), t)

def out_elastic(t):
    """Snaps past 1 and oscillates into place. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    c = 2 * numpy.pi / 3
    return _exact_ends(2**(-10*t) * numpy.sin((10*t - 0.75) * c) + 1, t)

def in_out_elastic(t):
    """Oscillates around 0, then around 1. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    c = 2 * numpy.pi / 4.5
    s = numpy.sin((20*t - 11.125) * c)
    first_half = -(2**(20*t - 10) * s) / 2
    second_half = (2**(-20*t + 10) * s) / 2 + 1
    return _exact_ends(numpy.where(t < 0.5, first_half, second_half), t)

def out_bounce(t):
    """Falls to 1 and bounces off it with decaying height. The path is
    non-monotonic, though it never exceeds 1."""
    t = numpy.asarray(t, dtype=float)
    n, d = 7.5625, 2.75
    value = numpy.select(
        [t < 1/d, t < 2/d, t < 2.5/d],
        [n * t**2, n * (t - 1.5/d)**2 + 0.75, n * (t - 2.25/d)**2 + 0.9375],
        n * (t - 2.625/d)**2 + 0.984375)
    return _exact_ends(value, t)

def in_bounce(t):
    """Bounces off 0 with growing height before rising to 1. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    return _exact_ends(compose.flip(out_bounce(compose.flip(t))), t)

def in_out_bounce(t):
    """in_bounce on the first half, out_bounce on the second. Non-monotonic."""
    t = numpy.asarray(t, dtype=float)
    first_half = (1 - out_bounce(1 - 2*t)) / 2
    second_half = (1 + out_bounce(2*t - 1)) / 2
    return _exact_ends(numpy.where(t < 0.5, first_half, second_half), t)

EASINGS = dict(
    linear=linear,
    in_quad=in_quad, out_quad=out_quad, in_out_quad=in_out_quad,
    in_cubic=in_cubic, out_cubic=out_cubic, in_out_cubic=in_out_cubic,
    in_quart=in_quart, out_quart=out_quart, in_out_quart=in_out_quart,
    in_quint=in_quint, out_quint=out_quint, in_out_quint=in_out_quint,
    in_sine=in_sine, out_sine=out_sine, in_out_sine=in_out_sine,
    in_expo=in_expo, out_expo=out_expo, in_out_expo=in_out_expo,
    in_circ=in_circ, out_circ=out_circ, in_out_circ=in_out_circ,
    in_back=in_back, out_back=out_back, in_out_back=in_out_back,
    in_elastic=in_elastic, out_elastic=out_elastic, in_out_elastic=in_out_elastic,
    in_bounce=in_bounce, out_bounce=out_bounce, in_out_bounce=in_out_bounce,
)
for _n in range(2, 10):
    for _f in (globals()[f'smooth_{kind}_{_n}'] for kind in ('start', 'stop', 'step')):
        EASINGS[_f.__name__] = _f

def ease(kind, t):
    """Apply the easing function named 'kind' (a key of EASINGS) to t."""
    try:
        f = EASINGS[kind]
    except KeyError:
        raise ValueError(f'Unknown easing "{kind}". Valid kinds are: {", ".join(sorted(EASINGS))}') from None
    return f(t)
