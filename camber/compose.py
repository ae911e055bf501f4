"""Tools for composing easing functions out of simpler ones.

flip() applied to the parameter of an easing function mirrors it horizontally;
applied to the result, it mirrors it vertically. So smooth_stop_2 is just
flip(smooth_start_2(flip(t))).
"""

def flip(t):
    """Return 1 - t."""
    return 1 - t

def mix(a, b, weight, t):
    """Blend easing functions a and b at t with a constant weight (0 gives a,
    1 gives b)."""
    return a(t) + weight*(b(t) - a(t))

def crossfade(a, b, t):
    """Blend from easing function a at t=0 to b at t=1, using t itself as the
    blend weight."""
    return a(t) + t*(b(t) - a(t))

def scale(f, t):
    """Multiply f(t) by t."""
    return t * f(t)

def reverse_scale(f, t):
    """Multiply f(t) by 1 - t."""
    return flip(t) * f(t)

def arch(t):
    """Parabolic arch: 0 at both ends and 1 at t=0.5. Not an easing function
    in its own right, since arch(1) == 0; useful as a building block."""
    return 4 * t * flip(t)
