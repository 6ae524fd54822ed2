"""
Soy: interpolation and CSS-style easing curves.

Exports:
- Lerper: protocol for timing functions (``calculate(t) -> progress``)
- Linear / LINEAR: identity timing function
- Bezier / cubic_bezier: unit cubic bezier timing function
- EASE, EASE_IN, EASE_OUT, EASE_IN_OUT: CSS preset curves
- lerp: blend two values with a timing function

Usage:
    >>> import soy
    >>> soy.lerp(soy.LINEAR, 5.0, 10.0, 0.25)
    6.25
    >>> ease_in_out = soy.cubic_bezier(0.42, 0.0, 0.58, 1.0)
    >>> round(ease_in_out.calculate(0.5), 3)
    0.5
"""
from .motion.bezier import Bezier, cubic_bezier
from .motion.easing import LINEAR, FunctionLerper, Lerper, Linear, as_lerper, lerp
from .motion.presets import (
    EASE,
    EASE_IN,
    EASE_IN_OUT,
    EASE_OUT,
    PRESETS,
    UnknownPreset,
    get_preset,
)
from .motion.sampler import sample_curve

__all__ = [
    'Bezier',
    'cubic_bezier',
    'Lerper',
    'Linear',
    'LINEAR',
    'FunctionLerper',
    'as_lerper',
    'lerp',
    'EASE',
    'EASE_IN',
    'EASE_OUT',
    'EASE_IN_OUT',
    'PRESETS',
    'UnknownPreset',
    'get_preset',
    'sample_curve',
]
