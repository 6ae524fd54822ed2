from __future__ import annotations

from typing import Dict

from .bezier import Bezier
from .easing import LINEAR, Lerper


class UnknownPreset(KeyError):
    pass


# Same as CSS "ease": cubic-bezier(0.25, 0.1, 0.25, 1.0)
EASE = Bezier(x=(1.0, -0.75, 0.75), y=(-1.7, 2.4, 0.3))

# Same as CSS "ease-in": cubic-bezier(0.42, 0.0, 1.0, 1.0)
EASE_IN = Bezier(x=(-0.74, 0.48, 1.26), y=(-2.0, 3.0, 0.0))

# Same as CSS "ease-out": cubic-bezier(0.0, 0.0, 0.58, 1.0)
EASE_OUT = Bezier(x=(-0.74, 1.74, 0.0), y=(-2.0, 3.0, 0.0))

# Same as CSS "ease-in-out": cubic-bezier(0.42, 0.0, 0.58, 1.0)
EASE_IN_OUT = Bezier(x=(0.52, -0.78, 1.26), y=(-2.0, 3.0, 0.0))


PRESETS: Dict[str, Lerper] = {
    "linear": LINEAR,
    "ease": EASE,
    "ease-in": EASE_IN,
    "ease-out": EASE_OUT,
    "ease-in-out": EASE_IN_OUT,
}


def get_preset(name: str) -> Lerper:
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPreset(name) from None
