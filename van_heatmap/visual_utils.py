"""CSS color validation and hex formatting for marker fills."""

from __future__ import annotations

import re
from typing import Optional, Sequence, Tuple, Union

from matplotlib import colors as mcolors

ColorInput = Union[str, Sequence[float]]

# rgb(0, 128, 0), rgba(0 128 0 / 50%), rgb(100%, 0%, 0%)
_CSS_RGB_FUNCTION = re.compile(r"^rgba?\(\s*([^()]*)\)$", re.IGNORECASE)

# matplotlib-only spellings SVG does not understand: cycle refs, prefixed names, gray levels
_NON_CSS_COLOR = re.compile(r"^(C\d+|\w+:.+|[\d.]+)$", re.IGNORECASE)


def _css_channel(token: str, scale: float) -> float:
    if token.endswith("%"):
        value = float(token[:-1]) / 100.0
    else:
        value = float(token) / scale
    return max(0.0, min(1.0, value))


def parse_css_rgb(text: str) -> Optional[Tuple[float, float, float, float]]:
    """Parse a CSS ``rgb()``/``rgba()`` string; ``None`` for other syntaxes."""
    match = _CSS_RGB_FUNCTION.match(text.strip())
    if match is None:
        return None
    tokens = [token for token in re.split(r"[\s,/]+", match.group(1)) if token]
    if len(tokens) not in (3, 4):
        raise ValueError(f"Expected 3 or 4 channels in '{text}'")
    try:
        r, g, b = (_css_channel(token, 255.0) for token in tokens[:3])
        alpha = _css_channel(tokens[3], 1.0) if len(tokens) == 4 else 1.0
    except ValueError:
        raise ValueError(f"Invalid channel value in '{text}'") from None
    return (r, g, b, alpha)


def to_rgb(color: ColorInput) -> Tuple[float, float, float]:
    if isinstance(color, str):
        parsed = parse_css_rgb(color)
        if parsed is not None:
            return parsed[:3]
        color = color.strip()
    return mcolors.to_rgb(color)


def to_hex(color: ColorInput) -> str:
    """Format any accepted color as lowercase ``#rrggbb``."""
    return mcolors.to_hex(to_rgb(color), keep_alpha=False)


def is_color(value: object) -> bool:
    if not isinstance(value, str) or not value.strip():
        return False
    if _NON_CSS_COLOR.match(value.strip()):
        return False
    try:
        to_rgb(value)
    except ValueError:
        return False
    return True


__all__ = [
    "ColorInput",
    "is_color",
    "parse_css_rgb",
    "to_hex",
    "to_rgb",
]
