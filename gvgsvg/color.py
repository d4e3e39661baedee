"""
Convert between packed RGBA colors and SVG stroke colors.

Colors are packed into a single integer as `0xRRGGBBAA`.
SVG colors carry no alpha channel: it is dropped when writing,
and assumed to be fully opaque (`0xFF`) when reading.
"""
import re
from typing import Optional

STROKE_REGEX = re.compile(r"stroke\s*:\s*#([0-9A-Fa-f]{6})(?![0-9A-Fa-f])")
OPAQUE = 0xFF


class ColorNotFoundError(ValueError):
    """No `stroke` color declaration found in a style attribute."""


def encode(color: int) -> str:
    """
    Format a packed RGBA color as an SVG hex color.

    Arguments:
        color: Packed RGBA color

    Example:
        >>> encode(0x993399ff)
        '#993399'
        >>> encode(0x0000ff80)
        '#0000ff'
    """
    return f"#{(color >> 8) & 0xFFFFFF:06x}"


def decode(style: Optional[str]) -> int:
    """
    Read the stroke color of an SVG `style` attribute as a packed RGBA color.

    Only hex colors (`stroke: #RRGGBB`) are recognized.
    Named colors, `rgb()`, and presentation attributes are not.

    Arguments:
        style: Value of the `style` attribute

    Raises:
        ColorNotFoundError: No stroke hex color found.

    Example:
        >>> hex(decode('fill:none;stroke: #993399'))
        '0x993399ff'
        >>> decode('fill:none')
        Traceback (most recent call last):
            ...
        gvgsvg.color.ColorNotFoundError: No stroke color in style: 'fill:none'
    """
    match = STROKE_REGEX.search(style) if style else None
    if not match:
        raise ColorNotFoundError(f"No stroke color in style: {style!r}")
    return (int(match.group(1), 16) << 8) | OPAQUE
