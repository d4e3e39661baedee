"""
Convert between normalized and pixel coordinates.

Normalized coordinates span [-1, 1] along each axis, independent of canvas size.
Pixel coordinates span [0, extent], with the origin in the upper-left corner.
Values outside the normalized range are mapped linearly outside the canvas.
"""
from fractions import Fraction
from typing import Iterable, List, Tuple, Union

import numpy as np

Number = Union[int, float]


def _check_extent(extent: Number) -> None:
    if extent <= 0:
        raise ValueError(f"Extent must be positive: {extent}")


def _to_pixel_exact(coord: Number, extent: int) -> int:
    return round((Fraction(coord) + 1) / 2 * extent)


def to_pixel(coord: Number, extent: int) -> int:
    """
    Convert a normalized coordinate to a pixel coordinate.

    Ties are rounded to the nearest even pixel.
    Coordinates too large for floating-point arithmetic are mapped exactly.

    Arguments:
        coord: Normalized coordinate
        extent: Canvas size along the axis (pixels)

    Example:
        >>> to_pixel(-1, 400), to_pixel(0, 400), to_pixel(1, 400)
        (0, 200, 400)
        >>> to_pixel(0.5, 400)
        300
        >>> to_pixel(-0.5, 5)
        1
        >>> to_pixel(3, 400)
        800
        >>> to_pixel(1e308, 4) - 2 * int(1e308)
        2
    """
    try:
        pixel = extent * ((coord + 1) / 2)
    except OverflowError:
        return _to_pixel_exact(coord, extent)
    if not np.isfinite(pixel):
        return _to_pixel_exact(coord, extent)
    return int(np.round(pixel))


def to_pixels(
    coords: Iterable[Tuple[Number, Number]], width: int, height: int
) -> List[Tuple[int, int]]:
    """
    Convert normalized point coordinates to pixel coordinates.

    Arguments:
        coords: Normalized point coordinates [(x, y), ...]
        width: Canvas width (pixels)
        height: Canvas height (pixels)

    Example:
        >>> to_pixels([(-1, 1), (0, 0.5)], width=400, height=200)
        [(0, 200), (200, 150)]
        >>> to_pixels([], width=400, height=200)
        []
    """
    coords = list(coords)
    try:
        xy = np.asarray(coords, dtype=float).reshape(-1, 2)
    except OverflowError:
        xy = None
    if xy is not None:
        with np.errstate(over="ignore"):
            pixels = np.round(np.array([width, height]) * ((xy + 1) / 2))
        # Beyond int64, map each coordinate exactly
        if np.all(np.abs(pixels) < 2 ** 63):
            return [(int(x), int(y)) for x, y in pixels.astype(int)]
    return [(to_pixel(x, width), to_pixel(y, height)) for x, y in coords]


def to_normalized(pixel: Number, extent: int) -> float:
    """
    Convert a pixel coordinate to a normalized coordinate.

    Inverse of :func:`to_pixel`, up to the rounding to whole pixels.

    Arguments:
        pixel: Pixel coordinate
        extent: Canvas size along the axis (pixels)

    Raises:
        ValueError: Extent is not positive.

    Example:
        >>> to_normalized(0, 400), to_normalized(200, 400), to_normalized(400, 400)
        (-1.0, 0.0, 1.0)
        >>> to_normalized(300, 400)
        0.5
    """
    _check_extent(extent)
    return 2 * pixel / extent - 1
