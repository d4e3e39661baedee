"""Drawing commands of a vector graphics scene."""
from typing import List, NamedTuple, Tuple, Union

Number = Union[int, float]
Coordinates = List[Tuple[Number, Number]]


class Line(NamedTuple):
    """Straight line from (`x1`, `y1`) to (`x2`, `y2`)."""

    x1: Number
    y1: Number
    x2: Number
    y2: Number
    color: int


class Circle(NamedTuple):
    """Circle centered at (`cx`, `cy`) with radius `r`."""

    cx: Number
    cy: Number
    r: Number
    color: int


class Rect(NamedTuple):
    """Rectangle with upper-left corner (`x`, `y`)."""

    x: Number
    y: Number
    width: Number
    height: Number
    color: int


class Polygon(NamedTuple):
    """
    Closed polygon.

    Attributes:
        coords: Vertex coordinates [(x, y), ...]. The last vertex is implicitly
            joined to the first.
        color: Packed RGBA color
    """

    coords: Coordinates
    color: int


class Ellipse(NamedTuple):
    """Ellipse centered at (`cx`, `cy`) with radii `rx` and `ry`."""

    cx: Number
    cy: Number
    rx: Number
    ry: Number
    color: int


class Glow(NamedTuple):
    """
    Group of commands drawn with a glow effect.

    The effect itself is not rendered: children are drawn as if ungrouped.
    """

    commands: List["Command"]


Command = Union[Line, Circle, Rect, Polygon, Ellipse, Glow]
Ast = List[Command]
"""Commands in drawing order (later commands are drawn over earlier ones)."""

SHAPES: Tuple[type, ...] = (Line, Circle, Rect, Polygon, Ellipse)


def flatten(ast: Ast) -> Ast:
    """
    Return shapes in drawing order, with the content of groups inlined.

    Example:
        >>> red = 0xff0000ff
        >>> ast = [Glow([Line(0, 0, 1, 1, red), Glow([Circle(0, 0, 1, red)])])]
        >>> [type(cmd).__name__ for cmd in flatten(ast)]
        ['Line', 'Circle']
    """
    shapes = []
    for cmd in ast:
        if isinstance(cmd, Glow):
            shapes.extend(flatten(cmd.commands))
        else:
            shapes.append(cmd)
    return shapes
