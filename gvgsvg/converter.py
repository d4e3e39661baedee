"""Convert between drawing commands and scalable vector graphics (svg)."""
import copy
import math
import re
from typing import Callable, List, Optional, TextIO, Union
import warnings
import xml.etree.ElementTree as ET

import numpy as np

from . import config, svg
from .ast import SHAPES, Ast, Circle, Command, Ellipse, Line, Polygon, Rect, flatten
from .color import ColorNotFoundError, decode, encode
from .coords import Number, to_normalized, to_pixel, to_pixels

TAGS = ("line", "circle", "polygon", "rect", "ellipse")
"""Element tags read from svg, in the order they are read."""
SEPARATOR_REGEX = re.compile(r"\s*,?\s*")


class ConversionWarning(UserWarning):
    """A command or element was skipped during conversion."""


class ElementError(ValueError):
    """Missing or invalid element, or element geometry attribute."""


class Converter:
    """
    Convert between drawing commands and svg documents.

    Commands are written in normalized coordinates ([-1, 1] along each axis)
    and mapped to pixel coordinates on a `width` x `height` canvas.
    Sizes (circle radius, ellipse radii, rectangle width and height) are mapped
    with the same function as positions, with the circle radius along x.

    When reading svg, values are returned as pixel coordinates
    unless `normalize` is `True`.

    Arguments:
        width: Canvas width (pixels). Defaults to :data:`gvgsvg.config.width`.
        height: Canvas height (pixels). Defaults to :data:`gvgsvg.config.height`.
        strict: Whether to raise an error (`True`) or skip with a warning (`False`)
            when an element cannot be read.
            Defaults to :data:`gvgsvg.config.strict`.
        normalize: Whether to convert pixel coordinates read from svg back to
            normalized coordinates.

    Attributes:
        group_id (str): Identifier of the `g` element wrapping written shapes

    Raises:
        ValueError: Width or height is not a positive integer.

    Example:
        >>> converter = Converter()
        >>> e = converter.to_svg([Circle(0, 0, 0.5, 0x993399ff)])
        >>> e.find('g/circle').attrib
        {'cx': '200', 'cy': '200', 'r': '300', 'style': 'fill:none;stroke:#993399'}
    """

    def __init__(
        self,
        width: int = None,
        height: int = None,
        strict: bool = None,
        normalize: bool = False,
    ) -> None:
        width = config.width if width is None else width
        height = config.height if height is None else height
        for name, value in ("width", width), ("height", height):
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, np.integer))
                or value <= 0
            ):
                raise ValueError(f"{name} must be a positive integer: {value!r}")
        self._width = int(width)
        self._height = int(height)
        self.strict = config.strict if strict is None else strict
        self.normalize = normalize
        self.group_id = config.group_id

    @property
    def width(self) -> int:
        """Canvas width (pixels)."""
        return self._width

    @property
    def height(self) -> int:
        """Canvas height (pixels)."""
        return self._height

    # ---- Commands to svg ----

    def to_svg(self, ast: Ast) -> ET.Element:
        """
        Convert commands to an svg document.

        Shapes are written in drawing order to a single `g` element.
        The content of :class:`gvgsvg.ast.Glow` groups is written in place.
        Anything else is skipped with a :class:`ConversionWarning`.

        Arguments:
            ast: Commands

        Returns:
            <svg> element.
        """
        group = svg.g(id=self.group_id)
        for cmd in flatten(ast):
            if isinstance(cmd, SHAPES):
                method = getattr(self, "_emit_" + type(cmd).__name__.lower())
                group.append(method(cmd))
            else:
                warnings.warn(
                    f"Skipping unsupported command: {cmd!r}", ConversionWarning
                )
        return svg.svg(group, width=str(self.width), height=str(self.height))

    def write(
        self, ast: Ast, path: str = None, indent: Union[int, str] = None
    ) -> Optional[str]:
        """
        Convert commands to svg and return it as a string or write it to file.

        Arguments:
            ast: Commands
            path: Path to file
            indent: Indent passed to :func:`gvgsvg.svg.write`

        Returns:
            String representation of svg (if `path` is not provided).
        """
        return svg.write(self.to_svg(ast), path=path, indent=indent)

    def _x(self, coord: Number) -> int:
        return to_pixel(coord, self.width)

    def _y(self, coord: Number) -> int:
        return to_pixel(coord, self.height)

    @staticmethod
    def _style(color: int) -> str:
        return f"fill:none;stroke:{encode(color)}"

    def _emit_line(self, cmd: Line) -> ET.Element:
        return svg.line(
            self._x(cmd.x1),
            self._y(cmd.y1),
            self._x(cmd.x2),
            self._y(cmd.y2),
            style=self._style(cmd.color),
        )

    def _emit_rect(self, cmd: Rect) -> ET.Element:
        return svg.rect(
            self._x(cmd.x),
            self._y(cmd.y),
            self._x(cmd.width),
            self._y(cmd.height),
            style=self._style(cmd.color),
        )

    def _emit_polygon(self, cmd: Polygon) -> ET.Element:
        xy = to_pixels(cmd.coords, width=self.width, height=self.height)
        return svg.polygon(xy, style=self._style(cmd.color))

    def _emit_circle(self, cmd: Circle) -> ET.Element:
        return svg.circle(
            self._x(cmd.cx),
            self._y(cmd.cy),
            self._x(cmd.r),
            style=self._style(cmd.color),
        )

    def _emit_ellipse(self, cmd: Ellipse) -> ET.Element:
        return svg.ellipse(
            self._x(cmd.cx),
            self._y(cmd.cy),
            self._x(cmd.rx),
            self._y(cmd.ry),
            style=self._style(cmd.color),
        )

    # ---- Svg to commands ----

    def from_svg(
        self, tree: Union[ET.ElementTree, ET.Element], group_id: str = None
    ) -> Ast:
        """
        Convert an svg document to commands.

        Elements are read by tag in the order of :data:`TAGS`
        (all `line` elements first, then all `circle` elements, ...),
        each in document order. The stroke color is read from the `style`
        attribute (see :func:`gvgsvg.color.decode`).

        Arguments:
            tree: Parsed svg document. It is not modified.
            group_id: Identifier of the `g` element to read elements from.
                If `None` (default), elements are read from the whole document.
                If no such group exists, returns no commands (or raises
                :class:`ElementError` if :attr:`strict`).

        Returns:
            Commands.

        Raises:
            ElementError: Missing group or invalid geometry (if :attr:`strict`).
            gvgsvg.color.ColorNotFoundError: Missing stroke color (if :attr:`strict`).
        """
        root = tree.getroot() if isinstance(tree, ET.ElementTree) else tree
        root = copy.deepcopy(root)
        svg.strip_namespaces(root)
        if group_id is not None:
            groups = [e for e in root.iter("g") if e.get("id") == group_id]
            if not groups:
                message = f"No <g> with id {group_id!r} found"
                if self.strict:
                    raise ElementError(message)
                warnings.warn(message, ConversionWarning)
                return []
            root = groups[0]
        ast: Ast = []
        for tag in TAGS:
            method: Callable[[ET.Element], Command] = getattr(self, "_parse_" + tag)
            for e in root.iter(tag):
                try:
                    ast.append(method(e))
                except (ElementError, ColorNotFoundError) as error:
                    if self.strict:
                        raise
                    warnings.warn(f"Skipping <{tag}>: {error}", ConversionWarning)
        return ast

    def from_string(self, text: str, group_id: str = None) -> Ast:
        """
        Convert svg text to commands.

        Raises:
            xml.etree.ElementTree.ParseError: Text is not well-formed XML.

        Example:
            >>> xml = '<circle cx="300" cy="250" r="260" style="stroke: #993399"/>'
            >>> Converter().from_string(xml)
            [Circle(cx=300, cy=250, r=260, color=2570295807)]
        """
        return self.from_svg(svg.parse(text), group_id=group_id)

    def read(self, path: Union[str, TextIO], group_id: str = None) -> Ast:
        """
        Read commands from an svg file.

        Arguments:
            path: Path or file object pointing to the SVG file
            group_id: See :meth:`from_svg`

        Raises:
            xml.etree.ElementTree.ParseError: File is not well-formed XML.
        """
        return self.from_svg(svg.read(path), group_id=group_id)

    @staticmethod
    def _values(e: ET.Element, *names: str) -> List[Number]:
        values = []
        for name in names:
            value = e.get(name)
            if value is None:
                raise ElementError(f"Missing attribute: {name}")
            try:
                x = svg.num(value.strip())
                finite = math.isfinite(x)
            except (ValueError, OverflowError):
                # Not a number, or an integer too large for a float
                finite = False
            if not finite:
                raise ElementError(f"Invalid attribute {name}: {value!r}")
            values.append(x)
        return values

    def _unx(self, pixel: Number) -> Number:
        return to_normalized(pixel, self.width) if self.normalize else pixel

    def _uny(self, pixel: Number) -> Number:
        return to_normalized(pixel, self.height) if self.normalize else pixel

    def _parse_line(self, e: ET.Element) -> Line:
        x1, y1, x2, y2 = self._values(e, "x1", "y1", "x2", "y2")
        color = decode(e.get("style"))
        return Line(self._unx(x1), self._uny(y1), self._unx(x2), self._uny(y2), color)

    def _parse_circle(self, e: ET.Element) -> Circle:
        cx, cy, r = self._values(e, "cx", "cy", "r")
        color = decode(e.get("style"))
        return Circle(self._unx(cx), self._uny(cy), self._unx(r), color)

    def _parse_ellipse(self, e: ET.Element) -> Ellipse:
        cx, cy, rx, ry = self._values(e, "cx", "cy", "rx", "ry")
        color = decode(e.get("style"))
        return Ellipse(
            self._unx(cx), self._uny(cy), self._unx(rx), self._uny(ry), color
        )

    def _parse_rect(self, e: ET.Element) -> Rect:
        x, y, width, height = self._values(e, "x", "y", "width", "height")
        color = decode(e.get("style"))
        return Rect(
            self._unx(x), self._uny(y), self._unx(width), self._uny(height), color
        )

    def _parse_polygon(self, e: ET.Element) -> Polygon:
        points = e.get("points")
        if points is None:
            raise ElementError("Missing attribute: points")
        gaps = svg.COORD_REGEX.split(points)
        separators = gaps[1:-1]
        if (
            gaps[0].strip()
            or gaps[-1].strip()
            or not all(SEPARATOR_REGEX.fullmatch(s) for s in separators)
            or (len(gaps) - 1) % 2
        ):
            raise ElementError(f"Invalid attribute points: {points!r}")
        xy = svg.parse_points(points)
        color = decode(e.get("style"))
        return Polygon([(self._unx(x), self._uny(y)) for x, y in xy], color)
