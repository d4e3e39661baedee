"""Build, read, and write scalable vector graphics (svg) documents."""
import copy
import re
from typing import Iterable, List, Optional, Sequence, TextIO, Tuple, Union
import xml.etree.ElementTree as ET

from typing_extensions import TypedDict

Number = Union[int, float]
Numeric = Union[str, Number]
Coordinates = List[Tuple[Number, Number]]
Line = TypedDict("Line", {"x1": str, "y1": str, "x2": str, "y2": str})
Circle = TypedDict("Circle", {"cx": str, "cy": str, "r": str})
Ellipse = TypedDict("Ellipse", {"cx": str, "cy": str, "rx": str, "ry": str})
Rect = TypedDict("Rect", {"x": str, "y": str, "width": str, "height": str})
Polygon = TypedDict("Polygon", {"points": str})

COORD_REGEX = re.compile(
    r"(?:\+|\-)?(?:\.[0-9]+|[0-9]+(?:\.[0-9]+)?)(?:[Ee][+-]?[0-9]+)?"
)
NAMESPACE_REGEX = re.compile(r"\{.*\}")


def strip_namespaces(tree: Union[ET.ElementTree, ET.Element]) -> None:
    """Strip namespaces from tags and attribute names."""
    for e in tree.iter():
        if not isinstance(e.tag, str):
            # Comments and processing instructions
            continue
        e.tag = NAMESPACE_REGEX.sub("", e.tag)
        e.attrib = {NAMESPACE_REGEX.sub("", k): v for k, v in e.attrib.items()}


def _chunks(x: Sequence, n: int) -> Iterable:
    """
    Generate a zip that returns sequential chunks.

    Incomplete trailing chunks (of length < n) are ignored.
    """
    each = iter(x)
    return zip(*([each] * n))


def num(x: Numeric) -> Number:
    """
    Cast to integer or float.

    Arguments:
        x: Value to cast as number

    Raises:
        ValueError: String is not a number.

    Example:
        >>> num('1')
        1
        >>> num('1.0')
        1.0
        >>> num(' 2e1 ')
        20.0
        >>> num(1.5)
        1.5
    """
    if isinstance(x, str):
        try:
            return int(x)
        except ValueError:
            return float(x)
    return x


def parse_points(points: str) -> Coordinates:
    """
    Parse a `points` attribute into point coordinates.

    A trailing unpaired number is ignored.

    Arguments:
        points: Value of a `polygon` or `polyline` `points` attribute

    Example:
        >>> parse_points('0,0 1,0.5 1-1')
        [(0, 0), (1, 0.5), (1, -1)]
        >>> parse_points('')
        []
    """
    numbers = COORD_REGEX.findall(points)
    return [(num(x), num(y)) for x, y in _chunks(numbers, 2)]


def format_points(xy: Iterable[Tuple[Number, Number]]) -> str:
    """
    Format point coordinates as a `points` attribute.

    Example:
        >>> format_points([(0, 0), (1, 0.5)])
        '0,0 1,0.5'
    """
    return " ".join(f"{x},{y}" for x, y in xy)


# ---- Elements ----


def svg(*children: ET.Element, **attrib: str) -> ET.Element:
    """
    Create `svg` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/element/svg.

    Arguments:
        *children: Child elements
        **attrib: Additional element attributes (e.g. `width`, `height`)

    Returns:
        <svg> element with attributes.

    Example:
        >>> e = svg(g(), width='400', height='300')
        >>> e.tag, len(e)
        ('svg', 1)
        >>> e.get('width'), e.get('height')
        ('400', '300')
    """
    e = ET.Element("svg")
    e.extend(children)
    e.attrib = {
        "xmlns": "http://www.w3.org/2000/svg",
        "xmlns:xlink": "http://www.w3.org/1999/xlink",
        **attrib,
    }
    return e


def g(*children: ET.Element, **attrib: str) -> ET.Element:
    """
    Create `g` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/element/g.

    Example:
        >>> e = g(line(0, 0, 1, 1), id='main_group')
        >>> e.tag, len(e), e.attrib
        ('g', 1, {'id': 'main_group'})
    """
    e = ET.Element("g", attrib=attrib)
    e.extend(children)
    return e


def line(x1: Number, y1: Number, x2: Number, y2: Number, **attrib: str) -> ET.Element:
    """
    Create `line` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Element/line.

    Example:
        >>> line(0, 1, 2, 3, style='fill:none').attrib
        {'x1': '0', 'y1': '1', 'x2': '2', 'y2': '3', 'style': 'fill:none'}
    """
    geometry: Line = {"x1": str(x1), "y1": str(y1), "x2": str(x2), "y2": str(y2)}
    return ET.Element("line", attrib={**geometry, **attrib})


def circle(cx: Number, cy: Number, r: Number, **attrib: str) -> ET.Element:
    """
    Create `circle` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Element/circle.

    Example:
        >>> circle(200, 200, 300).attrib
        {'cx': '200', 'cy': '200', 'r': '300'}
    """
    geometry: Circle = {"cx": str(cx), "cy": str(cy), "r": str(r)}
    return ET.Element("circle", attrib={**geometry, **attrib})


def ellipse(
    cx: Number, cy: Number, rx: Number, ry: Number, **attrib: str
) -> ET.Element:
    """
    Create `ellipse` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Element/ellipse.
    """
    geometry: Ellipse = {"cx": str(cx), "cy": str(cy), "rx": str(rx), "ry": str(ry)}
    return ET.Element("ellipse", attrib={**geometry, **attrib})


def rect(
    x: Number, y: Number, width: Number, height: Number, **attrib: str
) -> ET.Element:
    """
    Create `rect` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Element/rect.

    Example:
        >>> rect(0, 1, 10, 20).attrib
        {'x': '0', 'y': '1', 'width': '10', 'height': '20'}
    """
    geometry: Rect = {
        "x": str(x),
        "y": str(y),
        "width": str(width),
        "height": str(height),
    }
    return ET.Element("rect", attrib={**geometry, **attrib})


def polygon(xy: Iterable[Tuple[Number, Number]], **attrib: str) -> ET.Element:
    """
    Create `polygon` element.

    See https://developer.mozilla.org/en-US/docs/Web/SVG/Element/polygon.

    Arguments:
        xy: Vertex coordinates [(x, y), ...]
        **attrib: Additional element attributes

    Example:
        >>> polygon([(0, 0), (10, 0), (10, 10)]).attrib
        {'points': '0,0 10,0 10,10'}
    """
    geometry: Polygon = {"points": format_points(xy)}
    return ET.Element("polygon", attrib={**geometry, **attrib})


# ---- Input / Output ----


def parse(text: str) -> ET.ElementTree:
    """
    Parse XML from a string.

    Namespaces are stripped from element tags and attribute names.

    Raises:
        xml.etree.ElementTree.ParseError: Text is not well-formed XML.

    Example:
        >>> tree = parse('<svg xmlns="http://www.w3.org/2000/svg"><line /></svg>')
        >>> [e.tag for e in tree.iter()]
        ['svg', 'line']
    """
    tree = ET.ElementTree(ET.fromstring(text))
    strip_namespaces(tree)
    return tree


def read(path: Union[str, TextIO]) -> ET.ElementTree:
    """
    Read XML from a file.

    Namespaces are stripped from element tags and attribute names.

    Arguments:
        path: Path or file object pointing to the SVG file

    Raises:
        xml.etree.ElementTree.ParseError: File is not well-formed XML.
    """
    tree = ET.parse(path)
    strip_namespaces(tree)
    return tree


def _indent_etree(e: ET.Element, level: int = 0, tab: str = "") -> None:
    sep = "\n" + tab * level
    if len(e):
        if not e.text or not e.text.strip():
            e.text = sep + tab
        for child in e:
            _indent_etree(child, level=level + 1, tab=tab)
        # Last child closes at this level
        child.tail = sep
    if level and (not e.tail or not e.tail.strip()):
        e.tail = sep


def write(
    e: ET.Element, path: str = None, indent: Union[int, str] = None
) -> Optional[str]:
    r"""
    Returns XML as a string or writes it to file.

    Arguments:
        e: Element to write
        path: Path to file
        indent: If an integer or string, XML elements are pretty-printed with that
            indent level.
            A positive integer indents that many spaces per level.
            A string (e.g. "\t") indents that string per level.
            `None` (the default) prints on a single line.

    Returns:
        String representation of XML (if `path` is not provided).

    Example:
        >>> print(write(g(circle(1, 2, 3), id='main_group'), indent=2))
        <g id="main_group">
          <circle cx="1" cy="2" r="3" />
        </g>
    """
    e = copy.deepcopy(e)
    if indent is not None:
        tab = indent if isinstance(indent, str) else max(indent, 0) * " "
        _indent_etree(e, tab=tab)
    txt = ET.tostring(e, encoding="unicode")
    if not path:
        return txt
    with open(path, "w") as fp:
        fp.write(txt)
    return None
