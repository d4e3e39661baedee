"""Tests of the svg module."""
import io
from typing import Tuple, Union
import xml.etree.ElementTree as ET

import gvgsvg.svg
import pytest


def test_strips_namespaces() -> None:
    """Strips namespaces from tags and attribute names."""
    xml = """
    <svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
        <g id="main_group"><image xlink:href="photo.jpg" /></g>
    </svg>
    """
    tree = gvgsvg.svg.parse(xml)
    assert [e.tag for e in tree.iter()] == ["svg", "g", "image"]
    assert tree.find("g/image").attrib == {"href": "photo.jpg"}


def test_reads_from_file_object() -> None:
    """Reads xml from a file object."""
    fp = io.StringIO("<svg xmlns='http://www.w3.org/2000/svg'><circle /></svg>")
    tree = gvgsvg.svg.read(fp)
    assert tree.getroot().tag == "svg"
    assert tree.find("circle") is not None


def test_errors_for_invalid_xml() -> None:
    """Raises error if text is not well-formed xml."""
    with pytest.raises(ET.ParseError):
        gvgsvg.svg.parse("<svg><line></svg>")


@pytest.mark.parametrize(
    "s, xy",
    [
        ["1,-0.1", (1, -0.1)],
        ["1 -0.1", (1, -0.1)],
        ["1-0.1", (1, -0.1)],
        ["0.1.2", (0.1, 0.2)],
        ["1-1.2e-01", (1, -0.12)],
        ["1 1.2e+01", (1, 12)],
    ],
)
def test_parses_coordinate_formats(
    s: str, xy: Tuple[Union[int, float], Union[int, float]]
) -> None:
    """Parses all possible coordinate sequence formats."""
    assert gvgsvg.svg.parse_points(s) == [xy]


def test_preserves_integers() -> None:
    """Preserves coordinates as integer when possible."""
    (x, y), = gvgsvg.svg.parse_points("1,1.0")
    assert isinstance(x, int) and x == 1
    assert isinstance(y, float) and y == 1


def test_builds_shape_elements() -> None:
    """Builds shape elements with string attributes."""
    style = "fill:none;stroke:#000000"
    assert gvgsvg.svg.line(0, 1, 2, 3, style=style).attrib == {
        "x1": "0",
        "y1": "1",
        "x2": "2",
        "y2": "3",
        "style": style,
    }
    assert gvgsvg.svg.ellipse(1, 2, 3, 4).attrib == {
        "cx": "1",
        "cy": "2",
        "rx": "3",
        "ry": "4",
    }
    e = gvgsvg.svg.polygon([(0, 0), (1.5, 2)])
    assert e.tag == "polygon"
    assert e.attrib == {"points": "0,0 1.5,2"}


def test_sets_svg_namespace_and_size() -> None:
    """Sets svg namespaces and custom attributes."""
    e = gvgsvg.svg.svg(gvgsvg.svg.g(id="main_group"), width="12", height="8")
    assert e.get("xmlns") == "http://www.w3.org/2000/svg"
    assert (e.get("width"), e.get("height")) == ("12", "8")
    assert e.find("g").get("id") == "main_group"


def test_writes_single_line_by_default() -> None:
    """Writes xml on a single line unless an indent is given."""
    e = gvgsvg.svg.svg(gvgsvg.svg.g(gvgsvg.svg.circle(1, 2, 3)))
    assert "\n" not in gvgsvg.svg.write(e)
    lines = gvgsvg.svg.write(e, indent="\t").split("\n")
    assert lines[1] == "\t<g>"
    assert lines[2] == '\t\t<circle cx="1" cy="2" r="3" />'
    assert lines[3] == "\t</g>"
    assert lines[4] == "</svg>"


def test_write_does_not_modify_element() -> None:
    """Pretty-prints a copy of the element."""
    e = gvgsvg.svg.g(gvgsvg.svg.circle(1, 2, 3))
    gvgsvg.svg.write(e, indent=2)
    assert e.text is None
    assert e[0].tail is None


def test_writes_and_reads_file(tmp_path) -> None:
    """Reads back elements written to file."""
    path = str(tmp_path / "drawing.svg")
    e = gvgsvg.svg.svg(gvgsvg.svg.g(gvgsvg.svg.rect(0, 1, 2, 3), id="main_group"))
    assert gvgsvg.svg.write(e, path=path, indent=2) is None
    tree = gvgsvg.svg.read(path)
    assert tree.find("g/rect").attrib == {
        "x": "0",
        "y": "1",
        "width": "2",
        "height": "3",
    }
