"""Tests of the color module."""
from gvgsvg.color import ColorNotFoundError, decode, encode
import pytest


@pytest.mark.parametrize(
    "color, txt",
    [
        (0x993399FF, "#993399"),
        (0x000000FF, "#000000"),
        (0x00000AFF, "#00000a"),
        (0xFFFFFF00, "#ffffff"),
        (0x0102037F, "#010203"),
    ],
)
def test_encodes_zero_padded_lowercase_hex(color: int, txt: str) -> None:
    """Encodes color as six lowercase hex digits, dropping alpha."""
    assert encode(color) == txt


@pytest.mark.parametrize(
    "style, color",
    [
        ("stroke:#993399", 0x993399FF),
        ("stroke: #993399", 0x993399FF),
        ("fill:none;stroke:#AbCdEf", 0xABCDEFFF),
        ("stroke-width:2;stroke:#010203;fill:none", 0x010203FF),
    ],
)
def test_decodes_stroke_color_as_opaque(style: str, color: int) -> None:
    """Decodes stroke hex color with full opacity."""
    assert decode(style) == color


@pytest.mark.parametrize(
    "style",
    [
        None,
        "",
        "fill:none",
        "fill:#993399",
        "stroke:red",
        "stroke:rgb(1,2,3)",
        "stroke:#12345",
        "stroke:#1234567",
    ],
)
def test_errors_for_missing_stroke_color(style: str) -> None:
    """Raises error if style has no stroke hex color."""
    with pytest.raises(ColorNotFoundError):
        decode(style)


@pytest.mark.parametrize("color", [0x993399FF, 0x000000FF, 0xFFFFFFFF, 0x12345678])
def test_round_trip_forces_full_opacity(color: int) -> None:
    """Recovers color bits with alpha set to full opacity."""
    assert decode(f"stroke:{encode(color)}") == (color & 0xFFFFFF00) | 0xFF
