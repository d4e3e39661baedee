from .ast import Ast, Circle, Command, Ellipse, Glow, Line, Polygon, Rect
from .color import ColorNotFoundError
from .converter import ConversionWarning, Converter, ElementError
from . import color
from . import config
from . import coords
from . import svg

__all__ = [
    "Ast",
    "Command",
    "Line",
    "Circle",
    "Rect",
    "Polygon",
    "Ellipse",
    "Glow",
    "Converter",
    "ConversionWarning",
    "ElementError",
    "ColorNotFoundError",
    "color",
    "config",
    "coords",
    "svg",
]
