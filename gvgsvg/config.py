"""Global configuration options."""

width = 400
"""Default width (in pixels) of the SVG canvas."""

height = 400
"""Default height (in pixels) of the SVG canvas."""

group_id = "main_group"
"""
Identifier of the `g` element wrapping all emitted shapes.

When reading, elements are only scoped to this group if requested
(see :class:`gvgsvg.converter.Converter`).
"""

strict = False
"""
Whether element conversion errors abort the whole conversion.

If `False`, a malformed element is skipped with a
:class:`gvgsvg.converter.ConversionWarning`.
"""
