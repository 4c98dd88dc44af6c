"""Write path data and standalone SVG documents for generated sigils."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable
from xml.sax.saxutils import escape

if TYPE_CHECKING:
    from sigilworks.engine.primitives import Primitive


def format_coord(value: float, precision: int = 2) -> str:
    """Plain decimal with fixed precision; never emits '-0.00'."""
    text = f"{value:.{precision}f}"
    if float(text) == 0.0:
        return f"{0.0:.{precision}f}"
    return text


def serialize_path(primitives: Iterable["Primitive"], precision: int = 2) -> str:
    """``M x y L x y`` per primitive, space separated."""
    tokens = []
    for prim in primitives:
        tokens.append(
            f"M {format_coord(prim.start.x, precision)} {format_coord(prim.start.y, precision)} "
            f"L {format_coord(prim.end.x, precision)} {format_coord(prim.end.y, precision)}"
        )
    return " ".join(tokens)


def serialize_svg(
    path_data: str,
    canvas_size: float = 200.0,
    title: str = "",
    stroke: str = "currentColor",
    stroke_width: float = 2.0,
) -> str:
    """Wrap sigil path data in a minimal stroke-only SVG document."""
    size = format_coord(canvas_size, 0)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {size} {size}" width="{size}" height="{size}"'
        f' xmlns="http://www.w3.org/2000/svg" role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    lines.append(
        f'  <path d="{path_data}" fill="none" stroke="{stroke}"'
        f' stroke-width="{stroke_width:g}" stroke-linecap="round" />'
    )
    lines.append("</svg>")
    return "\n".join(lines)
