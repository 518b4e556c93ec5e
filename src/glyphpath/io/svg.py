"""Standalone SVG documents for a single path."""

from xml.sax.saxutils import escape, quoteattr

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def svg_document(
    path_data: str,
    view_box: tuple[float, float, float, float],
    title: str | None = None,
) -> str:
    """Wrap path data in a minimal SVG document.

    The path is drawn with ``scale(1 -1)`` so y-up font outlines display
    upright; the path data itself is written unchanged.

    Args:
        path_data: Value for the path's ``d`` attribute
        view_box: (x, y, width, height) in the flipped coordinate space
        title: Optional document title

    Returns:
        SVG document text
    """
    x, y, width, height = view_box
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NAMESPACE}" viewBox="{x} {y} {width} {height}">',
    ]
    if title is not None:
        lines.append(f"  <title>{escape(title)}</title>")
    lines.append(f'  <path transform="scale(1 -1)" d={quoteattr(path_data)}/>')
    lines.append("</svg>")
    return "\n".join(lines) + "\n"
