"""Edge colouring. Style is a pure function of edge_id modulo the palette length."""

PALETTE: list[tuple[int, int, int]] = [
    (0, 153, 51),
    (31, 119, 180),
    (255, 127, 14),
    (148, 103, 189),
    (214, 39, 40),
    (23, 190, 207),
    (188, 189, 34),
    (140, 86, 75),
]

WIDTHS: list[int] = [4, 6, 4, 6, 4, 6, 4, 6]

CLICK_STYLE = {
    "circle-radius": 7,
    "circle-fill-color": "rgba(255, 0, 0, 0.5)",
    "circle-stroke-color": "rgba(255, 0, 0, 1)",
    "circle-stroke-width": 2,
}

NODE_STYLE = {
    "circle-radius": 7,
    "circle-stroke-width": 2,
}


def palette_index(edge_id: int) -> int:
    return edge_id % len(PALETTE)


def _rgb(triple: tuple[int, int, int], alpha: float | None = None) -> str:
    r, g, b = triple
    if alpha is None:
        return f"rgb({r}, {g}, {b})"
    return f"rgba({r}, {g}, {b}, {alpha})"


def edge_style(edge_id: int) -> dict:
    """Line colour and width for a segment feature."""
    idx = palette_index(edge_id)
    return {"color": _rgb(PALETTE[idx]), "width": WIDTHS[idx]}


def node_style(edge_id: int) -> dict:
    """Circle colours for a node feature; same hue as its edge's segment."""
    triple = PALETTE[palette_index(edge_id)]
    return {
        **NODE_STYLE,
        "circle-fill-color": _rgb(triple, 0.5),
        "circle-stroke-color": _rgb(triple, 1),
    }
