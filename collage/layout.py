"""Collage geometry: where each image slot sits on the output canvas."""

from dataclasses import dataclass

# Slots per layout. grid-3 / grid-5 put a hero image on the left half,
# grid-7 puts it across the top half.
LAYOUT_SLOTS = {
    "single": 1,
    "grid-3": 3,
    "grid-4": 4,
    "grid-5": 5,
    "grid-6": 6,
    "grid-7": 7,
    "grid-9": 9,
}

CANVAS_SIZES = {
    "1:1": (2048, 2048),
    "16:9": (3840, 2160),  # 4K landscape
    "9:16": (2160, 3840),
    "1056:4032": (1056, 4032),
}
DEFAULT_CANVAS = CANVAS_SIZES["1:1"]


@dataclass
class Cell:
    x: float
    y: float
    w: float
    h: float


def canvas_size(aspect_ratio: str) -> tuple[int, int]:
    return CANVAS_SIZES.get(aspect_ratio, DEFAULT_CANVAS)


def _uniform(index: int, total_w: float, total_h: float, cols: int, rows: int) -> Cell:
    w = total_w / cols
    h = total_h / rows
    return Cell(x=(index % cols) * w, y=(index // cols) * h, w=w, h=h)


def cell_geometry(layout: str, index: int, total_w: float, total_h: float) -> Cell:
    """Rectangle for slot ``index``. Unknown layouts get the whole canvas."""
    if layout == "single":
        return Cell(0, 0, total_w, total_h)
    if layout == "grid-4":
        return _uniform(index, total_w, total_h, cols=2, rows=2)
    if layout == "grid-9":
        return _uniform(index, total_w, total_h, cols=3, rows=3)
    if layout == "grid-6":
        return _uniform(index, total_w, total_h, cols=3, rows=2)
    if layout == "grid-3":
        if index == 0:
            return Cell(0, 0, total_w / 2, total_h)
        sub_h = total_h / 2
        return Cell(total_w / 2, (index - 1) * sub_h, total_w / 2, sub_h)
    if layout == "grid-5":
        if index == 0:
            return Cell(0, 0, total_w / 2, total_h)
        sub = _uniform(index - 1, total_w / 2, total_h, cols=2, rows=2)
        return Cell(total_w / 2 + sub.x, sub.y, sub.w, sub.h)
    if layout == "grid-7":
        if index == 0:
            return Cell(0, 0, total_w, total_h / 2)
        # bottom half split into 3 cols x 2 rows
        sub = _uniform(index - 1, total_w, total_h / 2, cols=3, rows=2)
        return Cell(sub.x, total_h / 2 + sub.y, sub.w, sub.h)
    return Cell(0, 0, total_w, total_h)


def layout_cells(layout: str, aspect_ratio: str = "1:1") -> list[Cell]:
    width, height = canvas_size(aspect_ratio)
    return [cell_geometry(layout, i, width, height) for i in range(LAYOUT_SLOTS.get(layout, 1))]


def cover_fit(image_w: float, image_h: float, cell: Cell) -> Cell:
    """Scale an image to cover ``cell`` (cropping the overflow), centred."""
    image_ratio = image_w / image_h
    box_ratio = cell.w / cell.h
    render_w, render_h = cell.w, cell.h
    offset_x = offset_y = 0.0

    if image_ratio > box_ratio:
        render_w = cell.h * image_ratio
        offset_x = (cell.w - render_w) / 2
    else:
        render_h = cell.w / image_ratio
        offset_y = (cell.h - render_h) / 2

    return Cell(cell.x + offset_x, cell.y + offset_y, render_w, render_h)
