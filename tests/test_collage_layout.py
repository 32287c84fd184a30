import pytest

from collage.layout import LAYOUT_SLOTS, Cell, canvas_size, cell_geometry, cover_fit, layout_cells


def test_canvas_sizes():
    assert canvas_size("1:1") == (2048, 2048)
    assert canvas_size("16:9") == (3840, 2160)
    assert canvas_size("9:16") == (2160, 3840)
    assert canvas_size("1056:4032") == (1056, 4032)
    assert canvas_size("4:3") == (2048, 2048)


def test_grid_4_quadrants():
    cells = layout_cells("grid-4")
    assert cells == [
        Cell(0, 0, 1024, 1024),
        Cell(1024, 0, 1024, 1024),
        Cell(0, 1024, 1024, 1024),
        Cell(1024, 1024, 1024, 1024),
    ]


def test_grid_3_hero_left_with_stacked_right():
    assert cell_geometry("grid-3", 0, 1000, 800) == Cell(0, 0, 500, 800)
    assert cell_geometry("grid-3", 1, 1000, 800) == Cell(500, 0, 500, 400)
    assert cell_geometry("grid-3", 2, 1000, 800) == Cell(500, 400, 500, 400)


def test_grid_5_hero_left_with_2x2_right():
    assert cell_geometry("grid-5", 0, 1000, 800) == Cell(0, 0, 500, 800)
    assert cell_geometry("grid-5", 1, 1000, 800) == Cell(500, 0, 250, 400)
    assert cell_geometry("grid-5", 2, 1000, 800) == Cell(750, 0, 250, 400)
    assert cell_geometry("grid-5", 4, 1000, 800) == Cell(750, 400, 250, 400)


def test_grid_7_hero_top_with_3x2_below():
    assert cell_geometry("grid-7", 0, 900, 800) == Cell(0, 0, 900, 400)
    assert cell_geometry("grid-7", 1, 900, 800) == Cell(0, 400, 300, 200)
    assert cell_geometry("grid-7", 3, 900, 800) == Cell(600, 400, 300, 200)
    assert cell_geometry("grid-7", 6, 900, 800) == Cell(600, 600, 300, 200)


def test_uniform_grids():
    assert cell_geometry("grid-6", 4, 900, 600) == Cell(300, 300, 300, 300)
    assert cell_geometry("grid-9", 8, 900, 900) == Cell(600, 600, 300, 300)


def test_single_and_unknown_layouts_fill_canvas():
    assert cell_geometry("single", 0, 640, 480) == Cell(0, 0, 640, 480)
    assert cell_geometry("mosaic", 3, 640, 480) == Cell(0, 0, 640, 480)


@pytest.mark.parametrize("layout", list(LAYOUT_SLOTS))
def test_cells_cover_the_canvas_exactly(layout):
    width, height = canvas_size("16:9")
    cells = layout_cells(layout, "16:9")
    assert len(cells) == LAYOUT_SLOTS[layout]
    assert sum(c.w * c.h for c in cells) == pytest.approx(width * height)
    for c in cells:
        assert 0 <= c.x and c.x + c.w <= width + 1e-6
        assert 0 <= c.y and c.y + c.h <= height + 1e-6


def test_cover_fit_wide_image_crops_sides():
    fit = cover_fit(2000, 1000, Cell(100, 0, 500, 500))
    assert fit == Cell(100 - 250, 0, 1000, 500)


def test_cover_fit_tall_image_crops_top_and_bottom():
    fit = cover_fit(1000, 2000, Cell(0, 0, 500, 500))
    assert fit == Cell(0, -250, 500, 1000)


def test_cover_fit_same_ratio_is_exact():
    assert cover_fit(300, 300, Cell(10, 20, 100, 100)) == Cell(10, 20, 100, 100)
