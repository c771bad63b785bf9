"""Tests for page planning, filename derivation and PDF assembly."""

import math

import pytest
from PIL import Image
from reportlab.lib.units import mm

from studio_planner.core.errors import ExportError
from studio_planner.export import paginator
from studio_planner.export.paginator import A4, PageGeometry, build_filename, page_count, paginate, plan_pages


def test_a4_geometry():
    assert A4.content_width == 180
    assert A4.content_height == 257


@pytest.mark.parametrize("height", [1, 100, 1599, 2284, 2285, 4569, 10000, 33333])
@pytest.mark.parametrize("width", [1600, 800, 333])
def test_page_count_matches_formula_and_footers(width, height):
    pages = plan_pages(width, height)
    expected = math.ceil((height * A4.content_width / width) / A4.content_height - 1e-12)

    assert len(pages) == page_count(width, height) == expected
    assert [p.index for p in pages] == list(range(1, expected + 1))
    assert all(p.total == expected for p in pages)


@pytest.mark.parametrize("height", [1, 2000, 2570, 5140, 5141, 9999])
def test_slices_cover_source_without_gap_or_overlap(height):
    width = 1800  # 10 px per mm, nominal slice = 2570 px
    pages = plan_pages(width, height)
    nominal = A4.content_height * width / A4.content_width

    for prev, cur in zip(pages, pages[1:]):
        assert cur.source_y == pytest.approx(prev.source_y + nominal)
        assert prev.source_height == pytest.approx(nominal)

    last = pages[-1]
    assert 0 < last.source_height <= nominal
    assert last.source_y + last.source_height == pytest.approx(height)
    assert sum(p.source_height for p in pages) == pytest.approx(height)


def test_exact_multiple_has_no_sliver_page():
    # 2 full pages exactly
    pages = plan_pages(1800, 5140)
    assert len(pages) == 2
    assert pages[-1].source_height == pytest.approx(2570)


def test_draw_height_scales_to_content_width():
    pages = plan_pages(1800, 3000)
    assert pages[0].draw_height == pytest.approx(257)
    assert pages[1].draw_height == pytest.approx(43)


def test_zero_height_has_no_pages():
    assert plan_pages(1600, 0) == []


def test_zero_width_rejected():
    with pytest.raises(ExportError):
        plan_pages(0, 100)


def test_custom_geometry():
    g = PageGeometry(width=100, height=100, margin_v=10, margin_h=10)
    assert page_count(80, 200, g) == 3


def test_filename_from_name_and_year():
    assert build_filename("Ana Pilates", "2024") == "Strategic_Plan_Ana_Pilates_2024.pdf"
    assert build_filename("Ana Pilates", "2024") == build_filename("Ana Pilates", "2024")


def test_filename_replaces_unsafe_characters():
    assert build_filename("Ana Pilates", '2024/25:"Q1"') == "Strategic_Plan_Ana_Pilates_2024-25--Q1-.pdf"
    assert build_filename("A/B <Studio>", "2024") == "Strategic_Plan_A-B_-Studio-_2024.pdf"
    assert build_filename("x", r"a\b?c%d*e|f") == "Strategic_Plan_x_a-b-c-d-e-f.pdf"


def test_filename_without_year():
    assert build_filename("Ana Pilates", "") == "Strategic_Plan_Ana_Pilates.pdf"


def test_paginate_draws_every_page_with_fixed_total(monkeypatch):
    footers, headers = [], []
    real_footer, real_header = paginator._footer, paginator._header

    def spy_footer(c, g, page, brand):
        footers.append((page.index, page.total, brand))
        real_footer(c, g, page, brand)

    def spy_header(c, g, name, year, label):
        headers.append((name, year))
        real_header(c, g, name, year, label)

    monkeypatch.setattr(paginator, "_footer", spy_footer)
    monkeypatch.setattr(paginator, "_header", spy_header)

    surface = Image.new("RGB", (1800, 6000), "white")
    data = paginate(surface, "Ana Pilates", "2024", brand="Generated by Pilates Plan Pro")

    assert data.startswith(b"%PDF")
    assert footers == [(1, 3, "Generated by Pilates Plan Pro"), (2, 3, "Generated by Pilates Plan Pro"), (3, 3, "Generated by Pilates Plan Pro")]
    assert headers == [("Ana Pilates", "2024")] * 3


def test_paginate_empty_surface_fails():
    with pytest.raises(ExportError):
        paginate(Image.new("RGB", (1600, 0)), "x", "2024")


def test_drawn_height_follows_cropped_pixels(monkeypatch):
    drawn = []

    def spy_draw_image(self, image, x, y, width=None, height=None, **kwargs):
        drawn.append((x, y, width, height))

    monkeypatch.setattr(paginator.canvas.Canvas, "drawImage", spy_draw_image)

    # 333 px wide: nominal slice is 475.48... px, so crops are rounded
    surface = Image.new("RGB", (333, 1000), "white")
    pages = plan_pages(surface.width, surface.height)
    paginate(surface, "Ana", "2024")

    assert len(drawn) == len(pages) == 3
    for page, (x, y, width, height) in zip(pages, drawn):
        top = int(round(page.source_y))
        bottom = min(surface.height, int(round(page.source_y + page.source_height)))
        expected = (bottom - top) * A4.content_width / surface.width
        assert height == pytest.approx(expected * mm)
        assert width == pytest.approx(A4.content_width * mm)
        # content hangs from the top margin
        assert y + height == pytest.approx((A4.height - A4.margin_v) * mm)

    crop_heights = [h / mm * surface.width / A4.content_width for *_, h in drawn]
    assert sum(crop_heights) == pytest.approx(surface.height)
