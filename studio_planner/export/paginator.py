"""
Slices one tall rendered surface into fixed-size document pages.

What it does:
- Computes the page count once, up front, so every footer can print "of N"
- Cuts full-width horizontal slices of the surface, one per page
- Draws each slice between a repeated header and footer on an A4 page
- Builds the whole PDF in memory (nothing is written on failure)

Geometry is in millimetres; the surface is in pixels.
"""

import io
import math
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import List

from PIL import Image
from reportlab.lib.colors import HexColor
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from studio_planner.core.errors import ExportError


@dataclass(frozen=True)
class PageGeometry:
    width: float = 210.0
    height: float = 297.0
    margin_v: float = 20.0
    margin_h: float = 15.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin_h

    @property
    def content_height(self) -> float:
        return self.height - 2 * self.margin_v


A4 = PageGeometry()

TEXT_GREY = HexColor("#666666")
RULE_GREY = HexColor("#cccccc")


@dataclass(frozen=True)
class PageSlice:
    index: int  # 1-based
    total: int
    source_y: float
    source_height: float
    draw_height: float


def page_count(surface_width: int, surface_height: int, geometry: PageGeometry = A4) -> int:
    if surface_width <= 0:
        raise ExportError(f"Surface width must be positive, got {surface_width}")
    if surface_height <= 0:
        return 0
    # exact rational arithmetic keeps ceil() from adding a sliver page
    total_scaled = Fraction(surface_height) * Fraction(geometry.content_width) / Fraction(surface_width)
    return math.ceil(total_scaled / Fraction(geometry.content_height))


def plan_pages(surface_width: int, surface_height: int, geometry: PageGeometry = A4) -> List[PageSlice]:
    total = page_count(surface_width, surface_height, geometry)
    nominal = geometry.content_height * surface_width / geometry.content_width

    pages = []
    source_y = 0.0
    for i in range(1, total + 1):
        source_height = max(0.0, min(nominal, surface_height - source_y))
        pages.append(
            PageSlice(
                index=i,
                total=total,
                source_y=source_y,
                source_height=source_height,
                draw_height=source_height * geometry.content_width / surface_width,
            )
        )
        # advance by the nominal height even when the last slice is shorter
        source_y += nominal
    return pages


_UNSAFE = re.compile(r'[/\\?%*:|"<>]')


def build_filename(subject_name: str, subject_year: str, prefix: str = "Strategic_Plan") -> str:
    name = _UNSAFE.sub("-", (subject_name or "").replace(" ", "_"))
    year = _UNSAFE.sub("-", subject_year or "")
    suffix = f"_{year}" if year else ""
    return f"{prefix}_{name}{suffix}.pdf"


def _crop(surface: Image.Image, page: PageSlice) -> Image.Image | None:
    top = int(round(page.source_y))
    bottom = min(surface.height, int(round(page.source_y + page.source_height)))
    if bottom <= top:
        return None
    return surface.crop((0, top, surface.width, bottom))


def _header(c: canvas.Canvas, g: PageGeometry, subject_name: str, subject_year: str, label: str) -> None:
    c.setFont("Helvetica", 9)
    c.setFillColor(TEXT_GREY)
    y = (g.height - (g.margin_v - 8)) * mm
    c.drawString(g.margin_h * mm, y, subject_name)
    c.drawRightString((g.width - g.margin_h) * mm, y, f"{label} {subject_year}".strip())
    c.setStrokeColor(RULE_GREY)
    rule_y = (g.height - (g.margin_v - 5)) * mm
    c.line(g.margin_h * mm, rule_y, (g.width - g.margin_h) * mm, rule_y)


def _footer(c: canvas.Canvas, g: PageGeometry, page: PageSlice, brand: str) -> None:
    c.setFont("Helvetica", 8)
    c.setFillColor(TEXT_GREY)
    y = (g.margin_v - 10) * mm
    c.drawString(g.margin_h * mm, y, brand)
    c.drawRightString((g.width - g.margin_h) * mm, y, f"Page {page.index} of {page.total}")


def paginate(
    surface: Image.Image,
    subject_name: str,
    subject_year: str,
    *,
    geometry: PageGeometry = A4,
    brand: str = "",
    header_label: str = "Strategic Plan",
) -> bytes:
    """Return the PDF bytes for the surface; raises ExportError if there is nothing to draw."""
    pages = plan_pages(surface.width, surface.height, geometry)
    if not pages:
        raise ExportError("Nothing to export: rendered content is empty")

    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=(geometry.width * mm, geometry.height * mm))
    c.setTitle(f"{header_label} {subject_name} {subject_year}".strip())
    if brand:
        c.setAuthor(brand)

    for page in pages:
        _header(c, geometry, subject_name, subject_year, header_label)
        part = _crop(surface, page)
        if part is not None:
            # height of the whole-pixel crop at content width
            draw_height = part.height * geometry.content_width / surface.width
            top = geometry.height - geometry.margin_v - draw_height
            c.drawImage(
                ImageReader(part),
                geometry.margin_h * mm,
                top * mm,
                width=geometry.content_width * mm,
                height=draw_height * mm,
            )
        _footer(c, geometry, page, brand)
        c.showPage()

    c.save()
    return buf.getvalue()
