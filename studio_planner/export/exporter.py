"""
Export of a plan report as a paginated PDF.

What it does:
- Captures (renders) the surface and paginates it off the event loop
- Saves exactly one file per successful call, written atomically
- Blocks re-entrant calls with a busy flag, cleared on every exit path

Any failure becomes ExportError with a generic message; no partial file is
left behind.
"""

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Callable, Union

from PIL import Image

from studio_planner.core.errors import ExportError
from studio_planner.core.logging import get_logger
from studio_planner.domain.models import StrategicPlan
from studio_planner.export.paginator import A4, PageGeometry, build_filename, paginate
from studio_planner.export.renderer import render_markdown

log = get_logger("export.exporter")

Surface = Union[Image.Image, Callable[[], Image.Image]]


def _write_atomic(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=".export-", suffix=".pdf")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        Path(tmp).unlink(missing_ok=True)
        raise


class DocumentExporter:
    def __init__(
        self,
        export_dir: str | Path,
        *,
        brand: str = "",
        geometry: PageGeometry = A4,
        paginate_fn: Callable[..., bytes] = paginate,
    ):
        self.export_dir = Path(export_dir)
        self.brand = brand
        self.geometry = geometry
        self.paginate_fn = paginate_fn
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def _build(self, surface: Surface, subject_name: str, subject_year: str) -> Path:
        image = surface() if callable(surface) else surface
        data = self.paginate_fn(
            image, subject_name, subject_year, geometry=self.geometry, brand=self.brand
        )
        path = self.export_dir / build_filename(subject_name, subject_year)
        _write_atomic(path, data)
        return path

    async def export(self, surface: Surface, subject_name: str, subject_year: str) -> Path | None:
        """
        Paginate and save one document. Returns None without doing anything
        while a previous export is still running.
        """
        if self._busy:
            log.info("Export already in progress, ignoring trigger")
            return None

        self._busy = True
        try:
            path = await asyncio.to_thread(self._build, surface, subject_name, subject_year)
        except Exception as e:
            log.error(f"Export of {subject_name!r} failed: {e}")
            raise ExportError("An error occurred while generating the PDF. Please try again.") from e
        finally:
            self._busy = False

        log.info(f"Exported {path}")
        return path

    async def export_report(self, plan: StrategicPlan, report: str) -> Path | None:
        return await self.export(
            lambda: render_markdown(report), plan.studio_name, plan.planning_year
        )
