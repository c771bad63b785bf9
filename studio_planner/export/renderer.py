"""
Renders a markdown report into one tall bitmap.

Handles the subset the generated reports use: "#", "##", "###" headings,
"- " bullets, blank lines and plain paragraphs. Bold markers are dropped.
The result is what the paginator slices into pages.
"""

from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image, ImageDraw, ImageFont



@dataclass(frozen=True)
class TextStyle:
    size: int
    color: str
    space_before: int = 0
    space_after: int = 0
    rule: bool = False


STYLES = {
    "h1": TextStyle(30, "#134e4a", space_before=24, space_after=12, rule=True),
    "h2": TextStyle(24, "#115e59", space_before=18, space_after=8),
    "h3": TextStyle(20, "#0f766e", space_before=12, space_after=6),
    "li": TextStyle(16, "#374151", space_before=2, space_after=2),
    "p": TextStyle(16, "#374151", space_before=6, space_after=6),
}

BULLET = "•"


def _classify(line: str) -> Tuple[str, str]:
    if line.startswith("### "):
        return "h3", line[4:]
    if line.startswith("## "):
        return "h2", line[3:]
    if line.startswith("# "):
        return "h1", line[2:]
    if line.startswith("- "):
        return "li", line[2:]
    return "p", line


def _wrap(draw: ImageDraw.ImageDraw, text: str, font, max_width: float) -> List[str]:
    words = text.split()
    if not words:
        return [""]
    lines, cur = [], words[0]
    for w in words[1:]:
        trial = f"{cur} {w}"
        if draw.textlength(trial, font=font) <= max_width:
            cur = trial
        else:
            lines.append(cur)
            cur = w
    lines.append(cur)
    return lines


class _Fonts:
    def __init__(self, scale: int):
        self.scale = scale
        self._cache = {}

    def get(self, style: TextStyle):
        size = style.size * self.scale
        if size not in self._cache:
            self._cache[size] = ImageFont.load_default(size=size)
        return self._cache[size]


def _line_height(font) -> int:
    left, top, right, bottom = font.getbbox("Hg")
    return int((bottom - top) * 1.5) + 1


def render_markdown(report: str, width_px: int = 800, scale: int = 2, padding: int = 16) -> Image.Image:
    width = width_px * scale
    pad = padding * scale
    indent = 24 * scale
    fonts = _Fonts(scale)
    measure = ImageDraw.Draw(Image.new("RGB", (1, 1)))

    # layout pass: (kind, text, style, x, y)
    ops = []
    y = pad
    for raw in (report or "").splitlines():
        if not raw.strip():
            y += STYLES["p"].size * scale
            continue

        kind, text = _classify(raw)
        text = text.replace("**", "")
        style = STYLES[kind]
        font = fonts.get(style)
        lh = _line_height(font)
        x = pad + (indent if kind == "li" else 0)
        y += style.space_before * scale

        for n, chunk in enumerate(_wrap(measure, text, font, width - x - pad)):
            if kind == "li" and n == 0:
                ops.append(("text", BULLET, style, x - indent // 2, y))
            ops.append(("text", chunk, style, x, y))
            y += lh

        if style.rule:
            ops.append(("rule", "", style, pad, y + 2 * scale))
            y += 6 * scale
        y += style.space_after * scale

    height = max(y + pad, 2 * pad)
    image = Image.new("RGB", (width, int(height)), "white")
    draw = ImageDraw.Draw(image)
    for kind, text, style, x, y in ops:
        if kind == "rule":
            draw.line([(x, y), (width - pad, y)], fill="#99f6e4", width=2 * scale)
        else:
            draw.text((x, y), text, fill=style.color, font=fonts.get(style))
    return image
