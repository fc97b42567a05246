"""
Drawing surface shared by every template.

Wraps a Pillow RGB image with an RGBA-blending draw handle, so translucent
fills composite over what is already painted, and records every piece of text
it draws so callers can inspect the rendered text layer without OCR.
"""

import logging
import math
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from PIL import Image, ImageColor, ImageDraw, ImageFont

from rowgram.config import get_settings
from rowgram.errors import InvalidInput

logger = logging.getLogger(__name__)
settings = get_settings()

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)

_RGBA_CSS = re.compile(
    r"^rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)$",
    re.IGNORECASE,
)

# Tried in order: configured font dir, then system-installed names
FONT_FILES = {
    ("sans", "regular"): ["Montserrat-Regular.ttf", "DejaVuSans.ttf", "Arial.ttf", "LiberationSans-Regular.ttf"],
    ("sans", "bold"): ["Montserrat-Bold.ttf", "DejaVuSans-Bold.ttf", "Arial Bold.ttf", "LiberationSans-Bold.ttf"],
    ("sans", "italic"): ["Montserrat-Italic.ttf", "DejaVuSans-Oblique.ttf", "Arial Italic.ttf"],
    ("sans", "black"): ["Montserrat-Black.ttf", "Arial Black.ttf", "DejaVuSans-Bold.ttf"],
    ("serif", "regular"): ["PlayfairDisplay-Regular.ttf", "DejaVuSerif.ttf", "Times New Roman.ttf", "LiberationSerif-Regular.ttf"],
    ("serif", "bold"): ["PlayfairDisplay-Bold.ttf", "DejaVuSerif-Bold.ttf", "Times New Roman Bold.ttf", "LiberationSerif-Bold.ttf"],
    ("serif", "italic"): ["PlayfairDisplay-Italic.ttf", "DejaVuSerif-Italic.ttf", "Times New Roman Italic.ttf", "LiberationSerif-Italic.ttf"],
    ("serif", "black"): ["PlayfairDisplay-Black.ttf", "DejaVuSerif-Bold.ttf"],
    ("display", "regular"): ["Oswald-Regular.ttf", "DejaVuSansCondensed.ttf", "Impact.ttf", "DejaVuSans.ttf"],
    ("display", "bold"): ["Oswald-Bold.ttf", "DejaVuSansCondensed-Bold.ttf", "Impact.ttf", "DejaVuSans-Bold.ttf"],
    ("display", "italic"): ["Oswald-Regular.ttf", "DejaVuSansCondensed-Oblique.ttf", "DejaVuSans-Oblique.ttf"],
    ("display", "black"): ["Oswald-Bold.ttf", "Impact.ttf", "DejaVuSans-Bold.ttf"],
}


def parse_color(value) -> tuple:
    """Turn a CSS-ish color into an RGBA tuple.

    Accepts anything Pillow's ImageColor does plus CSS ``rgba(r, g, b, a)``
    with a fractional alpha, and passes 3/4-tuples straight through.
    """
    if isinstance(value, tuple):
        if len(value) == 3:
            return (*value, 255)
        return value
    if not isinstance(value, str):
        raise InvalidInput(f"Unsupported color: {value!r}")

    text = value.strip()
    match = _RGBA_CSS.match(text)
    if match:
        r, g, b, a = match.groups()
        alpha = 255
        if a is not None:
            alpha_value = float(a)
            # CSS alpha is 0..1; tolerate 0..255 too
            alpha = int(round(alpha_value * 255)) if alpha_value <= 1 else int(alpha_value)
        return (min(255, int(r)), min(255, int(g)), min(255, int(b)), max(0, min(255, alpha)))

    try:
        return ImageColor.getcolor(text, "RGBA")
    except ValueError as e:
        raise InvalidInput(f"Unsupported color: {value!r}") from e


def with_alpha(color, alpha: float) -> tuple:
    """Same color at a 0..1 opacity."""
    r, g, b, _ = parse_color(color)
    return (r, g, b, int(round(max(0.0, min(1.0, alpha)) * 255)))


class FontBook:
    """Resolves (family, weight, size) to a Pillow font, cached per size."""

    def __init__(self, font_dir: Optional[str] = None):
        self.font_dir = Path(font_dir if font_dir is not None else settings.font_path)

    def get_font(self, size: int, weight: str = "regular", family: str = "sans") -> ImageFont.FreeTypeFont:
        return _load_font(str(self.font_dir), family, weight, int(size))


@lru_cache(maxsize=256)
def _load_font(font_dir: str, family: str, weight: str, size: int):
    candidates = FONT_FILES.get((family, weight)) or FONT_FILES[("sans", "regular")]
    for filename in candidates:
        local = Path(font_dir) / filename
        sources = [str(local), filename] if local.exists() else [filename]
        for source in sources:
            try:
                return ImageFont.truetype(source, size)
            except OSError:
                continue
    logger.debug(f"No TrueType font for {family}/{weight}, using Pillow default")
    return ImageFont.load_default(size=size)


@dataclass
class DrawnText:
    """One text draw, as recorded in ``Surface.text_log``."""
    text: str
    x: float
    y: float
    align: str
    size: int


class Surface:
    """A mutable raster canvas of fixed size."""

    def __init__(self, width: int, height: int, font_book: Optional[FontBook] = None, background=WHITE):
        if width <= 0 or height <= 0:
            raise InvalidInput(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), parse_color(background)[:3])
        self.draw = ImageDraw.Draw(self.image, "RGBA")
        self.fonts = font_book or FontBook()
        self.text_log: list[DrawnText] = []
        self.club_icon: Optional[Image.Image] = None

    @property
    def size(self) -> tuple:
        return self.width, self.height

    def font(self, size: int, weight: str = "regular", family: str = "sans"):
        return self.fonts.get_font(size, weight, family)

    def clear(self, color=WHITE):
        self.draw.rectangle([0, 0, self.width, self.height], fill=parse_color(color)[:3] + (255,))

    def fill_rect(self, x, y, width, height, color):
        if width <= 0 or height <= 0:
            return
        self.draw.rectangle([x, y, max(x, x + width - 1), max(y, y + height - 1)], fill=parse_color(color))

    def stroke_rect(self, x, y, width, height, color, line_width: int = 1):
        if width <= 0 or height <= 0:
            return
        self.draw.rectangle([x, y, x + width, y + height], outline=parse_color(color), width=max(1, int(line_width)))

    def line(self, points, color, width: int = 1):
        self.draw.line([tuple(p) for p in points], fill=parse_color(color), width=max(1, int(round(width))))

    def polygon(self, points, fill=None, outline=None, width: int = 1):
        pts = [tuple(p) for p in points]
        if len(pts) < 3:
            return
        self.draw.polygon(
            pts,
            fill=parse_color(fill) if fill is not None else None,
            outline=parse_color(outline) if outline is not None else None,
            width=max(1, int(round(width))),
        )

    def circle(self, cx, cy, radius, fill=None, outline=None, width: int = 1):
        self.draw.ellipse(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            fill=parse_color(fill) if fill is not None else None,
            outline=parse_color(outline) if outline is not None else None,
            width=max(1, int(round(width))),
        )

    def arc(self, cx, cy, radius, start: float, end: float, color, width: int = 1):
        """Arc from ``start`` to ``end`` radians, clockwise on screen."""
        self.draw.arc(
            [cx - radius, cy - radius, cx + radius, cy + radius],
            math.degrees(start),
            math.degrees(end),
            fill=parse_color(color),
            width=max(1, int(round(width))),
        )

    def text_width(self, text: str, font) -> float:
        return self.draw.textlength(text, font=font)

    def text(self, text: str, x: float, y: float, font, fill=WHITE, align: str = "left"):
        """Draw ``text`` with its baseline at ``y``.

        ``align`` picks which end of the string sits at ``x``: left, center or right.
        """
        if not text:
            return
        width = self.text_width(text, font)
        if align == "center":
            left = x - width / 2
        elif align == "right":
            left = x - width
        else:
            left = x
        ascent = font.getmetrics()[0]
        self.draw.text((left, y - ascent), text, font=font, fill=parse_color(fill))
        self.text_log.append(DrawnText(text=text, x=x, y=y, align=align, size=int(getattr(font, "size", 0))))

    def paste(self, image: Image.Image, x: int, y: int):
        if image.mode == "RGBA":
            self.image.paste(image, (int(x), int(y)), image)
        else:
            self.image.paste(image, (int(x), int(y)))

    def texts(self) -> list[str]:
        return [entry.text for entry in self.text_log]
