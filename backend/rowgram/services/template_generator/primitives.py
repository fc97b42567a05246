"""
Reusable drawing routines shared by the templates.

Everything here is a plain function of a Surface and some geometry. Nothing
keeps state between calls; randomised routines take the caller's
``random.Random`` so renders can be reproduced.
"""

import math
import random
from typing import Optional, Sequence

from PIL import Image

from rowgram.services.template_generator.surface import Surface, parse_color

GOLD = "#FFD700"

# Gradients are computed at a fraction of the canvas size then upscaled;
# bilinear resampling reproduces a linear ramp exactly.
GRADIENT_SCALE = 4


# ============================================
# PATHS
# ============================================

class Path:
    """Polygon builder mirroring move/line/quadratic-curve path commands."""

    def __init__(self, x: float = 0, y: float = 0):
        self.points = [(x, y)]

    def line_to(self, x: float, y: float) -> "Path":
        self.points.append((x, y))
        return self

    def quad_to(self, cx: float, cy: float, x: float, y: float, steps: int = 10) -> "Path":
        x0, y0 = self.points[-1]
        for i in range(1, steps + 1):
            t = i / steps
            mt = 1 - t
            self.points.append((
                mt * mt * x0 + 2 * mt * t * cx + t * t * x,
                mt * mt * y0 + 2 * mt * t * cy + t * t * y,
            ))
        return self

    def fill(self, surface: Surface, color, outline=None, width: int = 1):
        surface.polygon(self.points, fill=color, outline=outline, width=width)


def ellipse_points(cx, cy, rx, ry, rotation: float = 0.0, steps: int = 24) -> list:
    """Polygon approximating an ellipse rotated by ``rotation`` radians."""
    cos_r, sin_r = math.cos(rotation), math.sin(rotation)
    points = []
    for i in range(steps):
        a = 2 * math.pi * i / steps
        ex, ey = rx * math.cos(a), ry * math.sin(a)
        points.append((cx + ex * cos_r - ey * sin_r, cy + ex * sin_r + ey * cos_r))
    return points


def fill_ellipse(surface: Surface, cx, cy, rx, ry, color, rotation: float = 0.0):
    surface.polygon(ellipse_points(cx, cy, rx, ry, rotation), fill=color)


# ============================================
# SHAPES
# ============================================

def rounded_rect(surface: Surface, x, y, width, height, radius, fill=None, outline=None, line_width: int = 1):
    if width <= 0 or height <= 0:
        return
    radius = max(0, min(radius, width / 2, height / 2))
    surface.draw.rounded_rectangle(
        [x, y, x + width, y + height],
        radius=radius,
        fill=parse_color(fill) if fill is not None else None,
        outline=parse_color(outline) if outline is not None else None,
        width=max(1, int(line_width)),
    )


def arrow_banner(surface: Surface, x, y, width, height, fill, notch: float = 20):
    """Ribbon with a pointed right end and a swallow-tail notch on the left."""
    Path(x, y).line_to(x + width - notch, y).line_to(x + width, y + height / 2) \
        .line_to(x + width - notch, y + height).line_to(x, y + height) \
        .line_to(x + notch, y + height / 2).fill(surface, fill)


def hex_banner(surface: Surface, x, y, width, height, fill, outline=None, line_width: int = 2, bevel: float = 15):
    """Elongated hexagon, pointed at both ends."""
    Path(x, y + height / 2).line_to(x + bevel, y).line_to(x + width - bevel, y) \
        .line_to(x + width, y + height / 2).line_to(x + width - bevel, y + height) \
        .line_to(x + bevel, y + height).fill(surface, fill, outline=outline, width=line_width)


def curved_shield(surface: Surface, x, y, width, height, fill, outline=GOLD, line_width: int = 2):
    """Lozenge with curved shoulders, used as a badge or role frame."""
    Path(x + width / 2, y) \
        .quad_to(x + width, y, x + width, y + height / 3) \
        .line_to(x + width, y + height * 2 / 3) \
        .quad_to(x + width, y + height, x + width / 2, y + height) \
        .quad_to(x, y + height, x, y + height * 2 / 3) \
        .line_to(x, y + height / 3) \
        .quad_to(x, y, x + width / 2, y) \
        .fill(surface, fill, outline=outline, width=line_width)


def heraldic_shield(surface: Surface, x, y, width, height, fill, outline=GOLD, line_width: int = 3):
    """Six-sided escutcheon."""
    Path(x + width / 2, y).line_to(x + width, y + height / 4).line_to(x + width, y + height * 3 / 4) \
        .line_to(x + width / 2, y + height).line_to(x, y + height * 3 / 4).line_to(x, y + height / 4) \
        .fill(surface, fill, outline=outline, width=line_width)


def star(surface: Surface, cx, cy, radius, color, points: int = 8):
    surface.polygon(
        [(cx + math.cos(i * 2 * math.pi / points) * radius, cy + math.sin(i * 2 * math.pi / points) * radius)
         for i in range(points)],
        fill=color,
    )


def framed_box(surface: Surface, x, y, width, height, fill, outline, line_width: int = 2):
    surface.fill_rect(x, y, width, height, fill)
    surface.stroke_rect(x, y, width, height, outline, line_width)


def corner_ticks(surface: Surface, x, y, width, height, color, size: float = 8, line_width: int = 2):
    """Short L-shaped ticks on each corner of a box."""
    for cx, cy in ((x, y), (x + width, y), (x, y + height), (x + width, y + height)):
        dx = size if cx == x else -size
        dy = size if cy == y else -size
        surface.line([(cx + dx, cy), (cx, cy), (cx, cy + dy)], color, width=line_width)


def corner_crosses(surface: Surface, positions, size: float, color, line_width: int = 2, diagonals: bool = False):
    for x, y in positions:
        surface.line([(x - size, y), (x + size, y)], color, width=line_width)
        surface.line([(x, y - size), (x, y + size)], color, width=line_width)
        if diagonals:
            half = size / 2
            surface.line([(x - half, y - half), (x + half, y + half)], color, width=line_width)
            surface.line([(x + half, y - half), (x - half, y + half)], color, width=line_width)


# ============================================
# DIVIDERS AND ORNAMENTS
# ============================================

def dotted_divider(surface: Surface, cx, y, width, color, line_width: int = 2, dots: Sequence[float] = (), dot_radius: float = 2):
    """Horizontal rule with optional dot ornaments at offsets from the centre."""
    surface.line([(cx - width / 2, y), (cx + width / 2, y)], color, width=line_width)
    for offset in dots:
        surface.circle(cx + offset, y, dot_radius, fill=color)


def end_cap_divider(surface: Surface, cx, y, width, color):
    surface.line([(cx - width / 2, y), (cx + width / 2, y)], color, width=2)
    surface.circle(cx - width / 2, y, 4, fill=color)
    surface.circle(cx + width / 2, y, 4, fill=color)


def bead_divider(surface: Surface, cx, y, color):
    """Centre bead flanked by three shrinking beads on each side."""
    surface.circle(cx, y, 6, fill=color)
    for i in range(1, 4):
        size = 4 - i
        surface.circle(cx - i * 15, y, size, fill=color)
        surface.circle(cx + i * 15, y, size, fill=color)


def oars_divider(surface: Surface, cx, y, width, line_color="#FFFFFF", blade_color=GOLD):
    """Rule with a pair of crossed oars in the middle."""
    surface.line([(cx - width / 2, y), (cx + width / 2, y)], line_color, width=3)
    surface.line([(cx - 20, y - 10), (cx - 5, y + 10)], line_color, width=4)
    surface.line([(cx + 5, y - 10), (cx + 20, y + 10)], line_color, width=4)
    fill_ellipse(surface, cx - 20, y - 10, 4, 8, blade_color, rotation=-math.pi / 4)
    fill_ellipse(surface, cx + 20, y - 10, 4, 8, blade_color, rotation=math.pi / 4)


def laurels(surface: Surface, cx, cy, color=GOLD):
    """Pair of laurel branches with leaves, opening upwards."""
    for side in (-1, 1):
        surface.arc(cx + side * 40, cy, 30, 0.2, math.pi - 0.2, color, width=3)
    for i in range(6):
        angle = (math.pi * 0.8 / 5) * i + 0.2
        fill_ellipse(surface, cx - 40 + math.cos(angle) * 30, cy - math.sin(angle) * 30, 4, 2, color,
                     rotation=angle + math.pi / 2)
        fill_ellipse(surface, cx + 40 - math.cos(angle) * 30, cy - math.sin(angle) * 30, 4, 2, color,
                     rotation=-angle + math.pi / 2)


def crown(surface: Surface, cx, cy, color=GOLD, jewel="#DC2626"):
    surface.fill_rect(cx - 30, cy + 10, 60, 8, color)
    for dx, height in ((-20, 15), (-10, 20), (0, 25), (10, 20), (20, 15)):
        surface.polygon([(cx + dx - 4, cy + 10), (cx + dx, cy + 10 - height), (cx + dx + 4, cy + 10)], fill=color)
    surface.circle(cx, cy - 10, 3, fill=jewel)


def seal(surface: Surface, cx, cy, color=GOLD, mark="#FFFFFF"):
    """Round wax-seal style medallion with a cross."""
    surface.circle(cx, cy, 30, outline=color, width=3)
    surface.circle(cx, cy, 20, fill=color)
    surface.line([(cx - 12, cy), (cx + 12, cy)], mark, width=2)
    surface.line([(cx, cy - 12), (cx, cy + 12)], mark, width=2)


def fleur_de_lis(surface: Surface, cx, cy, color):
    fill_ellipse(surface, cx, cy - 10, 4, 12, color)
    fill_ellipse(surface, cx - 8, cy - 5, 4, 10, color, rotation=-math.pi / 6)
    fill_ellipse(surface, cx + 8, cy - 5, 4, 10, color, rotation=math.pi / 6)
    surface.fill_rect(cx - 2, cy + 2, 4, 8, color)


def flourish(surface: Surface, cx, cy, color):
    surface.line([(cx, cy - 15), (cx, cy + 15)], color, width=2)
    surface.arc(cx - 20, cy, 15, 0, math.pi, color, width=2)
    surface.arc(cx + 20, cy, 15, 0, math.pi, color, width=2)


# ============================================
# GRADIENTS AND PATTERNS
# ============================================

def _ramp(stops: Sequence[tuple]) -> list:
    """256-entry RGBA lookup table for ``(offset, color)`` stops."""
    parsed = sorted((float(offset), parse_color(color)) for offset, color in stops)
    table = []
    for i in range(256):
        t = i / 255
        if t <= parsed[0][0]:
            table.append(parsed[0][1])
            continue
        if t >= parsed[-1][0]:
            table.append(parsed[-1][1])
            continue
        for (o0, c0), (o1, c1) in zip(parsed, parsed[1:]):
            if o0 <= t <= o1:
                f = 0.0 if o1 == o0 else (t - o0) / (o1 - o0)
                table.append(tuple(int(round(a + (b - a) * f)) for a, b in zip(c0, c1)))
                break
    return table


def _paint_gradient(surface: Surface, box, stops, t_at):
    x, y, width, height = (int(round(v)) for v in box)
    if width <= 0 or height <= 0:
        return
    small_w = max(2, width // GRADIENT_SCALE)
    small_h = max(2, height // GRADIENT_SCALE)
    sx = width / small_w
    sy = height / small_h

    t_map = Image.new("L", (small_w, small_h))
    t_map.putdata([
        max(0, min(255, int(t_at(x + (i + 0.5) * sx, y + (j + 0.5) * sy) * 255)))
        for j in range(small_h)
        for i in range(small_w)
    ])
    t_map = t_map.resize((width, height), Image.Resampling.BILINEAR)

    table = _ramp(stops)
    bands = [t_map.point([entry[channel] for entry in table]) for channel in range(4)]
    layer = Image.merge("RGBA", bands)
    surface.image.paste(layer, (x, y), layer)


def linear_gradient(surface: Surface, start, end, stops, box=None):
    """Fill ``box`` (default: whole surface) with a gradient along start→end."""
    x0, y0 = start
    x1, y1 = end
    dx, dy = x1 - x0, y1 - y0
    length_sq = dx * dx + dy * dy or 1.0
    _paint_gradient(
        surface,
        box or (0, 0, surface.width, surface.height),
        stops,
        lambda px, py: ((px - x0) * dx + (py - y0) * dy) / length_sq,
    )


def radial_gradient(surface: Surface, center, radius, stops, box=None):
    cx, cy = center
    span = max(1e-6, radius)
    _paint_gradient(
        surface,
        box or (0, 0, surface.width, surface.height),
        stops,
        lambda px, py: math.hypot(px - cx, py - cy) / span,
    )


def diagonal_stripes(surface: Surface, color, stripe_width: int = 40):
    """Parallelogram stripes leaning right, one stripe-width apart."""
    w, h = surface.size
    for i in range(0, w + h, stripe_width * 2):
        surface.polygon([(i - h, 0), (i, h), (i + stripe_width, h), (i + stripe_width - h, 0)], fill=color)


def diagonal_lines(surface: Surface, color, spacing: int = 50, width: int = 1):
    w, h = surface.size
    for i in range(-h, w + h, spacing):
        surface.line([(i, 0), (i + h, h)], color, width=width)


def hexagon_pattern(surface: Surface, color, size: int = 55, line_width: int = 1):
    w, h = surface.size
    row_height = int(size * 0.866)
    for row in range(-1, h // row_height + 2):
        for col in range(-1, w // size + 2):
            cx = col * size + (size // 2 if row % 2 else 0)
            cy = row * row_height
            points = [
                (cx + size / 2 * math.cos(math.pi / 6 + i * math.pi / 3),
                 cy + size / 2 * math.sin(math.pi / 6 + i * math.pi / 3))
                for i in range(6)
            ]
            surface.line(points + [points[0]], color, width=line_width)


def sunburst(surface: Surface, center, color, rays: int = 24):
    """Alternating wedges radiating from ``center`` past the canvas edge."""
    cx, cy = center
    reach = math.hypot(surface.width, surface.height)
    step = 2 * math.pi / rays
    for i in range(0, rays, 2):
        a0, a1 = i * step, (i + 1) * step
        surface.polygon([
            (cx, cy),
            (cx + math.cos(a0) * reach, cy + math.sin(a0) * reach),
            (cx + math.cos(a1) * reach, cy + math.sin(a1) * reach),
        ], fill=color)


def water_ripples(surface: Surface, color, spacing: int = 40):
    """Thin wavy bands across the whole surface."""
    w, h = surface.size
    for y in range(0, h, spacing):
        top = [(x, y + math.sin((x + y) * 0.01) * 5) for x in range(0, w + 1, 20)]
        bottom = [(x, y + 10 + math.sin((x + y + 100) * 0.01) * 3) for x in range(w, -1, -20)]
        surface.polygon(top + [(w, y + 10)] + bottom, fill=color)


def river(surface: Surface, top: float, color, highlight):
    w = surface.width
    wave = [(x, top + math.sin(x * 0.02) * 10) for x in range(0, w + 1, 10)]
    surface.polygon([(0, top)] + wave + [(w, top + 40), (0, top + 40)], fill=color)
    for x in range(0, w, 50):
        fill_ellipse(surface, x, top + 20, 15, 3, highlight)


def grid_lines(surface: Surface, color, spacing: int = 40, width: int = 1):
    w, h = surface.size
    for x in range(0, w, spacing):
        surface.line([(x, 0), (x, h)], color, width=width)
    for y in range(0, h, spacing):
        surface.line([(0, y), (w, y)], color, width=width)


def speckle(surface: Surface, rng: random.Random, count: int, rgb: tuple, max_opacity: float,
            max_size: Optional[int] = None, dots: bool = False):
    """Scatter ``count`` translucent specks; sizes up to ``max_size`` pixels tall."""
    w, h = surface.size
    for _ in range(count):
        x = rng.random() * w
        y = rng.random() * h
        color = (*rgb, int(rng.random() * max_opacity * 255))
        if dots:
            surface.circle(x, y, rng.random() * 3 + 1, fill=color)
        elif max_size:
            surface.fill_rect(int(x), int(y), 1, int(rng.random() * max_size) + 1, color)
        else:
            surface.fill_rect(int(x), int(y), 1, 1, color)


# ============================================
# BOAT GLYPH
# ============================================

def rowing_boat(surface: Surface, cx, top, length, seats: int, color, accent, coxed: bool = False,
                horizontal: bool = False, beam: Optional[float] = None) -> list:
    """Draw a top-down racing shell and return the centre point of every seat, bow first.

    Vertical boats put the bow at ``top``; horizontal boats put the bow on the left
    with ``cx``/``top`` giving the hull's left end and centre line.
    """
    seats = max(1, seats)
    beam = beam or max(14, length * 0.05)
    half = beam / 2

    def place(along, across):
        # along: distance from the bow, across: offset from the centre line
        if horizontal:
            return cx + along, top + across
        return cx + across, top + along

    hull = Path(*place(0, 0))
    hull.quad_to(*place(length * 0.15, half), *place(length * 0.35, half))
    hull.line_to(*place(length * 0.65, half))
    hull.quad_to(*place(length * 0.9, half), *place(length, 0))
    hull.quad_to(*place(length * 0.9, -half), *place(length * 0.65, -half))
    hull.line_to(*place(length * 0.35, -half))
    hull.quad_to(*place(length * 0.15, -half), *place(0, 0))
    hull.fill(surface, color, outline=accent, width=2)

    usable_start = length * 0.14
    usable = length * (0.62 if coxed else 0.72)
    spacing = usable / seats
    oar = beam * 3.2
    positions = []
    for i in range(seats):
        along = usable_start + spacing * (i + 0.5)
        side = -1 if i % 2 == 0 else 1
        surface.line([place(along, 0), place(along + spacing * 0.2, side * oar)], accent, width=3)
        bx, by = place(along + spacing * 0.2, side * oar)
        surface.circle(bx, by, max(3, beam * 0.3), fill=accent)
        sx, sy = place(along, 0)
        surface.circle(sx, sy, max(3, beam * 0.28), fill=accent)
        positions.append((sx, sy))

    if coxed:
        cox_x, cox_y = place(length * 0.86, 0)
        surface.circle(cox_x, cox_y, max(3, beam * 0.32), outline=accent, width=2)
    return positions


# ============================================
# CLUB ICON
# ============================================

def place_club_icon(surface: Surface, position: Optional[str] = "bottom-right", max_size: int = 140, margin: int = 40):
    """Composite ``surface.club_icon`` into a corner. ``none`` or no icon is a no-op."""
    icon = surface.club_icon
    if icon is None or not position or position == "none":
        return
    icon = icon.copy()
    icon.thumbnail((max_size, max_size), Image.Resampling.LANCZOS)
    if position == "top-right":
        x, y = surface.width - icon.width - margin, margin
    elif position == "bottom-left":
        x, y = margin, surface.height - icon.height - margin
    else:
        x, y = surface.width - icon.width - margin, surface.height - icon.height - margin
    surface.paste(icon, x, y)
