"""
Composable template driven by the design options on ``TemplateConfig``.

A render picks one background, one header layout, one boat style and one
name treatment, then places the club icon at the requested corner. Any
option left unset falls back to ``DEFAULTS``.
"""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    hexagon_pattern,
    linear_gradient,
    place_club_icon,
    radial_gradient,
    rounded_rect,
    rowing_boat,
    sunburst,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import subtitle, support_roles

DEFAULTS = {
    "background": "geometric",
    "name_display": "basic",
    "boat_style": "centered",
    "text_layout": "header-center",
    "logo": "bottom-right",
}

ROW_SPACING = 64
MARGIN = 60

PILL = "rgba(15, 23, 42, 0.55)"
CARD = "rgba(255, 255, 255, 0.14)"
HULL = "rgba(255, 255, 255, 0.18)"
RIGGING = "rgba(255, 255, 255, 0.55)"


def resolve_options(config: TemplateConfig) -> dict:
    """Design options for ``config`` with unset fields filled from ``DEFAULTS``."""
    return {key: getattr(config, key) or default for key, default in DEFAULTS.items()}


class ConfigurableTemplate:
    id = "configurable"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        options = resolve_options(config)

        BACKGROUNDS[options["background"]](surface, config)
        content_top = LAYOUTS[options["text_layout"]](surface, crew)
        BOAT_STYLES[options["boat_style"]](surface, crew, options["name_display"], content_top)

        surface.fill_rect(0, surface.height - 12, surface.width, 12, config.colors.primary)
        place_club_icon(surface, options["logo"])


# ============================================
# BACKGROUNDS
# ============================================

def geometric_background(surface: Surface, config: TemplateConfig):
    w, h = surface.size
    linear_gradient(surface, (0, 0), (0, h), [(0, config.colors.primary), (1, config.colors.secondary)])
    hexagon_pattern(surface, "rgba(255, 255, 255, 0.06)", size=60)
    surface.fill_rect(0, int(h * 0.75), w, h - int(h * 0.75), "rgba(0, 0, 0, 0.25)")


def diagonal_background(surface: Surface, config: TemplateConfig):
    w, h = surface.size
    surface.clear(config.colors.secondary)
    surface.polygon([(0, 0), (w * 0.65, 0), (w * 0.35, h), (0, h)], fill=config.colors.primary)
    surface.line([(w * 0.65, 0), (w * 0.35, h)], "rgba(255, 255, 255, 0.85)", width=12)
    surface.line([(w * 0.65 + 40, 0), (w * 0.35 + 40, h)], "rgba(255, 255, 255, 0.4)", width=4)
    surface.fill_rect(0, 0, w, h, "rgba(0, 0, 0, 0.15)")


def radial_burst_background(surface: Surface, config: TemplateConfig):
    w, h = surface.size
    center = (w / 2, h * 0.4)
    radial_gradient(surface, center, max(w, h) * 0.75, [(0, config.colors.primary), (1, config.colors.secondary)])
    sunburst(surface, center, "rgba(255, 255, 255, 0.06)", rays=24)
    surface.fill_rect(0, 0, w, h, "rgba(0, 0, 0, 0.15)")


BACKGROUNDS = {
    "geometric": geometric_background,
    "diagonal": diagonal_background,
    "radial-burst": radial_burst_background,
}


# ============================================
# TEXT LAYOUTS
# ============================================
# Each draws the header and returns the y where the roster may start.

def _header(surface: Surface, crew: Crew, x: float, align: str) -> int:
    surface.text(crew.club_name, x, 100, surface.font(48, "bold"), align=align)
    surface.text(crew.name, x, 150, surface.font(32), align=align)
    surface.text(subtitle(crew), x, 190, surface.font(24), align=align)
    return 250


def header_left(surface: Surface, crew: Crew) -> int:
    content_top = _header(surface, crew, MARGIN, "left")
    surface.fill_rect(MARGIN, 210, 200, 4, WHITE)
    return content_top


def header_center(surface: Surface, crew: Crew) -> int:
    w = surface.width
    content_top = _header(surface, crew, w / 2, "center")
    surface.fill_rect(w / 2 - 100, 210, 200, 4, WHITE)
    return content_top


def minimal_header(surface: Surface, crew: Crew) -> int:
    w = surface.width
    surface.text(crew.club_name, w / 2, 70, surface.font(32, "bold"), align="center")
    line = subtitle(crew)
    surface.text(f"{crew.name}  |  {line}" if line else crew.name, w / 2, 110, surface.font(20), align="center")
    return 170


LAYOUTS = {
    "header-left": header_left,
    "header-center": header_center,
    "minimal": minimal_header,
}


# ============================================
# BOAT STYLES
# ============================================

def _seat_text(label: str, name: str, name_display: str) -> str:
    return f"{label}: {name}" if name_display == "labeled" else name


def _name_cell(surface: Surface, text: str, x: float, y: float, align: str, name_display: str, font):
    """One roster entry with its baseline at ``y``; basic names sit on a pill."""
    if name_display == "basic":
        width = surface.text_width(text, font) + 32
        if align == "right":
            left = x - width + 16
        elif align == "center":
            left = x - width / 2
        else:
            left = x - 16
        rounded_rect(surface, left, y - 36, width, 48, 24, fill=PILL)
    surface.text(text, x, y, font, align=align)


def _is_coxed(crew: Crew) -> bool:
    return crew.boat_type.is_coxed or bool(crew.cox_name)


def centered_boat(surface: Surface, crew: Crew, name_display: str, content_top: int):
    """Vertical shell down the middle with names alternating either side."""
    w = surface.width
    lineup = seat_lineup(crew)
    roster_height = max(1, len(lineup)) * ROW_SPACING
    rowing_boat(surface, w / 2, content_top, roster_height + 20, len(lineup), HULL, RIGGING,
                coxed=_is_coxed(crew), beam=28)

    font = surface.font(28, "bold")
    for index, (label, name) in enumerate(lineup):
        y = content_top + 40 + index * ROW_SPACING
        left = index % 2 == 0
        x = w / 2 - 110 if left else w / 2 + 110
        _name_cell(surface, _seat_text(label, name, name_display), x, y, "right" if left else "left", name_display, font)

    y = content_top + 40 + roster_height + 20
    role_font = surface.font(26, "bold")
    for role, name in support_roles(crew):
        _name_cell(surface, f"{role}: {name}", w / 2, y, "center", name_display, role_font)
        y += ROW_SPACING


def offset_boat(surface: Surface, crew: Crew, name_display: str, content_top: int):
    """Vertical shell on the left third with a single column of names beside it."""
    w = surface.width
    boat_x = w * 0.28
    lineup = seat_lineup(crew)
    roster_height = max(1, len(lineup)) * ROW_SPACING
    rowing_boat(surface, boat_x, content_top, roster_height + 20, len(lineup), HULL, RIGGING,
                coxed=_is_coxed(crew), beam=28)

    column_x = boat_x + 130
    font = surface.font(28, "bold")
    for index, (label, name) in enumerate(lineup):
        y = content_top + 40 + index * ROW_SPACING
        _name_cell(surface, _seat_text(label, name, name_display), column_x, y, "left", name_display, font)

    y = content_top + 40 + roster_height + 20
    role_font = surface.font(26, "bold")
    for role, name in support_roles(crew):
        _name_cell(surface, f"{role}: {name}", column_x, y, "left", name_display, role_font)
        y += ROW_SPACING


def showcase_boat(surface: Surface, crew: Crew, name_display: str, content_top: int):
    """Horizontal shell across the top with a two-column card grid underneath."""
    w = surface.width
    lineup = seat_lineup(crew)
    rowing_boat(surface, MARGIN * 2, content_top + 50, w - MARGIN * 4, len(lineup), HULL, RIGGING,
                coxed=_is_coxed(crew), horizontal=True, beam=18)

    grid_top = content_top + 130
    column_width = (w - MARGIN * 2 - 20) / 2
    font = surface.font(24, "bold")
    for index, (label, name) in enumerate(lineup):
        row, col = divmod(index, 2)
        x = MARGIN + col * (column_width + 20)
        y = grid_top + row * ROW_SPACING
        rounded_rect(surface, x, y, column_width, 52, 12, fill=CARD)
        surface.text(_seat_text(label, name, name_display), x + column_width / 2, y + 35, font, align="center")

    y = grid_top + -(-len(lineup) // 2) * ROW_SPACING
    role_font = surface.font(24, "bold")
    for role, name in support_roles(crew):
        rounded_rect(surface, MARGIN, y, w - MARGIN * 2, 52, 12, fill=PILL)
        surface.text(f"{role}: {name}", w / 2, y + 35, role_font, align="center")
        y += ROW_SPACING


BOAT_STYLES = {
    "centered": centered_boat,
    "offset": offset_boat,
    "showcase": showcase_boat,
}
