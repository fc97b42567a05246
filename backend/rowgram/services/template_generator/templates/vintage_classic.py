"""Vintage classic: aged paper, double border, ribbon banner and serif type."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    arrow_banner,
    bead_divider,
    corner_ticks,
    end_cap_divider,
    flourish,
    speckle,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import BULLET, finish, subtitle, support_roles

PAPER = "#F5F1E8"
INK = "#2C1810"
PAPER_GRAIN = (139, 125, 107)
GRAIN_COUNT = 1000

CREW_START_Y = 320
LINE_HEIGHT = 30


class VintageClassicTemplate:
    id = "vintage-classic"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        primary, secondary = config.colors.primary, config.colors.secondary

        surface.clear(PAPER)
        speckle(surface, self.rng, GRAIN_COUNT, PAPER_GRAIN, max_opacity=0.1)
        self._border(surface, primary)

        surface.text("ROWING CLUB", w / 2, 80, surface.font(24, "bold", "serif"), fill=secondary, align="center")
        end_cap_divider(surface, w / 2, 95, 150, primary)
        surface.text(crew.club_name, w / 2, 140, surface.font(40, "bold", "serif"), fill=INK, align="center")

        arrow_banner(surface, w / 2 - 200, 170, 400, 50, primary)
        surface.text(crew.name, w / 2, 202, surface.font(28, "bold", "serif"), fill=WHITE, align="center")
        surface.text(subtitle(crew), w / 2, 250, surface.font(20, family="serif"), fill=secondary, align="center")
        bead_divider(surface, w / 2, 270, primary)

        list_x = w / 2 - 150
        label_font = surface.font(16, "bold", "serif")
        name_font = surface.font(18, family="serif")
        dot_font = surface.font(14, family="serif")
        lineup = seat_lineup(crew, self.label_style)
        for index, (label, name) in enumerate(lineup):
            y = CREW_START_Y + index * LINE_HEIGHT
            surface.text(f"{label}:", list_x + 60, y, label_font, fill=primary, align="right")
            surface.text(name, list_x + 80, y, name_font, fill=INK)
            if index < len(lineup) - 1:
                for dot in range(5):
                    surface.text(BULLET, w / 2 + 120 + dot * 15, y - 5, dot_font, fill=secondary, align="center")

        y = CREW_START_Y + len(lineup) * LINE_HEIGHT + 30
        role_font = surface.font(18, "bold", "serif")
        for role, name in support_roles(crew):
            self._frame(surface, w / 2 - 140, y - 20, 280, 35, primary)
            title = "Coxswain" if role == "Cox" else role
            surface.text(f"{title}: {name}", w / 2, y + 5, role_font, fill=INK, align="center")
            y += 50

        flourish(surface, w / 2, h - 60, primary)
        finish(surface, config)

    @staticmethod
    def _border(surface: Surface, color):
        w, h = surface.size
        surface.stroke_rect(20, 20, w - 40, h - 40, color, 8)
        surface.stroke_rect(30, 30, w - 60, h - 60, color, 2)
        corner = 30
        surface.line([(30, 30 + corner), (30 + corner, 30)], color, width=3)
        surface.line([(w - 30 - corner, 30), (w - 30, 30 + corner)], color, width=3)
        surface.line([(30, h - 30 - corner), (30 + corner, h - 30)], color, width=3)
        surface.line([(w - 30 - corner, h - 30), (w - 30, h - 30 - corner)], color, width=3)

    @staticmethod
    def _frame(surface: Surface, x, y, width, height, color):
        surface.stroke_rect(x, y, width, height, color, 2)
        surface.stroke_rect(x + 5, y + 5, width - 10, height - 10, color, 1)
        corner_ticks(surface, x, y, width, height, color)
