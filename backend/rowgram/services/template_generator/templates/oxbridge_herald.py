"""Oxbridge herald: parchment, heraldic shield and Latin seat names."""

import math
import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    corner_crosses,
    dotted_divider,
    framed_box,
    heraldic_shield,
    linear_gradient,
    speckle,
    star,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import BULLET, finish, subtitle

INK = "#2C1810"
CREW_START_Y = 340
LINE_HEIGHT = 28

SPOT_COUNT = 50
STREAK_COUNT = 200


class OxbridgeHeraldTemplate:
    id = "oxbridge-herald"
    label_style = "latin"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        primary, secondary = config.colors.primary, config.colors.secondary

        linear_gradient(surface, (0, 0), (w, h), [(0, "#FDF6E3"), (0.5, "#F7F3E9"), (1, "#EDE4D3")])
        speckle(surface, self.rng, SPOT_COUNT, (139, 125, 107), max_opacity=0.1, dots=True)
        speckle(surface, self.rng, STREAK_COUNT, (160, 142, 120), max_opacity=0.05, max_size=5)
        self._border(surface, primary)

        heraldic_shield(surface, w / 2 - 80, 50, 160, 120, primary)
        surface.text("UNIVERSITAS", w / 2, 90, surface.font(20, "bold", "serif"), fill=WHITE, align="center")
        surface.text("REGIUM COLLEGIUM", w / 2, 110, surface.font(16, "bold", "serif"), fill=WHITE, align="center")
        surface.text("ROWING CLUB", w / 2, 130, surface.font(14, family="serif"), fill=WHITE, align="center")
        surface.text("Per Mare Per Terram", w / 2, 155, surface.font(18, "italic", "serif"), fill=secondary, align="center")

        dotted_divider(surface, w / 2, 182, 200, primary, line_width=1, dots=(-60, -30, 0, 30, 60))
        star(surface, w / 2, 182, 6, primary)

        surface.text(crew.club_name, w / 2, 225, surface.font(42, "bold", "serif"), fill=INK, align="center")
        surface.text(f"The {crew.name}", w / 2, 262, surface.font(28, family="serif"), fill=primary, align="center")
        surface.text(subtitle(crew), w / 2, 292, surface.font(22, family="serif"), fill=secondary, align="center")

        surface.text("COLLEGIUM REMIGUM", w / 2, CREW_START_Y, surface.font(24, "bold", "serif"), fill=INK, align="center")

        number_font = surface.font(16, "bold", "serif")
        label_font = surface.font(16, "italic", "serif")
        name_font = surface.font(18, family="serif")
        list_x = w / 2 - 180
        lineup = seat_lineup(crew, self.label_style)
        for index, (label, name) in enumerate(lineup):
            y = CREW_START_Y + 40 + index * LINE_HEIGHT
            surface.text(f"{index + 1}.", w / 2 - 200, y, number_font, fill=primary, align="right")
            surface.text(label, list_x, y, label_font, fill=secondary)
            surface.text(name, list_x + 100, y, name_font, fill=INK)
            if index < len(lineup) - 1:
                star(surface, w / 2 + 150, y - 8, 3, primary, points=6)

        y = CREW_START_Y + 40 + len(lineup) * LINE_HEIGHT + 30
        if crew.cox_name:
            self._role(surface, w / 2, y, "Gubernator", crew.cox_name, primary)
            y += 40
        if crew.coach_name:
            self._role(surface, w / 2, y, "Magister", crew.coach_name, secondary)

        self._seal(surface, w / 2, h - 100, primary)
        surface.text(
            f"Anno Domini MMXXIV {BULLET} Pro Gloria Et Honore",
            w / 2, h - 50, surface.font(16, "italic", "serif"), fill="#6B7280", align="center",
        )
        finish(surface, config, default_position="top-right")

    @staticmethod
    def _border(surface: Surface, color):
        w, h = surface.size
        surface.stroke_rect(30, 30, w - 60, h - 60, color, 6)
        surface.stroke_rect(45, 45, w - 90, h - 90, color, 2)
        corner_crosses(surface, [(45, 45), (w - 45, 45), (45, h - 45), (w - 45, h - 45)], 25, color, diagonals=True)

    @staticmethod
    def _role(surface: Surface, cx, y, title: str, name: str, color):
        framed_box(surface, cx - 150, y - 15, 300, 30, "rgba(255, 255, 255, 0.8)", color)
        surface.text(f"{title}:", cx - 10, y + 5, surface.font(16, "italic", "serif"), fill=color, align="right")
        surface.text(name, cx + 10, y + 5, surface.font(16, "bold", "serif"), fill=INK)

    @staticmethod
    def _seal(surface: Surface, cx, cy, color):
        surface.circle(cx, cy, 35, outline=color, width=4)
        surface.fill_rect(cx - 15, cy - 10, 30, 20, color)
        surface.line([(cx - 8, cy), (cx + 8, cy)], WHITE, width=2)
        surface.line([(cx, cy - 6), (cx, cy + 6)], WHITE, width=2)
        surface.circle(cx, cy, 25, outline=color)
        for i in range(12):
            angle = i * math.pi / 6
            surface.circle(cx + math.cos(angle) * 45, cy + math.sin(angle) * 45, 1, fill=color)
