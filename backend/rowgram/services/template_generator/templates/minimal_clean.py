"""Minimal clean: white page, right-aligned labels beside names."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import Surface
from rowgram.services.template_generator.templates.common import BULLET, finish, subtitle, support_roles

LINEUP_START_Y = 220
LINE_HEIGHT = 35
LIST_WIDTH = 400

INK = "#374151"
ROLE_COLORS = {"Cox": "#DC2626", "Coach": "#059669"}


class MinimalCleanTemplate:
    id = "minimal-clean"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        primary = config.colors.primary

        surface.clear("#FFFFFF")
        surface.fill_rect(0, 0, w, 6, primary)

        surface.text(crew.club_name, w / 2, 80, surface.font(36), fill="#1F2937", align="center")
        surface.text(crew.name, w / 2, 120, surface.font(28), fill=primary, align="center")
        surface.text(subtitle(crew), w / 2, 160, surface.font(20), fill="#6B7280", align="center")
        surface.line([(w / 2 - 100, 180), (w / 2 + 100, 180)], "#E5E7EB")

        start_x = w / 2 - LIST_WIDTH / 2
        label_font = surface.font(20, "bold")
        name_font = surface.font(22)
        dot_font = surface.font(16)
        lineup = seat_lineup(crew, self.label_style)
        for index, (label, name) in enumerate(lineup):
            y = LINEUP_START_Y + index * LINE_HEIGHT
            surface.text(label, start_x + 60, y, label_font, fill=primary, align="right")
            surface.text(name, start_x + 80, y, name_font, fill=INK)
            if index < len(lineup) - 1:
                surface.text(BULLET, w / 2, y + 17, dot_font, fill="#D1D5DB", align="center")

        y = LINEUP_START_Y + len(lineup) * LINE_HEIGHT + 30
        for role, name in support_roles(crew):
            surface.text(role, start_x + 60, y, label_font, fill=ROLE_COLORS[role], align="right")
            surface.text(name, start_x + 80, y, name_font, fill=INK)
            y += LINE_HEIGHT

        surface.fill_rect(w / 2 - 50, h - 20, 100, 3, primary)
        finish(surface, config)
