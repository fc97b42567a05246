"""Henley poster: sky-to-river gradient, regatta banner and a Thames footer."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    GOLD,
    crown,
    framed_box,
    hex_banner,
    linear_gradient,
    oars_divider,
    river,
    rounded_rect,
    water_ripples,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import Surface
from rowgram.services.template_generator.templates.common import BULLET, finish, subtitle

MAROON = "#8B0000"
SKY = "#87CEEB"
SLATE = "#2F4F4F"

CREW_START_Y = 340
LINE_HEIGHT = 30
EMBLEM_SIZE = 60


class HenleyPosterTemplate:
    id = "henley-poster"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        linear_gradient(
            surface, (0, 0), (0, h),
            [(0, SKY), (0.3, colors.primary), (0.7, colors.secondary), (1, SLATE)],
        )
        water_ripples(surface, "rgba(255, 255, 255, 0.1)")

        rounded_rect(surface, 40, 30, w - 80, 120, 15, fill="rgba(255, 255, 255, 0.95)", outline=MAROON, line_width=4)
        surface.text("HENLEY ROYAL REGATTA", w / 2, 70, surface.font(28, "bold", "serif"), fill=MAROON, align="center")
        surface.text(f"THE THAMES {BULLET} OXFORDSHIRE", w / 2, 95, surface.font(20, family="serif"), fill=SLATE, align="center")
        surface.text("Founded 1839", w / 2, 115, surface.font(16, "italic", "serif"), fill=SLATE, align="center")
        oars_divider(surface, w / 2, 170, 200)

        surface.text(crew.club_name, w / 2, 215, surface.font(48, "bold", "serif"), align="center")
        surface.text(crew.name, w / 2, 255, surface.font(36, family="serif"), fill=GOLD, align="center")

        hex_banner(surface, w / 2 - 150, 275, 300, 40, "rgba(139, 0, 0, 0.8)", outline=GOLD)
        surface.text(subtitle(crew), w / 2, 300, surface.font(20, "bold", "serif"), align="center")

        surface.text("CREW COMPOSITION", w / 2, CREW_START_Y + 10, surface.font(26, "bold", "serif"), align="center")

        label_font = surface.font(18, "bold", "serif")
        name_font = surface.font(20, family="serif")
        wave_font = surface.font(16, family="serif")
        lineup = seat_lineup(crew, self.label_style)
        for index, (label, name) in enumerate(lineup):
            left = index % 2 == 0
            x = w / 2 - 100 if left else w / 2 + 100
            y = CREW_START_Y + 50 + (index // 2) * LINE_HEIGHT
            # Labels sit outboard of the names, names run towards the centre line
            surface.text(f"{label}:", x - 20 if left else x + 20, y, label_font, fill=GOLD,
                         align="right" if left else "left")
            surface.text(name, x, y, name_font, align="left" if left else "right")
            if index < len(lineup) - 1 and not left:
                surface.text("~", w / 2, y + 15, wave_font, fill=SKY, align="center")

        y = CREW_START_Y + 50 + -(-len(lineup) // 2) * LINE_HEIGHT + 40
        role_font = surface.font(18, "bold", "serif")
        if crew.cox_name:
            self._role(surface, w / 2, y, "Coxswain", crew.cox_name, role_font)
            y += 45
        if crew.coach_name:
            self._role(surface, w / 2, y, "Coach", crew.coach_name, role_font)

        river(surface, h - 100, "rgba(135, 206, 235, 0.6)", "rgba(255, 255, 255, 0.3)")
        surface.fill_rect(0, h - 60, w, 60, "rgba(47, 79, 79, 0.9)")
        surface.text(
            f"HENLEY-ON-THAMES {BULLET} OXFORDSHIRE {BULLET} ENGLAND",
            w / 2, h - 35, surface.font(18, "bold", "serif"), align="center",
        )
        surface.text('"The Home of Rowing"', w / 2, h - 15, surface.font(14, "italic", "serif"), align="center")

        for left in (20, w - 20 - EMBLEM_SIZE):
            surface.stroke_rect(left, 30, EMBLEM_SIZE, EMBLEM_SIZE, MAROON, 2)
            crown(surface, left + EMBLEM_SIZE / 2, 58)
        finish(surface, config)

    @staticmethod
    def _role(surface: Surface, cx, y, title: str, name: str, font):
        framed_box(surface, cx - 140, y - 17.5, 280, 35, "rgba(255, 255, 255, 0.9)", MAROON)
        surface.text(f"{title}: {name}", cx, y + 5, font, fill=MAROON, align="center")
