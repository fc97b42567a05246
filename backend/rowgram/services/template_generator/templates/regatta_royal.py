"""Regatta royal: deep-blue radial field, fleur-de-lis wallpaper, crown and seal."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    GOLD,
    crown,
    curved_shield,
    dotted_divider,
    fleur_de_lis,
    radial_gradient,
    rounded_rect,
    seal,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import finish, support_roles

CREW_START_Y = 320
LINE_HEIGHT = 32

ROLE_TITLES = {"Cox": "Royal Coxswain", "Coach": "Head Coach"}


class RegattaRoyalTemplate:
    id = "regatta-royal"
    label_style = "formal"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        radial_gradient(
            surface, (w / 2, h / 3), max(w, h),
            [(0, "#1E3A8A"), (0.6, colors.primary), (1, colors.secondary)],
        )
        for x in range(100, w, 200):
            for y in range(100, h, 150):
                fleur_de_lis(surface, x, y, "rgba(255, 215, 0, 0.08)")

        rounded_rect(surface, 60, 40, w - 120, 80, 20, fill="rgba(255, 255, 255, 0.95)", outline=GOLD, line_width=3)
        crown(surface, w / 2, 60)
        surface.text("ROYAL REGATTA", w / 2, 108, surface.font(32, "bold", "serif"), fill=colors.primary, align="center")

        surface.text(crew.club_name, w / 2, 170, surface.font(48, "bold", "serif"), align="center")
        surface.text(crew.name, w / 2, 210, surface.font(36, family="serif"), fill=GOLD, align="center")

        curved_shield(surface, w / 2 - 100, 240, 200, 50, "rgba(255, 215, 0, 0.2)")
        surface.text(crew.boat_type.name, w / 2, 260, surface.font(22, "bold", "serif"), align="center")
        surface.text(crew.race_name, w / 2, 280, surface.font(18, family="serif"), align="center")

        surface.text("CREW PRESENTATION", w / 2, CREW_START_Y, surface.font(24, "bold", "serif"), fill=GOLD, align="center")
        dotted_divider(surface, w / 2, CREW_START_Y + 15, 200, GOLD, dots=(-40, -20, 0, 20, 40))

        label_font = surface.font(16, "bold", "serif")
        name_font = surface.font(18, family="serif")
        for index, (label, name) in enumerate(seat_lineup(crew, self.label_style)):
            left = index % 2 == 0
            x = w / 2 - 150 if left else w / 2 + 150
            y = CREW_START_Y + 50 + (index // 2) * LINE_HEIGHT
            align = "left" if left else "right"
            self._marker(surface, x - 80 if left else x + 80, y - 8)
            surface.text(label, x - 60 if left else x + 60, y - 5, label_font, fill=GOLD, align=align)
            surface.text(name, x, y + 10, name_font, align=align)

        y = CREW_START_Y + 50 + -(-len(crew.crew_names) // 2) * LINE_HEIGHT + 40
        role_font = surface.font(18, "bold", "serif")
        for role, name in support_roles(crew):
            curved_shield(surface, w / 2 - 140, y - 17.5, 280, 35, "rgba(255, 215, 0, 0.3)")
            surface.text(f"{ROLE_TITLES[role]}: {name}", w / 2, y + 5, role_font, fill=WHITE, align="center")
            y += 50

        seal(surface, w / 2, h - 60)
        finish(surface, config)

    @staticmethod
    def _marker(surface: Surface, x, y):
        surface.polygon([(x, y), (x + 8, y + 4), (x + 6, y + 8), (x - 2, y + 4)], fill=GOLD)
