"""Race day: racing stripes, a bold banner and a halved two-column lineup."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import diagonal_stripes
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import BULLET, finish, support_roles

CREW_START_Y = 370
ROW_HEIGHT = 40

ROLE_COLORS = {"Cox": "rgba(239, 68, 68, 0.9)", "Coach": "rgba(16, 185, 129, 0.9)"}


class RaceDayTemplate:
    id = "race-day"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        surface.clear(colors.primary)
        diagonal_stripes(surface, colors.secondary, stripe_width=40)
        surface.fill_rect(0, 0, w, h, "rgba(0, 0, 0, 0.3)")

        surface.fill_rect(0, 60, w, 100, WHITE)
        surface.text("RACE DAY", w / 2, 100, surface.font(42, "bold"), fill=colors.primary, align="center")
        surface.text(crew.race_name.upper(), w / 2, 140, surface.font(32, "bold"), fill=colors.primary, align="center")

        surface.text(crew.club_name, w / 2, 220, surface.font(48, "bold"), align="center")
        surface.text(crew.name, w / 2, 270, surface.font(36), align="center")
        surface.text(crew.boat_type.name, w / 2, 310, surface.font(24), align="center")

        surface.text("CREW LINEUP", w / 2, CREW_START_Y, surface.font(32, "bold"), align="center")

        font = surface.font(24)
        lineup = seat_lineup(crew, self.label_style)
        halfway = -(-len(lineup) // 2)
        for index, (label, name) in enumerate(lineup):
            left = index < halfway
            x = w * 0.25 if left else w * 0.75
            row = index if left else index - halfway
            surface.text(f"{label}: {name}", x, CREW_START_Y + 50 + row * ROW_HEIGHT, font, align="center")

        y = CREW_START_Y + 50 + halfway * ROW_HEIGHT + 40
        role_font = surface.font(22, "bold")
        for role, name in support_roles(crew):
            surface.fill_rect(w / 2 - 150, y - 20, 300, 40, ROLE_COLORS[role])
            surface.text(f"{role.upper()}: {name.upper()}", w / 2, y + 5, role_font, align="center")
            y += 60

        surface.fill_rect(0, h - 80, w, 80, "rgba(255, 255, 255, 0.1)")
        surface.text(f"READY {BULLET} SET {BULLET} ROW", w / 2, h - 35, surface.font(24, "bold"), align="center")
        finish(surface, config)
