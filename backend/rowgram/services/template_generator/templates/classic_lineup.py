"""Classic lineup: vertical gradient with a single left-aligned roster."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import linear_gradient
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import finish, subtitle, support_roles

START_Y = 220
LINE_HEIGHT = 45


class ClassicLineupTemplate:
    id = "classic-lineup"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        linear_gradient(surface, (0, 0), (0, h), [(0, colors.primary), (1, colors.secondary)])

        surface.text(crew.club_name, w / 2, 80, surface.font(48, "bold"), align="center")
        surface.text(crew.name, w / 2, 130, surface.font(32), align="center")
        surface.text(subtitle(crew), w / 2, 170, surface.font(24), align="center")

        font = surface.font(28)
        rows = [f"{label}: {name}" for label, name in seat_lineup(crew, self.label_style)]
        rows += [f"{role}: {name}" for role, name in support_roles(crew)]
        for index, row in enumerate(rows):
            surface.text(row, 100, START_Y + index * LINE_HEIGHT, font)

        surface.line([(80, 190), (w - 80, 190)], WHITE, width=3)
        finish(surface, config)
