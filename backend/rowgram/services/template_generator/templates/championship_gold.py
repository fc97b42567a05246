"""Championship gold: radial gold burst, black banner, laurels."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import GOLD, framed_box, laurels, radial_gradient
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import BLACK, WHITE, Surface
from rowgram.services.template_generator.templates.common import finish, support_roles

CREW_START_Y = 350
LINE_HEIGHT = 32


class ChampionshipGoldTemplate:
    id = "championship-gold"
    label_style = "short"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        radial_gradient(
            surface, (w / 2, h / 2), max(w, h) / 2,
            [(0, "#FDF4C4"), (0.3, colors.primary), (1, colors.secondary)],
        )

        surface.fill_rect(0, 40, w, 120, "rgba(0, 0, 0, 0.8)")
        surface.fill_rect(0, 40, w, 8, GOLD)
        surface.fill_rect(0, 152, w, 8, GOLD)
        surface.text("CHAMPIONSHIP", w / 2, 80, surface.font(32, "bold", "serif"), fill=GOLD, align="center")
        surface.text(crew.race_name.upper(), w / 2, 115, surface.font(28, "bold", "serif"), align="center")
        surface.text("REPRESENTING", w / 2, 145, surface.font(20, family="serif"), align="center")

        surface.text(crew.club_name, w / 2, 210, surface.font(44, "bold", "serif"), align="center")
        surface.text(crew.name, w / 2, 250, surface.font(32, family="serif"), fill=GOLD, align="center")

        framed_box(surface, w / 2 - 60, 270, 120, 40, "rgba(255, 215, 0, 0.2)", GOLD)
        surface.text(crew.boat_type.name, w / 2, 295, surface.font(20, "bold", "serif"), align="center")

        marker_font = surface.font(11, "bold", "serif")
        name_font = surface.font(20, family="serif")
        for index, (label, name) in enumerate(seat_lineup(crew, self.label_style)):
            left = index % 2 == 0
            x = w * 0.3 if left else w * 0.7
            y = CREW_START_Y + (index // 2) * LINE_HEIGHT
            surface.circle(x - 20, y - 8, 12, fill=GOLD)
            surface.text(label, x - 20, y - 3, marker_font, fill=BLACK, align="center")
            surface.text(name, x if left else x - 40, y, name_font, align="left" if left else "right")

        y = CREW_START_Y + -(-len(crew.crew_names) // 2) * LINE_HEIGHT + 40
        role_font = surface.font(18, "bold", "serif")
        for role, name in support_roles(crew):
            framed_box(surface, w / 2 - 120, y - 25, 240, 35, "rgba(255, 215, 0, 0.3)", GOLD)
            surface.text(f"{role}: {name}", w / 2, y - 5, role_font, fill=WHITE, align="center")
            y += 50

        laurels(surface, w / 2, h - 80)
        finish(surface, config)
