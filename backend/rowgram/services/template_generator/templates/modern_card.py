"""Modern card: white card on a light page with a two-column member grid."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import rounded_rect
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import WHITE, Surface
from rowgram.services.template_generator.templates.common import finish, subtitle, support_roles

CARD_MARGIN = 40
HEADER_HEIGHT = 120
MEMBER_HEIGHT = 50
MEMBER_SPACING = 60
MEMBERS_PER_ROW = 2

ROLE_COLORS = {"Cox": "#EF4444", "Coach": "#10B981"}


class ModernCardTemplate:
    id = "modern-card"
    label_style = "standard"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors
        inner = w - CARD_MARGIN * 2

        surface.clear("#F8F9FA")
        rounded_rect(surface, CARD_MARGIN, CARD_MARGIN, inner, h - CARD_MARGIN * 2, 20, fill=WHITE)
        surface.fill_rect(CARD_MARGIN, CARD_MARGIN, inner, 8, colors.primary)
        rounded_rect(surface, CARD_MARGIN + 20, CARD_MARGIN + 30, inner - 40, HEADER_HEIGHT, 12, fill=colors.secondary)

        surface.text(crew.club_name, w / 2, CARD_MARGIN + 70, surface.font(36, "bold"), align="center")
        surface.text(crew.name, w / 2, CARD_MARGIN + 105, surface.font(24), align="center")
        surface.text(subtitle(crew), w / 2, CARD_MARGIN + 130, surface.font(18), align="center")

        start_y = CARD_MARGIN + 180
        member_width = (inner - 60) / MEMBERS_PER_ROW
        badge_font = surface.font(14, "bold")
        name_font = surface.font(18)
        for index, (label, name) in enumerate(seat_lineup(crew, self.label_style)):
            row, col = divmod(index, MEMBERS_PER_ROW)
            x = CARD_MARGIN + 30 + col * (member_width + 30)
            y = start_y + row * MEMBER_SPACING

            rounded_rect(surface, x, y, member_width, MEMBER_HEIGHT, 8, fill="#F1F5F9")
            badge_width = max(40, surface.text_width(label, badge_font) + 12)
            rounded_rect(surface, x + 10, y + 10, badge_width, 30, 4, fill=colors.primary)
            surface.text(label, x + 10 + badge_width / 2, y + 30, badge_font, align="center")
            surface.text(name, x + 20 + badge_width, y + 30, name_font, fill="#1E293B")

        rows = -(-len(crew.crew_names) // MEMBERS_PER_ROW)
        y = start_y + rows * MEMBER_SPACING + 20
        role_font = surface.font(18, "bold")
        for role, name in support_roles(crew):
            rounded_rect(surface, CARD_MARGIN + 30, y, inner - 60, 40, 8, fill=ROLE_COLORS[role])
            surface.text(f"{role}: {name}", w / 2, y + 25, role_font, align="center")
            y += 60

        finish(surface, config)
