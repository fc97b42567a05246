"""Elite performance: dark tech gradient, analytics header, stat-bar grid."""

import random
from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import (
    GOLD,
    corner_crosses,
    diagonal_lines,
    framed_box,
    grid_lines,
    linear_gradient,
)
from rowgram.services.template_generator.seating import seat_lineup
from rowgram.services.template_generator.surface import BLACK, WHITE, Surface, with_alpha
from rowgram.services.template_generator.templates.common import BULLET, finish, subtitle

NEON = "#00FF41"
ALERT = "#FF4444"

CREW_DISPLAY_Y = 320
CELL_HEIGHT = 35
CELL_WIDTH = 220
BAR_WIDTH = 60

ROLE_TITLES = {"Cox": ("COXSWAIN", ALERT), "Coach": ("HEAD COACH", NEON)}


class ElitePerformanceTemplate:
    id = "elite-performance"
    label_style = "short"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig):
        w, h = surface.size
        colors = config.colors

        linear_gradient(
            surface, (0, 0), (w, h),
            [(0, "#0F172A"), (0.3, colors.primary), (0.7, colors.secondary), (1, "#1E293B")],
        )
        diagonal_lines(surface, "rgba(255, 255, 255, 0.05)", spacing=50)

        surface.fill_rect(0, 30, w, 100, "rgba(0, 0, 0, 0.7)")
        for offset, color, share in ((45, NEON, 1.0), (55, GOLD, 0.85), (65, ALERT, 0.75)):
            surface.fill_rect(50, offset, (w - 100) * share, 4, color)
        surface.text("ELITE PERFORMANCE", w / 2, 95, surface.font(28, "black"), align="center")
        surface.text("CREW ANALYTICS", w / 2, 120, surface.font(20), align="center")

        surface.text(crew.club_name.upper(), w / 2, 180, surface.font(44, "black"), align="center")
        surface.text(f"CREW: {crew.name.upper()}", w / 2, 220, surface.font(32, "black"), fill=NEON, align="center")

        framed_box(surface, w / 2 - 120, 250, 240, 35, "rgba(0, 255, 65, 0.2)", NEON)
        surface.text(subtitle(crew), w / 2, 273, surface.font(20, "bold"), align="center")

        surface.fill_rect(80, CREW_DISPLAY_Y - 10, w - 160, 30, "rgba(255, 255, 255, 0.1)")
        surface.text("CREW LINEUP", 100, CREW_DISPLAY_Y + 8, surface.font(18, "bold"), fill=NEON)

        grid_y = CREW_DISPLAY_Y + 40
        badge_font = surface.font(14, "bold")
        name_font = surface.font(16, "bold")
        for index, (label, name) in enumerate(seat_lineup(crew, self.label_style)):
            x = w * 0.25 if index % 2 == 0 else w * 0.75
            y = grid_y + (index // 2) * CELL_HEIGHT
            left = x - CELL_WIDTH / 2

            surface.fill_rect(left, y - 15, CELL_WIDTH, CELL_HEIGHT - 5, "rgba(255, 255, 255, 0.05)")
            surface.fill_rect(left + 5, y - 10, 40, 20, GOLD)
            surface.text(label, left + 25, y + 4, badge_font, fill=BLACK, align="center")
            surface.text(name.upper(), left + 55, y, name_font)

            bar_x = x + CELL_WIDTH / 2 - BAR_WIDTH - 10
            surface.fill_rect(bar_x, y + 5, BAR_WIDTH * (0.7 + self.rng.random() * 0.3), 3, NEON)

        y = grid_y + -(-len(crew.crew_names) // 2) * CELL_HEIGHT + 40
        if crew.cox_name:
            self._role(surface, w / 2, y, "Cox", crew.cox_name)
            y += 50
        if crew.coach_name:
            self._role(surface, w / 2, y, "Coach", crew.coach_name)

        surface.fill_rect(0, h - 60, w, 60, "rgba(0, 0, 0, 0.8)")
        surface.text(
            f"MAXIMUM PERFORMANCE {BULLET} ELITE EXCELLENCE {BULLET} CHAMPIONSHIP READY",
            w / 2, h - 30, surface.font(16, "black"), fill=NEON, align="center",
        )

        grid_lines(surface, "rgba(0, 255, 65, 0.1)", spacing=40)
        corner_crosses(surface, [(40, 40), (w - 40, 40), (40, h - 40), (w - 40, h - 40)], 20, NEON)
        finish(surface, config)

    @staticmethod
    def _role(surface: Surface, cx, y, role: str, name: str):
        title, color = ROLE_TITLES[role]
        frame_w, frame_h = 300, 35
        left = cx - frame_w / 2
        framed_box(surface, left, y - frame_h / 2, frame_w, frame_h, with_alpha(color, 0.2), color)
        surface.fill_rect(left + 5, y - frame_h / 2 + 5, 80, frame_h - 10, color)
        surface.text(title, left + 45, y + 4, surface.font(12, "bold"), fill=BLACK, align="center")
        surface.text(name.upper(), left + 100, y + 4, surface.font(16, "bold"), fill=WHITE)
