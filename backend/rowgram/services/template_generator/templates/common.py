"""Small helpers every template shares."""

from typing import Optional

from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.primitives import place_club_icon
from rowgram.services.template_generator.surface import Surface

BULLET = "•"


def subtitle(crew: Crew, separator: str = f" {BULLET} ") -> str:
    """``"{boat} • {race}"``, skipping whichever part is blank."""
    return separator.join(part for part in (crew.boat_type.name, crew.race_name) if part)


def support_roles(crew: Crew) -> list[tuple[str, str]]:
    """Cox then coach, each only when a name is present."""
    roles = []
    if crew.cox_name:
        roles.append(("Cox", crew.cox_name))
    if crew.coach_name:
        roles.append(("Coach", crew.coach_name))
    return roles


def finish(surface: Surface, config: TemplateConfig, default_position: Optional[str] = "bottom-right"):
    """Composite the club icon, if one was resolved, at the configured corner."""
    place_club_icon(surface, config.logo or default_position)
