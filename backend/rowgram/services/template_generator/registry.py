"""Closed registry of the fixed-identity templates."""

import random
from typing import Optional, Protocol

from rowgram.errors import UnknownTemplate
from rowgram.models import Crew, TemplateConfig
from rowgram.services.template_generator.surface import Surface
from rowgram.services.template_generator.templates import (
    ChampionshipGoldTemplate,
    ClassicLineupTemplate,
    ElitePerformanceTemplate,
    HenleyPosterTemplate,
    MinimalCleanTemplate,
    ModernCardTemplate,
    OxbridgeHeraldTemplate,
    RaceDayTemplate,
    RegattaRoyalTemplate,
    VintageClassicTemplate,
)


class TemplateComponent(Protocol):
    id: str
    label_style: str

    def draw(self, surface: Surface, crew: Crew, config: TemplateConfig) -> None:
        ...


TEMPLATE_REGISTRY = {
    template.id: template
    for template in (
        ClassicLineupTemplate,
        ModernCardTemplate,
        RaceDayTemplate,
        MinimalCleanTemplate,
        ChampionshipGoldTemplate,
        VintageClassicTemplate,
        ElitePerformanceTemplate,
        RegattaRoyalTemplate,
        OxbridgeHeraldTemplate,
        HenleyPosterTemplate,
    )
}


def is_registered(template_id: Optional[str]) -> bool:
    return template_id in TEMPLATE_REGISTRY


def create_template(template_id: str, rng: Optional[random.Random] = None) -> TemplateComponent:
    """Instantiate a registered template, raising ``UnknownTemplate`` otherwise."""
    try:
        template_class = TEMPLATE_REGISTRY[template_id]
    except KeyError:
        raise UnknownTemplate(template_id) from None
    return template_class(rng=rng)
