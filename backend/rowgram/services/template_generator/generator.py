"""
Template generator service.

Resolves a template, allocates a surface of the configured size, attaches the
club icon, runs the template's draw routine and encodes the result as PNG.
Nothing here touches the filesystem apart from reading the club icon.
"""

import io
import logging
import random
from typing import Optional, Union

from pydantic import ValidationError

from rowgram.errors import EncodingFailure, InvalidInput
from rowgram.models import ClubIconData, Crew, TemplateConfig
from rowgram.services.template_generator.club_icon import load_club_icon
from rowgram.services.template_generator.registry import TemplateComponent, create_template
from rowgram.services.template_generator.surface import FontBook, Surface, parse_color
from rowgram.services.template_generator.templates import ConfigurableTemplate

logger = logging.getLogger(__name__)


def validate_crew(crew: Union[Crew, dict]) -> Crew:
    """Coerce ``crew`` to a ``Crew`` with at least one rower, or raise ``InvalidInput``."""
    if isinstance(crew, dict):
        try:
            crew = Crew.model_validate(crew)
        except ValidationError as e:
            raise InvalidInput(f"Invalid crew data: {e.error_count()} validation error(s)") from e
    if not isinstance(crew, Crew):
        raise InvalidInput("Invalid crew data: expected a crew record")
    if not isinstance(crew.crew_names, list) or not crew.crew_names:
        raise InvalidInput("Invalid crew data: 'crewNames' is missing or empty")
    return crew


def encode_png(surface: Surface) -> bytes:
    buffer = io.BytesIO()
    try:
        surface.image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingFailure(f"Could not encode image as PNG: {e}") from e
    return buffer.getvalue()


class TemplateGeneratorService:
    """Renders crews to PNG. Safe to share; every render gets its own surface."""

    def __init__(self, font_book: Optional[FontBook] = None, seed: Optional[int] = None):
        self.font_book = font_book or FontBook()
        # None draws decorative randomness from OS entropy
        self.seed = seed

    def resolve_template(self, config: TemplateConfig, template_id: Optional[str] = None) -> TemplateComponent:
        template_id = template_id or config.template_id
        rng = random.Random(self.seed)
        if template_id is None or template_id == ConfigurableTemplate.id:
            logger.debug("No fixed template named, composing from design options")
            return ConfigurableTemplate(rng=rng)
        return create_template(template_id, rng=rng)

    def render(
        self,
        crew: Union[Crew, dict],
        config: Optional[TemplateConfig] = None,
        club_icon: Optional[ClubIconData] = None,
        template_id: Optional[str] = None,
    ) -> Surface:
        crew = validate_crew(crew)
        config = config or TemplateConfig()
        parse_color(config.colors.primary)
        parse_color(config.colors.secondary)
        template = self.resolve_template(config, template_id)

        width, height = config.dimensions.width, config.dimensions.height
        surface = Surface(width, height, font_book=self.font_book)
        surface.club_icon = load_club_icon(club_icon)

        logger.info(f"Rendering '{crew.name}' with {template.id} at {width}x{height}")
        template.draw(surface, crew, config)
        return surface

    def generate_template(
        self,
        crew: Union[Crew, dict],
        config: Optional[TemplateConfig] = None,
        club_icon: Optional[ClubIconData] = None,
        template_id: Optional[str] = None,
    ) -> bytes:
        """Render and PNG-encode in one step."""
        image_bytes = encode_png(self.render(crew, config, club_icon=club_icon, template_id=template_id))
        logger.debug(f"Encoded {len(image_bytes)} bytes")
        return image_bytes
