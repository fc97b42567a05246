"""
Crew image service.

Maps a template id onto either a registered template or a design preset,
renders through the template generator and saves the PNG under
``settings.saved_images_dir``.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from rowgram.design_templates import preset_options
from rowgram.errors import PersistenceFailure
from rowgram.models import ClubIconData, ColorScheme, Crew, TemplateConfig
from rowgram.services.file_utils import get_next_file_name
from rowgram.services.template_generator import TemplateGeneratorService, is_registered, validate_crew

logger = logging.getLogger(__name__)

template_generator = TemplateGeneratorService()


@dataclass
class GeneratedImage:
    output_path: Path
    image_bytes: bytes


def get_template_config(template_id: Optional[str], colors: Optional[ColorScheme] = None) -> TemplateConfig:
    """Configurable-template config for a preset id; unknown ids get the default preset."""
    return TemplateConfig(colors=colors or ColorScheme(), **preset_options(template_id))


def save_image(image_bytes: bytes, image_name: str) -> Path:
    try:
        output_path = get_next_file_name(image_name, "png")
        output_path.write_bytes(image_bytes)
    except OSError as e:
        logger.error(f"Failed to save image '{image_name}': {e}")
        raise PersistenceFailure(f"Could not save image '{image_name}': {e}", image_bytes=image_bytes) from e
    logger.info(f"Saved image to {output_path}")
    return output_path


def generate_crew_image(
    crew: Union[Crew, dict],
    image_name: str,
    template_id: Optional[str],
    colors: Optional[ColorScheme] = None,
    club_icon: Optional[ClubIconData] = None,
    generator: Optional[TemplateGeneratorService] = None,
) -> GeneratedImage:
    """Render ``crew`` and write it to disk.

    A registered template id renders that template. Anything else is treated
    as a preset name, falling back to the default preset when unrecognised.
    Raises ``PersistenceFailure`` (carrying the PNG) if the write fails.
    """
    crew = validate_crew(crew)
    generator = generator or template_generator

    if is_registered(template_id):
        logger.info(f"Generating '{crew.name}' with template {template_id}")
        config = TemplateConfig(colors=colors or ColorScheme())
        image_bytes = generator.generate_template(crew, config, club_icon=club_icon, template_id=template_id)
    else:
        logger.info(f"No template class for {template_id!r}, using preset options")
        config = get_template_config(template_id, colors)
        image_bytes = generator.generate_template(crew, config, club_icon=club_icon)

    return GeneratedImage(output_path=save_image(image_bytes, image_name), image_bytes=image_bytes)
