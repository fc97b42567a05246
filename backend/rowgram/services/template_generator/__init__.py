from rowgram.services.template_generator.generator import TemplateGeneratorService, encode_png, validate_crew
from rowgram.services.template_generator.registry import TEMPLATE_REGISTRY, create_template, is_registered
from rowgram.services.template_generator.surface import DrawnText, FontBook, Surface

__all__ = [
    "TEMPLATE_REGISTRY",
    "DrawnText",
    "FontBook",
    "Surface",
    "TemplateGeneratorService",
    "create_template",
    "encode_png",
    "is_registered",
    "validate_crew",
]
