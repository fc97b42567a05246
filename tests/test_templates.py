import io

import pytest
from PIL import Image

from rowgram.models import CanvasDimensions, TemplateConfig
from rowgram.services.template_generator import TemplateGeneratorService
from rowgram.services.template_generator.registry import TEMPLATE_REGISTRY
from rowgram.services.template_generator.seating import seat_labels
from rowgram.services.template_generator.templates import ConfigurableTemplate, VintageClassicTemplate

ALL_TEMPLATES = sorted(TEMPLATE_REGISTRY) + [ConfigurableTemplate.id]
LABELED = TemplateConfig(name_display="labeled")


def _tokens(surface) -> set:
    return {word.strip(":.") for text in surface.texts() for word in text.split()}


def _entries_with(surface, needle: str) -> list:
    return [entry for entry in surface.text_log if needle.lower() in entry.text.lower()]


def _template_class(template_id):
    return TEMPLATE_REGISTRY.get(template_id, ConfigurableTemplate)


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_output_matches_configured_dimensions(template_id, eight) -> None:
    config = TemplateConfig(dimensions=CanvasDimensions(width=1080, height=1350))
    png = TemplateGeneratorService(seed=1).generate_template(eight, config, template_id=template_id)
    with Image.open(io.BytesIO(png)) as image:
        assert image.format == "PNG"
        assert image.size == (1080, 1350)


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_every_seat_label_is_rendered(template_id, eight) -> None:
    surface = TemplateGeneratorService(seed=1).render(eight, LABELED, template_id=template_id)
    expected = seat_labels(eight, _template_class(template_id).label_style)
    assert len(expected) == 8
    assert set(expected) <= _tokens(surface)


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_every_rower_name_is_rendered(template_id, eight) -> None:
    surface = TemplateGeneratorService(seed=1).render(eight, template_id=template_id)
    for name in eight.crew_names:
        assert len(_entries_with(surface, name)) == 1


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_cox_and_coach_rendered_once_in_order(template_id, eight) -> None:
    surface = TemplateGeneratorService(seed=1).render(eight, template_id=template_id)
    cox = _entries_with(surface, "Sarah")
    coach = _entries_with(surface, "Coach Roberts")
    assert len(cox) == 1
    assert len(coach) == 1
    assert cox[0].y < coach[0].y


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_absent_roles_are_not_rendered(template_id, eight) -> None:
    crew = eight.model_copy(update={"cox_name": None, "coach_name": None})
    surface = TemplateGeneratorService(seed=1).render(crew, template_id=template_id)
    assert _entries_with(surface, "cox") == []
    assert _entries_with(surface, "Coach Roberts") == []


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_coach_without_cox(template_id, eight) -> None:
    crew = eight.model_copy(update={"cox_name": None})
    surface = TemplateGeneratorService(seed=1).render(crew, template_id=template_id)
    assert _entries_with(surface, "cox") == []
    assert len(_entries_with(surface, "Coach Roberts")) == 1


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_single_scull_renders_numeric_seat(template_id, single) -> None:
    surface = TemplateGeneratorService(seed=1).render(single, LABELED, template_id=template_id)
    label = seat_labels(single, _template_class(template_id).label_style)[0]
    assert label in {"1", "Position 1", "Remex 1"}
    assert set(label.split()) <= _tokens(surface)
    assert len(_entries_with(surface, "Ivy Lee")) == 1


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_more_names_than_seats_still_renders(template_id, eight) -> None:
    crew = eight.model_copy(update={"boat_type": eight.boat_type.model_copy(update={"seats": 4})})
    surface = TemplateGeneratorService(seed=1).render(crew, LABELED, template_id=template_id)
    assert len(_entries_with(surface, "Hannah King")) == 1


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_seeded_renders_are_identical(template_id, eight) -> None:
    first = TemplateGeneratorService(seed=42).generate_template(eight, template_id=template_id)
    second = TemplateGeneratorService(seed=42).generate_template(eight, template_id=template_id)
    assert first == second


def test_vintage_grain_depends_on_seed(eight) -> None:
    first = TemplateGeneratorService(seed=1).generate_template(eight, template_id=VintageClassicTemplate.id)
    second = TemplateGeneratorService(seed=2).generate_template(eight, template_id=VintageClassicTemplate.id)
    assert first != second


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_vintage_grain_density(seed, eight) -> None:
    surface = TemplateGeneratorService(seed=seed).render(eight, template_id=VintageClassicTemplate.id)
    # Blank paper between the border and the roster; only grain lands here
    region = surface.image.crop((50, 700, 250, 900))
    paper = (245, 241, 232)
    speckled = sum(count for count, color in region.getcolors(maxcolors=region.width * region.height) if color != paper)
    assert 0 < speckled < 200


@pytest.mark.parametrize("background", ["geometric", "diagonal", "radial-burst"])
@pytest.mark.parametrize("boat_style", ["centered", "offset", "showcase"])
@pytest.mark.parametrize("text_layout", ["header-left", "header-center", "minimal"])
def test_configurable_option_combinations(background, boat_style, text_layout, eight) -> None:
    config = TemplateConfig(
        background=background,
        boat_style=boat_style,
        text_layout=text_layout,
        name_display="labeled",
        logo="none",
    )
    surface = TemplateGeneratorService(seed=1).render(eight, config)
    texts = surface.texts()
    assert "Bow: Alice Brown" in texts
    assert "Stroke: Hannah King" in texts
    assert "Cox: Sarah" in texts
    assert "Coach: Coach Roberts" in texts


def test_configurable_basic_names_have_no_labels(eight) -> None:
    surface = TemplateGeneratorService(seed=1).render(eight, TemplateConfig(name_display="basic"))
    texts = surface.texts()
    assert "Alice Brown" in texts
    assert not any(text.startswith("Bow") for text in texts)


def test_configurable_header_alignment_follows_layout(eight) -> None:
    left = TemplateGeneratorService().render(eight, TemplateConfig(text_layout="header-left"))
    center = TemplateGeneratorService().render(eight, TemplateConfig(text_layout="header-center"))
    assert _entries_with(left, "Thames RC")[0].align == "left"
    assert _entries_with(center, "Thames RC")[0].align == "center"


@pytest.mark.parametrize("width,height", [(80, 80), (1080, 60)])
@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
def test_small_canvas_clips_instead_of_failing(template_id, width, height, eight) -> None:
    config = TemplateConfig(dimensions=CanvasDimensions(width=width, height=height))
    png = TemplateGeneratorService(seed=1).generate_template(eight, config, template_id=template_id)
    with Image.open(io.BytesIO(png)) as image:
        assert image.size == (width, height)
