import io

import pytest
from PIL import Image

from rowgram.errors import InvalidInput, UnknownTemplate
from rowgram.models import ClubIconData, ColorScheme, TemplateConfig
from rowgram.services.template_generator import TemplateGeneratorService, create_template, is_registered
from rowgram.services.template_generator.club_icon import decode_base64, icon_path, load_club_icon
from rowgram.services.template_generator.registry import TEMPLATE_REGISTRY
from rowgram.services.template_generator.templates import ClassicLineupTemplate, ConfigurableTemplate

# Default logo position is bottom-right with a 40px margin; a 64px icon covers this pixel
ICON_PIXEL = (1080 - 40 - 32, 1080 - 40 - 32)
RED = (255, 0, 0)


def test_registry_is_closed_set_of_ten() -> None:
    assert len(TEMPLATE_REGISTRY) == 10
    assert "henley-poster" in TEMPLATE_REGISTRY
    assert ConfigurableTemplate.id not in TEMPLATE_REGISTRY
    assert is_registered("race-day")
    assert not is_registered("modern-grid")
    assert not is_registered(None)


def test_create_template_unknown_id() -> None:
    with pytest.raises(UnknownTemplate) as excinfo:
        create_template("does-not-exist")
    assert excinfo.value.template_id == "does-not-exist"
    assert isinstance(excinfo.value, KeyError)
    assert "does-not-exist" in str(excinfo.value)


def test_unknown_template_id_fails_before_output(eight) -> None:
    with pytest.raises(UnknownTemplate):
        TemplateGeneratorService().generate_template(eight, TemplateConfig(template_id="nope"))
    with pytest.raises(UnknownTemplate):
        TemplateGeneratorService().generate_template(eight, template_id="nope")


def test_template_id_resolution(eight) -> None:
    service = TemplateGeneratorService()
    assert isinstance(service.resolve_template(TemplateConfig()), ConfigurableTemplate)
    assert isinstance(service.resolve_template(TemplateConfig(template_id="classic-lineup")), ClassicLineupTemplate)
    # An explicit argument wins over the config
    chosen = service.resolve_template(TemplateConfig(template_id="race-day"), "classic-lineup")
    assert isinstance(chosen, ClassicLineupTemplate)
    assert isinstance(service.resolve_template(TemplateConfig(template_id="configurable")), ConfigurableTemplate)


def test_fixed_template_ignores_design_options(eight) -> None:
    service = TemplateGeneratorService(seed=5)
    plain = service.generate_template(eight, TemplateConfig(), template_id="classic-lineup")
    styled = service.generate_template(
        eight,
        TemplateConfig(background="diagonal", boat_style="showcase", text_layout="minimal"),
        template_id="classic-lineup",
    )
    assert plain == styled


def test_empty_roster_is_invalid(eight) -> None:
    crew = eight.model_copy(update={"crew_names": []})
    with pytest.raises(InvalidInput):
        TemplateGeneratorService().generate_template(crew)


def test_crew_dict_is_validated(eight) -> None:
    payload = eight.model_dump(by_alias=True)
    png = TemplateGeneratorService().generate_template(payload, template_id="minimal-clean")
    assert png.startswith(b"\x89PNG")

    del payload["crewNames"]
    with pytest.raises(InvalidInput):
        TemplateGeneratorService().generate_template(payload)


def test_bad_color_is_invalid_input(eight) -> None:
    config = TemplateConfig(colors=ColorScheme(primary="blurple", secondary="#000000"))
    with pytest.raises(InvalidInput):
        TemplateGeneratorService().render(eight, config, template_id="classic-lineup")


def test_missing_icon_file_does_not_fail_render(eight, settings, caplog) -> None:
    icon = ClubIconData(type="preset", filename="missing.png")
    surface = TemplateGeneratorService().render(eight, club_icon=icon, template_id="classic-lineup")
    assert surface.club_icon is None
    assert surface.size == (1080, 1080)
    assert "Rendering without club icon" in caplog.text


def test_non_image_icon_does_not_fail_render(eight, settings, tmp_path) -> None:
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    (uploads / "notes.png").write_text("definitely not a png")
    icon = ClubIconData(type="upload", file_path="notes.png")
    png = TemplateGeneratorService().generate_template(eight, club_icon=icon, template_id="race-day")
    assert png.startswith(b"\x89PNG")


def test_preset_icon_is_composited(eight, settings, icon_png, tmp_path) -> None:
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "thames.png").write_bytes(icon_png)

    icon = ClubIconData(type="preset", filename="thames.png")
    surface = TemplateGeneratorService().render(eight, club_icon=icon, template_id="classic-lineup")
    assert surface.image.getpixel(ICON_PIXEL) == RED


def test_upload_icon_resolves_under_upload_dir(settings, icon_png, tmp_path) -> None:
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    (uploads / "crest.png").write_bytes(icon_png)

    icon = load_club_icon(ClubIconData(type="upload", file_path="crest.png"))
    assert icon is not None
    assert icon.size == (64, 64)


def test_oversized_icon_does_not_fail_render(eight, settings, icon_png, tmp_path, monkeypatch) -> None:
    uploads = tmp_path / "uploads"
    uploads.mkdir()
    (uploads / "huge.png").write_bytes(icon_png)
    # 64x64 is more than twice this limit, so Pillow refuses to open it
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    icon = ClubIconData(type="upload", file_path="huge.png")
    assert load_club_icon(icon) is None
    png = TemplateGeneratorService().generate_template(eight, club_icon=icon, template_id="classic-lineup")
    assert png.startswith(b"\x89PNG")


def test_upload_icon_never_leaves_upload_dir(settings, icon_png, tmp_path) -> None:
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    (elsewhere / "crest.png").write_bytes(icon_png)

    icon = ClubIconData(type="upload", file_path=str(elsewhere / "crest.png"))
    assert icon_path(icon) == tmp_path / "uploads" / "crest.png"
    assert load_club_icon(icon) is None

    traversal = ClubIconData(type="upload", file_path="../elsewhere/crest.png")
    assert load_club_icon(traversal) is None


def test_base64_icon_and_logo_position(eight, icon_data_url) -> None:
    icon = ClubIconData(type="upload", base64=icon_data_url)
    shown = TemplateGeneratorService().render(eight, TemplateConfig(logo="bottom-right"), club_icon=icon)
    hidden = TemplateGeneratorService().render(eight, TemplateConfig(logo="none"), club_icon=icon)
    assert shown.image.getpixel(ICON_PIXEL) == RED
    assert hidden.image.getpixel(ICON_PIXEL) != RED


def test_bad_base64_icon_is_skipped(eight) -> None:
    icon = ClubIconData(type="upload", base64="@@@not base64@@@")
    assert load_club_icon(icon) is None
    surface = TemplateGeneratorService().render(eight, club_icon=icon)
    assert surface.club_icon is None


def test_decode_base64_accepts_bare_and_data_url(icon_png, icon_data_url) -> None:
    assert decode_base64(icon_data_url) == icon_png
    assert decode_base64(icon_data_url.split(",", 1)[1]) == icon_png


def test_end_to_end_eight(eight) -> None:
    config = TemplateConfig(colors=ColorScheme(primary="#2563eb", secondary="#1e40af"))
    service = TemplateGeneratorService()
    surface = service.render(eight, config, template_id="classic-lineup")

    texts = surface.texts()
    rows = [text for text in texts if ": " in text]
    assert len(rows) == 10
    assert rows[0] == "Bow: Alice Brown"
    assert rows[7] == "Stroke: Hannah King"
    assert rows[8] == "Cox: Sarah"
    assert rows[9] == "Coach: Coach Roberts"

    png = service.generate_template(eight, config, template_id="classic-lineup")
    with Image.open(io.BytesIO(png)) as image:
        assert image.size == (1080, 1080)
