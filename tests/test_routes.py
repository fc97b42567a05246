import pytest
from fastapi.testclient import TestClient

from rowgram.main import app
from rowgram.services import image_service

PNG_MAGIC = b"\x89PNG"


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def crew_body() -> dict:
    return {
        "name": "First VIII",
        "clubName": "Thames RC",
        "raceName": "Head Race",
        "boatType": {"seats": 8, "name": "Eight", "value": "8+"},
        "crewNames": ["A One", "B Two", "C Three", "D Four", "E Five", "F Six", "G Seven", "H Eight"],
        "coxName": "Sarah",
        "coachName": "Coach Roberts",
    }


def test_health(client) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "1.0.0"}


def test_list_templates(client) -> None:
    templates = client.get("/api/templates").json()
    assert len(templates) == 10
    first = templates[0]
    assert first["id"] == "classic-lineup"
    assert first["previewUrl"] == "/api/templates/classic-lineup/preview"


def test_preview_template(client) -> None:
    response = client.get("/api/templates/oxbridge-herald/preview")
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(PNG_MAGIC)


def test_preview_unknown_template(client) -> None:
    response = client.get("/api/templates/nope/preview")
    assert response.status_code == 404
    assert "nope" in response.json()["detail"]


def test_template_components_and_presets(client) -> None:
    components = client.get("/api/template-components").json()
    assert set(components) == {"backgrounds", "nameDisplays", "boatStyles", "textLayouts", "logoPositions"}

    presets = {preset["id"]: preset for preset in client.get("/api/presets").json()}
    assert presets["modern-grid"]["boatStyle"] == "showcase"


def test_generate_image_saves_file(client, settings, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-image",
        json={"crew": crew_body, "templateId": "henley-poster", "imageName": "Thames First VIII"},
    )
    assert response.status_code == 200
    assert response.content.startswith(PNG_MAGIC)
    assert response.headers["x-image-filename"] == "Thames_First_VIII.png"


def test_generate_image_uses_crew_name_by_default(client, settings, crew_body) -> None:
    response = client.post("/api/crews/generate-image", json={"crew": crew_body, "templateId": "race-day"})
    assert response.headers["x-image-filename"] == "First_VIII.png"


def test_generate_image_with_empty_roster(client, settings, crew_body) -> None:
    crew_body["crewNames"] = []
    response = client.post("/api/crews/generate-image", json={"crew": crew_body})
    assert response.status_code == 400


def test_generate_image_with_missing_roster(client, settings, crew_body) -> None:
    del crew_body["crewNames"]
    response = client.post("/api/crews/generate-image", json={"crew": crew_body})
    assert response.status_code == 422


def test_generate_image_returns_png_when_save_fails(client, settings, crew_body, monkeypatch) -> None:
    def broken(*args, **kwargs):
        raise OSError("read-only filesystem")

    monkeypatch.setattr(image_service, "get_next_file_name", broken)
    response = client.post("/api/crews/generate-image", json={"crew": crew_body, "templateId": "classic-lineup"})
    assert response.status_code == 200
    assert response.content.startswith(PNG_MAGIC)
    assert "x-image-filename" not in response.headers


def test_generate_custom_image(client, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-custom-image",
        json={
            "crew": crew_body,
            "templateConfig": {
                "dimensions": {"width": 600, "height": 750},
                "colors": {"primary": "#0f766e", "secondary": "#115e59"},
                "background": "diagonal",
                "nameDisplay": "labeled",
                "boatStyle": "offset",
                "textLayout": "header-left",
                "logo": "none",
            },
        },
    )
    assert response.status_code == 200
    assert response.content.startswith(PNG_MAGIC)


def test_generate_custom_image_unknown_template(client, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-custom-image",
        json={"crew": crew_body, "templateConfig": {"templateId": "nope"}},
    )
    assert response.status_code == 404


def test_generate_custom_image_bad_color(client, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-custom-image",
        json={"crew": crew_body, "templateConfig": {"colors": {"primary": "not-a-color", "secondary": "#000"}}},
    )
    assert response.status_code == 400


def test_generate_custom_image_rejects_unknown_option(client, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-custom-image",
        json={"crew": crew_body, "templateConfig": {"background": "plaid"}},
    )
    assert response.status_code == 422


def test_generate_custom_image_on_tiny_canvas(client, crew_body) -> None:
    response = client.post(
        "/api/crews/generate-custom-image",
        json={"crew": crew_body, "templateConfig": {"templateId": "oxbridge-herald", "dimensions": {"width": 80, "height": 80}}},
    )
    assert response.status_code == 200
    assert response.content.startswith(PNG_MAGIC)
