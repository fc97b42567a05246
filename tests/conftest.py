import base64
import io

import pytest
from PIL import Image

from rowgram.config import get_settings
from rowgram.models import BoatType, Crew

EIGHT_NAMES = [
    "Alice Brown",
    "Beth Jones",
    "Clara Smith",
    "Dana White",
    "Emma Green",
    "Fiona Black",
    "Grace Hall",
    "Hannah King",
]


@pytest.fixture
def eight() -> Crew:
    return Crew(
        name="First VIII",
        club_name="Thames RC",
        race_name="Head Race",
        boat_type=BoatType(seats=8, name="Eight", value="8+"),
        crew_names=list(EIGHT_NAMES),
        cox_name="Sarah",
        coach_name="Coach Roberts",
    )


@pytest.fixture
def single() -> Crew:
    return Crew(
        name="Novice Scull",
        club_name="Thames RC",
        race_name="Autumn Sculls",
        boat_type=BoatType(seats=1, name="Single", value="1x"),
        crew_names=["Ivy Lee"],
    )


@pytest.fixture
def settings(tmp_path, monkeypatch):
    current = get_settings()
    monkeypatch.setattr(current, "saved_images_dir", str(tmp_path / "saved"))
    monkeypatch.setattr(current, "club_icons_dir", str(tmp_path / "icons"))
    monkeypatch.setattr(current, "upload_dir", str(tmp_path / "uploads"))
    return current


@pytest.fixture
def icon_png() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGBA", (64, 64), (255, 0, 0, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def icon_data_url(icon_png) -> str:
    return "data:image/png;base64," + base64.b64encode(icon_png).decode("ascii")
