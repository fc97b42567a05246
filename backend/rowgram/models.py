"""
Crew and template configuration models shared by the rendering engine and the API.

Python attribute names are snake_case; the JSON payloads the frontend sends use
camelCase, so every model accepts both.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt
from pydantic.alias_generators import to_camel

from rowgram.config import get_settings

settings = get_settings()


BackgroundStyle = Literal["geometric", "diagonal", "radial-burst"]
NameDisplay = Literal["basic", "labeled"]
BoatStyle = Literal["centered", "offset", "showcase"]
TextLayout = Literal["header-left", "header-center", "minimal"]
LogoPosition = Literal["bottom-right", "top-right", "bottom-left", "none"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BoatType(CamelModel):
    seats: int
    name: str = ""
    value: str = ""
    id: Optional[int] = None

    @property
    def is_coxed(self) -> bool:
        return self.value.endswith("+")


class Crew(CamelModel):
    name: str
    club_name: str = ""
    race_name: str = ""
    boat_type: BoatType
    crew_names: list[str]
    cox_name: Optional[str] = None
    coach_name: Optional[str] = None
    id: Optional[str] = None


class ColorScheme(CamelModel):
    primary: str = Field(default_factory=lambda: settings.default_primary_color)
    secondary: str = Field(default_factory=lambda: settings.default_secondary_color)


class CanvasDimensions(CamelModel):
    width: PositiveInt = Field(default_factory=lambda: settings.default_width)
    height: PositiveInt = Field(default_factory=lambda: settings.default_height)


class TemplateConfig(CamelModel):
    dimensions: CanvasDimensions = Field(default_factory=CanvasDimensions)
    colors: ColorScheme = Field(default_factory=ColorScheme)
    template_id: Optional[str] = None

    # Only the configurable template reads these
    background: Optional[BackgroundStyle] = None
    name_display: Optional[NameDisplay] = None
    boat_style: Optional[BoatStyle] = None
    text_layout: Optional[TextLayout] = None
    logo: Optional[LogoPosition] = None


class ClubIconData(CamelModel):
    type: Literal["preset", "upload"]
    filename: Optional[str] = None
    file_path: Optional[str] = None
    base64: Optional[str] = None  # Preview uploads only, never persisted
