"""
API routes for the RowGram crew image generator.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from rowgram.design_templates import list_presets, list_template_components
from rowgram.errors import EncodingFailure, InvalidInput, PersistenceFailure, UnknownTemplate
from rowgram.models import BoatType, CamelModel, ClubIconData, ColorScheme, Crew, TemplateConfig
from rowgram.services.image_service import generate_crew_image
from rowgram.services.template_generator import TemplateGeneratorService
from rowgram.templates import get_all_templates, get_template

logger = logging.getLogger(__name__)

router = APIRouter()
generator = TemplateGeneratorService()

PREVIEW_CREW = Crew(
    name="First VIII",
    club_name="Thames RC",
    race_name="Head of the River",
    boat_type=BoatType(seats=8, name="Eight", value="8+"),
    crew_names=["Alex Carter", "Ben Hughes", "Chris Patel", "Dan Moore",
                "Ed Walsh", "Finn Reid", "George Lane", "Harry Stone"],
    cox_name="Sarah Mills",
    coach_name="Coach Roberts",
)


# ============================================
# Request/Response Models
# ============================================

class GenerateImageRequest(CamelModel):
    crew: Crew
    template_id: Optional[str] = None
    image_name: Optional[str] = None
    colors: Optional[ColorScheme] = None
    club_icon: Optional[ClubIconData] = None


class GenerateCustomImageRequest(CamelModel):
    crew: Crew
    template_config: TemplateConfig = Field(default_factory=TemplateConfig)
    club_icon: Optional[ClubIconData] = None


class TemplateResponse(CamelModel):
    id: str
    name: str
    description: str
    category: str
    preview_url: str


class HealthResponse(BaseModel):
    status: str
    version: str


def png_response(image_bytes: bytes, headers: Optional[dict] = None) -> Response:
    return Response(content=image_bytes, media_type="image/png", headers=headers)


# ============================================
# Routes
# ============================================

@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version="1.0.0")


@router.get("/templates", response_model=list[TemplateResponse])
def list_templates():
    """List all fixed lineup templates."""
    return [TemplateResponse(**t) for t in get_all_templates()]


@router.get("/templates/{template_id}/preview")
def preview_template(template_id: str):
    """Render the sample crew with a template and its preview colors."""
    try:
        template = get_template(template_id)
    except UnknownTemplate as e:
        raise HTTPException(status_code=404, detail=str(e))

    config = TemplateConfig(colors=ColorScheme(**template["preview_colors"]))
    try:
        image_bytes = generator.generate_template(PREVIEW_CREW, config, template_id=template_id)
    except EncodingFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
    return png_response(image_bytes, headers={"Cache-Control": "public, max-age=3600"})


@router.get("/template-components")
def get_template_components():
    """Option groups for the configurable template."""
    return list_template_components()


@router.get("/presets")
def get_presets():
    """Named presets and the options each one selects."""
    return list_presets()


@router.post("/crews/generate-image")
def generate_image(request: GenerateImageRequest):
    """
    Generate a crew image and save it.

    - A registered template id renders that template
    - Any other id is treated as a preset name (unknown ones use the default preset)
    - The PNG is returned even if saving it fails
    """
    image_name = request.image_name or request.crew.name
    try:
        result = generate_crew_image(
            request.crew,
            image_name,
            request.template_id,
            colors=request.colors,
            club_icon=request.club_icon,
        )
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EncodingFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
    except PersistenceFailure as e:
        logger.error(f"Returning unsaved image for '{request.crew.name}': {e}")
        return png_response(e.image_bytes)

    return png_response(result.image_bytes, headers={"X-Image-Filename": result.output_path.name})


@router.post("/crews/generate-custom-image")
def generate_custom_image(request: GenerateCustomImageRequest):
    """Render with an explicit template config without saving anything."""
    try:
        image_bytes = generator.generate_template(
            request.crew,
            request.template_config,
            club_icon=request.club_icon,
        )
    except InvalidInput as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownTemplate as e:
        raise HTTPException(status_code=404, detail=str(e))
    except EncodingFailure as e:
        raise HTTPException(status_code=500, detail=str(e))
    return png_response(image_bytes)
