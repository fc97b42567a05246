"""Resolve ``ClubIconData`` to an in-memory image."""

import base64
import binascii
import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image

from rowgram.config import get_settings
from rowgram.errors import IconLoadFailure
from rowgram.models import ClubIconData

logger = logging.getLogger(__name__)
settings = get_settings()


def icon_path(club_icon: ClubIconData) -> Path:
    """Where on disk a preset or uploaded icon should live."""
    if club_icon.type == "preset":
        if not club_icon.filename:
            raise IconLoadFailure("Preset club icon has no filename")
        # Icons are plain file names; never let them walk out of their directory
        return Path(settings.club_icons_dir) / Path(club_icon.filename).name

    location = club_icon.file_path or club_icon.filename
    if not location:
        raise IconLoadFailure("Uploaded club icon has no file path")
    return Path(settings.upload_dir) / Path(location).name


def decode_base64(data: str) -> bytes:
    """Decode a bare base64 string or a ``data:image/...;base64,`` URL."""
    if data.startswith("data:"):
        _, _, data = data.partition(",")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise IconLoadFailure("Club icon is not valid base64") from e


def open_icon(club_icon: ClubIconData) -> Image.Image:
    """Load and verify the icon, raising ``IconLoadFailure`` on any problem."""
    if club_icon.base64:
        raw = decode_base64(club_icon.base64)
        source = "inline upload"
    else:
        path = icon_path(club_icon)
        if not path.is_file():
            raise IconLoadFailure(f"Club icon not found: {path}")
        raw = path.read_bytes()
        source = str(path)

    try:
        with Image.open(io.BytesIO(raw)) as check:
            check.verify()
        # verify() leaves the image unusable, so decode again
        with Image.open(io.BytesIO(raw)) as img:
            return img.convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise IconLoadFailure(f"Club icon is not a readable image: {source}") from e


def load_club_icon(club_icon: Optional[ClubIconData]) -> Optional[Image.Image]:
    """Resolve the icon, or ``None`` when there is none or it cannot be loaded."""
    if club_icon is None:
        return None
    try:
        icon = open_icon(club_icon)
    except IconLoadFailure as e:
        logger.warning(f"Rendering without club icon: {e}")
        return None
    logger.debug(f"Loaded club icon {icon.width}x{icon.height}")
    return icon
