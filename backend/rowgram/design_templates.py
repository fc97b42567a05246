"""
Modular design system for the configurable lineup template.

Five independent customization options:
1. BACKGROUND - geometric, diagonal, radial-burst
2. NAME DISPLAY - basic, labeled
3. BOAT STYLE - centered, offset, showcase
4. TEXT LAYOUT - header-left, header-center, minimal
5. LOGO POSITION - bottom-right, top-right, bottom-left, none

Presets bundle one choice of each under a single name.
"""


# ============================================
# BACKGROUNDS
# ============================================
BACKGROUNDS = {
    "geometric": {
        "id": "geometric",
        "name": "Geometric",
        "description": "Vertical gradient with a faint hexagon lattice",
    },
    "diagonal": {
        "id": "diagonal",
        "name": "Diagonal Split",
        "description": "Two-tone field cut by a bold diagonal",
    },
    "radial-burst": {
        "id": "radial-burst",
        "name": "Radial Burst",
        "description": "Radial glow with sunburst rays",
    },
}


# ============================================
# NAME DISPLAYS
# ============================================
NAME_DISPLAYS = {
    "basic": {
        "id": "basic",
        "name": "Basic",
        "description": "Names only, each on a dark pill",
    },
    "labeled": {
        "id": "labeled",
        "name": "Labeled",
        "description": "Seat label before every name",
    },
}


# ============================================
# BOAT STYLES
# ============================================
BOAT_STYLES = {
    "centered": {
        "id": "centered",
        "name": "Centered",
        "description": "Boat down the middle, names either side",
    },
    "offset": {
        "id": "offset",
        "name": "Offset",
        "description": "Boat on the left, names in one column",
    },
    "showcase": {
        "id": "showcase",
        "name": "Showcase",
        "description": "Boat across the top, names in a card grid",
    },
}


# ============================================
# TEXT LAYOUTS
# ============================================
TEXT_LAYOUTS = {
    "header-left": {
        "id": "header-left",
        "name": "Header Left",
        "description": "Large left-aligned header block",
    },
    "header-center": {
        "id": "header-center",
        "name": "Header Center",
        "description": "Large centered header block",
    },
    "minimal": {
        "id": "minimal",
        "name": "Minimal",
        "description": "Compact two-line header",
    },
}


# ============================================
# LOGO POSITIONS
# ============================================
LOGO_POSITIONS = {
    "bottom-right": {"id": "bottom-right", "name": "Bottom Right"},
    "top-right": {"id": "top-right", "name": "Top Right"},
    "bottom-left": {"id": "bottom-left", "name": "Bottom Left"},
    "none": {"id": "none", "name": "No Logo"},
}


# ============================================
# PRESETS
# ============================================
DEFAULT_PRESET = "default"

PRESETS = {
    "classic-lineup": {
        "id": "classic-lineup",
        "name": "Classic Lineup",
        "background": "geometric",
        "name_display": "labeled",
        "boat_style": "centered",
        "text_layout": "header-center",
        "logo": "bottom-right",
    },
    "modern-grid": {
        "id": "modern-grid",
        "name": "Modern Grid",
        "background": "diagonal",
        "name_display": "basic",
        "boat_style": "showcase",
        "text_layout": "header-left",
        "logo": "top-right",
    },
    "race-day": {
        "id": "race-day",
        "name": "Race Day",
        "background": "radial-burst",
        "name_display": "labeled",
        "boat_style": "centered",
        "text_layout": "header-center",
        "logo": "bottom-right",
    },
    "minimal": {
        "id": "minimal",
        "name": "Minimal",
        "background": "geometric",
        "name_display": "basic",
        "boat_style": "centered",
        "text_layout": "minimal",
        "logo": "none",
    },
    "championship": {
        "id": "championship",
        "name": "Championship",
        "background": "radial-burst",
        "name_display": "labeled",
        "boat_style": "showcase",
        "text_layout": "header-center",
        "logo": "bottom-right",
    },
    DEFAULT_PRESET: {
        "id": DEFAULT_PRESET,
        "name": "Default",
        "background": "geometric",
        "name_display": "basic",
        "boat_style": "centered",
        "text_layout": "header-center",
        "logo": "bottom-right",
    },
}

OPTION_FIELDS = ("background", "name_display", "boat_style", "text_layout", "logo")


def get_preset(preset_id: str) -> dict:
    """Get a preset by ID, falling back to the default preset."""
    return PRESETS.get(preset_id, PRESETS[DEFAULT_PRESET])


def preset_options(preset_id: str) -> dict:
    """Just the design options of a preset, keyed like ``TemplateConfig`` fields."""
    preset = get_preset(preset_id)
    return {field: preset[field] for field in OPTION_FIELDS}


def _listing(options: dict) -> list[dict]:
    return [{"id": o["id"], "name": o["name"], "description": o.get("description", "")} for o in options.values()]


def list_backgrounds():
    """List all backgrounds."""
    return _listing(BACKGROUNDS)


def list_name_displays():
    return _listing(NAME_DISPLAYS)


def list_boat_styles():
    return _listing(BOAT_STYLES)


def list_text_layouts():
    return _listing(TEXT_LAYOUTS)


def list_logo_positions():
    return _listing(LOGO_POSITIONS)


def list_template_components() -> dict:
    """Every option group of the configurable template, as served to the UI."""
    return {
        "backgrounds": list_backgrounds(),
        "nameDisplays": list_name_displays(),
        "boatStyles": list_boat_styles(),
        "textLayouts": list_text_layouts(),
        "logoPositions": list_logo_positions(),
    }


def list_presets():
    """List all presets with their option combinations."""
    return [
        {
            "id": p["id"],
            "name": p["name"],
            "background": p["background"],
            "nameDisplay": p["name_display"],
            "boatStyle": p["boat_style"],
            "textLayout": p["text_layout"],
            "logo": p["logo"],
        }
        for p in PRESETS.values()
    ]
