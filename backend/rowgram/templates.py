"""
Display metadata for the fixed crew lineup templates.
Each entry describes one registered template for listing and preview in the UI.
"""

from rowgram.errors import UnknownTemplate

TEMPLATES = {
    "classic-lineup": {
        "id": "classic-lineup",
        "name": "Classic Lineup",
        "description": "Traditional roster layout with clean presentation",
        "category": "classic",
        "preview_colors": {"primary": "#2563eb", "secondary": "#1e40af"},
    },
    "modern-card": {
        "id": "modern-card",
        "name": "Modern Card",
        "description": "Contemporary card-based design with member highlights",
        "category": "modern",
        "preview_colors": {"primary": "#7c3aed", "secondary": "#4c1d95"},
    },
    "race-day": {
        "id": "race-day",
        "name": "Race Day",
        "description": "Bold event-focused template with dynamic styling",
        "category": "event",
        "preview_colors": {"primary": "#dc2626", "secondary": "#991b1b"},
    },
    "minimal-clean": {
        "id": "minimal-clean",
        "name": "Minimal Clean",
        "description": "Simple, elegant layout with clean typography",
        "category": "minimal",
        "preview_colors": {"primary": "#0f766e", "secondary": "#115e59"},
    },
    "championship-gold": {
        "id": "championship-gold",
        "name": "Championship Gold",
        "description": "Luxurious golden design for major competitions",
        "category": "championship",
        "preview_colors": {"primary": "#d4a017", "secondary": "#7c5e10"},
    },
    "vintage-classic": {
        "id": "vintage-classic",
        "name": "Vintage Classic",
        "description": "Traditional parchment style with ornate decorations",
        "category": "vintage",
        "preview_colors": {"primary": "#8b4513", "secondary": "#5c3317"},
    },
    "elite-performance": {
        "id": "elite-performance",
        "name": "Elite Performance",
        "description": "High-tech performance styling for elite crews",
        "category": "elite",
        "preview_colors": {"primary": "#1e3a8a", "secondary": "#0f172a"},
    },
    "regatta-royal": {
        "id": "regatta-royal",
        "name": "Regatta Royal",
        "description": "Royal regatta styling with heraldic elements",
        "category": "royal",
        "preview_colors": {"primary": "#1d4ed8", "secondary": "#172554"},
    },
    "oxbridge-herald": {
        "id": "oxbridge-herald",
        "name": "Oxbridge Herald",
        "description": "Academic heraldic design with Latin styling",
        "category": "academic",
        "preview_colors": {"primary": "#002147", "secondary": "#a3c1ad"},
    },
    "henley-poster": {
        "id": "henley-poster",
        "name": "Henley Poster",
        "description": "Traditional Henley Royal Regatta poster style",
        "category": "traditional",
        "preview_colors": {"primary": "#4682b4", "secondary": "#1e3a5f"},
    },
}


def preview_url(template_id: str) -> str:
    return f"/api/templates/{template_id}/preview"


def get_template(template_id: str) -> dict:
    """Get a template's metadata by ID."""
    if template_id not in TEMPLATES:
        raise UnknownTemplate(template_id)
    return TEMPLATES[template_id]


def get_all_templates() -> list[dict]:
    """Get all available templates."""
    return [
        {
            "id": t["id"],
            "name": t["name"],
            "description": t["description"],
            "category": t["category"],
            "previewUrl": preview_url(t["id"]),
        }
        for t in TEMPLATES.values()
    ]
