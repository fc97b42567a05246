"""Seat labels for a crew's rowing positions."""

from rowgram.models import Crew

# Positional tables, bow first
SEAT_LABELS = {
    "standard": {
        8: ["Bow", "2", "3", "4", "5", "6", "7", "Stroke"],
        4: ["Bow", "2", "3", "Stroke"],
    },
    "short": {
        8: ["BOW", "2", "3", "4", "5", "6", "7", "STK"],
        4: ["BOW", "2", "3", "STK"],
    },
    "formal": {
        8: ["Bow", "Two", "Three", "Four", "Five", "Six", "Seven", "Stroke"],
        4: ["Bow", "Two", "Three", "Stroke"],
    },
    "latin": {
        8: ["Prora", "Secundus", "Tertius", "Quartus", "Quintus", "Sextus", "Septimus", "Primus"],
        4: ["Prora", "Secundus", "Tertius", "Primus"],
    },
}

# Used for other boat sizes and for any index past the end of a table
FALLBACK_FORMATS = {
    "standard": "{n}",
    "short": "{n}",
    "formal": "Position {n}",
    "latin": "Remex {n}",
}


def seat_label(seats: int, index: int, style: str = "standard") -> str:
    table = SEAT_LABELS.get(style, SEAT_LABELS["standard"]).get(seats, [])
    if index < len(table):
        return table[index]
    return FALLBACK_FORMATS.get(style, "{n}").format(n=index + 1)


def seat_labels(crew: Crew, style: str = "standard") -> list[str]:
    """One label per name in ``crew.crew_names``, in seat order."""
    return [seat_label(crew.boat_type.seats, i, style) for i in range(len(crew.crew_names))]


def seat_lineup(crew: Crew, style: str = "standard") -> list[tuple[str, str]]:
    """``(label, name)`` pairs for every rowing seat."""
    return list(zip(seat_labels(crew, style), crew.crew_names))
