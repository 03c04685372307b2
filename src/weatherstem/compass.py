"""Compass rose headings for wind vane readings."""

from __future__ import annotations

# Sixteen points clockwise from north: (abbreviation, plain name, ornate name).
# The ornate names are the Mediterranean wind rose used on portolan charts.
_ROSE: list[tuple[str, str, str]] = [
    ("N", "North", "Tramontana"),
    ("NNE", "North-northeast", "Greco-Tramontana"),
    ("NE", "Northeast", "Greco"),
    ("ENE", "East-northeast", "Greco-Levante"),
    ("E", "East", "Levante"),
    ("ESE", "East-southeast", "Levante-Scirocco"),
    ("SE", "Southeast", "Scirocco"),
    ("SSE", "South-southeast", "Ostro-Scirocco"),
    ("S", "South", "Ostro"),
    ("SSW", "South-southwest", "Ostro-Libeccio"),
    ("SW", "Southwest", "Libeccio"),
    ("WSW", "West-southwest", "Ponente-Libeccio"),
    ("W", "West", "Ponente"),
    ("WNW", "West-northwest", "Maestro-Ponente"),
    ("NW", "Northwest", "Maestro"),
    ("NNW", "North-northwest", "Maestro-Tramontana"),
]

# precision -> number of rose points
_POINTS = {1: 4, 2: 8, 3: 16}


def degree_to_heading(
    degrees: float,
    precision: int = 3,
    plain: bool = False,
) -> tuple[str, str]:
    """Convert a bearing in degrees to (abbreviation, name).

    Args:
        degrees: Bearing clockwise from true north. Any value is accepted and
                 wrapped into [0, 360).
        precision: 1, 2 or 3 for a 4, 8 or 16 point rose.
        plain: Use the plain English names instead of the ornate wind names.

    Returns:
        Tuple of the standard abbreviation (e.g. "NNE") and the full name.
    """
    if precision not in _POINTS:
        raise ValueError(f"precision must be one of {sorted(_POINTS)}, got {precision}")
    points = _POINTS[precision]
    sector = 360.0 / points
    index = int(((degrees % 360.0) + sector / 2) // sector) % points
    abbrev, plain_name, ornate_name = _ROSE[index * (16 // points)]
    return abbrev, plain_name if plain else ornate_name
