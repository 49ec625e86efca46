from typing import Iterable, Tuple

from ._errors import InvalidRingError
from .position import Position

__all__ = (
    "LineStringCoordinates",
    "LinearRing",
    "PolygonCoordinates",
    "line_string_coordinates",
    "linear_ring",
    "polygon_coordinates",
    "check_positions",
    "check_line_string",
    "check_linear_ring",
    "check_polygon",
)


def __dir__():
    return __all__


# The coordinates of a LineString, or one member of a MultiLineString
LineStringCoordinates = Tuple[Position, ...]

# One boundary of a Polygon. The first and last positions are equal.
LinearRing = Tuple[Position, ...]

# The coordinates of a Polygon, or one member of a MultiPolygon. The first
# ring is the outer boundary, any others are holes.
PolygonCoordinates = Tuple[LinearRing, ...]


def check_positions(positions: Iterable[Position]) -> Tuple[Position, ...]:
    """Copy ``positions`` into a tuple, checking every element is a
    `Position`."""
    out = tuple(positions)
    for p in out:
        if not isinstance(p, Position):
            raise TypeError(f"Expected `Position`, got `{type(p).__name__}`")
    return out


def check_line_string(positions: Iterable[Position]) -> LineStringCoordinates:
    """Validate a sequence of positions as `LineStringCoordinates`.

    Raises
    ------
    ValueError
        If fewer than two positions are given.
    """
    out = check_positions(positions)
    if len(out) < 2:
        raise ValueError(
            f"A LineString requires at least 2 positions, got {len(out)}"
        )
    return out


def check_linear_ring(positions: Iterable[Position]) -> LinearRing:
    """Validate a sequence of positions as a `LinearRing`.

    Raises
    ------
    InvalidRingError
        If fewer than four positions are given, or the ring isn't closed.
    """
    out = check_positions(positions)
    if len(out) < 4:
        raise InvalidRingError(
            f"A linear ring requires at least 4 positions, got {len(out)}"
        )
    if out[-1] != out[0]:
        raise InvalidRingError(
            f"Start position {out[0]!r} doesn't match end position {out[-1]!r}"
        )
    return out


def check_polygon(rings: Iterable[Iterable[Position]]) -> PolygonCoordinates:
    """Validate a sequence of rings as `PolygonCoordinates`.

    Raises
    ------
    ValueError
        If no rings are given.
    InvalidRingError
        If any ring is invalid.
    """
    out = tuple(check_linear_ring(r) for r in rings)
    if not out:
        raise ValueError("A Polygon requires at least 1 linear ring, got 0")
    return out


def line_string_coordinates(
    c0: Position, c1: Position, *cn: Position
) -> LineStringCoordinates:
    """Create `LineStringCoordinates` from two or more positions, in order."""
    return check_positions((c0, c1, *cn))


def linear_ring(
    c0: Position, c1: Position, c2: Position, c3: Position, *cn: Position
) -> LinearRing:
    """Create a `LinearRing` from four or more positions.

    The last position must equal the first.

    Raises
    ------
    InvalidRingError
        If the ring isn't closed.

    Examples
    --------
    >>> ring = linear_ring(
    ...     Position(0, 0), Position(4, 0), Position(4, 4), Position(0, 0)
    ... )
    >>> len(ring)
    4
    """
    return check_linear_ring((c0, c1, c2, c3, *cn))


def polygon_coordinates(
    outer_boundary: LinearRing, *holes: LinearRing
) -> PolygonCoordinates:
    """Create `PolygonCoordinates` from an outer boundary and zero or more
    holes. Holes aren't checked to lie inside the boundary."""
    return check_polygon((outer_boundary, *holes))
