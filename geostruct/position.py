import math

__all__ = ("Position",)


def __dir__():
    return __all__


class Position:
    """A GeoJSON position, a longitude/latitude pair.

    Parameters
    ----------
    longitude : float
        The easting, in decimal degrees.
    latitude : float
        The northing, in decimal degrees.

    Notes
    -----
    Out of range values are accepted, only non-finite values are rejected.
    Positions are immutable and compare by value.
    """

    __slots__ = ("longitude", "latitude")

    def __init__(self, longitude: float, latitude: float) -> None:
        longitude = float(longitude)
        latitude = float(latitude)
        if not (math.isfinite(longitude) and math.isfinite(latitude)):
            raise ValueError(
                "Position coordinates must be finite, "
                f"got ({longitude!r}, {latitude!r})"
            )
        object.__setattr__(self, "longitude", longitude)
        object.__setattr__(self, "latitude", latitude)

    def __setattr__(self, name, value):
        raise AttributeError("Position objects are immutable")

    def __delattr__(self, name):
        raise AttributeError("Position objects are immutable")

    def __iter__(self):
        yield self.longitude
        yield self.latitude

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.longitude == other.longitude and self.latitude == other.latitude

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f"Position(longitude={self.longitude!r}, latitude={self.latitude!r})"

    def __reduce__(self):
        return (Position, (self.longitude, self.latitude))
