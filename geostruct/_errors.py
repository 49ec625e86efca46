__all__ = ("GeoJSONError", "InvalidRingError", "EncodeError")


class GeoJSONError(Exception):
    """The base class for all errors raised by geostruct."""


class InvalidRingError(GeoJSONError, ValueError):
    """A linear ring has fewer than four positions, or its first and last
    positions differ."""


class EncodeError(GeoJSONError):
    """A value could not be serialized as GeoJSON text."""
