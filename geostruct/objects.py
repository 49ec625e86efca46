from typing import Any, Dict, Iterator, Mapping, Optional, Tuple, Union

import msgspec
from msgspec.structs import force_setattr

from .coordinates import (
    LineStringCoordinates,
    LinearRing,
    PolygonCoordinates,
    check_line_string,
    check_polygon,
    check_positions,
)
from .position import Position

__all__ = (
    "GeoJSONObject",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Feature",
    "FeatureCollection",
    "GeometryType",
    "GeoJSON",
    "GEOMETRY_TYPES",
    "GEOJSON_TYPES",
    "point",
    "multi_point",
    "line_string",
    "multi_line_string",
    "polygon",
    "multi_polygon",
    "geometry_collection",
    "feature",
    "feature_collection",
)


def __dir__():
    return __all__


# The `type` member is written ahead of the other fields when encoding. Each
# concrete type pins its tag, so subclasses can't change it.
class GeoJSONObject(msgspec.Struct, frozen=True, tag=True):
    """The base class of all GeoJSON objects."""

    @property
    def type(self) -> str:
        """The GeoJSON ``type`` member of this object."""
        for cls in type(self).__mro__:
            if cls in GEOJSON_TYPES:
                return cls.__struct_config__.tag
        return self.__struct_config__.tag


class Geometry(GeoJSONObject):
    """The base class of the seven GeoJSON geometry types."""

    def to_feature(self, properties: Optional[Mapping[str, Any]] = None) -> "Feature":
        """Wrap this geometry in a `Feature`.

        Parameters
        ----------
        properties : mapping, optional
            The feature properties. ``None`` is treated as an empty mapping.

        Returns
        -------
        feature : Feature
        """
        return Feature(self, properties)


class Point(Geometry, tag="Point"):
    """A GeoJSON Point (RFC 7946 §3.1.2)."""

    coordinates: Position

    def __post_init__(self):
        if not isinstance(self.coordinates, Position):
            raise TypeError(
                f"Expected `Position`, got `{type(self.coordinates).__name__}`"
            )


class MultiPoint(Geometry, tag="MultiPoint"):
    """A GeoJSON MultiPoint (RFC 7946 §3.1.3)."""

    coordinates: Tuple[Position, ...]

    def __post_init__(self):
        force_setattr(self, "coordinates", check_positions(self.coordinates))


class LineString(Geometry, tag="LineString"):
    """A GeoJSON LineString (RFC 7946 §3.1.4)."""

    coordinates: LineStringCoordinates

    def __post_init__(self):
        force_setattr(self, "coordinates", check_line_string(self.coordinates))


class MultiLineString(Geometry, tag="MultiLineString"):
    """A GeoJSON MultiLineString (RFC 7946 §3.1.5)."""

    coordinates: Tuple[LineStringCoordinates, ...]

    def __post_init__(self):
        force_setattr(
            self,
            "coordinates",
            tuple(check_line_string(c) for c in self.coordinates),
        )


class Polygon(Geometry, tag="Polygon"):
    """A GeoJSON Polygon (RFC 7946 §3.1.6).

    The first ring is the outer boundary, any following rings are holes.
    """

    coordinates: PolygonCoordinates

    def __post_init__(self):
        force_setattr(self, "coordinates", check_polygon(self.coordinates))


class MultiPolygon(Geometry, tag="MultiPolygon"):
    """A GeoJSON MultiPolygon (RFC 7946 §3.1.7)."""

    coordinates: Tuple[PolygonCoordinates, ...]

    def __post_init__(self):
        force_setattr(
            self,
            "coordinates",
            tuple(check_polygon(c) for c in self.coordinates),
        )


class GeometryCollection(Geometry, tag="GeometryCollection"):
    """A GeoJSON GeometryCollection (RFC 7946 §3.1.8).

    Unlike the other geometries, the children are stored (and encoded) under
    ``geometries`` rather than ``coordinates``.
    """

    geometries: Tuple["GeometryType", ...] = ()

    def __post_init__(self):
        geometries = tuple(self.geometries)
        for g in geometries:
            if type(g) not in GEOMETRY_TYPES:
                raise TypeError(f"Expected a geometry, got `{type(g).__name__}`")
        force_setattr(self, "geometries", geometries)

    def __len__(self):
        return len(self.geometries)

    def __iter__(self) -> Iterator["GeometryType"]:
        return iter(self.geometries)


GeometryType = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]

GEOMETRY_TYPES = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
)


class Feature(GeoJSONObject, tag="Feature"):
    """A GeoJSON Feature (RFC 7946 §3.2).

    Parameters
    ----------
    geometry : Geometry
        The feature geometry. It is held by reference, not copied.
    properties : dict, optional
        The feature properties, mapping strings to any value the encoder
        supports. ``None`` is normalized to an empty dict so ``properties``
        always encodes as a JSON object.
    """

    geometry: GeometryType
    properties: Dict[str, Any] = msgspec.field(default_factory=dict)

    def __post_init__(self):
        if type(self.geometry) not in GEOMETRY_TYPES:
            raise TypeError(
                f"Expected a geometry, got `{type(self.geometry).__name__}`"
            )
        if self.properties is None:
            force_setattr(self, "properties", {})
        elif not isinstance(self.properties, dict):
            force_setattr(self, "properties", dict(self.properties))


class FeatureCollection(GeoJSONObject, tag="FeatureCollection"):
    """A GeoJSON FeatureCollection (RFC 7946 §3.3)."""

    features: Tuple[Feature, ...] = ()

    def __post_init__(self):
        features = tuple(self.features)
        for f in features:
            if type(f) is not Feature:
                raise TypeError(f"Expected `Feature`, got `{type(f).__name__}`")
        force_setattr(self, "features", features)

    def with_features(self, *features: Feature) -> "FeatureCollection":
        """Return a new collection with ``features`` appended.

        This collection is left unchanged.
        """
        return FeatureCollection(self.features + features)

    def __len__(self):
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)


GeoJSON = Union[GeometryType, Feature, FeatureCollection]

GEOJSON_TYPES = GEOMETRY_TYPES + (Feature, FeatureCollection)


def point(p: Position) -> Point:
    """Create a `Point` at the given position."""
    return Point(p)


def multi_point(*positions: Position) -> MultiPoint:
    """Create a `MultiPoint` from zero or more positions."""
    return MultiPoint(positions)


def line_string(c0: Position, c1: Position, *cn: Position) -> LineString:
    """Create a `LineString` from two or more positions."""
    return LineString((c0, c1, *cn))


def multi_line_string(*line_strings: LineStringCoordinates) -> MultiLineString:
    """Create a `MultiLineString` from zero or more `LineStringCoordinates`."""
    return MultiLineString(line_strings)


def polygon(outer_boundary: LinearRing, *holes: LinearRing) -> Polygon:
    """Create a `Polygon` from an outer boundary and zero or more holes."""
    return Polygon((outer_boundary, *holes))


def multi_polygon(*polygons: PolygonCoordinates) -> MultiPolygon:
    """Create a `MultiPolygon` from zero or more `PolygonCoordinates`."""
    return MultiPolygon(polygons)


def geometry_collection(*geometries: GeometryType) -> GeometryCollection:
    """Create a `GeometryCollection` from zero or more geometries of any
    type, including other collections."""
    return GeometryCollection(geometries)


def feature(
    geometry: GeometryType, properties: Optional[Mapping[str, Any]] = None
) -> Feature:
    """Create a `Feature` from a geometry and its properties."""
    return Feature(geometry, properties)


def feature_collection(*features: Feature) -> FeatureCollection:
    """Create a `FeatureCollection` from zero or more features, in order."""
    return FeatureCollection(features)
