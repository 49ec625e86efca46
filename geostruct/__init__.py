from ._errors import EncodeError, GeoJSONError, InvalidRingError
from .position import Position
from .coordinates import (
    LineStringCoordinates,
    LinearRing,
    PolygonCoordinates,
    line_string_coordinates,
    linear_ring,
    polygon_coordinates,
)
from .objects import (
    GEOJSON_TYPES,
    GEOMETRY_TYPES,
    Feature,
    FeatureCollection,
    GeoJSON,
    GeoJSONObject,
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    feature,
    feature_collection,
    geometry_collection,
    line_string,
    multi_line_string,
    multi_point,
    multi_polygon,
    point,
    polygon,
)
from .text import Encoder, to_text
from ._version import __version__
