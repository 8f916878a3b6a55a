from wktgeom.core.errors import ParseErrorKind, WKTParseError
from wktgeom.core.models import (
    CircularString, Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
)
from wktgeom.enums.coordinate_type import CoordinateType
from wktgeom.enums.geometry_type import GeometryType
from wktgeom.parsers.wkt import WKTParser, parse

__version__ = '0.1.0'
