from wktgeom.schemas.responses.geojson import (
    Feature, FeatureCollection, Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
)
from wktgeom.schemas.responses.parsed_geometry import ParsedGeometry
