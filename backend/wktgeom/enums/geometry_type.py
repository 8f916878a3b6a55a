import enum


class GeometryType(enum.IntEnum):
    UNDEFINED = 0
    POINT = 1
    MULTIPOINT = 2
    LINESTRING = 3
    CIRCULARSTRING = 4
    MULTILINESTRING = 5
    POLYGON = 6
    MULTIPOLYGON = 7

    @property
    def geojson_name(self) -> str:
        return _GEOJSON_NAMES[self]


# CircularString has no GeoJSON counterpart, the name is only used as a label
_GEOJSON_NAMES = {
    GeometryType.UNDEFINED: 'Undefined',
    GeometryType.POINT: 'Point',
    GeometryType.MULTIPOINT: 'MultiPoint',
    GeometryType.LINESTRING: 'LineString',
    GeometryType.CIRCULARSTRING: 'CircularString',
    GeometryType.MULTILINESTRING: 'MultiLineString',
    GeometryType.POLYGON: 'Polygon',
    GeometryType.MULTIPOLYGON: 'MultiPolygon',
}
