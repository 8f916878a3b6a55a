import numpy as np
import shapely
import shapely.errors
from wktgeom.core.models import (
    CircularString, Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
)
from wktgeom.schemas import responses


def _position(point: Point) -> tuple[float, ...]:
    # GeoJSON positions have no measure ordinate, M is dropped
    if point.coordinate_type.has_z:
        return (point.x, point.y, point.z)
    return (point.x, point.y)

def _positions(points: tuple[Point, ...]) -> list[tuple[float, ...]]:
    return [_position(point) for point in points]

def _rings(polygon: Polygon) -> list[list[tuple[float, ...]]]:
    return [_positions(ring.points) for ring in polygon.rings]


def to_geojson(geometry: Geometry) -> responses.Geometry | None:
    if geometry.is_empty:
        return None

    match geometry:
        case Point():
            return responses.Point(type='Point', coordinates=_position(geometry))
        case MultiPoint():
            return responses.MultiPoint(type='MultiPoint', coordinates=_positions(geometry.points))
        case LineString() | CircularString():
            # Arcs are approximated by their control points
            return responses.LineString(type='LineString', coordinates=_positions(geometry.points))
        case MultiLineString():
            return responses.MultiLineString(
                type='MultiLineString',
                coordinates=[_positions(line.points) for line in geometry.lines]
            )
        case Polygon():
            return responses.Polygon(type='Polygon', coordinates=_rings(geometry))
        case MultiPolygon():
            return responses.MultiPolygon(
                type='MultiPolygon',
                coordinates=[_rings(polygon) for polygon in geometry.polygons]
            )
    raise NotImplementedError()


def to_shapely(geometry: Geometry) -> shapely.Geometry:
    """shapely counterpart of the geometry, Z kept and M dropped.

    Raises ValueError for anything shapely cannot build: CircularStrings, and
    line strings or rings with too few points for their type.
    """
    try:
        return _to_shapely(geometry)
    except shapely.errors.GEOSException as e:
        raise ValueError(f'Cannot build a shapely {geometry.geometry_type.geojson_name}: {e}') from e

def _to_shapely(geometry: Geometry) -> shapely.Geometry:
    match geometry:
        case Point():
            return shapely.Point() if geometry.is_empty else shapely.Point(_position(geometry))
        case MultiPoint():
            return shapely.MultiPoint(_positions(geometry.points) or None)
        case LineString():
            return shapely.LineString(_positions(geometry.points) or None)
        case CircularString():
            raise ValueError('CircularString has no shapely counterpart')
        case MultiLineString():
            return shapely.MultiLineString([_positions(line.points) for line in geometry.lines] or None)
        case Polygon():
            return _shapely_polygon(geometry)
        case MultiPolygon():
            return shapely.MultiPolygon([_shapely_polygon(polygon) for polygon in geometry.polygons] or None)
    raise NotImplementedError()

def _shapely_polygon(polygon: Polygon) -> shapely.Polygon:
    if polygon.is_empty:
        return shapely.Polygon()
    shell, *holes = _rings(polygon)
    return shapely.Polygon(shell, holes)


def count_points(geometry: Geometry) -> int:
    return sum(1 for _ in geometry.iter_points())

def coordinates_array(geometry: Geometry) -> np.ndarray:
    """All coordinate tuples of the geometry, in source order, one row per point.

    Columns follow the coordinate type (x, y, then z and/or m). Empty
    geometries give a (0, 2) array.
    """
    width = max(geometry.coordinate_type.dimension, 2)
    coords = [point.coords for point in geometry.iter_points()]
    return np.array(coords, dtype=float).reshape(-1, width)

def is_finite(geometry: Geometry) -> bool:
    return bool(np.isfinite(coordinates_array(geometry)).all())
