from dataclasses import dataclass
from typing import ClassVar, Iterator

from wktgeom.enums.coordinate_type import CoordinateType
from wktgeom.enums.geometry_type import GeometryType


## Atomic coordinate tuple

@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    m: float = 0.0
    coordinate_type: CoordinateType = CoordinateType.XY

    geometry_type: ClassVar[GeometryType] = GeometryType.POINT

    @property
    def is_empty(self) -> bool:
        return self.coordinate_type == CoordinateType.EMPTY

    @property
    def coords(self) -> tuple[float, ...]:
        # Only the ordinates carried by the coordinate type, in WKT order
        if self.is_empty:
            return ()
        values = [self.x, self.y]
        if self.coordinate_type.has_z:
            values.append(self.z)
        if self.coordinate_type.has_m:
            values.append(self.m)
        return tuple(values)

    def iter_points(self) -> Iterator['Point']:
        if not self.is_empty:
            yield self

## Point sequences

@dataclass(frozen=True)
class _PointSequence:
    points: tuple[Point, ...] = ()
    coordinate_type: CoordinateType = CoordinateType.XY

    @property
    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    def iter_points(self) -> Iterator[Point]:
        yield from self.points


@dataclass(frozen=True)
class LineString(_PointSequence):
    geometry_type: ClassVar[GeometryType] = GeometryType.LINESTRING


@dataclass(frozen=True)
class CircularString(_PointSequence):
    # Same layout as LineString, arcs are not interpreted
    geometry_type: ClassVar[GeometryType] = GeometryType.CIRCULARSTRING


@dataclass(frozen=True)
class MultiPoint(_PointSequence):
    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOINT

## Nested structures

@dataclass(frozen=True)
class MultiLineString:
    lines: tuple[LineString, ...] = ()
    coordinate_type: CoordinateType = CoordinateType.XY

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTILINESTRING

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __len__(self) -> int:
        return len(self.lines)

    def iter_points(self) -> Iterator[Point]:
        for line in self.lines:
            yield from line.points


@dataclass(frozen=True)
class Polygon:
    """Ordered rings. The first one is the exterior boundary, the others are holes.

    Neither closure nor winding order is checked.
    """
    rings: tuple[LineString, ...] = ()
    coordinate_type: CoordinateType = CoordinateType.XY

    geometry_type: ClassVar[GeometryType] = GeometryType.POLYGON

    @property
    def is_empty(self) -> bool:
        return not self.rings

    @property
    def exterior(self) -> LineString | None:
        return self.rings[0] if self.rings else None

    @property
    def interiors(self) -> tuple[LineString, ...]:
        return self.rings[1:]

    def __len__(self) -> int:
        return len(self.rings)

    def iter_points(self) -> Iterator[Point]:
        for ring in self.rings:
            yield from ring.points


@dataclass(frozen=True)
class MultiPolygon:
    polygons: tuple[Polygon, ...] = ()
    coordinate_type: CoordinateType = CoordinateType.XY

    geometry_type: ClassVar[GeometryType] = GeometryType.MULTIPOLYGON

    @property
    def is_empty(self) -> bool:
        return not self.polygons

    def __len__(self) -> int:
        return len(self.polygons)

    def iter_points(self) -> Iterator[Point]:
        for polygon in self.polygons:
            yield from polygon.iter_points()


Geometry = Point | MultiPoint | LineString | CircularString | MultiLineString | Polygon | MultiPolygon
