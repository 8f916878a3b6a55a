from functools import partial, wraps
from typing import BinaryIO, Callable, Iterator, TextIO, TypeVar

from loguru import logger

from wktgeom.core.errors import ParseErrorKind, WKTParseError
from wktgeom.core.models import (
    CircularString, Geometry, LineString, MultiLineString, MultiPoint, MultiPolygon, Point, Polygon
)
from wktgeom.enums.coordinate_type import CoordinateType
from wktgeom.enums.geometry_type import GeometryType
from wktgeom.enums.token import Token
from wktgeom.parsers.tokenizer import Lexeme, Tokenizer


T = TypeVar('T')

_GEOMETRY_TYPES = {
    Token.POINT: GeometryType.POINT,
    Token.MULTIPOINT: GeometryType.MULTIPOINT,
    Token.LINESTRING: GeometryType.LINESTRING,
    Token.CIRCULARSTRING: GeometryType.CIRCULARSTRING,
    Token.MULTILINESTRING: GeometryType.MULTILINESTRING,
    Token.POLYGON: GeometryType.POLYGON,
    Token.MULTIPOLYGON: GeometryType.MULTIPOLYGON,
}

_GEOMETRY_CLASSES = {
    GeometryType.POINT: Point,
    GeometryType.MULTIPOINT: MultiPoint,
    GeometryType.LINESTRING: LineString,
    GeometryType.CIRCULARSTRING: CircularString,
    GeometryType.MULTILINESTRING: MultiLineString,
    GeometryType.POLYGON: Polygon,
    GeometryType.MULTIPOLYGON: MultiPolygon,
}

_DIMENSION_MARKERS = {
    Token.Z: CoordinateType.XYZ,
    Token.M: CoordinateType.XYM,
    Token.ZM: CoordinateType.XYZM,
}


class _Cursor:
    """Scan position over the lexemes of one input, with one lexeme of lookahead.

    `next` and `peek` return None once the input is exhausted.
    """

    def __init__(self, lexemes: Iterator[Lexeme]):
        self._lexemes = lexemes
        self._lookahead: Lexeme | None = None

    def next(self) -> Lexeme | None:
        if self._lookahead is not None:
            lexeme, self._lookahead = self._lookahead, None
            return lexeme
        return next(self._lexemes, None)

    def peek(self) -> Lexeme | None:
        if self._lookahead is None:
            self._lookahead = next(self._lexemes, None)
        return self._lookahead


def _routine(name: str):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except WKTParseError as exc:
                exc.context.append(name)
                raise
        return wrapper
    return decorator


def _unexpected(kind: ParseErrorKind, lexeme: Lexeme | None) -> WKTParseError:
    if lexeme is None:
        return WKTParseError(kind)
    return WKTParseError(kind, lexeme.text, lexeme.offset)


class WKTParser:
    """Recursive-descent parser for OGC Well-Known Text geometries.

    A parser holds no state between calls: every `parse` walks its own cursor,
    so one instance can serve any number of inputs.
    """

    def __init__(self):
        self._parsers: dict[GeometryType, Callable[[_Cursor, CoordinateType], Geometry]] = {
            GeometryType.POINT: self._parse_point,
            GeometryType.MULTIPOINT: self._parse_multi_point,
            GeometryType.LINESTRING: self._parse_line_string,
            GeometryType.CIRCULARSTRING: self._parse_circular_string,
            GeometryType.MULTILINESTRING: self._parse_multi_line_string,
            GeometryType.POLYGON: self._parse_polygon,
            GeometryType.MULTIPOLYGON: self._parse_multi_polygon,
        }

    def parse(self, source: str | bytes | TextIO | BinaryIO) -> Geometry:
        cursor = _Cursor(iter(Tokenizer(source)))

        geometry_type = self._detect_geometry_type(cursor)
        coordinate_type = self._detect_coordinate_type(cursor)
        if coordinate_type == CoordinateType.EMPTY:
            geometry = _GEOMETRY_CLASSES[geometry_type](coordinate_type=CoordinateType.EMPTY)
        else:
            geometry = self._parsers[geometry_type](cursor, coordinate_type)

        trailing = cursor.next()
        if trailing is not None:
            raise _unexpected(ParseErrorKind.UNEXPECTED_TOKEN, trailing)

        logger.debug(f'Parsed {geometry_type.name} {coordinate_type.name}')
        return geometry

    ## Detection

    @_routine('detect geometry type')
    def _detect_geometry_type(self, cursor: _Cursor) -> GeometryType:
        lexeme = cursor.next()
        geometry_type = _GEOMETRY_TYPES.get(lexeme.text) if lexeme is not None else None
        if geometry_type is None:
            raise _unexpected(ParseErrorKind.UNEXPECTED_GEOMETRY_TYPE, lexeme)
        return geometry_type

    @_routine('detect coordinate type')
    def _detect_coordinate_type(self, cursor: _Cursor) -> CoordinateType:
        lexeme = cursor.next()
        if lexeme is None:
            raise _unexpected(ParseErrorKind.UNEXPECTED_COORDINATE_TYPE, lexeme)

        if lexeme.text == Token.OPENING_PARENTHESIS:
            return CoordinateType.XY
        if lexeme.text == Token.EMPTY:
            return CoordinateType.EMPTY

        coordinate_type = _DIMENSION_MARKERS.get(lexeme.text)
        if coordinate_type is None:
            raise _unexpected(ParseErrorKind.UNEXPECTED_COORDINATE_TYPE, lexeme)
        self._expect(cursor, Token.OPENING_PARENTHESIS)
        return coordinate_type

    ## Tokens

    def _read(self, cursor: _Cursor) -> Lexeme:
        lexeme = cursor.next()
        if lexeme is None:
            raise WKTParseError(ParseErrorKind.UNEXPECTED_EOF)
        return lexeme

    def _expect(self, cursor: _Cursor, token: Token) -> None:
        lexeme = self._read(cursor)
        if lexeme.text != token:
            raise _unexpected(ParseErrorKind.UNEXPECTED_TOKEN, lexeme)

    def _read_elements(self, cursor: _Cursor, read_element: Callable[[], T]) -> tuple[T, ...]:
        # element, then "," to continue or ")" to stop
        elements = []
        while True:
            elements.append(read_element())
            lexeme = self._read(cursor)
            if lexeme.text == Token.CLOSING_PARENTHESIS:
                return tuple(elements)
            if lexeme.text != Token.COMMA:
                raise _unexpected(ParseErrorKind.UNEXPECTED_TOKEN, lexeme)

    def _read_nested(self, cursor: _Cursor, coordinate_type: CoordinateType, parse: Callable[[_Cursor, CoordinateType], T]) -> T:
        self._expect(cursor, Token.OPENING_PARENTHESIS)
        return parse(cursor, coordinate_type)

    ## Coordinates

    def _read_coordinates(self, cursor: _Cursor, coordinate_type: CoordinateType) -> Point:
        values = []
        while len(values) < coordinate_type.dimension:
            lexeme = self._read(cursor)
            negative = lexeme.text == Token.MINUS
            if negative:
                lexeme = self._read(cursor)
            try:
                value = float(lexeme.text)
            except ValueError as exc:
                raise _unexpected(ParseErrorKind.INVALID_NUMBER, lexeme) from exc
            values.append(-value if negative else value)

        x, y, *rest = values
        z = rest.pop(0) if coordinate_type.has_z else 0.0
        m = rest.pop(0) if coordinate_type.has_m else 0.0
        return Point(x, y, z, m, coordinate_type)

    ## Structures
    # Each routine starts right after the opening parenthesis of its element
    # and consumes everything up to and including the matching closing one.

    @_routine('point')
    def _parse_point(self, cursor: _Cursor, coordinate_type: CoordinateType) -> Point:
        point = self._read_coordinates(cursor, coordinate_type)
        self._expect(cursor, Token.CLOSING_PARENTHESIS)
        return point

    @_routine('multipoint')
    def _parse_multi_point(self, cursor: _Cursor, coordinate_type: CoordinateType) -> MultiPoint:
        def read_member() -> Point:
            # Members may be bare tuples or wrapped: MULTIPOINT ((10 40), (40 30))
            lexeme = cursor.peek()
            if lexeme is not None and lexeme.text == Token.OPENING_PARENTHESIS:
                cursor.next()
                return self._parse_point(cursor, coordinate_type)
            return self._read_coordinates(cursor, coordinate_type)

        return MultiPoint(self._read_elements(cursor, read_member), coordinate_type)

    @_routine('linestring')
    def _parse_line_string(self, cursor: _Cursor, coordinate_type: CoordinateType) -> LineString:
        points = self._read_elements(cursor, partial(self._read_coordinates, cursor, coordinate_type))
        return LineString(points, coordinate_type)

    @_routine('circularstring')
    def _parse_circular_string(self, cursor: _Cursor, coordinate_type: CoordinateType) -> CircularString:
        points = self._read_elements(cursor, partial(self._read_coordinates, cursor, coordinate_type))
        return CircularString(points, coordinate_type)

    @_routine('multilinestring')
    def _parse_multi_line_string(self, cursor: _Cursor, coordinate_type: CoordinateType) -> MultiLineString:
        lines = self._read_elements(cursor, partial(self._read_nested, cursor, coordinate_type, self._parse_line_string))
        return MultiLineString(lines, coordinate_type)

    @_routine('polygon')
    def _parse_polygon(self, cursor: _Cursor, coordinate_type: CoordinateType) -> Polygon:
        rings = self._read_elements(cursor, partial(self._read_nested, cursor, coordinate_type, self._parse_line_string))
        return Polygon(rings, coordinate_type)

    @_routine('multipolygon')
    def _parse_multi_polygon(self, cursor: _Cursor, coordinate_type: CoordinateType) -> MultiPolygon:
        polygons = self._read_elements(cursor, partial(self._read_nested, cursor, coordinate_type, self._parse_polygon))
        return MultiPolygon(polygons, coordinate_type)


def parse(source: str | bytes | TextIO | BinaryIO) -> Geometry:
    return WKTParser().parse(source)
