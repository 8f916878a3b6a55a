from typing import Annotated, Any, Literal
from pydantic import BaseModel, ConfigDict, Field, FiniteFloat

# GeoJSON has no NaN/Infinity, a non-finite ordinate fails validation
Position = tuple[FiniteFloat, FiniteFloat] | tuple[FiniteFloat, FiniteFloat, FiniteFloat]
Positions = Annotated[list[Position], Field(description='Positions in source order, [x, y] or [x, y, z], M dropped')]
Rings = Annotated[list[Positions], Field(description='Exterior ring first, then holes, closure and winding as parsed')]


class _GeoJSONGeometry(BaseModel):
    model_config = ConfigDict(frozen=True)


## Geometries

class Point(_GeoJSONGeometry):
    type: Literal['Point']
    coordinates: Position

class MultiPoint(_GeoJSONGeometry):
    type: Literal['MultiPoint']
    coordinates: Positions

class LineString(_GeoJSONGeometry):
    """Also carries CircularStrings, through their control points."""
    type: Literal['LineString']
    coordinates: Positions

class MultiLineString(_GeoJSONGeometry):
    type: Literal['MultiLineString']
    coordinates: list[Positions]

class Polygon(_GeoJSONGeometry):
    type: Literal['Polygon']
    coordinates: Rings

class MultiPolygon(_GeoJSONGeometry):
    type: Literal['MultiPolygon']
    coordinates: list[Rings]


Geometry = Annotated[
    Point | MultiPoint | LineString | MultiLineString | Polygon | MultiPolygon,
    Field(discriminator='type')
]


## Features

class Feature(BaseModel):
    type: Literal['Feature']
    geometry: Geometry | None = Field(None, description='null for EMPTY geometries')
    properties: dict[str, Any] = Field(default_factory=dict)

class FeatureCollection(BaseModel):
    type: Literal['FeatureCollection']
    features: list[Feature]
