from wktgeom.core.errors import WKTParseError
from wktgeom.core.models import Geometry
from wktgeom.enums.geometry_type import GeometryType
from wktgeom.parsers.wkt import WKTParser
from wktgeom.schemas import requests, responses
from wktgeom.utils import count_points, is_finite, to_geojson
from fastapi import APIRouter, HTTPException, status
from loguru import logger
from typing import Any


api_router = APIRouter(prefix='')

parser = WKTParser()


def _reject(label: str, detail: dict[str, Any], index: int | None) -> HTTPException:
    logger.warning(f"Rejected {label}: {detail['message']}")
    if index is not None:
        detail['index'] = index
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


def _parse_or_raise(wkt: str, index: int | None = None) -> Geometry:
    label = 'WKT' if index is None else f'WKT #{index}'
    try:
        geometry = parser.parse(wkt)
    except WKTParseError as e:
        raise _reject(label, e.to_dict(), index) from e

    # nan, inf and overflowing literals parse but have no JSON representation
    if not is_finite(geometry):
        raise _reject(label, {
            'kind': 'NON_FINITE_COORDINATE',
            'token': None,
            'offset': None,
            'message': 'coordinates must be finite numbers',
        }, index)
    return geometry


def _get_geometry_properties(geometry: Geometry) -> dict[str, Any]:
    return {
        'geometry_type': geometry.geometry_type.geojson_name,
        'coordinate_type': geometry.coordinate_type.name,
        'is_empty': geometry.is_empty,
        'point_count': count_points(geometry),
    }


@api_router.get('/types')
def get_geometry_types() -> list[str]:
    return [geometry_type.name for geometry_type in GeometryType if geometry_type != GeometryType.UNDEFINED]


@api_router.post('/parse')
def parse_wkt(parse_request: requests.ParseWKT) -> responses.ParsedGeometry:
    geometry = _parse_or_raise(parse_request.wkt)
    return responses.ParsedGeometry(
        geometry=to_geojson(geometry),
        **_get_geometry_properties(geometry)
    )


@api_router.post('/parse_list')
def parse_wkt_list(parse_request: requests.ParseWKTList) -> responses.FeatureCollection:
    features = []
    for index, wkt in enumerate(parse_request.wkts):
        geometry = _parse_or_raise(wkt, index)
        properties = _get_geometry_properties(geometry)
        properties['index'] = index
        features.append(responses.Feature(
            type='Feature',
            geometry=to_geojson(geometry),
            properties=properties
        ))

    logger.info(f'Parsed {len(features)} geometries')
    return responses.FeatureCollection(
        type='FeatureCollection',
        features=features
    )
