from wktgeom.schemas.responses.geojson import Geometry
from pydantic import BaseModel


class ParsedGeometry(BaseModel):
    geometry_type: str
    coordinate_type: str
    is_empty: bool
    point_count: int
    geometry: Geometry | None

