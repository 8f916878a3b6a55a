from wktgeom.core.settings import Settings
from pydantic import BaseModel, Field


class ParseWKT(BaseModel):
    wkt: str = Field(..., max_length=Settings.MAX_WKT_LENGTH, description="Well-Known Text literal")
