from typing import Annotated

from wktgeom.core.settings import Settings
from pydantic import BaseModel, Field


class ParseWKTList(BaseModel):
    wkts: list[Annotated[str, Field(max_length=Settings.MAX_WKT_LENGTH)]] = Field(
        ..., min_length=1, max_length=Settings.MAX_BATCH_SIZE
    )
