from wktgeom.schemas.requests.parse_wkt import ParseWKT
from wktgeom.schemas.requests.parse_wkt_list import ParseWKTList
