from wktgeom.core.settings import Settings
from wktgeom.routers import geometry as geometry_router
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


app = FastAPI(title='wktgeom')

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"], # Allows all methods
    allow_headers=["*"], # Allows all headers
)

app.include_router(geometry_router.api_router, prefix='/geometries', tags=['geometry'])
