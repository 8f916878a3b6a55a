import os


def _csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


class Settings:
    CORS_ORIGINS: list[str] = _csv(os.getenv(
        'WKTGEOM_CORS_ORIGINS',
        'http://localhost:5173,https://localhost:5173,http://localhost:3000,https://localhost:3000',
    ))

    # Whole-input parsing only, oversized bodies are refused up front
    MAX_WKT_LENGTH: int = int(os.getenv('WKTGEOM_MAX_WKT_LENGTH', '1000000'))
    MAX_BATCH_SIZE: int = int(os.getenv('WKTGEOM_MAX_BATCH_SIZE', '1000'))
