from cardslug.api.health import router as health_router
from cardslug.api.slugs import router as slugs_router

__all__ = [
    "health_router",
    "slugs_router",
]
