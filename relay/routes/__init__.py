# relay/routes/__init__.py
"""API route modules.

Contains endpoint definitions for:
- Health checks (/health, /version)
- Illinois lookup (/ill-api)
- Colorado lookup (/colorado-api, /colo-api)
- California lookup (/cali-api)
- Catch-all 404 (must be registered last)
"""

from relay.routes.california import router as california_router
from relay.routes.colorado import router as colorado_router
from relay.routes.fallback import router as fallback_router
from relay.routes.health import router as health_router
from relay.routes.illinois import router as illinois_router

__all__ = [
    "california_router",
    "colorado_router",
    "fallback_router",
    "health_router",
    "illinois_router",
]
