# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - bookings.py: Event booking endpoint
# - health.py: Health check endpoints
#
# Register and login live in app/auth/routes.py.
# Each router is mounted in main.py under the /api prefix.
# =============================================================================

from . import bookings
from . import health

__all__ = [
    "bookings",
    "health",
]
