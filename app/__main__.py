# =============================================================================
# app/__main__.py - Run the API with uvicorn
# =============================================================================
# Usage:
#   python -m app
#
# Binds to API_HOST and PORT from settings (PORT falls back to 5001).
# =============================================================================

import uvicorn

from app.config import settings


def main() -> None:
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
